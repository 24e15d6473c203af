from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Annotated, Any, Callable, TypeVar

from pydantic import AfterValidator

EnumT = TypeVar("EnumT", bound=type[Enum])

_TABLE_ATTRIBUTE = "__validation_messages__"

# --------------------------------------------------------------------------- #


@dataclass(frozen=True)
class ValidationMessage:
    """Error message reported when a value fails the check of an enum member"""

    error_message: str


def validation_messages(
    **messages: str | ValidationMessage,
) -> Callable[[EnumT], EnumT]:
    """Attach validation messages to the members of an enum

    The member to message table is built once, when the decorated class is
    defined. Decorating anything but an enum, or naming something that is
    not one of its members, raises a `TypeError` right away.

    Example:
    >>> @validation_messages(EMAIL="Must be a valid email address.")
    ... class Check(str, Enum):
    ...     EMAIL = "email"
    >>> get_validation_message(Check.EMAIL)
    'Must be a valid email address.'

    Args:
        **messages: Error message for each member, keyed by member name

    Returns:
        Callable: Class decorator
    """

    def decorator(enum_cls: EnumT) -> EnumT:
        if not (isinstance(enum_cls, type) and issubclass(enum_cls, Enum)):
            raise TypeError(
                f"Validation messages can only be attached to enum members, got {enum_cls!r}"
            )

        table: dict[Enum, ValidationMessage] = {}
        for name, message in messages.items():
            member = enum_cls.__members__.get(name)
            if member is None:
                raise TypeError(f"{enum_cls.__name__} has no member named {name!r}")
            if isinstance(message, str):
                message = ValidationMessage(message)
            table[member] = message

        setattr(enum_cls, _TABLE_ATTRIBUTE, MappingProxyType(table))
        return enum_cls

    return decorator


def get_validation_message(member: Enum) -> str | None:
    """Get the error message attached to an enum member, if any"""
    table = getattr(type(member), _TABLE_ATTRIBUTE, {})
    message = table.get(member)
    return message.error_message if message is not None else None


# --------------------------------------------------------------------------- #


@validation_messages(
    NUMERIC="Must be a number.",
    INTEGER="Must be an integer.",
    POSITIVE_INTEGER="Must be a positive integer.",
    ALPHABETIC="Must contain letters only.",
    ALPHANUMERIC="Must contain letters and digits only.",
    EMAIL="Must be a valid email address.",
    PHONE_NUMBER="Must be a valid phone number.",
    URL="Must be a valid http or https URL.",
    IPV4="Must be a valid IPv4 address.",
)
class ValidationPattern(str, Enum):
    """Built-in value checks"""

    NUMERIC = "numeric"
    INTEGER = "integer"
    POSITIVE_INTEGER = "positive_integer"
    ALPHABETIC = "alphabetic"
    ALPHANUMERIC = "alphanumeric"
    EMAIL = "email"
    PHONE_NUMBER = "phone_number"
    URL = "url"
    IPV4 = "ipv4"


_IPV4_OCTET = r"(25[0-5]|2[0-4]\d|1\d\d|[1-9]?\d)"

PATTERNS: MappingProxyType[ValidationPattern, re.Pattern[str]] = MappingProxyType(
    {
        ValidationPattern.NUMERIC: re.compile(r"[+-]?\d+(\.\d+)?"),
        ValidationPattern.INTEGER: re.compile(r"[+-]?\d+"),
        ValidationPattern.POSITIVE_INTEGER: re.compile(r"\+?[1-9]\d*"),
        ValidationPattern.ALPHABETIC: re.compile(r"[A-Za-z]+"),
        ValidationPattern.ALPHANUMERIC: re.compile(r"[A-Za-z0-9]+"),
        ValidationPattern.EMAIL: re.compile(r"[\w.+-]+@[\w-]+(\.[\w-]+)+"),
        ValidationPattern.PHONE_NUMBER: re.compile(r"\+?\d[\d ()-]{5,18}\d"),
        ValidationPattern.URL: re.compile(r"https?://[^\s/?#]+[^\s]*"),
        ValidationPattern.IPV4: re.compile(rf"({_IPV4_OCTET}\.){{3}}{_IPV4_OCTET}"),
    }
)
"""Regular expression of each built-in check"""


def is_valid(value: str, pattern: ValidationPattern) -> bool:
    """Check whether the whole value matches a built-in pattern"""
    return PATTERNS[pattern].fullmatch(value) is not None


def matches(pattern: ValidationPattern) -> Any:
    """Build a string type checked against a built-in pattern

    The error reported by pydantic carries the message attached to the
    pattern member.

    Example:
    >>> class Contact(BaseModel):
    ...     email: matches(ValidationPattern.EMAIL)

    Args:
        pattern (ValidationPattern): Check to apply

    Returns:
        Annotated string type usable in pydantic models and FastAPI params
    """
    message = get_validation_message(pattern) or f"Must match {pattern.value}."

    def _check(value: str) -> str:
        if not is_valid(value, pattern):
            raise ValueError(message)
        return value

    return Annotated[str, AfterValidator(_check)]
