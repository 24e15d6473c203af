from enum import Enum
from typing import Any

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict


class DocExpansion(str, Enum):
    """Swagger UI default expansion of tags and operations"""

    LIST = "list"
    FULL = "full"
    NONE = "none"


class SpecificationOpenApiInfo(BaseModel):
    """Descriptor of one documentation group"""

    group: str
    """Group name, also used in the document URL"""
    title: str | None = None
    """Document title (falls back to the settings document title)"""
    description: str | None = None
    """Document description"""
    version: str = "1.0.0"
    """Document version"""
    terms_of_service: str | None = None
    """Terms of service URL"""
    contact: dict[str, Any] | None = None
    """Contact information (name, url, email)"""
    license: dict[str, Any] | None = None
    """License information (name, url)"""


class DocumentSettings(BaseSettings):
    """Specification document configuration settings

    Every field may be left unset by the environment, `apply_defaults`
    returns a copy with the missing ones filled in.
    """

    model_config = SettingsConfigDict(
        case_sensitive=False, env_prefix="SPECIFICATION_DOCUMENT_", frozen=True
    )

    document_title: str | None = None
    """Title shown by the documentation UI"""
    default_group_name: str | None = None
    """Group for routes that do not declare one"""
    enable_authorized: bool | None = None
    """Enable bearer token authorization in documents and UI"""
    format_as_legacy_version: bool | None = None
    """Emit the legacy (3.0) OpenAPI version marker"""
    route_prefix: str | None = None
    """Path the documentation UI is served under (empty for root)"""
    doc_expansion_state: DocExpansion | None = None
    """Default expansion of the documentation UI"""
    comment_sources: list[str] | None = None
    """Modules whose docstrings are merged into the documents"""
    group_descriptors: list[SpecificationOpenApiInfo] | None = None
    """Documentation groups"""


# --------------------------------------------------------------------------- #

DEFAULT_DOCUMENT_TITLE = "Specification Api Document"
DEFAULT_GROUP_NAME = "Default"
DEFAULT_COMMENT_SOURCES = ("specdoc.routers", "specdoc.api", "specdoc.libs")


def apply_defaults(settings: DocumentSettings) -> DocumentSettings:
    """Return a copy of the settings with every unset field defaulted

    Fields that are already set are kept as they are, so applying the
    defaults twice gives the same result as applying them once. An empty
    `comment_sources` list counts as set.

    Args:
        settings (DocumentSettings): Settings as bound from the environment

    Returns:
        DocumentSettings: Fully populated settings
    """
    default_group_name = settings.default_group_name
    if default_group_name is None:
        default_group_name = DEFAULT_GROUP_NAME

    defaults = {
        "document_title": DEFAULT_DOCUMENT_TITLE,
        "default_group_name": default_group_name,
        "enable_authorized": False,
        "format_as_legacy_version": False,
        "route_prefix": "",
        "doc_expansion_state": DocExpansion.LIST,
        "comment_sources": list(DEFAULT_COMMENT_SOURCES),
        # * Must follow the finalized default group name
        "group_descriptors": [SpecificationOpenApiInfo(group=default_group_name)],
    }
    update = {
        name: value
        for name, value in defaults.items()
        if getattr(settings, name) is None
    }
    return settings.model_copy(update=update)
