"""
tests.test_specification_document_config

Purpose:
    Defaulting of the specification document settings.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from specdoc.config.specification_document_config import (
    DEFAULT_COMMENT_SOURCES,
    DocExpansion,
    DocumentSettings,
    SpecificationOpenApiInfo,
    apply_defaults,
)


def _fully_configured() -> DocumentSettings:
    return DocumentSettings(
        document_title="Inventory API",
        default_group_name="Public",
        enable_authorized=True,
        format_as_legacy_version=True,
        route_prefix="docs",
        doc_expansion_state=DocExpansion.FULL,
        comment_sources=["specdoc.routers"],
        group_descriptors=[
            SpecificationOpenApiInfo(group="Public", title="Public API"),
            SpecificationOpenApiInfo(group="Admin", version="2.0.0"),
        ],
    )


def test_unset_fields_get_defaults() -> None:
    settings = apply_defaults(DocumentSettings())

    assert settings.document_title == "Specification Api Document"
    assert settings.default_group_name == "Default"
    assert settings.enable_authorized is False
    assert settings.format_as_legacy_version is False
    assert settings.route_prefix == ""
    assert settings.doc_expansion_state is DocExpansion.LIST
    assert settings.comment_sources == list(DEFAULT_COMMENT_SOURCES)
    assert len(settings.comment_sources) == 3
    assert len(settings.group_descriptors) == 1
    assert settings.group_descriptors[0].group == "Default"


def test_default_group_descriptor_follows_configured_group_name() -> None:
    settings = apply_defaults(DocumentSettings(default_group_name="Public"))

    assert [info.group for info in settings.group_descriptors] == ["Public"]


def test_configured_fields_are_never_overwritten() -> None:
    configured = _fully_configured()

    assert apply_defaults(configured) == configured


def test_partially_configured_fields_are_kept() -> None:
    settings = apply_defaults(
        DocumentSettings(document_title="Inventory API", format_as_legacy_version=True)
    )

    assert settings.document_title == "Inventory API"
    assert settings.format_as_legacy_version is True
    assert settings.default_group_name == "Default"


def test_applying_twice_equals_applying_once() -> None:
    once = apply_defaults(DocumentSettings(route_prefix="swagger"))

    assert apply_defaults(once) == once


def test_input_is_left_untouched() -> None:
    settings = DocumentSettings()

    apply_defaults(settings)

    assert settings.document_title is None
    assert settings.group_descriptors is None


def test_empty_comment_sources_count_as_configured() -> None:
    settings = apply_defaults(DocumentSettings(comment_sources=[]))

    assert settings.comment_sources == []


def test_settings_are_frozen() -> None:
    settings = apply_defaults(DocumentSettings())

    with pytest.raises(ValidationError):
        settings.document_title = "Changed"


def test_settings_bind_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("SPECIFICATION_DOCUMENT_DOCUMENT_TITLE", "Env API")
    monkeypatch.setenv("SPECIFICATION_DOCUMENT_DOC_EXPANSION_STATE", "none")
    monkeypatch.setenv("SPECIFICATION_DOCUMENT_ENABLE_AUTHORIZED", "true")
    monkeypatch.setenv(
        "SPECIFICATION_DOCUMENT_GROUP_DESCRIPTORS",
        '[{"group": "Admin", "title": "Admin API"}]',
    )

    settings = apply_defaults(DocumentSettings())

    assert settings.document_title == "Env API"
    assert settings.doc_expansion_state is DocExpansion.NONE
    assert settings.enable_authorized is True
    assert settings.default_group_name == "Default"
    assert [info.group for info in settings.group_descriptors] == ["Admin"]
    assert settings.group_descriptors[0].title == "Admin API"
