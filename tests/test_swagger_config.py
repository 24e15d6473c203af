"""
tests.test_swagger_config

Purpose:
    Binding of the Swagger options record.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from specdoc.config.swagger_config import SwaggerOptions


def test_swagger_options_bind_from_mapping() -> None:
    options = SwaggerOptions.model_validate(
        {
            "document_title": "Inventory API",
            "groups": [
                {"group": "Default", "url": "/openapi/Default.json"},
                {"group": "Admin", "title": "Admin API", "version": "2.0.0"},
            ],
        }
    )

    assert options.document_title == "Inventory API"
    assert [group.group for group in options.groups] == ["Default", "Admin"]
    assert options.groups[0].title is None
    assert options.groups[1].version == "2.0.0"


def test_swagger_options_have_no_defaults() -> None:
    with pytest.raises(ValidationError):
        SwaggerOptions.model_validate({"groups": []})
