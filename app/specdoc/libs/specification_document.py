from __future__ import annotations

import importlib
import inspect
import json
from html import escape
from functools import cached_property
from typing import Any
from urllib.parse import quote

from fastapi import FastAPI
from fastapi.encoders import jsonable_encoder
from fastapi.openapi.utils import get_openapi
from fastapi.responses import HTMLResponse

from ..config.specification_document_config import (
    DocumentSettings,
    SpecificationOpenApiInfo,
    apply_defaults,
)
from ..config.swagger_config import SwaggerGroupOptions, SwaggerOptions
from .logger import Logger

log = Logger.get_logger(__name__)

GROUPS_EXTENSION = "x-groups"
"""Operation extension listing the documentation groups of a route"""
OPENAPI_VERSION = "3.1.0"
LEGACY_OPENAPI_VERSION = "3.0.3"
BEARER_SCHEME = "Bearer"
HTTP_METHODS = {"get", "put", "post", "delete", "options", "head", "patch", "trace"}

SWAGGER_UI_CDN = "https://cdn.jsdelivr.net/npm/swagger-ui-dist@5"

# --------------------------------------------------------------------------- #


def api_groups(*groups: str) -> dict[str, list[str]]:
    """Build the `openapi_extra` placing a route in documentation groups

    Routes without groups belong to the default group.

    Example:
    >>> @router.get("/users", openapi_extra=api_groups("Admin"))
    ... def list_users(): ...
    """
    return {GROUPS_EXTENSION: list(groups)}


def operation_groups(operation: dict[str, Any], default_group: str) -> list[str]:
    """Get the documentation groups of a generated OpenAPI operation"""
    return list(operation.get(GROUPS_EXTENSION) or [default_group])


# --------------------------------------------------------------------------- #


class SpecificationDocument:
    """OpenAPI documents and Swagger UI page of an application

    Reads the specification document settings and never modifies them.
    Schemas are generated on first use, one per group, and cached, so
    every route must be registered before the first document is served.
    """

    def __init__(self, app: FastAPI, settings: DocumentSettings):
        self.app = app
        self.settings = apply_defaults(settings)
        self._schemas: dict[str, dict[str, Any]] = {}

    @property
    def default_group(self) -> str:
        return self.settings.default_group_name

    @property
    def docs_url(self) -> str:
        """URL path of the Swagger UI page"""
        return "/" + self.settings.route_prefix.strip("/")

    def openapi_url(self, group: str) -> str:
        """URL path of the OpenAPI document of a group"""
        return f"/openapi/{quote(group, safe='/')}.json"

    def _generate(self, info: SpecificationOpenApiInfo) -> dict[str, Any]:
        """Generate the schema of every route, described by one group"""
        return get_openapi(
            title=info.title or self.settings.document_title,
            version=info.version,
            openapi_version=(
                LEGACY_OPENAPI_VERSION
                if self.settings.format_as_legacy_version
                else OPENAPI_VERSION
            ),
            description=self._description(info),
            routes=self.app.routes,
            terms_of_service=info.terms_of_service,
            contact=info.contact,
            license_info=info.license,
        )

    @cached_property
    def _operations(self) -> list[tuple[str, str, dict[str, Any]]]:
        """(path, method, operation) of every documented route"""
        paths = self._generate(SpecificationOpenApiInfo(group=self.default_group)).get(
            "paths", {}
        )
        return [
            (path, method, operation)
            for path, path_item in paths.items()
            for method, operation in path_item.items()
            if method in HTTP_METHODS
        ]

    def group_infos(self) -> dict[str, SpecificationOpenApiInfo]:
        """Get the descriptor of every known group, in display order

        Described groups come first, then the default group and any group
        only declared by routes.
        """
        infos = {info.group: info for info in self.settings.group_descriptors}
        infos.setdefault(self.default_group, SpecificationOpenApiInfo(group=self.default_group))
        for _, _, operation in self._operations:
            for group in operation_groups(operation, self.default_group):
                infos.setdefault(group, SpecificationOpenApiInfo(group=group))
        return infos

    @cached_property
    def comments(self) -> list[str]:
        """Docstrings of the configured comment source modules"""
        comments = []
        for source in self.settings.comment_sources:
            try:
                module = importlib.import_module(source)
            except ImportError as e:
                log.warning(f"Skipping comment source '{source}': {e}")
                continue
            doc = inspect.getdoc(module)
            if doc:
                comments.append(doc)
        return comments

    def _description(self, info: SpecificationOpenApiInfo) -> str | None:
        parts = [info.description] if info.description else []
        parts.extend(self.comments)
        return "\n\n".join(parts) or None

    def openapi(self, group: str) -> dict[str, Any]:
        """Get the OpenAPI schema of a group

        Args:
            group (str): Group name

        Raises:
            KeyError: If the group is unknown

        Returns:
            dict: OpenAPI schema
        """
        if group in self._schemas:
            return self._schemas[group]

        info = self.group_infos()[group]
        log.debug(f"Generating OpenAPI schema for group '{group}'")

        schema = self._generate(info)
        paths: dict[str, dict[str, Any]] = {}
        for path, path_item in schema.get("paths", {}).items():
            kept = {
                method: operation
                for method, operation in path_item.items()
                if method not in HTTP_METHODS
                or group in operation_groups(operation, self.default_group)
            }
            # * Paths left without operations are dropped
            if any(method in HTTP_METHODS for method in kept):
                paths[path] = kept
        schema["paths"] = paths

        if self.settings.enable_authorized:
            components = schema.setdefault("components", {})
            components.setdefault("securitySchemes", {})[BEARER_SCHEME] = {
                "type": "http",
                "scheme": "bearer",
                "bearerFormat": "JWT",
                "description": "Paste the access token, without the 'Bearer ' prefix",
            }
            schema["security"] = [{BEARER_SCHEME: []}]

        self._schemas[group] = schema
        return schema

    def swagger_ui_parameters(self) -> dict[str, Any]:
        """Swagger UI configuration derived from the settings"""
        parameters: dict[str, Any] = {
            "url": self.openapi_url(self.default_group),
            "dom_id": "#swagger-ui",
            "docExpansion": self.settings.doc_expansion_state.value,
            "deepLinking": True,
            "showExtensions": True,
            "showCommonExtensions": True,
        }
        if self.settings.enable_authorized:
            parameters["persistAuthorization"] = True

        groups = list(self.group_infos())
        if len(groups) > 1:
            # * Group selector in the top bar of the standalone layout
            parameters["urls"] = [
                {"url": self.openapi_url(group), "name": group} for group in groups
            ]
            parameters["urls.primaryName"] = self.default_group
            parameters["layout"] = "StandaloneLayout"
        else:
            parameters["layout"] = "BaseLayout"
        return parameters

    def swagger_ui_html(self) -> HTMLResponse:
        """Swagger UI page, standalone preset included for the group selector"""
        config_lines = "".join(
            f"        {json.dumps(key)}: {json.dumps(jsonable_encoder(value))},\n"
            for key, value in self.swagger_ui_parameters().items()
        )
        html = f"""<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <link type="text/css" rel="stylesheet" href="{SWAGGER_UI_CDN}/swagger-ui.css">
    <title>{escape(self.settings.document_title)}</title>
</head>
<body>
    <div id="swagger-ui"></div>
    <script src="{SWAGGER_UI_CDN}/swagger-ui-bundle.js"></script>
    <script src="{SWAGGER_UI_CDN}/swagger-ui-standalone-preset.js"></script>
    <script>
    window.ui = SwaggerUIBundle({{
{config_lines}        presets: [SwaggerUIBundle.presets.apis, SwaggerUIStandalonePreset],
        plugins: [SwaggerUIBundle.plugins.DownloadUrl],
    }})
    </script>
</body>
</html>
"""
        return HTMLResponse(html)

    def swagger_options(self) -> SwaggerOptions:
        """Swagger options view of the settings"""
        return SwaggerOptions(
            document_title=self.settings.document_title,
            groups=[
                SwaggerGroupOptions(
                    group=info.group,
                    title=info.title or self.settings.document_title,
                    description=info.description,
                    version=info.version,
                    url=self.openapi_url(info.group),
                )
                for info in self.group_infos().values()
            ],
        )
