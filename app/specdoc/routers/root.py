from fastapi import APIRouter, Request

from ..config.swagger_config import SwaggerOptions
from ..libs import Logger

log = Logger.get_logger(__name__)

# --------------------------------------------------------------------------- #
# Routers
# --------------------------------------------------------------------------- #

core_router = APIRouter(
    prefix="/core",
    tags=["Core"],
)
"""Core API Router for system endpoints"""

# --------------------------------------------------------------------------- #
# Core Endpoints
# --------------------------------------------------------------------------- #


@core_router.get(
    "/healthcheck",
    summary="Healthcheck",
    description="Healthcheck endpoint to verify if service is running.",
    response_description="Status of service",
    response_model=dict,
    responses={
        200: {
            "description": "Service is running.",
            "content": {
                "application/json": {
                    "example": {"message": "API is running", "status": "OK"}
                }
            },
        }
    },
)
def healthcheck():
    """Healthcheck endpoint to verify if service is running."""
    return {"message": "API is running", "status": "OK"}


@core_router.get(
    "/documentation",
    summary="Documentation Groups",
    description="List the documentation groups and where their OpenAPI documents are served.",
    response_description="Swagger options of the service",
    response_model=SwaggerOptions,
    responses={
        200: {
            "description": "Documentation groups.",
            "content": {
                "application/json": {
                    "example": {
                        "document_title": "Specification Api Document",
                        "groups": [
                            {
                                "group": "Default",
                                "title": "Specification Api Document",
                                "description": None,
                                "version": "1.0.0",
                                "url": "/openapi/Default.json",
                            }
                        ],
                    }
                }
            },
        }
    },
)
def documentation(request: Request):
    """List the documentation groups of the service."""
    log.debug("Documentation endpoint called.")
    return request.app.state.specification_document.swagger_options()
