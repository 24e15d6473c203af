from contextlib import asynccontextmanager

from fastapi import APIRouter, FastAPI, HTTPException
from fastapi.responses import HTMLResponse, JSONResponse

from ..config import config
from .logger import Logger
from .specification_document import SpecificationDocument

log = Logger.get_logger(__name__)


class FastAPISetup:
    @classmethod
    def setup_openapi(cls, app: FastAPI) -> SpecificationDocument:
        """Setup the specification documents and Swagger UI for the FastAPI app

        Serves one OpenAPI document per group under `/openapi/{group}.json`
        and the Swagger UI under the configured route prefix.

        Args:
            app (FastAPI): The FastAPI application instance

        Returns:
            SpecificationDocument: The document provider, also kept in `app.state`
        """
        log.info("Setting up OpenAPI configuration")

        document = SpecificationDocument(app, config.specification_document)
        app.state.specification_document = document

        def openapi_json(group: str) -> JSONResponse:
            """Serve the OpenAPI document of a group"""
            try:
                return JSONResponse(document.openapi(group))
            except KeyError:
                log.warning(f"Unknown documentation group requested: '{group}'")
                raise HTTPException(
                    status_code=404, detail=f"Unknown documentation group '{group}'"
                ) from None

        def swagger_ui() -> HTMLResponse:
            """Serve the Swagger UI page"""
            return document.swagger_ui_html()

        # Group names may contain slashes
        app.add_api_route(
            "/openapi/{group:path}.json", openapi_json, include_in_schema=False
        )
        app.add_api_route(document.docs_url, swagger_ui, include_in_schema=False)

        # Default group schema for anything calling app.openapi()
        app.openapi = lambda: document.openapi(document.default_group)
        return document

    @classmethod
    def setup_middlewares(cls, app: FastAPI) -> None:
        """Setup middlewares for the FastAPI app

        Args:
            app (FastAPI): The FastAPI application instance

        Returns:
            None
        """
        from starlette.middleware.base import BaseHTTPMiddleware

        from ..middlewares.catch_unhandled_error import CatchUnhandledErrorMiddleware

        log.info("Setting up middlewares")

        app.add_middleware(
            BaseHTTPMiddleware,
            dispatch=CatchUnhandledErrorMiddleware(config.app.project_type),
        )

    @classmethod
    def setup_routes(cls, app: FastAPI) -> None:
        """Setup API routes for the FastAPI app

        Args:
            app (FastAPI): The FastAPI application instance

        Returns:
            None
        """
        from ..routers.root import core_router

        log.info("Setting up API routes")

        api_v1_router = APIRouter(prefix="/api/v1")
        api_v1_router.include_router(core_router)

        app.include_router(api_v1_router)

    @classmethod
    @asynccontextmanager
    async def lifespan(cls, app: FastAPI):
        try:
            log.info(
                f"FastAPI application startup ({config.app.project_type.value}), "
                f"documentation at '{app.state.specification_document.docs_url}'"
            )
            yield
        except Exception as e:
            log.error(f"Exception during lifespan: {e}")
            raise
        finally:
            log.info("FastAPI application shutdown.")
