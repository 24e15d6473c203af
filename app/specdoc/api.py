"""Specification document service.

Browse the API by group with the selector at the top of the page. Each
group has its own OpenAPI document under `/openapi/{group}.json`.
"""

from fastapi import FastAPI

from .libs import FastAPISetup, Logger, Server

# * Initialize Loggers
log = Logger.get_logger(__name__)

# * Initialize FastAPI app, documentation endpoints are set up below
app = FastAPI(
    lifespan=FastAPISetup.lifespan,
    openapi_url=None,
    docs_url=None,
    redoc_url=None,
)

# * Setup FastAPI configurations
FastAPISetup.setup_openapi(app)
FastAPISetup.setup_middlewares(app)
FastAPISetup.setup_routes(app)


def start_server():
    """Start the backend server using Uvicorn"""
    log.info("Starting backend server...")
    server = Server("specdoc.api:app")
    server.start()
