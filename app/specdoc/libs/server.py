from fastapi import FastAPI

from ..config import config
from .logger import Logger, uvicorn_log_config

log = Logger.get_logger(__name__)

# --------------------------------------------------------------------------- #


class UvicornServer:
    """Uvicorn server bound to the configured host and port"""

    reload: bool = False

    def __init__(self, app_uri: str | FastAPI):
        log.info(f"Initializing {type(self).__name__} (Uvicorn)")
        self.app_uri = app_uri

    def run(self):
        """Run the server until it is stopped"""
        import uvicorn

        log.info(
            f"Starting {type(self).__name__} on {config.server.host}:{config.server.port}"
        )
        uvicorn.run(
            self.app_uri,
            host=config.server.host,
            port=config.server.port,
            log_level=config.logger.log_level.lower(),
            log_config=uvicorn_log_config(config.logger),
            reload=self.reload,
        )


class ProductionServer(UvicornServer):
    """Production server, never reloads"""


class DevelopmentServer(UvicornServer):
    """Development server, reloads on code changes when enabled"""

    reload = config.server.reload


# --------------------------------------------------------------------------- #


class Server:
    """Server class to manage production and development servers"""

    def __init__(self, app_uri: str):
        self.app_uri = app_uri
        self.server: UvicornServer | None = None

    def start(self):
        """Start the server based on the mode (production or development)"""
        if config.server.dev_mode:
            log.info("Starting server in development mode")
            self.server = DevelopmentServer(self.app_uri)
        else:
            log.info("Starting server in production mode")
            self.server = ProductionServer(self.app_uri)

        self.server.run()
