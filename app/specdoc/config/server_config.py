from pydantic_settings import BaseSettings, SettingsConfigDict

from .app_config import app_config


class ServerConfig(BaseSettings):
    """Server configuration settings

    Uvicorn logging is derived from the logger settings, see
    `specdoc.libs.logger.uvicorn_log_config`.
    """

    model_config = SettingsConfigDict(case_sensitive=False, env_prefix="SERVER_")

    dev_mode: bool = app_config.server_dev_mode
    """Whether the server is running in development mode"""
    reload: bool = app_config.server_reload
    """Enable auto-reload of the server on code changes (only in development mode)"""
    host: str = "127.0.0.1"
    """The host IP address used to authorize requests"""
    port: int = 8765  # Not a common port to avoid conflicts
    """The port number used to access the server"""
