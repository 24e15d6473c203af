from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .app_config import AppConfig, app_config
from .logger_config import LoggerConfig
from .server_config import ServerConfig
from .specification_document_config import DocumentSettings, apply_defaults


class GlobalConfig(BaseSettings):
    """Global configuration settings"""

    model_config = SettingsConfigDict(case_sensitive=False)

    app: AppConfig = app_config
    """Application configuration settings"""
    logger: LoggerConfig = LoggerConfig()
    """Logger configuration settings"""
    server: ServerConfig = ServerConfig()
    """Server configuration settings"""
    specification_document: DocumentSettings = apply_defaults(DocumentSettings())
    """Specification document settings, defaults already applied"""

    @field_validator("specification_document", mode="after")
    @classmethod
    def _apply_document_defaults(cls, settings: DocumentSettings) -> DocumentSettings:
        """Default the fields left unset by an environment supplied value"""
        return apply_defaults(settings)


# --------------------------------------------------------------------------- #

config = GlobalConfig()
"""Global configuration instance

This instance is used to access the global configuration settings.

Example:
>>> from specdoc.config import config
>>> print(config.specification_document.document_title)
Specification Api Document
"""
