from pydantic_settings import BaseSettings, SettingsConfigDict

from ..models.project_type import ProjectType


class AppConfig(BaseSettings):
    """Application configuration settings"""

    model_config = SettingsConfigDict(case_sensitive=False, env_prefix="APP_")

    server_dev_mode: bool = False
    """Enable development mode for the server"""
    server_reload: bool = False
    """Enable server auto-reload on code changes (for development)"""
    server_log_level: str = "INFO"
    """Logging level for the server"""
    project_type: ProjectType = ProjectType.RESTFUL_API
    """Shape of the hosted application"""


# --------------------------------------------------------------------------- #

app_config = AppConfig()
"""Application configuration instance"""
