import logging

from pydantic_settings import BaseSettings, SettingsConfigDict

from .app_config import app_config

LOG_FORMAT = "%(asctime)s - [%(levelname)s] [%(threadName)s] %(name)s::%(funcName)s %(message)s (%(filename)s:%(lineno)d)"
"""Record format shared by the application and uvicorn loggers"""
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class LoggerConfig(BaseSettings):
    """Logger configuration settings"""

    model_config = SettingsConfigDict(case_sensitive=False, env_prefix="LOGGER_")

    log_level: str = app_config.server_log_level
    """Logger level name"""
    log_to_file: bool = False
    """Enable logging to file"""
    log_to_console: bool = True
    """Enable logging to console"""
    log_file: str = "logs/specdoc.log"
    """Logger file path (relative to the working directory)"""
    log_file_backups: int = 14
    """Number of rotated daily log files kept"""

    @property
    def level(self) -> int:
        """Numeric logger level, INFO when the name is unknown"""
        level = logging.getLevelName(self.log_level.upper())
        return level if isinstance(level, int) else logging.INFO
