from __future__ import annotations

import logging
import os
from logging import handlers
from typing import Any

from ..config import config
from ..config.logger_config import LOG_DATE_FORMAT, LOG_FORMAT, LoggerConfig

# --------------------------------------------------------------------------- #


class ConsoleFormatter(logging.Formatter):
    """Formatter painting each record with the colour of its level"""

    RESET = "\x1b[0m"
    LEVEL_COLORS = {
        logging.DEBUG: RESET,
        logging.INFO: "\x1b[32;1m",  # bold green
        logging.WARNING: "\x1b[33m",  # yellow
        logging.ERROR: "\x1b[31;1m",  # bold red
        logging.CRITICAL: "\x1b[41m",  # red background
    }

    def __init__(self):
        super().__init__(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    def format(self, record):
        color = self.LEVEL_COLORS.get(record.levelno, self.RESET)
        return f"{color}{super().format(record)}{self.RESET}"


def file_handler(logger_config: LoggerConfig) -> logging.Handler:
    """Create a handler writing to the log file, rotated at midnight"""
    log_dir = os.path.dirname(logger_config.log_file)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
    handler = handlers.TimedRotatingFileHandler(
        filename=logger_config.log_file,
        when="midnight",
        backupCount=logger_config.log_file_backups,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    return handler


# --------------------------------------------------------------------------- #


class Logger:
    """Logger instance generator"""

    # * Loggers already configured, by name
    __loggers: dict[str, logging.Logger] = {}

    _default_name = "specdoc"

    @classmethod
    def get_logger(
        cls,
        name: str | None = None,
        level: int | None = None,
    ) -> logging.Logger:
        """Get a logger instance or create it if it doesn't exist

        Parameters:
            name (str): Logger name
            level (int): Logger level, the configured one by default

        Returns:
            Logger: Logger instance
        """
        name = name or cls._default_name
        if name in cls.__loggers:
            return cls.__loggers[name]

        logger = logging.getLogger(name)
        logger.setLevel(config.logger.level if level is None else level)
        logger.propagate = False

        if config.logger.log_to_console:
            console = logging.StreamHandler()
            console.setFormatter(ConsoleFormatter())
            logger.addHandler(console)
        if config.logger.log_to_file:
            logger.addHandler(file_handler(config.logger))

        cls.__loggers[name] = logger
        return logger


# --------------------------------------------------------------------------- #
# Uvicorn logging
# --------------------------------------------------------------------------- #


class HealthCheckFilter(logging.Filter):
    def filter(self, record):
        return "/healthcheck" not in record.getMessage()


class FaviconFilter(logging.Filter):
    def filter(self, record):
        return "/favicon.ico" not in record.getMessage()


def uvicorn_log_config(logger_config: LoggerConfig) -> dict[str, Any]:
    """Build the uvicorn `log_config` from the logger settings

    Console handlers use uvicorn's coloured formatters, the file handler
    shares the application log file. Healthcheck and favicon requests are
    left out of the access log.

    Args:
        logger_config (LoggerConfig): Logger settings

    Returns:
        dict: `logging.config.dictConfig` mapping
    """
    level = logging.getLevelName(logger_config.level)

    def formatter(factory: str | None = None) -> dict[str, Any]:
        spec: dict[str, Any] = {"datefmt": LOG_DATE_FORMAT}
        if factory is None:
            spec["format"] = LOG_FORMAT
        else:
            spec.update({"()": factory, "fmt": LOG_FORMAT, "use_colors": True})
        return spec

    log_handlers: dict[str, dict[str, Any]] = {}
    default_handlers: list[str] = []
    access_handlers: list[str] = []
    if logger_config.log_to_console:
        log_handlers["default"] = {
            "formatter": "default",
            "class": "logging.StreamHandler",
            "stream": "ext://sys.stderr",
        }
        log_handlers["access"] = {
            "formatter": "access",
            "class": "logging.StreamHandler",
            "stream": "ext://sys.stdout",
            "filters": ["healthcheck_filter", "favicon_filter"],
        }
        default_handlers.append("default")
        access_handlers.append("access")
    if logger_config.log_to_file:
        log_handlers["log_file"] = {
            "formatter": "file",
            "class": "logging.handlers.TimedRotatingFileHandler",
            "filename": logger_config.log_file,
            "when": "midnight",
            "backupCount": logger_config.log_file_backups,
            "encoding": "utf-8",
            "delay": True,
            "filters": ["healthcheck_filter", "favicon_filter"],
        }
        default_handlers.append("log_file")
        access_handlers.append("log_file")

    def uvicorn_logger(names: list[str]) -> dict[str, Any]:
        return {"handlers": names, "level": level, "propagate": False}

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": formatter("uvicorn.logging.DefaultFormatter"),
            "access": formatter("uvicorn.logging.AccessFormatter"),
            "file": formatter(),
        },
        "filters": {
            "healthcheck_filter": {"()": HealthCheckFilter},
            "favicon_filter": {"()": FaviconFilter},
        },
        "handlers": log_handlers,
        "loggers": {
            "uvicorn": uvicorn_logger(default_handlers),
            "uvicorn.error": uvicorn_logger(default_handlers),
            "uvicorn.access": uvicorn_logger(access_handlers),
        },
        "root": {"handlers": default_handlers, "level": level},
    }
