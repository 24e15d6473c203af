"""Core of the service: FastAPI wiring, specification documents, logging and server."""

from .fastapi_setup import FastAPISetup
from .logger import Logger
from .server import Server
from .specification_document import SpecificationDocument, api_groups

# --------------------------------------------------------------------------- #

__all__ = ["FastAPISetup", "Logger", "Server", "SpecificationDocument", "api_groups"]
