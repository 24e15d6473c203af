from .global_config import GlobalConfig, config

# --------------------------------------------------------------------------- #

__all__ = ["GlobalConfig", "config"]
