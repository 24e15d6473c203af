from .catch_unhandled_error import CatchUnhandledErrorMiddleware

# --------------------------------------------------------------------------- #

__all__ = ["CatchUnhandledErrorMiddleware"]
