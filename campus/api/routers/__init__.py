"""API routers for campus administration."""

from . import roles

__all__ = ["roles"]
