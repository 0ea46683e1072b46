"""Common utilities for campus administration."""

from .logger import get_logger, setup_from_settings, setup_logger

__all__ = ["get_logger", "setup_from_settings", "setup_logger"]
