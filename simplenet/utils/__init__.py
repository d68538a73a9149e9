"""Common utilities."""

from .logger import setup_logging, DEFAULT_LOG_DIR

__all__ = ["setup_logging", "DEFAULT_LOG_DIR"]
