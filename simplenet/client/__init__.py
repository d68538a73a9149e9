"""HTTP client module."""

from .http_client import HttpClient, Completion

__all__ = ["HttpClient", "Completion"]
