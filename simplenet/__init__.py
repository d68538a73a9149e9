"""Minimal JSON-over-HTTP request helper."""

__version__ = "0.1.0"

from .client import HttpClient, Completion
from .request import RequestBuilder, RequestDescriptor, HTTPMethod, NetworkError, ERROR_DOMAIN

__all__ = [
    "HttpClient", "Completion", "RequestBuilder", "RequestDescriptor",
    "HTTPMethod", "NetworkError", "ERROR_DOMAIN",
]
