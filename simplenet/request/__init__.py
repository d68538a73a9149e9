"""Request building module."""

from .builder import RequestBuilder
from .errors import NetworkError, ERROR_DOMAIN
from .models import HTTPMethod, RequestDescriptor

__all__ = ["RequestBuilder", "NetworkError", "ERROR_DOMAIN", "HTTPMethod", "RequestDescriptor"]
