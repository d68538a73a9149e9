"""Request construction from a method, a URL string and parameters."""

from typing import Mapping, Optional
from urllib.parse import quote
from .models import HTTPMethod, RequestDescriptor


class RequestBuilder:
    """Builds request descriptors; GET params go in the URL, POST params in the body."""

    @staticmethod
    def query_string(params: Optional[Mapping[str, str]]) -> Optional[str]:
        """Join params as key=value pairs with percent-escaped values.

        Keys are used as given. Returns None for an absent or empty map.
        """
        if not params:
            return None

        pairs = []
        for key, value in params.items():
            pairs.append(key + "=" + quote(value, safe="", errors="replace"))
        return "&".join(pairs)

    @classmethod
    def build(cls, method: HTTPMethod, url_string: str,
              params: Optional[Mapping[str, str]] = None) -> Optional[RequestDescriptor]:
        """Build a request, or return None if there is nothing to send."""
        if not url_string:
            return None

        query = cls.query_string(params)

        if method == HTTPMethod.GET:
            url = url_string
            if query is not None:
                url += "?" + query
            return RequestDescriptor(url=url, method=method)

        # A non-GET request must carry a body
        if query is None:
            return None

        return RequestDescriptor(
            url=url_string,
            method=method,
            body=query.encode("utf-8", errors="replace")
        )
