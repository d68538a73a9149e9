"""Data models for outgoing requests."""

from enum import Enum
from pydantic import BaseModel
from typing import Optional


class HTTPMethod(str, Enum):
    GET = "GET"
    POST = "POST"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: str) -> "HTTPMethod":
        """Parse a method name, ignoring case."""
        try:
            return cls(text.upper())
        except ValueError:
            raise ValueError(f"Unsupported HTTP method: {text!r}")


class RequestDescriptor(BaseModel):
    """A request ready to be handed to the session."""
    url: str
    method: HTTPMethod = HTTPMethod.GET
    body: Optional[bytes] = None
