"""Errors reported through request completions."""

ERROR_DOMAIN = "request-build-domain"

BUILD_FAILED = "request construction failed"
DESERIALIZATION_FAILED = "deserialization failed"


class NetworkError(Exception):
    """Error record with a domain tag, a numeric code and a message."""

    def __init__(self, message: str, code: int = -1, domain: str = ERROR_DOMAIN):
        super().__init__(message)
        self.domain = domain
        self.code = code
        self.message = message

    def __str__(self) -> str:
        return f"{self.domain} ({self.code}): {self.message}"

    def __repr__(self) -> str:
        return f"NetworkError(domain={self.domain!r}, code={self.code}, message={self.message!r})"

    def __eq__(self, other):
        if not isinstance(other, NetworkError):
            return NotImplemented
        return (self.domain, self.code, self.message) == (other.domain, other.code, other.message)

    def __hash__(self):
        return hash((self.domain, self.code, self.message))

    @classmethod
    def build_failed(cls) -> "NetworkError":
        return cls(BUILD_FAILED)

    @classmethod
    def deserialization_failed(cls) -> "NetworkError":
        return cls(DESERIALIZATION_FAILED)
