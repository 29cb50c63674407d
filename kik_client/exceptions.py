"""
Custom exceptions for the Kik bot API client.
"""


class KikClientError(Exception):
    """Base exception for Kik client errors."""
    pass


class ConfigurationError(KikClientError):
    """Raised when client configuration is invalid."""
    pass


class EncodeError(KikClientError):
    """Raised when a request payload cannot be serialized to JSON."""
    pass


class TransportError(KikClientError):
    """Raised when the HTTP transport fails to deliver a request."""
    pass


class StatusError(KikClientError):
    """Raised when the API answers with a non-2xx status code."""

    def __init__(self, status_code: int, body: bytes):
        self.status_code = status_code
        self.body = body
        super().__init__(f"Kik API returned HTTP {status_code}")


class DecodeError(KikClientError):
    """Raised when a response body is not the expected JSON shape."""
    pass
