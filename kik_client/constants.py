"""
Constants for the Kik bot API client.
"""

from enum import Enum

__version__ = "1.0.0"

DEFAULT_BASE_URL = "https://api.kik.com/"

# Header carrying the webhook signature on inbound deliveries
SIGNATURE_HEADER = "X-Kik-Signature"

# Default configuration values
DEFAULT_CONFIG = {
    'timeout': None,    # forwarded to the transport when set
    'user_agent': f"kik-client-python/{__version__}",
}


class Endpoint(Enum):
    """Kik bot API endpoints as (HTTP method, path relative to the base URL)."""

    GET_USER = ("GET", "v1/user/{username}")
    SEND_MESSAGE = ("POST", "v1/message")
    BROADCAST = ("POST", "v1/broadcast")
    GET_CONFIG = ("GET", "v1/config")
    SET_CONFIG = ("POST", "v1/config")
    CREATE_CODE = ("POST", "v1/code")

    @property
    def method(self) -> str:
        return self.value[0]

    @property
    def path(self) -> str:
        return self.value[1]

    def format_path(self, **params) -> str:
        """Fill path parameters verbatim, without escaping."""
        return self.path.format(**params)
