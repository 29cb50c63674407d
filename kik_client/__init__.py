"""
Kik Bot API Client

A Python client library for the Kik bot API: authenticated calls for users,
messages, configuration and Kik codes, plus webhook signature verification.

Example usage:
    from kik_client import KikClient, Message

    client = KikClient("your-bot", "your-api-key")
    client.send_messages([Message(type="text", to="alice", chat_id=chat_id, body="Hi!")])
"""

from .client import KikClient, OutboundRequest
from .exceptions import (
    KikClientError,
    ConfigurationError,
    EncodeError,
    TransportError,
    StatusError,
    DecodeError
)
from .models import Message, User, Configuration, ScanData, Code
from .signature import compute_signature, verify_signature
from .constants import (
    __version__,
    DEFAULT_BASE_URL,
    DEFAULT_CONFIG,
    SIGNATURE_HEADER,
    Endpoint
)

__all__ = [
    "KikClient",
    "OutboundRequest",
    "KikClientError",
    "ConfigurationError",
    "EncodeError",
    "TransportError",
    "StatusError",
    "DecodeError",
    "Message",
    "User",
    "Configuration",
    "ScanData",
    "Code",
    "compute_signature",
    "verify_signature",
    "DEFAULT_BASE_URL",
    "DEFAULT_CONFIG",
    "SIGNATURE_HEADER",
    "Endpoint"
]
