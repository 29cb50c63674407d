"""
Client for the Kik bot API.

Every call is sent with HTTP Basic Authentication built from the bot username
and API key. Webhook deliveries are authenticated separately, by verifying the
HMAC-SHA1 signature Kik attaches to them.
"""

import json
import logging
from typing import Any, Callable, Dict, Iterable, NamedTuple, Optional, TypeVar, Union
from urllib.parse import urlparse

import requests
from requests.auth import HTTPBasicAuth

from .constants import DEFAULT_BASE_URL, DEFAULT_CONFIG, Endpoint
from .exceptions import (
    ConfigurationError,
    DecodeError,
    EncodeError,
    KikClientError,
    StatusError,
    TransportError
)
from .models import Code, Configuration, KikRecord, Message, ScanData, User
from .signature import verify_signature


logger = logging.getLogger(__name__)

T = TypeVar('T')
Decoder = Callable[[Any], T]


class OutboundRequest(NamedTuple):
    """A request ready for credential injection."""
    method: str
    url: str
    body: Optional[bytes]
    headers: Dict[str, str]


class KikClient:
    """
    Client for making authenticated requests to the Kik bot API.

    The transport is any object with a ``requests.Session``-compatible
    ``request(method, url, **kwargs)`` method. When none is given the client
    creates its own session and closes it in ``close()``; an injected transport
    is shared and left open.
    """

    def __init__(self, bot_username: str, api_key: str, base_url: str = DEFAULT_BASE_URL,
                 transport=None, **config):
        """
        Initialize Kik client.

        Args:
            bot_username: Bot username, used as the Basic Auth identifier
            api_key: Bot API key, used as the Basic Auth secret and the
                webhook signing key
            base_url: API base URL, must end with a trailing slash
            transport: Shared HTTP transport (defaults to a new requests.Session)
            **config: Configuration options (timeout, user_agent)

        Raises:
            ConfigurationError: If any argument or option is invalid
        """
        self.bot_username = bot_username
        self.api_key = api_key
        self.base_url = base_url

        # Merge default config with user overrides
        self.config = {**DEFAULT_CONFIG, **config}

        self._validate_config()

        self._owns_transport = transport is None
        self.transport = requests.Session() if transport is None else transport

    def _validate_config(self):
        """Validate client configuration."""
        if not self.bot_username:
            raise ConfigurationError("bot_username cannot be empty")

        if not self.api_key:
            raise ConfigurationError("api_key cannot be empty")

        if not isinstance(self.base_url, str) or not self.base_url.endswith('/'):
            raise ConfigurationError(
                f"base_url must have a trailing slash, but {self.base_url!r} does not"
            )

        parsed = urlparse(self.base_url)
        if parsed.scheme not in ('http', 'https') or not parsed.netloc:
            raise ConfigurationError(f"base_url {self.base_url!r} is not an absolute http(s) URL")

        unknown = set(self.config) - set(DEFAULT_CONFIG)
        if unknown:
            raise ConfigurationError(f"unknown configuration options: {', '.join(sorted(unknown))}")

        timeout = self.config['timeout']
        if timeout is not None and not _is_valid_timeout(timeout):
            raise ConfigurationError(
                f"timeout must be a positive number or a (connect, read) pair, got {timeout!r}"
            )

    def build_request(self, method: str, relative_path: str, payload: Any = None) -> OutboundRequest:
        """
        Build a request against the configured base URL.

        Args:
            method: HTTP method
            relative_path: Path appended verbatim to the base URL
            payload: JSON-serializable structure, or None for no body

        Returns:
            OutboundRequest

        Raises:
            EncodeError: If the payload cannot be serialized
        """
        url = self.base_url + relative_path
        headers = {'User-Agent': self.config['user_agent']}

        body = None
        if payload is not None:
            try:
                body = json.dumps(payload, separators=(',', ':'), allow_nan=False).encode('utf-8')
            except (TypeError, ValueError) as e:
                raise EncodeError(f"Cannot encode {method} {relative_path} payload: {e}") from e
            headers['Content-Type'] = 'application/json'

        return OutboundRequest(method, url, body, headers)

    def execute(self, request: OutboundRequest, decoder: Optional[Decoder] = None):
        """
        Send a request with Basic Auth and interpret the response.

        Args:
            request: Request from build_request()
            decoder: Callable turning the parsed JSON body into a result, or
                None to discard the body

        Returns:
            The decoder's result, or None when no decoder is given

        Raises:
            TransportError: If the transport fails
            StatusError: If the response status is not 2xx
            DecodeError: If the body is not JSON or the decoder rejects it
        """
        kwargs = {
            'headers': dict(request.headers),
            'auth': HTTPBasicAuth(self.bot_username, self.api_key),
        }
        if request.body is not None:
            kwargs['data'] = request.body
        if self.config['timeout'] is not None:
            kwargs['timeout'] = self.config['timeout']

        logger.debug("%s %s (%d byte body)", request.method, request.url,
                     len(request.body) if request.body is not None else 0)

        try:
            response = self.transport.request(request.method, request.url, **kwargs)
        except (requests.RequestException, OSError) as e:
            logger.warning("%s %s failed: %s", request.method, request.url, type(e).__name__)
            raise TransportError(f"HTTP request failed: {e}") from e

        status = response.status_code
        if not 200 <= status < 300:
            logger.warning("%s %s returned HTTP %d", request.method, request.url, status)
            raise StatusError(status, response.content)

        logger.debug("%s %s returned HTTP %d", request.method, request.url, status)

        if decoder is None:
            return None

        try:
            data = json.loads(response.content)
        except (TypeError, ValueError) as e:
            raise DecodeError(f"Response from {request.url} is not valid JSON: {e}") from e

        try:
            return decoder(data)
        except KikClientError:
            raise
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise DecodeError(f"Unexpected response shape from {request.url}: {e}") from e

    def _call(self, endpoint: Endpoint, payload: Any = None, decoder: Optional[Decoder] = None,
              **path_params):
        request = self.build_request(endpoint.method, endpoint.format_path(**path_params), payload)
        return self.execute(request, decoder)

    def get_user(self, username: str) -> User:
        """Return a user's profile data."""
        return self._call(Endpoint.GET_USER, decoder=User.from_dict, username=username)

    def send_messages(self, messages: Iterable[Union[Message, Dict[str, Any]]]):
        """Send messages to users who have chatted with the bot."""
        self._call(Endpoint.SEND_MESSAGE, _messages_payload(messages))

    def broadcast_messages(self, messages: Iterable[Union[Message, Dict[str, Any]]]):
        """Send messages through the broadcast endpoint."""
        self._call(Endpoint.BROADCAST, _messages_payload(messages))

    def get_configuration(self) -> Configuration:
        """Return the bot's current configuration."""
        return self._call(Endpoint.GET_CONFIG, decoder=Configuration.from_dict)

    def set_configuration(self, configuration: Union[Configuration, Dict[str, Any]]) -> Configuration:
        """
        Replace the bot configuration.

        Accepts a Configuration or a plain dict in the API's JSON shape.
        Returns the configuration as stored by the API. The argument is not
        modified.
        """
        return self._call(Endpoint.SET_CONFIG, _as_payload(configuration), Configuration.from_dict)

    def create_code(self, scan_data: Union[ScanData, Dict[str, Any], None] = None) -> Code:
        """Create a Kik code, optionally embedding scan data."""
        payload = _as_payload(scan_data) if scan_data is not None else {}
        return self._call(Endpoint.CREATE_CODE, payload, Code.from_dict)

    def verify_signature(self, signature: str, body: bytes) -> bool:
        """Check a webhook body against its X-Kik-Signature header."""
        return verify_signature(signature, body, self.api_key)

    def close(self):
        """Close the HTTP session if this client created it."""
        if self._owns_transport and self.transport is not None:
            self.transport.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()

    def __repr__(self):
        return f"KikClient(bot_username={self.bot_username!r}, base_url={self.base_url!r})"


def _as_payload(record) -> Any:
    return record.to_dict() if isinstance(record, KikRecord) else record


def _messages_payload(messages) -> Dict[str, Any]:
    return {'messages': [_as_payload(m) for m in messages]}


def _is_positive_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and value > 0


def _is_valid_timeout(timeout) -> bool:
    """A positive number, or a (connect, read) pair as requests accepts it."""
    if isinstance(timeout, tuple):
        return len(timeout) == 2 and all(t is None or _is_positive_number(t) for t in timeout)
    return _is_positive_number(timeout)
