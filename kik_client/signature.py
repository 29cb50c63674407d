"""
Webhook signature verification.

Kik signs every webhook delivery with HMAC-SHA1 over the raw request body,
keyed with the bot's API key, and sends the hex digest in the
``X-Kik-Signature`` header.
"""

import hashlib
import hmac
import logging

logger = logging.getLogger(__name__)


def compute_signature(body: bytes, api_key: str) -> str:
    """
    Compute the HMAC-SHA1 signature of a webhook body.

    Args:
        body: Raw request body
        api_key: Bot API key used as the HMAC secret

    Returns:
        Lowercase hex-encoded digest
    """
    mac = hmac.new(api_key.encode('utf-8'), body, hashlib.sha1)
    return mac.hexdigest()


def verify_signature(signature: str, body: bytes, api_key: str) -> bool:
    """
    Verify that a webhook body matches its signature header.

    The comparison is exact (case-sensitive, full length) and runs in
    constant time.

    Args:
        signature: Value of the X-Kik-Signature header
        body: Raw request body as received
        api_key: Bot API key

    Returns:
        True if the signature is valid, False otherwise (including
        malformed input)
    """
    if not isinstance(signature, str) or not isinstance(body, (bytes, bytearray)):
        logger.warning("Rejecting webhook with malformed signature input")
        return False

    try:
        expected = compute_signature(bytes(body), api_key)
        # compare_digest rejects non-ASCII str with TypeError
        valid = hmac.compare_digest(expected, signature)
    except (TypeError, AttributeError):
        valid = False

    if not valid:
        logger.warning("Webhook signature mismatch")
    return valid
