#!/usr/bin/env python3
"""
Basic usage examples for the Kik bot API client.

This script demonstrates how to look up a user, send messages, read the bot
configuration and verify a webhook signature.
"""

import logging
import os
import sys

from kik_client import KikClient, KikClientError, Message, StatusError, compute_signature


def main():
    """Run basic usage examples."""

    bot_username = os.environ.get("KIK_BOT_USERNAME", "example-bot")
    api_key = os.environ.get("KIK_API_KEY", "example-api-key")
    recipient = os.environ.get("KIK_RECIPIENT", "alice")

    logging.basicConfig(level=logging.DEBUG if "-v" in sys.argv else logging.INFO)

    print("=== Kik Bot API Client Usage Examples ===\n")

    print("1. Creating client...")
    client = KikClient(bot_username, api_key)
    print(f"   Client created for: {client.base_url}")
    print(f"   Bot: {bot_username}\n")

    with client:
        try:
            print("2. Fetching user profile...")
            user = client.get_user(recipient)
            print(f"   ✓ {recipient}: {user.first_name} {user.last_name}\n")

            print("3. Sending a message...")
            client.send_messages([Message(type="text", to=recipient, body="Hello from Python!")])
            print("   ✓ Message sent\n")

            print("4. Reading configuration...")
            config = client.get_configuration()
            print(f"   Webhook: {config.webhook}")
            print(f"   Features: {config.features}\n")
        except StatusError as e:
            print(f"   ✗ API error {e.status_code}: {e.body!r}")
        except KikClientError as e:
            print(f"   ✗ Request failed: {e}")
            return 1

    print("5. Verifying a webhook signature...")
    body = b'{"messages":[]}'
    signature = compute_signature(body, api_key)
    print(f"   Body: {body}")
    print(f"   Signature: {signature}")
    print(f"   Valid: {'✓' if client.verify_signature(signature, body) else '✗'}")
    print(f"   Tampered: {'✓' if client.verify_signature(signature, body + b' ') else '✗'}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
