#!/usr/bin/env python3
"""
Basic usage examples for the Liana REST client library.

Reads the account settings from LIANA_USER_ID, LIANA_SECRET, LIANA_API_URL,
LIANA_API_VERSION and LIANA_REALM, then performs a couple of calls.
"""

import logging
import sys

from liana_restclient import (
    APIError,
    ClientConfig,
    RestClient,
    RestClientError,
    build_request,
)


def main():
    """Run basic usage examples."""

    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    print("=== Liana REST Client Basic Usage Examples ===\n")

    try:
        config = ClientConfig.from_env()
    except RestClientError as e:
        print(f"Configuration error: {e}")
        sys.exit(1)

    print("1. Configuration loaded...")
    print(f"   API: {config.api_url} (v{config.api_version})")
    print(f"   User id: {config.user_id}\n")

    # Example 1: Inspect a signed request without sending it
    print("2. Building a signed request...")
    context = build_request(config, "unit/test", ["var1", "var2"])
    print(f"   URL: {context.url}")
    print(f"   Body: {context.body}")
    for name, value in context.headers.items():
        print(f"   {name}: {value}")
    print()

    with RestClient(config) as client:
        # Example 2: POST call with parameters
        print("3. Performing a POST call...")
        try:
            result = client.call("unit/test", ["var1", "var2"])
            print(f"   ✓ Result: {result}")
        except APIError as e:
            print(f"   ✗ API reported failure on {e.endpoint}: {e.message}")
        except RestClientError as e:
            print(f"   ✗ Call failed: {e}")
        print()

        # Example 3: GET call (empty body)
        print("4. Performing a GET call...")
        try:
            result = client.get("unit/test")
            print(f"   ✓ Result: {result}")
        except RestClientError as e:
            print(f"   ✗ Call failed: {e}")
        print()

    print("=== Examples Completed ===")


if __name__ == "__main__":
    main()
