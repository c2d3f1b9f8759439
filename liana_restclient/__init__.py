"""
Liana REST Client Library

A Python client for the Liana Technologies REST API. Requests are signed
with the account's shared secret (HMAC-SHA256) and responses are checked
against the success contract of the configured API version.

Example usage:
    from liana_restclient import ClientConfig, RestClient

    config = ClientConfig(123, "your-secret", "https://rest.example.com", 1, "REALM")
    with RestClient(config) as client:
        lists = client.call("unit/test", ["var1", "var2"])
"""

from .client import RestClient, SigningContext, build_request, interpret_response
from .config import ClientConfig
from .exceptions import (
    RestClientError,
    ConfigurationError,
    SerializationError,
    TransportError,
    UnexpectedResponseError,
    APIError
)
from .constants import (
    CONTENT_TYPE_JSON,
    DEFAULT_CONFIG,
    DEFAULT_TIMEOUT,
    SUPPORTED_API_VERSIONS
)
from .signer import sign, canonical_string, rfc3339_now

__version__ = "1.0.0"
__all__ = [
    "RestClient",
    "ClientConfig",
    "SigningContext",
    "build_request",
    "interpret_response",
    "sign",
    "canonical_string",
    "rfc3339_now",
    "RestClientError",
    "ConfigurationError",
    "SerializationError",
    "TransportError",
    "UnexpectedResponseError",
    "APIError",
    "CONTENT_TYPE_JSON",
    "DEFAULT_CONFIG",
    "DEFAULT_TIMEOUT",
    "SUPPORTED_API_VERSIONS"
]
