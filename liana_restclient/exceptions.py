"""
Custom exceptions for the Liana REST client library.
"""


class RestClientError(Exception):
    """Base exception for REST client errors."""
    pass


class ConfigurationError(RestClientError):
    """Raised when client configuration is invalid."""
    pass


class SerializationError(RestClientError):
    """Raised when call parameters cannot be encoded as JSON."""
    pass


class TransportError(RestClientError):
    """Raised when the HTTP request itself fails (network, TLS, timeout)."""
    pass


class UnexpectedResponseError(RestClientError):
    """Raised when the response lacks the field its API version requires."""

    def __init__(self, body: str):
        super().__init__(f"unexpected response from API: {body}")
        self.body = body


class APIError(RestClientError):
    """Raised when the API reports a failed call (succeed: false)."""

    def __init__(self, endpoint: str, message: str):
        super().__init__(f"{endpoint}: {message}")
        self.endpoint = endpoint
        self.message = message
