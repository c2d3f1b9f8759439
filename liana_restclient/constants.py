"""
Constants for the Liana REST client library.
Wire-level values are fixed by the server's signature verification.
"""

# HTTP Headers
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_CONTENT_MD5 = "Content-MD5"
HEADER_DATE = "Date"
HEADER_AUTHORIZATION = "Authorization"

# Content type sent with every request and folded into the signed string
CONTENT_TYPE_JSON = "application/json"

# Endpoint layout: /api/v{version}/{path}
ENDPOINT_TEMPLATE = "/api/v{version}/{path}"

SUPPORTED_API_VERSIONS = (1, 2, 3)

DEFAULT_TIMEOUT = 60  # seconds

# Default configuration values
DEFAULT_CONFIG = {
    'timeout': DEFAULT_TIMEOUT,  # HTTP timeout in seconds
}

# Environment variable names read by ClientConfig.from_env (without prefix)
ENV_PREFIX = "LIANA_"
ENV_USER_ID = "USER_ID"
ENV_SECRET = "SECRET"
ENV_API_URL = "API_URL"
ENV_API_VERSION = "API_VERSION"
ENV_REALM = "REALM"
