"""
Request signing for the Liana REST API.

The server recomputes the signature from the received request, so the
canonical string layout below is a wire contract:

    METHOD
    md5 hex of body
    application/json
    timestamp
    body
    endpoint

joined with newlines and signed with HMAC-SHA256 using the shared secret.
"""

import datetime
import hashlib
import hmac

from .constants import CONTENT_TYPE_JSON


def body_md5(body: str) -> str:
    """Lowercase hex MD5 of the UTF-8 encoded body."""
    return hashlib.md5(body.encode('utf-8')).hexdigest()


def canonical_string(method: str, body_hash: str, timestamp: str, body: str, endpoint: str) -> str:
    """Build the newline-joined string that gets signed."""
    return "\n".join((
        method,
        body_hash,
        CONTENT_TYPE_JSON,
        timestamp,
        body,
        endpoint,
    ))


def sign(method: str, endpoint: str, body_hash: str, timestamp: str, body: str, secret: str) -> str:
    """
    Generate the HMAC-SHA256 request signature.

    Args:
        method: HTTP method, upper-case
        endpoint: Endpoint path, e.g. /api/v1/unit/test
        body_hash: Hex MD5 of body (as sent in Content-MD5)
        timestamp: RFC3339 timestamp (as sent in Date)
        body: Request body text
        secret: Shared secret

    Returns:
        Lowercase hex-encoded signature
    """
    message = canonical_string(method, body_hash, timestamp, body, endpoint)
    mac = hmac.new(
        secret.encode('utf-8'),
        message.encode('utf-8'),
        hashlib.sha256
    )
    return mac.hexdigest()


def authorization_header(realm: str, user_id: int, signature: str) -> str:
    """Format the Authorization header value: "<realm> <user_id>:<signature>"."""
    return f"{realm} {user_id}:{signature}"


def rfc3339_now() -> str:
    """
    Current local time in RFC3339 format with second precision.

    A zero UTC offset is written as "Z".
    """
    now = datetime.datetime.now().astimezone().replace(microsecond=0)
    timestamp = now.isoformat()
    if timestamp.endswith('+00:00'):
        timestamp = timestamp[:-6] + 'Z'
    return timestamp
