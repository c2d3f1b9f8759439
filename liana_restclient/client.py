"""
REST client for the Liana Technologies API.

Every call is signed with the account's shared secret and the JSON
response is checked against the success contract of the configured
API version.
"""

import json
import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Dict, Mapping, Optional, Union

import requests

from .config import ClientConfig
from .constants import (
    CONTENT_TYPE_JSON,
    DEFAULT_CONFIG,
    ENDPOINT_TEMPLATE,
    HEADER_AUTHORIZATION,
    HEADER_CONTENT_MD5,
    HEADER_CONTENT_TYPE,
    HEADER_DATE,
    SUPPORTED_API_VERSIONS,
)
from .exceptions import (
    APIError,
    ConfigurationError,
    SerializationError,
    TransportError,
    UnexpectedResponseError,
)
from .signer import authorization_header, body_md5, rfc3339_now, sign

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class SigningContext:
    """Everything derived for a single call; built fresh per call."""

    method: str
    endpoint: str
    url: str
    body: str
    body_md5: str
    timestamp: str
    headers: Mapping[str, str]


def serialize_params(params: Any) -> str:
    """
    Encode call parameters as compact JSON.

    Raises:
        SerializationError: If params contain values JSON cannot represent
    """
    try:
        return json.dumps(params, separators=(',', ':'), ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError) as e:
        raise SerializationError(f"cannot encode params as JSON: {e}") from e


def build_request(config: ClientConfig, path: str, params: Any = None, method: str = 'POST',
                  clock: Callable[[], str] = rfc3339_now) -> SigningContext:
    """
    Compose a signed request without sending it.

    Args:
        config: Client configuration
        path: Path below /api/v{version}/
        params: JSON-serializable call parameters
        method: HTTP method; GET requests carry an empty body
        clock: Returns the RFC3339 timestamp for the Date header

    Returns:
        SigningContext holding url, body and headers

    Raises:
        SerializationError: If params cannot be encoded
    """
    method = method.upper()

    # Serialize first so bad params fail even for GET
    body = serialize_params(params)
    if method == 'GET':
        body = ''

    body_hash = body_md5(body)
    timestamp = clock()
    endpoint = ENDPOINT_TEMPLATE.format(version=config.api_version, path=path)

    signature = sign(method, endpoint, body_hash, timestamp, body, config.secret)

    headers = {
        HEADER_CONTENT_TYPE: CONTENT_TYPE_JSON,
        HEADER_CONTENT_MD5: body_hash,
        HEADER_DATE: timestamp,
        HEADER_AUTHORIZATION: authorization_header(config.realm, config.user_id, signature),
    }

    return SigningContext(
        method=method,
        endpoint=endpoint,
        url=config.api_url + endpoint,
        body=body,
        body_md5=body_hash,
        timestamp=timestamp,
        headers=MappingProxyType(headers),
    )


def _decode_object(raw: str) -> Dict[str, Any]:
    # Anything other than a JSON object is treated as an empty response
    try:
        results = json.loads(raw)
    except ValueError:
        return {}
    if not isinstance(results, dict):
        return {}
    return results


def interpret_response(api_version: int, raw: Union[bytes, str], endpoint: str) -> Any:
    """
    Apply the success contract of an API version to a raw response body.

    Versions 1 and 2 answer {"succeed": bool, "result": ..., "message": ...};
    version 3 answers {"items": ...}.

    Args:
        api_version: Configured API version
        raw: Response body
        endpoint: Endpoint path, used to prefix API error messages

    Returns:
        The response payload (any JSON value)

    Raises:
        ConfigurationError: If api_version is not supported
        UnexpectedResponseError: If the version's required field is missing
            or succeed is not a boolean
        APIError: If a version 1/2 response reports failure
    """
    if isinstance(raw, bytes):
        raw = raw.decode('utf-8', errors='replace')

    if api_version not in SUPPORTED_API_VERSIONS:
        raise ConfigurationError(f"unexpected api version {api_version}")

    results = _decode_object(raw)

    if api_version == 3:
        if 'items' not in results:
            raise UnexpectedResponseError(raw)
        return results['items']

    if 'succeed' not in results:
        raise UnexpectedResponseError(raw)
    succeed = results['succeed']
    if not isinstance(succeed, bool):
        raise UnexpectedResponseError(raw)
    if succeed is False:
        raise APIError(endpoint, str(results.get('message') or ''))
    return results.get('result')


class RestClient:
    """
    Client for the Liana REST API.

    Each call builds its own SigningContext, so a single instance can be
    shared between threads.
    """

    def __init__(self, config: ClientConfig, clock: Optional[Callable[[], str]] = None,
                 session: Optional[requests.Session] = None, **options):
        """
        Initialize REST client.

        Args:
            config: Client configuration
            clock: Time source returning an RFC3339 string (default: real clock)
            session: requests.Session to send with (default: a new one)
            **options: Configuration options (timeout)
        """
        self.config = config
        self.clock = clock or rfc3339_now

        # Merge default options with user overrides
        self.options = {**DEFAULT_CONFIG, **options}

        if self.options['timeout'] <= 0:
            raise ConfigurationError("timeout must be positive")

        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()

    def call(self, path: str, params: Any = None, method: str = 'POST') -> Any:
        """
        Perform a signed call to the API.

        Args:
            path: Path below /api/v{version}/, e.g. "unit/test"
            params: JSON-serializable parameters
            method: HTTP method (default POST)

        Returns:
            The payload of a successful response

        Raises:
            SerializationError: If params cannot be encoded
            TransportError: If the HTTP request fails
            UnexpectedResponseError: If the response has an unexpected shape
            APIError: If the API reports failure
        """
        context = build_request(self.config, path, params, method, clock=self.clock)

        logger.debug("%s %s (Content-MD5 %s)", context.method, context.url, context.body_md5)

        try:
            response = self.session.request(
                context.method,
                context.url,
                data=context.body.encode('utf-8'),
                headers=dict(context.headers),
                timeout=self.options['timeout'],
            )
        except requests.RequestException as e:
            raise TransportError(f"HTTP request failed: {e}") from e

        with response:
            try:
                raw = response.content
            except requests.RequestException as e:
                raise TransportError(f"reading response failed: {e}") from e

        logger.debug("%s answered with status %s", context.endpoint, response.status_code)

        return interpret_response(self.config.api_version, raw, context.endpoint)

    def get(self, path: str) -> Any:
        """Make signed GET call."""
        return self.call(path, method='GET')

    def post(self, path: str, params: Any = None) -> Any:
        """Make signed POST call."""
        return self.call(path, params, method='POST')

    def close(self):
        """Close HTTP session if this client created it."""
        if self._owns_session and self.session:
            self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
