# api_client.py - minimal async HTTP client wrapper around a pluggable transport
import warnings
from enum import Enum
from typing import Any, Dict, Optional, Union
from urllib.parse import urlparse

from requests.exceptions import InvalidSchema, InvalidURL, MissingSchema
from requests.models import PreparedRequest
from requests.structures import CaseInsensitiveDict

from api_config import APIConfig, default_config
from api_errors import APIServiceError, MalformedURLError, ResponseError, TransportError
from api_transport import RequestSpec, RequestsTransport, Transport
from utils.logger import get_logger
from utils.payload_codec import decode_result, encode_payload

logger = get_logger(__name__)

DEFAULT_HEADERS = {"Content-Type": "application/json"}
SUCCESS_STATUS = range(200, 205)


class Method(str, Enum):
    GET = "GET"
    PUT = "PUT"
    POST = "POST"
    DELETE = "DELETE"


def _safe_headers(headers: Dict[str, str]) -> Dict[str, str]:
    safe = dict(headers)
    for k, v in safe.items():
        if k.lower() == "authorization":
            safe[k] = v.split(" ", 1)[0] + " [REDACTED]"
    return safe


class APIClient:
    """Builds, sends and decodes JSON requests against the configured base URL.

    The base URL lives in an ``APIConfig``; by default the process-wide one, so
    ``APIClient.set_base_url(...)`` is seen by every client. Extra headers are
    set per instance with ``insert_header`` and chain fluently:

        >>> APIClient.set_base_url("https://example.com/api/")
        >>> user = await APIClient().insert_header({"Authorization": "Bearer X"}).make_request(
        ...     Method.POST, "users", {"name": "John Doe"}, User
        ... )
    """

    def __init__(self, transport: Optional[Transport] = None, config: Optional[APIConfig] = None):
        self.transport = transport or RequestsTransport()
        self.config = config or default_config
        self.headers: Optional[Dict[str, str]] = None

    @staticmethod
    def set_base_url(url: str) -> None:
        """Set the base URL of your API, e.g. "https://baseurl.com/api/"."""
        default_config.set_base_url(url)

    def insert_header(self, headers: Optional[Dict[str, str]]) -> "APIClient":
        """Replace the extra headers sent with every request. ``None`` clears them."""
        self.headers = dict(headers) if headers else None
        return self

    def _url(self, endpoint: str) -> str:
        # plain concatenation, callers own the slashes
        url = f"{self.config.base_url}{endpoint}"
        try:
            PreparedRequest().prepare_url(url, None)
        except (MissingSchema, InvalidSchema, InvalidURL) as e:
            raise MalformedURLError(url, str(e)) from e
        if urlparse(url).scheme.lower() not in ("http", "https"):
            raise MalformedURLError(url, "unsupported scheme")
        return url

    def _build_headers(self) -> Dict[str, str]:
        # header names are case-insensitive, the caller's spelling wins
        headers = CaseInsensitiveDict(DEFAULT_HEADERS)
        if self.headers:
            headers.update(self.headers)
        return dict(headers)

    def _build_request(self, method: Method, endpoint: str, payload: Any = None) -> RequestSpec:
        url = self._url(endpoint)
        body = encode_payload(payload) if payload is not None else None
        return RequestSpec(url=url, method=method.value, headers=self._build_headers(), body=body)

    async def make_request(
        self,
        method: Union[Method, str],
        endpoint: str,
        payload: Any = None,
        result_type: Any = Any,
    ) -> Any:
        """Send one request and decode its JSON response.

        Args:
            method: HTTP verb, a ``Method`` or its name ("get", "POST", ...).
            endpoint: path appended verbatim to the base URL.
            payload: optional value sent as the JSON body.
            result_type: type the response body is validated into.

        Returns:
            The decoded response.

        Raises:
            MalformedURLError: base URL + endpoint is not a valid http(s) URL.
            EncodingError: the payload is not JSON serializable.
            TransportError: the request could not be sent.
            ResponseError: no status code, or a status outside 200-204.
            DecodingError: the body does not decode into ``result_type``.
        """
        if not isinstance(method, Method):
            method = Method(str(method).upper())
        try:
            request = self._build_request(method, endpoint, payload)
            logger.debug("%s %s headers=%s", request.method, request.url, _safe_headers(request.headers))
            try:
                response = await self.transport.send(request)
            except APIServiceError:
                raise
            except Exception as e:
                raise TransportError(f"{request.method} {request.url} failed: {e}") from e
            logger.debug("%s %s -> status %s", request.method, request.url, response.status_code)

            if response.status_code is None or response.status_code not in SUCCESS_STATUS:
                raise ResponseError(response.status_code, response.body)
            return decode_result(response.body, result_type)
        except APIServiceError as e:
            logger.debug("%s %s%s failed: [%s] %s", method.value, self.config.base_url, endpoint, e.code, e)
            raise

    async def get(self, endpoint: str, result_type: Any = Any) -> Any:
        warnings.warn("get() is deprecated. Use make_request() instead.", DeprecationWarning, stacklevel=2)
        return await self.make_request(Method.GET, endpoint, result_type=result_type)

    async def post(self, endpoint: str, payload: Any, result_type: Any = Any) -> Any:
        warnings.warn("post() is deprecated. Use make_request() instead.", DeprecationWarning, stacklevel=2)
        return await self.make_request(Method.POST, endpoint, payload, result_type)

    async def put(self, endpoint: str, payload: Any, result_type: Any = Any) -> Any:
        warnings.warn("put() is deprecated. Use make_request() instead.", DeprecationWarning, stacklevel=2)
        return await self.make_request(Method.PUT, endpoint, payload, result_type)
