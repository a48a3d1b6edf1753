# api_errors.py - exceptions raised by the API client
from typing import Optional

MALFORMED_URL = 1
NO_STATUS_CODE = 2
ENCODING_FAILED = 3
TRANSPORT_FAILED = 4
DECODING_FAILED = 5


class APIServiceError(Exception):
    """Base error for everything the client raises."""

    code = 0

    def __init__(self, message: str, code: Optional[int] = None):
        super().__init__(message)
        if code is not None:
            self.code = code


class MalformedURLError(APIServiceError):
    """Base URL + endpoint did not form a valid URL."""

    code = MALFORMED_URL

    def __init__(self, url: str, reason: str = ""):
        message = f"Invalid URL: {url!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.url = url


class EncodingError(APIServiceError):
    """Payload could not be serialized to JSON."""

    code = ENCODING_FAILED


class TransportError(APIServiceError):
    """The transport failed before a response was received."""

    code = TRANSPORT_FAILED


class ResponseError(APIServiceError):
    """Response had no status code, or one outside 200-204.

    For a bad status the status code itself is the error code.
    """

    def __init__(self, status_code: Optional[int], body: bytes = b""):
        if status_code is None:
            super().__init__("Response error: no status code", NO_STATUS_CODE)
        else:
            super().__init__(f"Response error: status {status_code}", status_code)
        self.status_code = status_code
        self.body = body


class DecodingError(APIServiceError):
    """Response body could not be decoded into the requested type."""

    code = DECODING_FAILED
