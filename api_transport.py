# api_transport.py - transport contract and the requests-backed default
import asyncio
from dataclasses import dataclass, field
from typing import Dict, Optional, Protocol

import requests

from api_errors import TransportError


@dataclass(frozen=True)
class RequestSpec:
    url: str
    method: str
    headers: Dict[str, str] = field(default_factory=dict)
    body: Optional[bytes] = None


@dataclass(frozen=True)
class TransportResponse:
    status_code: Optional[int]
    body: bytes = b""


class Transport(Protocol):
    async def send(self, request: RequestSpec) -> TransportResponse:
        ...


class RequestsTransport:
    """Sends requests through a requests.Session on a worker thread."""

    def __init__(self, session: Optional[requests.Session] = None):
        self.session = session or requests.Session()

    def _send(self, request: RequestSpec) -> TransportResponse:
        resp = self.session.request(
            request.method,
            request.url,
            headers=request.headers,
            data=request.body,
        )
        return TransportResponse(resp.status_code, resp.content or b"")

    async def send(self, request: RequestSpec) -> TransportResponse:
        try:
            return await asyncio.to_thread(self._send, request)
        except requests.RequestException as e:
            raise TransportError(f"{request.method} {request.url} failed: {e}") from e

    def close(self) -> None:
        self.session.close()
