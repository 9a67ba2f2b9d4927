"""
Infrastructure adapter: httpx → IHttpHelper.

All httpx details are confined here. Authentication is attached by whoever
builds the injected httpx.Client (e.g. `httpx.Client(auth=...)`); this adapter
never adds headers of its own.
"""

import logging
from typing import Optional

import httpx

from daocore.domain.exceptions import TransportError
from daocore.domain.ports.http_port import HttpResponse, IHttpHelper

logger = logging.getLogger(__name__)


class HttpxHelper(IHttpHelper):
    """Synchronous HTTP transport backed by a shared httpx.Client."""

    def __init__(self, client: Optional[httpx.Client] = None, timeout: float = 10) -> None:
        self._client = client or httpx.Client(timeout=timeout)

    def get(self, uri: str) -> HttpResponse:
        return self._send("GET", uri)

    def post(self, uri: str) -> HttpResponse:
        return self._send("POST", uri)

    def close(self) -> None:
        self._client.close()

    def _send(self, method: str, uri: str) -> HttpResponse:
        try:
            response = self._client.request(method, uri)
        except httpx.HTTPError as exc:
            logger.error("%s %s failed: %s", method, uri, exc)
            raise TransportError(f"{method} {uri} failed: {exc}") from exc

        return HttpResponse(
            status_code=response.status_code,
            body=response.content,
            headers=dict(response.headers),
            encoding=response.encoding or "utf-8",
        )
