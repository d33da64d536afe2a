"""httpx wrapper.

Why a wrapper:
- Standardizes timeouts, headers and TLS verification for every call.
- Keeps httpx out of the core: `HttpxTransport` satisfies the `Transport`
  protocol and can be replaced by a stub in tests.
"""

from __future__ import annotations

import logging

import httpx

from ebayr.core.config import EbayrSettings
from ebayr.core.domain.models import RawResponse

logger = logging.getLogger(__name__)


def build_client(
    settings: EbayrSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Create an `httpx.Client` with the configured defaults.

    Why a builder:
    - Centralizes timeouts/headers so every call behaves the same way.
    - `transport` lets tests plug in `httpx.MockTransport`.
    """

    settings = settings or EbayrSettings()
    headers: dict[str, str] = {"Accept": "text/xml, application/xml;q=0.9, */*;q=0.8"}
    if extra_headers:
        headers.update(extra_headers)
    return httpx.Client(
        timeout=httpx.Timeout(settings.http_timeout),
        verify=settings.verify_ssl,
        headers=headers,
        transport=transport,
    )


class HttpxTransport:
    """`Transport` backed by a (possibly shared) `httpx.Client`.

    Without an explicit client a fresh one is opened and closed per call.
    No retries: errors raised by httpx propagate unchanged.
    """

    def __init__(
        self,
        settings: EbayrSettings | None = None,
        *,
        client: httpx.Client | None = None,
    ) -> None:
        self._settings = settings or EbayrSettings()
        self._client = client

    def post(
        self,
        url: str,
        *,
        headers: dict[str, str],
        content: str,
        timeout: float,
    ) -> RawResponse:
        # Only the read is bounded by the call timeout; connect/pool keep the client's.
        client_timeout = self._client.timeout if self._client is not None else httpx.Timeout(timeout)
        request_timeout = httpx.Timeout(
            connect=client_timeout.connect,
            read=timeout,
            write=client_timeout.write,
            pool=client_timeout.pool,
        )

        logger.debug("POST %s (%d bytes, read timeout %.1fs)", url, len(content), timeout)
        if self._client is not None:
            resp = self._client.post(url, headers=headers, content=content.encode("utf-8"), timeout=request_timeout)
        else:
            with build_client(self._settings) as client:
                resp = client.post(url, headers=headers, content=content.encode("utf-8"), timeout=request_timeout)

        logger.debug("POST %s -> HTTP %s", url, resp.status_code)
        return RawResponse(
            status_code=resp.status_code,
            headers=dict(resp.headers),
            body=resp.text,
        )
