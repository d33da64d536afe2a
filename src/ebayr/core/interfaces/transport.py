"""Transport contract.

Why Protocol:
- A structural contract (duck typing) without inheritance.
- `Request.send` only needs "post bytes, get status/headers/body back", so
  tests can pass a stub and the httpx adapter stays swappable.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ebayr.core.domain.models import RawResponse


@runtime_checkable
class Transport(Protocol):
    """Minimal contract for sending a request body.

    Design rules:
    - `post` is synchronous and blocking; `timeout` bounds the read.
    - Connection/timeout/TLS failures are raised, never turned into a
      `RawResponse`.
    """

    def post(
        self,
        url: str,
        *,
        headers: dict[str, str],
        content: str,
        timeout: float,
    ) -> RawResponse:
        """Send `content` to `url` and return the raw answer."""

        ...
