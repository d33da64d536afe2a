"""Exceptions raised by ebayr.

Transport failures are not wrapped: `httpx.HTTPError` subclasses (connect,
timeout, TLS) reach the caller as httpx raised them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ebayr.core.domain.models import ErrorDetail
    from ebayr.core.domain.record import Record


class EbayrError(Exception):
    """Base class for errors raised by this package."""


class MalformedResponseError(EbayrError, ValueError):
    """The response body could not be parsed as XML."""


class CallError(EbayrError):
    """The API answered, but its Ack reports a failure.

    Only raised on request, through `Response.raise_for_ack()`; by default
    the errors are inspected on the response instead.
    """

    def __init__(
        self,
        command: str,
        ack: str | None,
        errors: list[Record] | None = None,
        details: list[ErrorDetail] | None = None,
    ) -> None:
        self.command = command
        self.ack = ack
        self.errors = errors or []
        self.details = details or []
        summary = "; ".join(str(d) for d in self.details if not d.is_warning) or "no error details"
        super().__init__(f"{command} failed (Ack={ack}): {summary}")
