"""Domain models (Pydantic v2).

Why Pydantic here:
- The transport boundary and the error summaries are small, fixed shapes;
  validating them at the edge keeps `Request`/`Response` free of checks.
- Response bodies themselves are *not* modelled: the Trading API has
  hundreds of calls, so bodies stay as `Record` views.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

if TYPE_CHECKING:
    from ebayr.core.domain.record import Record


class RawResponse(BaseModel):
    """What a `Transport` hands back: status, headers and body text."""

    model_config = ConfigDict(frozen=True)

    status_code: int = Field(
        ...,
        ge=100,
        le=599,
        description="HTTP status code.",
    )
    headers: dict[str, str] = Field(
        default_factory=dict,
        description="Response headers.",
    )
    body: str = Field(
        default="",
        description="Decoded response body (XML text).",
    )


class ErrorDetail(BaseModel):
    """Typed summary of one entry of a response's `Errors` collection."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    error_code: str | None = Field(
        default=None,
        description="API error code (`ErrorCode`).",
    )
    short_message: str | None = Field(
        default=None,
        description="Short message (`ShortMessage`).",
    )
    long_message: str | None = Field(
        default=None,
        description="Long message (`LongMessage`).",
    )
    severity_code: str | None = Field(
        default=None,
        description="`Error` or `Warning`.",
    )
    error_classification: str | None = Field(
        default=None,
        description="`RequestError` or `SystemError`.",
    )

    @classmethod
    def from_record(cls, record: Record) -> "ErrorDetail":
        def text(name: str) -> str | None:
            value = record.get(name)
            return None if value is None else str(value)

        return cls(
            error_code=text("error_code"),
            short_message=text("short_message"),
            long_message=text("long_message"),
            severity_code=text("severity_code"),
            error_classification=text("error_classification"),
        )

    @property
    def is_warning(self) -> bool:
        return (self.severity_code or "").casefold() == "warning"

    def __str__(self) -> str:
        message = self.long_message or self.short_message or "unknown error"
        return f"[{self.error_code}] {message}" if self.error_code else message
