"""Response wrapper.

Responsibility:
- Parse the XML body and convert the root element into plain mappings/lists.
- Expose the `<Command>Response` body as a `Record`.
- Read the Ack and the `Errors` collection; raising is left to the caller
  (`raise_for_ack`).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from ebayr.adapters.xml_parser import XmlNode, parse_xml
from ebayr.core.domain.models import ErrorDetail, RawResponse
from ebayr.core.domain.record import Record
from ebayr.core.errors import CallError

if TYPE_CHECKING:
    from ebayr.core.request import Request

logger = logging.getLogger(__name__)

SUCCESSFUL_ACKS = frozenset({"success", "warning"})

# Key under which the text of an element that also has attributes is kept.
CONTENT_KEY = "value"


def node_to_structure(node: XmlNode) -> Any:
    """Convert an `XmlNode` into the mapping/list/str shape `Record` wraps.

    - text-only element -> its text (`None` when empty);
    - attributes -> keys of the element's mapping, text under `"value"`;
    - children -> mapping by tag, repeated tags collected into a list.
    """

    if not node.children and not node.attributes:
        return node.text

    data: dict[str, Any] = dict(node.attributes)
    if node.text is not None and not node.children:
        data[CONTENT_KEY] = node.text

    grouped: dict[str, list[Any]] = {}
    for child in node.children:
        grouped.setdefault(child.tag, []).append(node_to_structure(child))
    for tag, values in grouped.items():
        data[tag] = values if len(values) > 1 else values[0]
    return data


class Response:
    """Parsed answer to a `Request`.

    Field lookups are delegated to the body record, so `response.ack`,
    `response["Item"]` and `response.item.title` read the
    `<Command>Response` element directly.
    """

    def __init__(self, request: Request | None, raw: RawResponse) -> None:
        self.request = request
        self.raw = raw
        self.command = request.command if request is not None else None
        self.record = Record(self._extract_body(raw.body))

    @classmethod
    def build(cls, request: Request | None, raw: RawResponse) -> "Response":
        return cls(request, raw)

    def _extract_body(self, text: str) -> Any:
        if not text or not text.strip():
            logger.warning("Empty response body for %s (HTTP %s)", self.command, self.raw.status_code)
            return {}

        root = parse_xml(text)
        expected = f"{self.command}Response" if self.command else None
        if expected and root.tag != expected:
            logger.warning("Expected <%s> but the response root is <%s>", expected, root.tag)

        body = node_to_structure(root)
        return body if isinstance(body, dict) else {}

    # Status -----------------------------------------------------------------

    @property
    def status_code(self) -> int:
        return self.raw.status_code

    @property
    def ack(self) -> str | None:
        value = self.record.get("ack")
        return None if value is None else str(value)

    @property
    def success(self) -> bool:
        return (self.ack or "").casefold() in SUCCESSFUL_ACKS

    def is_success(self) -> bool:
        return self.success

    @property
    def errors(self) -> list[Record]:
        errors = self.record.get("errors")
        if errors is None:
            return []
        if isinstance(errors, Record):
            return [errors]
        return [e for e in errors if isinstance(e, Record)]

    def error_details(self) -> list[ErrorDetail]:
        return [ErrorDetail.from_record(e) for e in self.errors]

    @property
    def warnings(self) -> list[ErrorDetail]:
        return [d for d in self.error_details() if d.is_warning]

    def raise_for_ack(self) -> "Response":
        """Raise `CallError` unless the Ack is Success or Warning."""

        if not self.success:
            raise CallError(
                self.command or "<unknown>",
                self.ack,
                errors=self.errors,
                details=self.error_details(),
            )
        return self

    # Record delegation ------------------------------------------------------

    def get(self, key: Any, default: Any = None) -> Any:
        return self.record.get(key, default)

    def __getitem__(self, key: Any) -> Any:
        return self.record[key]

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_") or name in {"record", "raw", "request", "command"}:
            raise AttributeError(name)
        return self.record.get(name)

    def __contains__(self, key: object) -> bool:
        return key in self.record

    def to_python(self) -> Any:
        return self.record.to_python()

    def __repr__(self) -> str:
        return f"<Response {self.command} ack={self.ack!r} status={self.status_code}>"
