"""XML parse boundary (ElementTree).

Responsibility:
- Turn raw XML text into a plain `XmlNode` tree (tag, attributes, children,
  text) with namespaces stripped from tag and attribute names.
- Nothing else: converting the tree into `Record` data is the response
  layer's job.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field

from ebayr.core.errors import MalformedResponseError


@dataclass(frozen=True)
class XmlNode:
    tag: str
    attributes: dict[str, str] = field(default_factory=dict)
    children: list["XmlNode"] = field(default_factory=list)
    text: str | None = None


def strip_namespace(name: str) -> str:
    """`{urn:ebay:apis:eBLBaseComponents}Ack` -> `Ack`."""

    if name.startswith("{"):
        return name.split("}", 1)[1]
    return name


def _to_node(element: ET.Element) -> XmlNode:
    text = element.text if element.text and element.text.strip() else None
    return XmlNode(
        tag=strip_namespace(element.tag),
        attributes={strip_namespace(k): v for k, v in element.attrib.items()},
        children=[_to_node(child) for child in element],
        text=text,
    )


def parse_xml(text: str | bytes) -> XmlNode:
    """Parse a document and return its root element.

    The XML declaration/prolog is skipped by the parser itself.
    """

    if isinstance(text, str):
        # Parse bytes so the declared encoding and the data agree.
        data: str | bytes = text.strip().encode("utf-8")
    else:
        data = text.strip()
    try:
        root = ET.fromstring(data)
    except ET.ParseError as exc:
        raise MalformedResponseError(f"response body is not well-formed XML: {exc}") from exc
    return _to_node(root)
