"""A very small XML serializer for Trading API input.

The input is a plain Python structure:

- mappings become nested tags, in iteration order;
- lists/tuples under a key become repeated sibling tags;
- a mapping with both a ``"value"`` and an ``"attr"`` key (or an
  :class:`Attributed`) becomes a tag carrying XML attributes;
- everything else is a scalar rendered through :func:`serialize_input`.

Limitations:
- Nothing is escaped. Callers pre-escape ``&``, ``<`` and ``>`` in text and
  quotes in attribute values.
- Unknown shapes are not rejected; they fall back to ``str()``.

    >>> xml("Hello!")
    'Hello!'
    >>> xml({"foo": "Bar"})
    '<foo>Bar</foo>'
    >>> xml({"foo": ["Bar", "Baz"]})
    '<foo>Bar</foo><foo>Baz</foo>'
    >>> xml({"foo": {"value": "Bar", "attr": {"name": "baz"}}})
    '<foo name="baz">Bar</foo>'
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import Any

VALUE_KEY = "value"
ATTR_KEY = "attr"


@dataclass(frozen=True)
class Attributed:
    """Explicit form of ``{"value": ..., "attr": {...}}``."""

    value: Any
    attr: Mapping[str, Any] = field(default_factory=dict)


def xml(*structures: Any) -> str:
    """Serialize every argument and join the fragments with no separator."""

    return "".join(serialize(structure) for structure in structures)


def serialize(value: Any) -> str:
    if isinstance(value, Attributed):
        return serialize(value.value)
    if isinstance(value, Mapping):
        return serialize_mapping(value)
    if _is_sequence(value):
        return "".join(serialize(item) for item in value)
    return serialize_input(value)


def serialize_mapping(mapping: Mapping[Any, Any]) -> str:
    parts: list[str] = []
    for key, value in mapping.items():
        if _is_sequence(value):
            for item in value:
                if isinstance(item, Attributed):
                    parts.append(serialize_with_attributes(key, item))
                else:
                    parts.append(f"<{key}>{serialize(item)}</{key}>")
        elif is_attributed(value):
            parts.append(serialize_with_attributes(key, value))
        else:
            parts.append(f"<{key}>{serialize(value)}</{key}>")
    return "".join(parts)


def serialize_with_attributes(key: Any, value: Mapping[str, Any] | Attributed) -> str:
    """``{"foo": {"value": "Bar", "attr": {"name": "baz"}}}`` gives ``<foo name="baz">Bar</foo>``."""

    if isinstance(value, Attributed):
        inner, attributes = value.value, value.attr
    else:
        inner, attributes = value[VALUE_KEY], value[ATTR_KEY]

    rendered = " ".join(f'{name}="{serialize_input(attr)}"' for name, attr in (attributes or {}).items())
    open_tag = f"<{key} {rendered}>" if rendered else f"<{key}>"
    return f"{open_tag}{serialize(inner)}</{key}>"


def serialize_input(value: Any) -> str:
    """Render a scalar as Trading API text.

    - datetimes are converted to UTC, ISO 8601 with a trailing ``Z``
      (naive values are read as local time);
    - booleans are ``true``/``false``;
    - ``None`` is the empty string.
    """

    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        return value.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def is_attributed(value: Any) -> bool:
    if isinstance(value, Attributed):
        return True
    return isinstance(value, Mapping) and VALUE_KEY in value and ATTR_KEY in value


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))
