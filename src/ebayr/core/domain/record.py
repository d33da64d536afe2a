"""Case-insensitive, read-only view over parsed response data.

Why a view and not a converted dict:
- Responses can be large and most callers read a handful of fields, so
  nested values are wrapped on access instead of copied up front.
- Keys from the API are CamelCase (`ShortMessage`, `eBayAuthToken`); Python
  callers write `record.short_message`. Both reach the same value because
  lookups go through `canonical_key`.

Missing keys are not errors: `record.get("nope")`, `record["nope"]` and
`record.nope` all return `None`. Navigating *through* a missing field
(`record.nope.deeper`) fails immediately with `AttributeError` on `None`.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any

from ebayr.core.naming import canonical_key


def wrap(value: Any) -> Any:
    """Wrapping rule applied to every value read through a `Record`."""

    if isinstance(value, Record):
        return value
    if isinstance(value, Mapping):
        return Record(value)
    if isinstance(value, (list, tuple)):
        return [Record(item) if isinstance(item, Mapping) else item for item in value]
    return value


class Record:
    """Immutable wrapper around a mapping or a sequence.

    - Mapping-backed records support `get`, `[key]` and attribute access.
    - Sequence-backed records support `[index]` only.

    If two stored keys share a canonical form (`Foo` and `foo`), the first in
    iteration order is the one returned. Responses should not contain such
    pairs.

    Fields named like a method (`Items`, `Keys`, `Values`) are shadowed for
    attribute access; read them with `record["Items"]`.
    """

    __slots__ = ("_data", "_index")

    def __init__(self, data: Any = None) -> None:
        if isinstance(data, Record):
            data = data._data
        if data is None:
            data = {}
        if isinstance(data, Mapping):
            index: dict[str, Any] | None = {}
            for key in data:
                index.setdefault(canonical_key(key), key)
        elif isinstance(data, (list, tuple)):
            index = None
        else:
            raise TypeError(f"Record expects a mapping or a sequence, got {type(data).__name__}")

        object.__setattr__(self, "_data", data)
        object.__setattr__(self, "_index", index)

    # Lookup -----------------------------------------------------------------

    @property
    def is_sequence(self) -> bool:
        return self._index is None

    def get(self, key: Any, default: Any = None) -> Any:
        if self._index is None:
            raise TypeError("key lookup is not supported on a sequence-backed Record")
        canonical = canonical_key(key)
        if canonical not in self._index:
            return default
        return wrap(self._data[self._index[canonical]])

    def __getitem__(self, key: Any) -> Any:
        if self._index is None:
            if isinstance(key, slice):
                return [wrap(item) for item in self._data[key]]
            return wrap(self._data[key])
        return self.get(key)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_") or self._index is None:
            raise AttributeError(name)
        return self.get(name)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Record is read-only")

    def __delattr__(self, name: str) -> None:
        raise AttributeError("Record is read-only")

    def __contains__(self, key: object) -> bool:
        if self._index is None:
            return key in self._data
        return canonical_key(key) in self._index

    # Container protocol -----------------------------------------------------

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[Any]:
        if self._index is None:
            return (wrap(item) for item in self._data)
        return iter(self._data)

    def __bool__(self) -> bool:
        return bool(self._data)

    def keys(self) -> list[Any]:
        if self._index is None:
            raise TypeError("a sequence-backed Record has no keys")
        return list(self._data.keys())

    def items(self) -> list[tuple[Any, Any]]:
        return [(key, self.get(key)) for key in self.keys()]

    def values(self) -> list[Any]:
        return [value for _, value in self.items()]

    def to_python(self) -> Any:
        """Return the underlying (unwrapped) data."""

        return self._data

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Record):
            return self._data == other._data
        if isinstance(other, (Mapping, list, tuple)):
            return self._data == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __reduce__(self) -> tuple[Any, ...]:
        return (Record, (self._data,))

    def __repr__(self) -> str:
        return f"Record({self._data!r})"
