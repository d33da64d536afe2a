"""Name conventions shared by requests and records.

Why here:
- Command names are written snake_case in Python but the Trading API wants
  them CamelCase (with its own "eBay" spelling).
- Record lookups compare keys in a single canonical form, so the same rule
  has to be used wherever keys are indexed or requested.
"""

from __future__ import annotations

from typing import Any


def camelize(command: Any) -> str:
    """Convert `get_ebay_official_time` into `GeteBayOfficialTime`.

    Names that are not entirely lower case are assumed to be spelled the way
    the API expects and are returned untouched.
    """

    text = str(command)
    if text != text.lower():
        return text
    return "".join(part.capitalize() for part in text.split("_")).replace("Ebay", "eBay")


def canonical_key(key: Any) -> str:
    """Canonical lookup form: separators dropped, case folded.

    `ShortMessage`, `short_message` and `SHORTMESSAGE` all map to
    `shortmessage`.
    """

    return str(key).replace("_", "").replace("-", "").casefold()
