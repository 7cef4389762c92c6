"""Key-name based display-type inference.

``infer_type`` only runs for fields whose label carries no explicit type.
Rules are checked in order and the first match wins:

1. native boolean value            -> BOOLEAN
2. key contains "email"            -> EMAIL
3. key contains "phone" or "tel"   -> PHONE
4. key contains amount/budget/cost/price -> CURRENCY
5. key contains "date", or value is a "YYYY-MM-DD" string -> DATE
6. otherwise                       -> TEXT
"""

from __future__ import annotations

import re
from typing import Any

from review_summary.tree.nodes import FieldType

__all__ = ["ISO_DATE", "infer_type"]

# Literal calendar date with no time component, e.g. "2026-12-31"
ISO_DATE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")

_CURRENCY_HINTS = ("amount", "budget", "cost", "price")


def infer_type(key: str, value: Any) -> FieldType:
    """Return the display type for ``value`` stored under ``key``.

    Args:
        key:   The data key (matched case-insensitively).
        value: The raw data value.

    Returns:
        The inferred ``FieldType``.
    """
    if isinstance(value, bool):
        return FieldType.BOOLEAN

    key_lower = key.lower()

    if "email" in key_lower:
        return FieldType.EMAIL

    if "phone" in key_lower or "tel" in key_lower:
        return FieldType.PHONE

    if any(hint in key_lower for hint in _CURRENCY_HINTS):
        return FieldType.CURRENCY

    if "date" in key_lower or (
        isinstance(value, str) and ISO_DATE.fullmatch(value) is not None
    ):
        return FieldType.DATE

    return FieldType.TEXT
