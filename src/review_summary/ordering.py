"""Ordering and layout-weight helpers.

Sibling sections and blocks are ordered by an optional explicit ``_order``
rank.  Nodes without a rank sort after every ranked node and keep their
label-document order among themselves::

    ranks  {A: 2, B: 1, C: None}  ->  B, A, C

Fields are never reordered.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from typing import Any, Protocol, TypeVar

__all__ = [
    "DEFAULT_COLSPAN",
    "MAX_COLSPAN",
    "MIN_COLSPAN",
    "clamp_colspan",
    "is_number",
    "sort_by_order",
]

DEFAULT_COLSPAN = 6
MIN_COLSPAN = 1
MAX_COLSPAN = 12


class _Ranked(Protocol):
    @property
    def order(self) -> int | float | None: ...


T = TypeVar("T", bound=_Ranked)


def is_number(value: Any) -> bool:
    """True for int/float values, excluding bool (a subclass of int)."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def sort_by_order(nodes: Iterable[T]) -> list[T]:
    """Stable sort: explicit ``order`` ascending, unranked nodes last."""
    return sorted(nodes, key=lambda node: (node.order is None, node.order or 0))


def clamp_colspan(value: Any) -> int:
    """Normalize a configured colspan into [MIN_COLSPAN, MAX_COLSPAN].

    Non-numeric values (including numeric strings and booleans) fall back to
    ``DEFAULT_COLSPAN``.  Fractional values are truncated after clamping.
    """
    if not is_number(value) or math.isnan(value):
        return DEFAULT_COLSPAN
    return int(min(max(value, MIN_COLSPAN), MAX_COLSPAN))
