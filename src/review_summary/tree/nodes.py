"""Label-tree node types and data-value kinds.

The label document is converted into a closed union of frozen dataclasses:

- ``FieldLabel``      : a leaf label
- ``GroupLabel``      : a section or block descriptor with ordered entries.  An
                        object carrying a non-empty ``label`` string keeps a
                        ``field`` reading too; the data shape decides which
                        reading applies.
- ``ArrayItemLabel``  : a list-form item schema for array-valued data

Data values are classified into a ``DataKind`` so the matcher can dispatch on
``(label, kind)`` pairs with a single ``match`` statement.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Any

from review_summary.ordering import DEFAULT_COLSPAN

__all__ = [
    "DEFAULT_COLSPAN",
    "ArrayItemLabel",
    "DataKind",
    "FieldLabel",
    "FieldType",
    "GroupLabel",
    "LabelDiagnostic",
    "LabelNode",
    "classify_data",
    "join_pointer",
]


class FieldType(StrEnum):
    """Display types a field can resolve to."""

    PHONE = auto()
    EMAIL = auto()
    CURRENCY = auto()
    DATE = auto()
    BOOLEAN = auto()
    NUMBER = auto()
    TEXT = auto()


class DataKind(StrEnum):
    """Structural kind of a data-document value.

    - SCALAR    -> "scalar"    : string, number, boolean, null
    - CONTAINER -> "container" : JSON object
    - LIST      -> "list"      : JSON array
    """

    SCALAR = auto()
    CONTAINER = auto()
    LIST = auto()


def classify_data(value: Any) -> DataKind:
    """Return the ``DataKind`` of a (already parsed) data value."""
    if isinstance(value, dict):
        return DataKind.CONTAINER
    if isinstance(value, list):
        return DataKind.LIST
    return DataKind.SCALAR


def join_pointer(path: str, token: str | int) -> str:
    """Append one reference token to a JSON Pointer, escaping ``~`` and ``/``."""
    escaped = str(token).replace("~", "~0").replace("/", "~1")
    return f"{path}/{escaped}"


@dataclass(frozen=True, slots=True)
class FieldLabel:
    """Leaf label.

    Attributes:
        text:       Display label.
        field_type: Explicit display type, or None to infer from key and value.
        colspan:    Layout weight in [1, 12].
    """

    text: str
    field_type: FieldType | None = None
    colspan: int = DEFAULT_COLSPAN


@dataclass(frozen=True, slots=True)
class GroupLabel:
    """Section or block descriptor.

    ``entries`` holds ``(key, node)`` pairs in label-document order; metadata
    keys (``_sectionTitle``, ``_blockTitle``, ``_order``) are lifted into
    attributes and never appear in ``entries``.

    ``field`` is set when the descriptor object also has a non-empty
    ``label`` string, so the same entry can label a scalar value.
    """

    entries: tuple[tuple[str, LabelNode], ...] = ()
    section_title: str | None = None
    block_title: str | None = None
    order: int | float | None = None
    field: FieldLabel | None = None


@dataclass(frozen=True, slots=True)
class ArrayItemLabel:
    """List-form array label; only the first mapping element is the schema."""

    schema: GroupLabel

    @property
    def block_title(self) -> str | None:
        return self.schema.block_title

    @property
    def order(self) -> int | float | None:
        return self.schema.order


LabelNode = FieldLabel | GroupLabel | ArrayItemLabel


@dataclass(frozen=True, slots=True)
class LabelDiagnostic:
    """A lint finding about the label document.

    Attributes:
        path:    JSON Pointer of the label entry.
        message: Human-readable description.
    """

    path: str
    message: str
