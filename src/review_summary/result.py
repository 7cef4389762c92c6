"""Output model of a render pass.

All nodes are frozen dataclasses whose children are tuples, so two renders of
the same inputs compare equal and a tree can be shared freely between callers.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from review_summary.tree.nodes import FieldType

__all__ = ["ArrayRow", "Block", "Column", "Field", "Section", "SectionTree"]


@dataclass(frozen=True, slots=True)
class Field:
    """A single label + value + display unit.

    Attributes:
        id:            Data key of the field.
        label:         Display label from the label document.
        value:         Raw data value.
        type:          Resolved display type (explicit or inferred).
        display_value: Formatted display string.
        colspan:       Layout weight in a 12-unit grid, in [1, 12].
        path:          JSON Pointer of the value in the data document.
    """

    id: str
    label: str
    value: Any
    type: FieldType
    display_value: str
    colspan: int
    path: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "label": self.label,
            "value": self.value,
            "fieldType": str(self.type),
            "displayValue": self.display_value,
            "colspan": self.colspan,
            "path": self.path,
        }


@dataclass(frozen=True, slots=True)
class Column:
    """Column header of an array-table block."""

    label: str
    field_name: str

    def to_dict(self) -> dict[str, Any]:
        return {"label": self.label, "fieldName": self.field_name}


@dataclass(frozen=True, slots=True)
class ArrayRow:
    """One element of an array-valued data node.

    ``index`` is 1-based for display; ``id`` is ``"<key>_<0-based index>"``.
    """

    id: str
    index: int
    fields: tuple[Field, ...]

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "index": self.index,
            "fields": [f.to_dict() for f in self.fields],
        }


@dataclass(frozen=True, slots=True)
class Block:
    """Nested labelled grouping inside a section.

    A plain block carries ``fields`` and nested ``blocks``; an array-table
    block (``is_array=True``) carries ``rows`` and ``columns`` instead.
    """

    id: str
    title: str
    order: int | float | None = None
    fields: tuple[Field, ...] = ()
    blocks: tuple[Block, ...] = ()
    is_array: bool = False
    rows: tuple[ArrayRow, ...] = ()
    columns: tuple[Column, ...] = ()

    def iter_fields(self) -> Iterator[Field]:
        """Yield every field in this block, depth-first in display order."""
        yield from self.fields
        for row in self.rows:
            yield from row.fields
        for block in self.blocks:
            yield from block.iter_fields()

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "title": self.title,
            "isArray": self.is_array,
        }
        if self.is_array:
            data["items"] = [row.to_dict() for row in self.rows]
            data["columns"] = [col.to_dict() for col in self.columns]
        else:
            data["fields"] = [f.to_dict() for f in self.fields]
            data["nestedBlocks"] = [b.to_dict() for b in self.blocks]
        return data


@dataclass(frozen=True, slots=True)
class Section:
    """Top-level labelled grouping, typically one form step."""

    id: str
    title: str
    order: int | float | None = None
    expanded: bool = True
    collapsible: bool = False
    fields: tuple[Field, ...] = ()
    blocks: tuple[Block, ...] = ()

    def iter_fields(self) -> Iterator[Field]:
        yield from self.fields
        for block in self.blocks:
            yield from block.iter_fields()

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "order": self.order,
            "isExpanded": self.expanded,
            "isCollapsible": self.collapsible,
            "fields": [f.to_dict() for f in self.fields],
            "blocks": [b.to_dict() for b in self.blocks],
        }


@dataclass(frozen=True, slots=True)
class SectionTree:
    """Ordered sections produced by ``render``."""

    sections: tuple[Section, ...] = ()
    title: str = ""

    def __iter__(self) -> Iterator[Section]:
        return iter(self.sections)

    def __len__(self) -> int:
        return len(self.sections)

    @property
    def is_empty(self) -> bool:
        return not self.sections

    def section(self, section_id: str) -> Section | None:
        return next((s for s in self.sections if s.id == section_id), None)

    def iter_fields(self) -> Iterator[Field]:
        for section in self.sections:
            yield from section.iter_fields()

    def find_field(self, path: str) -> Field | None:
        """Return the field rendered from the data at JSON Pointer ``path``."""
        return next((f for f in self.iter_fields() if f.path == path), None)

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "sections": [s.to_dict() for s in self.sections],
        }
