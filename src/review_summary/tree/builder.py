"""LabelTreeBuilder: converts a parsed label document into a typed label tree.

Uses recursive dispatch over the JSON value shapes a label entry may take:

- str   -> FieldLabel (type inferred later)
- dict  -> GroupLabel; one with a non-empty ``label`` string also carries a
           FieldLabel reading built from ``label``/``type``/``colspan``
- list  -> ArrayItemLabel built from the first mapping element

Key order is captured once, as tuples of ``(key, node)`` pairs, so later
stages never depend on mapping iteration.

Problems that do not stop rendering (unknown type names, unusable entries,
divergent array schemas) are recorded as ``LabelDiagnostic`` records on the
builder and logged at DEBUG.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Any

from review_summary.ordering import clamp_colspan, is_number
from review_summary.tree.nodes import (
    ArrayItemLabel,
    FieldLabel,
    FieldType,
    GroupLabel,
    LabelDiagnostic,
    LabelNode,
    join_pointer,
)

__all__ = ["LabelTreeBuilder"]

logger = logging.getLogger(__name__)

SECTION_TITLE_KEY = "_sectionTitle"
BLOCK_TITLE_KEY = "_blockTitle"
ORDER_KEY = "_order"

# Field-label settings that are not labels of their own
_FIELD_SETTING_KEYS = frozenset({"type", "colspan"})


def _is_reserved(key: str) -> bool:
    return key.startswith("_")


@dataclass
class LabelTreeBuilder:
    """Builds a ``GroupLabel`` root from a parsed label document.

    A builder accumulates diagnostics across calls; create one per document
    when the diagnostics matter.

    Example::

        builder = LabelTreeBuilder()
        root = builder.build({"Step1": {"_sectionTitle": "Applicant", "name": "Name"}})
        # root.entries == (("Step1", GroupLabel(section_title="Applicant", ...)),)
    """

    diagnostics: list[LabelDiagnostic] = field(default_factory=list)

    def build(self, labels: dict[str, Any], path: str = "") -> GroupLabel:
        """Convert a label mapping into a ``GroupLabel``.

        Args:
            labels: Parsed label document (or a nested descriptor).
            path:   JSON Pointer of ``labels``.  Defaults to "" (root).

        Returns:
            A ``GroupLabel`` whose entries follow the mapping's key order.
        """
        text = labels.get("label")
        field_label = (
            self._build_field(labels, path)
            if isinstance(text, str) and text
            else None
        )

        entries: list[tuple[str, LabelNode]] = []
        for key, raw in labels.items():
            if _is_reserved(key):
                continue
            if (
                field_label is not None
                and key in _FIELD_SETTING_KEYS
                and not isinstance(raw, (str, dict, list))
            ):
                continue
            node = self._build_node(raw, join_pointer(path, key))
            if node is not None:
                entries.append((key, node))

        return GroupLabel(
            entries=tuple(entries),
            section_title=self._title(labels.get(SECTION_TITLE_KEY)),
            block_title=self._title(labels.get(BLOCK_TITLE_KEY)),
            order=self._order(labels.get(ORDER_KEY)),
            field=field_label,
        )

    def _build_node(self, raw: Any, path: str) -> LabelNode | None:
        if isinstance(raw, str):
            return FieldLabel(text=raw) if raw else self._drop(path, "empty label")

        if isinstance(raw, dict):
            return self.build(raw, path)

        if isinstance(raw, list):
            return self._build_array(raw, path)

        return self._drop(path, f"unsupported label value {type(raw).__name__}")

    def _build_field(self, raw: dict[str, Any], path: str) -> FieldLabel:
        return FieldLabel(
            text=raw["label"],
            field_type=self._field_type(raw.get("type"), path),
            colspan=clamp_colspan(raw.get("colspan")),
        )

    def _build_array(self, raw: list[Any], path: str) -> ArrayItemLabel | None:
        if not raw or not isinstance(raw[0], dict):
            return self._drop(path, "array label must start with an item schema object")

        # Only the first schema is used; later ones are linted, not merged
        first_keys = [k for k in raw[0] if not _is_reserved(k)]
        for idx, other in enumerate(raw[1:], start=1):
            if not isinstance(other, dict):
                continue
            other_keys = [k for k in other if not _is_reserved(k)]
            if other_keys != first_keys:
                self._note(
                    join_pointer(path, idx),
                    "array item schema differs from the first schema and is ignored",
                )

        return ArrayItemLabel(schema=self.build(raw[0], join_pointer(path, 0)))

    def _field_type(self, raw: Any, path: str) -> FieldType | None:
        if not raw:
            return None
        # Type names are case-sensitive: "Phone" is not "phone"
        try:
            return FieldType(raw)
        except ValueError:
            self._note(path, f"unknown field type {raw!r}, using 'text'")
            return FieldType.TEXT

    def _title(self, raw: Any) -> str | None:
        return raw if isinstance(raw, str) and raw else None

    def _order(self, raw: Any) -> int | float | None:
        if not is_number(raw) or math.isnan(raw):
            return None
        return raw

    def _drop(self, path: str, reason: str) -> None:
        self._note(path, f"{reason}; entry ignored")
        return None

    def _note(self, path: str, message: str) -> None:
        logger.debug("label %s: %s", path or "<root>", message)
        self.diagnostics.append(LabelDiagnostic(path=path, message=message))
