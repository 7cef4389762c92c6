"""TreeMatcher: joins the label tree against the data tree.

The label tree drives the walk.  For every label entry, in label order, the
same key is looked up in the data subtree and the pair is dispatched on
``(label node, data kind)``:

    ============================  ==========  ==========================
    label                         data        result
    ============================  ==========  ==========================
    GroupLabel / ArrayItemLabel   LIST        array-table Block
    GroupLabel                    CONTAINER   nested Block
    FieldLabel                    SCALAR      Field
    GroupLabel with a field       SCALAR      Field
    anything else                             skipped silently
    ============================  ==========  ==========================

Data keys without a label entry are never visited, and label entries without
data produce nothing.  Containers that end up with no fields and no blocks
are pruned.

Long-text values: a string found where the label can only describe a
container is parsed as JSON.  Labels with a field reading keep strings as
scalars.  If that fails the subtree is logged and treated as absent,
and matching continues with its siblings.
"""

from __future__ import annotations

import logging
from typing import Any

from review_summary.config import RenderOptions
from review_summary.errors import MalformedInputError
from review_summary.formatting import PLACEHOLDER, format_value
from review_summary.inference import infer_type
from review_summary.normalizer import parse_json_text
from review_summary.ordering import sort_by_order
from review_summary.result import ArrayRow, Block, Column, Field, Section
from review_summary.tree.nodes import (
    ArrayItemLabel,
    DataKind,
    FieldLabel,
    GroupLabel,
    LabelNode,
    classify_data,
    join_pointer,
)
from review_summary.tree.titles import TitleFormatter

__all__ = ["TreeMatcher"]

logger = logging.getLogger(__name__)

# Distinguishes an absent key from an explicit null
_MISSING: Any = object()

_titles = TitleFormatter()


def _field_reading(label: LabelNode) -> FieldLabel | None:
    if isinstance(label, FieldLabel):
        return label
    if isinstance(label, GroupLabel):
        return label.field
    return None


class TreeMatcher:
    """Projects a data document through a label tree.

    A matcher holds only its (immutable) options, so one instance can be
    reused across documents and threads.

    Example::

        matcher = TreeMatcher(RenderOptions(hide_empty_fields=True))
        sections = matcher.match_sections(data, label_root)
    """

    def __init__(self, options: RenderOptions | None = None) -> None:
        self._options = options if options is not None else RenderOptions()

    @property
    def options(self) -> RenderOptions:
        return self._options

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def match_sections(
        self, data: dict[str, Any], root: GroupLabel
    ) -> list[Section]:
        """Match every top-level label entry and return ordered sections."""
        sections: list[Section] = []
        for key, label in root.entries:
            section_path = join_pointer("", key)
            value = self._lookup(data, key, label, section_path, top_level=True)
            if value is _MISSING or value is None:
                continue
            if isinstance(label, GroupLabel) and isinstance(value, dict):
                section = self.match_section(key, value, label, section_path)
                if section is not None:
                    sections.append(section)
        return sort_by_order(sections)

    def match_section(
        self,
        key: str,
        data: dict[str, Any],
        label: GroupLabel,
        path: str = "",
    ) -> Section | None:
        """Build a Section from a data mapping, or None when nothing survives."""
        fields, blocks = self._match_children(data, label, path)
        if not fields and not blocks:
            return None
        return Section(
            id=key,
            title=label.section_title or _titles.section(key),
            order=label.order,
            expanded=self._options.initial_expanded(),
            collapsible=self._options.collapsible_sections,
            fields=tuple(fields),
            blocks=tuple(blocks),
        )

    def match_block(
        self,
        key: str,
        data: dict[str, Any],
        label: GroupLabel,
        path: str = "",
    ) -> Block | None:
        """Build a nested Block, or None when nothing survives."""
        fields, blocks = self._match_children(data, label, path)
        if not fields and not blocks:
            return None
        return Block(
            id=key,
            title=label.block_title or _titles.block(key),
            order=label.order,
            fields=tuple(fields),
            blocks=tuple(blocks),
        )

    def match_array(
        self,
        key: str,
        items: list[Any],
        label: GroupLabel | ArrayItemLabel,
        path: str = "",
    ) -> Block | None:
        """Build an array-table Block applying one item schema to every element.

        Column headers come from the fields resolved for the first element.
        Elements that yield no fields are dropped, and so is the block when
        every element is dropped.
        """
        schema = label.schema if isinstance(label, ArrayItemLabel) else label
        rows: list[ArrayRow] = []
        columns: list[Column] = []

        for index, item in enumerate(items):
            if not isinstance(item, dict):
                continue
            item_path = join_pointer(path, index)
            row_fields: list[Field] = []
            for field_key, entry in schema.entries:
                if self._options.is_skipped(field_key):
                    continue
                value = item.get(field_key, _MISSING)
                field_label = _field_reading(entry)
                if value is _MISSING or field_label is None:
                    continue
                if classify_data(value) is not DataKind.SCALAR:
                    continue
                field = self.match_field(
                    field_key, value, field_label, join_pointer(item_path, field_key)
                )
                if field is None:
                    continue
                row_fields.append(field)
                if index == 0:
                    columns.append(Column(label=field.label, field_name=field_key))

            if row_fields:
                rows.append(
                    ArrayRow(id=f"{key}_{index}", index=index + 1, fields=tuple(row_fields))
                )

        if not rows:
            return None
        return Block(
            id=key,
            title=schema.block_title or _titles.block(key),
            order=schema.order,
            is_array=True,
            rows=tuple(rows),
            columns=tuple(columns),
        )

    def match_field(
        self, key: str, value: Any, label: FieldLabel, path: str = ""
    ) -> Field | None:
        """Resolve type and display value for a scalar.

        Returns None when empty fields are hidden and the value renders as
        the placeholder.
        """
        field_type = label.field_type or infer_type(key, value)
        display = format_value(value, field_type)
        if self._options.hide_empty_fields and display == PLACEHOLDER:
            return None
        return Field(
            id=key,
            label=label.text,
            value=value,
            type=field_type,
            display_value=display,
            colspan=label.colspan,
            path=path,
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _match_children(
        self, data: dict[str, Any], group: GroupLabel, path: str
    ) -> tuple[list[Field], list[Block]]:
        fields: list[Field] = []
        blocks: list[Block] = []

        for key, label in group.entries:
            child_path = join_pointer(path, key)
            value = self._lookup(data, key, label, child_path)
            if value is _MISSING:
                continue

            block: Block | None = None
            match (label, classify_data(value)):
                case (GroupLabel() | ArrayItemLabel(), DataKind.LIST):
                    block = self.match_array(key, value, label, child_path)
                case (GroupLabel(), DataKind.CONTAINER):
                    block = self.match_block(key, value, label, child_path)
                case (FieldLabel() as field_label, DataKind.SCALAR) | (
                    GroupLabel(field=FieldLabel() as field_label),
                    DataKind.SCALAR,
                ):
                    field = self.match_field(key, value, field_label, child_path)
                    if field is not None:
                        fields.append(field)
                case _:
                    # Label shape does not fit the data shape
                    pass

            if block is not None:
                blocks.append(block)

        return fields, sort_by_order(blocks)

    def _lookup(
        self,
        data: dict[str, Any],
        key: str,
        label: LabelNode,
        path: str,
        top_level: bool = False,
    ) -> Any:
        """Fetch ``data[key]``, expanding long-text JSON under container labels.

        Top-level entries can only be sections, so there a group's field
        reading does not keep a string scalar.

        Returns ``_MISSING`` for skipped keys, absent keys and unparseable
        long-text subtrees.
        """
        if self._options.is_skipped(key):
            return _MISSING
        value = data.get(key, _MISSING)
        expects_container = not isinstance(label, FieldLabel) and (
            top_level or _field_reading(label) is None
        )
        if isinstance(value, str) and expects_container:
            try:
                return parse_json_text(value, path)
            except MalformedInputError as exc:
                logger.warning("Skipping unparseable subtree: %s", exc)
                return _MISSING
        return value
