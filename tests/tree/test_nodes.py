"""Tests for label node dataclasses, FieldType/DataKind enums and classify_data,
and JSON Pointer joining.
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from review_summary.tree.nodes import (
    ArrayItemLabel,
    DataKind,
    FieldLabel,
    FieldType,
    GroupLabel,
    classify_data,
    join_pointer,
)

# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class TestFieldType:
    def test_has_exactly_seven_members(self) -> None:
        assert len(list(FieldType)) == 7

    def test_values_are_lowercase_names(self) -> None:
        assert {str(t) for t in FieldType} == {
            "phone",
            "email",
            "currency",
            "date",
            "boolean",
            "number",
            "text",
        }

    def test_is_str_subclass(self) -> None:
        assert isinstance(FieldType.PHONE, str)
        assert FieldType("phone") is FieldType.PHONE


class TestDataKind:
    @pytest.mark.parametrize(
        ("value", "kind"),
        [
            ({}, DataKind.CONTAINER),
            ({"a": 1}, DataKind.CONTAINER),
            ([], DataKind.LIST),
            ([{"a": 1}], DataKind.LIST),
            ("x", DataKind.SCALAR),
            (1, DataKind.SCALAR),
            (1.5, DataKind.SCALAR),
            (True, DataKind.SCALAR),
            (None, DataKind.SCALAR),
        ],
    )
    def test_classify(self, value: object, kind: DataKind) -> None:
        assert classify_data(value) is kind


# ---------------------------------------------------------------------------
# Dataclasses
# ---------------------------------------------------------------------------


class TestLabelNodes:
    def test_field_label_defaults(self) -> None:
        label = FieldLabel(text="Name")
        assert label.field_type is None
        assert label.colspan == 6

    def test_field_label_is_frozen(self) -> None:
        label = FieldLabel(text="Name")
        with pytest.raises(FrozenInstanceError):
            label.text = "Other"  # type: ignore[misc]

    def test_group_label_has_no_field_reading_by_default(self) -> None:
        assert GroupLabel().field is None

    def test_array_item_label_exposes_schema_metadata(self) -> None:
        schema = GroupLabel(block_title="Rows", order=3)
        label = ArrayItemLabel(schema=schema)
        assert label.block_title == "Rows"
        assert label.order == 3

    def test_equal_labels_compare_equal(self) -> None:
        a = GroupLabel(entries=(("x", FieldLabel("X", FieldType.DATE, 4)),))
        b = GroupLabel(entries=(("x", FieldLabel("X", FieldType.DATE, 4)),))
        assert a == b


# ---------------------------------------------------------------------------
# JSON Pointer tokens
# ---------------------------------------------------------------------------


class TestJoinPointer:
    @pytest.mark.parametrize(
        ("path", "token", "expected"),
        [
            ("", "S", "/S"),
            ("/S", 0, "/S/0"),
            ("/S", "a/b", "/S/a~1b"),
            ("/S", "m~n", "/S/m~0n"),
            ("/S", "~/", "/S/~0~1"),
            ("/S", "", "/S/"),
        ],
    )
    def test_escapes_reference_tokens(
        self, path: str, token: str | int, expected: str
    ) -> None:
        assert join_pointer(path, token) == expected
