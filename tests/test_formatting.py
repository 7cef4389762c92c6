"""Tests for format_value across every display type."""

from __future__ import annotations

from datetime import date, datetime

import pytest

from review_summary.formatting import PLACEHOLDER, format_value
from review_summary.tree.nodes import FieldType


class TestPlaceholder:
    @pytest.mark.parametrize("field_type", list(FieldType))
    def test_empty_string(self, field_type: FieldType) -> None:
        assert format_value("", field_type) == "—"

    @pytest.mark.parametrize("field_type", list(FieldType))
    def test_none(self, field_type: FieldType) -> None:
        assert format_value(None, field_type) == PLACEHOLDER

    def test_zero_is_not_empty(self) -> None:
        assert format_value(0, FieldType.NUMBER) == "0"

    def test_whitespace_is_not_empty(self) -> None:
        assert format_value(" ", FieldType.TEXT) == " "


class TestBoolean:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (True, "Yes"),
            (False, "No"),
            ("true", "Yes"),
            ("YES", "Yes"),
            ("False", "No"),
            ("no", "No"),
            ("maybe", "maybe"),
            (1, "1"),
        ],
    )
    def test_boolean(self, value: object, expected: str) -> None:
        assert format_value(value, FieldType.BOOLEAN) == expected

    def test_native_boolean_under_other_type(self) -> None:
        assert format_value(True, FieldType.TEXT) == "Yes"
        assert format_value(False, FieldType.CURRENCY) == "No"


class TestCurrency:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (15000, "$15,000.00"),
            (0, "$0.00"),
            (1234567.891, "$1,234,567.89"),
            (1.005, "$1.01"),
            (-42.5, "-$42.50"),
            ("2500", "$2,500.00"),
            ("99.999", "$100.00"),
            ("12abc", "$12.00"),
            (" 7", "$7.00"),
        ],
    )
    def test_currency(self, value: object, expected: str) -> None:
        assert format_value(value, FieldType.CURRENCY) == expected

    @pytest.mark.parametrize("value", ["$1,000", "abc", "n/a"])
    def test_unparseable_returned_as_is(self, value: str) -> None:
        assert format_value(value, FieldType.CURRENCY) == value


class TestPhone:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (8745638765, "(874) 563-8765"),
            ("874-563-8765", "(874) 563-8765"),
            ("(874) 563 8765", "(874) 563-8765"),
            ("18745638765", "+1 (874) 563-8765"),
            ("+1 874 563 8765", "+1 (874) 563-8765"),
            ("442071234567", "+44 207 123 4567"),
            ("+91 98765 43210", "+91 987 654 3210"),
            ("28745638765", "+2 874 563 8765"),
        ],
    )
    def test_phone(self, value: object, expected: str) -> None:
        assert format_value(value, FieldType.PHONE) == expected

    @pytest.mark.parametrize("value", ["555-1234", "ext. 12", "n/a"])
    def test_short_numbers_returned_as_is(self, value: str) -> None:
        assert format_value(value, FieldType.PHONE) == value

    def test_integral_float(self) -> None:
        assert format_value(8745638765.0, FieldType.PHONE) == "(874) 563-8765"


class TestEmail:
    def test_trimmed_and_lowercased(self) -> None:
        assert format_value("  Jane.Doe@Example.COM ", FieldType.EMAIL) == (
            "jane.doe@example.com"
        )


class TestDate:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("2026-12-31", "December 31, 2026"),
            ("2026-01-01", "January 1, 2026"),
            ("2024-02-29", "February 29, 2024"),
            ("2026-12-31T23:30:00Z", "December 31, 2026"),
            ("March 5, 2025", "March 5, 2025"),
            ("07/04/2026", "July 4, 2026"),
        ],
    )
    def test_date(self, value: str, expected: str) -> None:
        assert format_value(value, FieldType.DATE) == expected

    @pytest.mark.parametrize("value", ["banana", "2026-02-30", "2026-13-01"])
    def test_unparseable_returned_as_is(self, value: str) -> None:
        assert format_value(value, FieldType.DATE) == value

    def test_date_objects(self) -> None:
        assert format_value(date(2025, 6, 9), FieldType.DATE) == "June 9, 2025"
        assert format_value(datetime(2025, 6, 9, 8, 0), FieldType.DATE) == (
            "June 9, 2025"
        )

    def test_number_under_date_type(self) -> None:
        assert format_value(20260101, FieldType.DATE) == "20260101"


class TestNumber:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (1234567, "1,234,567"),
            (1234.5, "1,234.5"),
            (1234567.891, "1,234,567.891"),
            (0.12345, "0.123"),
            (2.0005, "2.001"),
            ("98765", "98,765"),
            (-1000, "-1,000"),
        ],
    )
    def test_number(self, value: object, expected: str) -> None:
        assert format_value(value, FieldType.NUMBER) == expected

    def test_unparseable_returned_as_is(self) -> None:
        assert format_value("lots", FieldType.NUMBER) == "lots"


class TestText:
    def test_numbers_are_grouped(self) -> None:
        assert format_value(15000, FieldType.TEXT) == "15,000"

    def test_integral_float_drops_fraction(self) -> None:
        assert format_value(3.0, FieldType.TEXT) == "3"

    def test_numeric_strings_untouched(self) -> None:
        assert format_value("15000", FieldType.TEXT) == "15000"

    def test_strings_untouched(self) -> None:
        assert format_value("Hello, World", FieldType.TEXT) == "Hello, World"

    def test_plain_string_type_names(self) -> None:
        assert format_value(15000, "currency") == "$15,000.00"

    def test_unknown_type_name_is_text(self) -> None:
        assert format_value(15000, "ssn") == "15,000"

    def test_default_type_is_text(self) -> None:
        assert format_value(2500) == "2,500"
