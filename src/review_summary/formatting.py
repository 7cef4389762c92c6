"""Value formatting: raw data value + resolved type -> display string.

Formatting targets a fixed en-US presentation:

| type     | example input      | display              |
|----------|--------------------|----------------------|
| boolean  | True / "yes"       | "Yes"                |
| currency | 15000              | "$15,000.00"         |
| phone    | 8745638765         | "(874) 563-8765"     |
| email    | "  Jo@Example.COM" | "jo@example.com"     |
| date     | "2026-12-31"       | "December 31, 2026"  |
| number   | 1234567.891        | "1,234,567.891"      |
| text     | 1500               | "1,500"              |

Missing values (``None`` or ``""``) always render as ``PLACEHOLDER``.
Values that cannot be formatted for their type are returned as their plain
string form rather than raising.
"""

from __future__ import annotations

import math
import re
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Context, Decimal, InvalidOperation
from typing import Any

from dateutil import parser as date_parser

from review_summary.inference import ISO_DATE
from review_summary.ordering import is_number
from review_summary.tree.nodes import FieldType

__all__ = ["PLACEHOLDER", "format_value"]

PLACEHOLDER = "—"

_MONTHS = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

# Leading numeric prefix, e.g. "12.5kg" -> "12.5"; "$12" has none
_LEADING_NUMBER = re.compile(
    r"\s*([+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)"
)

_NON_DIGIT = re.compile(r"[^0-9]")

# Wide enough to quantize any finite float without InvalidOperation
_DECIMAL_CONTEXT = Context(prec=400)

_CENTS = Decimal("0.01")
_MAX_FRACTION = Decimal("0.001")

# Fills components missing from free-form dates so output never depends on today
_PARSE_DEFAULT = datetime(2000, 1, 1)


def format_value(value: Any, field_type: FieldType | str = FieldType.TEXT) -> str:
    """Convert a raw value into its display string.

    Args:
        value:      Raw scalar from the data document.
        field_type: Resolved display type.  Plain strings are accepted and
                    unknown names are treated as ``text``.

    Returns:
        The display string; ``PLACEHOLDER`` for missing values.
    """
    if value is None or (isinstance(value, str) and value == ""):
        return PLACEHOLDER

    try:
        kind = FieldType(field_type)
    except ValueError:
        kind = FieldType.TEXT

    # Native booleans read as Yes/No whatever type was configured
    if isinstance(value, bool) or kind is FieldType.BOOLEAN:
        return _format_boolean(value)

    match kind:
        case FieldType.CURRENCY:
            return _format_currency(value)
        case FieldType.PHONE:
            return _format_phone(value)
        case FieldType.EMAIL:
            return _stringify(value).strip().lower()
        case FieldType.DATE:
            return _format_date(value)
        case FieldType.NUMBER:
            number = _parse_float(value)
            return _stringify(value) if number is None else _group(number, value)
        case _:
            return _group(value, value) if is_number(value) else _stringify(value)


def _format_boolean(value: Any) -> str:
    if isinstance(value, bool):
        return "Yes" if value else "No"
    lowered = _stringify(value).lower()
    if lowered in ("true", "yes"):
        return "Yes"
    if lowered in ("false", "no"):
        return "No"
    return _stringify(value)


def _format_currency(value: Any) -> str:
    number = _parse_float(value)
    if number is None or math.isinf(number):
        return _stringify(value)
    cents = _to_decimal(number).quantize(
        _CENTS, rounding=ROUND_HALF_UP, context=_DECIMAL_CONTEXT
    )
    sign = "-" if cents < 0 else ""
    return f"{sign}${abs(cents):,.2f}"


def _format_phone(value: Any) -> str:
    raw = _stringify(value)
    digits = _NON_DIGIT.sub("", raw)

    if len(digits) == 10:
        return f"({digits[:3]}) {digits[3:6]}-{digits[6:]}"
    if len(digits) == 11 and digits.startswith("1"):
        return f"+1 ({digits[1:4]}) {digits[4:7]}-{digits[7:]}"
    if len(digits) > 10:
        # International: country digits, then the last ten grouped 3-3-4
        return f"+{digits[:-10]} {digits[-10:-7]} {digits[-7:-4]} {digits[-4:]}"

    return raw


def _format_date(value: Any) -> str:
    if isinstance(value, datetime):
        return _render_date(value.date())
    if isinstance(value, date):
        return _render_date(value)
    if not isinstance(value, str):
        return _stringify(value)

    if ISO_DATE.fullmatch(value):
        # Literal components, no timezone conversion
        year, month, day = (int(part) for part in value.split("-"))
        try:
            return _render_date(date(year, month, day))
        except ValueError:
            return value

    try:
        parsed = date_parser.parse(value, default=_PARSE_DEFAULT)
    except (ValueError, OverflowError):
        return value
    return _render_date(parsed.date())


def _render_date(day: date) -> str:
    return f"{_MONTHS[day.month - 1]} {day.day}, {day.year}"


def _parse_float(value: Any) -> float | None:
    """Parse the leading number of ``value``; None when there is none."""
    if is_number(value):
        number = float(value)
    else:
        match = _LEADING_NUMBER.match(_stringify(value))
        if match is None:
            return None
        number = float(match.group(1))
    return None if math.isnan(number) else number


def _group(number: int | float, original: Any) -> str:
    """Thousands-grouped rendering with at most three fraction digits."""
    if isinstance(number, float) and not math.isfinite(number):
        return _stringify(original)
    try:
        rounded = _to_decimal(number).quantize(
            _MAX_FRACTION, rounding=ROUND_HALF_UP, context=_DECIMAL_CONTEXT
        )
    except InvalidOperation:
        return _stringify(original)
    text = f"{rounded:,f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _to_decimal(number: int | float) -> Decimal:
    # str() gives the shortest round-tripping form, so 1.005 stays 1.005
    return Decimal(number) if isinstance(number, int) else Decimal(str(number))


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
    return str(value)
