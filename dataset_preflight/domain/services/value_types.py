"""Scalar value classification.

The predicates here are shared by both inference strategies, so a value is
judged the same way whether it arrives through the streaming column
accumulator or through a one-shot batch sample.

Classification priority for ``detect_value_type``:

1. Boolean literal (``true``/``false``/``yes``/``no``/``y``/``n``/``t``/``f``).
   Bare ``1`` and ``0`` are deliberately left to the integer check.
2. Integer (optional leading minus, ASCII digits)
3. Float (anything ``float()`` accepts, minus underscores and non-ASCII)
4. Timestamp (``YYYY-MM-DDTHH:MM:SS`` or with a space separator)
5. Date (``YYYY-MM-DD`` or ``MM/DD/YYYY``)
6. String
"""

from __future__ import annotations

from collections.abc import Callable
import math

from ...constants import Limits, Patterns
from ..entities.column_type import ColumnType, ValueTypeCategory

_BARE_DIGIT_FLAGS = frozenset({"1", "0"})
_IDENTIFIER_PUNCTUATION = frozenset("_-")


def _is_ascii_digits(text: str) -> bool:
    return bool(text) and text.isascii() and text.isdigit()


def _has_iso_date_prefix(value: str) -> bool:
    return (
        len(value) >= 10
        and value[4] == "-"
        and value[7] == "-"
        and _is_ascii_digits(value[0:4])
        and _is_ascii_digits(value[5:7])
        and _is_ascii_digits(value[8:10])
    )


def _is_slash_date(value: str) -> bool:
    return (
        len(value) == 10
        and value[2] == "/"
        and value[5] == "/"
        and _is_ascii_digits(value[0:2])
        and _is_ascii_digits(value[3:5])
        and _is_ascii_digits(value[6:10])
    )


def is_boolean(value: str) -> bool:
    return value.strip().lower() in Patterns.BOOLEAN_LITERALS


def is_integer(value: str) -> bool:
    text = value.strip()
    digits = text[1:] if text.startswith("-") else text
    return _is_ascii_digits(digits)


def is_float(value: str) -> bool:
    text = value.strip()
    if not text or "_" in text or not text.isascii():
        return False
    try:
        float(text)
    except ValueError:
        return False
    return True


def is_timestamp(value: str) -> bool:
    text = value.strip()
    return (
        len(text) >= 19
        and _has_iso_date_prefix(text)
        and text[10] in ("T", " ")
        and text[13] == ":"
        and text[16] == ":"
    )


def is_date(value: str) -> bool:
    text = value.strip()
    if len(text) != 10:
        return False
    return _has_iso_date_prefix(text) or _is_slash_date(text)


def is_time(value: str) -> bool:
    parts = value.strip().split(":")
    if len(parts) not in (2, 3):
        return False
    *leading, last = parts
    if not all(_is_ascii_digits(part) for part in leading):
        return False
    whole, dot, fraction = last.partition(".")
    if not _is_ascii_digits(whole):
        return False
    return not dot or _is_ascii_digits(fraction)


def is_identifier(value: str) -> bool:
    text = value.strip()
    if not text or len(text) >= Limits.MAX_IDENTIFIER_LENGTH:
        return False
    return all(
        (char.isascii() and char.isalnum()) or char in _IDENTIFIER_PUNCTUATION
        for char in text
    )


def detect_value_type(value: str) -> ValueTypeCategory:
    text = value.strip()
    if text not in _BARE_DIGIT_FLAGS and is_boolean(text):
        return ValueTypeCategory.BOOLEAN
    if is_integer(text):
        return ValueTypeCategory.INTEGER
    if is_float(text):
        return ValueTypeCategory.FLOAT
    if is_timestamp(text):
        return ValueTypeCategory.TIMESTAMP
    if is_date(text):
        return ValueTypeCategory.DATE
    return ValueTypeCategory.STRING


def parse_numeric(value: str) -> float | None:
    """Parse a numeric field, or ``None`` when it does not fold into stats.

    Non-finite results (``nan``, ``inf`` and integer literals too large for a
    float) are treated like parse failures.
    """
    try:
        number = float(value.strip())
    except (ValueError, OverflowError):
        return None
    if not math.isfinite(number):
        return None
    return number


TYPE_PREDICATES: dict[ColumnType, Callable[[str], bool]] = {
    ColumnType.BOOLEAN: is_boolean,
    ColumnType.INTEGER: is_integer,
    ColumnType.FLOAT: is_float,
    ColumnType.TIMESTAMP: is_timestamp,
    ColumnType.DATE: is_date,
    ColumnType.TIME: is_time,
    ColumnType.IDENTIFIER: is_identifier,
}
