"""
Record lookup by (standard, roll number).

Search keys arrive as form text while record fields are numbers, so both
sides are normalized to integers where possible before comparing. When one
side has no integer reading the comparison falls back to trimmed strings.
Empty keys never match.
"""

import math
import re
from collections.abc import Iterable

from resultportal.schemas.record import Number, StudentRecord

Key = int | str

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def coerce_key(value: str | Number | None) -> Key:
    """
    Normalize a search key or record field for comparison.

    Text is read as its leading integer (``" 5th"`` -> 5); numbers are
    truncated (``5.7`` -> 5); anything else becomes trimmed text, and an unset
    field becomes the empty string.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return str(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            return str(value)
        return int(value)

    match = _LEADING_INT.match(value)
    if match is not None:
        return int(match.group(1))
    return value.strip()


def keys_equal(left: Key, right: Key) -> bool:
    """
    Compare as integers when both sides are integers, else as text.

    An empty key (unset field or blank search text) never equals anything,
    not even another empty key.
    """
    if isinstance(left, int) and isinstance(right, int):
        return left == right
    left_text = str(left).strip()
    right_text = str(right).strip()
    if not left_text or not right_text:
        return False
    return left_text == right_text


def find_record(
    records: Iterable[StudentRecord],
    grade_level: str,
    identifier: str,
) -> StudentRecord | None:
    """
    Find the first record matching a standard and roll number.

    Args:
        records: Parsed records, scanned in order.
        grade_level: Standard as entered, e.g. ``"5"``.
        identifier: Roll number as entered, e.g. ``"101"``.

    Returns:
        The first matching record, or None. Later duplicates are ignored.
    """
    search_standard = coerce_key(grade_level)
    search_roll = coerce_key(identifier)

    for record in records:
        if keys_equal(coerce_key(record.standard), search_standard) and keys_equal(
            coerce_key(record.roll_no), search_roll
        ):
            return record

    return None
