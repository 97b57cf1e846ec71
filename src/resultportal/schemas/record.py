"""
Typed student record built from one row of a results sheet.

The sheet columns are expected in this order::

    roll_no,student_name,standard,marathi,hindi,english,maths,science,total,result

Header names are matched after lowercasing, so only their spelling matters.
"""

import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

Number = int | float

# Expected sheet header, in column order
RECORD_FIELDS: tuple[str, ...] = (
    "roll_no",
    "student_name",
    "standard",
    "marathi",
    "hindi",
    "english",
    "maths",
    "science",
    "total",
    "result",
)

NUMERIC_FIELDS: frozenset[str] = frozenset(
    {"roll_no", "standard", "marathi", "hindi", "english", "maths", "science", "total"}
)

TEXT_FIELDS: frozenset[str] = frozenset({"student_name", "result"})

# Subject columns with the labels printed on the marksheet
SUBJECTS: tuple[tuple[str, str], ...] = (
    ("marathi", "Marathi"),
    ("hindi", "Hindi"),
    ("english", "English"),
    ("maths", "Mathematics"),
    ("science", "Science"),
)

_LEADING_NUMBER = re.compile(
    r"\s*([+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))"
)


def coerce_number(text: str) -> Number:
    """
    Read the leading decimal number of ``text``, defaulting to 0.

    Trailing garbage is ignored (``"85 marks"`` -> 85). ``Infinity`` and
    overflowing literals give ``inf``. Integral values come back as ``int``.

    Args:
        text: Cleaned cell value.

    Returns:
        Parsed number, or 0 when the text does not start with one.
    """
    match = _LEADING_NUMBER.match(text)
    if match is None:
        return 0

    value = float(match.group(1))
    if value == 0:
        return 0
    if value.is_integer():
        return int(value)
    return value


@dataclass(frozen=True)
class StudentRecord:
    """
    One student's result row.

    Fields whose column is missing from the row (short rows, absent headers)
    stay ``None``. Columns outside the known layout are kept as text in
    ``extra``.
    """

    roll_no: Number | None = None
    student_name: str | None = None
    standard: Number | None = None
    marathi: Number | None = None
    hindi: Number | None = None
    english: Number | None = None
    maths: Number | None = None
    science: Number | None = None
    total: Number | None = None
    result: str | None = None
    extra: dict[str, str] = field(default_factory=dict, hash=False)

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, str]]) -> "StudentRecord":
        """
        Build a record from (header, cleaned value) pairs.

        Known numeric headers are coerced with :func:`coerce_number`, known
        text headers are kept as-is, anything else goes to ``extra``. A
        repeated header keeps its last value.
        """
        values: dict[str, Any] = {}
        extra: dict[str, str] = {}

        for header, value in pairs:
            if header in NUMERIC_FIELDS:
                values[header] = coerce_number(value)
            elif header in TEXT_FIELDS:
                values[header] = value
            else:
                extra[header] = value

        return cls(**values, extra=extra)

    @property
    def is_complete(self) -> bool:
        """True when the record has a non-zero roll number and a name."""
        return bool(self.roll_no) and bool(self.student_name)

    @property
    def subject_scores(self) -> list[tuple[str, Number | None]]:
        """(label, score) pairs in marksheet order."""
        return [(label, getattr(self, name)) for name, label in SUBJECTS]

    @property
    def passed(self) -> bool:
        """Overall status as published in the sheet."""
        return (self.result or "").strip().lower() == "pass"

    def to_dict(self) -> dict[str, Any]:
        """Flat mapping of known fields followed by extra columns."""
        data: dict[str, Any] = {name: getattr(self, name) for name in RECORD_FIELDS}
        data.update(self.extra)
        return data
