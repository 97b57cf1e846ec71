"""
Data contracts for results sheets.

The typed record model used by the parser and locator, and the Pandera
schema used to check a whole sheet.
"""

from resultportal.schemas.marksheet import MarksheetSchema, records_to_frame
from resultportal.schemas.record import (
    NUMERIC_FIELDS,
    RECORD_FIELDS,
    SUBJECTS,
    TEXT_FIELDS,
    StudentRecord,
    coerce_number,
)

__all__ = [
    "NUMERIC_FIELDS",
    "RECORD_FIELDS",
    "SUBJECTS",
    "TEXT_FIELDS",
    "MarksheetSchema",
    "StudentRecord",
    "coerce_number",
    "records_to_frame",
]
