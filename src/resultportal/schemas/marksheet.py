"""
Pandera schema for a parsed results sheet.

Records are tabulated with :func:`records_to_frame` and validated against
:class:`MarksheetSchema` when checking the health of a published sheet.
"""

import math
from collections.abc import Sequence

import pandas as pd
import pandera as pa
from pandera.typing import Series

from resultportal.schemas.record import NUMERIC_FIELDS, RECORD_FIELDS, StudentRecord


class MarksheetSchema(pa.DataFrameModel):
    """
    Schema for the records of one results sheet.

    Scores stay nullable because short rows leave trailing fields unset.
    Numbers must be finite; an overflowing literal such as ``1e999`` fails.
    """

    roll_no: Series[float] = pa.Field(gt=0, lt=math.inf, description="Roll number")
    student_name: Series[str] = pa.Field(
        str_length={"min_value": 1},
        description="Student display name",
    )
    standard: Series[float] = pa.Field(
        nullable=True, ge=0, lt=math.inf, description="Standard / class"
    )
    marathi: Series[float] = pa.Field(nullable=True, ge=0, lt=math.inf)
    hindi: Series[float] = pa.Field(nullable=True, ge=0, lt=math.inf)
    english: Series[float] = pa.Field(nullable=True, ge=0, lt=math.inf)
    maths: Series[float] = pa.Field(nullable=True, ge=0, lt=math.inf)
    science: Series[float] = pa.Field(nullable=True, ge=0, lt=math.inf)
    total: Series[float] = pa.Field(
        nullable=True, ge=0, lt=math.inf, description="Aggregate score"
    )
    result: Series[str] = pa.Field(nullable=True, description="PASS / FAIL status")

    class Config:
        """Schema configuration."""

        name = "MarksheetSchema"
        strict = False


def records_to_frame(records: Sequence[StudentRecord]) -> pd.DataFrame:
    """
    Tabulate records, one row per record in input order.

    Numeric columns are float64 with NaN for unset fields; extra columns are
    appended after the known ones.

    Args:
        records: Parsed student records.

    Returns:
        DataFrame with at least the known record columns.
    """
    df = pd.DataFrame([record.to_dict() for record in records])

    for column in RECORD_FIELDS:
        if column not in df.columns:
            df[column] = None

    extra_columns = [c for c in df.columns if c not in RECORD_FIELDS]
    df = df[[*RECORD_FIELDS, *extra_columns]].copy()

    numeric = [c for c in RECORD_FIELDS if c in NUMERIC_FIELDS]
    df[numeric] = df[numeric].astype("float64")

    text = [c for c in RECORD_FIELDS if c not in NUMERIC_FIELDS]
    df[text] = df[text].astype(object)

    return df
