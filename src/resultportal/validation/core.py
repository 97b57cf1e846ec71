"""
Health checks for configured results sheets.

Loads each college's sheet, parses it and validates the records against the
Pandera marksheet schema.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field

import pandas as pd
import pandera as pa
import requests

from resultportal.config.settings import PortalConfig
from resultportal.ingestion.parser import ParsedSheet, parse_sheet
from resultportal.ingestion.source import SheetFetchError, build_session, load_sheet_text
from resultportal.lookup.locator import Key, coerce_key
from resultportal.schemas.marksheet import MarksheetSchema, records_to_frame
from resultportal.schemas.record import RECORD_FIELDS, StudentRecord
from resultportal.utils.logging import get_logger

log = get_logger(__name__)


@dataclass
class SheetValidationResult:
    """Result of validating a single college's sheet."""

    college_id: str
    source: str
    loaded: bool
    schema_valid: bool | None
    record_count: int | None = None
    skipped_rows: int | None = None
    missing_columns: list[str] = field(default_factory=list)
    duplicate_keys: list[tuple[Key, Key]] = field(default_factory=list)
    error_message: str | None = None


def missing_columns(headers: Sequence[str]) -> list[str]:
    """Expected sheet columns absent from the parsed header."""
    present = set(headers)
    return [name for name in RECORD_FIELDS if name not in present]


def duplicate_keys(records: Sequence[StudentRecord]) -> list[tuple[Key, Key]]:
    """
    (standard, roll number) keys that occur more than once.

    Keys are normalized the way the locator compares them, so the locator
    returns the first occurrence and later rows are unreachable. Rows with an
    empty key can never be found and are not reported.
    """
    if not records:
        return []

    keys = pd.Series(
        [(coerce_key(r.standard), coerce_key(r.roll_no)) for r in records],
        dtype=object,
    )
    reachable = keys[keys.map(lambda k: k[0] != "" and k[1] != "")]
    dupes = reachable[reachable.duplicated(keep="first")].drop_duplicates()
    return list(dupes)


class SheetValidator:
    """
    Runs validation for every configured college.

    A sheet fails when it cannot be loaded, when expected columns are
    missing, or when its records violate the marksheet schema.
    """

    def __init__(
        self,
        config: PortalConfig,
        session: requests.Session | None = None,
    ) -> None:
        """
        Initialize sheet validator.

        Args:
            config: Portal configuration with the college sheets.
            session: Optional HTTP session shared across colleges.
        """
        self.config = config
        self.session = session

    def run(self, college_ids: Sequence[str] | None = None) -> list[SheetValidationResult]:
        """
        Validate the given colleges, or all of them.

        Raises:
            KeyError: If a requested college is not configured.
        """
        ids = list(college_ids) if college_ids else list(self.config.colleges)
        unknown = [cid for cid in ids if cid not in self.config.colleges]
        if unknown:
            msg = f"Unknown college(s): {', '.join(unknown)}"
            raise KeyError(msg)

        session = self.session or build_session(self.config.fetch)
        return [self.validate_college(cid, session) for cid in ids]

    def validate_college(
        self,
        college_id: str,
        session: requests.Session | None = None,
    ) -> SheetValidationResult:
        """Load, parse and validate one college's sheet."""
        college = self.config.colleges[college_id]

        try:
            text = load_sheet_text(college, self.config, session=session)
        except (SheetFetchError, OSError) as e:
            error_msg = f"{type(e).__name__}: {e!s}"
            log.error("Could not load sheet", college=college_id, error=error_msg)
            return SheetValidationResult(
                college_id=college_id,
                source=college.source,
                loaded=False,
                schema_valid=None,
                error_message=error_msg,
            )

        sheet = parse_sheet(text)
        return self.validate_sheet(college_id, college.source, sheet)

    def validate_sheet(
        self,
        college_id: str,
        source: str,
        sheet: ParsedSheet,
    ) -> SheetValidationResult:
        """Validate an already parsed sheet."""
        result = SheetValidationResult(
            college_id=college_id,
            source=source,
            loaded=True,
            schema_valid=True,
            record_count=len(sheet.records),
            skipped_rows=sheet.skipped_rows,
            missing_columns=missing_columns(sheet.headers),
            duplicate_keys=duplicate_keys(sheet.records),
        )

        if result.missing_columns:
            result.schema_valid = False
            result.error_message = f"Missing columns: {', '.join(result.missing_columns)}"
            log.error(
                "Sheet is missing columns",
                college=college_id,
                missing=result.missing_columns,
            )
            return result

        try:
            MarksheetSchema.validate(records_to_frame(sheet.records))
        except pa.errors.SchemaError as e:
            result.schema_valid = False
            result.error_message = self._format_schema_error(e)
            log.error(
                "Schema validation failed",
                college=college_id,
                error=result.error_message,
            )
            return result

        log.info(
            "Validation passed",
            college=college_id,
            records=result.record_count,
            skipped=result.skipped_rows,
        )
        return result

    def _format_schema_error(self, error: pa.errors.SchemaError) -> str:
        """Summarize a schema error, showing at most five failure cases."""
        failures = getattr(error, "failure_cases", None)
        if isinstance(failures, pd.DataFrame):
            n_failures = len(failures)
            if n_failures > 5:
                failures_str = failures.head(5).to_string(index=False)
                return f"{n_failures} validation errors (showing first 5):\n{failures_str}"
            return f"{n_failures} validation error(s):\n{failures.to_string(index=False)}"

        return str(error).split("\n")[0][:200]
