"""
Result lookup orchestration.

Validates the query the way the result form does, loads the college's sheet,
parses it and locates the student.
"""

from dataclasses import dataclass

import requests

from resultportal.config.settings import CollegeConfig, PortalConfig
from resultportal.ingestion.parser import ParsedSheet, parse_sheet
from resultportal.ingestion.source import load_sheet_text
from resultportal.lookup.locator import find_record
from resultportal.schemas.record import StudentRecord
from resultportal.utils.logging import get_logger, log_context

log = get_logger(__name__)


class QueryError(ValueError):
    """Raised when the lookup form input is incomplete or malformed."""


@dataclass(frozen=True)
class ResultQuery:
    """A validated lookup request."""

    college_id: str
    college: CollegeConfig
    standard: str
    roll_number: str


@dataclass
class LookupOutcome:
    """Result of one lookup, found or not."""

    query: ResultQuery
    record: StudentRecord | None
    sheet: ParsedSheet

    @property
    def found(self) -> bool:
        """Whether a record matched."""
        return self.record is not None

    @property
    def message(self) -> str:
        """User-facing summary for a lookup without a match."""
        if self.found:
            return f"Result found for Roll Number: {self.query.roll_number}"
        return (
            f"No result found for Roll Number: {self.query.roll_number} "
            f"in {self.query.standard}th Standard"
        )


def validate_query(
    config: PortalConfig,
    college_id: str | None,
    standard: str | None,
    roll_number: str | None,
) -> ResultQuery:
    """
    Check the form input before any sheet is fetched.

    Raises:
        QueryError: With the message shown to the user.
    """
    college_id = (college_id or "").strip()
    standard = (standard or "").strip()
    roll_number = (roll_number or "").strip()

    college = config.get_college(college_id) if college_id else None
    if college is None:
        msg = "Please select a college/school"
        raise QueryError(msg)

    if not standard or standard not in config.standards:
        msg = "Please select a standard/class"
        raise QueryError(msg)

    if not roll_number:
        msg = "Please enter your roll number"
        raise QueryError(msg)

    if not roll_number.isascii() or not roll_number.isdigit():
        msg = "Roll number should contain numbers only"
        raise QueryError(msg)

    return ResultQuery(
        college_id=college_id,
        college=college,
        standard=standard,
        roll_number=roll_number,
    )


def lookup_in_text(
    text: str,
    grade_level: str,
    identifier: str,
) -> StudentRecord | None:
    """Parse a CSV document and return the matching record, if any."""
    return find_record(parse_sheet(text).records, grade_level, identifier)


def check_result(
    config: PortalConfig,
    query: ResultQuery,
    session: requests.Session | None = None,
) -> LookupOutcome:
    """
    Fetch the college's sheet and look up the student.

    Args:
        config: Portal configuration.
        query: Validated query from :func:`validate_query`.
        session: Optional HTTP session to reuse.

    Returns:
        LookupOutcome; a missing student is not an error.

    Raises:
        SheetFetchError: If the sheet cannot be downloaded.
        FileNotFoundError: If a local sheet is missing.
    """
    with log_context(
        college=query.college_id,
        standard=query.standard,
        roll=query.roll_number,
    ):
        log.info("Checking result")
        text = load_sheet_text(query.college, config, session=session)
        sheet = parse_sheet(text)
        record = find_record(sheet.records, query.standard, query.roll_number)

        if record is None:
            log.info("No matching record", records=len(sheet.records))
        else:
            log.info("Record found")

        return LookupOutcome(query=query, record=record, sheet=sheet)
