"""
Tolerant CSV parsing for published results sheets.

Rows are split on newlines and fields on commas. A double quote toggles a
quoted section in which commas do not split; there is no escape for a
literal quote inside a value, a ``"`` always toggles. Rows that do not yield
a roll number and a student name are dropped rather than reported as errors.
"""

from dataclasses import dataclass, field

from resultportal.schemas.record import StudentRecord
from resultportal.utils.logging import get_logger

log = get_logger(__name__)

QUOTE = '"'
DELIMITER = ","


@dataclass
class ParsedSheet:
    """Records parsed from one sheet together with parse diagnostics."""

    headers: list[str] = field(default_factory=list)
    records: list[StudentRecord] = field(default_factory=list)
    data_rows: int = 0
    skipped_rows: int = 0


def split_fields(line: str) -> list[str]:
    """
    Split one line on commas that are outside double quotes.

    Quote characters are consumed, never emitted. There is always one more
    field than unquoted commas.

    Args:
        line: A single CSV line.

    Returns:
        Raw field values, not yet trimmed.
    """
    values: list[str] = []
    in_quotes = False
    current: list[str] = []

    for char in line:
        if char == QUOTE:
            in_quotes = not in_quotes
        elif char == DELIMITER and not in_quotes:
            values.append("".join(current))
            current = []
        else:
            current.append(char)

    values.append("".join(current))
    return values


def clean_value(value: str) -> str:
    """Strip every quote character and surrounding whitespace."""
    return value.replace(QUOTE, "").strip()


def parse_header(line: str) -> list[str]:
    """Normalize the header row into lowercase field names."""
    return [clean_value(name).lower() for name in split_fields(line)]


def parse_row(headers: list[str], line: str) -> StudentRecord:
    """
    Map one data line onto the headers.

    Values beyond the header count are ignored; headers beyond the value
    count are left unset.
    """
    values = [clean_value(value) for value in split_fields(line)]
    return StudentRecord.from_pairs(zip(headers, values))


def parse_sheet(text: str) -> ParsedSheet:
    """
    Parse a results sheet exported as CSV.

    Args:
        text: Full CSV document. The first line is the header.

    Returns:
        ParsedSheet with records in input order. Duplicates are kept.

    Raises:
        TypeError: If ``text`` is not a string.
    """
    if not isinstance(text, str):
        msg = f"Sheet text must be str, got {type(text).__name__}"
        raise TypeError(msg)

    lines = text.split("\n")
    if len(lines) < 2:
        log.info("Sheet has no data rows", lines=len(lines))
        return ParsedSheet(headers=parse_header(lines[0]) if lines[0].strip() else [])

    sheet = ParsedSheet(headers=parse_header(lines[0]))

    for line_number, raw_line in enumerate(lines[1:], start=2):
        line = raw_line.strip()
        if not line:
            continue

        sheet.data_rows += 1
        record = parse_row(sheet.headers, line)

        if not record.is_complete:
            sheet.skipped_rows += 1
            log.debug("Dropping incomplete row", line=line_number)
            continue

        sheet.records.append(record)

    log.info(
        "Parsed results sheet",
        records=len(sheet.records),
        skipped=sheet.skipped_rows,
    )
    return sheet


def parse(text: str) -> list[StudentRecord]:
    """Parse a results sheet and return only its records."""
    return parse_sheet(text).records
