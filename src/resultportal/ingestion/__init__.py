"""
Sheet ingestion: fetching published CSV exports and parsing them into records.

All raw sheet loading happens through this package so that the lookup code
only deals with typed records.
"""

from resultportal.ingestion.parser import ParsedSheet, parse, parse_sheet
from resultportal.ingestion.source import (
    SheetFetchError,
    fetch_csv_text,
    load_sheet_text,
    read_csv_file,
)

__all__ = [
    "ParsedSheet",
    "SheetFetchError",
    "fetch_csv_text",
    "load_sheet_text",
    "parse",
    "parse_sheet",
    "read_csv_file",
]
