"""Student lookup by standard and roll number."""

from resultportal.lookup.locator import coerce_key, find_record, keys_equal
from resultportal.lookup.service import (
    LookupOutcome,
    QueryError,
    ResultQuery,
    check_result,
    lookup_in_text,
    validate_query,
)

__all__ = [
    "LookupOutcome",
    "QueryError",
    "ResultQuery",
    "check_result",
    "coerce_key",
    "find_record",
    "keys_equal",
    "lookup_in_text",
    "validate_query",
]
