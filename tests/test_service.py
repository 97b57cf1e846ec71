"""Tests for lookup orchestration."""

from unittest.mock import MagicMock

import pytest
import requests

from resultportal.config.settings import PortalConfig
from resultportal.ingestion.source import SheetFetchError
from resultportal.lookup.service import (
    QueryError,
    check_result,
    lookup_in_text,
    validate_query,
)


class TestValidateQuery:
    """Tests for form input validation."""

    def test_valid_query(self, portal_config: PortalConfig) -> None:
        """Test that valid input is trimmed and resolved."""
        query = validate_query(portal_config, " local ", " 5 ", " 101 ")
        assert query.college_id == "local"
        assert query.college.name == "Springfield Public School"
        assert query.standard == "5"
        assert query.roll_number == "101"

    @pytest.mark.parametrize(
        ("college", "standard", "roll", "message"),
        [
            ("", "5", "101", "select a college"),
            ("nowhere", "5", "101", "select a college"),
            ("local", "", "101", "select a standard"),
            ("local", "4", "101", "select a standard"),
            ("local", "5", "", "enter your roll number"),
            ("local", "5", "10a", "numbers only"),
            ("local", "5", "-101", "numbers only"),
            ("local", "5", "１０１", "numbers only"),
        ],
    )
    def test_invalid_input(
        self,
        portal_config: PortalConfig,
        college: str,
        standard: str,
        roll: str,
        message: str,
    ) -> None:
        """Test the messages shown for each invalid field."""
        with pytest.raises(QueryError, match=message):
            validate_query(portal_config, college, standard, roll)

    def test_none_inputs(self, portal_config: PortalConfig) -> None:
        """Test that missing values behave like empty ones."""
        with pytest.raises(QueryError, match="select a college"):
            validate_query(portal_config, None, None, None)


class TestLookupInText:
    """Tests for the text-in, record-out contract."""

    def test_found(self, sample_csv: str) -> None:
        """Test the standard 5, roll 101 lookup."""
        record = lookup_in_text(sample_csv, "5", "101")
        assert record is not None
        assert record.student_name == "Rahul Sharma"
        assert record.total == 425
        assert record.result == "PASS"

    def test_not_found(self, sample_csv: str) -> None:
        """Test the absent lookup."""
        assert lookup_in_text(sample_csv, "6", "999") is None

    def test_header_only(self) -> None:
        """Test a document without data rows."""
        assert lookup_in_text("roll_no,student_name,standard", "5", "101") is None


class TestCheckResult:
    """Tests for the full fetch, parse and locate flow."""

    def test_local_sheet_found(self, portal_config: PortalConfig) -> None:
        """Test a lookup against a local sheet."""
        query = validate_query(portal_config, "local", "6", "201")
        outcome = check_result(portal_config, query)

        assert outcome.found
        assert outcome.record is not None
        assert outcome.record.student_name == "Amit Kumar"
        assert outcome.record.result == "FAIL"
        assert len(outcome.sheet.records) == 5

    def test_not_found_message(self, portal_config: PortalConfig) -> None:
        """Test the user-facing message for a missing student."""
        query = validate_query(portal_config, "local", "7", "999")
        outcome = check_result(portal_config, query)

        assert not outcome.found
        assert outcome.message == "No result found for Roll Number: 999 in 7th Standard"

    def test_remote_sheet(self, portal_config: PortalConfig, sample_csv: str) -> None:
        """Test a lookup through the HTTP session."""
        resp = MagicMock(ok=True, status_code=200, text=sample_csv, content=b"", encoding="utf-8")
        session = MagicMock()
        session.get.return_value = resp

        query = validate_query(portal_config, "remote", "6", "205")
        outcome = check_result(portal_config, query, session=session)

        assert outcome.record is not None
        assert outcome.record.student_name == "Sneha Gupta"

    def test_fetch_failure_propagates(self, portal_config: PortalConfig) -> None:
        """Test that network failures are raised, not turned into 'not found'."""
        session = MagicMock()
        session.get.side_effect = requests.Timeout("slow")

        query = validate_query(portal_config, "remote", "5", "101")
        with pytest.raises(SheetFetchError):
            check_result(portal_config, query, session=session)
