"""Tests for record lookup by standard and roll number."""

import pytest

from resultportal.ingestion.parser import parse
from resultportal.lookup import lookup_in_text
from resultportal.lookup.locator import coerce_key, find_record, keys_equal
from resultportal.schemas.record import StudentRecord


class TestCoerceKey:
    """Tests for key normalization."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("5", 5),
            (" 101 ", 101),
            ("5th", 5),
            (5, 5),
            (5.0, 5),
            (5.7, 5),
            ("abc", "abc"),
            ("  x ", "x"),
            (None, ""),
        ],
    )
    def test_values(self, value: object, expected: object) -> None:
        """Test integer reading with a text fallback."""
        assert coerce_key(value) == expected  # type: ignore[arg-type]

    def test_keys_equal(self) -> None:
        """Test integer comparison and the text fallback."""
        assert keys_equal(5, 5)
        assert not keys_equal(5, 6)
        assert keys_equal("A1", " A1")
        assert not keys_equal(5, "abc")
        assert not keys_equal("", 0)
        assert not keys_equal("", "")
        assert not keys_equal(" ", "")


class TestFindRecord:
    """Tests for find_record."""

    def test_finds_sample_student(self, sample_csv: str) -> None:
        """Test the standard 5, roll 101 lookup."""
        record = find_record(parse(sample_csv), "5", "101")

        assert record is not None
        assert record.student_name == "Rahul Sharma"
        assert record.total == 425
        assert record.result == "PASS"

    def test_absent_student(self, sample_csv: str) -> None:
        """Test that an unknown roll number yields None."""
        assert find_record(parse(sample_csv), "6", "999") is None

    def test_both_keys_must_match(self, sample_csv: str) -> None:
        """Test that a roll number in another standard is not returned."""
        assert find_record(parse(sample_csv), "6", "101") is None
        assert find_record(parse(sample_csv), "5", "205") is None

    def test_empty_records(self) -> None:
        """Test lookup over no records."""
        assert find_record([], "5", "101") is None

    def test_header_only_sheet(self) -> None:
        """Test that a header-only sheet never finds anyone."""
        records = parse("roll_no,student_name,standard")
        assert find_record(records, "5", "101") is None

    def test_first_duplicate_wins(self) -> None:
        """Test that later duplicates are ignored."""
        records = [
            StudentRecord(roll_no=101, student_name="First", standard=5),
            StudentRecord(roll_no=101, student_name="Second", standard=5),
        ]
        record = find_record(records, "5", "101")
        assert record is not None
        assert record.student_name == "First"

    def test_keys_are_coerced(self, sample_csv: str) -> None:
        """Test padded and suffixed form input."""
        record = find_record(parse(sample_csv), " 05 ", "0101")
        assert record is not None
        assert record.roll_no == 101

    def test_fractional_fields_truncate(self) -> None:
        """Test that record numbers are truncated to integers."""
        records = [StudentRecord(roll_no=101.0, student_name="A", standard=5.5)]
        assert find_record(records, "5", "101") is records[0]

    def test_non_numeric_search_key_never_matches_numbers(self, sample_csv: str) -> None:
        """Test that text keys fall back to string comparison."""
        assert find_record(parse(sample_csv), "five", "101") is None

    def test_unset_standard_does_not_match(self) -> None:
        """Test that a record without a standard matches no search."""
        records = [StudentRecord(roll_no=101, student_name="A")]
        assert find_record(records, "5", "101") is None

    def test_nameless_row_is_never_found(self) -> None:
        """Test that dropped rows cannot be located."""
        text = "roll_no,student_name,standard\n104,,5"
        assert find_record(parse(text), "5", "104") is None

    def test_blank_standard_does_not_match_unset_standard(self) -> None:
        """Test that a blank search key never matches a record with no standard."""
        records = [StudentRecord(roll_no=101, student_name="A")]
        assert find_record(records, "", "101") is None

    def test_blank_standard_through_text_lookup(self) -> None:
        """Test that a sheet without a standard column cannot be searched blank."""
        assert lookup_in_text("roll_no,student_name\n101,Rahul Sharma", "", "101") is None
