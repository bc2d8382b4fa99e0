"""Unit tests for release_candidate.utils.timestamp."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from release_candidate.exceptions import InvalidTimestampPatternError
from release_candidate.utils.timestamp import format_timestamp

MOMENT = datetime(2015, 8, 1, 13, 5, 9)


@pytest.mark.unit
class TestFormatTimestamp:
    """Tests for Joda-style pattern formatting."""

    @pytest.mark.parametrize(
        "pattern, expected",
        [
            ("yyyyMMdd", "20150801"),
            ("yyyy-MM-dd", "2015-08-01"),
            ("HHmmss", "130509"),
            ("yyyyMMddHHmm", "201508011305"),
            ("yy", "15"),
            ("d/M", "1/8"),
            ("MMM", "Aug"),
        ],
    )
    def test_patterns(self, pattern: str, expected: str) -> None:
        """Test common field letters and widths."""
        assert format_timestamp(MOMENT, pattern) == expected

    def test_quoted_literal(self) -> None:
        """Test quoted text is copied, not interpreted."""
        assert format_timestamp(MOMENT, "yyyy'T'HH") == "2015T13"

    def test_quoted_letters_are_allowed(self) -> None:
        """Test letters that are not fields are fine inside quotes."""
        assert format_timestamp(MOMENT, "'build'yyyy") == "build2015"

    def test_escaped_quote(self) -> None:
        """Test a doubled quote renders a single quote."""
        assert format_timestamp(MOMENT, "yyyy''MM") == "2015'08"

    def test_upper_case_year_is_year_of_era(self) -> None:
        """Test YYYY is the calendar year, as in Joda-Time."""
        assert format_timestamp(datetime(2014, 12, 29), "YYYY") == "2014"

    @pytest.mark.parametrize(
        "pattern",
        ["", "iiii", "yyyy-nn", "yyyy'T", "ddd"],
        ids=["empty", "illegal", "illegal-mixed", "unterminated-quote", "bad-width"],
    )
    def test_invalid_patterns(self, pattern: str) -> None:
        """Test invalid patterns raise with the pattern text."""
        with pytest.raises(InvalidTimestampPatternError) as exc_info:
            format_timestamp(MOMENT, pattern)

        assert exc_info.value.pattern == pattern
        assert exc_info.value.details["pattern"] == pattern

    def test_illegal_letters_reported(self) -> None:
        """Test the error names the offending letters."""
        with pytest.raises(InvalidTimestampPatternError) as exc_info:
            format_timestamp(MOMENT, "yyyy-nn")

        assert "n" in exc_info.value.reason


@pytest.mark.unit
class TestFractionOfSecond:
    """Tests for S fields, which are cut off instead of rounded."""

    LATE = datetime(2015, 8, 1, 12, 0, 59, 999600)

    @pytest.mark.parametrize(
        "pattern, expected",
        [
            ("S", "9"),
            ("SS", "99"),
            ("SSS", "999"),
            ("SSSSSS", "999600"),
            ("SSSSSSSS", "99960000"),
            ("ss.SSS", "59.999"),
            ("HHmmssSSS", "120059999"),
        ],
    )
    def test_truncated(self, pattern: str, expected: str) -> None:
        """Test the fraction keeps its width and never carries into seconds."""
        assert format_timestamp(self.LATE, pattern) == expected

    def test_zero_padded(self) -> None:
        """Test small fractions keep their leading zeros."""
        moment = datetime(2015, 8, 1, 12, 0, 0, 5000)

        assert format_timestamp(moment, "SSS") == "005"

    def test_quoted_s_is_literal(self) -> None:
        """Test an S inside quotes is text, not a fraction."""
        assert format_timestamp(self.LATE, "'S'SS") == "S99"


@pytest.mark.unit
class TestTimeZones:
    """Tests for zone fields."""

    EDT = timezone(timedelta(hours=-4))

    def test_offset_from_aware_moment(self) -> None:
        """Test Z renders the offset of the moment's own timezone."""
        moment = datetime(2015, 8, 1, 12, tzinfo=self.EDT)

        assert format_timestamp(moment, "HH Z") == "12 -0400"

    def test_hours_are_not_converted(self) -> None:
        """Test an aware moment is formatted in its own timezone."""
        moment = datetime(2015, 8, 1, 23, 30, tzinfo=self.EDT)

        assert format_timestamp(moment, "yyyyMMdd HH:mm") == "20150801 23:30"
