"""Tests for time parsing and byte formatting helpers."""

import pytest

from accesstrace.exceptions import ValidationError
from accesstrace.utils import byte_count_iec, rfc3339_to_millis, time_validation


class TestByteCountIec:
    @pytest.mark.parametrize(
        "size, expected",
        [
            (0, "0 B"),
            (1023, "1023 B"),
            (1024, "1.0 KiB"),
            (1536, "1.5 KiB"),
            (1048576, "1.0 MiB"),
            (5 * 1024**3, "5.0 GiB"),
        ],
    )
    def test_format(self, size, expected):
        assert byte_count_iec(size) == expected


class TestRfc3339ToMillis:
    def test_utc(self):
        assert rfc3339_to_millis("2023-11-14T22:13:20Z") == 1700000000000

    def test_offset(self):
        assert rfc3339_to_millis("2023-11-15T07:13:20+09:00") == 1700000000000

    def test_fraction_is_truncated_to_millis(self):
        assert rfc3339_to_millis("2023-11-14T22:13:20.123Z") == 1700000000123

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("2023-11-14T22:13:20.5Z", 1700000000500),
            ("2023-11-14T22:13:20.12Z", 1700000000120),
            ("2023-11-14T22:13:20.1234Z", 1700000000123),
            ("2023-11-14T22:13:20.123456789Z", 1700000000123),
            ("2023-11-15T07:13:20.5+09:00", 1700000000500),
        ],
    )
    def test_any_fraction_length(self, value, expected):
        assert rfc3339_to_millis(value) == expected

    @pytest.mark.parametrize(
        "value",
        ["", "2023-11-14", "2023-11-14 22:13:20", "2023-11-14T22:13:20", "now"],
    )
    def test_rejects_non_rfc3339(self, value):
        with pytest.raises(ValidationError):
            rfc3339_to_millis(value)

    def test_rejects_impossible_date(self):
        with pytest.raises(ValidationError, match="not a valid date-time"):
            rfc3339_to_millis("2023-02-30T00:00:00Z")


class TestTimeValidation:
    def test_valid_range(self):
        time_validation("2023-11-14T00:00:00Z", "2023-11-15T00:00:00Z")

    def test_begin_after_end(self):
        with pytest.raises(ValidationError, match="after end time"):
            time_validation("2023-11-15T00:00:00Z", "2023-11-14T00:00:00Z")
