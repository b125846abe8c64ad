"""Utility functions for the accesstrace application.

This module provides time parsing and byte formatting helpers used by
the fetcher and the CLI report.
"""

import re
from datetime import datetime, timedelta, timezone

from accesstrace.exceptions import ValidationError

RFC3339_PATTERN = re.compile(
    r"^(?P<seconds>\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2})"
    r"(?:\.(?P<fraction>\d+))?(?P<offset>Z|[+-]\d{2}:\d{2})$"
)

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

IEC_UNIT = 1024
IEC_PREFIXES = "KMGTPE"


def rfc3339_to_millis(value: str) -> int:
    """
    Parse an RFC 3339 date-time string into milliseconds since the epoch.

    Args:
        value: Time string such as 2024-01-02T03:04:05Z or
            2024-01-02T12:04:05+09:00

    Returns:
        Milliseconds since the Unix epoch

    Raises:
        ValidationError: If the string is not RFC 3339
    """
    match = RFC3339_PATTERN.match(value) if value else None
    if not match:
        raise ValidationError(
            f"Time {value!r} should be in RFC 3339 format",
            "Use format YYYY-MM-DDTHH:MM:SSZ or YYYY-MM-DDTHH:MM:SS+HH:MM",
        )
    seconds, fraction, offset = match.group("seconds", "fraction", "offset")
    # fromisoformat before 3.11 only takes 3 or 6 fractional digits
    fraction = (fraction or "")[:6].ljust(6, "0")
    offset = "+00:00" if offset == "Z" else offset
    try:
        parsed = datetime.fromisoformat(f"{seconds}.{fraction}{offset}")
    except ValueError as e:
        raise ValidationError(
            f"Time {value!r} is not a valid date-time: {e}",
            "Check the date and time components",
        ) from e
    return (parsed - EPOCH) // timedelta(milliseconds=1)


def byte_count_iec(size: int) -> str:
    """
    Format a byte count with binary prefixes.

    Examples:
        >>> byte_count_iec(1023)
        '1023 B'
        >>> byte_count_iec(1536)
        '1.5 KiB'
    """
    if size < IEC_UNIT:
        return f"{size} B"
    div, exp = IEC_UNIT, 0
    n = size // IEC_UNIT
    while n >= IEC_UNIT:
        div *= IEC_UNIT
        exp += 1
        n //= IEC_UNIT
    return f"{size / div:.1f} {IEC_PREFIXES[exp]}iB"


def time_validation(begin_time: str, end_time: str) -> None:
    """
    Validate the begin and end bounds of an export.

    Args:
        begin_time: RFC 3339 start of the range
        end_time: RFC 3339 end of the range

    Raises:
        ValidationError: If either bound is malformed or begin is after end
    """
    begin = rfc3339_to_millis(begin_time)
    end = rfc3339_to_millis(end_time)
    if begin > end:
        raise ValidationError(
            f"Begin time {begin_time} is after end time {end_time}",
            "Swap the --begin and --end values",
        )
