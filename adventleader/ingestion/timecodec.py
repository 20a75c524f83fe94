"""
Timestamp codec for the leaderboard API.

The API encodes star times as fixed-offset text (2018-12-01T06:12:44+0100),
newer boards send integer epoch seconds instead, and members without any star
carry "null". Everything is turned into a timezone-aware datetime; "no star"
becomes ZERO_TIMESTAMP, which compares before every real time.
"""

from datetime import datetime, timezone

from adventleader.config import TIMESTAMP_FORMAT, NULL_TIMESTAMP
from adventleader.utils import TIMESTAMP_RE

ZERO_TIMESTAMP = datetime(1, 1, 1, tzinfo=timezone.utc)


class MalformedTimestamp(ValueError):
    """Raised when a timestamp does not match the fixed-offset format"""
    pass


def is_zero(value: datetime) -> bool:
    return value == ZERO_TIMESTAMP


def parse_timestamp(text: str) -> datetime:
    """
    Parse a fixed-offset timestamp.

    Args:
        text: Either `YYYY-MM-DDTHH:MM:SS±HHMM` or the literal "null"

    Returns:
        Timezone-aware datetime, or ZERO_TIMESTAMP for "null"

    Raises:
        MalformedTimestamp: If the text matches neither form
    """
    if text == NULL_TIMESTAMP:
        return ZERO_TIMESTAMP

    if not isinstance(text, str) or not TIMESTAMP_RE.match(text):
        raise MalformedTimestamp(f"Malformed timestamp: {text!r}")

    try:
        return datetime.strptime(text, TIMESTAMP_FORMAT)
    except ValueError as e:
        # Shape is right but a field is out of range (month 13, hour 25, ...)
        raise MalformedTimestamp(f"Malformed timestamp: {text!r} ({e})")


def format_timestamp(value: datetime) -> str:
    """Inverse of parse_timestamp; the zero sentinel formats as "null"."""
    if is_zero(value):
        return NULL_TIMESTAMP
    # %Y is not zero-padded below year 1000 on every platform
    return f"{value.year:04d}" + value.strftime(TIMESTAMP_FORMAT[2:])


def coerce_timestamp(value) -> datetime:
    """
    Convert a raw JSON value into a timestamp.

    Accepts None, the "null" string, fixed-offset text and epoch seconds
    (int, float or a digit-only string). Epoch 0 is treated as "no star".

    Raises:
        MalformedTimestamp: If the value cannot be interpreted
    """
    if value is None:
        return ZERO_TIMESTAMP

    # bool is an int subclass; a boolean is never a time
    if isinstance(value, bool):
        raise MalformedTimestamp(f"Malformed timestamp: {value!r}")

    if isinstance(value, str) and value.isascii() and value.isdigit():
        value = int(value)

    if isinstance(value, (int, float)):
        if value == 0:
            return ZERO_TIMESTAMP
        try:
            return datetime.fromtimestamp(value, tz=timezone.utc)
        except (OverflowError, OSError, ValueError) as e:
            raise MalformedTimestamp(f"Epoch value out of range: {value!r} ({e})")

    return parse_timestamp(value)
