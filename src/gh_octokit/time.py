"""Timestamp helpers for the GitHub wire format.

GitHub sends timestamps as RFC 3339 strings in UTC, e.g. "2013-11-22T19:33:04Z".
"""

import logging
from datetime import UTC, datetime
from typing import Any

logger = logging.getLogger(__name__)

WIRE_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def parse_rfc3339(value: Any) -> datetime | None:
    """Parse a GitHub timestamp into a UTC datetime.

    Offsets other than "Z" are accepted and converted to UTC.

    Args:
        value: Timestamp string from a JSON payload (any type is accepted).

    Returns:
        UTC datetime, or None if value is not a string or can't be parsed.
    """
    if not isinstance(value, str):
        return None

    try:
        # Replace Z with +00:00 so offsets are handled uniformly
        dt = datetime.fromisoformat(value.replace("Z", "+00:00"))
        # Offsets at the edges of the calendar can overflow the datetime range
        return dt.replace(tzinfo=UTC) if dt.tzinfo is None else dt.astimezone(UTC)
    except (ValueError, OverflowError) as e:
        logger.debug("Ignoring unparsable timestamp %r: %s", value, e)
        return None


def format_rfc3339(dt: datetime) -> str:
    """Format a datetime in the GitHub wire format.

    Naive datetimes are taken to be UTC already.
    """
    if dt.tzinfo is not None:
        dt = dt.astimezone(UTC)
    return dt.strftime(WIRE_FORMAT)
