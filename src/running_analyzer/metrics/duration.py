"""
Duration and pace string conversions.

Durations are whole seconds. Strings use H:MM:SS when an hour or longer and
M:SS otherwise. Parsing comes in two flavours:

- parse_duration: lenient, any malformed string becomes 0 seconds
- parse_duration_strict: raises DurationParseError on malformed input
"""

import logging
import math
import re

from ..constants import TimeConstants
from ..exceptions import DurationParseError, InvalidDataError

logger = logging.getLogger(__name__)

_INTEGER_GROUP = re.compile(r"[0-9]+")
_SECONDS_GROUP = re.compile(r"[0-9]+(\.[0-9]*)?")


def _split_groups(text: str) -> list[str]:
    """Split a duration string into colon-separated groups."""
    groups = text.strip().split(":")
    if len(groups) not in (2, 3):
        raise DurationParseError(
            f"Expected 'H:MM:SS' or 'M:SS', got {len(groups)} group(s) in {text!r}"
        )
    *leading, seconds = groups
    for group in leading:
        if not _INTEGER_GROUP.fullmatch(group):
            raise DurationParseError(f"Invalid duration group {group!r} in {text!r}")
    if not _SECONDS_GROUP.fullmatch(seconds):
        raise DurationParseError(f"Invalid seconds group {seconds!r} in {text!r}")
    return groups


def _to_seconds(groups: list[str]) -> int:
    """Combine parsed groups into whole seconds, truncating fractions."""
    *leading, seconds = groups
    total = float(seconds)
    multiplier = TimeConstants.SECONDS_PER_MINUTE
    for group in reversed(leading):
        total += int(group) * multiplier
        multiplier *= TimeConstants.SECONDS_PER_MINUTE
    return int(total)


def parse_duration(text: str | None) -> int:
    """
    Parse a duration string into whole seconds.

    Accepts "H:MM:SS" or "M:SS". Anything else, including empty or
    non-numeric groups, silently resolves to 0 seconds.

    Args:
        text: Duration string

    Returns:
        Duration in whole seconds, or 0 if the string is not recognised
    """
    if text is None:
        return 0
    try:
        return _to_seconds(_split_groups(str(text)))
    except DurationParseError as e:
        logger.debug(f"Treating unparseable duration as 0 seconds: {e}")
        return 0


def parse_duration_strict(text: str) -> int:
    """
    Parse a duration string into whole seconds, rejecting malformed input.

    Args:
        text: Duration string in "H:MM:SS" or "M:SS" form

    Returns:
        Duration in whole seconds

    Raises:
        DurationParseError: If the string is not a valid duration, or a
            minutes or seconds group below the leading one is 60 or more
    """
    if not isinstance(text, str):
        raise DurationParseError(f"Duration must be a string, got {type(text)!r}")

    groups = _split_groups(text)
    for group in groups[1:]:
        if float(group) >= TimeConstants.SECONDS_PER_MINUTE:
            raise DurationParseError(f"Group {group!r} out of range in {text!r}")
    return _to_seconds(groups)


def format_duration(seconds: float) -> str:
    """
    Format seconds as "H:MM:SS" (an hour or more) or "M:SS".

    Fractional seconds are floored.

    Args:
        seconds: Non-negative duration in seconds

    Returns:
        Formatted duration string

    Raises:
        InvalidDataError: If seconds is negative or not finite
    """
    if not math.isfinite(seconds) or seconds < 0:
        raise InvalidDataError(f"Cannot format duration of {seconds} seconds")

    whole = math.floor(seconds)
    hours, remainder = divmod(whole, TimeConstants.SECONDS_PER_HOUR)
    minutes, secs = divmod(remainder, TimeConstants.SECONDS_PER_MINUTE)

    if hours > 0:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"


def format_pace(seconds_per_km: float) -> str:
    """Format a pace in seconds per km as "M:SS/km"."""
    return f"{format_duration(seconds_per_km)}/km"
