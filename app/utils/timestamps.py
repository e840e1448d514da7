import re
from datetime import datetime, timezone

from app.core.constants import SECONDS_PER_DAY

# Jellyfin emits 7 fractional digits ("2024-03-01T20:15:42.1234567Z")
_FRACTION_RE = re.compile(r"(\.\d{6})\d+")


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def parse_timestamp(value) -> datetime | None:
    """Parse an ISO-8601 timestamp into an aware UTC datetime.

    Naive values are assumed to be UTC. Anything unparsable returns None.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        text = _FRACTION_RE.sub(r"\1", text)
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    try:
        return parsed.astimezone(timezone.utc)
    except (ValueError, OverflowError):
        # Offset pushes the moment outside the representable range
        return None


def age_in_days(moment: datetime | None, now: datetime) -> float:
    """Days elapsed since ``moment``; 0 when unknown or in the future."""
    if moment is None:
        return 0.0
    return max(0.0, (now - moment).total_seconds() / SECONDS_PER_DAY)
