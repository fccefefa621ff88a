from datetime import date, datetime, timedelta, timezone, tzinfo
from typing import Any, Iterable, List, Mapping, Optional, Set, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from app.exceptions import InvalidTimestampError


##############
### streak ###
##############

TimeZoneLike = Union[tzinfo, str, None]


def resolve_timezone(tz: TimeZoneLike) -> tzinfo:
    """
    Turn a zone name (or tzinfo) into the tzinfo used for day keys.

    Parameters:
        tz (tzinfo | str | None): ``None`` and ``"UTC"`` both mean UTC.

    Returns:
        tzinfo: The reference time zone.

    Raises:
        ValueError: If the zone name is not a known IANA zone.
    """
    if tz is None:
        return timezone.utc
    if isinstance(tz, tzinfo):
        return tz
    if tz.upper() == "UTC":
        return timezone.utc
    try:
        return ZoneInfo(tz)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ValueError(f"unknown time zone: {tz!r}") from e


def _extract_timestamp(event: Any) -> Any:
    if isinstance(event, (date, str)):
        return event
    if isinstance(event, Mapping):
        if "created_at" in event:
            return event["created_at"]
        if "createdAt" in event:
            return event["createdAt"]
        raise InvalidTimestampError(event, "event has no created_at")
    if hasattr(event, "created_at"):
        return event.created_at
    raise InvalidTimestampError(event, "event has no created_at")


def to_day_key(value: Any, tz: TimeZoneLike = None) -> date:
    """
    Normalize a timestamp to its calendar date in the reference zone.

    Naive datetimes (and ISO strings without an offset) are taken to be UTC,
    which is how they come back from the database. Plain dates, and ISO
    strings with no time part, already are day keys and are kept as is.

    Parameters:
        value (datetime | date | str): The creation timestamp of an event.
        tz (tzinfo | str | None): Reference zone for the day boundary.

    Returns:
        date: The day key.

    Raises:
        InvalidTimestampError: If the value is missing or cannot be parsed.
    """
    if isinstance(value, str):
        text = value.strip()
        try:
            if len(text) == 10:
                return date.fromisoformat(text)
            parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
        except ValueError as e:
            raise InvalidTimestampError(value) from e
    elif isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        return value
    else:
        raise InvalidTimestampError(value)

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(resolve_timezone(tz)).date()


def distinct_days(events: Iterable[Any], tz: TimeZoneLike = None) -> List[date]:
    """Distinct day keys of the events, most recent first."""
    zone = resolve_timezone(tz)
    days: Set[date] = {to_day_key(_extract_timestamp(e), zone) for e in events}
    return sorted(days, reverse=True)


def calculate_streak(
    events: Optional[Iterable[Any]],
    now: Optional[datetime] = None,
    tz: TimeZoneLike = None,
) -> int:
    """
    Count the consecutive days with activity, ending today or yesterday.

    Only the set of distinct calendar days matters: several events on the
    same day count once and the input order is irrelevant. If the most
    recent active day is older than yesterday the streak is broken and the
    result is 0. Counting stops at the first gap.

    Parameters:
        events (Iterable): Progress updates, mappings or raw timestamps.
        now (datetime, optional): Reference moment. Defaults to the current time.
        tz (tzinfo | str, optional): Zone used for day boundaries. Defaults to UTC.

    Returns:
        int: The current streak length in days.

    Raises:
        InvalidTimestampError: If any event has a missing or malformed timestamp.
    """
    if not events:
        return 0

    zone = resolve_timezone(tz)
    days = distinct_days(events, zone)
    if not days:
        return 0

    if now is None:
        now = datetime.now(timezone.utc)
    today = to_day_key(now, zone)
    yesterday = today - timedelta(days=1)

    if days[0] not in (today, yesterday):
        return 0

    streak = 1
    for previous, current in zip(days, days[1:]):
        if previous - current != timedelta(days=1):
            break
        streak += 1
    return streak


def calculate_longest_streak(events: Optional[Iterable[Any]], tz: TimeZoneLike = None) -> int:
    """Length of the longest run of consecutive active days in the history."""
    if not events:
        return 0

    days = distinct_days(events, tz)
    if not days:
        return 0

    longest = run = 1
    for previous, current in zip(days, days[1:]):
        if previous - current == timedelta(days=1):
            run += 1
            longest = max(longest, run)
        else:
            run = 1
    return longest
