"""
Timezone and datetime utilities.

Provides assembly of export "Day" and "Time" columns into timezone-aware
datetimes.
"""

import re
from datetime import datetime, tzinfo

import pytz

from cronometer_ledger.utils.exceptions import ConfigurationError, TimestampError

DEFAULT_TIMEZONE = "UTC"
DATETIME_FORMAT = "%Y-%m-%d %H:%M"
MIDNIGHT = "00:00"

_DATETIME_LAYOUT = re.compile(r"\d{4}-\d{2}-\d{2} \d{1,2}:\d{2}", re.ASCII)


def resolve_timezone(timezone: str | tzinfo | None = DEFAULT_TIMEZONE) -> tzinfo:
    """
    Resolve a timezone name or object.

    Args:
        timezone: IANA timezone name (e.g., "America/Santiago"), a tzinfo
            instance, or None for the default zone.

    Returns:
        tzinfo instance.

    Raises:
        ConfigurationError: If the timezone name is unknown.
    """
    if timezone is None:
        timezone = DEFAULT_TIMEZONE

    if isinstance(timezone, tzinfo):
        return timezone

    try:
        return pytz.timezone(timezone)
    except pytz.UnknownTimeZoneError as e:
        raise ConfigurationError(f"Unknown timezone: {timezone}") from e


def localize(dt: datetime, tz: tzinfo) -> datetime:
    """
    Attach a timezone to a naive datetime without shifting its wall clock.

    Args:
        dt: Naive datetime.
        tz: Target timezone.

    Returns:
        Timezone-aware datetime with the same wall-clock fields.
    """
    if isinstance(tz, pytz.BaseTzInfo):
        return tz.localize(dt)
    return dt.replace(tzinfo=tz)


def assemble_timestamp(
    date_str: str, time_str: str, timezone: str | tzinfo | None = DEFAULT_TIMEZONE
) -> datetime:
    """
    Combine export date and time strings into a timezone-aware datetime.

    Args:
        date_str: Date in "YYYY-MM-DD" form.
        time_str: 24-hour time of day in "HH:MM" form.
        timezone: Zone the wall-clock time is expressed in.

    Returns:
        Timezone-aware datetime object.

    Raises:
        TimestampError: If the combined string does not match the layout.
        ConfigurationError: If the timezone is unknown.
    """
    tz = resolve_timezone(timezone)
    combined = f"{date_str} {time_str}"

    if not _DATETIME_LAYOUT.fullmatch(combined):
        raise TimestampError(combined, f"does not match layout {DATETIME_FORMAT!r}")

    try:
        dt = datetime.strptime(combined, DATETIME_FORMAT)
    except ValueError as e:
        raise TimestampError(combined, str(e)) from e

    return localize(dt, tz)
