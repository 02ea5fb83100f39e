"""
date_time_helper.py

Provides helper functions for conversion of instants and resolution of
timezones, with special focus on falling back to the ambient (system) zone
when an override cannot be resolved.

All features and modules should use ONLY these helpers for date/time logic.
"""

from __future__ import annotations

import logging
import time
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Optional

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dateutil import tz

logger = logging.getLogger(__name__)

# Zone ids we already warned about (log once per id)
_unknown_zones_logged: set[str] = set()


def utc_now_millis() -> int:
    """
    Returns the current wall-clock time as milliseconds since the epoch.
    Used as the default system clock for live updates.
    """
    return time.time_ns() // 1_000_000


def system_zone() -> tzinfo:
    """
    Returns the ambient default zone of the host, following its DST rules.
    Built per call so a changed TZ (after time.tzset) is picked up.

    :return: tzinfo of the local system clock
    """
    return tz.tzlocal()


def lookup_zone(zone_id: Optional[str]) -> Optional[tzinfo]:
    """
    Resolves an IANA zone id. Unknown or empty ids yield None.

    :param zone_id: IANA id such as "Europe/Berlin"
    :return: ZoneInfo or None
    """
    if not zone_id:
        return None
    try:
        return ZoneInfo(zone_id)
    except (ZoneInfoNotFoundError, ValueError, OSError):
        if zone_id not in _unknown_zones_logged:
            logger.warning("Unknown timezone '%s', using ambient zone", zone_id)
            _unknown_zones_logged.add(zone_id)
        return None


def resolve_zone(zone_id: Optional[str], ambient: tzinfo) -> tzinfo:
    """
    Returns the zone for *zone_id*, or *ambient* if it cannot be resolved.
    """
    zone = lookup_zone(zone_id)
    return zone if zone is not None else ambient


def millis_to_datetime(millis: int, zone: tzinfo) -> datetime:
    """
    Converts epoch milliseconds to an aware datetime in *zone*.
    """
    seconds, rest = divmod(millis, 1000)
    utc = datetime.fromtimestamp(seconds, tz=timezone.utc) + timedelta(milliseconds=rest)
    return utc.astimezone(zone)


def datetime_to_millis(dt: datetime) -> int:
    """
    Converts an aware datetime to epoch milliseconds.
    """
    if dt.tzinfo is None:
        raise ValueError("datetime must be timezone-aware")
    delta = dt - datetime(1970, 1, 1, tzinfo=timezone.utc)
    return (delta.days * 86_400 + delta.seconds) * 1000 + delta.microseconds // 1000


def today_at(hour: int, minute: int, *, now_millis: int, zone: tzinfo) -> datetime:
    """
    Returns today's date (as seen in *zone* at *now_millis*) at hour:minute.
    Seconds and microseconds are zeroed.
    """
    today = millis_to_datetime(now_millis, zone)
    return today.replace(hour=hour, minute=minute, second=0, microsecond=0)
