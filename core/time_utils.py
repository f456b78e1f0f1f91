# core/time_utils.py
import math
from datetime import date, datetime, timezone
from typing import Optional, Union

import pytz

from core.config import APP_TIMEZONE

try:
    TZ = pytz.timezone(APP_TIMEZONE)
except pytz.UnknownTimeZoneError:
    TZ = pytz.utc

SECONDS_PER_DAY = 86400


def now_local() -> datetime:
    return datetime.now(TZ)

def today_iso() -> str:
    return now_local().date().isoformat()

def utc_now_naive() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)

def parse_iso_date(value: str) -> date:
    return date.fromisoformat(str(value)[:10])

def _start_of_day(d: date, like: datetime) -> datetime:
    start = datetime(d.year, d.month, d.day)
    if like.tzinfo is None:
        return start
    tz = like.tzinfo
    if hasattr(tz, "localize"):
        return tz.localize(start)
    return start.replace(tzinfo=tz)

def days_since(start: Union[date, str], now: Union[datetime, date, None] = None) -> int:
    """Whole days elapsed from midnight of `start` until `now`, floored.

    Not clamped: a `start` later than `now` gives a negative count.
    """
    if isinstance(start, str):
        start = parse_iso_date(start)
    if isinstance(start, datetime):
        start = start.date()
    if now is None:
        now = now_local()
    if not isinstance(now, datetime):
        return (now - start).days
    elapsed = (now - _start_of_day(start, now)).total_seconds()
    return int(math.floor(elapsed / SECONDS_PER_DAY))

def format_hhmm(dt: Optional[datetime] = None) -> str:
    return (dt or now_local()).strftime("%H:%M")

def relative_label(then: datetime, now: Optional[datetime] = None) -> str:
    """Short "5m ago" style label used in the conversation list."""
    now = now or now_local()
    if then.tzinfo is None and now.tzinfo is not None:
        then = now.tzinfo.localize(then) if hasattr(now.tzinfo, "localize") else then.replace(tzinfo=now.tzinfo)
    secs = max(int((now - then).total_seconds()), 0)
    if secs < 60:
        return "just now"
    if secs < 3600:
        return f"{secs // 60}m ago"
    if secs < SECONDS_PER_DAY:
        return f"{secs // 3600}h ago"
    days = secs // SECONDS_PER_DAY
    if days == 1:
        return "Yesterday"
    if days < 7:
        return f"{days}d ago"
    return then.strftime("%b %d")
