"""
Publish window math for the two-slot daily question set schedule.

Sets alternate between two shifts per day:
  open_time_1 -> open_time_2 (same day)
  open_time_2 -> open_time_1 (next day)
"""

from datetime import datetime, time, timedelta, tzinfo
from typing import Tuple


def _at(day, t: time, tz: tzinfo) -> datetime:
    return datetime.combine(day, t, tzinfo=tz)


def next_publish_time(now: datetime, open_time_1: time, open_time_2: time, tz: tzinfo) -> datetime:
    """First schedule slot strictly after `now`."""
    local_now = now.astimezone(tz)
    today = local_now.date()
    current = local_now.time()

    if current < open_time_1:
        return _at(today, open_time_1, tz)
    if current < open_time_2:
        return _at(today, open_time_2, tz)
    return _at(today + timedelta(days=1), open_time_1, tz)


def end_time_for(published_at: datetime, open_time_1: time, open_time_2: time, tz: tzinfo) -> datetime:
    """End of the shift that starts at `published_at`."""
    local_published = published_at.astimezone(tz)
    day = local_published.date()

    if local_published.time() == open_time_1:
        return _at(day, open_time_2, tz)
    return _at(day + timedelta(days=1), open_time_1, tz)


def publish_window(
    now: datetime,
    open_time_1: time,
    open_time_2: time,
    tz: tzinfo,
    previous_end_at: datetime = None,
) -> Tuple[datetime, datetime]:
    """
    (published_at, end_at) for the next set.
    A previous set's end_at is reused as-is so windows never gap or overlap.
    """
    if previous_end_at is not None:
        published_at = previous_end_at
    else:
        published_at = next_publish_time(now, open_time_1, open_time_2, tz)
    return published_at, end_time_for(published_at, open_time_1, open_time_2, tz)
