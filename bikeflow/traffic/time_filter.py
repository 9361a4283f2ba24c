# bikeflow/traffic/time_filter.py
from __future__ import annotations

from datetime import datetime

import pandas as pd

from bikeflow.types import UNFILTERED

WINDOW_MINUTES = 60


def is_unfiltered(time_filter: int) -> bool:
    return time_filter == UNFILTERED


def minutes_since_midnight(ts):
    """
    hour*60 + minute for a datetime, a Timestamp, or a datetime64 Series.
    Seconds and the date are dropped.
    """
    if isinstance(ts, pd.Series):
        return ts.dt.hour * 60 + ts.dt.minute
    return ts.hour * 60 + ts.minute


def format_time(minutes: int) -> str:
    """480 -> '8:00 AM'"""
    h, m = divmod(int(minutes), 60)
    return datetime(2000, 1, 1, h % 24, m).strftime("%I:%M %p").lstrip("0")


def parse_time_filter(raw) -> int:
    """
    Slider value -> time filter. Missing/blank or -1 means UNFILTERED.
    Anything else must be an integer; the range is not checked.
    """
    if raw is None:
        return UNFILTERED
    raw = str(raw).strip()
    if not raw:
        return UNFILTERED
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"time filter must be an integer, got {raw!r}")
    return value


def filter_trips_by_time(trips: pd.DataFrame, time_filter: int) -> pd.DataFrame:
    """
    Keep trips that start or end within WINDOW_MINUTES of time_filter
    (minute of day). The distance is linear: the window does not wrap
    around midnight, so t=10 does not see a trip at 23:50.
    """
    if is_unfiltered(time_filter):
        return trips

    started = minutes_since_midnight(trips["started_at"])
    ended = minutes_since_midnight(trips["ended_at"])

    keep = ((started - time_filter).abs() <= WINDOW_MINUTES) | (
        (ended - time_filter).abs() <= WINDOW_MINUTES
    )
    return trips[keep]
