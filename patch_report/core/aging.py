"""Work-day metrics computation (pure functions)."""

from __future__ import annotations

from datetime import date, datetime

import numpy as np
import pytz

from .config import TIMEZONE


def report_today(tz_name: str = TIMEZONE) -> date:
    tz = pytz.timezone(tz_name)
    return datetime.now(tz=tz).date()


def work_days_between(start: date | datetime | None, end: date | datetime) -> int | None:
    """Count Monday-Friday days from ``start`` (inclusive) to ``end`` (exclusive).

    Returns ``None`` when ``start`` is missing and 0 when ``start`` is after
    ``end``; a patch never reports a negative age.
    """
    if start is None:
        return None
    if isinstance(start, datetime):
        start = start.date()
    if isinstance(end, datetime):
        end = end.date()
    if start >= end:
        return 0
    return int(np.busday_count(start, end))
