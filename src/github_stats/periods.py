"""Reporting windows relative to a reference instant."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import List, Optional

from dateutil.relativedelta import relativedelta

from .models import TimePeriod

# Ordered shortest to longest; callers rely on this order for display.
PERIOD_OFFSETS = (
    ("Last Week", relativedelta(days=7)),
    ("Last Month", relativedelta(months=1)),
    ("Last Year", relativedelta(years=1)),
)


def generate_periods(now: Optional[datetime] = None) -> List[TimePeriod]:
    """Return the Last Week, Last Month and Last Year periods ending at ``now``.

    Month and year offsets use calendar arithmetic, so the day of month is
    clamped to the length of the target month (e.g. March 31 minus one month
    is the last day of February).

    Args:
        now: Reference instant. Defaults to the current UTC time.
    """
    if now is None:
        now = datetime.now(timezone.utc)

    return [TimePeriod(name=name, since=now - offset, until=now) for name, offset in PERIOD_OFFSETS]
