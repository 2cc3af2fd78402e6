"""GitHub search query construction."""

from __future__ import annotations

from datetime import datetime

from .models import TimePeriod

SEARCH_DATE_FORMAT = "%Y-%m-%d"


def format_search_date(value: datetime) -> str:
    """Format an instant as ``YYYY-MM-DD``, discarding the time of day."""
    return value.strftime(SEARCH_DATE_FORMAT)


def _date_range(period: TimePeriod) -> str:
    return f"{format_search_date(period.since)}..{format_search_date(period.until)}"


def build_merged_pr_query(user: str, org: str, period: TimePeriod) -> str:
    """Build the search query for pull requests authored by ``user`` and merged in ``period``."""
    return f"author:{user} org:{org} is:pr is:merged merged:{_date_range(period)}"


def build_reviewed_pr_query(user: str, org: str, period: TimePeriod) -> str:
    """Build the search query for items reviewed by ``user``.

    GitHub search has no review-timestamp qualifier, so the window applies to
    the creation date of the reviewed item.
    """
    return f"org:{org} reviewed-by:{user} created:{_date_range(period)}"
