"""Contribution statistics aggregation.

This module turns a (user, organization, period) tuple into a ``Stats``
record:
- PRs merged: authored by the user and merged inside the period
- Lines added / deleted: summed over the merged PRs that could be resolved
- PRs reviewed: items in the organization reviewed by the user
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Sequence, Tuple

from .config import DEFAULT_MAX_PAGES
from .errors import RemoteAPIError
from .github_client import GitHubClient
from .models import PeriodOutcome, PullRequestDetail, Stats, TimePeriod
from .queries import build_merged_pr_query, build_reviewed_pr_query
from .resolver import resolve_pull_requests, resolved_details
from .search import count_all, search_all

logger = logging.getLogger(__name__)


def reduce_line_changes(details: Iterable[PullRequestDetail]) -> Tuple[int, int]:
    """Sum additions and deletions across ``details``.

    Returns ``(lines_added, lines_deleted)``; empty input yields ``(0, 0)``.
    """
    lines_added = 0
    lines_deleted = 0

    for detail in details:
        lines_added += detail.additions or 0
        lines_deleted += detail.deletions or 0

    return lines_added, lines_deleted


def compute_stats(
    client: GitHubClient,
    user: str,
    org: str,
    period: TimePeriod,
    max_pages: int = DEFAULT_MAX_PAGES,
    max_workers: int = 1,
) -> Stats:
    """Compute contribution statistics for one period.

    Business logic:
    - Search merged PRs authored by ``user``; the hit count is ``prs_merged``.
    - Resolve each hit's detail record and sum line changes. Hits whose
      details cannot be fetched are excluded from the line totals and counted
      in ``unresolved_count``; ``prs_merged`` still counts them.
    - Search items reviewed by ``user``; the hit count is ``prs_reviewed``.

    Raises:
        RemoteAPIError: If either search fails.
    """
    merged_hits = search_all(client, build_merged_pr_query(user, org, period), max_pages=max_pages)

    results = resolve_pull_requests(client, merged_hits, org, max_workers=max_workers)
    lines_added, lines_deleted = reduce_line_changes(resolved_details(results))
    unresolved_count = sum(1 for result in results if not result.ok)

    prs_reviewed = count_all(client, build_reviewed_pr_query(user, org, period), max_pages=max_pages)

    stats = Stats(
        period=period,
        organization=org,
        prs_merged=len(merged_hits),
        lines_added=lines_added,
        lines_deleted=lines_deleted,
        prs_reviewed=prs_reviewed,
        unresolved_count=unresolved_count,
    )

    logger.info(
        "Computed period stats",
        extra={
            "period": period.name,
            "org": org,
            "prs_merged": stats.prs_merged,
            "lines_added": stats.lines_added,
            "lines_deleted": stats.lines_deleted,
            "prs_reviewed": stats.prs_reviewed,
            "unresolved_count": stats.unresolved_count,
        },
    )

    return stats


def collect_stats(
    client: GitHubClient,
    user: str,
    org: str,
    periods: Sequence[TimePeriod],
    max_pages: int = DEFAULT_MAX_PAGES,
    max_workers: int = 1,
) -> List[PeriodOutcome]:
    """Compute stats for each period in order, isolating per-period failures.

    A ``RemoteAPIError`` in one period is recorded on its outcome and the
    remaining periods are still computed.
    """
    outcomes: List[PeriodOutcome] = []

    for period in periods:
        try:
            stats = compute_stats(
                client,
                user,
                org,
                period,
                max_pages=max_pages,
                max_workers=max_workers,
            )
        except RemoteAPIError as exc:
            logger.warning(
                "Failed to compute period stats",
                extra={"period": period.name, "org": org, "error": str(exc)},
            )
            outcomes.append(PeriodOutcome(period=period, error=exc))
            continue

        outcomes.append(PeriodOutcome(period=period, stats=stats))

    return outcomes
