"""Tests for statistics reduction and per-period orchestration."""

import sys
from datetime import datetime, timezone
from pathlib import Path
from unittest.mock import Mock

import pytest

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from github_stats.errors import RemoteAPIError
from github_stats.models import PullRequestDetail, SearchHit, SearchPage, Stats
from github_stats.periods import generate_periods
from github_stats.queries import format_search_date
from github_stats.stats import collect_stats, compute_stats, reduce_line_changes

NOW = datetime(2024, 3, 15, 10, 0, 0, tzinfo=timezone.utc)


def _detail(number: int, additions: int, deletions: int) -> PullRequestDetail:
    return PullRequestDetail(
        organization="acme", repository="widgets", number=number, additions=additions, deletions=deletions
    )


def _hits(count: int, start: int = 1):
    return [
        SearchHit(number=number, repository_url="https://api.github.com/repos/acme/widgets")
        for number in range(start, start + count)
    ]


def _client(merged_hits, reviewed_hits, details):
    """Build a client stub answering merged and reviewed searches from fixed hit lists."""
    client = Mock()
    client.SEARCH_PAGE_SIZE = 100

    def search_issues(query, page, per_page=100):
        hits = merged_hits if "is:merged" in query else reviewed_hits
        return SearchPage(hits=hits[(page - 1) * per_page : page * per_page])

    def get_pull_request(owner, repo, number):
        detail = details.get(number)
        if detail is None:
            raise RemoteAPIError(f"PR {number} not found", status_code=404)
        return detail

    client.search_issues.side_effect = search_issues
    client.get_pull_request.side_effect = get_pull_request
    return client


def test_reduce_line_changes_empty_is_zero():
    """Verify reducing no details yields (0, 0)."""
    assert reduce_line_changes([]) == (0, 0)


def test_reduce_line_changes_is_order_insensitive():
    """Verify the totals do not depend on resolution order."""
    details = [_detail(1, 10, 2), _detail(2, 5, 1), _detail(3, 0, 40)]

    assert reduce_line_changes(details) == (15, 43)
    assert reduce_line_changes(reversed(details)) == (15, 43)
    head_added, head_deleted = reduce_line_changes(details[:1])
    tail_added, tail_deleted = reduce_line_changes(details[1:])
    assert (head_added + tail_added, head_deleted + tail_deleted) == (15, 43)


def test_compute_stats_last_week_scenario():
    """Verify the alice/acme last-week scenario produces the expected stats."""
    week = generate_periods(NOW)[0]
    client = _client(
        merged_hits=_hits(2),
        reviewed_hits=_hits(4, start=50),
        details={1: _detail(1, 10, 2), 2: _detail(2, 5, 1)},
    )

    stats = compute_stats(client, "alice", "acme", week)

    assert (format_search_date(week.since), format_search_date(week.until)) == ("2024-03-08", "2024-03-15")
    assert stats == Stats(
        period=week,
        organization="acme",
        prs_merged=2,
        lines_added=15,
        lines_deleted=3,
        prs_reviewed=4,
        unresolved_count=0,
    )
    queries = [call.args[0] for call in client.search_issues.call_args_list]
    assert queries == [
        "author:alice org:acme is:pr is:merged merged:2024-03-08..2024-03-15",
        "org:acme reviewed-by:alice created:2024-03-08..2024-03-15",
    ]


def test_compute_stats_prs_merged_counts_hits_when_details_are_dropped():
    """Verify prs_merged counts all hits while line totals reflect only resolved PRs."""
    week = generate_periods(NOW)[0]
    client = _client(
        merged_hits=_hits(3),
        reviewed_hits=[],
        details={1: _detail(1, 10, 2), 3: _detail(3, 7, 7)},
    )

    stats = compute_stats(client, "alice", "acme", week)

    assert stats.prs_merged == 3
    assert (stats.lines_added, stats.lines_deleted) == (17, 9)
    assert stats.unresolved_count == 1
    assert stats.prs_reviewed == 0


def test_compute_stats_paginates_reviewed_search():
    """Verify reviewed counts accumulate across pages."""
    week = generate_periods(NOW)[0]
    client = _client(merged_hits=[], reviewed_hits=_hits(130), details={})

    stats = compute_stats(client, "alice", "acme", week)

    assert stats.prs_reviewed == 130
    assert client.search_issues.call_count == 3


def test_compute_stats_reviewed_search_failure_aborts_period():
    """Verify a failed reviewed search fails the whole period."""
    week = generate_periods(NOW)[0]
    client = _client(merged_hits=_hits(1), reviewed_hits=[], details={1: _detail(1, 1, 1)})
    client.search_issues.side_effect = [SearchPage(hits=_hits(1)), RemoteAPIError("search down")]

    with pytest.raises(RemoteAPIError):
        compute_stats(client, "alice", "acme", week)


def test_collect_stats_isolates_failed_period():
    """Verify a failing period is recorded and later periods still run."""
    periods = generate_periods(NOW)
    client = Mock()
    client.SEARCH_PAGE_SIZE = 100

    def search_issues(query, page, per_page=100):
        if "2024-02-15" in query:
            raise RemoteAPIError("secondary rate limit", status_code=403)
        return SearchPage(hits=[])

    client.search_issues.side_effect = search_issues

    outcomes = collect_stats(client, "alice", "acme", periods)

    assert [outcome.period.name for outcome in outcomes] == ["Last Week", "Last Month", "Last Year"]
    assert outcomes[0].stats is not None
    assert outcomes[1].stats is None
    assert isinstance(outcomes[1].error, RemoteAPIError)
    assert outcomes[2].stats is not None
    assert outcomes[2].stats.prs_merged == 0
