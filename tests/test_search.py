"""Tests for paginated search."""

import sys
from pathlib import Path
from unittest.mock import Mock

import pytest

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from github_stats.errors import PaginationLimitExceeded, RemoteAPIError
from github_stats.models import SearchHit, SearchPage
from github_stats.search import count_all, search_all


def _hits(start: int, count: int):
    return [
        SearchHit(number=number, repository_url="https://api.github.com/repos/acme/widgets")
        for number in range(start, start + count)
    ]


def _client(*pages):
    client = Mock()
    client.SEARCH_PAGE_SIZE = 100
    client.search_issues.side_effect = list(pages)
    return client


def test_search_all_single_short_page_stops_after_one_request():
    """Verify a first page with fewer than 100 hits ends pagination."""
    client = _client(SearchPage(hits=_hits(1, 3)))

    hits = search_all(client, "q")

    assert [hit.number for hit in hits] == [1, 2, 3]
    client.search_issues.assert_called_once_with("q", page=1, per_page=100)


def test_search_all_full_page_then_empty_page_issues_two_requests():
    """Verify exactly 100 hits followed by an empty page yields 100 hits in 2 requests."""
    client = _client(SearchPage(hits=_hits(1, 100)), SearchPage(hits=[]))

    hits = search_all(client, "q")

    assert len(hits) == 100
    assert client.search_issues.call_count == 2
    assert client.search_issues.call_args_list[1].kwargs["page"] == 2


def test_search_all_concatenates_pages_in_request_order():
    """Verify the result is the concatenation of every page in request order."""
    pages = [_hits(1, 100), _hits(101, 100), _hits(201, 7)]
    client = _client(*(SearchPage(hits=page) for page in pages))

    hits = search_all(client, "q")

    assert hits == pages[0] + pages[1] + pages[2]
    assert [call.kwargs["page"] for call in client.search_issues.call_args_list] == [1, 2, 3]


def test_search_all_failure_mid_pagination_discards_results():
    """Verify a failing page aborts the whole search."""
    client = _client(SearchPage(hits=_hits(1, 100)), RemoteAPIError("boom", status_code=502))

    with pytest.raises(RemoteAPIError):
        search_all(client, "q")


def test_search_all_raises_when_page_cap_is_reached_with_full_pages():
    """Verify a full page at the page cap raises PaginationLimitExceeded."""
    client = _client(*(SearchPage(hits=_hits(1, 100)) for _ in range(3)))

    with pytest.raises(PaginationLimitExceeded):
        search_all(client, "q", max_pages=3)

    assert client.search_issues.call_count == 3


def test_search_all_short_page_at_cap_is_not_an_error():
    """Verify a short final page exactly at the cap completes normally."""
    client = _client(SearchPage(hits=_hits(1, 100)), SearchPage(hits=_hits(101, 1)))

    hits = search_all(client, "q", max_pages=2)

    assert len(hits) == 101


def test_search_all_rejects_non_positive_page_cap():
    """Verify max_pages must be positive."""
    with pytest.raises(ValueError):
        search_all(_client(), "q", max_pages=0)


def test_count_all_counts_hits_across_pages():
    """Verify count_all returns the total hit count."""
    client = _client(SearchPage(hits=_hits(1, 100)), SearchPage(hits=_hits(101, 4)))

    assert count_all(client, "q") == 104
