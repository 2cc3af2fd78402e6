"""Paginated search over the GitHub issue search endpoint."""

from __future__ import annotations

import logging
from typing import List

from .config import DEFAULT_MAX_PAGES
from .errors import PaginationLimitExceeded
from .github_client import GitHubClient
from .models import SearchHit

logger = logging.getLogger(__name__)


def search_all(
    client: GitHubClient,
    query: str,
    max_pages: int = DEFAULT_MAX_PAGES,
) -> List[SearchHit]:
    """Fetch every page of results for ``query``.

    Pages are requested with a page size of 100 starting at page 1. A page with
    fewer than 100 hits (including an empty page) ends pagination. Hits are
    returned in request order.

    Raises:
        RemoteAPIError: If any page request fails. Pages already fetched are
            discarded.
        PaginationLimitExceeded: If page ``max_pages`` is still a full page.
        ValueError: If ``max_pages`` is not positive.
    """
    if max_pages <= 0:
        raise ValueError("max_pages must be greater than 0")

    page_size = client.SEARCH_PAGE_SIZE
    hits: List[SearchHit] = []

    for page in range(1, max_pages + 1):
        result = client.search_issues(query, page=page, per_page=page_size)
        hits.extend(result.hits)

        if len(result.hits) < page_size:
            logger.debug(
                "Search exhausted",
                extra={"query": query, "pages": page, "hits": len(hits)},
            )
            return hits

    raise PaginationLimitExceeded(
        f"Search for {query!r} still returned full pages after {max_pages} pages "
        f"({len(hits)} hits so far)"
    )


def count_all(
    client: GitHubClient,
    query: str,
    max_pages: int = DEFAULT_MAX_PAGES,
) -> int:
    """Return the number of hits for ``query`` across all pages."""
    return len(search_all(client, query, max_pages=max_pages))
