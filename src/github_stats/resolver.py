"""Resolution of search hits into pull request detail records."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List, Sequence

from .errors import RemoteAPIError
from .github_client import GitHubClient
from .models import PullRequestDetail, PullRequestSummary, ResolutionResult, SearchHit

logger = logging.getLogger(__name__)


def summarize_hit(hit: SearchHit, org: str) -> PullRequestSummary:
    """Build the detail-fetch key for a search hit.

    Raises:
        ValueError: If the hit's repository URL has no repository name.
    """
    repository = hit.repository_name
    if not repository:
        raise ValueError(f"Search hit #{hit.number} has no repository name: {hit.repository_url!r}")
    return PullRequestSummary(organization=org, repository=repository, number=hit.number)


def resolve_pull_request(client: GitHubClient, hit: SearchHit, org: str) -> ResolutionResult:
    """Fetch the detail record for one hit, capturing failures in the result."""
    try:
        summary = summarize_hit(hit, org)
    except ValueError as exc:
        logger.warning(
            "Dropping search hit without repository",
            extra={"pr_number": hit.number, "repository_url": hit.repository_url},
        )
        return ResolutionResult(summary=None, error=exc)

    try:
        detail = client.get_pull_request(summary.organization, summary.repository, summary.number)
    except RemoteAPIError as exc:
        logger.warning(
            "Dropping pull request whose details could not be fetched",
            extra={
                "org": summary.organization,
                "repo": summary.repository,
                "pr_number": summary.number,
                "error": str(exc),
            },
        )
        return ResolutionResult(summary=summary, error=exc)

    return ResolutionResult(summary=summary, detail=detail)


def resolve_pull_requests(
    client: GitHubClient,
    hits: Sequence[SearchHit],
    org: str,
    max_workers: int = 1,
) -> List[ResolutionResult]:
    """Resolve every hit into a ``ResolutionResult``, preserving hit order.

    A failed fetch never aborts the batch: it yields a result with ``error``
    set. With ``max_workers > 1`` the fetches run on a thread pool.
    """
    if max_workers <= 1 or len(hits) <= 1:
        return [resolve_pull_request(client, hit, org) for hit in hits]

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        return list(executor.map(lambda hit: resolve_pull_request(client, hit, org), hits))


def resolved_details(results: Sequence[ResolutionResult]) -> List[PullRequestDetail]:
    """Return the detail records of the successful results."""
    return [result.detail for result in results if result.detail is not None]
