"""GitHub REST API client for contribution statistics."""

from __future__ import annotations

import logging
import time
from typing import Any, Dict, List, Optional

import requests

from .config import Config
from .errors import DeadlineExceeded, RemoteAPIError
from .models import PullRequestDetail, SearchHit, SearchPage

logger = logging.getLogger(__name__)


class GitHubClient:
    """Small, typed client for the GitHub search and pull request APIs.

    Every request is bounded by the per-request timeout and, when the config
    sets ``deadline_seconds``, by the time left in the run.
    """

    SEARCH_PAGE_SIZE = 100
    _API_VERSION = "2022-11-28"

    def __init__(self, config: Config) -> None:
        """Initialize an authenticated GitHub API client.

        Args:
            config: Validated runtime configuration including the access token.
        """
        self._config = config
        self._base_url = config.api_url
        self._timeout_seconds = config.timeout_seconds
        self._deadline_at: Optional[float] = None
        if config.deadline_seconds is not None:
            self._deadline_at = time.monotonic() + config.deadline_seconds

        self._session = requests.Session()
        self._session.headers.update(
            {
                "Accept": "application/vnd.github+json",
                "Authorization": f"Bearer {config.token}",
                "X-GitHub-Api-Version": self._API_VERSION,
            }
        )

    def __enter__(self) -> "GitHubClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        self._session.close()

    def _build_url(self, path: str) -> str:
        """Build a fully qualified API URL from a path below the API root."""
        return f"{self._base_url}/{path.lstrip('/')}"

    def _request_timeout(self, url: str) -> float:
        """Return the timeout for the next request, bounded by the run deadline.

        Raises:
            DeadlineExceeded: If the run deadline has already passed.
        """
        if self._deadline_at is None:
            return float(self._timeout_seconds)

        remaining = self._deadline_at - time.monotonic()
        if remaining <= 0:
            raise DeadlineExceeded(f"Run deadline exceeded before GET {url}")
        return min(float(self._timeout_seconds), remaining)

    def _get_json(self, path: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Execute a single GET request and return its JSON object payload.

        Raises:
            RemoteAPIError: If the request fails, returns HTTP >= 400,
                or does not return a JSON object.
        """
        url = self._build_url(path)
        timeout = self._request_timeout(url)

        try:
            response = self._session.get(url, params=params, timeout=timeout)
        except requests.RequestException as exc:
            raise RemoteAPIError(f"GitHub request failed: GET {url}: {exc}") from exc

        status_code = response.status_code
        if status_code >= 400:
            raise RemoteAPIError(
                f"GitHub API request failed: GET {url} returned {status_code} - {response.text}",
                status_code=status_code,
            )

        try:
            payload = response.json()
        except ValueError as exc:
            raise RemoteAPIError(
                f"GitHub API returned invalid JSON: GET {url}", status_code=status_code
            ) from exc

        if not isinstance(payload, dict):
            raise RemoteAPIError(
                f"GitHub API returned unexpected payload shape: GET {url}", status_code=status_code
            )

        return payload

    def search_issues(self, query: str, page: int, per_page: int = SEARCH_PAGE_SIZE) -> SearchPage:
        """Fetch one page of issue/pull request search results.

        Args:
            query: GitHub search query string.
            page: 1-based page number.
            per_page: Page size, at most 100.
        """
        payload = self._get_json(
            "search/issues",
            params={"q": query, "page": page, "per_page": per_page},
        )

        hits: List[SearchHit] = []
        for item in payload.get("items") or []:
            number = item.get("number")
            repository_url = item.get("repository_url")
            if number is None or not repository_url:
                raise RemoteAPIError(
                    f"GitHub search item is missing required fields: query={query!r}, item={item}"
                )
            hits.append(
                SearchHit(
                    number=int(number),
                    repository_url=str(repository_url),
                    title=str(item.get("title") or ""),
                    html_url=str(item.get("html_url") or ""),
                )
            )

        logger.debug(
            "Fetched search page",
            extra={"query": query, "page": page, "hits": len(hits)},
        )

        return SearchPage(
            hits=hits,
            total_count=int(payload.get("total_count") or 0),
            incomplete_results=bool(payload.get("incomplete_results", False)),
        )

    def get_pull_request(self, owner: str, repo: str, number: int) -> PullRequestDetail:
        """Fetch a single pull request and return its line-change counts."""
        payload = self._get_json(f"repos/{owner}/{repo}/pulls/{number}")

        logger.debug(
            "Fetched pull request",
            extra={"org": owner, "repo": repo, "pr_number": number},
        )

        return PullRequestDetail(
            organization=owner,
            repository=repo,
            number=int(payload.get("number") or number),
            additions=int(payload.get("additions") or 0),
            deletions=int(payload.get("deletions") or 0),
        )
