"""Domain models for GitHub contribution statistics.

These dataclasses model only the subset of API payload fields that the
statistics computation consumes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional


@dataclass(frozen=True, slots=True)
class TimePeriod:
    """A named reporting window ending at ``until``."""

    name: str
    since: datetime
    until: datetime


@dataclass(frozen=True, slots=True)
class SearchHit:
    """One item returned by the issue search endpoint."""

    number: int
    repository_url: str
    title: str = ""
    html_url: str = ""

    @property
    def repository_name(self) -> str:
        """Repository name taken from the last segment of ``repository_url``."""
        return self.repository_url.rstrip("/").rsplit("/", 1)[-1]


@dataclass(slots=True)
class SearchPage:
    """A single page of search results."""

    hits: List[SearchHit]
    total_count: int = 0
    incomplete_results: bool = False


@dataclass(frozen=True, slots=True)
class PullRequestSummary:
    """Key used to fetch a pull request's detail record."""

    organization: str
    repository: str
    number: int


@dataclass(frozen=True, slots=True)
class PullRequestDetail:
    """Represents the line-change counts of a single pull request."""

    organization: str
    repository: str
    number: int
    additions: int = 0
    deletions: int = 0


@dataclass(frozen=True, slots=True)
class ResolutionResult:
    """Outcome of one detail fetch: either ``detail`` or ``error`` is set."""

    summary: Optional[PullRequestSummary]
    detail: Optional[PullRequestDetail] = None
    error: Optional[Exception] = field(default=None, compare=False)

    @property
    def ok(self) -> bool:
        return self.detail is not None


@dataclass(frozen=True, slots=True)
class Stats:
    """Aggregated contribution statistics for one period."""

    period: TimePeriod
    organization: str
    prs_merged: int
    lines_added: int
    lines_deleted: int
    prs_reviewed: int
    unresolved_count: int = 0


@dataclass(frozen=True, slots=True)
class PeriodOutcome:
    """Result of computing one period: either ``stats`` or ``error`` is set."""

    period: TimePeriod
    stats: Optional[Stats] = None
    error: Optional[Exception] = field(default=None, compare=False)
