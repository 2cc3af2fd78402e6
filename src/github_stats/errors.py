"""Custom exception types for github-personal-stats."""

from __future__ import annotations

from typing import Optional


class GitHubStatsError(Exception):
    """Base exception for all recoverable statistics errors."""


class ConfigurationError(GitHubStatsError):
    """Raised when runtime configuration values are missing or invalid."""


class AuthenticationError(ConfigurationError):
    """Raised when no GitHub access token is available."""


class RemoteAPIError(GitHubStatsError):
    """Raised when a GitHub API request fails or returns an unexpected response."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class PaginationLimitExceeded(RemoteAPIError):
    """Raised when a search still returns full pages after the page cap."""


class DeadlineExceeded(RemoteAPIError):
    """Raised when the run deadline passes before a remote call is issued."""
