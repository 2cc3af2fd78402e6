"""Configuration parsing and validation for github-personal-stats."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from .errors import AuthenticationError, ConfigurationError

DEFAULT_API_URL = "https://api.github.com"
DEFAULT_MAX_PAGES = 10
DEFAULT_TIMEOUT_SECONDS = 30
TOKEN_ENV_VAR = "GITHUB_TOKEN"


@dataclass(frozen=True)
class Config:
    """Validated runtime settings for one statistics run."""

    user: str
    organization: str
    token: str
    max_pages: int = DEFAULT_MAX_PAGES
    timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS
    deadline_seconds: Optional[int] = None
    max_workers: int = 1
    api_url: str = DEFAULT_API_URL


def _require_positive(name: str, value: Optional[int]) -> None:
    if value is not None and value <= 0:
        raise ConfigurationError(f"Invalid value for '{name}': expected an integer greater than 0.")


def load_config(
    user: Optional[str],
    organization: Optional[str],
    token: Optional[str] = None,
    max_pages: int = DEFAULT_MAX_PAGES,
    timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS,
    deadline_seconds: Optional[int] = None,
    max_workers: int = 1,
    api_url: Optional[str] = None,
) -> Config:
    """Build and validate application configuration.

    Args:
        user: GitHub login whose contributions are counted.
        organization: GitHub organization that scopes every search.
        token: Personal access token. Falls back to ``GITHUB_TOKEN`` when empty.
        max_pages: Upper bound on search pages fetched per query.
        timeout_seconds: Per-request timeout in seconds.
        deadline_seconds: Optional overall budget for the whole run.
        max_workers: Concurrent pull-request detail fetches per period.
        api_url: Alternative API root, e.g. a GitHub Enterprise host.

    Returns:
        A validated ``Config`` instance.

    Raises:
        AuthenticationError: If neither ``token`` nor ``GITHUB_TOKEN`` is set.
        ConfigurationError: If ``user`` or ``organization`` is empty, or a
            numeric setting is not greater than ``0``.
    """
    resolved_token = (token or os.getenv(TOKEN_ENV_VAR, "")).strip()
    if not resolved_token:
        raise AuthenticationError(
            "GitHub token is required. "
            f"Set the '{TOKEN_ENV_VAR}' environment variable or use the -token flag."
        )

    resolved_user = (user or "").strip()
    if not resolved_user:
        raise ConfigurationError("GitHub username is required. Use the -user flag.")

    resolved_org = (organization or "").strip()
    if not resolved_org:
        raise ConfigurationError("GitHub organization is required. Use the -org flag.")

    _require_positive("max_pages", max_pages)
    _require_positive("timeout_seconds", timeout_seconds)
    _require_positive("deadline_seconds", deadline_seconds)
    _require_positive("max_workers", max_workers)

    return Config(
        user=resolved_user,
        organization=resolved_org,
        token=resolved_token,
        max_pages=max_pages,
        timeout_seconds=timeout_seconds,
        deadline_seconds=deadline_seconds,
        max_workers=max_workers,
        api_url=(api_url or DEFAULT_API_URL).rstrip("/"),
    )
