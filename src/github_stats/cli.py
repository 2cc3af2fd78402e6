"""Command-line argument parsing for github-personal-stats."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from .config import DEFAULT_MAX_PAGES, DEFAULT_TIMEOUT_SECONDS, TOKEN_ENV_VAR


def _positive_int(value: str) -> int:
    """Parse and validate a positive integer CLI value.

    Raises:
        argparse.ArgumentTypeError: If value is not a positive integer.
    """
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError("must be an integer") from exc

    if parsed <= 0:
        raise argparse.ArgumentTypeError("must be greater than 0")

    return parsed


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments for a statistics run.

    Both ``-flag`` and ``--flag`` spellings are accepted. Missing user,
    organization or token are reported by configuration loading, not here.
    """
    parser = argparse.ArgumentParser(
        prog="github-personal-stats",
        description=(
            "Show merged PRs, lines changed and PRs reviewed for a GitHub user "
            "within an organization over the last week, month and year."
        ),
    )

    parser.add_argument(
        "-token",
        "--token",
        default=None,
        help=f"GitHub API token (default: ${TOKEN_ENV_VAR}).",
    )
    parser.add_argument(
        "-user",
        "--user",
        default=None,
        help="GitHub username.",
    )
    parser.add_argument(
        "-org",
        "--org",
        default=None,
        help="GitHub organization.",
    )
    parser.add_argument(
        "--max-pages",
        type=_positive_int,
        default=DEFAULT_MAX_PAGES,
        help=f"Maximum search pages of 100 results per query (default: {DEFAULT_MAX_PAGES}).",
    )
    parser.add_argument(
        "--timeout",
        type=_positive_int,
        default=DEFAULT_TIMEOUT_SECONDS,
        help=f"Per-request timeout in seconds (default: {DEFAULT_TIMEOUT_SECONDS}).",
    )
    parser.add_argument(
        "--deadline",
        type=_positive_int,
        default=None,
        help="Overall time budget for the run in seconds (default: none).",
    )
    parser.add_argument(
        "--workers",
        type=_positive_int,
        default=1,
        help="Concurrent pull request detail fetches (default: 1).",
    )
    parser.add_argument(
        "--api-url",
        default=None,
        help="GitHub API root, e.g. for GitHub Enterprise (default: https://api.github.com).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )

    return parser.parse_args(argv)
