"""Entry point for github-personal-stats."""

from __future__ import annotations

import logging
import sys
from typing import Optional, Sequence

from .cli import parse_args
from .config import load_config
from .errors import AuthenticationError, ConfigurationError, RemoteAPIError
from .github_client import GitHubClient
from .periods import generate_periods
from .report import render_period_errors, render_stats_table
from .stats import collect_stats

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_UNEXPECTED = 1
EXIT_CONFIGURATION = 2
EXIT_AUTHENTICATION = 3
EXIT_API = 4
EXIT_ALL_PERIODS_FAILED = 5


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def run(argv: Optional[Sequence[str]] = None) -> int:
    """Parse arguments, compute stats for every period and print the table.

    Returns:
        Process exit code.
    """
    try:
        args = parse_args(argv)
        configure_logging(args.verbose)

        config = load_config(
            user=args.user,
            organization=args.org,
            token=args.token,
            max_pages=args.max_pages,
            timeout_seconds=args.timeout,
            deadline_seconds=args.deadline,
            max_workers=args.workers,
            api_url=args.api_url,
        )

        with GitHubClient(config=config) as client:
            outcomes = collect_stats(
                client,
                config.user,
                config.organization,
                generate_periods(),
                max_pages=config.max_pages,
                max_workers=config.max_workers,
            )

        for line in render_period_errors(outcomes):
            print(line)
        print(render_stats_table(outcomes, org=config.organization, user=config.user))

        if outcomes and all(outcome.stats is None for outcome in outcomes):
            return EXIT_ALL_PERIODS_FAILED
        return EXIT_OK
    except AuthenticationError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return EXIT_AUTHENTICATION
    except ConfigurationError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return EXIT_CONFIGURATION
    except RemoteAPIError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return EXIT_API
    except Exception:
        logger.exception("Unexpected error while computing GitHub stats")
        return EXIT_UNEXPECTED


def main() -> None:
    raise SystemExit(run())


if __name__ == "__main__":
    main()
