"""Console rendering of contribution statistics.

This module provides utilities for:
- Aligning rows into fixed-width, left-aligned text columns.
- Building the per-period statistics table with its summary lines.
- Rendering inline error lines for periods that could not be computed.
"""

from __future__ import annotations

from typing import List, Sequence

from .models import PeriodOutcome

HEADER = ["Period", "PRs Merged", "Lines Added", "Lines Deleted", "PRs Reviewed"]
RULE = ["------", "---------", "----------", "------------", "-----------"]
COLUMN_PADDING = 2


def align_columns(rows: Sequence[Sequence[str]], padding: int = COLUMN_PADDING) -> List[str]:
    """Left-align cells so every column is as wide as its widest cell plus ``padding``.

    Args:
        rows: Table rows; shorter rows leave trailing columns empty.
        padding: Spaces between columns.

    Returns:
        One rendered line per row, with trailing whitespace stripped.
    """
    if not rows:
        return []

    column_count = max(len(row) for row in rows)
    widths = [0] * column_count
    for row in rows:
        for index, cell in enumerate(row):
            widths[index] = max(widths[index], len(cell))

    lines = []
    for row in rows:
        cells = [cell.ljust(widths[index] + padding) for index, cell in enumerate(row)]
        lines.append("".join(cells).rstrip())
    return lines


def render_period_errors(outcomes: Sequence[PeriodOutcome]) -> List[str]:
    """Return one error line per failed period, in generation order."""
    return [
        f"Error getting stats for {outcome.period.name}: {outcome.error}"
        for outcome in outcomes
        if outcome.error is not None
    ]


def render_stats_table(outcomes: Sequence[PeriodOutcome], org: str, user: str) -> str:
    """Render the statistics table followed by the organization and user.

    Failed periods are omitted from the table. When merged PRs could not be
    resolved, a note per affected period follows the summary lines.

    Args:
        outcomes: Period outcomes in generation order.
        org: Organization the stats were computed for.
        user: GitHub login the stats were computed for.

    Returns:
        Formatted multi-line text report.
    """
    rows: List[List[str]] = [HEADER, RULE]
    notes: List[str] = []

    for outcome in outcomes:
        stats = outcome.stats
        if stats is None:
            continue

        rows.append(
            [
                stats.period.name,
                str(stats.prs_merged),
                str(stats.lines_added),
                str(stats.lines_deleted),
                str(stats.prs_reviewed),
            ]
        )
        if stats.unresolved_count:
            notes.append(
                f"Note: {stats.unresolved_count} merged PR(s) in {stats.period.name} "
                "could not be resolved; line counts exclude them."
            )

    lines = align_columns(rows)
    lines.append("")
    lines.append(f"Organization: {org}")
    lines.append(f"User: {user}")
    lines.extend(notes)

    return "\n".join(lines)
