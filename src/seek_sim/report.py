"""Report formatting — turn simulation results into console text.

Every function here is pure: it takes results and returns a string.
The CLI decides where the string goes.

A full report has one section per policy::

    Shortest seek first
    ===================

    Distance: 236
    Mean: 88.7500
    Standard deviation: 50.7685

    65, 67, 37, 14, 98, 122, 124, 183

``format_summary`` adds a compact table for comparing policies side
by side.
"""

from collections.abc import Sequence

from seek_sim.simulator import PolicyResult
from seek_sim.stats import RunStatistics


def format_header(title: str) -> str:
    """Return *title* underlined with ``=`` to its own width."""
    return f"{title}\n{'=' * len(title)}"


def format_track_list(order: Sequence[int]) -> str:
    """Return the tracks comma-separated, or a placeholder when empty."""
    if not order:
        return "(no requests)"
    return ", ".join(str(track) for track in order)


def format_statistics(stats: RunStatistics) -> str:
    """Return the distance and distribution lines for one run."""
    lines = [
        f"Distance: {stats.distance}",
        f"Mean: {stats.mean:.4f}",
        f"Standard deviation: {stats.stddev:.4f}",
    ]
    return "\n".join(lines)


def format_result(result: PolicyResult) -> str:
    """Return the full section for one policy."""
    return "\n\n".join(
        [
            format_header(result.title),
            format_statistics(result.statistics),
            format_track_list(result.order),
        ]
    )


def format_report(results: Sequence[PolicyResult]) -> str:
    """Return a section for every result, separated by blank lines."""
    return "\n\n".join(format_result(r) for r in results)


def format_summary(results: Sequence[PolicyResult]) -> str:
    """Return an aligned table comparing the policies."""
    lines = [f"{'POLICY':<8} {'SEEKS':>7} {'DISTANCE':>12} {'LONGEST':>8}"]
    lines.extend(
        f"{r.name:<8} {r.statistics.count:>7} {r.statistics.distance:>12}"
        f" {r.statistics.longest_seek:>8}"
        for r in results
    )
    return "\n".join(lines)
