"""Seek statistics — how far the head travelled, and what it was asked for.

Two kinds of number come out of a run:

- **Travel** depends on the service order.  ``seek_distance`` sums
  every hop, starting with the hop from the initial head position to
  the first request.  ``longest_seek`` is the single worst hop.
- **Distribution** does not.  ``mean`` and ``population_stddev``
  describe the requested tracks themselves, so every policy reports the
  same values for the same input.

Distances are whole tracks and are summed as ints; the distribution is
computed in floating point.  An empty request list is legal and yields
zeros across the board rather than a division error.
"""

import math
from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class RunStatistics:
    """Read-only summary of one policy run.

    Attributes:
        distance: Total head travel, in tracks.
        mean: Mean of the requested tracks.
        stddev: Population standard deviation of the requested tracks.
        count: Number of requests serviced.
        longest_seek: Largest single hop, in tracks.

    """

    distance: int
    mean: float
    stddev: float
    count: int
    longest_seek: int = 0


def _hops(order: Sequence[int], head: int) -> list[int]:
    """Return the length of every hop, starting from *head*."""
    hops: list[int] = []
    current = head
    for track in order:
        hops.append(abs(track - current))
        current = track
    return hops


def seek_distance(order: Sequence[int], *, head: int) -> int:
    """Return the total head movement for servicing *order* from *head*."""
    return sum(_hops(order, head))


def longest_seek(order: Sequence[int], *, head: int) -> int:
    """Return the longest single hop, or 0 for an empty order."""
    return max(_hops(order, head), default=0)


def mean(values: Sequence[int]) -> float:
    """Return the arithmetic mean of *values* (0.0 when empty)."""
    if not values:
        return 0.0
    return sum(values) / len(values)


def population_stddev(values: Sequence[int]) -> float:
    """Return the population standard deviation of *values*.

    Divides by ``n`` rather than ``n - 1``: the requests are the whole
    population, not a sample of it.  Returns 0.0 when empty.
    """
    if not values:
        return 0.0
    centre = mean(values)
    variance = sum((v - centre) ** 2 for v in values) / len(values)
    return math.sqrt(variance)


def compute_statistics(order: Sequence[int], *, head: int) -> RunStatistics:
    """Build the statistics for servicing *order* starting at *head*."""
    return RunStatistics(
        distance=seek_distance(order, head=head),
        mean=mean(order),
        stddev=population_stddev(order),
        count=len(order),
        longest_seek=longest_seek(order, head=head),
    )
