"""Simulation — replay one request list under every policy.

Each policy gets its own ``DiskScheduler`` seeded at the same start
position, so the runs are independent: whatever SSTF does to its head
has no effect on where SCAN starts.  The raw requests are stored as a
tuple and never reordered.

With ``chunk_size`` set, requests are handed to each scheduler a batch
at a time.  The scheduler keeps its head between batches, which models
a queue that fills up and drains repeatedly rather than one big batch.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass

from seek_sim.disk import (
    DEFAULT_HEAD,
    DiskPolicy,
    DiskScheduler,
    FCFSPolicy,
    SCANPolicy,
    SSTFPolicy,
)
from seek_sim.logging import Logger, LogLevel
from seek_sim.stats import RunStatistics, compute_statistics

# Policy name -> (report title, factory).  Insertion order is run order.
POLICIES: dict[str, tuple[str, Callable[[], DiskPolicy]]] = {
    "fcfs": ("First come, first served", FCFSPolicy),
    "sstf": ("Shortest seek first", SSTFPolicy),
    "scan": ("Elevator algorithm", SCANPolicy),
}


@dataclass(frozen=True)
class PolicyResult:
    """The outcome of running one policy.

    Attributes:
        name: Short policy name (``fcfs``, ``sstf``, ``scan``).
        title: Human-readable policy name for reports.
        order: Tracks in the order they were serviced.
        statistics: Travel and distribution figures for the run.

    """

    name: str
    title: str
    order: tuple[int, ...]
    statistics: RunStatistics


class Simulation:
    """Run a fixed request list under each scheduling policy."""

    def __init__(
        self,
        requests: Iterable[int],
        *,
        head: int = DEFAULT_HEAD,
        chunk_size: int | None = None,
        logger: Logger | None = None,
    ) -> None:
        """Create a simulation.

        Args:
            requests: Track requests in arrival order.
            head: Where every policy's head starts.
            chunk_size: Batch size for feeding the scheduler, or None to
                schedule everything as one batch.
            logger: Receives a note per policy run.

        Raises:
            ValueError: If *chunk_size* is not positive.

        """
        if chunk_size is not None and chunk_size < 1:
            msg = f"Chunk size must be positive, got {chunk_size}"
            raise ValueError(msg)
        self._requests = tuple(requests)
        self._head = head
        self._chunk_size = chunk_size
        self._logger = logger

    @property
    def requests(self) -> tuple[int, ...]:
        """Return the raw requests in arrival order."""
        return self._requests

    @property
    def head(self) -> int:
        """Return the starting head position."""
        return self._head

    def _chunks(self) -> list[tuple[int, ...]]:
        if self._chunk_size is None:
            return [self._requests]
        size = self._chunk_size
        return [self._requests[i : i + size] for i in range(0, len(self._requests), size)]

    def run_policy(self, name: str) -> PolicyResult:
        """Run a single policy by name.

        Raises:
            KeyError: If *name* is not a known policy.

        """
        if name not in POLICIES:
            msg = f"Unknown policy: {name}"
            raise KeyError(msg)
        title, factory = POLICIES[name]
        scheduler = DiskScheduler(policy=factory(), head=self._head)
        order: list[int] = []
        for chunk in self._chunks():
            scheduler.extend(chunk)
            order.extend(scheduler.run())
        statistics = compute_statistics(order, head=self._head)
        if self._logger is not None:
            self._logger.log(
                LogLevel.INFO,
                f"{name}: {statistics.count} requests, distance {statistics.distance}",
                source="simulator",
            )
        return PolicyResult(name=name, title=title, order=tuple(order), statistics=statistics)

    def run(self) -> list[PolicyResult]:
        """Run every policy, in ``POLICIES`` order."""
        return [self.run_policy(name) for name in POLICIES]
