"""Disk scheduling algorithms — ordering track requests for the head.

A request names a track (0-65535).  Servicing it means moving the
read/write head from wherever it is to that track, and the distance
travelled is the cost.  A scheduling policy decides the *order* in
which a batch of pending requests is serviced.

Think of the head like an elevator in a very tall building:
    - **FCFS** — stop at every floor in the order buttons were pressed.
    - **SSTF** — always go to the nearest requested floor (greedy).
    - **SCAN** — ride up collecting everyone on the way, then ride back
      down for whoever is left.

Policies:
    - ``FCFSPolicy`` — the baseline; fair, but the head zigzags.
    - ``SSTFPolicy`` — minimal hop at every step, O(n²) by repeated scan.
    - ``SCANPolicy`` — one sweep in each direction, reversing at the last
      request rather than at the edge of the disk.

All policies implement the ``DiskPolicy`` protocol (Strategy pattern)
and return a *new* list; the caller's sequence is never touched, so the
same input can be replayed under every policy.

``DiskScheduler`` owns the mutable part: a pending queue and the head
position.  Each policy run gets its own scheduler, so no head state
leaks from one policy to another.
"""

from enum import StrEnum
from typing import Protocol

TRACK_MIN = 0
TRACK_MAX = 65535
DEFAULT_HEAD = 32767

# SCAN makes one sweep each way and stops.
_SWEEP_PASSES = 2


class Direction(StrEnum):
    """Direction of a head sweep."""

    UP = "up"
    DOWN = "down"

    def reversed(self) -> "Direction":
        """Return the opposite direction."""
        return Direction.DOWN if self is Direction.UP else Direction.UP


class DiskPolicy(Protocol):
    """Protocol for disk scheduling policies (Strategy pattern)."""

    def schedule(self, requests: list[int], *, head: int) -> list[int]:
        """Return the order in which requests should be serviced.

        Args:
            requests: Track numbers in arrival order.
            head: Current position of the disk head.

        Returns:
            A new list holding the same tracks in service order.

        """
        ...  # pragma: no cover


class FCFSPolicy:
    """First Come, First Served — service in arrival order.

    Nothing is reordered, so this is the yardstick the other policies
    are measured against.  Scheduling an FCFS order again returns the
    same order.
    """

    def schedule(self, requests: list[int], *, head: int) -> list[int]:  # noqa: ARG002
        """Return requests in their original order."""
        return list(requests)


class SSTFPolicy:
    """Shortest Seek Time First — always go to the nearest request.

    Each step scans every unplaced request and picks the one closest
    to the head.  When two requests are equally close the one that
    arrived first wins; the direction of travel plays no part.

    The repeated linear scan makes this O(n²), which is fine for a
    simulation and keeps each decision easy to follow.
    """

    def schedule(self, requests: list[int], *, head: int) -> list[int]:
        """Return requests ordered nearest-first from the current head."""
        remaining = list(requests)
        order: list[int] = []
        current = head
        while remaining:
            # min() keeps the first of several equal keys
            index = min(range(len(remaining)), key=lambda i: abs(remaining[i] - current))
            current = remaining.pop(index)
            order.append(current)
        return order


class SCANPolicy:
    """SCAN (Elevator algorithm) — sweep one way, then reverse once.

    The head starts moving in ``direction`` and repeatedly services the
    nearest pending request that lies ahead of it (at or beyond its
    current track).  When nothing is left ahead, it turns around and
    does the same in the other direction.

    Two passes and no more: the head turns at the last request it
    serviced, not at the edge of the disk, and any request still pending
    after the second pass keeps its arrival order at the end of the
    schedule.

    Args:
        direction: Initial sweep direction.

    """

    def __init__(self, *, direction: Direction = Direction.UP) -> None:
        """Create a SCAN policy with an initial direction."""
        self._direction = Direction(direction)

    @property
    def direction(self) -> Direction:
        """Return the initial sweep direction."""
        return self._direction

    def schedule(self, requests: list[int], *, head: int) -> list[int]:
        """Return requests in SCAN (elevator) order."""
        remaining = list(requests)
        order: list[int] = []
        current = head
        direction = self._direction
        for _ in range(_SWEEP_PASSES):
            while (index := _next_in_sweep(remaining, current, direction)) is not None:
                current = remaining.pop(index)
                order.append(current)
            direction = direction.reversed()
        order.extend(remaining)
        return order


def _next_in_sweep(remaining: list[int], head: int, direction: Direction) -> int | None:
    """Return the index of the nearest request ahead of the head, or None.

    "Ahead" includes the head's own track.  Ties go to the lowest index.
    """
    best: int | None = None
    best_distance = 0
    for i, track in enumerate(remaining):
        ahead = track >= head if direction is Direction.UP else track <= head
        if not ahead:
            continue
        distance = abs(track - head)
        if best is None or distance < best_distance:
            best = i
            best_distance = distance
    return best


class DiskScheduler:
    """Disk scheduler — ties a policy to a request queue and a head.

    The scheduler accepts requests, then runs the selected policy to
    determine service order.  After a run the head rests on the last
    serviced track, so feeding requests in several batches continues
    from where the previous batch left off.
    """

    def __init__(self, *, policy: DiskPolicy, head: int = DEFAULT_HEAD) -> None:
        """Create a disk scheduler with a policy and initial head position."""
        self._policy = policy
        self._head = head
        self._queue: list[int] = []

    @property
    def head(self) -> int:
        """Return current head position."""
        return self._head

    @property
    def pending(self) -> list[int]:
        """Return the current request queue."""
        return list(self._queue)

    def add_request(self, track: int) -> None:
        """Queue a request for a track."""
        self._queue.append(track)

    def extend(self, tracks: list[int] | tuple[int, ...]) -> None:
        """Queue several requests in arrival order."""
        for track in tracks:
            self.add_request(track)

    def run(self) -> list[int]:
        """Run the scheduling policy on queued requests.

        Returns the service order and moves the head to the last
        serviced track.  Clears the queue.

        Returns:
            Ordered list of tracks as serviced.

        """
        if not self._queue:
            return []
        order = self._policy.schedule(self._queue, head=self._head)
        if order:
            self._head = order[-1]
        self._queue.clear()
        return order
