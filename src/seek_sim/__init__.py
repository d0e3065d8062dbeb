"""seek-sim — a disk head seek simulator.

A disk arm services track requests one at a time, and the cost that
dominates is how far the arm has to travel.  This package replays a
list of track requests under three classic scheduling policies and
reports how far the head moves under each:

- **FCFS** — service requests in the order they arrived.
- **SSTF** — always go to the nearest pending request.
- **SCAN** — sweep up, then sweep back down (the elevator).

Re-exports the public API so callers can write::

    from seek_sim import Simulation, SSTFPolicy
"""

from seek_sim.disk import (
    DEFAULT_HEAD,
    TRACK_MAX,
    TRACK_MIN,
    Direction,
    DiskPolicy,
    DiskScheduler,
    FCFSPolicy,
    SCANPolicy,
    SSTFPolicy,
)
from seek_sim.requests import (
    RequestSourceError,
    collect_requests,
    generate_requests,
    load_requests,
    parse_decimal,
    parse_requests,
    read_requests,
)
from seek_sim.simulator import POLICIES, PolicyResult, Simulation
from seek_sim.stats import (
    RunStatistics,
    compute_statistics,
    longest_seek,
    mean,
    population_stddev,
    seek_distance,
)

__all__ = [
    "DEFAULT_HEAD",
    "POLICIES",
    "TRACK_MAX",
    "TRACK_MIN",
    "Direction",
    "DiskPolicy",
    "DiskScheduler",
    "FCFSPolicy",
    "PolicyResult",
    "RequestSourceError",
    "RunStatistics",
    "SCANPolicy",
    "SSTFPolicy",
    "Simulation",
    "collect_requests",
    "compute_statistics",
    "generate_requests",
    "load_requests",
    "longest_seek",
    "mean",
    "parse_decimal",
    "parse_requests",
    "population_stddev",
    "read_requests",
    "seek_distance",
]
