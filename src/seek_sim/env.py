"""Environment configuration — where the head starts.

The simulator has exactly one knob that lives outside the command
line: the track the head rests on before the first request.  It is read
from the ``SEEK_SIM_HEAD`` environment variable and defaults to the
middle of the disk (32767).

``Environment`` is a small copy-on-construction wrapper around a dict
of strings.  Production code snapshots ``os.environ`` with
``Environment.from_os()``; tests build one by hand, so nothing in the
test suite depends on the real process environment.
"""

import os

from seek_sim.disk import DEFAULT_HEAD, TRACK_MAX, TRACK_MIN
from seek_sim.logging import Logger, LogLevel
from seek_sim.requests import parse_decimal

HEAD_VARIABLE = "SEEK_SIM_HEAD"


class Environment:
    """A read-only snapshot of environment variables.

    Built from a plain dict (copied), so later changes to that dict, or to
    the real process environment, are not seen.
    """

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        """Create an environment, optionally pre-populated.

        Args:
            initial: Starting variables (copied, not referenced).

        """
        self._vars: dict[str, str] = dict(initial) if initial else {}

    @classmethod
    def from_os(cls) -> "Environment":
        """Return a snapshot of the current process environment."""
        return cls(initial=dict(os.environ))

    def get(self, key: str, default: str | None = None) -> str | None:
        """Return the value for *key*, or *default* if not set."""
        return self._vars.get(key, default)


def parse_head(value: str) -> int:
    """Parse a head position, enforcing the track range.

    Raises:
        ValueError: If *value* is not a decimal integer in range.

    """
    head = parse_decimal(value.strip())
    if not TRACK_MIN <= head <= TRACK_MAX:
        msg = f"Head position {head} outside {TRACK_MIN}-{TRACK_MAX}"
        raise ValueError(msg)
    return head


def resolve_head(env: Environment, *, logger: Logger | None = None) -> int:
    """Return the configured initial head position.

    Falls back to ``DEFAULT_HEAD`` when ``SEEK_SIM_HEAD`` is unset or
    unusable; an unusable value is logged as a warning.
    """
    raw = env.get(HEAD_VARIABLE)
    if raw is None or not raw.strip():
        return DEFAULT_HEAD
    try:
        return parse_head(raw)
    except ValueError:
        if logger is not None:
            logger.log(
                LogLevel.WARNING,
                f"Ignoring {HEAD_VARIABLE}={raw!r}, using {DEFAULT_HEAD}",
                source="config",
            )
        return DEFAULT_HEAD
