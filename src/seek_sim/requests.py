"""Request sources — where the list of track requests comes from.

Requests arrive as whitespace-separated decimal integers, from a file,
from standard input, or from a random generator.  Whatever the source,
the whole input is read before any scheduling starts.

A bad value does not stop the run.  A token that isn't a plain ASCII
decimal integer, or an integer outside the disk's 0-65535 track range,
is dropped and a warning is logged; everything else goes through.  Only
a source that cannot be read at all raises ``RequestSourceError``.

``collect_requests`` applies the same rules to values that are already
decoded (a JSON list, say), one value per position.
"""

import random
import re
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

from seek_sim.disk import TRACK_MAX, TRACK_MIN
from seek_sim.logging import Logger, LogLevel

_SOURCE = "requests"

# Optional sign and ASCII digits only: no underscores, no other scripts.
_DECIMAL = re.compile(r"[+-]?[0-9]+")


class RequestSourceError(RuntimeError):
    """Raise when a request source cannot produce any requests.

    Examples: a missing or unreadable file, a negative random count.
    """


def parse_decimal(token: str) -> int:
    """Return *token* as an int if it is a plain decimal integer.

    Raises:
        ValueError: If *token* is anything else.

    """
    if not _DECIMAL.fullmatch(token):
        msg = f"Not a decimal integer: {token!r}"
        raise ValueError(msg)
    return int(token)


def _accept(track: int, position: int, logger: Logger | None) -> bool:
    """Return True if *track* is on the disk, warning otherwise."""
    if TRACK_MIN <= track <= TRACK_MAX:
        return True
    _skip(logger, f"Track {track} out of bounds ({TRACK_MIN}-{TRACK_MAX}), skipped", position)
    return False


def _skip(logger: Logger | None, message: str, position: int) -> None:
    if logger is not None:
        logger.log(LogLevel.WARNING, message, source=_SOURCE, position=position)


def parse_requests(text: str, *, logger: Logger | None = None) -> list[int]:
    """Parse track requests from *text*.

    Args:
        text: Whitespace/newline separated decimal integers.
        logger: Receives a warning for every skipped token.

    Returns:
        The valid tracks, in input order.

    """
    tracks: list[int] = []
    for position, token in enumerate(text.split()):
        try:
            track = parse_decimal(token)
        except ValueError:
            _skip(logger, f"Skipping malformed value {token!r}", position)
            continue
        if _accept(track, position, logger):
            tracks.append(track)
    return tracks


def collect_requests(values: Sequence[object], *, logger: Logger | None = None) -> list[int]:
    """Validate already-decoded request values.

    Only real ints are taken; ``bool``, floats, strings and anything
    else are skipped with a warning whose position is the value's index.

    Returns:
        The valid tracks, in input order.

    """
    tracks: list[int] = []
    for position, value in enumerate(values):
        if not isinstance(value, int) or isinstance(value, bool):
            _skip(logger, f"Skipping malformed value {value!r}", position)
            continue
        if _accept(value, position, logger):
            tracks.append(value)
    return tracks


def read_requests(stream: TextIO, *, logger: Logger | None = None) -> list[int]:
    """Read *stream* to the end and parse the requests in it."""
    return parse_requests(stream.read(), logger=logger)


def load_requests(path: str | Path, *, logger: Logger | None = None) -> list[int]:
    """Read and parse the requests stored in the file at *path*.

    Raises:
        RequestSourceError: If the file cannot be opened or decoded.

    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        msg = f"Could not open file: {path}"
        raise RequestSourceError(msg) from e
    tracks = parse_requests(text, logger=logger)
    if logger is not None:
        logger.log(LogLevel.INFO, f"Loaded {len(tracks)} requests from {path}", source=_SOURCE)
    return tracks


def generate_requests(count: int, *, rng: random.Random | None = None) -> list[int]:
    """Return *count* tracks drawn uniformly from the whole disk.

    Args:
        count: How many requests to generate.
        rng: Random source; pass a seeded ``random.Random`` for
            repeatable runs.

    Raises:
        RequestSourceError: If *count* is negative.

    """
    if count < 0:
        msg = f"Cannot generate {count} requests"
        raise RequestSourceError(msg)
    rng = rng if rng is not None else random.Random()  # noqa: S311
    return [rng.randint(TRACK_MIN, TRACK_MAX) for _ in range(count)]
