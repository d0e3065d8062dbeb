"""Command-line front end — the ``seek-sim`` console entry point.

Three ways to supply requests::

    seek-sim file requests.txt   # read from a file
    seek-sim in < requests.txt   # read from standard input
    seek-sim rand 1000           # generate 1000 random requests

The requests are read in full, replayed under every policy, and the
report goes to stdout.  Skipped values and configuration problems go to
stderr as warnings; the run carries on without them.  Only a source
that can't be read at all ends the run with status 1.

This module keeps the I/O at the edges: ``main`` wires arguments,
environment, sources and formatter together, while everything it calls
returns plain values.
"""

import argparse
import random
import sys
from collections.abc import Callable, Sequence
from typing import TypeAlias

from seek_sim.env import HEAD_VARIABLE, Environment, parse_head, resolve_head
from seek_sim.logging import Logger, LogLevel
from seek_sim.report import format_report, format_summary
from seek_sim.requests import (
    RequestSourceError,
    generate_requests,
    load_requests,
    read_requests,
)
from seek_sim.simulator import Simulation

EXIT_OK = 0
EXIT_FAILURE = 1

# Type alias for a request source: takes parsed args and a logger.
_Source: TypeAlias = Callable[[argparse.Namespace, Logger], list[int]]


def _head_argument(value: str) -> int:
    try:
        return parse_head(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        msg = f"must be positive, got {number}"
        raise argparse.ArgumentTypeError(msg)
    return number


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for ``seek-sim``."""
    parser = argparse.ArgumentParser(
        prog="seek-sim",
        description="Compare FCFS, SSTF and SCAN disk scheduling on a list of track requests.",
    )
    parser.add_argument(
        "--head",
        type=_head_argument,
        default=None,
        help=f"initial head position (default: ${HEAD_VARIABLE} or 32767)",
    )
    parser.add_argument(
        "--chunk",
        type=_positive_int,
        default=None,
        help="schedule requests in batches of this size",
    )
    parser.add_argument("--summary", action="store_true", help="append a comparison table")
    commands = parser.add_subparsers(dest="command", metavar="<command>")

    file_cmd = commands.add_parser("file", help="read disk seeks from file at path")
    file_cmd.add_argument("path")
    commands.add_parser("in", help="read disk seeks from stdin")
    rand_cmd = commands.add_parser("rand", help="use given number of random disk seeks")
    rand_cmd.add_argument("number", type=int)
    rand_cmd.add_argument("--seed", type=int, default=None, help="seed for repeatable runs")
    return parser


def _from_file(args: argparse.Namespace, logger: Logger) -> list[int]:
    return load_requests(args.path, logger=logger)


def _from_stdin(_args: argparse.Namespace, logger: Logger) -> list[int]:
    return read_requests(sys.stdin, logger=logger)


def _from_random(args: argparse.Namespace, _logger: Logger) -> list[int]:
    return generate_requests(args.number, rng=random.Random(args.seed))  # noqa: S311


# Command dispatch table — maps subcommand names to request sources.
_SOURCES: dict[str, _Source] = {
    "file": _from_file,
    "in": _from_stdin,
    "rand": _from_random,
}


def _print_warnings(logger: Logger) -> None:
    for entry in logger.filter(min_level=LogLevel.WARNING):
        print(entry, file=sys.stderr)  # noqa: T201


def main(argv: Sequence[str] | None = None, *, env: Environment | None = None) -> int:
    """Run the simulator from the command line.

    Args:
        argv: Arguments without the program name (defaults to sys.argv).
        env: Configuration source (defaults to the process environment).

    Returns:
        The process exit status.

    """
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        return EXIT_OK

    logger = Logger()
    env = env if env is not None else Environment.from_os()
    head = args.head if args.head is not None else resolve_head(env, logger=logger)

    try:
        requests = _SOURCES[args.command](args, logger)
    except RequestSourceError as e:
        _print_warnings(logger)
        print(f"Error: {e}", file=sys.stderr)  # noqa: T201
        return EXIT_FAILURE

    simulation = Simulation(requests, head=head, chunk_size=args.chunk, logger=logger)
    results = simulation.run()
    _print_warnings(logger)

    print(format_report(results))  # noqa: T201
    if args.summary:
        print()  # noqa: T201
        print(format_summary(results))  # noqa: T201
    return EXIT_OK


def run() -> None:
    """Console entry point: run ``main`` and exit with its status."""
    sys.exit(main())
