"""Tests for request sources.

Requests come from text, a stream, a file, or a random generator.
Bad values are skipped with a warning; an unreadable source raises.
"""

import io
import random
from pathlib import Path

import pytest

from seek_sim.disk import TRACK_MAX, TRACK_MIN
from seek_sim.logging import Logger, LogLevel
from seek_sim.requests import (
    RequestSourceError,
    collect_requests,
    generate_requests,
    load_requests,
    parse_decimal,
    parse_requests,
    read_requests,
)


class TestParseRequests:
    """Verify parsing of whitespace-separated track numbers."""

    def test_newline_separated(self) -> None:
        """One value per line is the common file format."""
        assert parse_requests("98\n183\n37\n") == [98, 183, 37]

    def test_mixed_whitespace(self) -> None:
        """Spaces, tabs and newlines all separate values."""
        assert parse_requests(" 1 2\t3\n\n4 ") == [1, 2, 3, 4]

    def test_empty_text(self) -> None:
        """No tokens, no requests."""
        assert parse_requests("") == []

    def test_bounds_are_inclusive(self) -> None:
        """The first and last track are both valid."""
        assert parse_requests(f"{TRACK_MIN} {TRACK_MAX}") == [TRACK_MIN, TRACK_MAX]

    def test_out_of_range_skipped(self) -> None:
        """Tracks outside the disk are dropped and the rest kept."""
        logger = Logger()
        tracks = parse_requests("10 65536 -1 20", logger=logger)
        assert tracks == [10, 20]
        warnings = logger.filter(min_level=LogLevel.WARNING)
        expected_warnings = 2
        assert len(warnings) == expected_warnings
        assert "65536" in warnings[0].message
        assert "out of bounds" in warnings[0].message

    def test_malformed_skipped(self) -> None:
        """Non-integer tokens are dropped with a warning."""
        logger = Logger()
        tracks = parse_requests("10 abc 2.5 30", logger=logger)
        assert tracks == [10, 30]
        messages = [e.message for e in logger.entries]
        assert any("'abc'" in m for m in messages)
        assert any("'2.5'" in m for m in messages)

    def test_warning_records_position(self) -> None:
        """The warning points at the offending token."""
        logger = Logger()
        parse_requests("1 2 x", logger=logger)
        entry = logger.entries[0]
        expected_position = 2
        assert entry.position == expected_position
        assert entry.source == "requests"

    def test_only_ascii_decimals_accepted(self) -> None:
        """Digit separators and non-ASCII digits are malformed."""
        logger = Logger()
        tracks = parse_requests("1_000 \u0661\u0662 42", logger=logger)
        assert tracks == [42]
        warnings = logger.filter(min_level=LogLevel.WARNING)
        expected_warnings = 2
        assert len(warnings) == expected_warnings
        assert [w.position for w in warnings] == [0, 1]

    def test_no_logger_still_skips(self) -> None:
        """Skipping works without anyone listening."""
        assert parse_requests("x 5") == [5]


class TestParseDecimal:
    """Verify single-token decimal parsing."""

    def test_signed(self) -> None:
        """A leading sign is allowed."""
        assert parse_decimal("-7") == -7
        assert parse_decimal("+7") == 7

    @pytest.mark.parametrize("token", ["", "1_000", "\u0661\u0662", " 1", "0x10", "1e3"])
    def test_rejects(self, token: str) -> None:
        """Anything but sign and ASCII digits is refused."""
        with pytest.raises(ValueError, match="Not a decimal integer"):
            parse_decimal(token)


class TestCollectRequests:
    """Verify validation of already-decoded values."""

    def test_ints_kept_in_order(self) -> None:
        """Plain in-range ints pass through unchanged."""
        assert collect_requests([98, 183, 37]) == [98, 183, 37]

    def test_non_ints_skipped(self) -> None:
        """Bools, floats and strings are malformed, whatever they hold."""
        logger = Logger()
        tracks = collect_requests([10, True, 5.0, "10 20", 20], logger=logger)
        assert tracks == [10, 20]
        warnings = logger.filter(min_level=LogLevel.WARNING, source="requests")
        assert [w.position for w in warnings] == [1, 2, 3]
        assert "'10 20'" in warnings[2].message

    def test_out_of_range_skipped(self) -> None:
        """Off-disk ints are dropped with a bounds warning at their index."""
        logger = Logger()
        assert collect_requests([70000, 5, -1], logger=logger) == [5]
        warnings = logger.filter(min_level=LogLevel.WARNING)
        assert [w.position for w in warnings] == [0, 2]
        assert all("out of bounds" in w.message for w in warnings)


class TestReadRequests:
    """Verify stream ingestion."""

    def test_reads_to_end(self) -> None:
        """The whole stream is consumed."""
        stream = io.StringIO("1\n2\n3\n")
        assert read_requests(stream) == [1, 2, 3]
        assert stream.read() == ""


class TestLoadRequests:
    """Verify file ingestion."""

    def test_loads_file(self, tmp_path: Path) -> None:
        """A file of tracks is loaded in order."""
        path = tmp_path / "seeks.txt"
        path.write_text("98\n183\n37\n", encoding="utf-8")
        assert load_requests(path) == [98, 183, 37]

    def test_accepts_str_path(self, tmp_path: Path) -> None:
        """A plain string path works too."""
        path = tmp_path / "seeks.txt"
        path.write_text("5", encoding="utf-8")
        assert load_requests(str(path)) == [5]

    def test_logs_load(self, tmp_path: Path) -> None:
        """A successful load is noted at INFO level."""
        path = tmp_path / "seeks.txt"
        path.write_text("1 2", encoding="utf-8")
        logger = Logger()
        load_requests(path, logger=logger)
        assert logger.filter(min_level=LogLevel.WARNING) == []
        assert "Loaded 2 requests" in logger.entries[-1].message

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        """A missing file is a source error."""
        with pytest.raises(RequestSourceError, match="Could not open file"):
            load_requests(tmp_path / "missing.txt")


class TestGenerateRequests:
    """Verify random request generation."""

    def test_count(self) -> None:
        """The requested number of tracks is produced."""
        expected = 100
        assert len(generate_requests(expected)) == expected

    def test_in_range(self) -> None:
        """Every generated track lies on the disk."""
        tracks = generate_requests(500, rng=random.Random(3))
        assert all(TRACK_MIN <= t <= TRACK_MAX for t in tracks)

    def test_seeded_is_repeatable(self) -> None:
        """The same seed gives the same requests."""
        first = generate_requests(20, rng=random.Random(42))
        second = generate_requests(20, rng=random.Random(42))
        assert first == second

    def test_zero(self) -> None:
        """Zero requests is allowed."""
        assert generate_requests(0) == []

    def test_negative_raises(self) -> None:
        """A negative count is a source error."""
        with pytest.raises(RequestSourceError):
            generate_requests(-1)
