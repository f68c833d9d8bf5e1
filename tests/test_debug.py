"""Tests for the logging manager."""

import logging

import pytest

from connectfour.debug import LOGGER_NAME, DebugLevel, debug
from connectfour.exceptions import ColumnFullError, OutOfBoundsError
from connectfour.game import Board


@pytest.fixture
def records(caplog):
    caplog.set_level(logging.DEBUG, logger=LOGGER_NAME)
    return caplog


def messages(caplog):
    return [r.getMessage() for r in caplog.records if r.name == LOGGER_NAME]


class TestLevels:
    def test_level_filters_messages(self, records):
        debug.configure(level=DebugLevel.INFO)
        debug.info("shown")
        debug.debug("hidden")
        assert messages(records) == ["shown"]

    def test_trace_is_prefixed(self, records):
        debug.configure(level=DebugLevel.TRACE)
        debug.trace("step")
        assert messages(records) == ["TRACE: step"]

    def test_disabled_manager_is_silent(self, records):
        debug.configure(level=DebugLevel.DEBUG, enabled=False)
        debug.error("nothing")
        assert messages(records) == []

    def test_none_level_is_silent(self, records):
        debug.configure(level=DebugLevel.NONE)
        debug.error("nothing")
        assert messages(records) == []

    def test_set_from_string(self):
        assert debug.set_from_string("Debug")
        assert debug.level is DebugLevel.DEBUG

    def test_set_from_string_unknown(self):
        assert not debug.set_from_string("loud")
        assert debug.level is DebugLevel.WARNING


class TestComponents:
    def test_component_tag_in_message(self, records):
        debug.configure(level=DebugLevel.INFO)
        debug.info("hello", "board")
        assert messages(records) == ["[board] hello"]

    def test_component_filter(self, records):
        debug.configure(level=DebugLevel.INFO, components=["board"])
        debug.info("kept", "board")
        debug.info("dropped", "other")
        assert messages(records) == ["[board] kept"]


class TestTimers:
    def test_end_timer_returns_elapsed(self):
        debug.start_timer("unit")
        elapsed = debug.end_timer("unit")
        assert elapsed is not None and elapsed >= 0

    def test_end_timer_without_start(self, records):
        assert debug.end_timer("never") is None
        assert messages(records) == ["[debug] Timer 'never' not started"]


def test_log_file(tmp_path):
    path = tmp_path / "engine.log"
    debug.configure(level=DebugLevel.INFO, log_file=str(path))
    debug.info("to file", "board")
    debug.configure(log_file="")
    assert "[board] to file" in path.read_text()


class TestBoardLogging:
    def test_win_is_logged(self, records):
        debug.configure(level=DebugLevel.INFO)
        board = Board()
        for col in [0, 0, 1, 1, 2, 2, 3]:
            board.play(col)
        assert "[board] Player 1 wins after move at (5, 3)" in messages(records)

    def test_rejected_move_is_logged(self, records):
        debug.configure(level=DebugLevel.DEBUG)
        board = Board(rows=1, columns=4)
        board.play(0)
        with pytest.raises(ColumnFullError):
            board.play(0)
        assert "[board] Rejected column 0: column is full" in messages(records)

    def test_out_of_bounds_query_is_logged(self, records):
        debug.configure(level=DebugLevel.DEBUG)
        with pytest.raises(OutOfBoundsError):
            Board().cell_at(9, 0)
        assert "[board] Rejected position (9, 0): out of bounds" in messages(records)

    def test_placement_is_traced(self, records):
        debug.configure(level=DebugLevel.TRACE)
        Board().play(2)
        assert "TRACE: [board] Placing ONE at (5, 2)" in messages(records)
