"""Tests for the logging layer."""

import logging

import pytest

from connectfour.debug import DebugLevel, DebugManager


@pytest.fixture
def manager():
    manager = DebugManager(name="connectfour.test", level=DebugLevel.INFO)
    manager.logger.propagate = True
    yield manager
    manager.configure(log_file='')


class TestDebugManager:
    def test_respects_level(self, manager, caplog):
        with caplog.at_level(logging.DEBUG, logger="connectfour.test"):
            manager.info("shown", "engine")
            manager.debug("hidden", "engine")
        assert [r.getMessage() for r in caplog.records] == ["[engine] shown"]

    def test_component_filter(self, manager, caplog):
        manager.configure(components=["board"])
        with caplog.at_level(logging.DEBUG, logger="connectfour.test"):
            manager.info("kept", "board")
            manager.info("dropped", "engine")
        assert [r.getMessage() for r in caplog.records] == ["[board] kept"]

    def test_disabled(self, manager, caplog):
        manager.configure(enabled=False)
        with caplog.at_level(logging.DEBUG, logger="connectfour.test"):
            manager.error("nothing")
        assert caplog.records == []

    def test_set_from_string(self, manager):
        assert manager.set_from_string("trace") is True
        assert manager.level == DebugLevel.TRACE
        assert manager.set_from_string("loud") is False
        assert manager.level == DebugLevel.TRACE

    def test_timer(self, manager):
        manager.start_timer("work")
        assert manager.end_timer("work") >= 0
        assert manager.end_timer("work") is None

    def test_log_file(self, manager, tmp_path):
        log_file = tmp_path / "engine.log"
        manager.configure(log_file=str(log_file))
        manager.warning("written to file", "cli")
        manager.configure(log_file='')
        assert "[cli] written to file" in log_file.read_text()

    def test_console_handler_added_once(self):
        first = DebugManager(name="connectfour.once")
        second = DebugManager(name="connectfour.once")
        assert first.logger is second.logger
        assert len(first.logger.handlers) == 1
