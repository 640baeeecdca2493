"""
Tests for logging configuration.
"""

import json
import logging

import pytest

from netdynamic.common.logging_config import (
    JSONFormatter,
    LoggingTimer,
    PerformanceFilter,
    get_logger,
    setup_logging
)


@pytest.fixture(autouse=True)
def reset_root_logger():
    yield
    root = logging.getLogger("netdynamic")
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    root.propagate = True
    root.setLevel(logging.NOTSET)
    logging.getLogger("netdynamic.performance").filters.clear()


class TestSetupLogging:
    """Test setup_logging and its environment fallbacks."""

    def test_level_from_parameter(self):
        logger = setup_logging(level="DEBUG", console=True, force_setup=True)
        assert logger.name == "netdynamic"
        assert logger.level == logging.DEBUG
        assert not logger.propagate

    def test_level_from_environment(self, monkeypatch):
        monkeypatch.setenv("NETDYN_LOG_LEVEL", "WARNING")
        logger = setup_logging(force_setup=True)
        assert logger.level == logging.WARNING

    def test_invalid_level(self):
        with pytest.raises(ValueError, match="Invalid logging level"):
            setup_logging(level="LOUD", force_setup=True)

    def test_console_disabled_from_environment(self, monkeypatch):
        monkeypatch.setenv("NETDYN_LOG_CONSOLE", "off")
        logger = setup_logging(force_setup=True)
        assert logger.handlers == []

    def test_log_dir_creates_file(self, tmp_path):
        logger = setup_logging(log_dir=str(tmp_path / "logs"), console=False, force_setup=True)
        get_logger("netdynamic.network.extraction").info("Slicing dynamic network")

        for handler in logger.handlers:
            handler.flush()
        content = (tmp_path / "logs" / "netdynamic.log").read_text(encoding="utf-8")
        assert "Slicing dynamic network" in content

    def test_json_file_output(self, tmp_path):
        log_file = tmp_path / "out.log"
        setup_logging(log_file=str(log_file), console=False, json_format=True, force_setup=True)
        get_logger("netdynamic.test").warning("Spell table empty")

        for handler in logging.getLogger("netdynamic").handlers:
            handler.flush()
        records = [json.loads(line) for line in log_file.read_text(encoding="utf-8").splitlines()]
        assert records[-1]["message"] == "Spell table empty"
        assert records[-1]["level"] == "WARNING"
        assert records[-1]["logger"] == "netdynamic.test"

    def test_performance_filter_not_duplicated(self):
        perf_logger = logging.getLogger("netdynamic.performance")
        for _ in range(3):
            setup_logging(console=False, performance_logging=True, force_setup=True)

        assert sum(isinstance(f, PerformanceFilter) for f in perf_logger.filters) == 1

        setup_logging(console=False, performance_logging=False, force_setup=True)
        assert not any(isinstance(f, PerformanceFilter) for f in perf_logger.filters)

    def test_existing_handlers_kept_without_force(self):
        first = setup_logging(console=True, force_setup=True)
        n_handlers = len(first.handlers)
        second = setup_logging(console=True)
        assert len(second.handlers) == n_handlers


class TestFormattersAndFilters:
    """Test JSONFormatter and PerformanceFilter."""

    def _record(self, message, **extra):
        record = logging.LogRecord("netdynamic.x", logging.INFO, __file__, 1, message, None, None)
        record.__dict__.update(extra)
        return record

    def test_json_formatter_includes_extra(self):
        line = JSONFormatter().format(self._record("done", operation="network_slice", duration=0.5))
        obj = json.loads(line)
        assert obj["message"] == "done"
        assert obj["operation"] == "network_slice"
        assert obj["duration"] == 0.5

    def test_performance_filter(self):
        flt = PerformanceFilter()
        assert flt.filter(self._record("Performance: network_slice completed in 0.1s"))
        assert not flt.filter(self._record("Merged 3 spells"))


class TestLoggingTimer:
    """Test the timing context manager."""

    def test_duration_recorded_and_logged(self, caplog):
        with caplog.at_level(logging.INFO, logger="netdynamic.performance"):
            with LoggingTimer("reconcile_activity", {"n_edges": 4}) as timer:
                pass

        assert timer.duration is not None and timer.duration >= 0
        assert any(
            "Performance: reconcile_activity completed in" in r.getMessage()
            and "n_edges=4" in r.getMessage()
            for r in caplog.records
        )
