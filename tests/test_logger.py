"""
Unit tests for ForgeLogger.
"""

import json

from shared.config import GlobalConfig
from shared.logger import ForgeLogger


def _close(log):
    for handler in list(log.underlying.handlers):
        log.underlying.removeHandler(handler)
        handler.close()


class TestFileOutput:
    """Tests for the rotating file handler."""

    def test_json_lines(self, tmp_path):
        path = tmp_path / "logs" / "hill.log"
        log = ForgeLogger("test.json", log_file=path, json_logs=True, console_output=False)
        with log.operation("generate"):
            log.info("Accepted key after %d draws", 3, determinant=9)
        _close(log)

        entry = json.loads(path.read_text(encoding="utf-8").splitlines()[0])
        assert entry["message"] == "Accepted key after 3 draws"
        assert entry["level"] == "INFO"
        assert entry["logger"] == "hillforge.test.json"
        assert entry["tool_name"] == "test.json"
        assert entry["operation"] == "generate"
        assert entry["extra"] == {"determinant": 9}

    def test_plain_text(self, tmp_path):
        path = tmp_path / "hill.log"
        log = ForgeLogger("test.plain", log_file=path, console_output=False)
        log.warning("Modulus adjusted")
        _close(log)
        line = path.read_text(encoding="utf-8")
        assert "WARNING" in line
        assert "Modulus adjusted" in line

    def test_level_filters(self, tmp_path):
        path = tmp_path / "hill.log"
        log = ForgeLogger("test.level", log_level="WARNING", log_file=path, console_output=False)
        log.info("hidden")
        log.error("shown")
        _close(log)
        text = path.read_text(encoding="utf-8")
        assert "hidden" not in text
        assert "shown" in text


class TestLoggerSetup:
    """Tests for construction helpers."""

    def test_reinstantiation_replaces_handlers(self, tmp_path):
        ForgeLogger("test.dup", log_file=tmp_path / "a.log", console_output=False)
        log = ForgeLogger("test.dup", log_file=tmp_path / "b.log", console_output=False)
        assert len(log.underlying.handlers) == 1
        _close(log)

    def test_from_config_debug(self):
        log = ForgeLogger.from_config(
            "test.cfg", GlobalConfig(debug=True), console_output=False
        )
        assert log.underlying.level == 10

    def test_operation_context_restores(self):
        log = ForgeLogger("test.ctx", console_output=False)
        with log.operation("outer"):
            with log.operation("inner"):
                assert log._operation == "inner"
            assert log._operation == "outer"
        assert log._operation is None

    def test_timed_elapsed(self):
        log = ForgeLogger("test.timed", console_output=False)
        with log.timed("work") as timer:
            pass
        assert timer.elapsed >= 0
