"""
Tests for logging setup — level precedence and handlers.
"""

import io
import logging
import sys

from upset.core.observability.logging_config import (
    ENV_LOG_FILE,
    ENV_LOG_FILE_LEVEL,
    ENV_LOG_LEVEL,
    level_from_flags,
    setup_logging,
    setup_logging_from_env,
)


class TestLevelFromFlags:
    def test_default_warning(self):
        assert level_from_flags(environ={}) == "WARNING"

    def test_env_level(self):
        assert level_from_flags(environ={ENV_LOG_LEVEL: "INFO"}) == "INFO"

    def test_flags_beat_env(self):
        env = {ENV_LOG_LEVEL: "ERROR"}
        assert level_from_flags(verbose=True, environ=env) == "INFO"
        assert level_from_flags(debug=True, environ=env) == "DEBUG"

    def test_debug_beats_verbose_and_quiet(self):
        assert level_from_flags(debug=True, verbose=True, quiet=True, environ={}) == "DEBUG"

    def test_quiet(self):
        assert level_from_flags(quiet=True, environ={ENV_LOG_LEVEL: "DEBUG"}) == "ERROR"


class TestSetupLogging:
    def test_console_handler_only(self):
        setup_logging("INFO")
        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert root.level == logging.INFO
        assert root.handlers[0].level == logging.INFO

    def test_replaces_previous_handlers(self):
        setup_logging("INFO")
        setup_logging("DEBUG")
        assert len(logging.getLogger().handlers) == 1

    def test_unknown_level_falls_back(self):
        setup_logging("LOUD")
        assert logging.getLogger().level == logging.WARNING

    def test_log_file(self, tmp_path):
        log_file = tmp_path / "upset.log"
        setup_logging("WARNING", log_file=str(log_file), log_file_level="DEBUG")

        root = logging.getLogger()
        assert len(root.handlers) == 2
        assert root.level == logging.DEBUG

        logging.getLogger("upset.test").debug("hello file")
        for handler in root.handlers:
            handler.flush()
            if isinstance(handler, logging.FileHandler):
                handler.close()
        assert "hello file" in log_file.read_text(encoding="utf-8")

    def test_from_env(self, tmp_path):
        log_file = tmp_path / "env.log"
        setup_logging_from_env(
            "ERROR",
            environ={ENV_LOG_FILE: str(log_file), ENV_LOG_FILE_LEVEL: "INFO"},
        )

        root = logging.getLogger()
        file_handlers = [h for h in root.handlers if isinstance(h, logging.FileHandler)]
        assert len(file_handlers) == 1
        assert file_handlers[0].level == logging.INFO
        assert root.level == logging.INFO
        file_handlers[0].close()

    def test_console_follows_current_stderr(self, monkeypatch):
        setup_logging("WARNING")
        swapped = io.StringIO()
        monkeypatch.setattr(sys, "stderr", swapped)

        logging.getLogger("upset.test").warning("after swap")

        assert "after swap" in swapped.getvalue()
