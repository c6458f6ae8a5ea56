# Area: Shared Tests
"""Tests for the exception hierarchy and structured error blocks."""

import logging
import pytest
from read_one_article.errors import (
    ReadOneArticleError,
    InvalidTransitionError,
    InvalidPayloadError,
    SetupFailureError,
    RenderError,
)
from read_one_article._shared.logging_config import (
    log_game_error,
    setup_logging,
    mute_terminal,
    unmute_terminal,
    is_terminal_muted,
    JSONFormatter,
)


class TestErrorHierarchy:
    """Tests for exception inheritance."""

    def test_all_errors_share_base(self):
        for cls in (InvalidTransitionError, InvalidPayloadError, SetupFailureError, RenderError):
            assert issubclass(cls, ReadOneArticleError)

    def test_invalid_payload_is_invalid_transition(self):
        assert issubclass(InvalidPayloadError, InvalidTransitionError)


class TestFormatErrorLog:
    """Tests for format_error_log()."""

    def test_invalid_transition_block(self):
        error = InvalidTransitionError("reading", "guess")
        block = error.format_error_log()
        assert "INVALID_TRANSITION" in block
        assert "reading" in block
        assert "guess" in block
        assert str(error) == "Invalid transition: 'guess' from stage 'reading'"

    def test_invalid_payload_block(self):
        error = InvalidPayloadError("choosing", "choose article", "Some page")
        block = error.format_error_log()
        assert "INVALID_PAYLOAD" in block
        assert "Some page" in block
        assert error.candidate == "Some page"

    def test_setup_failure_block(self):
        error = SetupFailureError(
            "Need 2 usable articles to start a round, got 1",
            payload={"candidates": [{"pageid": 1}]},
            problems=["min_content_length=10000"],
        )
        block = error.format_error_log()
        assert "SETUP_FAILURE" in block
        assert '"pageid": 1' in block
        assert "• min_content_length=10000" in block

    def test_render_error_block(self):
        block = RenderError(42, "timeout").format_error_log()
        assert "RENDER_FAILURE" in block
        assert "42" in block


class TestLogging:
    """Tests for logging helpers."""

    def test_log_game_error_prints_block(self, capsys):
        log_game_error(SetupFailureError("no data"))
        captured = capsys.readouterr()
        assert "SETUP_FAILURE" in captured.err

    def test_setup_logging_writes_json_file(self, tmp_path):
        log_file = tmp_path / "logs" / "game.log"
        setup_logging(log_file_path=str(log_file), level=logging.INFO)
        logging.getLogger("read_one_article.test").info("hello")
        for handler in logging.getLogger("read_one_article").handlers:
            handler.flush()
        content = log_file.read_text(encoding="utf-8")
        assert '"message": "hello"' in content
        pkg_logger = logging.getLogger("read_one_article")
        assert pkg_logger.propagate is False
        for handler in pkg_logger.handlers:
            handler.close()
        pkg_logger.handlers.clear()
        pkg_logger.propagate = True

    def test_json_formatter(self):
        record = logging.LogRecord("read_one_article", logging.WARNING, __file__, 1, "x=%s", (1,), None)
        assert '"message": "x=1"' in JSONFormatter().format(record)

    def test_mute_and_unmute(self):
        mute_terminal()
        assert is_terminal_muted() is True
        unmute_terminal()
        assert is_terminal_muted() is False
