"""Tests for the ``NoticeRichHandler`` notice rendering."""

from __future__ import annotations

import logging
from io import StringIO
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.text import Text

from unreprex.platform.logging import NoticeRichHandler, setup_logger


def _make_handler() -> NoticeRichHandler:
    """Create a handler instance with an in-memory console."""

    console = Console(file=StringIO(), force_terminal=True, soft_wrap=True)
    return NoticeRichHandler(console=console)


def _build_record(**extras: Any) -> logging.LogRecord:
    """Create a ``LogRecord`` populated with notice extras for testing."""

    record = logging.LogRecord(
        name="unreprex",
        level=logging.INFO,
        pathname="test",
        lineno=0,
        msg="",
        args=(),
        exc_info=None,
    )
    for key, value in extras.items():
        setattr(record, key, value)
    return record


def test_clipboard_notice_reports_line_count() -> None:
    handler = _make_handler()
    record = _build_record(notice_event="clipboard.copied", line_count=3)

    rendered = handler.render_message(record, "")

    assert isinstance(rendered, Text)
    assert rendered.plain == "📋 Clean code is on the clipboard (3 lines)"


def test_file_notice_truncates_long_paths() -> None:
    """Absolute paths should be abbreviated with an ellipsis prefix."""

    handler = _make_handler()
    record = _build_record(
        notice_event="file.written",
        path="/home/user/projects/analysis/reprexes/issue-42/foo_clean.R",
        line_count=1,
    )

    rendered = handler.render_message(record, "")

    assert isinstance(rendered, Text)
    assert rendered.plain.endswith("…/analysis/reprexes/issue-42/foo_clean.R (1 line)")


def test_short_paths_are_kept_whole() -> None:
    handler = _make_handler()
    record = _build_record(notice_event="file.clobber", path="/tmp/foo_clean.R")

    rendered = handler.render_message(record, "")

    assert isinstance(rendered, Text)
    assert rendered.plain == "⚠️ Not overwriting existing file /tmp/foo_clean.R"


def test_path_separators_are_magenta() -> None:
    handler = _make_handler()
    record = _build_record(notice_event="input.read", path="/a/b/c/d/e/reprex.md")

    rendered = handler.render_message(record, "")

    assert isinstance(rendered, Text)
    ellipsis_index = rendered.plain.index("…")
    styles = [
        span.style
        for span in rendered.spans
        if span.start == ellipsis_index and span.end == ellipsis_index + 1
    ]
    assert any(getattr(style, "color", None) is not None and style.color.name == "magenta" for style in styles)


def test_plain_records_fall_back_to_default_rendering() -> None:
    handler = _make_handler()
    record = _build_record()

    rendered = handler.render_message(record, "plain message")

    assert isinstance(rendered, Text)
    assert rendered.plain == "plain message"


def test_setup_logger_writes_file_when_configured(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "unreprex.log"
    console = Console(file=StringIO())

    logger = setup_logger(log_file=log_file, console=console)
    try:
        logger.debug("debug detail")
        for handler in logger.handlers:
            handler.flush()
        assert "debug detail" in log_file.read_text(encoding="utf-8")
        assert console.file.getvalue() == ""  # pyright: ignore[reportAttributeAccessIssue]
    finally:
        _ = setup_logger()


def test_setup_logger_console_only_by_default() -> None:
    logger = setup_logger()

    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], NoticeRichHandler)
