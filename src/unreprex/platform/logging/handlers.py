"""Rich console handler rendering delivery notices.

Where: platform/logging/handlers.py
What: Style records tagged with a ``notice_event`` extra and compact their paths.
Why: Give clipboard and file notices a consistent look apart from plain log lines.
"""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class NoticeRichHandler(RichHandler):
    """Custom Rich handler that renders notice events with icons."""

    _NOTICE_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "clipboard.copied": ("📋", "green"),
        "file.written": ("💾", "green"),
        "file.clobber": ("⚠️", "yellow"),
        "input.read": ("📄", "blue"),
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with custom settings.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    @staticmethod
    def _to_pure_path(raw_path: str) -> PurePath:
        """Return a platform-aware ``PurePath`` for the given raw string."""

        if "\\" in raw_path:
            return PureWindowsPath(raw_path)
        return PurePosixPath(raw_path)

    def _format_path(self, path: str) -> Text:
        """Render ``path`` keeping only its trailing segments.

        Separators and the leading ellipsis are magenta, everything else white.
        """

        pure_path = self._to_pure_path(path)
        separator = "\\" if isinstance(pure_path, PureWindowsPath) else "/"
        anchor = pure_path.anchor
        body_parts = [part for part in pure_path.parts if part and part != anchor]

        truncated = len(body_parts) > self._PATH_SEGMENT_LIMIT
        if truncated:
            display = "…" + separator + separator.join(body_parts[-self._PATH_SEGMENT_LIMIT:])
        else:
            display = str(pure_path)

        text = Text()
        for char in display:
            if char in {separator, "…"}:
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    def _render_notice(self, record: logging.LogRecord, message: str) -> Text | None:
        """Render notice events with dedicated styling."""

        event = getattr(record, "notice_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._NOTICE_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        if event == "clipboard.copied":
            _ = body.append("Clean code is on the clipboard")
        elif event == "file.written":
            _ = body.append("Clean code written to ")
        elif event == "file.clobber":
            _ = body.append("Not overwriting existing file ")
        elif event == "input.read":
            _ = body.append("Reading input from ")
        else:
            _ = body.append(message)

        path = getattr(record, "path", None)
        if path and event != "clipboard.copied":
            _ = body.append_text(self._format_path(str(path)))

        line_count = getattr(record, "line_count", None)
        if isinstance(line_count, int):
            noun = "line" if line_count == 1 else "lines"
            _ = body.append(f" ({line_count} {noun})")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for notice events."""

        notice = self._render_notice(record, message)
        if notice is not None:
            return notice
        return super().render_message(record, message)


__all__ = ["NoticeRichHandler"]
