"""Clipboard adapters for undo use cases.

Where: features/undo/adapters/clipboard.py
What: Back the clipboard port with pyperclip, or with a stub that reports no clipboard.
Why: Headless sessions (CI, SSH) have no clipboard and must degrade quietly.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from logging import Logger, getLogger

import pyperclip

from unreprex.platform.filesystem import split_newlines

from ..usecases.ports import ClipboardPort


class PyperclipClipboard(ClipboardPort):
    """System clipboard accessed through pyperclip."""

    _copy: Callable[[str], None]
    _paste: Callable[[], str]
    _available: bool | None
    _logger: Logger

    def __init__(
        self,
        *,
        copy: Callable[[str], None] | None = None,
        paste: Callable[[], str] | None = None,
        logger: Logger | None = None,
    ) -> None:
        self._copy = copy or pyperclip.copy
        self._paste = paste or pyperclip.paste
        self._available = None
        self._logger = logger or getLogger(__name__)

    def is_available(self) -> bool:
        """Probe the clipboard once and remember the answer."""

        if self._available is None:
            try:
                _ = self._paste()
                self._available = True
            except pyperclip.PyperclipException as exc:
                self._logger.debug("Clipboard unavailable: %s", exc)
                self._available = False
        return self._available

    def read_lines(self) -> list[str]:
        return split_newlines(self._paste())

    def write_lines(self, lines: Sequence[str]) -> None:
        self._copy("\n".join(lines))


class DisabledClipboard(ClipboardPort):
    """Clipboard stand-in used when clipboard access is switched off."""

    def is_available(self) -> bool:
        return False

    def read_lines(self) -> list[str]:
        raise pyperclip.PyperclipException("Clipboard access is disabled.")

    def write_lines(self, lines: Sequence[str]) -> None:
        _ = lines
        raise pyperclip.PyperclipException("Clipboard access is disabled.")


__all__ = ["DisabledClipboard", "PyperclipClipboard"]
