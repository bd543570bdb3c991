"""
Summary: Resolve the caller's input into document lines.
Why: Accept clipboard, file path and literal text through one entry point.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from logging import Logger, getLogger
from pathlib import Path

from ..domain.errors import AmbiguousSourceError, InputNotFoundError
from .ports import ClipboardPort, FileSystemGateway

InputSource = str | Path | Sequence[str] | None


class InputLocation(str, Enum):
    """Where the document lines come from."""

    CLIPBOARD = "clipboard"
    PATH = "path"
    TEXT = "text"


@dataclass(slots=True, frozen=True)
class IngestedInput:
    """Document lines together with their origin."""

    lines: list[str]
    location: InputLocation
    path: Path | None = None


def locate_input(source: InputSource) -> InputLocation:
    """Classify ``source`` without touching the clipboard or disk.

    ``None`` or an empty value means the clipboard. A single string without a
    newline is a path, as is a ``Path``. Anything else is literal text.
    """

    if source is None:
        return InputLocation.CLIPBOARD
    if isinstance(source, Path):
        return InputLocation.PATH
    if isinstance(source, str):
        if not source:
            return InputLocation.CLIPBOARD
        return InputLocation.TEXT if "\n" in source else InputLocation.PATH
    if len(source) == 0:
        return InputLocation.CLIPBOARD
    if len(source) == 1 and "\n" not in source[0]:
        return InputLocation.PATH
    return InputLocation.TEXT


def split_text(source: str | Sequence[str]) -> list[str]:
    """Expand literal text into lines.

    Every element loses a single trailing newline and is then split on its
    internal newlines.
    """

    chunks = [source] if isinstance(source, str) else list(source)
    chunks = [chunk.removesuffix("\n") for chunk in chunks]

    lines: list[str] = []
    for chunk in chunks:
        lines.extend(chunk.split("\n"))
    return lines


def resolve_lines(
    source: InputSource,
    *,
    clipboard: ClipboardPort,
    filesystem: FileSystemGateway,
    logger: Logger | None = None,
) -> IngestedInput:
    """Read the document lines named by ``source``.

    Raises:
        AmbiguousSourceError: No input was given and the clipboard is unavailable.
        InputNotFoundError: A path-like input does not name a file.
    """

    log = logger or getLogger(__name__)
    location = locate_input(source)

    if location is InputLocation.CLIPBOARD:
        if not clipboard.is_available():
            raise AmbiguousSourceError(
                "No input provided and the clipboard is not available."
            )
        lines = clipboard.read_lines()
        log.debug("Read %d lines from the clipboard", len(lines))
        return IngestedInput(lines=lines, location=location)

    if location is InputLocation.PATH:
        assert source is not None
        path = Path(source if isinstance(source, (str, Path)) else source[0])
        if not filesystem.is_file(path):
            raise InputNotFoundError(f"Input file not found: {path}")
        lines = filesystem.read_lines(path)
        log.debug(
            "Read %d lines from %s",
            len(lines),
            path,
            extra={"notice_event": "input.read", "path": str(path)},
        )
        return IngestedInput(lines=lines, location=location, path=path)

    assert source is not None and not isinstance(source, Path)
    lines = split_text(source)
    return IngestedInput(lines=lines, location=location)


__all__ = [
    "IngestedInput",
    "InputLocation",
    "InputSource",
    "locate_input",
    "resolve_lines",
    "split_text",
]
