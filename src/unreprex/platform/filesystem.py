"""Filesystem helpers reused across multiple layers."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Final

BYTE_ORDER_MARK: Final[str] = "\ufeff"


def ensure_directory(directory: Path) -> Path:
    """Ensure ``directory`` exists as a folder and return it."""

    if directory.exists():
        if not directory.is_dir():
            raise NotADirectoryError(f"Path exists but is not a directory: {directory}")
        return directory

    directory.mkdir(parents=True, exist_ok=True)
    return directory


def ensure_parent_directory(path: Path) -> Path:
    """Ensure the parent directory for ``path`` exists and return it."""

    parent = path.parent
    return ensure_directory(parent)


def split_newlines(text: str) -> list[str]:
    """Split ``text`` on ``\\n`` and ``\\r\\n`` only.

    Form feeds, ``\\u2028`` and the other characters ``str.splitlines`` treats
    as boundaries stay inside their line. A leading byte order mark is dropped
    and a final terminator does not produce a trailing empty line.
    """

    normalized = text.removeprefix(BYTE_ORDER_MARK).replace("\r\n", "\n")
    if not normalized:
        return []
    lines = normalized.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def read_text_lines(path: Path) -> list[str]:
    """Read ``path`` as UTF-8 (with or without BOM) and split it into lines."""

    return split_newlines(path.read_text(encoding="utf-8-sig"))


def write_text_file(path: Path, content: str) -> None:
    """Persist ``content`` as UTF-8, creating parent directories as needed."""

    _ = ensure_parent_directory(path)
    _ = path.write_text(content, encoding="utf-8")


def write_text_lines(path: Path, lines: Sequence[str]) -> None:
    """Write ``lines`` to ``path`` one per line, with a final newline."""

    write_text_file(path, "".join(f"{line}\n" for line in lines))


__all__ = [
    "ensure_directory",
    "ensure_parent_directory",
    "read_text_lines",
    "split_newlines",
    "write_text_file",
    "write_text_lines",
]
