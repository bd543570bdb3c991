"""Filesystem adapter for undo use cases."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from unreprex.platform.filesystem import read_text_lines, write_text_lines

from ..usecases.ports import FileSystemGateway


class LocalFileSystemGateway(FileSystemGateway):
    """Thin wrapper around the local filesystem."""

    def exists(self, path: Path) -> bool:
        return path.exists()

    def is_file(self, path: Path) -> bool:
        return path.is_file()

    def read_lines(self, path: Path) -> list[str]:
        return read_text_lines(path)

    def write_lines(self, path: Path, lines: Sequence[str]) -> None:
        write_text_lines(path, lines)


__all__ = ["LocalFileSystemGateway"]
