"""Ports for the undo use cases.

Where: features/undo/usecases.
What: Protocols describing clipboard, filesystem and clobber-policy collaborators.
Why: Keep ingestion and delivery testable without a real clipboard or disk.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class ClipboardPort(Protocol):
    """Read and write access to the system clipboard."""

    def is_available(self) -> bool:
        """Return True when the clipboard can be read and written."""
        ...

    def read_lines(self) -> list[str]:
        """Return the clipboard contents split into lines."""
        ...

    def write_lines(self, lines: Sequence[str]) -> None:
        """Replace the clipboard contents with ``lines``."""
        ...


@runtime_checkable
class FileSystemGateway(Protocol):
    """Filesystem operations needed to ingest input and write results."""

    def exists(self, path: Path) -> bool:
        """Return True if the path exists."""
        ...

    def is_file(self, path: Path) -> bool:
        """Return True when the path points to a regular file."""
        ...

    def read_lines(self, path: Path) -> list[str]:
        """Return the UTF-8 lines of ``path``."""
        ...

    def write_lines(self, path: Path, lines: Sequence[str]) -> None:
        """Write ``lines`` to ``path`` as UTF-8 with a trailing newline."""
        ...


@runtime_checkable
class ClobberGuard(Protocol):
    """Decide whether an existing output file may be replaced."""

    def allows_overwrite(self, path: Path, *, exists: bool) -> bool:
        """Return True when writing to ``path`` is acceptable."""
        ...


__all__ = ["ClipboardPort", "ClobberGuard", "FileSystemGateway"]
