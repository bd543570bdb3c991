"""Adapters satisfying the undo ports."""

from .clipboard import DisabledClipboard, PyperclipClipboard
from .filesystem import LocalFileSystemGateway

__all__ = ["DisabledClipboard", "LocalFileSystemGateway", "PyperclipClipboard"]
