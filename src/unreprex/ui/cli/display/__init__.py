"""Display helpers for the CLI."""

from unreprex.ui.cli.display.result import ResultDisplay

__all__ = ["ResultDisplay"]
