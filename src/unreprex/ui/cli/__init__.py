"""Command line interface package."""

from unreprex.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
