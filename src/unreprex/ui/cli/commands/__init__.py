"""Command execution package for CLI."""

from unreprex.ui.cli.commands.executor import CommandExecutor, build_service
from unreprex.ui.cli.commands.undo import CleanCommand, InvertCommand, RescueCommand

__all__ = [
    "CleanCommand",
    "CommandExecutor",
    "InvertCommand",
    "RescueCommand",
    "build_service",
]
