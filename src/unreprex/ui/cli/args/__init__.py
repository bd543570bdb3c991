"""Command line argument handling package."""

from unreprex.ui.cli.args.parser import ArgumentParser
from unreprex.ui.cli.args.options import CLIArgs, CleanArgs, InvertArgs, RescueArgs

__all__ = ["ArgumentParser", "CLIArgs", "CleanArgs", "InvertArgs", "RescueArgs"]
