"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, final

from unreprex.features.undo import ClobberPolicy, OutfileMode, Venue

SourceArg = str | Path | list[str] | None
OutfileArg = str | OutfileMode | None


@final
@dataclass(slots=True)
class InvertArgs:
    """Command line arguments for the ``invert`` subcommand."""

    command: Literal["invert"]
    source: SourceArg
    outfile: OutfileArg
    clobber_policy: ClobberPolicy
    use_clipboard: bool
    verbose: bool
    quiet: bool
    venue: Venue
    comment: str | None
    drop_output: bool


@final
@dataclass(slots=True)
class CleanArgs:
    """Command line arguments for the ``clean`` subcommand."""

    command: Literal["clean"]
    source: SourceArg
    outfile: OutfileArg
    clobber_policy: ClobberPolicy
    use_clipboard: bool
    verbose: bool
    quiet: bool
    comment: str | None


@final
@dataclass(slots=True)
class RescueArgs:
    """Command line arguments for the ``rescue`` subcommand."""

    command: Literal["rescue"]
    source: SourceArg
    outfile: OutfileArg
    clobber_policy: ClobberPolicy
    use_clipboard: bool
    verbose: bool
    quiet: bool
    prompt: str | None
    continuation: str | None


CLIArgs = InvertArgs | CleanArgs | RescueArgs

__all__ = ["CLIArgs", "CleanArgs", "InvertArgs", "OutfileArg", "RescueArgs", "SourceArg"]
