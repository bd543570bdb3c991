"""src/unreprex/ui/cli/display/result.py
What: Print recovered code and a delivery summary for CLI runs.
Why: Keep console output formatting consistent across the interface.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import final

from rich.console import Console

from unreprex.features.undo import UndoResult


@final
class ResultDisplay:
    """Handles result display in CLI."""

    console: Console
    error_console: Console

    def __init__(
        self,
        console: Console | None = None,
        error_console: Console | None = None,
    ) -> None:
        """Initialize result display.

        Args:
            console: Console receiving the clean code (standard output).
            error_console: Console receiving diagnostics (standard error).
        """
        self.console = console or Console(soft_wrap=True)
        self.error_console = error_console or Console(stderr=True, soft_wrap=True)

    def show_code(self, lines: Sequence[str], quiet: bool = False) -> None:
        """Write recovered lines verbatim to the console's stream.

        Rich rendering is bypassed so tabs, markup-like text and emoji codes
        reach standard output unchanged.

        Args:
            lines: Clean code lines.
            quiet: Whether to suppress non-error output.
        """
        if quiet:
            return

        stream = self.console.file
        for line in lines:
            _ = stream.write(f"{line}\n")
        stream.flush()

    def show_failures(self, result: UndoResult) -> None:
        """Report sinks that could not be written."""

        for outcome in result.failed_deliveries:
            target = f" ({outcome.path})" if outcome.path is not None else ""
            self.error_console.print(
                f"Delivery to {outcome.sink.value}{target} failed: {outcome.message}",
                style="red",
                markup=False,
                highlight=False,
            )
