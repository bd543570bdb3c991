"""src/unreprex/ui/cli/commands/undo.py
What: Execute invert, clean and rescue runs via the CLI.
Why: Bridge parsed arguments with the application service for each input shape.
"""

from typing import override

from unreprex.features.undo import UndoResult
from unreprex.ui.cli.args.options import CleanArgs, InvertArgs, RescueArgs
from unreprex.ui.cli.commands.executor import CommandExecutor


class InvertCommand(CommandExecutor):
    """Command for inverting a Markdown rendering."""

    args: InvertArgs

    @override
    def run(self) -> UndoResult:
        return self.app.invert(
            self.args.source,
            outfile=self.args.outfile,
            venue=self.args.venue,
            comment=self.args.comment,
            drop_output=self.args.drop_output,
        )


class CleanCommand(CommandExecutor):
    """Command for stripping commented output."""

    args: CleanArgs

    @override
    def run(self) -> UndoResult:
        return self.app.clean(
            self.args.source,
            outfile=self.args.outfile,
            comment=self.args.comment,
        )


class RescueCommand(CommandExecutor):
    """Command for rescuing code from a console transcript."""

    args: RescueArgs

    @override
    def run(self) -> UndoResult:
        return self.app.rescue(
            self.args.source,
            outfile=self.args.outfile,
            prompt=self.args.prompt,
            continuation=self.args.continuation,
        )
