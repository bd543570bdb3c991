"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from typing import TextIO, final

from unreprex.config.config import Config
from unreprex.features.undo import ClobberPolicy, OutfileMode, UnsupportedVenueError, Venue
from unreprex.platform.logging import logger, setup_logger
from unreprex.ui.cli.args.options import (
    CLIArgs,
    CleanArgs,
    InvertArgs,
    OutfileArg,
    RescueArgs,
    SourceArg,
)

STDIN_MARKER = "-"


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="unreprex",
            description="unreprex - Recover clean, runnable code from a rendered reprex.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        invert_parser = subparsers.add_parser(
            "invert",
            help="Reverse a Markdown rendering with fenced code blocks",
        )
        ArgumentParser._configure_shared_options(invert_parser)
        _ = invert_parser.add_argument(
            "--venue",
            type=str,
            default=Venue.GH.value,
            metavar="VENUE",
            help="Venue the reprex was rendered for (gh, r, so, ds)",
        )
        _ = invert_parser.add_argument(
            "--comment",
            type=str,
            metavar="REGEX",
            help="Regex for captured output lines, anchored at the line start",
        )
        _ = invert_parser.add_argument(
            "--keep-output",
            action="store_true",
            help="Keep captured output lines inside code blocks",
        )

        clean_parser = subparsers.add_parser(
            "clean",
            help="Remove commented output from top-level code",
        )
        ArgumentParser._configure_shared_options(clean_parser)
        _ = clean_parser.add_argument(
            "--comment",
            type=str,
            metavar="REGEX",
            help="Regex for captured output lines, anchored at the line start",
        )

        rescue_parser = subparsers.add_parser(
            "rescue",
            help="Keep prompted commands from a console transcript",
        )
        ArgumentParser._configure_shared_options(rescue_parser)
        _ = rescue_parser.add_argument(
            "--prompt",
            type=str,
            metavar="PROMPT",
            help="Literal primary prompt (default taken from configuration)",
        )
        _ = rescue_parser.add_argument(
            "--continue",
            dest="continuation",
            type=str,
            metavar="PROMPT",
            help="Literal continuation prompt (default taken from configuration)",
        )

        return parser

    @staticmethod
    def process_args(
        args_list: Sequence[str] | None = None,
        *,
        stdin: TextIO | None = None,
    ) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
            stdin: Stream read when the input is ``-``. Defaults to ``sys.stdin``.

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            SystemExit: If arguments fail validation.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        if parsed_args.quiet:
            log_level = logging.ERROR
        elif parsed_args.verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        configuration = Config.load()
        _ = setup_logger(log_file=configuration.log_file, console_level=log_level)

        source = ArgumentParser._resolve_source(parsed_args.input, stdin)
        outfile = ArgumentParser._resolve_outfile(parsed_args)
        clobber_policy = ClobberPolicy.OVERWRITE if parsed_args.force else ClobberPolicy.ABORT
        use_clipboard = configuration.clipboard_enabled() and not parsed_args.no_clipboard

        command: str = parsed_args.command

        if command == "invert":
            try:
                venue = Venue.from_user_input(parsed_args.venue)
            except UnsupportedVenueError as exc:
                logger.error("%s", exc)
                sys.exit(2)
            return InvertArgs(
                command="invert",
                source=source,
                outfile=outfile,
                clobber_policy=clobber_policy,
                use_clipboard=use_clipboard,
                verbose=parsed_args.verbose,
                quiet=parsed_args.quiet,
                venue=venue,
                comment=parsed_args.comment,
                drop_output=not parsed_args.keep_output,
            )

        if command == "clean":
            return CleanArgs(
                command="clean",
                source=source,
                outfile=outfile,
                clobber_policy=clobber_policy,
                use_clipboard=use_clipboard,
                verbose=parsed_args.verbose,
                quiet=parsed_args.quiet,
                comment=parsed_args.comment,
            )

        if command == "rescue":
            return RescueArgs(
                command="rescue",
                source=source,
                outfile=outfile,
                clobber_policy=clobber_policy,
                use_clipboard=use_clipboard,
                verbose=parsed_args.verbose,
                quiet=parsed_args.quiet,
                prompt=parsed_args.prompt,
                continuation=parsed_args.continuation,
            )

        logger.error("Unsupported command: %s", command)
        sys.exit(2)

    @staticmethod
    def _configure_shared_options(parser: argparse.ArgumentParser) -> None:
        """Apply options shared by every subcommand."""

        _ = parser.add_argument(
            "input",
            nargs="?",
            type=str,
            metavar="INPUT",
            help="Path to the rendered reprex, '-' for standard input, omit for the clipboard",
        )
        outfile_group = parser.add_mutually_exclusive_group()
        _ = outfile_group.add_argument(
            "--outfile",
            type=str,
            metavar="NAME",
            help="Write NAME_clean.R, relative to the working directory",
        )
        _ = outfile_group.add_argument(
            "--derive-outfile",
            action="store_true",
            help="Write <input>_clean.R, or a temporary name when input is not a file",
        )
        _ = parser.add_argument(
            "--force",
            action="store_true",
            help="Overwrite an existing output file",
        )
        _ = parser.add_argument(
            "--no-clipboard",
            action="store_true",
            help="Neither read from nor copy to the clipboard",
        )
        _ = parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show detailed processing information",
        )
        _ = parser.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )

    @staticmethod
    def _resolve_source(raw_input: str | None, stdin: TextIO | None) -> SourceArg:
        if raw_input != STDIN_MARKER:
            return raw_input

        text = (stdin or sys.stdin).read()
        if not text:
            logger.error("Standard input is empty")
            sys.exit(1)
        # A trailing newline marks the value as literal text rather than a path.
        return text if text.endswith("\n") else f"{text}\n"

    @staticmethod
    def _resolve_outfile(parsed_args: argparse.Namespace) -> OutfileArg:
        if parsed_args.derive_outfile:
            return OutfileMode.DERIVE
        return parsed_args.outfile
