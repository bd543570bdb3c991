"""
Summary: Value types shared by the line classifier and reconstruction strategies.
Why: Keep strategy parameters explicit instead of threading optional flags around.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Final

from .errors import UnsupportedVenueError

DEFAULT_COMMENT: Final[str] = "#>"
DEFAULT_PROMPT: Final[str] = "> "
DEFAULT_CONTINUATION: Final[str] = "+ "
DEFAULT_PROSE_PREFIX: Final[str] = "#' "
DEFAULT_FENCE: Final[str] = "```"


class LineClass(Enum):
    """Role of a single line inside a rendered document."""

    FENCE_MARKER = "fence_marker"
    CODE = "code"
    OUTPUT = "output"
    PROSE = "prose"


class Venue(str, Enum):
    """Where a reprex was rendered for."""

    GH = "gh"
    R = "r"
    SO = "so"
    DS = "ds"

    @staticmethod
    def from_user_input(value: str | Venue) -> Venue:
        """Translate raw input into a venue, folding aliases onto ``gh``."""

        if isinstance(value, Venue):
            venue = value
        else:
            normalized = value.strip().lower()
            try:
                venue = Venue(normalized)
            except ValueError as exc:
                valid: Final[str] = ", ".join(v.value for v in Venue)
                msg = f"Unsupported venue '{value}'. Valid options: {valid}"
                raise UnsupportedVenueError(msg) from exc

        # Stack Overflow and Discourse render exactly like GitHub.
        if venue in {Venue.SO, Venue.DS}:
            return Venue.GH
        return venue


@dataclass(slots=True, frozen=True)
class UndoOptions:
    """Pattern parameters consumed by every reconstruction entry point.

    Attributes:
        comment: Regular expression fragment matched at the start of captured
            output lines.
        prompt: Literal primary prompt of an interactive session.
        continuation: Literal continuation prompt of an interactive session.
        prose_prefix: Commentary prefix applied to prose lines when inverting
            Markdown.
        fence: Literal string that opens and closes a fenced block.
    """

    comment: str = DEFAULT_COMMENT
    prompt: str = DEFAULT_PROMPT
    continuation: str = DEFAULT_CONTINUATION
    prose_prefix: str = DEFAULT_PROSE_PREFIX
    fence: str = DEFAULT_FENCE


class StrategyKind(Enum):
    """Tag identifying a reconstruction strategy."""

    MARKDOWN_INVERT = "markdown_invert"
    FLAT_STRIP = "flat_strip"
    PROMPT_STRIP = "prompt_strip"


@dataclass(slots=True, frozen=True)
class MarkdownInvert:
    """Invert a fenced Markdown rendering."""

    kind: ClassVar[StrategyKind] = StrategyKind.MARKDOWN_INVERT

    output_pattern: str
    prose_prefix: str = DEFAULT_PROSE_PREFIX
    drop_output: bool = True
    fence: str = DEFAULT_FENCE


@dataclass(slots=True, frozen=True)
class FlatStrip:
    """Remove commented output from a flat transcript."""

    kind: ClassVar[StrategyKind] = StrategyKind.FLAT_STRIP

    output_pattern: str


@dataclass(slots=True, frozen=True)
class PromptStrip:
    """Keep prompted lines of a console transcript and drop the prompts."""

    kind: ClassVar[StrategyKind] = StrategyKind.PROMPT_STRIP

    prompt_pattern: str


ReconstructionStrategy = MarkdownInvert | FlatStrip | PromptStrip


__all__ = [
    "DEFAULT_COMMENT",
    "DEFAULT_CONTINUATION",
    "DEFAULT_FENCE",
    "DEFAULT_PROMPT",
    "DEFAULT_PROSE_PREFIX",
    "FlatStrip",
    "LineClass",
    "MarkdownInvert",
    "PromptStrip",
    "ReconstructionStrategy",
    "StrategyKind",
    "UndoOptions",
    "Venue",
]
