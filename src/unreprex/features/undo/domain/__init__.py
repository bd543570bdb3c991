"""
Summary: Pure line classification and reconstruction for rendered reprexes.
Why: Keep the engine free of clipboard, filesystem and logging concerns.
"""

from .classifier import classify, compile_pattern, is_fence_marker
from .dispatcher import reconstruct, select_strategy
from .errors import (
    AmbiguousSourceError,
    InputNotFoundError,
    UnreprexError,
    UnsupportedVenueError,
)
from .models import (
    FlatStrip,
    LineClass,
    MarkdownInvert,
    PromptStrip,
    ReconstructionStrategy,
    StrategyKind,
    UndoOptions,
    Venue,
)
from .reconstruct import compose_prompt_pattern, invert_markdown, strip_output, strip_prompt

__all__ = [
    "AmbiguousSourceError",
    "FlatStrip",
    "InputNotFoundError",
    "LineClass",
    "MarkdownInvert",
    "PromptStrip",
    "ReconstructionStrategy",
    "StrategyKind",
    "UndoOptions",
    "UnreprexError",
    "UnsupportedVenueError",
    "Venue",
    "classify",
    "compile_pattern",
    "compose_prompt_pattern",
    "invert_markdown",
    "is_fence_marker",
    "reconstruct",
    "select_strategy",
    "strip_output",
    "strip_prompt",
]
