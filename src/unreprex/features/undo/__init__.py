"""Public surface for the undo feature."""

from .domain import (
    AmbiguousSourceError,
    FlatStrip,
    InputNotFoundError,
    LineClass,
    MarkdownInvert,
    PromptStrip,
    ReconstructionStrategy,
    StrategyKind,
    UndoOptions,
    UnreprexError,
    UnsupportedVenueError,
    Venue,
    classify,
    compose_prompt_pattern,
    invert_markdown,
    reconstruct,
    select_strategy,
    strip_output,
    strip_prompt,
)
from .usecases import (
    ClobberPolicy,
    DeliveryOutcome,
    InputLocation,
    OutfileMode,
    Sink,
    UndoRequest,
    UndoResult,
    UndoService,
)

__all__ = [
    "AmbiguousSourceError",
    "ClobberPolicy",
    "DeliveryOutcome",
    "FlatStrip",
    "InputLocation",
    "InputNotFoundError",
    "LineClass",
    "MarkdownInvert",
    "OutfileMode",
    "PromptStrip",
    "ReconstructionStrategy",
    "Sink",
    "StrategyKind",
    "UndoOptions",
    "UndoRequest",
    "UndoResult",
    "UndoService",
    "UnreprexError",
    "UnsupportedVenueError",
    "Venue",
    "classify",
    "compose_prompt_pattern",
    "invert_markdown",
    "reconstruct",
    "select_strategy",
    "strip_output",
    "strip_prompt",
]
