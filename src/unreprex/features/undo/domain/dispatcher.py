"""
Summary: Choose one reconstruction strategy and run it over a document.
Why: Decide the input shape once instead of branching on loose flags.
"""

from __future__ import annotations

from collections.abc import Sequence

from .models import (
    FlatStrip,
    MarkdownInvert,
    PromptStrip,
    ReconstructionStrategy,
    UndoOptions,
)
from .reconstruct import invert_markdown, strip_output, strip_prompt


def select_strategy(
    *,
    is_markdown: bool,
    options: UndoOptions,
    prompt_pattern: str | None = None,
    drop_output: bool = True,
) -> ReconstructionStrategy:
    """Pick the strategy for a document.

    A prompt pattern always selects prompt stripping, whatever ``is_markdown``
    says. Otherwise Markdown documents are inverted and flat transcripts have
    their output stripped.
    """

    if prompt_pattern is not None:
        return PromptStrip(prompt_pattern=prompt_pattern)
    if is_markdown:
        return MarkdownInvert(
            output_pattern=options.comment,
            prose_prefix=options.prose_prefix,
            drop_output=drop_output,
            fence=options.fence,
        )
    return FlatStrip(output_pattern=options.comment)


def reconstruct(lines: Sequence[str], strategy: ReconstructionStrategy) -> list[str]:
    """Run ``strategy`` over ``lines`` and return the recovered code."""

    if isinstance(strategy, MarkdownInvert):
        return invert_markdown(
            lines,
            strategy.output_pattern,
            drop_output=strategy.drop_output,
            prose_prefix=strategy.prose_prefix,
            fence=strategy.fence,
        )
    if isinstance(strategy, FlatStrip):
        return strip_output(lines, strategy.output_pattern)
    if isinstance(strategy, PromptStrip):
        return strip_prompt(lines, strategy.prompt_pattern)
    raise TypeError(f"Unknown reconstruction strategy: {strategy!r}")


__all__ = ["reconstruct", "select_strategy"]
