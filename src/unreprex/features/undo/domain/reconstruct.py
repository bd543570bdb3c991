"""
Summary: The three strategies that turn a rendered reprex back into code.
Why: Reverse Markdown, flat and console renderings with one line-in, line-out rule.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from .classifier import PatternLike, classify, compile_pattern
from .models import DEFAULT_FENCE, DEFAULT_PROSE_PREFIX, LineClass


def invert_markdown(
    lines: Sequence[str],
    output_pattern: PatternLike,
    *,
    drop_output: bool = True,
    prose_prefix: str = DEFAULT_PROSE_PREFIX,
    fence: str = DEFAULT_FENCE,
) -> list[str]:
    """Recover a source listing from a fenced Markdown rendering.

    Fence markers are always removed. Non-empty prose lines become commentary
    by prepending ``prose_prefix``; empty prose lines and code lines pass
    through untouched. Output lines are removed when ``drop_output`` is set.

    The result exactly recovers code rendered by a transform that fences all
    code, prefixes prose identically and marks output with ``output_pattern``.
    Anything else is a best-effort inversion.

    Args:
        lines: Document lines.
        output_pattern: Pattern matched at the start of captured output lines.
        drop_output: Whether to remove output lines inside fences.
        prose_prefix: Commentary prefix for prose lines.
        fence: Literal fence string.

    Returns:
        list[str]: Reconstructed lines in input order.
    """

    dropped = {LineClass.FENCE_MARKER}
    if drop_output:
        dropped.add(LineClass.OUTPUT)

    recovered: list[str] = []
    for line, line_class in zip(lines, classify(lines, output_pattern, fence=fence), strict=True):
        if line_class in dropped:
            continue
        if line_class is LineClass.PROSE and line:
            recovered.append(f"{prose_prefix}{line}")
        else:
            recovered.append(line)
    return recovered


def strip_output(lines: Sequence[str], output_pattern: PatternLike) -> list[str]:
    """Drop lines of a flat transcript that hold captured output."""

    matcher = compile_pattern(output_pattern)
    return [line for line in lines if matcher.match(line) is None]


def compose_prompt_pattern(prompt: str, continuation: str) -> str:
    """Build the alternation of two literal prompts.

    Both prompts are escaped because users may configure prompts holding
    regex metacharacters such as ``"R> "`` or ``"+ "``.
    """

    return f"{re.escape(prompt)}|{re.escape(continuation)}"


def strip_prompt(lines: Sequence[str], prompt_pattern: str) -> list[str]:
    """Keep prompted lines of a console transcript with the prompt removed.

    Lines that do not start with optional whitespace followed by a prompt are
    printed output or blank separators and are dropped.
    """

    matcher = re.compile(rf"^\s*(?:{prompt_pattern})")
    return [matcher.sub("", line, count=1) for line in lines if matcher.match(line)]


__all__ = [
    "compose_prompt_pattern",
    "invert_markdown",
    "strip_output",
    "strip_prompt",
]
