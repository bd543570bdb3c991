"""
Summary: Label each line of a rendered document by fence state and output marker.
Why: Give the Markdown inverter a single pass over fence parity to build on.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from .models import DEFAULT_FENCE, LineClass

PatternLike = str | re.Pattern[str]


def compile_pattern(pattern: PatternLike) -> re.Pattern[str]:
    """Return ``pattern`` compiled, leaving precompiled patterns untouched."""

    if isinstance(pattern, re.Pattern):
        return pattern
    return re.compile(pattern)


def is_fence_marker(line: str, fence: str = DEFAULT_FENCE) -> bool:
    """Return whether ``line`` opens or closes a fenced block.

    Info strings after the fence (``"``` r"``) do not change the outcome.
    """

    return line.strip().startswith(fence)


def classify(
    lines: Sequence[str],
    output_pattern: PatternLike,
    *,
    fence: str = DEFAULT_FENCE,
) -> list[LineClass]:
    """Classify every line of ``lines``.

    A line is ``FENCE_MARKER`` when it is a fence itself. Otherwise the number
    of fence markers seen strictly before it decides: odd means the line sits
    inside a block and is ``OUTPUT`` or ``CODE`` depending on ``output_pattern``,
    even means ``PROSE``. Unbalanced fences are not an error; trailing lines
    after an unterminated fence stay inside the block.

    Args:
        lines: Document lines in order.
        output_pattern: Pattern matched at the start of captured output lines.
        fence: Literal fence string.

    Returns:
        list[LineClass]: One class per input line.
    """

    matcher = compile_pattern(output_pattern)
    classes: list[LineClass] = []
    fences_seen = 0

    for line in lines:
        if is_fence_marker(line, fence):
            classes.append(LineClass.FENCE_MARKER)
            fences_seen += 1
            continue

        if fences_seen % 2 == 1:
            is_output = matcher.match(line) is not None
            classes.append(LineClass.OUTPUT if is_output else LineClass.CODE)
        else:
            classes.append(LineClass.PROSE)

    return classes


__all__ = ["PatternLike", "classify", "compile_pattern", "is_fence_marker"]
