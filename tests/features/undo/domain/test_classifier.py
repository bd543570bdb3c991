"""
Summary: Tests for fence-aware line classification.
Why: Guard the parity rule the Markdown inverter relies on.
"""

from __future__ import annotations

import re

import pytest

from unreprex.features.undo.domain import LineClass, classify, is_fence_marker

FENCE = LineClass.FENCE_MARKER
CODE = LineClass.CODE
OUTPUT = LineClass.OUTPUT
PROSE = LineClass.PROSE


def test_classify_rendered_reprex() -> None:
    """Prose, fences, code and output are told apart in a typical rendering."""

    lines = [
        "Some text",
        "",
        "``` r",
        "(x <- 1:4)",
        "#> [1] 1 2 3 4",
        "```",
        "More text",
    ]

    assert classify(lines, "#>") == [PROSE, PROSE, FENCE, CODE, OUTPUT, FENCE, PROSE]


def test_classify_empty_document() -> None:
    assert classify([], "#>") == []


@pytest.mark.parametrize(
    "lines",
    [
        ["just prose"],
        ["```", "code", "```", "", "```r", "#> out"],
        ["```", "```", "```"],
        ["", "", ""],
    ],
)
def test_classify_preserves_length(lines: list[str]) -> None:
    """Every line receives exactly one class."""

    assert len(classify(lines, "#>")) == len(lines)


def test_lines_between_matched_fences_are_never_prose() -> None:
    """Balanced fences keep their contents inside the block."""

    lines = ["intro", "```", "a <- 1", "", "#> out", "```", "between", "```", "b <- 2", "```"]

    classes = classify(lines, "#>")

    assert classes[2:5] == [CODE, CODE, OUTPUT]
    assert classes[6] is PROSE
    assert classes[8] is CODE


def test_unterminated_fence_keeps_trailing_lines_inside() -> None:
    """An odd number of fences is tolerated; the tail stays inside the block."""

    lines = ["```", "x", "#> 1", "y"]

    assert classify(lines, "#>") == [FENCE, CODE, OUTPUT, CODE]


def test_output_marker_outside_fence_is_prose() -> None:
    """Stray output markers outside any block are treated as prose."""

    assert classify(["#> stray"], "#>") == [PROSE]


def test_output_pattern_matches_only_at_line_start() -> None:
    """A marker in the middle of a code line does not make it output."""

    lines = ["```", "x <- '#>'", "#>[1] 1", "```"]

    assert classify(lines, "#>") == [FENCE, CODE, OUTPUT, FENCE]


def test_precompiled_pattern_is_accepted() -> None:
    lines = ["```", "## [1] 1", "x", "```"]

    assert classify(lines, re.compile(r"##")) == [FENCE, OUTPUT, CODE, FENCE]


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("```", True),
        ("``` r", True),
        ("```r", True),
        ("   ````", True),
        ("``", False),
        ("x <- '```'", False),
        ("", False),
    ],
)
def test_is_fence_marker(line: str, expected: bool) -> None:
    assert is_fence_marker(line) is expected


def test_custom_fence_string() -> None:
    """Tilde fences can be classified when configured."""

    lines = ["~~~", "x", "~~~", "```"]

    assert classify(lines, "#>", fence="~~~") == [FENCE, CODE, FENCE, PROSE]
