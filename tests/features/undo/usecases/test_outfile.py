"""
Summary: Tests for clean-script naming and clobber policy.
Why: Output paths must be predictable and never silently overwrite files.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from unreprex.features.undo.usecases import (
    ClobberPolicy,
    OutfileMode,
    clean_script_path,
    make_filebase,
)


def test_make_filebase_explicit_name_is_relative_to_working_dir(tmp_path: Path) -> None:
    assert make_filebase("foo", None, working_dir=tmp_path) == tmp_path / "foo"


def test_make_filebase_drops_extension(tmp_path: Path) -> None:
    assert make_filebase("foo.md", None, working_dir=tmp_path) == tmp_path / "foo"


def test_make_filebase_keeps_absolute_names(tmp_path: Path) -> None:
    target = tmp_path / "nested" / "bar"

    assert make_filebase(str(target), None, working_dir=Path("/elsewhere")) == target


def test_make_filebase_derives_from_input_path(tmp_path: Path) -> None:
    infile = tmp_path / "issue_reprex.md"

    assert make_filebase(OutfileMode.DERIVE, infile) == tmp_path / "issue_reprex"


def test_make_filebase_derives_temporary_name_without_input_path(tmp_path: Path) -> None:
    first = make_filebase(OutfileMode.DERIVE, None, working_dir=tmp_path)
    second = make_filebase(OutfileMode.DERIVE, None, working_dir=tmp_path)

    assert first.parent == tmp_path
    assert first.name.startswith("reprex_")
    assert first != second


def test_clean_script_path_appends_suffix(tmp_path: Path) -> None:
    assert clean_script_path(tmp_path / "foo") == tmp_path / "foo_clean.R"


@pytest.mark.parametrize(
    ("policy", "exists", "expected"),
    [
        (ClobberPolicy.ABORT, False, True),
        (ClobberPolicy.ABORT, True, False),
        (ClobberPolicy.OVERWRITE, False, True),
        (ClobberPolicy.OVERWRITE, True, True),
    ],
)
def test_clobber_policy_allows_overwrite(policy: ClobberPolicy, exists: bool, expected: bool) -> None:
    assert policy.allows_overwrite(Path("foo_clean.R"), exists=exists) is expected


def test_clobber_policy_from_user_input() -> None:
    assert ClobberPolicy.from_user_input(" Overwrite ") is ClobberPolicy.OVERWRITE

    with pytest.raises(ValueError, match="Valid options: abort, overwrite"):
        _ = ClobberPolicy.from_user_input("backup")
