"""
Summary: Derive the clean-script path and decide whether it may be written.
Why: Keep output naming and clobber policy out of the reconstruction engine.
"""

from __future__ import annotations

import uuid
from enum import Enum
from pathlib import Path
from typing import Final

CLEAN_SUFFIX: Final[str] = "_clean"
SCRIPT_EXTENSION: Final[str] = ".R"
TEMP_BASENAME_PREFIX: Final[str] = "reprex_"


class OutfileMode(Enum):
    """Sentinel asking for a file name derived from the input."""

    DERIVE = "derive"


OutfileRequest = str | Path | OutfileMode | None


def _strip_extension(path: Path) -> Path:
    return path.with_suffix("") if path.suffix else path


def make_filebase(
    outfile: str | Path | OutfileMode,
    infile: Path | None,
    *,
    working_dir: Path | None = None,
) -> Path:
    """Return the path stem the clean script is written under.

    Args:
        outfile: Explicit base name, or ``OutfileMode.DERIVE``.
        infile: Path the input was read from, if any.
        working_dir: Directory for relative and temporary names. Defaults to
            the current working directory.

    Returns:
        Path: Base path without extension.
    """

    base_dir = working_dir or Path.cwd()

    if outfile is OutfileMode.DERIVE:
        if infile is not None:
            return _strip_extension(infile)
        return base_dir / f"{TEMP_BASENAME_PREFIX}{uuid.uuid4().hex[:12]}"

    candidate = Path(outfile).expanduser()
    if not candidate.is_absolute():
        candidate = base_dir / candidate
    return _strip_extension(candidate)


def clean_script_path(filebase: Path) -> Path:
    """Return ``<filebase>_clean.R``."""

    return filebase.with_name(f"{filebase.name}{CLEAN_SUFFIX}{SCRIPT_EXTENSION}")


class ClobberPolicy(str, Enum):
    """Represent how to handle an existing output file."""

    ABORT = "abort"
    OVERWRITE = "overwrite"

    @staticmethod
    def from_user_input(value: str) -> "ClobberPolicy":
        """Translate raw CLI input into the matching policy."""

        normalized = value.strip().lower()
        for policy in ClobberPolicy:
            if policy.value == normalized:
                return policy
        valid: Final[str] = ", ".join(p.value for p in ClobberPolicy)
        msg = f"Unsupported clobber policy '{value}'. Valid options: {valid}"
        raise ValueError(msg)

    def allows_overwrite(self, path: Path, *, exists: bool) -> bool:
        """Missing files are always writable; existing ones only under ``overwrite``."""

        _ = path
        if not exists:
            return True
        return self is ClobberPolicy.OVERWRITE


__all__ = [
    "CLEAN_SUFFIX",
    "ClobberPolicy",
    "OutfileMode",
    "OutfileRequest",
    "clean_script_path",
    "make_filebase",
]
