"""Config and log file locations.

Both live under the repository root (the nearest parent holding
``pyproject.toml`` or ``.git``): ``config/config.toml`` and
``logs/unreprex.log``. ``UNREPREX_CONFIG`` replaces the config location.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Final

CONFIG_ENV_VAR: Final[str] = "UNREPREX_CONFIG"
_ROOT_MARKERS: Final[tuple[str, ...]] = ("pyproject.toml", ".git")


def _detect_repo_root(start: Path | None = None) -> Path:
    """Return the nearest ancestor of ``start`` holding a root marker.

    Falls back to the current working directory when none is found.
    """
    origin = (start or Path(__file__).resolve()).parent
    for candidate in (origin, *origin.parents):
        if any((candidate / marker).exists() for marker in _ROOT_MARKERS):
            return candidate
    return Path.cwd()


def default_config_path(env: Mapping[str, str] | None = None) -> Path:
    """Return the TOML config file, honouring ``UNREPREX_CONFIG``."""

    override = (os.environ if env is None else env).get(CONFIG_ENV_VAR, "").strip()
    if override:
        return Path(override).expanduser().resolve()
    return (_detect_repo_root() / "config" / "config.toml").resolve()


def default_log_file() -> Path:
    """Return the log file suggested in the config template."""

    return (_detect_repo_root() / "logs" / "unreprex.log").resolve()


__all__ = ["CONFIG_ENV_VAR", "default_config_path", "default_log_file"]
