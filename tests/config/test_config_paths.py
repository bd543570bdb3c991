"""Tests for configuration path resolution helpers."""

from pathlib import Path

from unreprex.config.paths import CONFIG_ENV_VAR, default_config_path, default_log_file


def test_default_log_file(portable_repo_root: Path) -> None:
    """The suggested log file lives under the repository logs/ folder."""

    assert default_log_file() == (portable_repo_root / "logs" / "unreprex.log").resolve()


def test_default_config_path_without_override(portable_repo_root: Path) -> None:
    path = default_config_path(env={})

    assert path == (portable_repo_root / "config" / "config.toml").resolve()


def test_environment_override_wins(tmp_path: Path) -> None:
    custom = tmp_path / "elsewhere.toml"

    assert default_config_path(env={CONFIG_ENV_VAR: f"  {custom}  "}) == custom.resolve()


def test_blank_override_is_ignored(portable_repo_root: Path) -> None:
    path = default_config_path(env={CONFIG_ENV_VAR: "   "})

    assert path == (portable_repo_root / "config" / "config.toml").resolve()
