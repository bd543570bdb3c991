"""Shared pytest fixtures: in-memory ports and isolated configuration."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from fakes import FakeClipboard, FakeFileSystem


@pytest.fixture
def fake_clipboard() -> FakeClipboard:
    """Provide an available, empty clipboard."""

    return FakeClipboard()


@pytest.fixture
def fake_filesystem() -> FakeFileSystem:
    """Provide an empty in-memory filesystem."""

    return FakeFileSystem()


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point configuration at a temporary file and keep the real clipboard out of reach."""

    from unreprex.config.config import Config

    config_file = tmp_path / "config" / "config.toml"
    monkeypatch.setenv("UNREPREX_CONFIG", str(config_file))
    monkeypatch.setenv("UNREPREX_CLIPBOARD", "0")
    Config.reset()
    try:
        yield config_file
    finally:
        Config.reset()
