"""Test configuration management."""

import tomllib
from pathlib import Path

import pytest

from unreprex.config.config import Config
from unreprex.config.paths import default_config_path
from unreprex.features.undo import UndoOptions


def test_missing_file_yields_defaults() -> None:
    """A missing file gives defaults and is not created implicitly."""
    config = Config.load()

    assert config.comment == "#>"
    assert config.prompt == "> "
    assert config.continuation == "+ "
    assert config.prose_prefix == "#' "
    assert config.use_clipboard is True
    assert config.log_file is None
    assert not default_config_path().exists()


def test_save_load_toml() -> None:
    """Saved values round-trip, including regex metacharacters and quotes."""
    original = Config(
        comment='^\\s*##"',
        prompt="R> ",
        use_clipboard=False,
        log_file=Path("/tmp/logs/unreprex.log"),
    )
    written = original.save()
    assert written == default_config_path()

    Config.reset()
    loaded = Config.load()

    assert loaded.comment == '^\\s*##"'
    assert loaded.prompt == "R> "
    assert loaded.use_clipboard is False
    assert loaded.log_file == Path("/tmp/logs/unreprex.log")


def test_singleton_behavior() -> None:
    """Loading twice from the same file returns the cached instance."""
    config1 = Config.load()
    config2 = Config.load()

    assert config2 is config1


def test_toml_comments() -> None:
    """Test TOML file contains comments."""
    _ = Config().save()

    content = default_config_path().read_text(encoding="utf-8")

    assert "# unreprex Configuration File" in content
    assert "# Primary and continuation prompts" in content
    assert "# Log file path" in content
    assert "log_file =" not in content


def test_unknown_keys_are_ignored(tmp_path: Path) -> None:
    path = tmp_path / "custom.toml"
    _ = path.write_text('comment = "##"\nbase_path = "/music"\n', encoding="utf-8")

    config = Config.load(path)

    assert config.comment == "##"
    assert not hasattr(config, "base_path")


def test_invalid_toml_raises(tmp_path: Path) -> None:
    path = tmp_path / "broken.toml"
    _ = path.write_text("comment = \n", encoding="utf-8")

    with pytest.raises(tomllib.TOMLDecodeError):
        _ = Config.load(path)


def test_to_options() -> None:
    config = Config(comment="##", prompt="R> ", continuation="R+ ", prose_prefix="# ")

    assert config.to_options() == UndoOptions(
        comment="##", prompt="R> ", continuation="R+ ", prose_prefix="# "
    )


@pytest.mark.parametrize(
    ("stored", "env", "expected"),
    [
        (True, {}, True),
        (False, {}, False),
        (True, {"UNREPREX_CLIPBOARD": "off"}, False),
        (True, {"UNREPREX_CLIPBOARD": " FALSE "}, False),
        (False, {"UNREPREX_CLIPBOARD": "1"}, True),
        (False, {"UNREPREX_CLIPBOARD": ""}, False),
    ],
)
def test_clipboard_enabled(stored: bool, env: dict[str, str], expected: bool) -> None:
    assert Config(use_clipboard=stored).clipboard_enabled(env) is expected
