"""Configuration management for unreprex."""

import os
import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar, Final

from unreprex.config.paths import default_config_path, default_log_file
from unreprex.features.undo.domain.models import (
    DEFAULT_COMMENT,
    DEFAULT_CONTINUATION,
    DEFAULT_PROMPT,
    DEFAULT_PROSE_PREFIX,
    UndoOptions,
)
from unreprex.platform.filesystem import write_text_file
from unreprex.platform.logging import logger

_ENV_CLIPBOARD: Final[str] = "UNREPREX_CLIPBOARD"
_FALSEY: Final[frozenset[str]] = frozenset({"0", "false", "no", "off"})


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Regular expression fragment marking captured output lines
    comment: str = DEFAULT_COMMENT

    # Interactive prompts stripped by ``rescue``
    prompt: str = DEFAULT_PROMPT
    continuation: str = DEFAULT_CONTINUATION

    # Commentary prefix applied to prose when inverting Markdown
    prose_prefix: str = DEFAULT_PROSE_PREFIX

    # Whether the clipboard may be read and written
    use_clipboard: bool = True

    # Log file path
    log_file: Path | None = _path_field()

    # Singleton instance
    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""

        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value.strip() else None)

    def to_options(self) -> UndoOptions:
        """Build the explicit option structure handed to reconstruction."""

        return UndoOptions(
            comment=self.comment,
            prompt=self.prompt,
            continuation=self.continuation,
            prose_prefix=self.prose_prefix,
        )

    def clipboard_enabled(self, env: dict[str, str] | None = None) -> bool:
        """Combine the persisted switch with the ``UNREPREX_CLIPBOARD`` override."""

        mapping = env if env is not None else os.environ
        override = (mapping.get(_ENV_CLIPBOARD) or "").strip().lower()
        if override:
            return override not in _FALSEY
        return self.use_clipboard

    def save(self, path: Path | None = None) -> Path:
        """Save configuration to file and return the written path."""
        config_dict = asdict(self)

        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        target = path or default_config_path()
        try:
            content = self._render_toml(config_dict)
            write_text_file(target, content)
            logger.info("Configuration saved to %s", target)
        except OSError as e:
            logger.error("Failed to save configuration: %s", e)
            raise
        return target

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# unreprex Configuration File")
        lines.append("")

        lines.append("# Regular expression matched at the start of captured output lines")
        lines.append(f"comment = {self._format_toml_value(config['comment'])}")
        lines.append("")

        lines.append("# Primary and continuation prompts of an interactive session")
        lines.append(f"prompt = {self._format_toml_value(config['prompt'])}")
        lines.append(f"continuation = {self._format_toml_value(config['continuation'])}")
        lines.append("")

        lines.append("# Prefix turning Markdown prose into commentary")
        lines.append(f"prose_prefix = {self._format_toml_value(config['prose_prefix'])}")
        lines.append("")

        lines.append("# Read input from and copy results to the clipboard (default true)")
        lines.append(f"use_clipboard = {self._format_toml_value(config['use_clipboard'])}")
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append(f"# Example: log_file = {self._format_toml_value(default_log_file())}")
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        """Format a value for TOML serialization."""
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        return str(value)

    @classmethod
    def load(cls, path: Path | None = None) -> "Config":
        """Load configuration from file.

        A missing file yields defaults. The loaded instance is cached until
        ``reset`` is called.

        Args:
            path: Explicit config file. Defaults to ``default_config_path()``.

        Returns:
            Config: Loaded configuration object.
        """
        config_file = path or default_config_path()
        if cls._instance is not None and cls._loaded_from == config_file:
            return cls._instance

        if not config_file.exists():
            logger.debug("No configuration at %s; using defaults", config_file)
            instance = cls()
        else:
            try:
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as e:
                logger.error("Failed to load configuration: %s", e)
                raise

            known = {f.name for f in fields(cls)}
            unknown = sorted(set(config_dict) - known)
            if unknown:
                logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))

            instance = cls(**{k: v for k, v in config_dict.items() if k in known})
            logger.debug("Configuration loaded from %s", config_file)

        cls._instance = instance
        cls._loaded_from = config_file
        return instance

    @classmethod
    def reset(cls) -> None:
        """Forget the cached instance."""

        cls._instance = None
        cls._loaded_from = None
