"""Configuration management for winpath."""

from __future__ import annotations

import codecs
import logging
import ntpath
import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from winpath.config.file_ops import write_text_file
from winpath.config.paths import default_config_path
from winpath.platform.logging import logger

_LOG_LEVELS: frozenset[str] = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


class ConfigError(ValueError):
    """Raised when the configuration file is unreadable or holds invalid values."""


_BASIC_STRING_ESCAPES: dict[str, str] = {
    "\\": "\\\\",
    '"': '\\"',
    "\b": "\\b",
    "\t": "\\t",
    "\n": "\\n",
    "\f": "\\f",
    "\r": "\\r",
}


def _escape_basic_string(text: str) -> str:
    """Escape ``text`` for a TOML basic (double-quoted) string."""

    escaped: list[str] = []
    for ch in text:
        if ch in _BASIC_STRING_ESCAPES:
            escaped.append(_BASIC_STRING_ESCAPES[ch])
        elif ord(ch) < 0x20 or ord(ch) == 0x7F:
            escaped.append(f"\\u{ord(ch):04X}")
        else:
            escaped.append(ch)
    return "".join(escaped)


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

    # Log file path; the CLI falls back to DEFAULT_LOG_FILE
    log_file: Path | None = _path_field()

    # Console log level name
    log_level: str = "INFO"

    # Codec used for legacy byte strings; None queries the system code page
    code_page: str | None = None

    # Working directory used to resolve relative paths on non-Windows hosts
    working_directory: str | None = None

    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects and validate values."""

        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value.strip() else None)

        self.log_level = self.log_level.strip().upper()
        if self.log_level not in _LOG_LEVELS:
            raise ConfigError(f"Invalid log_level '{self.log_level}'")

        if self.code_page:
            try:
                _ = codecs.lookup(self.code_page)
            except LookupError as e:
                raise ConfigError(f"Unknown code_page '{self.code_page}'") from e

        if self.working_directory:
            drive, rest = ntpath.splitdrive(self.working_directory)
            if not drive or not rest.startswith(("\\", "/")):
                raise ConfigError(
                    f"working_directory must be a fully qualified Windows path: '{self.working_directory}'"
                )

    @property
    def console_level(self) -> int:
        """Numeric logging level for the console handler."""
        return logging.getLevelNamesMapping()[self.log_level]

    def save(self, path: Path | None = None) -> Path:
        """Save configuration to ``path`` (default location when omitted)."""
        config_dict = asdict(self)

        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        target = path or default_config_path()
        try:
            write_text_file(target, self._render_toml(config_dict))
            logger.info("Configuration saved to %s", target)
        except OSError as e:
            logger.error("Failed to save configuration: %s", e)
            raise
        return target

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# winpath configuration file")
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append('# Example: log_file = "/path/to/logs/winpath.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        lines.append("# Console log level: DEBUG, INFO, WARNING, ERROR or CRITICAL")
        lines.append(f"log_level = {self._format_toml_value(config['log_level'])}")
        lines.append("")

        lines.append("# Code page for legacy byte strings (optional, defaults to the system code page)")
        lines.append('# Example: code_page = "cp1252"')
        if config["code_page"]:
            lines.append(f"code_page = {self._format_toml_value(config['code_page'])}")
        lines.append("")

        lines.append("# Working directory for resolving relative paths off Windows (optional)")
        lines.append("# Example: working_directory = 'C:\\Users\\me'")
        if config["working_directory"]:
            lines.append(
                f"working_directory = {self._format_toml_value(config['working_directory'])}"
            )
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        """Format a value for TOML serialization.

        Strings are written as literal strings so backslashes survive; text
        that a literal string cannot hold uses an escaped basic string.
        """
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            text = str(value)
            if "'" in text or any(ord(ch) < 0x20 or ord(ch) == 0x7F for ch in text):
                return f'"{_escape_basic_string(text)}"'
            return f"'{text}'"
        return str(value)

    @classmethod
    def load(cls, path: Path | None = None) -> "Config":
        """Load configuration from ``path`` or the default location.

        A missing file yields the defaults; nothing is written.

        Raises:
            ConfigError: If the file is not valid TOML or holds invalid values.
        """
        config_file = (path or default_config_path()).resolve()

        if cls._instance is not None and cls._loaded_from == config_file:
            return cls._instance

        if not config_file.exists():
            logger.debug("No configuration at %s; using defaults", config_file)
            instance = cls()
        else:
            try:
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise ConfigError(f"Invalid TOML in {config_file}: {e}") from e

            known = {f.name for f in fields(cls)}
            unknown = sorted(set(config_dict) - known)
            if unknown:
                raise ConfigError(f"Unknown configuration keys in {config_file}: {', '.join(unknown)}")

            try:
                instance = cls(**config_dict)
            except (TypeError, AttributeError) as e:
                raise ConfigError(f"Invalid configuration in {config_file}: {e}") from e
            logger.debug("Configuration loaded from %s", config_file)

        cls._instance = instance
        cls._loaded_from = config_file
        return instance


__all__ = ["Config", "ConfigError"]
