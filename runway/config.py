# Runway CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Configuration loader for Runway parser settings.

Parser behaviour (which recognizers run and in what order, the error handler
policy and `--` separator handling) can be kept in a YAML or TOML file instead of
being assembled in code:

    # runway.yaml
    parser:
      recognizers: [standard, long-getopt, classic-getopt]
      error_handler: collect-all
      allow_separator: true
      separator: "--"
    logging:
      mode: cli
      level: debug
      file: runway.log

`loader()` validates the file with pydantic and returns a ready `ParserConfig`,
optionally applying the `logging` section to the "runway" logger first.
"""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Literal

import toml
import yaml
from pydantic import BaseModel, Field, field_validator

from runway.logger import logger
from runway.parser.error_handlers import ERROR_HANDLERS
from runway.parser.parser_config import ParserConfig
from runway.parser.recognizers import RECOGNIZERS
from runway.utils import setup_logging


class ParserSettings(BaseModel):
    """Raw parser settings model for Runway configuration files."""

    recognizers: list[str] = Field(
        default_factory=lambda: ["standard", "long-getopt", "classic-getopt"]
    )
    error_handler: str = "fail-fast"
    allow_separator: bool = True
    separator: str = "--"

    @field_validator("recognizers")
    @classmethod
    def validate_recognizers(cls, value: list[str]) -> list[str]:
        names = [name.strip().lower() for name in value]
        if not names:
            raise ValueError("At least one recognizer must be enabled.")
        unknown = [name for name in names if name not in RECOGNIZERS]
        if unknown:
            raise ValueError(
                f"Unknown recognizer(s): {', '.join(unknown)}. "
                f"Must be one of: {', '.join(RECOGNIZERS)}"
            )
        if len(set(names)) != len(names):
            raise ValueError("Each recognizer may only be listed once.")
        return names

    @field_validator("error_handler")
    @classmethod
    def validate_error_handler(cls, value: str) -> str:
        name = value.strip().lower()
        if name not in ERROR_HANDLERS:
            raise ValueError(
                f"Unknown error handler '{value}'. "
                f"Must be one of: {', '.join(ERROR_HANDLERS)}"
            )
        return name

    @field_validator("separator")
    @classmethod
    def validate_separator(cls, value: str) -> str:
        if not value or any(character.isspace() for character in value):
            raise ValueError("separator must be a non-empty token without whitespace.")
        return value

    def to_config(self) -> ParserConfig:
        return ParserConfig(
            recognizers=tuple(RECOGNIZERS[name]() for name in self.recognizers),
            error_handler=ERROR_HANDLERS[self.error_handler],
            allow_separator=self.allow_separator,
            separator=self.separator,
        )


class LoggingSettings(BaseModel):
    """Settings for the "runway" logger, applied with `setup_logging()`."""

    mode: Literal["cli", "json"] | None = None
    level: str = "WARNING"
    file: str | None = None
    json_file: bool = False

    @field_validator("level")
    @classmethod
    def validate_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level '{value}'.")
        return level

    def apply(self) -> logging.Logger:
        return setup_logging(
            mode=self.mode,
            level=self.level,
            log_file=self.file,
            json_file=self.json_file,
        )


class RunwaySettings(BaseModel):
    """A whole Runway config file."""

    parser: ParserSettings = Field(default_factory=ParserSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


def find_config() -> Path | None:
    """Return the first Runway config file found, if any."""
    candidates = [
        Path.cwd() / "runway.yaml",
        Path.cwd() / "runway.toml",
        Path.cwd() / ".runway.yaml",
        Path.cwd() / ".runway.toml",
        Path(os.environ.get("RUNWAY_CONFIG", "runway.yaml")),
    ]
    return next((path for path in candidates if path.is_file()), None)


def load_settings(file_path: Path | str) -> RunwaySettings:
    """
    Load and validate a Runway YAML or TOML config file.

    The file holds a `parser` section and an optional `logging` section. A file
    with neither key is read as parser settings at the top level.

    Args:
        file_path (Path | str): Path to the config file (YAML or TOML).

    Returns:
        RunwaySettings: The validated settings.

    Raises:
        TypeError: If `file_path` is not a string or Path.
        FileNotFoundError: If the file does not exist.
        ValueError: If the file format is unsupported or its content is invalid.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise FileNotFoundError(f"No such config file: {file_path}")

    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as config_file:
        if suffix in (".yaml", ".yml"):
            raw_config = yaml.safe_load(config_file)
        elif suffix == ".toml":
            raw_config = toml.load(config_file)
        else:
            raise ValueError(f"Unsupported config format: {suffix}")

    if raw_config is None:
        raw_config = {}
    if not isinstance(raw_config, dict):
        raise ValueError(
            "Configuration file must contain a mapping of parser settings.\n"
            "Example:\n"
            "parser:\n"
            "  recognizers: [standard, classic-getopt]\n"
            "  error_handler: collect-all\n"
            "logging:\n"
            "  level: debug"
        )

    sections: Any = raw_config
    if "parser" not in raw_config and "logging" not in raw_config:
        sections = {"parser": raw_config}
    for name in ("parser", "logging"):
        if not isinstance(sections.get(name, {}), dict):
            raise ValueError(f"The '{name}' section must be a mapping of settings.")

    logger.debug("Loading settings from %s", path)
    return RunwaySettings(**sections)


def loader(file_path: Path | str, setup_logs: bool = False) -> ParserConfig:
    """
    Load a Runway config file and return its `ParserConfig`.

    With `setup_logs`, the file's `logging` section is applied to the "runway"
    logger before the parser configuration is built.

    Raises:
        TypeError, FileNotFoundError, ValueError: See `load_settings()`.
    """
    settings = load_settings(file_path)
    if setup_logs:
        settings.logging.apply()
    return settings.parser.to_config()
