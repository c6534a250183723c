"""
Interpreter settings loaded from monkey.toml.

Example:

    [repl]
    prompt = "monkey> "
    show_ast = true

    [logging]
    level = "DEBUG"
"""

import logging
import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from .errors import ConfigError

MANIFEST_NAME = "monkey.toml"
CONFIG_ENV_VAR = "MONKEY_CONFIG"

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


@dataclass
class ReplConfig:
    """Interactive loop settings."""

    prompt: str = ">> "
    show_ast: bool = False  # Echo the parenthesized program before evaluating


@dataclass
class LoggingConfig:
    """Logging settings."""

    level: str = "WARNING"

    @property
    def level_number(self) -> int:
        return getattr(logging, self.level, logging.WARNING)


@dataclass
class MonkeyConfig:
    repl: ReplConfig = field(default_factory=ReplConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    path: Path | None = None  # File the settings came from, if any


def load_manifest(path: Path) -> MonkeyConfig:
    """Read settings from a TOML file."""
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    repl_data = data.get("repl", {})
    if not isinstance(repl_data, dict):
        raise ConfigError(f"{path}: [repl] must be a table")
    logging_data = data.get("logging", {})
    if not isinstance(logging_data, dict):
        raise ConfigError(f"{path}: [logging] must be a table")

    prompt = repl_data.get("prompt", ">> ")
    if not isinstance(prompt, str):
        raise ConfigError(f"{path}: [repl] prompt must be a string")

    show_ast = repl_data.get("show_ast", False)
    if not isinstance(show_ast, bool):
        raise ConfigError(f"{path}: [repl] show_ast must be true or false")

    level = str(logging_data.get("level", "WARNING")).upper()
    if level not in _LOG_LEVELS:
        raise ConfigError(
            f"{path}: [logging] level must be one of {', '.join(sorted(_LOG_LEVELS))}"
        )

    return MonkeyConfig(
        repl=ReplConfig(prompt=prompt, show_ast=show_ast),
        logging=LoggingConfig(level=level),
        path=path,
    )


def normalize_level(value: str) -> str:
    """Upper-case a level name, rejecting names logging does not know."""
    level = value.upper()
    if level not in _LOG_LEVELS:
        choices = ", ".join(sorted(_LOG_LEVELS))
        raise ConfigError(f"log level must be one of {choices}, got {value!r}")
    return level


def find_manifest(start: Path | None = None) -> Path | None:
    """Locate the settings file: $MONKEY_CONFIG first, then ./monkey.toml."""
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)
    candidate = (start or Path.cwd()) / MANIFEST_NAME
    if candidate.exists():
        return candidate
    return None


def load_config(start: Path | None = None) -> MonkeyConfig:
    """Load settings if a file is found, defaults otherwise.

    The LOG_LEVEL environment variable overrides the file's logging level.
    """
    path = find_manifest(start)
    config = load_manifest(path) if path is not None else MonkeyConfig()

    env_level = os.environ.get("LOG_LEVEL")
    if env_level and env_level.upper() in _LOG_LEVELS:
        config.logging.level = env_level.upper()
    return config
