"""
Settings files for the edgerouter-tools command line.

Settings are read from TOML, later files overriding earlier ones:

1. ``~/.config/edgerouter-tools/config.toml``
2. ``.edgerouter-tools.toml`` or ``edgerouter-tools.toml`` in the working
   directory or one of its parents, up to the repository root

Example::

    [defaults]
    format = "commands"     # dump output: text, json, yaml, commands
    quiet = true            # check: only report failures
    verbose = false         # log parser activity to stderr

    [input]
    default_file = "/config/config.boot"
    encoding = "utf-8"

Command-line options always win over settings files.
"""

from __future__ import annotations

import sys
import warnings
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from edgerouter_tools.exceptions import ConfigurationError

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

CONFIG_FILENAMES = (".edgerouter-tools.toml", "edgerouter-tools.toml")
USER_CONFIG_PATH = Path.home() / ".config" / "edgerouter-tools" / "config.toml"

OUTPUT_FORMATS = ("text", "json", "yaml", "commands")

# TOML section -> settings it may hold (attribute names on Config)
SECTIONS = {
    "defaults": ("format", "verbose", "quiet"),
    "input": ("default_file", "encoding"),
}


class ConfigError(ConfigurationError):
    """A settings file is unreadable or holds an invalid value."""


@dataclass
class Config:
    """Effective settings once every settings file has been applied."""

    format: str = "text"
    verbose: bool = False
    quiet: bool = False
    default_file: str = "config.boot"
    encoding: str = "utf-8"

    @classmethod
    def load(cls, start_dir: Path | None = None) -> Config:
        """
        Read the user file, then the project file found from ``start_dir``.

        Raises:
            ConfigError: If a file is not valid TOML or a value has the
                wrong type
        """
        config = cls()
        for path in settings_files(start_dir or Path.cwd()):
            config.update(read_settings(path), source=path)
        return config

    def update(self, data: dict[str, Any], source: str | Path = "<settings>") -> None:
        """Apply the tables of one parsed settings file."""
        for section, table in data.items():
            if section not in SECTIONS or not isinstance(table, dict):
                warnings.warn(f"Ignoring unknown section [{section}] in {source}", stacklevel=2)
                continue

            for key, value in table.items():
                if key not in SECTIONS[section]:
                    warnings.warn(
                        f"Ignoring unknown setting '{section}.{key}' in {source}", stacklevel=2
                    )
                    continue
                expected = type(getattr(self, key))
                setattr(self, key, check_value(f"{section}.{key}", value, expected, source))


def check_value(name: str, value: Any, expected: type, source: str | Path) -> Any:
    """Return ``value`` if it is valid for setting ``name``."""
    # Exact type match: TOML integers must not pass as booleans
    if type(value) is not expected:
        raise ConfigError(
            f"Setting '{name}' must be a {expected.__name__}, got {type(value).__name__}",
            context={"file": str(source), "value": repr(value)},
        )

    if name == "defaults.format" and value not in OUTPUT_FORMATS:
        raise ConfigError(
            f"Invalid output format '{value}'",
            context={"file": str(source), "key": name},
            suggestions=[f"Use one of: {', '.join(OUTPUT_FORMATS)}"],
        )

    return value


def settings_files(start_dir: Path) -> list[Path]:
    """Settings files that apply to ``start_dir``, lowest precedence first."""
    files = []
    if USER_CONFIG_PATH.is_file():
        files.append(USER_CONFIG_PATH)

    project = find_project_settings(start_dir)
    if project is not None:
        files.append(project)
    return files


def find_project_settings(start_dir: Path) -> Path | None:
    """Nearest project settings file at or above ``start_dir``; stops at a ``.git`` root."""
    for directory in [start_dir.resolve(), *start_dir.resolve().parents]:
        for name in CONFIG_FILENAMES:
            candidate = directory / name
            if candidate.is_file():
                return candidate
        if (directory / ".git").exists():
            return None
    return None


def read_settings(path: Path) -> dict[str, Any]:
    """Parse one TOML settings file."""
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}", context={"file": str(path)}) from e
    except OSError as e:
        raise ConfigError(f"Cannot read settings file {path}: {e}", context={"file": str(path)}) from e
