"""Config file data structures and loading.

Provides immutable settings loaded from the user's config.toml. Every field
is optional: a value missing from the file falls through to the built-in
default when the CLI resolves the final PromptConfig.

Example config.toml:

    truncate_name = 24
    bookmarks_display_limit = 2
    strip_bookmark_prefix = ["me/"]
    no_color = false

    [jj]
    status = true
    prefix_color = false

    [git]
    id = false
"""

import os
import tomllib
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

CONFIG_PATH_ENV = "VCS_PROMPT_CONFIG"

_INT_KEYS = (
    "truncate_name",
    "id_length",
    "ancestor_bookmark_depth",
    "bookmarks_display_limit",
)
_DISPLAY_KEYS = ("prefix", "name", "id", "status", "prefix_color")


@dataclass(frozen=True)
class DisplaySettings:
    """Per-model segment visibility from the config file (None = not set)."""

    prefix: bool | None = None
    name: bool | None = None
    id: bool | None = None
    status: bool | None = None
    prefix_color: bool | None = None


@dataclass(frozen=True)
class FileConfig:
    """Immutable settings read from the config file.

    Loaded once at CLI entry point and stored in PromptContext.
    All fields are read-only after construction.
    """

    truncate_name: int | None = None
    id_length: int | None = None
    ancestor_bookmark_depth: int | None = None
    bookmarks_display_limit: int | None = None
    strip_bookmark_prefix: tuple[str, ...] | None = None
    jj_symbol: str | None = None
    git_symbol: str | None = None
    no_symbol: bool = False
    no_color: bool = False
    jj: DisplaySettings = field(default_factory=DisplaySettings)
    git: DisplaySettings = field(default_factory=DisplaySettings)


def _require(value: Any, expected: type, key: str, path: Path) -> Any:
    # bool is an int subclass; never accept it where a count is expected
    if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
        raise ValueError(f"'{key}' in {path} must be {expected.__name__}, got {value!r}")
    return value


def _parse_display(data: Any, table: str, path: Path) -> DisplaySettings:
    if data is None:
        return DisplaySettings()
    if not isinstance(data, dict):
        raise ValueError(f"'[{table}]' in {path} must be a table")
    values: dict[str, bool] = {}
    for key in _DISPLAY_KEYS:
        if key in data:
            values[key] = _require(data[key], bool, f"{table}.{key}", path)
    return DisplaySettings(**values)


def parse_config(data: Mapping[str, Any], path: Path) -> FileConfig:
    """Validate decoded TOML and build a FileConfig.

    Args:
        data: Decoded TOML document
        path: Path the document came from (for error messages)

    Returns:
        FileConfig with the values present in the document

    Raises:
        ValueError: If a value has the wrong type or a count is negative
    """
    values: dict[str, Any] = {}

    for key in _INT_KEYS:
        if key in data:
            number = _require(data[key], int, key, path)
            if number < 0:
                raise ValueError(f"'{key}' in {path} must be non-negative, got {number}")
            values[key] = number

    if "strip_bookmark_prefix" in data:
        prefixes = data["strip_bookmark_prefix"]
        if isinstance(prefixes, str):
            prefixes = [prefixes]
        _require(prefixes, list, "strip_bookmark_prefix", path)
        values["strip_bookmark_prefix"] = tuple(
            _require(p, str, "strip_bookmark_prefix", path) for p in prefixes
        )

    for key in ("jj_symbol", "git_symbol"):
        if key in data:
            values[key] = _require(data[key], str, key, path)

    for key in ("no_symbol", "no_color"):
        if key in data:
            values[key] = _require(data[key], bool, key, path)

    return FileConfig(
        **values,
        jj=_parse_display(data.get("jj"), "jj", path),
        git=_parse_display(data.get("git"), "git", path),
    )


def default_config_path(env: Mapping[str, str]) -> Path:
    """Resolve the config file location from the environment.

    Order: $VCS_PROMPT_CONFIG, then $XDG_CONFIG_HOME/vcs-prompt/config.toml,
    then ~/.config/vcs-prompt/config.toml.
    """
    explicit = env.get(CONFIG_PATH_ENV)
    if explicit:
        return Path(explicit).expanduser()
    xdg = env.get("XDG_CONFIG_HOME")
    base = Path(xdg).expanduser() if xdg else Path.home() / ".config"
    return base / "vcs-prompt" / "config.toml"


class ConfigStore(ABC):
    """Abstract interface for config file access.

    Provides dependency injection for config access, enabling in-memory
    implementations for tests without touching filesystem.
    """

    @abstractmethod
    def exists(self) -> bool:
        """Check if a config file exists."""
        ...

    @abstractmethod
    def load(self) -> FileConfig:
        """Load the config file.

        Returns:
            FileConfig instance with loaded values

        Raises:
            FileNotFoundError: If config doesn't exist
            ValueError: If config is malformed
        """
        ...

    @abstractmethod
    def path(self) -> Path:
        """Get the path to the config file.

        Returns:
            Path to config file (for error messages and debugging)
        """
        ...

    def load_or_default(self) -> FileConfig:
        """Load the config file, or empty settings if there is none."""
        if not self.exists():
            return FileConfig()
        return self.load()


class RealConfigStore(ConfigStore):
    """Production implementation that reads config.toml from disk."""

    def __init__(self, env: Mapping[str, str] | None = None) -> None:
        self._env = env if env is not None else os.environ

    def exists(self) -> bool:
        """Check if the config file exists."""
        return self.path().is_file()

    def load(self) -> FileConfig:
        """Load settings from config.toml.

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If the file is unreadable, not valid TOML, or has invalid values
        """
        config_path = self.path()

        if not config_path.exists():
            raise FileNotFoundError(f"Config not found at {config_path}")

        try:
            text = config_path.read_text(encoding="utf-8")
        except OSError as e:
            raise ValueError(f"Cannot read {config_path}: {e}") from e

        try:
            data = tomllib.loads(text)
        except tomllib.TOMLDecodeError as e:
            raise ValueError(f"Invalid TOML in {config_path}: {e}") from e

        return parse_config(data, config_path)

    def path(self) -> Path:
        return default_config_path(self._env)


class InMemoryConfigStore(ConfigStore):
    """Test implementation that stores config in memory without touching filesystem."""

    def __init__(self, config: FileConfig | None = None) -> None:
        """Initialize in-memory config store.

        Args:
            config: Config state (None = config doesn't exist)
        """
        self._config = config

    def exists(self) -> bool:
        return self._config is not None

    def load(self) -> FileConfig:
        if self._config is None:
            raise FileNotFoundError(f"Config not found at {self.path()}")
        return self._config

    def path(self) -> Path:
        """Get fake path for error messages."""
        return Path("/test/vcs-prompt/config.toml")
