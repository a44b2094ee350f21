"""Configuration loading and management for git-dig.

Configuration sources are merged in priority order:
    1. Defaults (defined in AnalysisConfig)
    2. Global config (~/.git-dig.toml)
    3. Project config (./git-dig.toml)
    4. Explicit config file
    5. Environment variables (GIT_DIG_* prefix)
    6. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(coupling_min_commits=5)
    >>> config.coupling_min_commits
    5
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError

Verbosity = Literal["quiet", "normal", "verbose"]

ENV_PREFIX = "GIT_DIG_"
CONFIG_FILENAME = "git-dig.toml"


@dataclass(frozen=True)
class AnalysisConfig:
    """Tunables for history retrieval and the five analyzers.

    Attributes:
        Analyzer limits:
            hotspot_top: Number of hotspots to report
            coupling_top: Number of coupled pairs to report
            coupling_min_commits: Minimum co-changes for a pair to count
            max_files_per_commit: Commits touching more files are ignored
                by the coupling analysis
            author_top: Number of authors to report
            silo_min_commits: Minimum commits for a single-author file to
                be flagged as a knowledge silo

        Git integration:
            git_max_commits: Maximum commits read from git log
            since: Only commits after this date (anything git accepts)
            until: Only commits before this date

        Output control:
            verbosity: Logging verbosity level
    """

    # Analyzer limits
    hotspot_top: int = 20
    coupling_top: int = 20
    coupling_min_commits: int = 3
    max_files_per_commit: int = 30
    author_top: int = 15
    silo_min_commits: int = 2

    # Git integration
    git_max_commits: int = 5000
    since: Optional[str] = None
    until: Optional[str] = None

    # Output control
    verbosity: Verbosity = "normal"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        for field_name in ("hotspot_top", "coupling_top", "author_top"):
            if getattr(self, field_name) < 1:
                raise ValueError(f"{field_name} must be at least 1")

        if self.coupling_min_commits < 1:
            raise ValueError("coupling_min_commits must be at least 1")
        if self.max_files_per_commit < 2:
            raise ValueError("max_files_per_commit must be at least 2")
        if self.silo_min_commits < 1:
            raise ValueError("silo_min_commits must be at least 1")

        if self.git_max_commits < 1:
            raise ValueError("git_max_commits must be at least 1")

        if self.verbosity not in ("quiet", "normal", "verbose"):
            raise ValueError("verbosity must be one of: quiet, normal, verbose")


def load_config(config_file: Optional[Path] = None, **overrides) -> AnalysisConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags). ``None``
            values are ignored so unset CLI options keep lower-priority values.

    Returns:
        Validated AnalysisConfig instance

    Raises:
        ConfigurationError: If a config file is missing or invalid
        InvalidConfigError: If an environment variable cannot be parsed
    """
    merged: dict = {}

    global_config = Path.home() / f".{CONFIG_FILENAME}"
    if global_config.exists():
        merged.update(_load_toml_file(global_config))

    project_config = Path.cwd() / CONFIG_FILENAME
    if project_config.exists():
        merged.update(_load_toml_file(project_config))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        merged.update(_load_toml_file(config_file))

    merged.update(_load_env_vars())

    # Convert verbosity boolean flags to string
    if overrides.pop("verbose", False):
        overrides["verbosity"] = "verbose"
    if overrides.pop("quiet", False):
        overrides["verbosity"] = "quiet"

    merged.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return AnalysisConfig(**merged)
    except TypeError as e:
        # Unknown field in config
        raise ConfigurationError(f"Invalid configuration: {e}")
    except ValueError as e:
        raise ConfigurationError(f"Invalid configuration: {e}")


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from GIT_DIG_* environment variables.

    Every AnalysisConfig field has a matching variable, e.g.
    GIT_DIG_COUPLING_MIN_COMMITS=5 or GIT_DIG_SINCE="6 months ago".
    """
    type_hints = get_type_hints(AnalysisConfig)

    result: dict[str, Any] = {}

    for field_name in AnalysisConfig.__dataclass_fields__:
        env_key = f"{ENV_PREFIX}{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        if type_hint is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hint)
        except ValueError as e:
            raise InvalidConfigError(env_key, env_value, str(e))
        if parsed is not None:
            result[field_name] = parsed

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse environment variable string to the correct type.

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    origin = getattr(type_hint, "__origin__", None)

    # Optional[X] is Union[X, None]
    args = getattr(type_hint, "__args__", ())
    if type(None) in args:
        non_none_types = [t for t in args if t is not type(None)]
        if non_none_types:
            type_hint = non_none_types[0]
            origin = getattr(type_hint, "__origin__", None)

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    if type_hint is float:
        return float(value)

    # String (including Literal types like Verbosity)
    if type_hint is str or origin is Literal:
        return value

    return None


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict.

    Raises:
        ConfigurationError: If the file cannot be read or parsed
    """
    try:
        # Python 3.11+ has tomllib in stdlib
        import tomllib
    except ModuleNotFoundError:
        # Declared dependency on Python < 3.11
        import tomli as tomllib  # type: ignore

    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigurationError(f"Invalid config file '{path}': {e}")
