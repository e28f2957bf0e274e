"""Configuration loading and management for codeshape.

Configuration sources are merged in priority order:
    1. Defaults (defined in AnalysisConfig)
    2. Global config (~/.codeshape.toml)
    3. Project config (./codeshape.toml)
    4. Explicit config file
    5. Environment variables (CODESHAPE_* prefix)
    6. Keyword overrides

Example:
    >>> config = load_config(verbose=True, sample_size=20)
    >>> config.verbosity
    'verbose'
    >>> config.sample_size
    20
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError

Verbosity = Literal["quiet", "normal", "verbose"]

DEFAULT_IGNORE_PATTERNS: tuple[str, ...] = (
    "**/node_modules/**",
    "**/dist/**",
    "**/build/**",
    "**/.git/**",
    "**/.next/**",
    "**/coverage/**",
    "**/*.d.ts",
    "**/__pycache__/**",
    "**/.venv/**",
    "**/venv/**",
)


@dataclass(frozen=True)
class AnalysisConfig:
    """Configuration for one analysis run.

    Attributes:
        Scanning:
            ignore_patterns: Glob patterns excluded from the walk, evaluated
                before the ones translated from the project's .gitignore
            use_ignore_file: Translate and apply the project's .gitignore
            follow_symlinks: Follow symbolic links during the walk

        Extraction:
            sample_size: Max files analyzed per file type for naming stats
            max_file_size_mb: Larger files are skipped during extraction

        Dependency graph:
            max_files: Max modules parsed into the dependency graph
            layer_conformance_threshold: Minimum share of edges that must
                point from a later layer to an earlier one

        Pattern detection:
            report_threshold: Heuristic scores must exceed this to be reported
            merge_boost: Added to the best confidence when detections merge
            dominant_share: Share a convention needs to be called dominant

        Runtime:
            timeout_seconds: Abort the run after this long (None = no limit)
            verbosity: Logging verbosity level
    """

    ignore_patterns: tuple[str, ...] = DEFAULT_IGNORE_PATTERNS
    use_ignore_file: bool = True
    follow_symlinks: bool = False

    sample_size: int = 50
    max_file_size_mb: float = 2.0

    max_files: int = 200
    layer_conformance_threshold: float = 0.8

    report_threshold: int = 60
    merge_boost: int = 10
    dominant_share: float = 0.6

    timeout_seconds: Optional[float] = None
    verbosity: Verbosity = "normal"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        # Lists coming from TOML are normalized to tuples
        if not isinstance(self.ignore_patterns, tuple):
            object.__setattr__(self, "ignore_patterns", tuple(self.ignore_patterns))

        if self.sample_size < 1:
            raise InvalidConfigError("sample_size", self.sample_size, "must be at least 1")
        if self.max_files < 1:
            raise InvalidConfigError("max_files", self.max_files, "must be at least 1")
        if self.max_file_size_mb <= 0:
            raise InvalidConfigError("max_file_size_mb", self.max_file_size_mb, "must be positive")
        if not 0 <= self.report_threshold <= 100:
            raise InvalidConfigError(
                "report_threshold", self.report_threshold, "must be between 0 and 100"
            )
        if not 0 <= self.merge_boost <= 100:
            raise InvalidConfigError("merge_boost", self.merge_boost, "must be between 0 and 100")
        if not 0.0 < self.dominant_share <= 1.0:
            raise InvalidConfigError(
                "dominant_share", self.dominant_share, "must be in (0.0, 1.0]"
            )
        if not 0.0 <= self.layer_conformance_threshold <= 1.0:
            raise InvalidConfigError(
                "layer_conformance_threshold",
                self.layer_conformance_threshold,
                "must be between 0.0 and 1.0",
            )
        if self.timeout_seconds is not None and self.timeout_seconds <= 0:
            raise InvalidConfigError("timeout_seconds", self.timeout_seconds, "must be positive")
        if self.verbosity not in ("quiet", "normal", "verbose"):
            raise InvalidConfigError(
                "verbosity", self.verbosity, "expected quiet, normal or verbose"
            )

    @property
    def max_file_size_bytes(self) -> int:
        """Get max file size in bytes."""
        return int(self.max_file_size_mb * 1024 * 1024)


DEFAULT_CONFIG = AnalysisConfig()


def load_config(config_file: Optional[Path] = None, **overrides) -> AnalysisConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (``verbose``/``quiet`` map to verbosity)

    Returns:
        Validated AnalysisConfig instance

    Raises:
        ConfigurationError: If a config file is invalid or missing
    """
    merged: dict = {}

    global_config = Path.home() / ".codeshape.toml"
    if global_config.exists():
        merged.update(_load_toml_section(global_config))

    project_config = Path.cwd() / "codeshape.toml"
    if project_config.exists():
        merged.update(_load_toml_section(project_config))

    if config_file is not None:
        config_file = Path(config_file)
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        merged.update(_load_toml_section(config_file))

    merged.update(_load_env_vars())

    if "verbose" in overrides:
        if overrides["verbose"]:
            overrides["verbosity"] = "verbose"
        del overrides["verbose"]
    if "quiet" in overrides:
        if overrides["quiet"]:
            overrides["verbosity"] = "quiet"
        del overrides["quiet"]

    merged.update(overrides)

    try:
        return AnalysisConfig(**merged)
    except TypeError as e:
        # Unknown field in config
        raise ConfigurationError(f"Invalid configuration: {e}")


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from CODESHAPE_* environment variables.

    Tuple-valued fields (ignore_patterns) accept a comma-separated list.
    """
    type_hints = get_type_hints(AnalysisConfig)

    result: dict[str, Any] = {}

    for field_name in AnalysisConfig.__dataclass_fields__:
        env_key = f"CODESHAPE_{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        if type_hint is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hint)
        except ValueError as e:
            raise ConfigurationError(f"Invalid {env_key}: {e}")
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

    if origin is tuple:
        return tuple(part.strip() for part in value.split(",") if part.strip())

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

    if type_hint is str or origin is Literal:
        return value

    return None


def _load_toml_section(path: Path) -> dict:
    """Load a TOML file and return its codeshape settings.

    Both a top-level table and a ``[tool.codeshape]`` table (for
    pyproject.toml) are accepted.
    """
    try:
        data = _load_toml_file(path)
    except ConfigurationError:
        raise
    except Exception as e:
        raise ConfigurationError(f"Invalid config file '{path}': {e}")

    tool_section = data.get("tool", {}).get("codeshape")
    if isinstance(tool_section, dict):
        return dict(tool_section)
    return {k: v for k, v in data.items() if k != "tool"}


def _load_toml_file(path: Path) -> dict:
    try:
        # Python 3.11+ has tomllib in stdlib
        import tomllib
    except ModuleNotFoundError:
        try:
            import tomli as tomllib  # type: ignore
        except ImportError:
            raise ConfigurationError(
                "TOML support requires Python 3.11+ or 'tomli' package. "
                "Install with: pip install tomli"
            )

    with open(path, "rb") as f:
        return tomllib.load(f)
