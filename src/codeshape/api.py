"""Public API for codeshape.

Example:
    >>> from codeshape import analyze
    >>>
    >>> report = analyze("/path/to/code")
    >>> report.top_pattern.name
    'MVC'
    >>>
    >>> # With customization
    >>> report = analyze("/path/to/code", sample_size=20, verbose=True)
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional, Union

from .analysis import DetectionEngine
from .config import load_config
from .logging_config import get_logger, setup_logging
from .report import AnalysisReport
from .runtime import Deadline

logger = get_logger(__name__)


def analyze(
    path: Union[str, Path] = ".",
    config_file: Optional[Path] = None,
    ignore_patterns: Optional[Iterable[str]] = None,
    deadline: Optional[Deadline] = None,
    **overrides,
) -> AnalysisReport:
    """Analyze a source tree and return its structural profile.

    Orchestrates the full pipeline:
    1. Load configuration (auto-discover TOML + env + overrides)
    2. Scan the tree and extract facts from sampled files
    3. Build the dependency graph, profile naming, detect patterns
    4. Score consistency and assemble the report

    Args:
        path: Path to codebase root (default: current directory)
        config_file: Optional explicit config file path
        ignore_patterns: Glob patterns to exclude; ``None`` uses the
            configured patterns
        deadline: Optional cancellation token; defaults to one built from
            ``timeout_seconds``
        **overrides: Configuration overrides (e.g., verbose=True, sample_size=20)

    Returns:
        AnalysisReport

    Raises:
        ConfigurationError: If configuration is invalid
        NotFoundError: If path doesn't exist or is not a directory
        FatalIOError: If path cannot be read
        AnalysisCancelledError: If the deadline expires
    """
    config = load_config(config_file=config_file, **overrides)
    setup_logging(config.verbosity)
    logger.info(f"Starting analysis of {path}")

    report = DetectionEngine(config).detect(path, ignore_patterns, deadline=deadline)

    top = report.top_pattern
    logger.info(
        f"Analysis complete: {report.files_analyzed} files analyzed, "
        f"architecture={top.name if top else 'none'}"
    )
    return report
