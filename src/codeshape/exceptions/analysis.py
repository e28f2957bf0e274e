"""Analysis-related exceptions: root access, per-file skips, scorer failures."""

from pathlib import Path
from typing import Optional

from .base import CodeshapeError


class AnalysisError(CodeshapeError):
    """Base class for analysis-related errors."""

    pass


class FatalIOError(AnalysisError):
    """Raised when the analysis root cannot be used. Aborts the run."""

    def __init__(self, path: Path, reason: str):
        super().__init__(
            f"Cannot analyze root: {path}",
            details={"path": str(path), "reason": reason},
        )
        self.path = path
        self.reason = reason


class NotFoundError(FatalIOError):
    """Raised when the analysis root does not exist or is not a directory."""

    pass


class FileSkipError(AnalysisError):
    """Raised when a single file cannot be read or analyzed.

    The engine catches this per file; the file is excluded from the report.
    """

    def __init__(self, filepath: Path, reason: str):
        super().__init__(
            f"Skipping file: {filepath}",
            details={"filepath": str(filepath), "reason": reason},
        )
        self.filepath = filepath
        self.reason = reason


class ScorerError(AnalysisError):
    """Raised (and absorbed) when an architectural pattern scorer fails."""

    def __init__(self, scorer: str, reason: str):
        super().__init__(
            f"Pattern scorer failed: {scorer}",
            details={"scorer": scorer, "reason": reason},
        )
        self.scorer = scorer
        self.reason = reason


class AnalysisCancelledError(AnalysisError):
    """Raised when a deadline expires or a run is cancelled."""

    def __init__(self, reason: str, stage: Optional[str] = None):
        details = {"reason": reason}
        if stage:
            details["stage"] = stage
        super().__init__("Analysis cancelled", details=details)
        self.reason = reason
        self.stage = stage
