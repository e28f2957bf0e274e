"""Exception hierarchy for codeshape."""

from .analysis import (
    AnalysisCancelledError,
    AnalysisError,
    FatalIOError,
    FileSkipError,
    NotFoundError,
    ScorerError,
)
from .base import CodeshapeError
from .config import ConfigurationError, InvalidConfigError

__all__ = [
    "CodeshapeError",
    "AnalysisError",
    "FatalIOError",
    "NotFoundError",
    "FileSkipError",
    "ScorerError",
    "AnalysisCancelledError",
    "ConfigurationError",
    "InvalidConfigError",
]
