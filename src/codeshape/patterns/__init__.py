"""Architectural pattern detection."""

from .detector import (
    PatternDetection,
    detect_patterns,
    graph_patterns,
    heuristic_patterns,
    reconcile,
    run_scorer,
)
from .graph_scorers import score_central_roles, score_graph_layers
from .heuristics import HEURISTIC_SCORERS, NameView
from .models import (
    CIRCULAR_DEPENDENCIES,
    EVENT_DRIVEN,
    FEATURE_BASED,
    HEXAGONAL,
    LAYERED,
    MICROSERVICES,
    MVC,
    MVVM,
    PATTERN_NAMES,
    SOURCE_DEPENDENCY,
    SOURCE_DIRECTORY,
    ArchitecturalPatternResult,
)

__all__ = [
    "ArchitecturalPatternResult",
    "PatternDetection",
    "detect_patterns",
    "heuristic_patterns",
    "graph_patterns",
    "reconcile",
    "run_scorer",
    "score_graph_layers",
    "score_central_roles",
    "HEURISTIC_SCORERS",
    "NameView",
    "PATTERN_NAMES",
    "MVC",
    "MVVM",
    "LAYERED",
    "MICROSERVICES",
    "FEATURE_BASED",
    "HEXAGONAL",
    "EVENT_DRIVEN",
    "SOURCE_DIRECTORY",
    "SOURCE_DEPENDENCY",
    "CIRCULAR_DEPENDENCIES",
]
