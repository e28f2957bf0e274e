"""Architectural pattern detection and reconciliation.

Heuristic scorers read the directory structure; graph scorers read the
dependency graph. Every result is tagged with its source, then results
sharing a name are merged into one entry.
"""

from collections import OrderedDict
from dataclasses import dataclass
from typing import Callable, Iterable, Optional, TypeVar

from ..exceptions import ScorerError
from ..graph.models import DependencyGraph
from ..logging_config import get_logger
from ..scanning.models import ProjectStructure
from .graph_scorers import score_central_roles, score_graph_layers
from .heuristics import HEURISTIC_SCORERS, NameView
from .models import (
    CIRCULAR_DEPENDENCIES,
    SOURCE_DIRECTORY,
    ArchitecturalPatternResult,
    clamp_confidence,
)

logger = get_logger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class PatternDetection:
    """Reconciled architectural patterns plus graph-derived code patterns."""

    patterns: tuple[ArchitecturalPatternResult, ...] = ()
    code_patterns: tuple[str, ...] = ()


def run_scorer(name: str, scorer: Callable[[], T]) -> Optional[T]:
    """Call one scorer; a failure is logged and yields None."""
    try:
        return scorer()
    except Exception as e:
        error = ScorerError(name, f"{type(e).__name__}: {e}")
        logger.warning(str(error))
        return None


def heuristic_patterns(
    structure: ProjectStructure, report_threshold: int = 60
) -> list[ArchitecturalPatternResult]:
    """Directory-structure results whose score exceeds ``report_threshold``."""
    view = NameView.of(structure)
    results = []
    for name, scorer in HEURISTIC_SCORERS:
        outcome = run_scorer(name, lambda: scorer(view))
        if outcome is None:
            continue
        score, evidence = outcome
        if score > report_threshold:
            results.append(
                ArchitecturalPatternResult(
                    name=name,
                    confidence=score,
                    evidence=tuple(evidence),
                    sources=(SOURCE_DIRECTORY,),
                )
            )
    return results


def graph_patterns(graph: DependencyGraph) -> list[ArchitecturalPatternResult]:
    results = []
    layered = run_scorer("graph-layers", lambda: score_graph_layers(graph))
    if layered is not None:
        results.append(layered)
    roles = run_scorer("central-modules", lambda: score_central_roles(graph.central_modules))
    if roles:
        results.extend(roles)
    return results


def reconcile(
    results: Iterable[ArchitecturalPatternResult], merge_boost: int = 10
) -> tuple[ArchitecturalPatternResult, ...]:
    """Merge results that share a name.

    A group of one passes through unchanged. A larger group becomes one
    entry with ``min(max confidence + merge_boost, 100)``, concatenated
    evidence, sources unioned in first-seen order and ``detection_count``
    set to the group size. Output is sorted by confidence (descending),
    then name.
    """
    groups: "OrderedDict[str, list[ArchitecturalPatternResult]]" = OrderedDict()
    for result in results:
        groups.setdefault(result.name, []).append(result)

    merged = []
    for name, group in groups.items():
        if len(group) == 1:
            merged.append(group[0])
            continue

        sources: list[str] = []
        for result in group:
            for source in result.sources:
                if source not in sources:
                    sources.append(source)
        merged.append(
            ArchitecturalPatternResult(
                name=name,
                confidence=clamp_confidence(max(r.confidence for r in group) + merge_boost),
                evidence=tuple(e for r in group for e in r.evidence),
                sources=tuple(sources),
                detection_count=len(group),
            )
        )

    merged.sort(key=lambda r: (-r.confidence, r.name))
    return tuple(merged)


def detect_patterns(
    structure: ProjectStructure,
    graph: DependencyGraph,
    report_threshold: int = 60,
    merge_boost: int = 10,
) -> PatternDetection:
    """Run every scorer and reconcile the results."""
    results = heuristic_patterns(structure, report_threshold)
    results.extend(graph_patterns(graph))

    code_patterns = (CIRCULAR_DEPENDENCIES,) if graph.has_cycles else ()
    patterns = reconcile(results, merge_boost)

    if patterns:
        top = patterns[0]
        logger.info(f"Detected architectural pattern: {top.name} ({top.confidence}% confidence)")
    return PatternDetection(patterns=patterns, code_patterns=code_patterns)
