"""Dependency-graph scorers."""

import re
from typing import Optional

from ..graph.models import CentralModule, DependencyGraph
from .models import (
    EVENT_DRIVEN,
    HEXAGONAL,
    LAYERED,
    MVC,
    MVVM,
    SOURCE_DEPENDENCY,
    ArchitecturalPatternResult,
)

_WORD = re.compile(r"[A-Z]?[a-z]+|[A-Z]+(?![a-z])|\d+")

# (pattern, confidence, required role groups); every group needs a hit
_ROLE_HINTS: tuple[tuple[str, int, tuple[frozenset[str], ...]], ...] = (
    (MVC, 85, (frozenset({"controller", "controllers"}), frozenset({"service", "services"}))),
    (MVVM, 85, (frozenset({"viewmodel", "viewmodels", "vm"}),)),
    (EVENT_DRIVEN, 80, (frozenset({"event", "events", "handler", "handlers", "listener", "listeners"}),)),
    (HEXAGONAL, 80, (frozenset({"port", "ports", "adapter", "adapters"}),)),
)


def score_graph_layers(graph: DependencyGraph) -> Optional[ArchitecturalPatternResult]:
    """Layered Architecture from inferred layers: 60 + 10 per layer, capped at 90."""
    count = graph.layer_count
    if count < 2:
        return None
    return ArchitecturalPatternResult(
        name=LAYERED,
        confidence=min(60 + 10 * count, 90),
        evidence=(
            f"Found {count} distinct dependency layers "
            f"({graph.layer_conformance:.0%} of edges point downward)",
        ),
        sources=(SOURCE_DEPENDENCY,),
    )


def module_words(module_id: str) -> set[str]:
    """Lower-cased words of every path segment, split on case and separators.

    ``src/UserViewModel`` gives {"src", "user", "view", "model", "viewmodel"}.
    """
    words: set[str] = set()
    for segment in module_id.split("/"):
        parts = [w.lower() for w in _WORD.findall(segment)]
        words.update(parts)
        # Adjacent pairs catch compounds such as ViewModel / view_model
        words.update(a + b for a, b in zip(parts, parts[1:]))
    return words


def score_central_roles(
    central: tuple[CentralModule, ...],
) -> list[ArchitecturalPatternResult]:
    """Hints from the names of the most connected modules."""
    if not central:
        return []

    words_by_module = {c.id: module_words(c.id) for c in central}
    results = []
    for name, confidence, groups in _ROLE_HINTS:
        hits: list[str] = []
        for group in groups:
            matching = [m for m, words in words_by_module.items() if words & group]
            if not matching:
                break
            hits.extend(matching)
        else:
            shown = ", ".join(sorted(set(hits))[:3])
            results.append(
                ArchitecturalPatternResult(
                    name=name,
                    confidence=confidence,
                    evidence=(f"Central modules suggest {name}: {shown}",),
                    sources=(SOURCE_DEPENDENCY,),
                )
            )
    return results
