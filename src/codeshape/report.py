"""The AnalysisReport value handed to downstream consumers."""

import json
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

from .graph.models import DependencyGraph
from .naming.conventions import NamingCategory, NamingStat
from .patterns.models import ArchitecturalPatternResult
from .scoring import ConsistencyMetrics


@dataclass(frozen=True)
class DependencyInsights:
    module_count: int = 0
    edge_count: int = 0
    cycle_count: int = 0
    layer_count: int = 0
    truncated: bool = False

    @classmethod
    def from_graph(cls, graph: DependencyGraph) -> "DependencyInsights":
        return cls(
            module_count=graph.module_count,
            edge_count=graph.edge_count,
            cycle_count=len(graph.cycles),
            layer_count=graph.layer_count,
            truncated=graph.truncated,
        )


def _empty_naming() -> Mapping[NamingCategory, NamingStat]:
    return MappingProxyType({category: NamingStat() for category in NamingCategory})


@dataclass(frozen=True)
class AnalysisReport:
    """Structured profile of one source tree.

    Serialization is deterministic: identical inputs produce identical
    ``to_json()`` output.
    """

    naming_conventions: Mapping[NamingCategory, NamingStat] = field(default_factory=_empty_naming)
    architectural_patterns: tuple[ArchitecturalPatternResult, ...] = ()
    code_patterns: tuple[str, ...] = ()
    dependency_insights: DependencyInsights = DependencyInsights()
    consistency_metrics: ConsistencyMetrics = ConsistencyMetrics()
    root: str = ""
    files_analyzed: int = 0

    @property
    def top_pattern(self):
        return self.architectural_patterns[0] if self.architectural_patterns else None

    def to_dict(self) -> dict[str, Any]:
        naming = {}
        for category in NamingCategory:
            stat = self.naming_conventions.get(category, NamingStat())
            naming[category.value] = {
                "counts_by_convention": {
                    convention.value: count
                    for convention, count in stat.counts_by_convention.items()
                },
                "total": stat.total,
                "dominant": stat.dominant.value if stat.dominant is not None else None,
            }

        return {
            "root": self.root,
            "files_analyzed": self.files_analyzed,
            "naming_conventions": naming,
            "architectural_patterns": [
                {
                    "name": p.name,
                    "confidence": p.confidence,
                    "evidence": list(p.evidence),
                    "sources": list(p.sources),
                    "detection_count": p.detection_count,
                }
                for p in self.architectural_patterns
            ],
            "code_patterns": list(self.code_patterns),
            "dependency_insights": {
                "module_count": self.dependency_insights.module_count,
                "edge_count": self.dependency_insights.edge_count,
                "cycle_count": self.dependency_insights.cycle_count,
                "layer_count": self.dependency_insights.layer_count,
                "truncated": self.dependency_insights.truncated,
            },
            "consistency_metrics": {
                "overall": self.consistency_metrics.overall,
                "naming": self.consistency_metrics.naming,
                "architecture": self.consistency_metrics.architecture,
            },
        }

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, sort_keys=True)
