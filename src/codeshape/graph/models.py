"""Data models for the module dependency graph.

Edges are directed: ``Module.imports`` of A containing B means A depends
on B. External packages are leaf nodes; they never import anything.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

# ── Nodes ──────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Module:
    """One graph node: a project module or an external package."""

    id: str
    file_path: Optional[str] = None  # relative path; None for externals
    imports: tuple[str, ...] = ()
    imported_by: tuple[str, ...] = ()
    external: bool = False


# ── Derived structures ─────────────────────────────────────────────


@dataclass(frozen=True)
class Layer:
    """A band of modules; higher levels depend on lower ones."""

    name: str
    modules: tuple[str, ...]
    level: int = 0


@dataclass(frozen=True)
class CentralModule:
    """A highly connected internal module (score = 2 * in + out)."""

    id: str
    in_degree: int
    out_degree: int
    score: int


def _empty_mapping():
    return MappingProxyType({})


@dataclass(frozen=True)
class DependencyGraph:
    """Immutable dependency graph plus the structures derived from it.

    ``module_count`` counts project modules; ``edge_count`` counts every
    import edge, external targets included.
    """

    nodes: Mapping[str, Module] = field(default_factory=_empty_mapping)
    module_count: int = 0
    edge_count: int = 0
    cycles: tuple[tuple[str, ...], ...] = ()
    layers: tuple[Layer, ...] = ()

    truncated: bool = False
    skipped_files: int = 0
    layer_conformance: float = 0.0

    in_degree: Mapping[str, int] = field(default_factory=_empty_mapping)
    out_degree: Mapping[str, int] = field(default_factory=_empty_mapping)
    central_modules: tuple[CentralModule, ...] = ()

    @property
    def internal_ids(self) -> tuple[str, ...]:
        return tuple(sorted(m.id for m in self.nodes.values() if not m.external))

    @property
    def external_ids(self) -> tuple[str, ...]:
        return tuple(sorted(m.id for m in self.nodes.values() if m.external))

    @property
    def has_cycles(self) -> bool:
        return bool(self.cycles)

    @property
    def layer_count(self) -> int:
        return len(self.layers)

    def internal_adjacency(self) -> dict[str, list[str]]:
        """Adjacency restricted to project modules."""
        return {
            m.id: [t for t in m.imports if not self.nodes[t].external]
            for m in self.nodes.values()
            if not m.external
        }
