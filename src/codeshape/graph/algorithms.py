"""Graph algorithms: SCC, cycles, layer inference, centrality."""

from collections import defaultdict
from dataclasses import dataclass
from typing import Callable, Optional

from .models import CentralModule, Layer

FOUNDATION_LAYER = "Infrastructure/Utility Layer"
INTERMEDIATE_LAYER = "Intermediate Layer"
ENTRY_LAYER = "Entry Points/UI Layer"

CENTRAL_MODULE_LIMIT = 10


def tarjan_scc(adjacency: dict[str, list[str]], all_nodes: list[str]) -> list[set[str]]:
    """Tarjan's algorithm for strongly connected components (iterative).

    Uses an explicit call stack to avoid Python recursion limits on deep
    dependency chains. Components come out in reverse topological order:
    a component is emitted only after everything it depends on.
    """
    node_set = set(all_nodes)
    counter = 0
    scc_stack: list[str] = []
    on_stack: set[str] = set()
    index: dict[str, int] = {}
    lowlink: dict[str, int] = {}
    result: list[set[str]] = []

    for root in all_nodes:
        if root in index:
            continue

        # Explicit call stack: each frame is (node, neighbor_iterator)
        call_stack: list[tuple] = []
        index[root] = lowlink[root] = counter
        counter += 1
        scc_stack.append(root)
        on_stack.add(root)
        neighbors = [w for w in adjacency.get(root, []) if w in node_set]
        call_stack.append((root, iter(neighbors)))

        while call_stack:
            v, it = call_stack[-1]
            pushed = False
            for w in it:
                if w not in index:
                    index[w] = lowlink[w] = counter
                    counter += 1
                    scc_stack.append(w)
                    on_stack.add(w)
                    w_neighbors = [n for n in adjacency.get(w, []) if n in node_set]
                    call_stack.append((w, iter(w_neighbors)))
                    pushed = True
                    break
                elif w in on_stack:
                    lowlink[v] = min(lowlink[v], index[w])

            if not pushed:
                call_stack.pop()
                if call_stack:
                    caller = call_stack[-1][0]
                    lowlink[caller] = min(lowlink[caller], lowlink[v])

                if lowlink[v] == index[v]:
                    component: set[str] = set()
                    while True:
                        w = scc_stack.pop()
                        on_stack.discard(w)
                        component.add(w)
                        if w == v:
                            break
                    result.append(component)

    return result


def find_cycles(adjacency: dict[str, list[str]]) -> tuple[tuple[str, ...], ...]:
    """Every SCC with more than one node, members sorted, cycles sorted."""
    nodes = sorted(adjacency)
    cycles = [tuple(sorted(scc)) for scc in tarjan_scc(adjacency, nodes) if len(scc) > 1]
    return tuple(sorted(cycles))


def degree_stats(
    adjacency: dict[str, list[str]], all_nodes: list[str]
) -> tuple[dict[str, int], dict[str, int]]:
    """In- and out-degree for every node."""
    in_degree = dict.fromkeys(all_nodes, 0)
    out_degree = dict.fromkeys(all_nodes, 0)
    for source, targets in adjacency.items():
        out_degree[source] = len(targets)
        for target in targets:
            in_degree[target] = in_degree.get(target, 0) + 1
    return in_degree, out_degree


def central_modules(
    internal_ids: list[str],
    in_degree: dict[str, int],
    out_degree: dict[str, int],
    limit: int = CENTRAL_MODULE_LIMIT,
) -> tuple[CentralModule, ...]:
    """Top internal modules by ``2 * in + out``; zero scores are dropped."""
    scored = []
    for node in internal_ids:
        score = 2 * in_degree.get(node, 0) + out_degree.get(node, 0)
        if score > 0:
            scored.append(CentralModule(node, in_degree.get(node, 0), out_degree.get(node, 0), score))
    scored.sort(key=lambda c: (-c.score, c.id))
    return tuple(scored[:limit])


# ── Layer inference ────────────────────────────────────────────────


@dataclass(frozen=True)
class LayerResult:
    """Outcome of layer inference, before or after the threshold check."""

    layers: tuple[Layer, ...]
    conformance: float
    strategy: Optional[str] = None


def infer_layers(
    adjacency: dict[str, list[str]],
    threshold: float = 0.8,
) -> LayerResult:
    """Infer a layering of internal modules.

    Three candidate partitions are scored: sink-anchored longest path over
    the SCC condensation, source-anchored longest path, and a partition
    that groups modules by top-level directory. Conformance is the share
    of edges that point from a higher layer to a lower one. The best
    candidate wins; ties go to the one whose layers mix fewer directory
    depths, then to candidate order.

    Args:
        adjacency: Internal module adjacency (A -> modules A imports)
        threshold: Minimum conformance for the layering to be reported

    Returns:
        LayerResult; ``layers`` is empty when fewer than two layers survive
        or conformance falls below ``threshold``
    """
    nodes = sorted(adjacency)
    edges = [(s, t) for s in nodes for t in sorted(set(adjacency[s])) if t in adjacency and t != s]
    if not nodes or not edges:
        return LayerResult(layers=(), conformance=0.0)

    strategies: list[tuple[str, Callable[[list[str], dict[str, list[str]]], dict[str, int]]]] = [
        ("sink-anchored", _sink_anchored_levels),
        ("source-anchored", _source_anchored_levels),
        ("directory-grouped", _directory_grouped_levels),
    ]

    best = None
    for order, (name, strategy) in enumerate(strategies):
        levels = strategy(nodes, adjacency)
        conformant = sum(1 for s, t in edges if levels[s] > levels[t])
        coherence = _depth_mixing(levels)
        key = (-conformant, coherence, order)
        if best is None or key < best[0]:
            best = (key, name, levels, conformant)

    _, name, levels, conformant = best
    conformance = round(conformant / len(edges), 4)
    layers = _build_layers(levels, adjacency)

    if len(layers) < 2 or conformance < threshold:
        return LayerResult(layers=(), conformance=conformance, strategy=name)
    return LayerResult(layers=layers, conformance=conformance, strategy=name)


def _condense(
    nodes: list[str], adjacency: dict[str, list[str]]
) -> tuple[dict[str, int], dict[int, set[int]], int]:
    """Map nodes to SCC ids and build the acyclic component graph."""
    sccs = tarjan_scc(adjacency, nodes)
    component_of: dict[str, int] = {}
    for cid, scc in enumerate(sccs):
        for node in scc:
            component_of[node] = cid

    successors: dict[int, set[int]] = defaultdict(set)
    for source in nodes:
        for target in adjacency.get(source, []):
            if target in component_of and component_of[target] != component_of[source]:
                successors[component_of[source]].add(component_of[target])
    return component_of, successors, len(sccs)


def _sink_anchored_levels(nodes: list[str], adjacency: dict[str, list[str]]) -> dict[str, int]:
    """Level 0 = modules importing nothing internal; importers sit above."""
    component_of, successors, count = _condense(nodes, adjacency)

    # Tarjan emits dependencies first, so one forward pass suffices
    level = [0] * count
    for cid in range(count):
        deps = successors.get(cid, ())
        if deps:
            level[cid] = 1 + max(level[d] for d in deps)
    return {node: level[component_of[node]] for node in nodes}


def _source_anchored_levels(nodes: list[str], adjacency: dict[str, list[str]]) -> dict[str, int]:
    """Entry points (nothing imports them) on top; depth grows downward."""
    component_of, successors, count = _condense(nodes, adjacency)

    depth = [0] * count
    # Reverse Tarjan order visits importers before their dependencies
    for cid in range(count - 1, -1, -1):
        for succ in successors.get(cid, ()):
            depth[succ] = max(depth[succ], depth[cid] + 1)
    top = max(depth) if depth else 0
    return {node: top - depth[component_of[node]] for node in nodes}


def _directory_grouped_levels(nodes: list[str], adjacency: dict[str, list[str]]) -> dict[str, int]:
    """Whole top-level directories share a level."""
    group_of = {node: _top_directory(node) for node in nodes}
    groups = sorted(set(group_of.values()))

    group_adjacency: dict[str, list[str]] = {g: [] for g in groups}
    for source in nodes:
        for target in adjacency.get(source, []):
            if target in group_of and group_of[target] != group_of[source]:
                group_adjacency[group_of[source]].append(group_of[target])

    group_levels = _sink_anchored_levels(groups, group_adjacency)
    return {node: group_levels[group_of[node]] for node in nodes}


def _top_directory(module_id: str) -> str:
    head, sep, _ = module_id.partition("/")
    return head if sep else "."


def _depth_mixing(levels: dict[str, int]) -> int:
    """Sum over layers of the number of distinct directory depths."""
    depths: dict[int, set[int]] = defaultdict(set)
    for node, level in levels.items():
        depths[level].add(node.count("/"))
    return sum(len(d) for d in depths.values())


def _build_layers(levels: dict[str, int], adjacency: dict[str, list[str]]) -> tuple[Layer, ...]:
    by_level: dict[int, list[str]] = defaultdict(list)
    for node, level in levels.items():
        by_level[level].append(node)

    imported: set[str] = {t for targets in adjacency.values() for t in targets if t in adjacency}

    layers = []
    for index, level in enumerate(sorted(by_level)):
        members = tuple(sorted(by_level[level]))
        if index == 0:
            name = FOUNDATION_LAYER
        elif all(m not in imported for m in members):
            name = ENTRY_LAYER
        else:
            name = INTERMEDIATE_LAYER
        layers.append(Layer(name=name, modules=members, level=index))
    return tuple(layers)
