"""Dependency graph construction from extracted import references."""

import posixpath
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Sequence

from ..analyzers.languages import is_source
from ..analyzers.models import ModuleRef
from ..logging_config import get_logger
from ..scanning.models import FileRecord, ProjectStructure
from .algorithms import central_modules, degree_stats, find_cycles, infer_layers
from .models import DependencyGraph, Module

logger = get_logger(__name__)

# Index files collapse into their directory's module id
_INDEX_STEMS = ("index", "__init__")

# Source roots stripped when indexing, so "com.acme.Foo" finds
# "src/main/java/com/acme/Foo"
_SOURCE_ROOTS = ("src/main/java/", "src/main/kotlin/", "src/test/java/", "src/", "lib/")

_KNOWN_EXTENSIONS = (
    ".js", ".jsx", ".mjs", ".cjs", ".ts", ".tsx", ".py", ".rb", ".go",
    ".java", ".kt", ".swift", ".cs",
)


def select_graph_files(
    files: Iterable[FileRecord], max_files: int = 200
) -> tuple[list[FileRecord], int]:
    """Pick the source files parsed into the graph.

    Files whose name contains ``index`` come first, then ``main``, then
    files under ``src/``, then path order. At most ``max_files`` are kept.

    Returns:
        (selected files, number of source files dropped)
    """
    sources = [f for f in files if is_source(f.type)]

    def priority(f: FileRecord) -> tuple:
        name = f.name.lower()
        in_src = f.relative_path.startswith("src/") or "/src/" in f.relative_path
        return ("index" not in name, "main" not in name, not in_src, f.relative_path)

    sources.sort(key=priority)
    return sources[:max_files], max(len(sources) - max_files, 0)


def module_id_for(relative_path: str) -> str:
    """Relative path without extension; ``/index`` and ``/__init__`` removed."""
    stem, ext = posixpath.splitext(relative_path)
    module_id = stem if ext else relative_path
    for index_stem in _INDEX_STEMS:
        suffix = "/" + index_stem
        if module_id.endswith(suffix):
            return module_id[: -len(suffix)]
    return module_id


class _Resolver:
    """Maps import specifiers to project module ids."""

    def __init__(self, selected: Sequence[FileRecord]):
        self.ids: dict[str, str] = {}  # relative path -> module id
        self.path_keys: dict[str, str] = {}  # extension-less path -> module id
        self.index: dict[str, str] = {}  # lookup key -> module id

        for f in selected:
            module_id = module_id_for(f.relative_path)
            self.ids[f.relative_path] = module_id
            stem, _ = posixpath.splitext(f.relative_path)
            self.path_keys.setdefault(stem, module_id)
            self.path_keys.setdefault(module_id, module_id)

        for module_id in sorted(set(self.ids.values())):
            self.index.setdefault(module_id, module_id)
            for root in _SOURCE_ROOTS:
                if module_id.startswith(root) and len(module_id) > len(root):
                    self.index.setdefault(module_id[len(root) :], module_id)

    def resolve(self, ref: ModuleRef, source_path: str) -> Optional[str]:
        spec = ref.specifier.strip()
        if not spec:
            return None
        if spec.startswith("./") or spec.startswith("../") or spec in (".", ".."):
            return self._resolve_path(spec, source_path)
        if spec.startswith("."):
            return self._resolve_dotted_relative(spec, source_path)
        return self._resolve_absolute(spec)

    def _resolve_path(self, spec: str, source_path: str) -> Optional[str]:
        joined = posixpath.normpath(posixpath.join(posixpath.dirname(source_path), spec))
        if joined.startswith(".."):
            return None
        return self._lookup_path(joined)

    def _resolve_dotted_relative(self, spec: str, source_path: str) -> Optional[str]:
        """Python relative import: one package up per extra dot."""
        dots = len(spec) - len(spec.lstrip("."))
        remainder = spec[dots:]
        base = posixpath.dirname(source_path)
        for _ in range(dots - 1):
            if not base:
                return None
            base = posixpath.dirname(base)
        target = posixpath.join(base, remainder.replace(".", "/")) if remainder else base
        return self._lookup_path(target) if target else None

    def _lookup_path(self, path: str) -> Optional[str]:
        for ext in _KNOWN_EXTENSIONS:
            if path.endswith(ext):
                path = path[: -len(ext)]
                break
        return self.path_keys.get(path)

    def _resolve_absolute(self, spec: str) -> Optional[str]:
        if spec.endswith(".*"):
            spec = spec[:-2]
        if "/" in spec:
            parts = [p for p in spec.split("/") if p]
        else:
            parts = spec.split(".")
        key = "/".join(parts)

        if key in self.index:
            return self.index[key]
        if spec in self.index:
            return self.index[spec]

        # Progressively shorter suffixes, keeping at least two segments
        for i in range(1, len(parts) - 1):
            suffix = "/".join(parts[i:])
            if suffix in self.index:
                return self.index[suffix]
        return None


def build_dependency_graph(
    structure: ProjectStructure,
    extracted_imports: Mapping[str, Sequence[ModuleRef]],
    max_files: int = 200,
    layer_conformance_threshold: float = 0.8,
) -> DependencyGraph:
    """Build the module dependency graph.

    Args:
        structure: Scanned project
        extracted_imports: Relative path -> import references of that file
        max_files: Cap on the number of source files turned into modules
        layer_conformance_threshold: Minimum conformance for layers

    Returns:
        DependencyGraph with cycles, layers and degree statistics filled in
    """
    selected, dropped = select_graph_files(structure.files, max_files)
    if dropped:
        logger.warning(
            f"Dependency graph limited to {max_files} files; {dropped} source files not parsed"
        )

    resolver = _Resolver(selected)
    imports_of: dict[str, list[str]] = {}
    file_of: dict[str, str] = {}
    externals: set[str] = set()

    for f in sorted(selected, key=lambda f: f.relative_path):
        module_id = resolver.ids[f.relative_path]
        file_of.setdefault(module_id, f.relative_path)
        targets = imports_of.setdefault(module_id, [])

        for ref in extracted_imports.get(f.relative_path, ()):
            resolved = resolver.resolve(ref, f.relative_path)
            if resolved is None:
                target = ref.specifier.strip()
                if not target:
                    continue
                externals.add(target)
            else:
                target = resolved
            if target != module_id and target not in targets:
                targets.append(target)

    # An unresolved specifier never shadows a project module
    externals -= set(imports_of)

    imported_by: dict[str, list[str]] = {node: [] for node in (*imports_of, *externals)}
    for source in sorted(imports_of):
        for target in imports_of[source]:
            imported_by[target].append(source)

    nodes: dict[str, Module] = {}
    for node in sorted(imported_by):
        is_external = node in externals
        nodes[node] = Module(
            id=node,
            file_path=None if is_external else file_of[node],
            imports=() if is_external else tuple(sorted(imports_of[node])),
            imported_by=tuple(sorted(imported_by[node])),
            external=is_external,
        )

    adjacency = {node: list(m.imports) for node, m in nodes.items()}
    internal = {
        node: [t for t in m.imports if not nodes[t].external]
        for node, m in nodes.items()
        if not m.external
    }
    internal_ids = sorted(internal)

    in_degree, out_degree = degree_stats(adjacency, sorted(nodes))
    cycles = find_cycles(internal)
    layering = infer_layers(internal, threshold=layer_conformance_threshold)

    graph = DependencyGraph(
        nodes=MappingProxyType(nodes),
        module_count=len(internal_ids),
        edge_count=sum(len(targets) for targets in adjacency.values()),
        cycles=cycles,
        layers=layering.layers,
        truncated=dropped > 0,
        skipped_files=dropped,
        layer_conformance=layering.conformance,
        in_degree=MappingProxyType(in_degree),
        out_degree=MappingProxyType(out_degree),
        central_modules=central_modules(internal_ids, in_degree, out_degree),
    )
    logger.debug(
        f"Graph: {graph.module_count} modules, {graph.edge_count} edges, "
        f"{len(cycles)} cycles, {len(layering.layers)} layers"
    )
    return graph
