"""Module dependency graph: construction, cycles, layers."""

from .algorithms import (
    ENTRY_LAYER,
    FOUNDATION_LAYER,
    INTERMEDIATE_LAYER,
    LayerResult,
    central_modules,
    degree_stats,
    find_cycles,
    infer_layers,
    tarjan_scc,
)
from .builder import build_dependency_graph, module_id_for, select_graph_files
from .models import CentralModule, DependencyGraph, Layer, Module

__all__ = [
    "build_dependency_graph",
    "select_graph_files",
    "module_id_for",
    "tarjan_scc",
    "find_cycles",
    "infer_layers",
    "degree_stats",
    "central_modules",
    "LayerResult",
    "FOUNDATION_LAYER",
    "INTERMEDIATE_LAYER",
    "ENTRY_LAYER",
    "DependencyGraph",
    "Module",
    "Layer",
    "CentralModule",
]
