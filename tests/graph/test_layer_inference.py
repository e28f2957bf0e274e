"""Tests for SCC, cycle and layer algorithms."""

import pytest

from codeshape.graph import (
    ENTRY_LAYER,
    FOUNDATION_LAYER,
    INTERMEDIATE_LAYER,
    degree_stats,
    find_cycles,
    infer_layers,
    tarjan_scc,
)


class TestTarjan:
    def test_single_cycle(self):
        adjacency = {"a": ["b"], "b": ["c"], "c": ["a"]}
        assert tarjan_scc(adjacency, ["a", "b", "c"]) == [{"a", "b", "c"}]

    def test_dependencies_emitted_first(self):
        adjacency = {"app": ["lib"], "lib": ["core"], "core": []}
        sccs = tarjan_scc(adjacency, ["app", "core", "lib"])
        assert sccs == [{"core"}, {"lib"}, {"app"}]

    def test_unknown_targets_ignored(self):
        adjacency = {"a": ["missing"]}
        assert tarjan_scc(adjacency, ["a"]) == [{"a"}]

    @pytest.mark.slow
    def test_deep_chain_does_not_recurse(self):
        n = 20000
        adjacency = {f"m{i}": [f"m{i + 1}"] for i in range(n)}
        adjacency[f"m{n}"] = []
        sccs = tarjan_scc(adjacency, sorted(adjacency))
        assert len(sccs) == n + 1


class TestFindCycles:
    def test_multiple_cycles_sorted(self):
        adjacency = {
            "x": ["y"],
            "y": ["x"],
            "a": ["b"],
            "b": ["c"],
            "c": ["a"],
            "solo": ["a"],
        }
        assert find_cycles(adjacency) == (("a", "b", "c"), ("x", "y"))

    def test_self_loop_is_not_a_cycle(self):
        assert find_cycles({"a": ["a"]}) == ()


class TestDegreeStats:
    def test_counts(self):
        in_degree, out_degree = degree_stats({"a": ["b", "c"], "b": ["c"], "c": []}, ["a", "b", "c"])
        assert in_degree == {"a": 0, "b": 1, "c": 2}
        assert out_degree == {"a": 2, "b": 1, "c": 0}


class TestInferLayers:
    def test_three_layer_stack(self):
        adjacency = {
            "ui/app": ["services/user", "utils/format"],
            "services/user": ["utils/format"],
            "utils/format": [],
        }
        result = infer_layers(adjacency)

        assert result.conformance == 1.0
        assert [layer.name for layer in result.layers] == [
            FOUNDATION_LAYER,
            INTERMEDIATE_LAYER,
            ENTRY_LAYER,
        ]
        assert [layer.modules for layer in result.layers] == [
            ("utils/format",),
            ("services/user",),
            ("ui/app",),
        ]
        assert [layer.level for layer in result.layers] == [0, 1, 2]

    def test_no_edges_gives_no_layers(self):
        result = infer_layers({"a": [], "b": []})
        assert result.layers == ()
        assert result.conformance == 0.0

    def test_cycle_only_graph_has_no_layers(self):
        result = infer_layers({"a": ["b"], "b": ["a"]})
        assert result.layers == ()

    def test_below_threshold_is_dropped(self):
        adjacency = {
            "ui/app": ["services/user"],
            "services/user": ["utils/format"],
            "utils/format": [],
        }
        assert infer_layers(adjacency, threshold=1.0).layers != ()

        # A back edge inside a cycle lowers conformance below a strict threshold
        adjacency["utils/format"] = ["services/user"]
        result = infer_layers(adjacency, threshold=0.9)
        assert result.layers == ()
        assert result.conformance < 0.9

    def test_deterministic(self):
        adjacency = {"a/x": ["b/y"], "b/y": ["c/z"], "c/z": [], "a/w": ["c/z"]}
        assert infer_layers(adjacency) == infer_layers(adjacency)
