"""Tests for dependency graph construction and import resolution."""

import posixpath

from codeshape.analyzers import ImportKind, ModuleRef
from codeshape.graph import build_dependency_graph, module_id_for, select_graph_files
from codeshape.scanning import FileRecord, ProjectStructure, classify_file_type


def make_structure(*paths: str) -> ProjectStructure:
    files = []
    for rel in paths:
        name = posixpath.basename(rel)
        ext = posixpath.splitext(name)[1]
        files.append(
            FileRecord(
                path="/repo/" + rel,
                relative_path=rel,
                name=name,
                extension=ext[1:],
                size=0,
                type=classify_file_type(name),
                modified_time=0.0,
                parent_path=posixpath.dirname("/repo/" + rel),
            )
        )
    return ProjectStructure(root="/repo", files=tuple(files))


def refs(*specs: str) -> list[ModuleRef]:
    return [
        ModuleRef(s, ImportKind.RELATIVE if s.startswith(".") else ImportKind.ABSOLUTE)
        for s in specs
    ]


class TestModuleIds:
    def test_extension_dropped(self):
        assert module_id_for("src/utils/format.js") == "src/utils/format"

    def test_index_collapses_to_directory(self):
        assert module_id_for("src/components/index.tsx") == "src/components"
        assert module_id_for("pkg/__init__.py") == "pkg"

    def test_extensionless(self):
        assert module_id_for("bin/run") == "bin/run"


class TestCycles:
    def test_three_module_cycle(self):
        structure = make_structure("src/a.js", "src/b.js", "src/c.js")
        graph = build_dependency_graph(
            structure,
            {"src/a.js": refs("./b"), "src/b.js": refs("./c"), "src/c.js": refs("./a")},
        )

        assert graph.cycles == (("src/a", "src/b", "src/c"),)
        assert graph.has_cycles
        assert graph.module_count == 3
        assert graph.edge_count == 3
        assert graph.layers == ()

    def test_acyclic_graph(self):
        structure = make_structure("a.js", "b.js")
        graph = build_dependency_graph(structure, {"a.js": refs("./b")})
        assert graph.cycles == ()
        assert not graph.has_cycles


class TestResolution:
    def test_external_packages_are_leaf_nodes(self):
        structure = make_structure("src/app.js")
        graph = build_dependency_graph(structure, {"src/app.js": refs("react", "lodash/merge")})

        assert graph.internal_ids == ("src/app",)
        assert graph.external_ids == ("lodash/merge", "react")
        assert graph.nodes["react"].external
        assert graph.nodes["react"].imports == ()
        assert graph.nodes["react"].imported_by == ("src/app",)
        assert graph.module_count == 1
        assert graph.edge_count == 2

    def test_index_file_resolution(self):
        structure = make_structure("src/app.js", "src/components/index.js")
        graph = build_dependency_graph(structure, {"src/app.js": refs("./components")})
        assert graph.nodes["src/app"].imports == ("src/components",)

    def test_parent_relative_with_extension(self):
        structure = make_structure("src/views/home.ts", "src/api/client.ts")
        graph = build_dependency_graph(structure, {"src/views/home.ts": refs("../api/client.ts")})
        assert graph.nodes["src/views/home"].imports == ("src/api/client",)

    def test_python_relative_imports(self):
        structure = make_structure(
            "pkg/__init__.py", "pkg/models.py", "pkg/services/__init__.py", "pkg/services/user.py"
        )
        graph = build_dependency_graph(
            structure,
            {"pkg/services/user.py": refs("..models", ".", "..")},
        )
        assert graph.nodes["pkg/services/user"].imports == ("pkg", "pkg/models", "pkg/services")

    def test_python_absolute_import(self):
        structure = make_structure("app/main.py", "app/db/session.py")
        graph = build_dependency_graph(structure, {"app/main.py": refs("app.db.session", "os")})
        assert graph.nodes["app/main"].imports == ("app/db/session", "os")
        assert graph.nodes["os"].external

    def test_java_package_import_under_source_root(self):
        structure = make_structure(
            "src/main/java/com/example/App.java",
            "src/main/java/com/example/service/UserService.java",
        )
        graph = build_dependency_graph(
            structure,
            {"src/main/java/com/example/App.java": refs("com.example.service.UserService")},
        )
        assert graph.nodes["src/main/java/com/example/App"].imports == (
            "src/main/java/com/example/service/UserService",
        )

    def test_self_imports_and_duplicates_dropped(self):
        structure = make_structure("a.js", "b.js")
        graph = build_dependency_graph(structure, {"a.js": refs("./a", "./b", "./b.js")})
        assert graph.nodes["a"].imports == ("b",)
        assert graph.edge_count == 1

    def test_escape_above_root_is_external(self):
        structure = make_structure("a.js")
        graph = build_dependency_graph(structure, {"a.js": refs("../outside")})
        assert graph.external_ids == ("../outside",)

    def test_non_source_files_are_not_modules(self):
        structure = make_structure("a.js", "README.md", "styles.css")
        graph = build_dependency_graph(structure, {})
        assert graph.internal_ids == ("a",)
        assert graph.edge_count == 0


class TestDegrees:
    def test_central_modules_ranked_by_weighted_degree(self):
        structure = make_structure("a.js", "b.js", "c.js", "util.js")
        graph = build_dependency_graph(
            structure,
            {"a.js": refs("./util", "./b"), "b.js": refs("./util"), "c.js": refs("./util")},
        )

        assert graph.in_degree["util"] == 3
        assert graph.out_degree["a"] == 2
        central = graph.central_modules
        assert central[0].id == "util"
        assert central[0].score == 6
        assert [c.id for c in central] == ["util", "b", "a", "c"]


class TestSelection:
    def test_priority_order(self):
        structure = make_structure("zeta.js", "lib/main.py", "src/other.js", "app/index.js", "a.js")
        selected, dropped = select_graph_files(structure.files, max_files=10)
        assert [f.relative_path for f in selected] == [
            "app/index.js",
            "lib/main.py",
            "src/other.js",
            "a.js",
            "zeta.js",
        ]
        assert dropped == 0

    def test_truncation_recorded(self):
        structure = make_structure("a.js", "b.js", "c.js")
        graph = build_dependency_graph(structure, {"c.js": refs("./a")}, max_files=2)

        assert graph.truncated
        assert graph.skipped_files == 1
        assert graph.internal_ids == ("a", "b")
