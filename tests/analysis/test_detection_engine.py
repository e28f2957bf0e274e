"""End-to-end tests for the detection engine and the public API."""

import json
import os

import pytest

from codeshape import AnalysisConfig, Deadline, DetectionEngine, analyze
from codeshape.analysis import naming_sample, read_source
from codeshape.exceptions import AnalysisCancelledError, FileSkipError, NotFoundError
from codeshape.naming import NamingCategory, NamingConvention
from codeshape.patterns import (
    CIRCULAR_DEPENDENCIES,
    LAYERED,
    MVC,
    SOURCE_DEPENDENCY,
)
from codeshape.scanning import scan


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep user/project config files and CODESHAPE_* variables out of the run."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(home)
    for key in list(os.environ):
        if key.startswith("CODESHAPE_"):
            monkeypatch.delenv(key)


class TestDetectMvcProject:
    def setup_method(self):
        self.engine = DetectionEngine()

    def test_patterns(self, mvc_project):
        report = self.engine.detect(mvc_project)

        assert report.top_pattern.name == MVC
        assert report.top_pattern.confidence == 100
        layered = next(p for p in report.architectural_patterns if p.name == LAYERED)
        assert layered.sources == (SOURCE_DEPENDENCY,)
        confidences = [p.confidence for p in report.architectural_patterns]
        assert confidences == sorted(confidences, reverse=True)

    def test_dependency_insights(self, mvc_project):
        report = self.engine.detect(mvc_project)
        deps = report.dependency_insights

        assert report.files_analyzed == 5
        assert deps.module_count == 5
        assert deps.edge_count == 3
        assert deps.cycle_count == 0
        assert deps.layer_count >= 2
        assert not deps.truncated

    def test_naming(self, mvc_project):
        naming = self.engine.detect(mvc_project).naming_conventions

        assert naming[NamingCategory.DIRECTORIES].dominant == NamingConvention.LOWERCASE
        assert naming[NamingCategory.FUNCTIONS].dominant == NamingConvention.CAMEL_CASE
        assert naming[NamingCategory.VARIABLES].dominant == NamingConvention.CAMEL_CASE
        assert naming[NamingCategory.CLASSES].dominant is None
        assert naming[NamingCategory.COMPONENTS].dominant is None

    def test_consistency(self, mvc_project):
        metrics = self.engine.detect(mvc_project).consistency_metrics
        assert metrics.architecture == 100
        assert metrics.naming == 89
        assert 89 <= metrics.overall <= 100

    def test_idempotent(self, mvc_project):
        first = self.engine.detect(mvc_project).to_json()
        second = self.engine.detect(mvc_project).to_json()
        assert first == second


class TestDetectEdgeCases:
    def test_empty_directory(self, project_builder):
        report = DetectionEngine().detect(project_builder({}))

        assert report.architectural_patterns == ()
        assert report.code_patterns == ()
        assert all(stat.dominant is None for stat in report.naming_conventions.values())
        assert report.consistency_metrics.overall == 0
        assert report.files_analyzed == 0

    def test_missing_root(self, tmp_path):
        with pytest.raises(NotFoundError):
            DetectionEngine().detect(tmp_path / "nope")

    def test_cancelled(self, mvc_project):
        deadline = Deadline()
        deadline.cancel()
        with pytest.raises(AnalysisCancelledError):
            DetectionEngine().detect(mvc_project, deadline=deadline)

    def test_expired_deadline(self, mvc_project):
        ticks = iter(range(1000))
        deadline = Deadline(5, clock=lambda: next(ticks) * 10)
        with pytest.raises(AnalysisCancelledError):
            DetectionEngine().detect(mvc_project, deadline=deadline)

    def test_cycle_reported_as_code_pattern(self, project_builder):
        root = project_builder(
            {
                "a.js": "import { b } from './b';\n",
                "b.js": "import { c } from './c';\n",
                "c.js": "import { a } from './a';\n",
            }
        )
        report = DetectionEngine().detect(root)

        assert CIRCULAR_DEPENDENCIES in report.code_patterns
        assert report.dependency_insights.cycle_count == 1

    def test_oversized_files_are_skipped(self, mvc_project):
        config = AnalysisConfig(max_file_size_mb=0.000001)
        report = DetectionEngine(config).detect(mvc_project)

        assert report.files_analyzed == 0
        assert report.dependency_insights.edge_count == 0
        assert report.naming_conventions[NamingCategory.FILES].total == 6

    def test_components_from_react_files_only(self, project_builder):
        root = project_builder(
            {
                "src/App.jsx": "export function App() {\n  return <Header />;\n}\n",
                "src/Header.jsx": "const Header = () => <h1>Hi</h1>;\nexport default Header;\n",
                "src/render.js": "function Render() {\n  return <div />;\n}\n",
            }
        )
        report = DetectionEngine().detect(root)
        components = report.naming_conventions[NamingCategory.COMPONENTS]

        assert components.total == 2
        assert components.dominant == NamingConvention.PASCAL_CASE
        assert "React Component" in report.code_patterns

    def test_tags_come_from_sampled_files_only(self, project_builder):
        root = project_builder(
            {"src/a.js": "const alpha = 1;\n", "src/b.js": "import React from 'react';\n"}
        )
        report = DetectionEngine(AnalysisConfig(sample_size=1)).detect(root)

        assert "React" not in report.code_patterns
        # b.js is still read for the dependency graph
        assert report.files_analyzed == 2

    def test_sample_size_limits_naming(self, project_builder):
        files = {f"src/file_{i}.py": f"value_{i} = {i}\n" for i in range(5)}
        root = project_builder(files)
        report = DetectionEngine(AnalysisConfig(sample_size=2)).detect(root)

        assert report.naming_conventions[NamingCategory.FILES].total == 2
        assert report.naming_conventions[NamingCategory.VARIABLES].total == 2
        # The graph still sees every file
        assert report.dependency_insights.module_count == 5


class TestHelpers:
    def test_naming_sample_per_type(self, project_builder):
        root = project_builder({"b.py": "", "a.py": "", "c.py": "", "x.js": "", "README.md": ""})
        sample = naming_sample(scan(root), 2)
        assert sorted(f.relative_path for f in sample) == ["README.md", "a.py", "b.py", "x.js"]

    def test_read_source_limits(self, project_builder):
        root = project_builder({"big.py": "x = 1\n" * 100})
        record = scan(root).files[0]

        assert read_source(record, 10_000).startswith("x = 1")
        with pytest.raises(FileSkipError):
            read_source(record, 10)


class TestAnalyzeApi:
    def test_analyze_with_overrides(self, mvc_project):
        report = analyze(mvc_project, quiet=True, sample_size=1)

        assert report.top_pattern.name == MVC
        assert report.naming_conventions[NamingCategory.FILES].total <= 6

    def test_analyze_json_round_trip(self, mvc_project):
        data = json.loads(analyze(mvc_project, quiet=True).to_json())

        assert data["architectural_patterns"][0]["name"] == MVC
        assert data["naming_conventions"]["directories"]["dominant"] == "lowercase"
        assert list(data["naming_conventions"]) == sorted(data["naming_conventions"])

    def test_layers_from_import_chain(self, mvc_project):
        report = analyze(mvc_project, quiet=True)
        assert report.dependency_insights.layer_count == 4
