"""Detection engine wiring the pipeline stages together.

Pipeline:
  scan → sample + read files → language analyzers (identifiers, imports, tags)
       → dependency graph (cycles, layers, degrees)
       → naming profile per category
       → pattern detection + reconciliation
       → consistency scoring
       → AnalysisReport
"""

from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Optional, Union

from ..analyzers import (
    COMPONENT_FILE_TYPES,
    ExtractionResult,
    ModuleRef,
    get_analyzer,
    is_source,
)
from ..config import AnalysisConfig
from ..exceptions import FileSkipError
from ..graph import build_dependency_graph, select_graph_files
from ..logging_config import get_logger
from ..naming import NamingCategory, NamingStat, profile
from ..patterns import detect_patterns
from ..report import AnalysisReport, DependencyInsights
from ..runtime import Deadline
from ..scanning import FileRecord, ProjectStructure, scan
from ..scoring import score_consistency

logger = get_logger(__name__)


def read_source(record: FileRecord, max_bytes: int) -> str:
    """Read one file as text.

    Raises:
        FileSkipError: If the file is too large or cannot be read
    """
    if record.size > max_bytes:
        raise FileSkipError(
            Path(record.path), f"file size {record.size} exceeds limit of {max_bytes} bytes"
        )
    try:
        with open(record.path, "r", encoding="utf-8", errors="replace") as f:
            return f.read()
    except OSError as e:
        raise FileSkipError(Path(record.path), str(e)) from e


def naming_sample(structure: ProjectStructure, sample_size: int) -> list[FileRecord]:
    """Up to ``sample_size`` files of each type, in relative path order."""
    sample: list[FileRecord] = []
    for file_type in structure.file_type_counts:
        files = sorted(structure.files_of_type(file_type), key=lambda f: f.relative_path)
        sample.extend(files[:sample_size])
    return sample


class DetectionEngine:
    """Runs the full detection pipeline on a source tree.

    The engine holds only configuration; every ``detect()`` call builds
    fresh results, so one instance can be reused.
    """

    def __init__(self, config: Optional[AnalysisConfig] = None):
        self.config = config or AnalysisConfig()

    def detect(
        self,
        root: Union[str, Path],
        ignore_patterns: Optional[Iterable[str]] = None,
        deadline: Optional[Deadline] = None,
    ) -> AnalysisReport:
        """Analyze ``root`` and return its AnalysisReport.

        Raises:
            NotFoundError: If the root is missing or not a directory
            FatalIOError: If the root cannot be listed
            AnalysisCancelledError: If the deadline expires or is cancelled
        """
        config = self.config
        if deadline is None:
            deadline = Deadline(config.timeout_seconds)

        structure = scan(root, ignore_patterns, config=config, deadline=deadline)

        # ── Extraction ─────────────────────────────────────────────
        sampled = naming_sample(structure, config.sample_size)
        graph_files, _ = select_graph_files(structure.files, config.max_files)
        results = self._extract(
            {f.relative_path: f for f in (*sampled, *graph_files) if is_source(f.type)},
            deadline,
        )

        # ── Dependency graph ───────────────────────────────────────
        deadline.check("graph")
        extracted_imports: dict[str, tuple[ModuleRef, ...]] = {
            path: result.imports for path, result in results.items()
        }
        graph = build_dependency_graph(
            structure,
            extracted_imports,
            max_files=config.max_files,
            layer_conformance_threshold=config.layer_conformance_threshold,
        )

        # ── Naming ─────────────────────────────────────────────────
        naming = self._profile_naming(structure, sampled, results)

        # ── Patterns + scoring ─────────────────────────────────────
        deadline.check("patterns")
        detection = detect_patterns(
            structure,
            graph,
            report_threshold=config.report_threshold,
            merge_boost=config.merge_boost,
        )
        tags = {
            tag
            for record in sampled
            if record.relative_path in results
            for tag in results[record.relative_path].tags
        }
        code_patterns = tuple(sorted(tags | set(detection.code_patterns)))
        consistency = score_consistency(naming, detection.patterns)

        logger.info(
            f"Analyzed {len(results)} files: {graph.module_count} modules, "
            f"{len(detection.patterns)} architectural patterns"
        )

        return AnalysisReport(
            naming_conventions=naming,
            architectural_patterns=detection.patterns,
            code_patterns=code_patterns,
            dependency_insights=DependencyInsights.from_graph(graph),
            consistency_metrics=consistency,
            root=structure.root,
            files_analyzed=len(results),
        )

    def _extract(
        self, files: dict[str, FileRecord], deadline: Deadline
    ) -> dict[str, ExtractionResult]:
        """Read and analyze each file once; unreadable files are left out."""
        max_bytes = self.config.max_file_size_bytes
        results: dict[str, ExtractionResult] = {}

        for relative_path in sorted(files):
            deadline.check("extract")
            record = files[relative_path]
            try:
                content = read_source(record, max_bytes)
            except FileSkipError as e:
                logger.warning(str(e))
                continue
            results[relative_path] = get_analyzer(record.type).analyze(content, relative_path)

        logger.debug(f"Extracted facts from {len(results)} of {len(files)} files")
        return results

    def _profile_naming(
        self,
        structure: ProjectStructure,
        sampled: list[FileRecord],
        results: dict[str, ExtractionResult],
    ) -> MappingProxyType:
        share = self.config.dominant_share
        names: dict[NamingCategory, list[str]] = {category: [] for category in NamingCategory}

        names[NamingCategory.FILES] = [f.stem for f in sampled]
        names[NamingCategory.DIRECTORIES] = [d.name for d in structure.directories]

        for record in sorted(sampled, key=lambda f: f.relative_path):
            result = results.get(record.relative_path)
            if result is None:
                continue
            identifiers = result.identifiers
            names[NamingCategory.VARIABLES].extend(identifiers.variables)
            names[NamingCategory.FUNCTIONS].extend(identifiers.functions)
            names[NamingCategory.CLASSES].extend(identifiers.classes)
            if record.type in COMPONENT_FILE_TYPES:
                names[NamingCategory.COMPONENTS].extend(identifiers.components)

        stats: dict[NamingCategory, NamingStat] = {
            category: profile(names[category], dominant_share=share)
            for category in NamingCategory
        }
        return MappingProxyType(stats)
