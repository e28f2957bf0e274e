"""Directory-structure scorers.

Each scorer looks only at directory names, file names and marker files
and returns ``(score, evidence)`` with the score in [0, 100].
"""

from dataclasses import dataclass
from typing import Callable

from ..scanning.models import ProjectStructure
from .models import EVENT_DRIVEN, FEATURE_BASED, HEXAGONAL, LAYERED, MICROSERVICES, MVC, MVVM

Score = tuple[int, list[str]]


@dataclass(frozen=True)
class NameView:
    """Lower-cased names pulled once from a ProjectStructure."""

    dir_names: frozenset[str]
    dir_paths: tuple[str, ...]  # "/" + relative path, lower-cased
    file_names: tuple[str, ...]
    file_stems: tuple[str, ...]
    file_paths: tuple[str, ...]  # "/" + relative path, lower-cased
    file_extensions: tuple[str, ...]

    @classmethod
    def of(cls, structure: ProjectStructure) -> "NameView":
        return cls(
            dir_names=frozenset(d.name.lower() for d in structure.directories),
            dir_paths=tuple("/" + d.relative_path.lower() for d in structure.directories),
            file_names=tuple(f.name.lower() for f in structure.files),
            file_stems=tuple(f.stem.lower() for f in structure.files),
            file_paths=tuple("/" + f.relative_path.lower() for f in structure.files),
            file_extensions=tuple(f.extension.lower() for f in structure.files),
        )

    def has_dir(self, *names: str) -> bool:
        return any(n in self.dir_names for n in names)

    def stems_ending(self, *suffixes: str) -> list[str]:
        return [s for s in self.file_stems if s.endswith(suffixes)]


def _dir_points(view: NameView, weight: int, groups: list[tuple[str, ...]], evidence: list[str]) -> int:
    score = 0
    for names in groups:
        found = [n for n in names if n in view.dir_names]
        if found:
            score += weight
            evidence.append(f"Directory '{found[0]}' present")
    return score


def _file_points(view: NameView, weight: int, label: str, matches: list[str], evidence: list[str]) -> int:
    if not matches:
        return 0
    evidence.append(f"{len(matches)} {label} file(s)")
    return weight


def score_mvc(view: NameView) -> Score:
    evidence: list[str] = []
    score = _dir_points(
        view, 30, [("models", "model"), ("views", "view"), ("controllers", "controller")], evidence
    )
    score += _file_points(view, 15, "model", view.stems_ending("model", "models"), evidence)
    score += _file_points(view, 15, "view", view.stems_ending("view", "views"), evidence)
    score += _file_points(
        view, 15, "controller", view.stems_ending("controller", "controllers"), evidence
    )
    return min(score, 100), evidence


def score_mvvm(view: NameView) -> Score:
    evidence: list[str] = []
    score = _dir_points(view, 25, [("models", "model"), ("views", "view")], evidence)
    score += _dir_points(view, 40, [("viewmodels", "viewmodel")], evidence)

    viewmodel_files = [
        s
        for s in view.file_stems
        if s.endswith(("viewmodel", "viewmodels")) or "_vm" in s or "-vm" in s
    ]
    score += _file_points(view, 10, "model", view.stems_ending("model", "models"), evidence)
    score += _file_points(view, 10, "view", view.stems_ending("view", "views"), evidence)
    score += _file_points(view, 20, "viewmodel", viewmodel_files, evidence)
    return min(score, 100), evidence


LAYER_DIRECTORY_NAMES = (
    "data",
    "domain",
    "presentation",
    "infrastructure",
    "application",
    "api",
    "core",
    "services",
    "repositories",
    "interfaces",
    "adapters",
    "persistence",
    "entities",
)


def score_layered(view: NameView) -> Score:
    evidence: list[str] = []
    score = _dir_points(view, 15, [(name,) for name in LAYER_DIRECTORY_NAMES], evidence)

    repository_files = [s for s in view.file_stems if s.endswith("repository") or "repo" in s]
    score += _file_points(view, 10, "repository", repository_files, evidence)
    score += _file_points(view, 10, "service", view.stems_ending("service"), evidence)
    score += _file_points(view, 10, "entity", view.stems_ending("entity"), evidence)
    score += _file_points(view, 10, "dto", view.stems_ending("dto"), evidence)
    return min(score, 100), evidence


def score_microservices(view: NameView) -> Score:
    evidence: list[str] = []
    score = _dir_points(view, 40, [("services", "apis", "microservices")], evidence)

    service_dirs = [
        p for p in view.dir_paths if "service" in p.rsplit("/", 1)[-1] or "api" in p.rsplit("/", 1)[-1]
    ]
    if len(service_dirs) >= 3:
        score += 30
        evidence.append(f"{len(service_dirs)} service/api directories")

    docker_files = [n for n in view.file_names if "dockerfile" in n or "docker-compose" in n]
    score += _file_points(view, 15, "Docker", docker_files, evidence)

    k8s_files = [
        n
        for n, ext in zip(view.file_names, view.file_extensions)
        if "kubernetes" in n or (ext in ("yaml", "yml") and "deployment" in n)
    ]
    score += _file_points(view, 15, "Kubernetes", k8s_files, evidence)
    return min(score, 100), evidence


def score_feature_based(view: NameView) -> Score:
    evidence: list[str] = []
    score = _dir_points(view, 50, [("features", "modules")], evidence)

    feature_dirs = [p for p in view.dir_paths if "/features/" in p or "/modules/" in p]
    if len(feature_dirs) >= 2:
        score += 30
        evidence.append(f"{len(feature_dirs)} directories inside features/modules")

    feature_files = [p for p in view.file_paths if "/features/" in p or "/modules/" in p]
    if len(feature_files) > 10:
        score += 20
        evidence.append(f"{len(feature_files)} files inside features/modules")
    return min(score, 100), evidence


def score_hexagonal(view: NameView) -> Score:
    evidence: list[str] = []
    score = _dir_points(
        view,
        20,
        [("domain",), ("ports",), ("adapters",), ("interfaces", "infrastructure")],
        evidence,
    )
    score += _file_points(view, 10, "port", [n for n in view.file_names if "port" in n], evidence)
    score += _file_points(
        view, 10, "adapter", [n for n in view.file_names if "adapter" in n], evidence
    )
    return min(score, 100), evidence


def score_event_driven(view: NameView) -> Score:
    evidence: list[str] = []
    score = _dir_points(
        view,
        20,
        [
            ("events",),
            ("handlers", "listeners"),
            ("publishers", "dispatchers"),
            ("subscribers", "consumers"),
        ],
        evidence,
    )
    broker_files = [
        n
        for n in view.file_names
        if any(marker in n for marker in ("kafka", "rabbitmq", "activemq", "eventbus"))
    ]
    score += _file_points(view, 20, "message broker", broker_files, evidence)
    return min(score, 100), evidence


HEURISTIC_SCORERS: tuple[tuple[str, Callable[[NameView], Score]], ...] = (
    (MVC, score_mvc),
    (MVVM, score_mvvm),
    (LAYERED, score_layered),
    (MICROSERVICES, score_microservices),
    (FEATURE_BASED, score_feature_based),
    (HEXAGONAL, score_hexagonal),
    (EVENT_DRIVEN, score_event_driven),
)
