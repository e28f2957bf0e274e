"""Architectural pattern results."""

from dataclasses import dataclass

MVC = "MVC"
MVVM = "MVVM"
LAYERED = "Layered Architecture"
MICROSERVICES = "Microservices"
FEATURE_BASED = "Feature-based"
HEXAGONAL = "Hexagonal Architecture"
EVENT_DRIVEN = "Event-Driven Architecture"

PATTERN_NAMES = (MVC, MVVM, LAYERED, MICROSERVICES, FEATURE_BASED, HEXAGONAL, EVENT_DRIVEN)

SOURCE_DIRECTORY = "directory-structure"
SOURCE_DEPENDENCY = "dependency-analysis"

CIRCULAR_DEPENDENCIES = "circular-dependencies"


def clamp_confidence(value: float) -> int:
    return int(max(0, min(100, round(value))))


@dataclass(frozen=True)
class ArchitecturalPatternResult:
    """One detected architectural style."""

    name: str
    confidence: int
    evidence: tuple[str, ...] = ()
    sources: tuple[str, ...] = ()
    detection_count: int = 1

    def __post_init__(self) -> None:
        object.__setattr__(self, "confidence", clamp_confidence(self.confidence))
        if not isinstance(self.evidence, tuple):
            object.__setattr__(self, "evidence", tuple(self.evidence))
        if not isinstance(self.sources, tuple):
            object.__setattr__(self, "sources", tuple(self.sources))
