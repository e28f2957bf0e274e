"""Facts extracted from a single source file."""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable


def unique(names: Iterable[str]) -> tuple[str, ...]:
    """Deduplicate while keeping first-seen order; empty names are dropped."""
    seen: dict[str, None] = {}
    for name in names:
        if name and name not in seen:
            seen[name] = None
    return tuple(seen)


class ImportKind(str, Enum):
    RELATIVE = "relative"
    ABSOLUTE = "absolute"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ModuleRef:
    """An import reference as written in source."""

    specifier: str
    kind: ImportKind = ImportKind.ABSOLUTE

    @property
    def is_relative(self) -> bool:
        return self.kind == ImportKind.RELATIVE


@dataclass(frozen=True)
class Identifiers:
    """Declared names by category, deduplicated in first-seen order."""

    variables: tuple[str, ...] = ()
    functions: tuple[str, ...] = ()
    classes: tuple[str, ...] = ()
    components: tuple[str, ...] = ()

    @classmethod
    def build(
        cls,
        variables: Iterable[str] = (),
        functions: Iterable[str] = (),
        classes: Iterable[str] = (),
        components: Iterable[str] = (),
    ) -> "Identifiers":
        return cls(
            variables=unique(variables),
            functions=unique(functions),
            classes=unique(classes),
            components=unique(components),
        )

    @property
    def is_empty(self) -> bool:
        return not (self.variables or self.functions or self.classes or self.components)


@dataclass(frozen=True)
class ExtractionResult:
    """Everything an analyzer reports about one file."""

    identifiers: Identifiers = Identifiers()
    imports: tuple[ModuleRef, ...] = ()
    tags: tuple[str, ...] = ()


EMPTY_RESULT = ExtractionResult()
