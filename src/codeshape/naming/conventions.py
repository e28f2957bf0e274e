"""Naming convention classifier and profiler."""

import re
from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Iterable, Mapping, Optional


class NamingConvention(str, Enum):
    """Stable string tags for naming conventions.

    ``MIXED`` is never returned by ``classify``; it only appears as the
    dominant convention of a category without a clear majority.
    """

    PASCAL_CASE = "PascalCase"
    CAMEL_CASE = "camelCase"
    SNAKE_CASE = "snake_case"
    KEBAB_CASE = "kebab-case"
    UPPERCASE = "UPPERCASE"
    LOWERCASE = "lowercase"
    UNKNOWN = "unknown"
    MIXED = "mixed"

    def __str__(self) -> str:
        return self.value


class NamingCategory(str, Enum):
    FILES = "files"
    DIRECTORIES = "directories"
    VARIABLES = "variables"
    FUNCTIONS = "functions"
    CLASSES = "classes"
    COMPONENTS = "components"

    def __str__(self) -> str:
        return self.value


# Evaluated in order; the first rule that matches wins
_RULES: tuple[tuple[NamingConvention, re.Pattern, Optional[re.Pattern]], ...] = (
    (NamingConvention.PASCAL_CASE, re.compile(r"^[A-Z][A-Za-z0-9]*$"), re.compile(r"[a-z]")),
    (NamingConvention.CAMEL_CASE, re.compile(r"^[a-z][A-Za-z0-9]*$"), re.compile(r"[A-Z]")),
    (NamingConvention.SNAKE_CASE, re.compile(r"^[a-z0-9_]+$"), re.compile(r"_")),
    (NamingConvention.KEBAB_CASE, re.compile(r"^[a-z0-9-]+$"), re.compile(r"-")),
    (NamingConvention.UPPERCASE, re.compile(r"^[A-Z0-9_]+$"), re.compile(r"[A-Z]")),
    (NamingConvention.LOWERCASE, re.compile(r"^[a-z0-9]+$"), re.compile(r"[a-z]")),
)

_ORDER = {convention: i for i, convention in enumerate(NamingConvention)}


def classify(name: str) -> NamingConvention:
    """Classify one identifier.

    >>> [classify(n).value for n in ["fetchData", "UserModel", "user_model"]]
    ['camelCase', 'PascalCase', 'snake_case']
    """
    if not name:
        return NamingConvention.UNKNOWN
    for convention, shape, required in _RULES:
        if shape.match(name) and (required is None or required.search(name)):
            return convention
    return NamingConvention.UNKNOWN


@dataclass(frozen=True)
class NamingStat:
    """Convention tally for one naming category."""

    counts_by_convention: Mapping[NamingConvention, int] = field(
        default_factory=lambda: MappingProxyType({})
    )
    total: int = 0
    dominant: Optional[NamingConvention] = None

    def share(self, convention: NamingConvention) -> float:
        if self.total == 0:
            return 0.0
        return self.counts_by_convention.get(convention, 0) / self.total


def profile(names: Iterable[str], dominant_share: float = 0.6) -> NamingStat:
    """Tally conventions and pick the dominant one.

    The most frequent convention is dominant unless its rounded percentage
    is below ``dominant_share``, in which case the category is ``mixed``.
    Empty input gives ``dominant=None``.
    """
    counts = Counter(classify(name) for name in names)
    total = sum(counts.values())
    ordered = MappingProxyType(dict(sorted(counts.items(), key=lambda kv: _ORDER[kv[0]])))

    if total == 0:
        return NamingStat(counts_by_convention=ordered, total=0, dominant=None)

    top, top_count = max(counts.items(), key=lambda kv: (kv[1], -_ORDER[kv[0]]))
    if round(top_count / total * 100) < round(dominant_share * 100):
        top = NamingConvention.MIXED

    return NamingStat(counts_by_convention=ordered, total=total, dominant=top)
