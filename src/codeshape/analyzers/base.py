"""Base analyzer class for language fact extraction."""

import re
from abc import ABC, abstractmethod
from functools import lru_cache
from typing import Iterable

from ..logging_config import get_logger
from .models import EMPTY_RESULT, ExtractionResult, Identifiers, ImportKind, ModuleRef, unique

logger = get_logger(__name__)

# ── Re-usable building blocks ──────────────────────────────────────

C_LINE_COMMENT = r"//[^\n]*"
C_BLOCK_COMMENT = r"(?s:/\*.*?\*/)"
HASH_COMMENT = r"#[^\n]*"

DQ_STRING = r'"(?:\\.|[^"\\\n])*"'
SQ_STRING = r"'(?:\\.|[^'\\\n])*'"
BACKTICK_STRING = r"(?s:`(?:\\.|[^`\\])*`)"


@lru_cache(maxsize=None)
def _compile_stripper(comments: tuple[str, ...], strings: tuple[str, ...]) -> re.Pattern:
    # Strings are matched as a unit so comment markers inside them survive
    drop = "|".join(comments)
    keep = "|".join(strings) if strings else r"(?!x)x"
    return re.compile(f"(?P<drop>{drop})|(?P<keep>{keep})")


class Analyzer(ABC):
    """Abstract base class for language-specific analyzers.

    Subclasses implement the three extraction methods. ``analyze`` strips
    comments, runs them, and returns an empty result if any of them fails.
    """

    name: str = "generic"

    # Removed before extraction; line breaks inside them are preserved.
    comment_patterns: tuple[str, ...] = ()

    # String literals, skipped over so comment markers inside stay intact.
    string_patterns: tuple[str, ...] = ()

    def analyze(self, content: str, file_path: str = "") -> ExtractionResult:
        """Extract identifiers, imports and tags from one file's text."""
        try:
            text = self.strip_comments(content)
            identifiers = self.extract_identifiers(text)
            imports = tuple(self.extract_imports(text))
            tags = unique(self.detect_tags(text))
        except Exception as e:
            logger.warning(f"{self.name} extraction failed for {file_path or '<memory>'}: {e}")
            return EMPTY_RESULT
        return ExtractionResult(identifiers=identifiers, imports=imports, tags=tags)

    def strip_comments(self, content: str) -> str:
        if not self.comment_patterns:
            return content
        stripper = _compile_stripper(self.comment_patterns, self.string_patterns)

        def _replace(match: re.Match) -> str:
            if match.lastgroup == "drop":
                return "\n" * match.group(0).count("\n")
            return match.group(0)

        return stripper.sub(_replace, content)

    @abstractmethod
    def extract_identifiers(self, content: str) -> Identifiers:
        """Collect declared variable, function, class and component names"""

    @abstractmethod
    def extract_imports(self, content: str) -> list[ModuleRef]:
        """Collect import references in source order"""

    @abstractmethod
    def detect_tags(self, content: str) -> list[str]:
        """Detect framework and idiom tags"""


def find_all(patterns: Iterable[str], content: str, flags: int = 0) -> list[str]:
    """Group 1 of every match of every pattern, in source order."""
    hits: list[tuple[int, str]] = []
    for pattern in patterns:
        for match in re.finditer(pattern, content, flags):
            if match.group(1) is not None:
                hits.append((match.start(1), match.group(1)))
    hits.sort(key=lambda h: h[0])
    return [h[1] for h in hits]


def to_refs(specifiers: Iterable[str], relative_prefix: str = ".") -> list[ModuleRef]:
    """Wrap specifiers as ModuleRefs, deduplicated in first-seen order."""
    refs = []
    for spec in unique(s.strip() for s in specifiers):
        kind = ImportKind.RELATIVE if spec.startswith(relative_prefix) else ImportKind.ABSOLUTE
        refs.append(ModuleRef(specifier=spec, kind=kind))
    return refs
