"""Ignore rules: glob predicates and .gitignore translation.

Ignore handling is an ordered tuple of ``GlobPredicate`` objects. The
caller's patterns come first, then the ones translated from the project's
``.gitignore``. A path is ignored as soon as any predicate matches it.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional, Sequence

from ..logging_config import get_logger

logger = get_logger(__name__)

IGNORE_FILE_NAME = ".gitignore"


def glob_to_regex(pattern: str) -> str:
    """Translate a glob into an anchored regular expression.

    ``**`` spans any number of path segments (zero included), ``*`` and
    ``?`` never cross ``/``, and ``[...]`` character classes are kept
    (``[!...]`` negates).
    """
    out: list[str] = []
    i = 0
    n = len(pattern)

    while i < n:
        c = pattern[i]
        if c == "*":
            if i + 1 < n and pattern[i + 1] == "*":
                at_start = i == 0 or pattern[i - 1] == "/"
                j = i + 2
                if at_start and j < n and pattern[j] == "/":
                    # "**/" matches zero or more leading segments
                    out.append("(?:.*/)?")
                    i = j + 1
                    continue
                if at_start and j == n and i > 0:
                    # trailing "/**" also matches the directory itself
                    out.pop()
                    out.append("(?:/.*)?")
                    i = j
                    continue
                out.append(".*")
                i = j
                continue
            out.append("[^/]*")
        elif c == "?":
            out.append("[^/]")
        elif c == "[":
            j = pattern.find("]", i + 2)
            if j == -1:
                out.append(re.escape(c))
            else:
                body = pattern[i + 1 : j]
                if body.startswith("!"):
                    body = "^" + body[1:]
                out.append("[" + body.replace("\\", "\\\\") + "]")
                i = j + 1
                continue
        else:
            out.append(re.escape(c))
        i += 1

    return "^" + "".join(out) + "$"


@dataclass(frozen=True)
class GlobPredicate:
    """One compiled ignore pattern, matched against POSIX relative paths."""

    pattern: str
    source: str = "caller"
    _regex: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_regex", re.compile(glob_to_regex(self.pattern)))

    def matches(self, rel_path: str) -> bool:
        return self._regex.match(rel_path) is not None


def translate_gitignore(content: str) -> list[str]:
    """Convert .gitignore lines into glob patterns.

    Comments and blank lines are dropped and negations are skipped. A
    trailing ``/`` becomes ``pattern/**``, a leading ``/`` anchors at the
    root, and anything else matches anywhere via a ``**/`` prefix. A result
    not ending in ``*`` also gets a ``pattern/**`` companion so a directory
    name covers its descendants.
    """
    patterns: list[str] = []

    for raw in content.splitlines():
        line = re.sub(r"#.*$", "", raw).strip()
        if not line:
            continue
        if line.startswith("!"):
            continue

        glob = line
        if glob.endswith("/"):
            glob = glob + "**"

        if glob.startswith("/"):
            glob = glob[1:]
        else:
            glob = "**/" + glob

        patterns.append(glob)
        if not glob.endswith("*"):
            patterns.append(glob + "/**")

    return patterns


def read_ignore_file(root: Path) -> list[str]:
    """Read and translate ``root/.gitignore``; missing file gives []."""
    ignore_path = root / IGNORE_FILE_NAME
    if not ignore_path.is_file():
        return []
    try:
        content = ignore_path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        logger.warning(f"Cannot read {ignore_path}: {e}")
        return []

    patterns = translate_gitignore(content)
    logger.debug(f"Added {len(patterns)} patterns from {IGNORE_FILE_NAME}")
    return patterns


def build_ignore_predicates(
    ignore_patterns: Iterable[str],
    root: Optional[Path] = None,
    use_ignore_file: bool = True,
) -> tuple[GlobPredicate, ...]:
    """Build the ordered predicate list: caller patterns, then .gitignore."""
    predicates = [GlobPredicate(p) for p in ignore_patterns if p]
    if use_ignore_file and root is not None:
        predicates.extend(GlobPredicate(p, source=IGNORE_FILE_NAME) for p in read_ignore_file(root))
    return tuple(predicates)


def is_ignored(rel_path: str, predicates: Sequence[GlobPredicate]) -> bool:
    return any(p.matches(rel_path) for p in predicates)
