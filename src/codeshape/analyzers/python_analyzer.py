"""Python language analyzer"""

import re

from .base import DQ_STRING, HASH_COMMENT, SQ_STRING, Analyzer, find_all, to_refs
from .models import Identifiers, ModuleRef

_TRIPLE_DQ = r'(?s:""".*?""")'
_TRIPLE_SQ = r"(?s:'''.*?''')"

_FUNCTION = r"\bdef\s+([A-Za-z_]\w*)"
_CLASS = r"\bclass\s+([A-Za-z_]\w*)"
_ASSIGNMENT = re.compile(r"[ \t]*([A-Za-z_]\w*)\s*(?::[^=\n]+)?=(?!=)")
_STRING = re.compile(f"{DQ_STRING}|{SQ_STRING}")

_KEYWORDS = frozenset(
    {"if", "for", "while", "def", "class", "return", "elif", "else", "with", "assert", "yield"}
)

_IMPORT_LINE = re.compile(r"^[ \t]*import\s+([\w.]+(?:\s+as\s+\w+)?(?:\s*,\s*[\w.]+(?:\s+as\s+\w+)?)*)", re.M)
_FROM_IMPORT = re.compile(r"^[ \t]*from\s+(\.+[\w.]*|[\w.]+)\s+import\b", re.M)

# (tag, substrings), a tag applies when any substring occurs
_TAG_MARKERS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("Django", ("import django", "from django")),
    ("Flask", ("from flask import", "Flask(__name__)")),
    ("FastAPI", ("from fastapi import", "FastAPI(")),
    ("Pyramid", ("from pyramid.", "config.add_route")),
    ("SQLAlchemy", ("import sqlalchemy", "from sqlalchemy")),
    ("Pandas", ("import pandas", "from pandas")),
    ("NumPy", ("import numpy", "from numpy")),
    ("pytest", ("import pytest", "from pytest")),
    ("Async/Await", ("async def", "await ")),
    ("Dataclasses", ("@dataclass", "from dataclasses import")),
)
_TYPE_HINTS = re.compile(r"\)\s*->\s*[\w\[\]., |\"']+:")
_DECORATOR = re.compile(r"^[ \t]*@[A-Za-z_][\w.]*", re.M)


def _top_level_lines(content: str):
    """Lines that begin outside any open bracket.

    Continuation lines of a multi-line call or literal are skipped, so
    keyword arguments and dict entries are not taken for assignments.
    """
    depth = 0
    for line in content.split("\n"):
        if depth == 0:
            yield line
        bare = _STRING.sub("", line)
        opened = sum(bare.count(c) for c in "([{")
        closed = sum(bare.count(c) for c in ")]}")
        depth = max(depth + opened - closed, 0)


class PythonAnalyzer(Analyzer):
    """Analyzer for Python sources"""

    name = "python"
    comment_patterns = (_TRIPLE_DQ, _TRIPLE_SQ, HASH_COMMENT)
    string_patterns = (DQ_STRING, SQ_STRING)

    def extract_identifiers(self, content: str) -> Identifiers:
        variables = []
        for line in _top_level_lines(content):
            match = _ASSIGNMENT.match(line)
            if match and match.group(1) not in _KEYWORDS:
                variables.append(match.group(1))
        return Identifiers.build(
            variables=variables,
            functions=find_all([_FUNCTION], content),
            classes=find_all([_CLASS], content),
        )

    def extract_imports(self, content: str) -> list[ModuleRef]:
        hits: list[tuple[int, str]] = []
        for match in _IMPORT_LINE.finditer(content):
            for part in match.group(1).split(","):
                module = part.strip().split()[0]
                hits.append((match.start(), module))
        for match in _FROM_IMPORT.finditer(content):
            hits.append((match.start(), match.group(1)))
        hits.sort(key=lambda h: h[0])
        return to_refs(h[1] for h in hits)

    def detect_tags(self, content: str) -> list[str]:
        tags = [tag for tag, markers in _TAG_MARKERS if any(m in content for m in markers)]
        if _TYPE_HINTS.search(content):
            tags.append("Type Hints")
        if _DECORATOR.search(content):
            tags.append("Decorators")
        return tags
