"""Go language analyzer"""

import re

from .base import (
    BACKTICK_STRING,
    C_BLOCK_COMMENT,
    C_LINE_COMMENT,
    DQ_STRING,
    Analyzer,
    find_all,
    to_refs,
)
from .models import Identifiers, ModuleRef

# func Name(...) and methods with receivers: func (s *Server) Name(...)
_FUNCTION = r"^func\s+(?:\([^)]*\)\s*)?([A-Za-z_]\w*)\s*[\[(]"
_STRUCT = r"^type\s+([A-Za-z_]\w*)\s+struct\s*\{"
_INTERFACE = r"^type\s+([A-Za-z_]\w*)\s+interface\s*\{"
_VAR = r"(?:^|\s)(?:var|const)\s+([A-Za-z_]\w*)\s+"
_SHORT_VAR = r"^[ \t]*([A-Za-z_]\w*)\s*:="
_GROUPED_DECL = re.compile(r"^(?:var|const)\s*\((.*?)^\)", re.M | re.S)
# First name on each line of a group, not a field access or call
_GROUP_NAME = re.compile(r"^[ \t]*([A-Za-z_]\w*)\b(?!\s*[.(:{])", re.M)

_SINGLE_IMPORT = re.compile(r'^import\s+(?:[\w.]+\s+)?"([^"]+)"', re.M)
_GROUPED_IMPORT = re.compile(r"^import\s*\(([^)]*)\)", re.M)
_GROUP_ENTRY = re.compile(r'"([^"]+)"')

_GOROUTINE = re.compile(r"\bgo\s+(?:func\b|[A-Za-z_][\w.]*\s*\()")
_CHANNEL = re.compile(r"\bchan\b|<-")
_CONTEXT = re.compile(r"\bcontext\.|\bctx\.")
_DEFER = re.compile(r"^\s*defer\s", re.M)


def _variables(content: str) -> list[str]:
    hits: list[tuple[int, str]] = []
    for pattern in (_VAR, _SHORT_VAR):
        for match in re.finditer(pattern, content, re.M):
            hits.append((match.start(1), match.group(1)))
    for group in _GROUPED_DECL.finditer(content):
        for match in _GROUP_NAME.finditer(group.group(1)):
            hits.append((group.start(1) + match.start(1), match.group(1)))
    hits.sort(key=lambda h: h[0])
    return [name for _, name in hits]


class GoAnalyzer(Analyzer):
    """Analyzer for Go sources"""

    name = "go"
    comment_patterns = (C_BLOCK_COMMENT, C_LINE_COMMENT)
    string_patterns = (DQ_STRING, BACKTICK_STRING)

    def extract_identifiers(self, content: str) -> Identifiers:
        return Identifiers.build(
            variables=_variables(content),
            functions=find_all([_FUNCTION], content, re.M),
            classes=find_all([_STRUCT, _INTERFACE], content, re.M),
        )

    def extract_imports(self, content: str) -> list[ModuleRef]:
        hits: list[tuple[int, str]] = []
        for match in _SINGLE_IMPORT.finditer(content):
            hits.append((match.start(), match.group(1)))
        for match in _GROUPED_IMPORT.finditer(content):
            for entry in _GROUP_ENTRY.finditer(match.group(1)):
                hits.append((match.start(1) + entry.start(), entry.group(1)))
        hits.sort(key=lambda h: h[0])
        return to_refs(h[1] for h in hits)

    def detect_tags(self, content: str) -> list[str]:
        tags = []
        if _GOROUTINE.search(content):
            tags.append("Goroutines")
        if _CHANNEL.search(content):
            tags.append("Channel-based Concurrency")
        if _CONTEXT.search(content):
            tags.append("Context-based APIs")
        if _DEFER.search(content):
            tags.append("Resource Cleanup with defer")
        if "gin." in content:
            tags.append("Gin Framework")
        if "echo." in content:
            tags.append("Echo Framework")
        if "gorm." in content:
            tags.append("GORM ORM")
        if '"testing"' in content:
            tags.append("Go Testing")
        return tags
