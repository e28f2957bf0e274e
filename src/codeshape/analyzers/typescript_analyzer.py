"""TypeScript language analyzer.

Builds on the JavaScript analyzer; interfaces and type aliases are counted
as classes.
"""

import re

from .base import find_all
from .javascript_analyzer import JavaScriptAnalyzer

_INTERFACE = r"\binterface\s+([A-Za-z_$][\w$]*)"
_TYPE_ALIAS = r"\btype\s+([A-Za-z_$][\w$]*)\s*(?:<[^>]*>)?\s*="
_CLASS = r"\bclass\s+([A-Za-z_$][\w$]*)"

_GENERIC = re.compile(r"[\w$]<\s*[A-Z][\w$]*(?:\s+extends\s+[^<>]+)?(?:\s*,\s*[A-Z][\w$]*)*\s*>")
_ANGULAR_DECORATOR = re.compile(
    r"@(?:Component|Injectable|NgModule|Directive|Pipe|Input|Output|HostListener)\s*\("
)


class TypeScriptAnalyzer(JavaScriptAnalyzer):
    """Analyzer for TypeScript and TSX sources"""

    name = "typescript"

    def _extract_classes(self, content: str) -> list[str]:
        return find_all([_CLASS, _INTERFACE, _TYPE_ALIAS], content)

    def detect_tags(self, content: str) -> list[str]:
        tags = super().detect_tags(content)
        if re.search(_INTERFACE, content):
            tags.append("TypeScript Interfaces")
        if _GENERIC.search(content):
            tags.append("TypeScript Generics")
        if _ANGULAR_DECORATOR.search(content):
            tags.append("Angular Decorators")
        return tags
