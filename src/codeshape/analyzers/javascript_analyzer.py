"""JavaScript language analyzer"""

import re

from .base import (
    BACKTICK_STRING,
    C_BLOCK_COMMENT,
    C_LINE_COMMENT,
    DQ_STRING,
    SQ_STRING,
    Analyzer,
    find_all,
    to_refs,
)
from .models import Identifiers, ModuleRef

_IDENT = r"[A-Za-z_$][\w$]*"

_VARIABLE = rf"\b(?:const|let|var)\s+({_IDENT})"
_DESTRUCTURED = r"\b(?:const|let|var)\s*([{\[][^=;]*?[}\]])\s*="
_FUNCTION = rf"\bfunction\s*\*?\s+({_IDENT})\s*\("
_CLASS = rf"\bclass\s+({_IDENT})"

_COMPONENT_DECL = re.compile(
    r"\bfunction\s+([A-Z][\w$]*)\s*\("
    r"|\b(?:const|let|var)\s+([A-Z][\w$]*)\s*(?::[^=]+)?=\s*"
    r"(?:React\.memo\(|memo\(|forwardRef\(|React\.forwardRef\()?\s*(?:async\s+)?"
    rf"(?:function\b|\([^)]*\)\s*(?::[^=]+)?=>|{_IDENT}\s*=>)"
)
_CLASS_COMPONENT = re.compile(r"\bclass\s+([A-Z][\w$]*)\s+extends\s+(?:React\.)?(?:Pure)?Component\b")
_JSX_RETURN = re.compile(r"(?:\breturn\s*\(?\s*|=>\s*\(?\s*)<(?:[A-Za-z][\w.]*|>)")
_JSX_START = re.compile(r"\s*\(?\s*<(?:[A-Za-z][\w.]*|>)")
_NEXT_DECLARATION = re.compile(
    r"\n(?=(?:export\s+)?(?:default\s+)?(?:async\s+)?(?:function|const|let|var|class)\b)"
)
_HIGHER_ORDER = re.compile(rf"=>\s*(?:\([^()]*\)|{_IDENT})\s*=>")

# Import forms, each capturing the module specifier
_IMPORT_FROM = r"""\b(?:import|export)\s+(?:type\s+)?[^'";]*?\bfrom\s*['"]([^'"]+)['"]"""
_IMPORT_SIDE_EFFECT = r"""\bimport\s*['"]([^'"]+)['"]"""
_REQUIRE = r"""\brequire\s*\(\s*['"]([^'"]+)['"]\s*\)"""
_DYNAMIC_IMPORT = r"""\bimport\s*\(\s*['"]([^'"]+)['"]\s*\)"""


def _destructured_names(pattern: str) -> list[str]:
    names = []
    for part in pattern.strip("{}[] \n\t").split(","):
        part = part.strip().lstrip(".")
        if ":" in part:
            part = part.split(":", 1)[1]
        part = part.split("=", 1)[0].strip()
        if re.fullmatch(_IDENT, part):
            names.append(part)
    return names


def _framework_tag(specifier: str):
    if specifier == "react":
        return "React"
    if specifier == "react-dom" or specifier.startswith("react-dom/"):
        return "React DOM"
    if specifier in ("react-router", "react-router-dom"):
        return "React Router"
    if specifier in ("redux", "@reduxjs/toolkit"):
        return "Redux"
    if specifier.startswith("next"):
        return "Next.js"
    if specifier.startswith("@nestjs"):
        return "NestJS"
    if specifier == "express":
        return "Express"
    if specifier.startswith("@angular"):
        return "Angular"
    if specifier == "vue":
        return "Vue.js"
    return None


class JavaScriptAnalyzer(Analyzer):
    """Analyzer for JavaScript and JSX sources"""

    name = "javascript"
    comment_patterns = (C_BLOCK_COMMENT, C_LINE_COMMENT)
    string_patterns = (DQ_STRING, SQ_STRING, BACKTICK_STRING)

    def extract_identifiers(self, content: str) -> Identifiers:
        variables = find_all([_VARIABLE], content)
        for pattern in find_all([_DESTRUCTURED], content):
            variables.extend(_destructured_names(pattern))

        return Identifiers.build(
            variables=variables,
            functions=find_all([_FUNCTION], content),
            classes=self._extract_classes(content),
            components=self._extract_components(content),
        )

    def _extract_classes(self, content: str) -> list[str]:
        return find_all([_CLASS], content)

    def _extract_components(self, content: str) -> list[str]:
        """Capitalized functions returning JSX, plus class components."""
        found: list[tuple[int, str]] = []

        for match in _COMPONENT_DECL.finditer(content):
            name = match.group(1) or match.group(2)
            boundary = _NEXT_DECLARATION.search(content, match.end())
            body = content[match.end() : boundary.start() if boundary else len(content)]
            # One-line arrow components put the JSX right after the arrow
            head = content[match.start() : match.end()]
            if _JSX_RETURN.search(body) or (head.endswith("=>") and _JSX_START.match(body)):
                found.append((match.start(), name))

        for match in _CLASS_COMPONENT.finditer(content):
            found.append((match.start(), match.group(1)))

        found.sort()
        return [name for _, name in found]

    def extract_imports(self, content: str) -> list[ModuleRef]:
        specifiers = find_all(
            [_IMPORT_FROM, _IMPORT_SIDE_EFFECT, _REQUIRE, _DYNAMIC_IMPORT], content
        )
        return to_refs(specifiers)

    def detect_tags(self, content: str) -> list[str]:
        tags = []
        for ref in self.extract_imports(content):
            tag = _framework_tag(ref.specifier)
            if tag:
                tags.append(tag)

        if self._extract_components(content):
            tags.append("React Component")
        if _HIGHER_ORDER.search(content):
            tags.append("Higher-order Function")
        return tags
