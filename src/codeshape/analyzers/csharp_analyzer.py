"""C# language analyzer"""

import re

from .base import C_BLOCK_COMMENT, C_LINE_COMMENT, DQ_STRING, Analyzer, find_all, to_refs
from .models import Identifiers, ModuleRef

_MODIFIERS = (
    r"(?:(?:public|private|protected|internal|static|sealed|abstract|partial|readonly"
    r"|virtual|override|async|unsafe|new)\s+)*"
)
_TYPE = rf"^[ \t]*{_MODIFIERS}(?:class|interface|struct|record|enum)\s+([A-Za-z_]\w*)"
_METHOD = (
    rf"^[ \t]*(?=\S)(?!(?:return|new|throw|else|case|using|namespace)\b){_MODIFIERS}"
    r"[\w.<>\[\],? ]+?\s+([A-Z_]\w*)\s*(?:<[^>]+>)?\s*\([^)]*\)\s*(?:where\s[^{]+)?[{;=]"
)
_FIELD = (
    rf"^[ \t]*(?=\S)(?!(?:return|new|throw|else|case|using|namespace)\b){_MODIFIERS}(?:const\s+)?"
    r"[\w.<>\[\],? ]+?\s+([A-Za-z_]\w*)\s*(?:=[^=>]|;|\{\s*get)"
)

_USING = re.compile(r"^[ \t]*using\s+(?:static\s+)?(?:\w+\s*=\s*)?([\w.]+)\s*;", re.M)


class CSharpAnalyzer(Analyzer):
    """Analyzer for C# sources"""

    name = "csharp"
    comment_patterns = (C_BLOCK_COMMENT, C_LINE_COMMENT)
    string_patterns = (DQ_STRING,)

    def extract_identifiers(self, content: str) -> Identifiers:
        methods = find_all([_METHOD], content, re.M)
        fields = [f for f in find_all([_FIELD], content, re.M) if f not in methods]
        return Identifiers.build(
            variables=fields,
            functions=methods,
            classes=find_all([_TYPE], content, re.M),
        )

    def extract_imports(self, content: str) -> list[ModuleRef]:
        return to_refs(m.group(1) for m in _USING.finditer(content))

    def detect_tags(self, content: str) -> list[str]:
        namespaces = [ref.specifier for ref in self.extract_imports(content)]
        tags = []
        if any(n.startswith("Microsoft.AspNetCore") for n in namespaces):
            tags.append("ASP.NET Core")
        if any(n.startswith("Microsoft.EntityFrameworkCore") for n in namespaces) or (
            "DbContext" in content
        ):
            tags.append("Entity Framework")
        return tags
