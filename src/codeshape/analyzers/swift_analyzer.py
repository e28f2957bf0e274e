"""Swift language analyzer"""

import re

from .base import C_BLOCK_COMMENT, C_LINE_COMMENT, DQ_STRING, Analyzer, find_all, to_refs
from .models import Identifiers, ModuleRef

_TYPE = r"\b(?:class|struct|enum|protocol|actor)\s+([A-Za-z_]\w*)"
_FUNCTION = r"\bfunc\s+([A-Za-z_]\w*)"
_VARIABLE = r"\b(?:var|let)\s+([A-Za-z_]\w*)"

_IMPORT = re.compile(r"^[ \t]*(?:@testable\s+)?import\s+(?:(?:class|struct|enum|protocol|func|var|let|typealias)\s+)?([\w.]+)", re.M)

_PROTOCOL = re.compile(r"\bprotocol\s+\w+")
_EXTENSION = re.compile(r"\bextension\s+\w+")


class SwiftAnalyzer(Analyzer):
    """Analyzer for Swift sources"""

    name = "swift"
    comment_patterns = (C_BLOCK_COMMENT, C_LINE_COMMENT)
    string_patterns = (DQ_STRING,)

    def extract_identifiers(self, content: str) -> Identifiers:
        return Identifiers.build(
            variables=find_all([_VARIABLE], content),
            functions=find_all([_FUNCTION], content),
            classes=find_all([_TYPE], content),
        )

    def extract_imports(self, content: str) -> list[ModuleRef]:
        return to_refs(m.group(1) for m in _IMPORT.finditer(content))

    def detect_tags(self, content: str) -> list[str]:
        modules = {ref.specifier for ref in self.extract_imports(content)}
        tags = []
        if "SwiftUI" in modules:
            tags.append("SwiftUI")
        if "UIKit" in modules:
            tags.append("UIKit")
        if "Combine" in modules:
            tags.append("Combine")
        if _PROTOCOL.search(content) and _EXTENSION.search(content):
            tags.append("Protocol-Oriented Programming")
        return tags
