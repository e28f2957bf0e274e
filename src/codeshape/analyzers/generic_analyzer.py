"""Fallback analyzer for file types without a language extractor"""

from .base import Analyzer
from .models import EMPTY_RESULT, ExtractionResult, Identifiers, ModuleRef


class GenericAnalyzer(Analyzer):
    """Returns empty results for every input"""

    name = "generic"

    def analyze(self, content: str, file_path: str = "") -> ExtractionResult:
        return EMPTY_RESULT

    def extract_identifiers(self, content: str) -> Identifiers:
        return Identifiers()

    def extract_imports(self, content: str) -> list[ModuleRef]:
        return []

    def detect_tags(self, content: str) -> list[str]:
        return []
