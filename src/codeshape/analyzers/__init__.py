"""Language fact extractors"""

from .base import Analyzer
from .csharp_analyzer import CSharpAnalyzer
from .generic_analyzer import GenericAnalyzer
from .go_analyzer import GoAnalyzer
from .java_analyzer import JavaAnalyzer, KotlinAnalyzer
from .javascript_analyzer import JavaScriptAnalyzer
from .languages import (
    ANALYZERS,
    COMPONENT_FILE_TYPES,
    SOURCE_FILE_TYPES,
    Language,
    get_analyzer,
    is_source,
    language_for,
)
from .models import EMPTY_RESULT, ExtractionResult, Identifiers, ImportKind, ModuleRef
from .python_analyzer import PythonAnalyzer
from .ruby_analyzer import RubyAnalyzer
from .swift_analyzer import SwiftAnalyzer
from .typescript_analyzer import TypeScriptAnalyzer

__all__ = [
    "Analyzer",
    "JavaScriptAnalyzer",
    "TypeScriptAnalyzer",
    "PythonAnalyzer",
    "GoAnalyzer",
    "JavaAnalyzer",
    "KotlinAnalyzer",
    "RubyAnalyzer",
    "SwiftAnalyzer",
    "CSharpAnalyzer",
    "GenericAnalyzer",
    "Language",
    "ANALYZERS",
    "SOURCE_FILE_TYPES",
    "COMPONENT_FILE_TYPES",
    "get_analyzer",
    "language_for",
    "is_source",
    "Identifiers",
    "ImportKind",
    "ModuleRef",
    "ExtractionResult",
    "EMPTY_RESULT",
]
