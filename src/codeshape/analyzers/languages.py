"""Language dispatch: one table mapping file types to analyzers.

Adding a language:
  1. Add a Language member and its FileType entries to FILE_TYPE_LANGUAGES.
  2. Register an Analyzer instance in ANALYZERS.
"""

from enum import Enum
from types import MappingProxyType
from typing import Mapping

from ..scanning.file_types import FileType
from .base import Analyzer
from .csharp_analyzer import CSharpAnalyzer
from .generic_analyzer import GenericAnalyzer
from .go_analyzer import GoAnalyzer
from .java_analyzer import JavaAnalyzer, KotlinAnalyzer
from .javascript_analyzer import JavaScriptAnalyzer
from .python_analyzer import PythonAnalyzer
from .ruby_analyzer import RubyAnalyzer
from .swift_analyzer import SwiftAnalyzer
from .typescript_analyzer import TypeScriptAnalyzer


class Language(str, Enum):
    JAVASCRIPT = "javascript"
    TYPESCRIPT = "typescript"
    PYTHON = "python"
    GO = "go"
    JAVA = "java"
    KOTLIN = "kotlin"
    RUBY = "ruby"
    SWIFT = "swift"
    CSHARP = "csharp"
    GENERIC = "generic"

    def __str__(self) -> str:
        return self.value


FILE_TYPE_LANGUAGES: Mapping[FileType, Language] = MappingProxyType(
    {
        FileType.JAVASCRIPT: Language.JAVASCRIPT,
        FileType.JAVASCRIPT_REACT: Language.JAVASCRIPT,
        FileType.TYPESCRIPT: Language.TYPESCRIPT,
        FileType.TYPESCRIPT_REACT: Language.TYPESCRIPT,
        FileType.PYTHON: Language.PYTHON,
        FileType.GO: Language.GO,
        FileType.JAVA: Language.JAVA,
        FileType.KOTLIN: Language.KOTLIN,
        FileType.RUBY: Language.RUBY,
        FileType.SWIFT: Language.SWIFT,
        FileType.CSHARP: Language.CSHARP,
    }
)

ANALYZERS: Mapping[Language, Analyzer] = MappingProxyType(
    {
        Language.JAVASCRIPT: JavaScriptAnalyzer(),
        Language.TYPESCRIPT: TypeScriptAnalyzer(),
        Language.PYTHON: PythonAnalyzer(),
        Language.GO: GoAnalyzer(),
        Language.JAVA: JavaAnalyzer(),
        Language.KOTLIN: KotlinAnalyzer(),
        Language.RUBY: RubyAnalyzer(),
        Language.SWIFT: SwiftAnalyzer(),
        Language.CSHARP: CSharpAnalyzer(),
        Language.GENERIC: GenericAnalyzer(),
    }
)

# Only these file types are ever read from disk
SOURCE_FILE_TYPES: frozenset[FileType] = frozenset(FILE_TYPE_LANGUAGES)

# Components are tallied for these types only
COMPONENT_FILE_TYPES: frozenset[FileType] = frozenset(
    {FileType.JAVASCRIPT_REACT, FileType.TYPESCRIPT_REACT}
)


def language_for(file_type: FileType) -> Language:
    return FILE_TYPE_LANGUAGES.get(file_type, Language.GENERIC)


def get_analyzer(file_type: FileType) -> Analyzer:
    """Return the analyzer for a file type (the generic one when unsupported)."""
    return ANALYZERS[language_for(file_type)]


def is_source(file_type: FileType) -> bool:
    return file_type in SOURCE_FILE_TYPES
