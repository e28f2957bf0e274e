"""Filesystem scanning: project structure, ignore rules, file types."""

from .file_types import FileType, classify_file_type
from .ignore import GlobPredicate, build_ignore_predicates, glob_to_regex, translate_gitignore
from .models import DirectoryRecord, FileRecord, ProjectStructure
from .scanner import scan

__all__ = [
    "FileType",
    "classify_file_type",
    "GlobPredicate",
    "build_ignore_predicates",
    "glob_to_regex",
    "translate_gitignore",
    "FileRecord",
    "DirectoryRecord",
    "ProjectStructure",
    "scan",
]
