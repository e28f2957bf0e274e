"""Filesystem model produced by the scanner."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from .file_types import FileType


@dataclass(frozen=True)
class FileRecord:
    """One regular file found under the root.

    ``path`` and ``parent_path`` are absolute POSIX strings; ``relative_path``
    is relative to the root. ``extension`` carries no leading dot.
    """

    path: str
    relative_path: str
    name: str
    extension: str
    size: int
    type: FileType
    modified_time: float
    parent_path: str

    @property
    def stem(self) -> str:
        """Base name without the last extension."""
        if self.extension and self.name.endswith("." + self.extension):
            return self.name[: -(len(self.extension) + 1)]
        return self.name


@dataclass(frozen=True)
class DirectoryRecord:
    """One directory found under the root (the root itself excluded)."""

    path: str
    relative_path: str
    name: str
    depth: int
    parent_path: str


@dataclass(frozen=True)
class ProjectStructure:
    """Immutable snapshot of a scanned tree.

    ``skipped`` counts entries that could not be stat'ed during the walk.
    """

    root: str
    files: tuple[FileRecord, ...] = ()
    directories: tuple[DirectoryRecord, ...] = ()
    file_type_counts: Mapping[FileType, int] = field(
        default_factory=lambda: MappingProxyType({})
    )
    extensions: frozenset[str] = frozenset()
    skipped: int = 0

    @property
    def file_count(self) -> int:
        return len(self.files)

    @property
    def directory_count(self) -> int:
        return len(self.directories)

    def files_of_type(self, file_type: FileType) -> tuple[FileRecord, ...]:
        return tuple(f for f in self.files if f.type == file_type)
