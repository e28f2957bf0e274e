"""Filesystem model builder: walks a root and records files and directories."""

from __future__ import annotations

import os
from collections import Counter
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Optional, Union

from ..config import AnalysisConfig
from ..exceptions import FatalIOError, NotFoundError
from ..logging_config import get_logger
from ..runtime import Deadline
from .file_types import classify_file_type
from .ignore import GlobPredicate, build_ignore_predicates, is_ignored
from .models import DirectoryRecord, FileRecord, ProjectStructure

logger = get_logger(__name__)


def scan(
    root_path: Union[str, Path],
    ignore_patterns: Optional[Iterable[str]] = None,
    config: Optional[AnalysisConfig] = None,
    deadline: Optional[Deadline] = None,
) -> ProjectStructure:
    """Walk ``root_path`` and build an immutable ProjectStructure.

    Args:
        root_path: Directory to scan
        ignore_patterns: Glob patterns to exclude; ``None`` uses the
            configured defaults
        config: Analysis configuration (defaults when omitted)
        deadline: Optional cancellation token checked per entry

    Returns:
        ProjectStructure with files and directories in sorted walk order

    Raises:
        NotFoundError: If the root is missing or not a directory
        FatalIOError: If the root cannot be listed
        AnalysisCancelledError: If the deadline expires mid-walk
    """
    config = config or AnalysisConfig()
    root = _validate_root(root_path)

    if ignore_patterns is None:
        ignore_patterns = config.ignore_patterns
    predicates = build_ignore_predicates(ignore_patterns, root, config.use_ignore_file)

    logger.debug(f"Scanning {root} with {len(predicates)} ignore patterns")

    walker = _Walker(root, predicates, config.follow_symlinks, deadline)
    walker.run()

    type_counts = Counter(f.type for f in walker.files)
    extensions = frozenset(f.extension for f in walker.files)

    structure = ProjectStructure(
        root=root.as_posix(),
        files=tuple(walker.files),
        directories=tuple(walker.directories),
        file_type_counts=MappingProxyType(dict(sorted(type_counts.items()))),
        extensions=extensions,
        skipped=walker.skipped,
    )
    logger.info(
        f"Scanned {structure.file_count} files in {structure.directory_count} directories"
        + (f" ({walker.skipped} skipped)" if walker.skipped else "")
    )
    return structure


def _validate_root(root_path: Union[str, Path]) -> Path:
    root = Path(root_path).expanduser()
    if not root.exists():
        raise NotFoundError(root, "path does not exist")
    if not root.is_dir():
        raise NotFoundError(root, "not a directory")
    if not os.access(root, os.R_OK | os.X_OK):
        raise FatalIOError(root, "permission denied")
    return root.resolve()


class _Walker:
    """Depth-first, name-sorted walk with directory pruning."""

    def __init__(
        self,
        root: Path,
        predicates: tuple[GlobPredicate, ...],
        follow_symlinks: bool,
        deadline: Optional[Deadline],
    ):
        self.root = root
        self.predicates = predicates
        self.follow_symlinks = follow_symlinks
        self.deadline = deadline
        self.files: list[FileRecord] = []
        self.directories: list[DirectoryRecord] = []
        self.skipped = 0
        self._visited_real: set[str] = set()

    def run(self) -> None:
        try:
            entries = self._list(self.root)
        except OSError as e:
            raise FatalIOError(self.root, f"cannot list directory: {e}")
        self._visited_real.add(os.path.realpath(self.root))

        # Explicit stack of sorted entry lists keeps the walk iterative
        stack: list[list[os.DirEntry]] = [list(reversed(entries))]
        while stack:
            frame = stack[-1]
            if not frame:
                stack.pop()
                continue
            entry = frame.pop()
            children = self._visit(entry)
            if children:
                stack.append(list(reversed(children)))

    def _list(self, directory: Path) -> list[os.DirEntry]:
        with os.scandir(directory) as it:
            return sorted(it, key=lambda e: e.name)

    def _visit(self, entry: os.DirEntry) -> Optional[list[os.DirEntry]]:
        """Record one entry; return its children when it is a directory."""
        if self.deadline is not None:
            self.deadline.check("scan")

        abs_path = Path(entry.path)
        rel_path = abs_path.relative_to(self.root).as_posix()

        if is_ignored(rel_path, self.predicates):
            return None

        try:
            if entry.is_symlink() and not self.follow_symlinks:
                logger.debug(f"Not following symlink: {rel_path}")
                return None
            is_dir = entry.is_dir(follow_symlinks=self.follow_symlinks)
            stats = entry.stat(follow_symlinks=self.follow_symlinks)
        except OSError as e:
            logger.warning(f"Cannot stat {rel_path}: {e}")
            self.skipped += 1
            return None

        parent = abs_path.parent.as_posix()

        if is_dir:
            real = os.path.realpath(entry.path)
            if real in self._visited_real:
                logger.debug(f"Skipping already visited directory: {rel_path}")
                return None
            self._visited_real.add(real)

            self.directories.append(
                DirectoryRecord(
                    path=abs_path.as_posix(),
                    relative_path=rel_path,
                    name=entry.name,
                    depth=len(rel_path.split("/")),
                    parent_path=parent,
                )
            )
            try:
                return self._list(abs_path)
            except OSError as e:
                logger.warning(f"Cannot list {rel_path}: {e}")
                self.skipped += 1
                return None

        suffix = Path(entry.name).suffix
        self.files.append(
            FileRecord(
                path=abs_path.as_posix(),
                relative_path=rel_path,
                name=entry.name,
                extension=suffix[1:] if suffix else "",
                size=stats.st_size,
                type=classify_file_type(entry.name),
                modified_time=stats.st_mtime,
                parent_path=parent,
            )
        )
        return None
