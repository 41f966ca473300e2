"""Expands command line patterns into concrete Go source files."""

from __future__ import annotations

import glob
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, List

from .errors import DirWalkError, GlobError
from .logging import get_logger

SOURCE_SUFFIX = ".go"
RECURSIVE_MARKER = "..."
_MAGIC_CHARS = frozenset("*?[")

logger = get_logger("resolver")


@dataclass
class ResolvedPattern:
    """Files matched by one pattern plus any subtrees that could not be walked."""

    pattern: str
    files: List[Path] = field(default_factory=list)
    errors: List[DirWalkError] = field(default_factory=list)


class PatternResolver:
    """Turns file, glob, directory and ``dir/...`` patterns into file lists."""

    def __init__(self, suffix: str = SOURCE_SUFFIX) -> None:
        self.suffix = suffix

    def resolve(self, pattern: str) -> ResolvedPattern:
        if pattern.endswith(RECURSIVE_MARKER):
            return self._resolve_recursive(pattern)

        _check_pattern(pattern)
        resolved = ResolvedPattern(pattern=pattern)
        literal = not any(char in _MAGIC_CHARS for char in pattern)
        for match in sorted(glob.glob(pattern, include_hidden=True)):
            path = Path(match)
            if literal and path.is_dir():
                resolved.files.extend(self._dir_files(path))
            elif self._is_source(path):
                resolved.files.append(path)

        if not resolved.files:
            directory = Path(pattern.rstrip("/") or "/")
            if directory.is_dir() and not literal:
                resolved.files.extend(self._dir_files(directory))
        logger.debug("Pattern %s matched %d files", pattern, len(resolved.files))
        return resolved

    def _resolve_recursive(self, pattern: str) -> ResolvedPattern:
        root = pattern[: -len(RECURSIVE_MARKER)]
        if root.endswith("/"):
            root = root[:-1]
        resolved = ResolvedPattern(pattern=pattern)
        walked = self._walk(Path(root or "."), resolved.errors)
        # Depth-first in lexical order, the way a sorted directory walk visits files.
        resolved.files.extend(sorted(walked, key=lambda path: path.parts))
        logger.debug("Pattern %s matched %d files recursively", pattern, len(resolved.files))
        return resolved

    def _walk(self, root: Path, errors: List[DirWalkError]) -> Iterator[Path]:
        def _on_error(exc: OSError) -> None:
            errors.append(DirWalkError(exc.filename or root, exc.strerror or exc))

        for dirpath, dirnames, filenames in os.walk(root, onerror=_on_error):
            dirnames.sort()
            current_dir = Path(dirpath)
            for filename in sorted(filenames):
                path = current_dir / filename
                if self._is_source(path):
                    yield path

    def _dir_files(self, directory: Path) -> List[Path]:
        return sorted(
            Path(match)
            for match in glob.glob(
                os.path.join(glob.escape(str(directory)), f"*{self.suffix}"), include_hidden=True
            )
            if Path(match).is_file()
        )

    def _is_source(self, path: Path) -> bool:
        return path.name.endswith(self.suffix) and not path.is_dir()


def _check_pattern(pattern: str) -> None:
    """Reject character classes that are never closed."""
    index = 0
    while index < len(pattern):
        if pattern[index] == "[":
            cursor = index + 1
            if cursor < len(pattern) and pattern[cursor] in "!^":
                cursor += 1
            if cursor < len(pattern) and pattern[cursor] == "]":
                cursor += 1
            close = pattern.find("]", cursor)
            if close == -1:
                raise GlobError(pattern, "syntax error in pattern (unterminated '[')")
            index = close
        index += 1


__all__ = ["PatternResolver", "ResolvedPattern", "SOURCE_SUFFIX"]
