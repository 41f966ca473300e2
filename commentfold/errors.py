"""Error kinds reported per unit of work during a run."""

from __future__ import annotations

from pathlib import Path


class CommentFoldError(RuntimeError):
    """Base class for recoverable, per-unit failures."""


class ConfigError(CommentFoldError):
    """Raised when run options cannot be turned into a configuration."""


class ParseError(CommentFoldError):
    """Raised when a file is not syntactically valid Go source."""

    def __init__(
        self,
        path: Path | str,
        message: str,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        self.path = Path(path)
        self.line = line
        self.column = column
        location = f"{self.path}:{line}:{column}" if line is not None else str(self.path)
        super().__init__(f"Error parsing {location}: {message}")


class ReadError(CommentFoldError):
    """Raised when a source file cannot be read."""

    def __init__(self, path: Path | str, reason: object) -> None:
        self.path = Path(path)
        super().__init__(f"Error reading {self.path}: {reason}")


class WriteError(CommentFoldError):
    """Raised when rendered output cannot be written."""

    def __init__(self, path: Path | str, reason: object) -> None:
        self.path = Path(path)
        super().__init__(f"Error writing to {self.path}: {reason}")


class GlobError(CommentFoldError):
    """Raised for malformed file patterns."""

    def __init__(self, pattern: str, reason: str) -> None:
        self.pattern = pattern
        super().__init__(f"Error globbing pattern {pattern}: {reason}")


class DirWalkError(CommentFoldError):
    """Raised when a directory subtree cannot be traversed."""

    def __init__(self, path: Path | str, reason: object) -> None:
        self.path = Path(path)
        super().__init__(f"Error walking directory {self.path}: {reason}")


__all__ = [
    "CommentFoldError",
    "ConfigError",
    "DirWalkError",
    "GlobError",
    "ParseError",
    "ReadError",
    "WriteError",
]
