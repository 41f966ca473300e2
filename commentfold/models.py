"""Core data models shared across commentfold components."""

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, List, Optional, Tuple


@dataclass(frozen=True)
class CommentToken:
    """One comment occurrence, delimiters included."""

    text: str
    start: int
    end: int
    line: int
    modified: bool = False

    def replace_text(self, text: str) -> "CommentToken":
        """Return a copy carrying ``text``; flagged modified only if it differs."""
        if text == self.text:
            return self
        return replace(self, text=text, modified=True)


@dataclass(frozen=True)
class FunctionSpan:
    """Byte range of a function body, from its opening to its closing brace."""

    start: int
    end: int
    kind: str = "function_declaration"

    def contains(self, offset: int) -> bool:
        return self.start <= offset <= self.end


@dataclass(frozen=True)
class SourceTree:
    """Parsed view of one file: original bytes, syntax tree and comments."""

    path: Path
    source: bytes
    tree: Any
    comments: Tuple[CommentToken, ...] = ()

    def with_comments(self, comments: Tuple[CommentToken, ...]) -> "SourceTree":
        return replace(self, comments=tuple(comments))

    @property
    def modified(self) -> bool:
        return any(comment.modified for comment in self.comments)


@dataclass
class FileResult:
    """Outcome of processing a single file."""

    path: Path
    inside_comments: int = 0
    modified_comments: int = 0
    error: Optional[str] = None

    @property
    def modified(self) -> bool:
        return self.modified_comments > 0


@dataclass
class RunSummary:
    """Totals across every file handled in a run."""

    processed: int = 0
    modified: int = 0
    failures: List[str] = field(default_factory=list)

    def record(self, result: FileResult) -> None:
        self.processed += 1
        if result.error is not None:
            self.failures.append(result.error)
        elif result.modified:
            self.modified += 1
