"""Per-file pipeline and run loop."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional, Sequence, TextIO

from .config import RunConfig
from .engine import GoParser, transform_tree
from .errors import CommentFoldError, GlobError
from .logging import get_logger
from .models import FileResult, RunSummary
from .render import OutputDriver
from .resolver import PatternResolver

DEFAULT_PATTERNS: Sequence[str] = (".",)


class CommentProcessor:
    """Runs parse, classify, rewrite and output for each file in turn."""

    def __init__(
        self,
        config: RunConfig,
        *,
        stdout: Optional[TextIO] = None,
        parser: Optional[GoParser] = None,
        resolver: Optional[PatternResolver] = None,
    ) -> None:
        self.config = config
        self.logger = get_logger("processor")
        self._parser = parser or GoParser()
        self._resolver = resolver or PatternResolver()
        self._driver = OutputDriver(config.mode, stdout=stdout)

    def process_file(self, path: Path | str) -> FileResult:
        """Rewrite one file; failures are logged and recorded, never raised."""
        path = Path(path)
        try:
            tree = self._parser.parse_file(path)
            updated, result = transform_tree(tree)
            if not result.modified:
                self.logger.debug("No comment changes in %s", path)
                return result
            self._driver.emit(updated)
        except CommentFoldError as exc:
            self.logger.error("%s", exc)
            return FileResult(path=path, error=str(exc))
        self.logger.debug(
            "Rewrote %d of %d in-function comments in %s",
            result.modified_comments,
            result.inside_comments,
            path,
        )
        return result

    def process_pattern(self, pattern: str, summary: Optional[RunSummary] = None) -> RunSummary:
        summary = summary if summary is not None else RunSummary()
        try:
            resolved = self._resolver.resolve(pattern)
        except GlobError as exc:
            self.logger.error("%s", exc)
            summary.failures.append(str(exc))
            return summary
        for error in resolved.errors:
            self.logger.error("%s", error)
            summary.failures.append(str(error))
        for path in resolved.files:
            summary.record(self.process_file(path))
        return summary

    def run(self, patterns: Iterable[str] | None = None) -> RunSummary:
        """Process every pattern in order, defaulting to the current directory."""
        patterns = list(patterns or DEFAULT_PATTERNS)
        summary = RunSummary()
        self.logger.debug("Starting run over %d pattern(s) in %s mode", len(patterns), self.config.mode.value)
        for pattern in patterns:
            self.process_pattern(pattern, summary)
        self.logger.debug(
            "Processed %d files, modified %d, %d failures",
            summary.processed,
            summary.modified,
            len(summary.failures),
        )
        return summary


__all__ = ["CommentProcessor", "DEFAULT_PATTERNS"]
