"""Serialization of rewritten sources and output dispatch."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import List, Optional, TextIO

from .config import OutputMode
from .errors import WriteError
from .logging import get_logger
from .models import SourceTree

logger = get_logger("render")


def render_source(tree: SourceTree) -> bytes:
    """Rebuild the file bytes, splicing each comment's current text into its span."""
    chunks: List[bytes] = []
    cursor = 0
    for comment in sorted(tree.comments, key=lambda item: item.start):
        chunks.append(tree.source[cursor : comment.start])
        chunks.append(comment.text.encode("utf-8"))
        cursor = comment.end
    chunks.append(tree.source[cursor:])
    return b"".join(chunks)


def line_diff(original: str, modified: str) -> str:
    """Pair lines by position and list the ones that differ.

    This is not a longest-common-subsequence diff: line ``i`` of one side is
    only ever compared with line ``i`` of the other, and surplus tail lines
    show up as pure additions or removals.
    """
    orig_lines = original.split("\n")
    mod_lines = modified.split("\n")
    out: List[str] = []
    for index in range(max(len(orig_lines), len(mod_lines))):
        if index >= len(orig_lines):
            out.append(f"+ {mod_lines[index]}\n")
        elif index >= len(mod_lines):
            out.append(f"- {orig_lines[index]}\n")
        elif orig_lines[index] != mod_lines[index]:
            out.append(f"- {orig_lines[index]}\n")
            out.append(f"+ {mod_lines[index]}\n")
    return "".join(out)


class OutputDriver:
    """Sends a rewritten ``SourceTree`` to the configured destination."""

    def __init__(self, mode: OutputMode, stdout: Optional[TextIO] = None) -> None:
        self.mode = mode
        self._stdout = stdout

    @property
    def stdout(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    def emit(self, tree: SourceTree) -> None:
        rendered = render_source(tree)
        if self.mode is OutputMode.INPLACE:
            self._write_inplace(tree.path, rendered)
        elif self.mode is OutputMode.PRINT:
            self.stdout.write(rendered.decode("utf-8"))
            self.stdout.flush()
        elif self.mode is OutputMode.DIFF:
            self._write_diff(tree, rendered)
        else:  # pragma: no cover - OutputMode is closed
            raise ValueError(f"Unsupported output mode: {self.mode}")

    def _write_inplace(self, path: Path, rendered: bytes) -> None:
        try:
            with path.open("wb") as handle:
                handle.write(rendered)
        except OSError as exc:
            raise WriteError(path, exc.strerror or exc) from exc
        logger.debug("Wrote %d bytes to %s", len(rendered), path)
        print(f"Updated: {path}", file=self.stdout)

    def _write_diff(self, tree: SourceTree, rendered: bytes) -> None:
        original = tree.source.decode("utf-8")
        modified = rendered.decode("utf-8")
        out = self.stdout
        out.write(f"--- {tree.path} (original)\n")
        out.write(f"+++ {tree.path} (modified)\n")
        out.write(line_diff(original, modified))
        out.write("\n")
        out.flush()


__all__ = ["OutputDriver", "line_diff", "render_source"]
