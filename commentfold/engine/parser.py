"""Tree-sitter powered Go source parser."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator, List, Optional

import tree_sitter_go
from tree_sitter import Language, Node, Parser

from ..errors import ParseError, ReadError
from ..logging import get_logger
from ..models import CommentToken, SourceTree

GO_LANGUAGE = Language(tree_sitter_go.language())

_COMMENT_NODE = "comment"
_PACKAGE_NODE = "package_clause"

logger = get_logger("engine.parser")


class GoParser:
    """Turns Go source into a ``SourceTree`` with every comment attached."""

    def __init__(self) -> None:
        self._parser = Parser(GO_LANGUAGE)

    def parse(self, source: bytes, path: Path | str = "<source>") -> SourceTree:
        path = Path(path)
        try:
            source.decode("utf-8")
        except UnicodeDecodeError as exc:
            line = source.count(b"\n", 0, exc.start) + 1
            raise ParseError(path, "invalid UTF-8 encoding", line=line, column=_column(source, exc.start)) from exc

        tree = self._parser.parse(source)
        root = tree.root_node
        if root.has_error:
            bad = _first_error(root)
            if bad is not None:
                row, col = bad.start_point[0], bad.start_point[1]
                what = f"missing {bad.type}" if bad.is_missing else "syntax error"
                raise ParseError(path, what, line=row + 1, column=col + 1)
            raise ParseError(path, "syntax error")
        if not any(child.type == _PACKAGE_NODE for child in root.named_children):
            raise ParseError(path, "expected 'package' clause", line=1, column=1)

        comments = tuple(_collect_comments(root, source))
        logger.debug("Parsed %s: %d comments", path, len(comments))
        return SourceTree(path=path, source=source, tree=tree, comments=comments)

    def parse_file(self, path: Path | str) -> SourceTree:
        path = Path(path)
        try:
            source = path.read_bytes()
        except OSError as exc:
            raise ReadError(path, exc.strerror or exc) from exc
        return self.parse(source, path)


_default_parser: Optional[GoParser] = None


def _shared_parser() -> GoParser:
    global _default_parser
    if _default_parser is None:
        _default_parser = GoParser()
    return _default_parser


def parse_source(source: bytes | str, path: Path | str = "<source>") -> SourceTree:
    """Parse ``source`` into a ``SourceTree``; raises ``ParseError`` on invalid Go."""
    if isinstance(source, str):
        source = source.encode("utf-8")
    return _shared_parser().parse(source, path)


def parse_file(path: Path | str) -> SourceTree:
    """Read and parse ``path``; raises ``ReadError`` or ``ParseError``."""
    return _shared_parser().parse_file(path)


def iter_nodes(root: Node) -> Iterator[Node]:
    """Yield ``root`` and all of its descendants in source order."""
    stack: List[Node] = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def _collect_comments(root: Node, source: bytes) -> Iterator[CommentToken]:
    for node in iter_nodes(root):
        if node.type != _COMMENT_NODE:
            continue
        yield CommentToken(
            text=source[node.start_byte : node.end_byte].decode("utf-8"),
            start=node.start_byte,
            end=node.end_byte,
            line=node.start_point[0] + 1,
        )


def _first_error(root: Node) -> Optional[Node]:
    for node in iter_nodes(root):
        if node.type == "ERROR" or node.is_missing:
            return node
    return None


def _column(source: bytes, offset: int) -> int:
    return offset - (source.rfind(b"\n", 0, offset) + 1) + 1


__all__ = ["GO_LANGUAGE", "GoParser", "iter_nodes", "parse_file", "parse_source"]
