"""Classifies comments by whether they sit inside a function body."""

from __future__ import annotations

from typing import Iterable, List, Sequence

from ..models import CommentToken, FunctionSpan, SourceTree
from .parser import iter_nodes

FUNCTION_NODE_TYPES = frozenset({"function_declaration", "method_declaration", "func_literal"})


def function_spans(tree: SourceTree) -> List[FunctionSpan]:
    """Return the body span of every function-like declaration that has a body."""
    spans: List[FunctionSpan] = []
    for node in iter_nodes(tree.tree.root_node):
        if node.type not in FUNCTION_NODE_TYPES:
            continue
        body = node.child_by_field_name("body")
        if body is None:
            continue
        # block nodes run from "{" through "}"; end_byte is one past the brace.
        spans.append(FunctionSpan(start=body.start_byte, end=body.end_byte - 1, kind=node.type))
    return spans


def is_inside_function(comment: CommentToken, spans: Iterable[FunctionSpan]) -> bool:
    return any(span.contains(comment.start) for span in spans)


def classify(tree: SourceTree, spans: Sequence[FunctionSpan] | None = None) -> List[CommentToken]:
    """Return the comments of ``tree`` that fall inside some function body."""
    if spans is None:
        spans = function_spans(tree)
    return [comment for comment in tree.comments if is_inside_function(comment, spans)]


__all__ = ["FUNCTION_NODE_TYPES", "classify", "function_spans", "is_inside_function"]
