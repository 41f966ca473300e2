"""Comment text rewriting."""

from __future__ import annotations

from typing import List, Tuple

from ..models import CommentToken, FileResult, SourceTree
from .scope import classify

_LINE_PREFIX = "//"
_BLOCK_PREFIX = "/*"
_BLOCK_SUFFIX = "*/"


def _fold_char(char: str) -> str:
    lowered = char.lower()
    # "İ".lower() expands to "i" plus a combining dot; keep one code point per character.
    return lowered if len(lowered) == 1 else lowered[0]


def fold_case(text: str) -> str:
    """Lowercase ``text`` one code point at a time, without context rules."""
    return "".join(_fold_char(char) for char in text)


def lowercase_comment(comment: str) -> str:
    """Lowercase a comment's text, keeping its ``//`` or ``/* */`` delimiters."""
    if comment.startswith(_LINE_PREFIX):
        return _LINE_PREFIX + fold_case(comment[len(_LINE_PREFIX) :])
    if (
        comment.startswith(_BLOCK_PREFIX)
        and comment.endswith(_BLOCK_SUFFIX)
        and len(comment) >= len(_BLOCK_PREFIX) + len(_BLOCK_SUFFIX)
    ):
        interior = comment[len(_BLOCK_PREFIX) : -len(_BLOCK_SUFFIX)]
        return _BLOCK_PREFIX + fold_case(interior) + _BLOCK_SUFFIX
    return comment


def transform_tree(tree: SourceTree) -> Tuple[SourceTree, FileResult]:
    """Lowercase every in-function comment, returning the updated tree and a result."""
    inside = set(classify(tree))
    result = FileResult(path=tree.path, inside_comments=len(inside))
    comments: List[CommentToken] = []
    for comment in tree.comments:
        if comment in inside:
            updated = comment.replace_text(lowercase_comment(comment.text))
            if updated is not comment:
                result.modified_comments += 1
            comments.append(updated)
        else:
            comments.append(comment)
    return tree.with_comments(tuple(comments)), result


__all__ = ["fold_case", "lowercase_comment", "transform_tree"]
