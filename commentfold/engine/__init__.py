"""Comment-location engine: parsing, scope classification and rewriting."""

from __future__ import annotations

from .parser import GO_LANGUAGE, GoParser, iter_nodes, parse_file, parse_source
from .scope import FUNCTION_NODE_TYPES, classify, function_spans, is_inside_function
from .transform import fold_case, lowercase_comment, transform_tree

__all__ = [
    "FUNCTION_NODE_TYPES",
    "GO_LANGUAGE",
    "GoParser",
    "classify",
    "fold_case",
    "function_spans",
    "is_inside_function",
    "iter_nodes",
    "lowercase_comment",
    "parse_file",
    "parse_source",
    "transform_tree",
]
