"""Tests for comment lowercasing."""

from __future__ import annotations

import pytest

from commentfold.engine.parser import parse_source
from commentfold.engine.scope import classify
from commentfold.engine.transform import fold_case, lowercase_comment, transform_tree
from commentfold.render import render_source
from tests._fixtures.source_builder import LOWERCASED_SAMPLE, SAMPLE_SOURCE


@pytest.mark.parametrize(
    ("comment", "expected"),
    [
        ("// Hello World", "// hello world"),
        ("//NoSpace", "//nospace"),
        ("/* Hello World */", "/* hello world */"),
        ("/* First Line\n   Second LINE */", "/* first line\n   second line */"),
        ("/**/", "/**/"),
        ("// already lower", "// already lower"),
    ],
)
def test_lowercase_comment_preserves_delimiters(comment: str, expected: str) -> None:
    assert lowercase_comment(comment) == expected


@pytest.mark.parametrize("malformed", ["# Hash Comment", "/* Unterminated", "/*/", "Plain Text"])
def test_lowercase_comment_leaves_unrecognised_forms_alone(malformed: str) -> None:
    assert lowercase_comment(malformed) == malformed


def test_lowercase_comment_is_idempotent() -> None:
    once = lowercase_comment("/* MiXeD Case */")
    assert lowercase_comment(once) == once


def test_transform_tree_rewrites_only_in_function_comments() -> None:
    tree = parse_source(SAMPLE_SOURCE, "sample.go")

    updated, result = transform_tree(tree)

    assert result.inside_comments == 5
    assert result.modified_comments == 5
    assert result.modified
    assert render_source(updated).decode("utf-8") == LOWERCASED_SAMPLE


def test_transform_tree_does_not_mutate_input_tree() -> None:
    tree = parse_source(SAMPLE_SOURCE)
    before = tree.comments

    transform_tree(tree)

    assert tree.comments == before
    assert not tree.modified


def test_transform_tree_flags_nothing_for_lowercase_comments() -> None:
    source = "package main\n\nfunc main() {\n\t// already quiet\n\t/* also quiet */\n}\n"
    updated, result = transform_tree(parse_source(source))

    assert result.inside_comments == 2
    assert result.modified_comments == 0
    assert not result.modified
    assert not updated.modified


def test_transform_is_idempotent_across_reparse() -> None:
    first, _ = transform_tree(parse_source(SAMPLE_SOURCE))
    rendered = render_source(first)

    second, result = transform_tree(parse_source(rendered))

    assert not result.modified
    assert render_source(second) == rendered


def test_fold_case_lowers_one_code_point_per_character() -> None:
    assert fold_case("İSTANBUL") == "istanbul"
    assert fold_case("ΣΑΣ") == "σασ"
    assert lowercase_comment("// İSTANBUL ΣΑΣ") == "// istanbul σασ"
    assert lowercase_comment("/* ÉCOLE Straße */") == "/* école straße */"


def test_fold_case_is_idempotent_for_unicode() -> None:
    once = fold_case("İ Σ Ω ÀÉ")
    assert fold_case(once) == once
    assert len(once) == len("İ Σ Ω ÀÉ")


def test_transform_tree_rewrites_exactly_the_classified_comments() -> None:
    tree = parse_source(SAMPLE_SOURCE)
    inside = {comment.start for comment in classify(tree)}

    updated, result = transform_tree(tree)

    assert result.inside_comments == len(inside)
    for before, after in zip(tree.comments, updated.comments):
        assert after.modified == (before.start in inside)
