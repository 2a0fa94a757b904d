"""Centralized doc comment cases used across normalizer/parser tests."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, TypeAlias, cast


@dataclass(frozen=True, slots=True)
class DocblockCase:
    name: str
    source: str
    element_tags: tuple[str, ...] = ()
    duplicate_line: int | None = None


DOCBLOCK_CASES: tuple[DocblockCase, ...] = (
    DocblockCase(
        name="description_only",
        source="/**\n * Just a description.\n */",
        element_tags=("comment",),
    ),
    DocblockCase(
        name="description_and_tags",
        source=(
            "/**\n"
            " * Returns the thing.\n"
            " *\n"
            " * Longer text here.\n"
            " *\n"
            " * @see Foo::bar()\n"
            " * @see Baz\n"
            " * @since 1.0\n"
            " */"
        ),
        element_tags=("comment", "see", "see", "since"),
    ),
    DocblockCase(
        name="tags_without_description",
        source="/**\n * @since 1.0\n * @deprecated Use bar() instead.\n */",
        element_tags=("comment", "since", "deprecated"),
    ),
    DocblockCase(
        name="unknown_tags_stay_in_segment",
        source="/**\n * Uses @bogus inline.\n * @see Other\n * @todo later\n */",
        element_tags=("comment", "see"),
    ),
    DocblockCase(
        name="repeated_links",
        source="/**\n * @link https://a.example\n * @link https://b.example\n */",
        element_tags=("comment", "link", "link"),
    ),
    DocblockCase(
        name="tag_on_opening_line",
        source="/** @see Foo\n */",
        element_tags=("comment", "see"),
    ),
    DocblockCase(
        name="blank_docblock",
        source="/**\n *\n */",
    ),
    DocblockCase(
        name="whitespace_only",
        source="   \n\t\n",
    ),
    DocblockCase(
        name="duplicate_since",
        source="/**\n * Desc.\n * @since 1.0\n * @since 2.0\n */",
        duplicate_line=4,
    ),
    DocblockCase(
        name="duplicate_deprecated_after_sees",
        source="/**\n * @deprecated\n * @see A\n * @see B\n *\n * @deprecated again\n */",
        duplicate_line=6,
    ),
)

VALID_CASES: tuple[DocblockCase, ...] = tuple(case for case in DOCBLOCK_CASES if case.duplicate_line is None)
DUPLICATE_CASES: tuple[DocblockCase, ...] = tuple(case for case in DOCBLOCK_CASES if case.duplicate_line is not None)

CaseName: TypeAlias = Literal[
    "description_only",
    "description_and_tags",
    "tags_without_description",
    "unknown_tags_stay_in_segment",
    "repeated_links",
    "tag_on_opening_line",
    "blank_docblock",
    "whitespace_only",
    "duplicate_since",
    "duplicate_deprecated_after_sees",
]

CASE_BY_NAME: dict[CaseName, DocblockCase] = cast(
    dict[CaseName, DocblockCase],
    {case.name: case for case in DOCBLOCK_CASES},
)


def case_source(name: CaseName) -> str:
    return CASE_BY_NAME[name].source


def case_id(case: DocblockCase) -> str:
    return case.name
