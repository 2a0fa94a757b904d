"""Built-in handlers for the description and the common tags."""

from __future__ import annotations

from typing import Final

from doctagpy.lexer import Token
from doctagpy.parser.elements import COMMENT_TAG, CommentElement, DocElement, SingleElement
from doctagpy.parser.tags import TagCardinality, TagHandler, TagSpec


def process_comment(tokens: tuple[Token, ...], previous: DocElement | None) -> CommentElement:
    return CommentElement(tokens=tokens, previous=previous, tag=COMMENT_TAG)


def process_see(tokens: tuple[Token, ...], previous: DocElement | None) -> SingleElement:
    return SingleElement(tokens=tokens, previous=previous, tag="see")


def process_link(tokens: tuple[Token, ...], previous: DocElement | None) -> SingleElement:
    return SingleElement(tokens=tokens, previous=previous, tag="link")


def process_deprecated(tokens: tuple[Token, ...], previous: DocElement | None) -> SingleElement:
    return SingleElement(tokens=tokens, previous=previous, tag="deprecated")


def process_since(tokens: tuple[Token, ...], previous: DocElement | None) -> SingleElement:
    return SingleElement(tokens=tokens, previous=previous, tag="since")


COMMENT_HANDLER: Final[TagHandler] = process_comment

BASE_TAG_SPECS: Final[tuple[TagSpec, ...]] = (
    TagSpec("see", TagCardinality.MULTIPLE, process_see),
    TagSpec("link", TagCardinality.MULTIPLE, process_link),
    TagSpec("deprecated", TagCardinality.SINGLE, process_deprecated),
    TagSpec("since", TagCardinality.SINGLE, process_since),
)

BASE_TAG_NAMES: Final[frozenset[str]] = frozenset(spec.name for spec in BASE_TAG_SPECS)
