"""Parser for function and method doc comments."""

from __future__ import annotations

from typing import Final, cast

from doctagpy.lexer import Token
from doctagpy.parser.elements import DocElement, PairElement, ParameterElement
from doctagpy.parser.parser import DocCommentParser
from doctagpy.parser.tags import TagCardinality, TagExtension, TagSpec


def process_param(tokens: tuple[Token, ...], previous: DocElement | None) -> ParameterElement:
    return ParameterElement(tokens=tokens, previous=previous, tag="param")


def process_return(tokens: tuple[Token, ...], previous: DocElement | None) -> PairElement:
    return PairElement(tokens=tokens, previous=previous, tag="return")


def process_throws(tokens: tuple[Token, ...], previous: DocElement | None) -> PairElement:
    return PairElement(tokens=tokens, previous=previous, tag="throws")


FUNCTION_COMMENT_TAGS: Final[TagExtension] = TagExtension.of(
    TagSpec("param", TagCardinality.MULTIPLE, process_param),
    TagSpec("return", TagCardinality.SINGLE, process_return),
    TagSpec("throws", TagCardinality.MULTIPLE, process_throws),
)


class FunctionCommentParser(DocCommentParser):
    """Adds `@param`, `@return` and `@throws` to the base tags."""

    def __init__(self, comment: str) -> None:
        super().__init__(comment, FUNCTION_COMMENT_TAGS)

    @property
    def params(self) -> tuple[ParameterElement, ...]:
        return cast(tuple[ParameterElement, ...], self.multiple("param"))

    @property
    def return_(self) -> PairElement | None:
        return cast(PairElement | None, self.single("return"))

    @property
    def throws(self) -> tuple[PairElement, ...]:
        return cast(tuple[PairElement, ...], self.multiple("throws"))
