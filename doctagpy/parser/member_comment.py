"""Parser for class member (property) doc comments."""

from __future__ import annotations

from typing import Final, cast

from doctagpy.lexer import Token
from doctagpy.parser.elements import DocElement, PairElement
from doctagpy.parser.parser import DocCommentParser
from doctagpy.parser.tags import TagCardinality, TagExtension, TagSpec


def process_var(tokens: tuple[Token, ...], previous: DocElement | None) -> PairElement:
    return PairElement(tokens=tokens, previous=previous, tag="var")


MEMBER_COMMENT_TAGS: Final[TagExtension] = TagExtension.of(
    TagSpec("var", TagCardinality.SINGLE, process_var),
)


class MemberCommentParser(DocCommentParser):
    def __init__(self, comment: str) -> None:
        super().__init__(comment, MEMBER_COMMENT_TAGS)

    @property
    def var(self) -> PairElement | None:
        return cast(PairElement | None, self.single("var"))
