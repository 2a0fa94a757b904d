"""Parser for class and file-level doc comments."""

from __future__ import annotations

from functools import partial
from typing import Final, cast

from doctagpy.lexer import Token
from doctagpy.parser.elements import DocElement, PairElement, SingleElement
from doctagpy.parser.parser import DocCommentParser
from doctagpy.parser.tags import TagCardinality, TagExtension, TagSpec


def process_single_value(tag: str, tokens: tuple[Token, ...], previous: DocElement | None) -> SingleElement:
    return SingleElement(tokens=tokens, previous=previous, tag=tag)


def process_license(tokens: tuple[Token, ...], previous: DocElement | None) -> PairElement:
    # `@license <url> <name>`
    return PairElement(tokens=tokens, previous=previous, tag="license")


def _single_value_spec(name: str, cardinality: TagCardinality) -> TagSpec:
    return TagSpec(name, cardinality, partial(process_single_value, name))


CLASS_COMMENT_TAGS: Final[TagExtension] = TagExtension.of(
    _single_value_spec("category", TagCardinality.SINGLE),
    _single_value_spec("package", TagCardinality.SINGLE),
    _single_value_spec("subpackage", TagCardinality.SINGLE),
    _single_value_spec("author", TagCardinality.MULTIPLE),
    _single_value_spec("copyright", TagCardinality.MULTIPLE),
    TagSpec("license", TagCardinality.SINGLE, process_license),
    _single_value_spec("version", TagCardinality.SINGLE),
)


class ClassCommentParser(DocCommentParser):
    """Adds the package/ownership tags used on class and file comments."""

    def __init__(self, comment: str) -> None:
        super().__init__(comment, CLASS_COMMENT_TAGS)

    @property
    def category(self) -> SingleElement | None:
        return cast(SingleElement | None, self.single("category"))

    @property
    def package(self) -> SingleElement | None:
        return cast(SingleElement | None, self.single("package"))

    @property
    def subpackage(self) -> SingleElement | None:
        return cast(SingleElement | None, self.single("subpackage"))

    @property
    def authors(self) -> tuple[SingleElement, ...]:
        return cast(tuple[SingleElement, ...], self.multiple("author"))

    @property
    def copyrights(self) -> tuple[SingleElement, ...]:
        return cast(tuple[SingleElement, ...], self.multiple("copyright"))

    @property
    def license(self) -> PairElement | None:
        return cast(PairElement | None, self.single("license"))

    @property
    def version(self) -> SingleElement | None:
        return cast(SingleElement | None, self.single("version"))
