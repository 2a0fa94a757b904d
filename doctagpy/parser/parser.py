"""Doc comment parser: segments the token stream and dispatches tag handlers."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from doctagpy.lexer import (
    TAG_SIGIL,
    Token,
    is_tag_start,
    is_whitespace,
    line_of,
    normalize_comment,
    tag_name_of,
)
from doctagpy.parser.elements import COMMENT_TAG, CommentElement, DocElement
from doctagpy.parser.errors import DocblockError, DuplicateTagError, ParserConfigurationError
from doctagpy.parser.handlers import BASE_TAG_SPECS, COMMENT_HANDLER
from doctagpy.parser.tags import (
    TagCardinality,
    TagExtension,
    TagHandler,
    TagTable,
    handler_name,
    merge_tag_specs,
)

logger = logging.getLogger(__name__)


class DocCommentParser:
    """Parses one doc comment into a description element and tag elements.

    The base parser recognizes `@see`, `@link` (repeatable), `@deprecated`
    and `@since` (once each). Further tags are supplied through a
    `TagExtension`. Tags that are not recognized are left as plain text
    inside the segment they appear in.

    `parse()` runs once; later calls do nothing. Calling it concurrently on
    the same instance from several threads is undefined.
    """

    def __init__(self, comment: str, extension: TagExtension | None = None) -> None:
        self._source = comment
        self._extension = extension
        self._tags = merge_tag_specs(BASE_TAG_SPECS, extension)
        self._has_parsed = False
        self._tokens: list[Token] = []
        self._reset()

    @property
    def source_text(self) -> str:
        return self._source

    @property
    def extension(self) -> TagExtension | None:
        return self._extension

    @property
    def tag_table(self) -> TagTable:
        return self._tags

    @property
    def has_parsed(self) -> bool:
        return self._has_parsed

    @property
    def tokens(self) -> tuple[Token, ...]:
        return tuple(self._tokens)

    @property
    def elements(self) -> tuple[DocElement, ...]:
        """Every element in document order."""
        return tuple(self._elements)

    @property
    def comment(self) -> CommentElement | None:
        return self._comment_element

    @property
    def sees(self) -> tuple[DocElement, ...]:
        return self.multiple("see")

    @property
    def links(self) -> tuple[DocElement, ...]:
        return self.multiple("link")

    @property
    def deprecated(self) -> DocElement | None:
        return self.single("deprecated")

    @property
    def since(self) -> DocElement | None:
        return self.single("since")

    def single(self, tag: str) -> DocElement | None:
        """Element of a once-only tag, or `None` when the tag is absent."""
        self._require_cardinality(tag, TagCardinality.SINGLE)
        return self._single.get(tag)

    def multiple(self, tag: str) -> tuple[DocElement, ...]:
        """Elements of a repeatable tag in source order."""
        self._require_cardinality(tag, TagCardinality.MULTIPLE)
        return tuple(self._multiple.get(tag, ()))

    def parse(self) -> None:
        """Parse the comment.

        Raises `DuplicateTagError` when a once-only tag occurs twice and
        `ParserConfigurationError` when a tag handler is missing or broken.
        A failed parse leaves the parser unparsed, so a later call starts over.
        """
        if self._has_parsed:
            return

        self._reset()
        self._tokens = normalize_comment(self._source)
        logger.debug("Parsing doc comment: %d tokens, %d known tags", len(self._tokens), len(self._tags))
        try:
            self._parse_tokens(self._tokens)
        except DocblockError:
            self._reset()
            raise
        self._has_parsed = True
        logger.debug("Parsed doc comment into %d elements", len(self._elements))

    def line_of(self, position: int) -> int:
        """1-based line of the token at `position` in the normalized token list."""
        return line_of(self._tokens, position)

    def _reset(self) -> None:
        self._elements: list[DocElement] = []
        self._previous_element: DocElement | None = None
        self._comment_element: CommentElement | None = None
        self._single: dict[str, DocElement] = {}
        self._multiple: dict[str, list[DocElement]] = {}

    def _parse_tokens(self, tokens: Sequence[Token]) -> None:
        found_tags: set[str] = set()
        previous_tag_position: int | None = None
        saw_non_whitespace = False

        for position, token in enumerate(tokens):
            if not is_whitespace(token):
                saw_non_whitespace = True
            if not is_tag_start(token):
                continue

            tag = tag_name_of(token)
            spec = self._tags.get(tag)
            if spec is None:
                continue

            if not spec.allow_multiple and tag in found_tags:
                raise DuplicateTagError(tag, line_of(tokens, position))
            found_tags.add(tag)

            self._flush_segment(tokens, previous_tag_position, position)
            previous_tag_position = position

        # The last segment is only flushed when the comment has any content.
        if saw_non_whitespace:
            self._flush_segment(tokens, previous_tag_position, len(tokens))

    def _flush_segment(self, tokens: Sequence[Token], tag_position: int | None, end: int) -> None:
        if tag_position is None:
            self._dispatch(COMMENT_TAG, tokens[:end])
            return
        self._dispatch(tag_name_of(tokens[tag_position]), tokens[tag_position + 1 : end])

    def _dispatch(self, tag: str, segment: Sequence[Token]) -> None:
        handler = self._resolve_handler(tag)
        element = handler(tuple(segment), self._previous_element)
        if not isinstance(element, DocElement):
            raise ParserConfigurationError(
                f"Handler {handler_name(tag)} must return a DocElement, got {type(element).__name__}"
            )

        logger.debug("Dispatched %s segment (%d tokens) to %s", tag, len(segment), handler_name(tag))
        self._store(tag, element)
        self._elements.append(element)
        self._previous_element = element

    def _resolve_handler(self, tag: str) -> TagHandler:
        if tag == COMMENT_TAG:
            return COMMENT_HANDLER
        spec = self._tags.get(tag)
        if spec is None or spec.handler is None:
            raise ParserConfigurationError(
                f"Handler {handler_name(tag)} must be supplied to process {TAG_SIGIL}{tag} tags"
            )
        return spec.handler

    def _store(self, tag: str, element: DocElement) -> None:
        if tag == COMMENT_TAG:
            if self._comment_element is not None or not isinstance(element, CommentElement):
                raise ParserConfigurationError("Doc comment description must be stored exactly once")
            self._comment_element = element
            return

        if self._tags.is_single(tag):
            if tag in self._single:
                raise ParserConfigurationError(f"Slot for {TAG_SIGIL}{tag} was filled twice")
            self._single[tag] = element
            return

        self._multiple.setdefault(tag, []).append(element)

    def _require_cardinality(self, tag: str, cardinality: TagCardinality) -> None:
        spec = self._tags.get(tag)
        if spec is None:
            raise KeyError(f"Tag `{tag}` is not recognized by this parser")
        if spec.cardinality != cardinality:
            raise ValueError(f"Tag `{tag}` is {spec.cardinality}, not {cardinality}")
