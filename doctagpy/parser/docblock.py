"""High-level parse entrypoints for doc comment text."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from doctagpy.parser.class_comment import ClassCommentParser
from doctagpy.parser.errors import DuplicateTagError
from doctagpy.parser.function_comment import FunctionCommentParser
from doctagpy.parser.member_comment import MemberCommentParser
from doctagpy.parser.options import CommentKind, ParserOptions
from doctagpy.parser.parser import DocCommentParser

if TYPE_CHECKING:
    from doctagpy.pipeline import DocblockParseResult

logger = logging.getLogger(__name__)


def _resolve_options(
    options: ParserOptions | None,
    kind: CommentKind | None,
) -> ParserOptions:
    if kind is not None and options is not None:
        raise ValueError("Pass either options or kind, not both")

    if options is not None:
        return options

    if kind is not None:
        return ParserOptions.for_kind(kind)

    return ParserOptions()


def create_parser(text: str, options: ParserOptions) -> DocCommentParser:
    match options.kind:
        case CommentKind.FUNCTION:
            return FunctionCommentParser(text)
        case CommentKind.MEMBER:
            return MemberCommentParser(text)
        case CommentKind.CLASS:
            return ClassCommentParser(text)
        case _:
            return DocCommentParser(text, options.extension)


def parse_docblock(
    text: str,
    options: ParserOptions | None = None,
    *,
    kind: CommentKind | None = None,
) -> DocCommentParser:
    """Build and run the parser for `text`; parser errors propagate."""
    resolved_options = _resolve_options(options=options, kind=kind)
    parser = create_parser(text, resolved_options)
    parser.parse()
    return parser


def parse_result(
    text: str,
    options: ParserOptions | None = None,
    *,
    kind: CommentKind | None = None,
) -> DocblockParseResult:
    """Parse `text`, reporting a repeated once-only tag as a diagnostic.

    Configuration errors are not converted; they indicate a broken parser.
    """
    from doctagpy.pipeline import DocblockParseResult

    resolved_options = _resolve_options(options=options, kind=kind)
    parser = create_parser(text, resolved_options)
    try:
        parser.parse()
    except DuplicateTagError as exc:
        logger.debug("Doc comment rejected: %s", exc)
        return DocblockParseResult(
            source_text=text,
            parser=parser,
            options=resolved_options,
            diagnostics=(exc.to_diagnostic(),),
        )

    return DocblockParseResult(
        source_text=text,
        parser=parser,
        options=resolved_options,
    )


def parse_results(
    texts: Iterable[str],
    options: ParserOptions | None = None,
    *,
    kind: CommentKind | None = None,
) -> list[DocblockParseResult]:
    """Parse several doc comments independently of one another."""
    resolved_options = _resolve_options(options=options, kind=kind)
    return [parse_result(text, options=resolved_options) for text in texts]
