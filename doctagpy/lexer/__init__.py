"""Docblock lexer."""

from doctagpy.lexer.normalizer import (
    CLOSE_MARKER,
    CONTINUATION_MARKER,
    OPEN_MARKER,
    dump_tokens,
    line_of,
    normalize_comment,
    split_comment_lines,
    strip_comment_markers,
    tokenize_line,
)
from doctagpy.lexer.tokens import (
    TAG_SIGIL,
    Token,
    TokenKind,
    is_tag_start,
    is_whitespace,
    tag_name_of,
    token_kind,
)

__all__ = [
    "CLOSE_MARKER",
    "CONTINUATION_MARKER",
    "OPEN_MARKER",
    "TAG_SIGIL",
    "Token",
    "TokenKind",
    "dump_tokens",
    "is_tag_start",
    "is_whitespace",
    "line_of",
    "normalize_comment",
    "split_comment_lines",
    "strip_comment_markers",
    "tag_name_of",
    "token_kind",
    "tokenize_line",
]
