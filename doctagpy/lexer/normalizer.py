"""Comment normalizer: strips docblock decoration and splits words from whitespace."""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import Final

from doctagpy.lexer.tokens import Token, token_kind

OPEN_MARKER: Final[str] = "/**"
CLOSE_MARKER: Final[str] = "*/"
CONTINUATION_MARKER: Final[str] = "*"

_WHITESPACE_RUN: Final[re.Pattern[str]] = re.compile(r"(\s+)")


def split_comment_lines(raw_comment: str) -> list[str]:
    return raw_comment.split("\n")


def strip_comment_markers(line: str) -> str:
    """Trim a physical line and remove at most one comment marker from it.

    Markers are checked in priority order: the opening `/**`, the closing
    `*/`, then a single leading `*`.
    """
    line = line.strip()
    if line.startswith(OPEN_MARKER):
        return line[len(OPEN_MARKER) :]
    if line.endswith(CLOSE_MARKER):
        return line[: -len(CLOSE_MARKER)]
    if line and line[0] == CONTINUATION_MARKER:
        return line[1:]
    return line


def tokenize_line(line: str) -> list[Token]:
    # The appended newline keeps one line-break token per physical line.
    return [part for part in _WHITESPACE_RUN.split(line + "\n") if part]


def normalize_comment(raw_comment: str) -> list[Token]:
    """Turn a raw docblock into one ordered token list for the whole comment."""
    tokens: list[Token] = []
    for line in split_comment_lines(raw_comment):
        tokens.extend(tokenize_line(strip_comment_markers(line)))
    return tokens


def line_of(tokens: Sequence[Token], index: int) -> int:
    """1-based line of `tokens[index]`, counting newlines in all earlier tokens."""
    return 1 + sum(token.count("\n") for token in tokens[:index])


def dump_tokens(tokens: Sequence[Token]) -> None:
    """Print token list with kind, line, and text for debugging."""
    line = 1
    for i, token in enumerate(tokens):
        print(f"{i:03d} {token_kind(token).name:<10} line={line:<3} text={token!r}")
        line += token.count("\n")
