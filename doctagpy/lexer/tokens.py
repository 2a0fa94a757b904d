"""Docblock tokens."""

from enum import IntEnum
from typing import Final, TypeAlias

TAG_SIGIL: Final[str] = "@"

Token: TypeAlias = str


class TokenKind(IntEnum):
    # -------------------------
    # Trivia tokens
    # -------------------------
    WHITESPACE = 10
    NEWLINE = 11  # whitespace run containing at least one line break

    # -------------------------
    # Words
    # -------------------------
    WORD = 20
    TAG = 21  # word starting with the tag sigil

    @property
    def is_trivia(self) -> bool:
        return self in (TokenKind.WHITESPACE, TokenKind.NEWLINE)


def is_whitespace(token: Token) -> bool:
    return token.strip() == ""


def is_tag_start(token: Token) -> bool:
    return token.startswith(TAG_SIGIL)


def tag_name_of(token: Token) -> str:
    """Return the tag name of a tag-start token (the text after the sigil).

    Raises if the token does not start with the sigil.
    """
    if not is_tag_start(token):
        raise ValueError(f"Not a tag token: {token!r}")
    return token[len(TAG_SIGIL) :]


def token_kind(token: Token) -> TokenKind:
    if is_whitespace(token):
        return TokenKind.NEWLINE if "\n" in token else TokenKind.WHITESPACE
    if is_tag_start(token):
        return TokenKind.TAG
    return TokenKind.WORD
