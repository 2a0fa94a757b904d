"""Errors raised while configuring or running a doc comment parser."""

from __future__ import annotations

from doctagpy.diagnostics import DOCBLOCK_DUPLICATE_TAG, Diagnostic
from doctagpy.lexer import TAG_SIGIL


class DocblockError(Exception):
    """Base class for every doc comment parser error."""


class DuplicateTagError(DocblockError, ValueError):
    """A tag that may appear only once was found a second time.

    This is a data error tied to a line of the comment being parsed; the
    parser stops at the first one.
    """

    def __init__(self, tag: str, line: int) -> None:
        super().__init__(f"Only one occurrence of the {TAG_SIGIL}{tag} tag is allowed (line {line})")
        self.tag = tag
        self.line = line

    def to_diagnostic(self) -> Diagnostic:
        return Diagnostic.from_spec(
            DOCBLOCK_DUPLICATE_TAG,
            line=self.line,
            detail=f"`{TAG_SIGIL}{self.tag}` is repeated on line {self.line}.",
        )


class ParserConfigurationError(DocblockError, RuntimeError):
    """A parser was wired incorrectly (missing handler, bad handler result)."""


class TagConfigurationError(ParserConfigurationError):
    """A tag table could not be built from the supplied tag specs."""
