"""Parse carrier handed to downstream doc comment checks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from doctagpy.diagnostics import has_errors
from doctagpy.parser.options import ParserOptions
from doctagpy.parser.parser import DocCommentParser

if TYPE_CHECKING:
    from doctagpy.diagnostics import Diagnostic
    from doctagpy.parser.elements import CommentElement, DocElement


@dataclass(frozen=True, slots=True)
class DocblockParseResult:
    """One doc comment parsed once, consumed by any number of checks.

    When `diagnostics` holds an error the parser did not finish and its
    element accessors are empty.
    """

    source_text: str
    parser: DocCommentParser
    options: ParserOptions
    diagnostics: tuple[Diagnostic, ...] = ()

    @property
    def has_errors(self) -> bool:
        return has_errors(self.diagnostics)

    @property
    def is_parsed(self) -> bool:
        return self.parser.has_parsed

    @property
    def comment(self) -> CommentElement | None:
        return self.parser.comment

    @property
    def elements(self) -> tuple[DocElement, ...]:
        return self.parser.elements
