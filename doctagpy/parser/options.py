"""Comment kinds and parser configuration options."""

from dataclasses import dataclass
from enum import StrEnum

from doctagpy.parser.tags import TagExtension


class CommentKind(StrEnum):
    """Which declaration a doc comment documents; selects the tag set."""

    GENERIC = "generic"
    FUNCTION = "function"
    MEMBER = "member"
    CLASS = "class"


@dataclass(frozen=True, slots=True)
class ParserOptions:
    """Selects the parser for a doc comment.

    `extension` supplies custom tags and is only valid for generic comments;
    the other kinds carry their own fixed tag set.
    """

    kind: CommentKind = CommentKind.GENERIC
    extension: TagExtension | None = None

    def __post_init__(self) -> None:
        if self.extension is not None and self.kind != CommentKind.GENERIC:
            raise ValueError(f"Custom tag extensions require kind `generic`, got `{self.kind}`")

    @staticmethod
    def for_kind(kind: CommentKind) -> "ParserOptions":
        return ParserOptions(kind=kind)
