"""Elements built from the token segments of a doc comment."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Final

from doctagpy.lexer import Token, is_whitespace

COMMENT_TAG: Final[str] = "comment"

_PARAGRAPH_BREAK: Final[re.Pattern[str]] = re.compile(r"\n[ \t]*\n\s*")


@dataclass(frozen=True, slots=True)
class SubElement:
    """A word (or trailing free text) inside a tag value, with the whitespace before it."""

    text: str
    whitespace_before: str


@dataclass(frozen=True, slots=True)
class DocElement:
    """One parsed unit of a doc comment.

    `tokens` holds the raw words and whitespace of the segment (the tag-name
    token itself is excluded). `previous` points at the element immediately
    before this one in document order and is `None` only for the first.
    """

    tokens: tuple[Token, ...]
    previous: DocElement | None = field(default=None, repr=False)
    tag: str = ""

    @property
    def line(self) -> int:
        """1-based line of the comment on which this element starts."""
        line = 1
        element = self.previous
        while element is not None:
            line += element.newline_count
            element = element.previous
        return line

    @property
    def newline_count(self) -> int:
        return sum(token.count("\n") for token in self.tokens)

    @property
    def words(self) -> tuple[Token, ...]:
        return tuple(token for token in self.tokens if not is_whitespace(token))

    @property
    def content(self) -> str:
        return "".join(self.tokens).strip()

    @property
    def whitespace_before(self) -> str:
        if self.tokens and is_whitespace(self.tokens[0]):
            return self.tokens[0]
        return ""

    def sub_elements(self, count: int) -> tuple[SubElement, ...]:
        """Split the value into `count - 1` leading words plus the remaining text.

        Missing pieces come back as empty sub-elements so callers can always
        unpack exactly `count` values.
        """
        if count < 1:
            raise ValueError("count must be >= 1")

        pieces: list[SubElement] = []
        whitespace = ""
        index = 0
        while index < len(self.tokens) and len(pieces) < count - 1:
            token = self.tokens[index]
            index += 1
            if is_whitespace(token):
                whitespace += token
                continue
            pieces.append(SubElement(text=token, whitespace_before=whitespace))
            whitespace = ""

        rest = self.tokens[index:]
        lead = 0
        while lead < len(rest) and is_whitespace(rest[lead]):
            whitespace += rest[lead]
            lead += 1
        pieces.append(SubElement(text="".join(rest[lead:]).rstrip(), whitespace_before=whitespace))

        while len(pieces) < count:
            pieces.append(SubElement(text="", whitespace_before=""))
        return tuple(pieces)


@dataclass(frozen=True, slots=True)
class CommentElement(DocElement):
    """The free-text description that precedes the first tag.

    The description is split at its first blank line into a short and a
    long part.
    """

    @property
    def short_description(self) -> str:
        match = _PARAGRAPH_BREAK.search(self.content)
        return self.content if match is None else self.content[: match.start()]

    @property
    def long_description(self) -> str:
        match = _PARAGRAPH_BREAK.search(self.content)
        return "" if match is None else self.content[match.end() :]

    @property
    def newlines_between(self) -> int:
        """Line breaks separating the short description from the long one."""
        match = _PARAGRAPH_BREAK.search(self.content)
        return 0 if match is None else match.group().count("\n")


@dataclass(frozen=True, slots=True)
class SingleElement(DocElement):
    """A tag whose whole value is one piece of free text (`@see Foo::bar()`)."""

    @property
    def value(self) -> str:
        return self.content


@dataclass(frozen=True, slots=True)
class PairElement(DocElement):
    """A tag value made of one leading word and a trailing comment (`@return int The count`)."""

    @property
    def value(self) -> str:
        return self.sub_elements(2)[0].text

    @property
    def comment(self) -> str:
        return self.sub_elements(2)[1].text

    @property
    def whitespace_before_value(self) -> str:
        return self.sub_elements(2)[0].whitespace_before

    @property
    def whitespace_before_comment(self) -> str:
        return self.sub_elements(2)[1].whitespace_before


@dataclass(frozen=True, slots=True)
class ParameterElement(DocElement):
    """A `@param type $name comment` tag value."""

    @property
    def type_name(self) -> str:
        return self.sub_elements(3)[0].text

    @property
    def variable_name(self) -> str:
        return self.sub_elements(3)[1].text

    @property
    def comment(self) -> str:
        return self.sub_elements(3)[2].text

    @property
    def whitespace_before_variable(self) -> str:
        return self.sub_elements(3)[1].whitespace_before

    @property
    def whitespace_before_comment(self) -> str:
        return self.sub_elements(3)[2].whitespace_before
