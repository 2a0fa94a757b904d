"""Tag descriptors, parser extensions, and the merged tag table."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass
from enum import StrEnum
from types import MappingProxyType
from typing import Final, TypeAlias

from doctagpy.lexer import TAG_SIGIL, Token
from doctagpy.parser.elements import COMMENT_TAG, DocElement
from doctagpy.parser.errors import TagConfigurationError

TagHandler: TypeAlias = Callable[[tuple[Token, ...], DocElement | None], DocElement]


class TagCardinality(StrEnum):
    """How many times a tag may occur in one doc comment."""

    SINGLE = "single"
    MULTIPLE = "multiple"


@dataclass(frozen=True, slots=True)
class TagSpec:
    """Descriptor for one recognized tag.

    `handler` may be left unset while a parser is being assembled; the
    dispatcher reports a configuration error the first time such a tag has
    to be processed.
    """

    name: str
    cardinality: TagCardinality
    handler: TagHandler | None = None

    @property
    def allow_multiple(self) -> bool:
        return self.cardinality == TagCardinality.MULTIPLE


@dataclass(frozen=True, slots=True)
class TagExtension:
    """Capability record a concrete parser supplies on top of the base tags."""

    specs: tuple[TagSpec, ...] = ()

    def __post_init__(self) -> None:
        seen: set[str] = set()
        for spec in self.specs:
            _validate_tag_name(spec.name)
            if spec.name in seen:
                raise TagConfigurationError(f"Tag `{spec.name}` is declared more than once in one extension")
            seen.add(spec.name)

    @staticmethod
    def of(*specs: TagSpec) -> "TagExtension":
        return TagExtension(specs=specs)

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(spec.name for spec in self.specs)


EMPTY_EXTENSION: Final[TagExtension] = TagExtension()


@dataclass(frozen=True, slots=True)
class TagTable:
    """Total mapping from every recognized tag name to exactly one descriptor."""

    specs: Mapping[str, TagSpec]

    def __contains__(self, name: object) -> bool:
        return name in self.specs

    def __iter__(self) -> Iterator[str]:
        return iter(self.specs)

    def __len__(self) -> int:
        return len(self.specs)

    def get(self, name: str) -> TagSpec | None:
        return self.specs.get(name)

    def cardinality(self, name: str) -> TagCardinality:
        return self.specs[name].cardinality

    def is_single(self, name: str) -> bool:
        return self.specs[name].cardinality == TagCardinality.SINGLE


def handler_name(tag: str) -> str:
    """Conventional handler name for a tag, e.g. `processSee` for `see`."""
    return "process" + tag[:1].upper() + tag[1:]


def merge_tag_specs(base: tuple[TagSpec, ...], extension: TagExtension | None = None) -> TagTable:
    """Merge the base tags with an extension.

    Base names are reserved; an extension that redeclares one of them is
    rejected instead of silently shadowed.
    """
    merged: dict[str, TagSpec] = {}
    for spec in base:
        _validate_tag_name(spec.name)
        if spec.name in merged:
            raise TagConfigurationError(f"Base tag `{spec.name}` is declared more than once")
        merged[spec.name] = spec

    if extension is not None:
        reserved = set(merged)
        for spec in extension.specs:
            if spec.name in reserved:
                raise TagConfigurationError(
                    f"Tag `{spec.name}` is reserved by the base parser and cannot be redeclared"
                )
            merged[spec.name] = spec

    return TagTable(specs=MappingProxyType(merged))


def _validate_tag_name(name: str) -> None:
    if not name:
        raise TagConfigurationError("Tag names cannot be empty")
    if name.startswith(TAG_SIGIL):
        raise TagConfigurationError(f"Tag `{name}` must be declared without the `{TAG_SIGIL}` sigil")
    if any(ch.isspace() for ch in name):
        raise TagConfigurationError(f"Tag `{name}` cannot contain whitespace")
    if name == COMMENT_TAG:
        raise TagConfigurationError(f"`{COMMENT_TAG}` is the description pseudo-tag and cannot be declared")
