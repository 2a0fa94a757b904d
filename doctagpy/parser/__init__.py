"""Doc comment parser infrastructure (tags + elements + segmenting parser)."""

from doctagpy.parser.class_comment import CLASS_COMMENT_TAGS, ClassCommentParser
from doctagpy.parser.docblock import create_parser, parse_docblock, parse_result, parse_results
from doctagpy.parser.elements import (
    COMMENT_TAG,
    CommentElement,
    DocElement,
    PairElement,
    ParameterElement,
    SingleElement,
    SubElement,
)
from doctagpy.parser.errors import (
    DocblockError,
    DuplicateTagError,
    ParserConfigurationError,
    TagConfigurationError,
)
from doctagpy.parser.function_comment import FUNCTION_COMMENT_TAGS, FunctionCommentParser
from doctagpy.parser.handlers import BASE_TAG_NAMES, BASE_TAG_SPECS
from doctagpy.parser.member_comment import MEMBER_COMMENT_TAGS, MemberCommentParser
from doctagpy.parser.options import CommentKind, ParserOptions
from doctagpy.parser.parser import DocCommentParser
from doctagpy.parser.tags import (
    EMPTY_EXTENSION,
    TagCardinality,
    TagExtension,
    TagHandler,
    TagSpec,
    TagTable,
    handler_name,
    merge_tag_specs,
)

__all__ = [
    "BASE_TAG_NAMES",
    "BASE_TAG_SPECS",
    "CLASS_COMMENT_TAGS",
    "COMMENT_TAG",
    "EMPTY_EXTENSION",
    "FUNCTION_COMMENT_TAGS",
    "MEMBER_COMMENT_TAGS",
    "ClassCommentParser",
    "CommentElement",
    "CommentKind",
    "DocCommentParser",
    "DocElement",
    "DocblockError",
    "DuplicateTagError",
    "FunctionCommentParser",
    "MemberCommentParser",
    "PairElement",
    "ParameterElement",
    "ParserConfigurationError",
    "ParserOptions",
    "SingleElement",
    "SubElement",
    "TagCardinality",
    "TagConfigurationError",
    "TagExtension",
    "TagHandler",
    "TagSpec",
    "TagTable",
    "create_parser",
    "handler_name",
    "merge_tag_specs",
    "parse_docblock",
    "parse_result",
    "parse_results",
]
