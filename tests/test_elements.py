import pytest

from doctagpy.parser import (
    CommentElement,
    DocElement,
    PairElement,
    ParameterElement,
    SubElement,
    parse_docblock,
)

from tests._shared_cases import case_source


def test_comment_element_splits_short_and_long_description() -> None:
    comment = parse_docblock(case_source("description_and_tags")).comment

    assert comment is not None
    assert comment.short_description == "Returns the thing."
    assert comment.long_description == "Longer text here."
    assert comment.newlines_between == 2


def test_comment_element_without_long_description() -> None:
    comment = CommentElement(tokens=(" ", "Only", " ", "short.", "\n"), tag="comment")

    assert comment.short_description == "Only short."
    assert comment.long_description == ""
    assert comment.newlines_between == 0


def test_long_description_spans_several_paragraphs() -> None:
    text = "/**\n * Short.\n *\n *\n * First para.\n *\n * Second para.\n */"
    comment = parse_docblock(text).comment

    assert comment is not None
    assert comment.short_description == "Short."
    assert comment.newlines_between == 3
    assert comment.long_description.startswith("First para.")
    assert comment.long_description.endswith("Second para.")


def test_doc_element_text_helpers() -> None:
    element = DocElement(tokens=("  ", "a", " ", "b", "\n"), tag="see")

    assert element.words == ("a", "b")
    assert element.content == "a b"
    assert element.whitespace_before == "  "
    assert element.newline_count == 1
    assert element.line == 1


def test_line_accumulates_newlines_of_every_previous_element() -> None:
    first = DocElement(tokens=("\n", "x", "\n"), tag="comment")
    second = DocElement(tokens=(" ", "y", "\n", "\n"), previous=first, tag="see")
    third = DocElement(tokens=(" ", "z"), previous=second, tag="see")

    assert second.line == 3
    assert third.line == 5


def test_sub_elements_pad_missing_pieces() -> None:
    element = DocElement(tokens=(" ", "int", "\n"), tag="param")

    assert element.sub_elements(3) == (
        SubElement(text="int", whitespace_before=" "),
        SubElement(text="", whitespace_before="\n"),
        SubElement(text="", whitespace_before=""),
    )


def test_sub_elements_requires_positive_count() -> None:
    with pytest.raises(ValueError, match="count must be >= 1"):
        DocElement(tokens=(), tag="see").sub_elements(0)


def test_pair_element_value_and_comment() -> None:
    pair = PairElement(tokens=(" ", "int", "   ", "The", " ", "sum.", "\n", " "), tag="return")

    assert pair.value == "int"
    assert pair.comment == "The sum."
    assert pair.whitespace_before_value == " "
    assert pair.whitespace_before_comment == "   "


def test_parameter_element_parts() -> None:
    param = ParameterElement(
        tokens=(" ", "string", "  ", "$name", " ", "The", " ", "name", "\n", " ", "to", " ", "use.", "\n"),
        tag="param",
    )

    assert param.type_name == "string"
    assert param.variable_name == "$name"
    assert param.whitespace_before_variable == "  "
    assert param.comment == "The name\n to use."
    assert param.whitespace_before_comment == " "


def test_elements_are_immutable() -> None:
    element = DocElement(tokens=("a",), tag="see")

    with pytest.raises(AttributeError):
        element.tag = "link"  # type: ignore[misc]
