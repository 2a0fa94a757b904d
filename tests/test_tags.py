import pytest

from doctagpy.parser import (
    BASE_TAG_SPECS,
    EMPTY_EXTENSION,
    DocCommentParser,
    TagCardinality,
    TagConfigurationError,
    TagExtension,
    TagSpec,
    handler_name,
    merge_tag_specs,
)
from doctagpy.parser.handlers import process_see


def test_base_tag_cardinalities() -> None:
    table = merge_tag_specs(BASE_TAG_SPECS)

    assert table.cardinality("see") == TagCardinality.MULTIPLE
    assert table.cardinality("link") == TagCardinality.MULTIPLE
    assert table.is_single("deprecated")
    assert table.is_single("since")
    assert len(table) == 4


def test_merge_adds_extension_tags() -> None:
    extension = TagExtension.of(TagSpec("todo", TagCardinality.MULTIPLE, process_see))
    table = merge_tag_specs(BASE_TAG_SPECS, extension)

    assert list(table) == ["see", "link", "deprecated", "since", "todo"]
    assert "todo" in table
    assert table.get("bogus") is None


@pytest.mark.parametrize("name", ["see", "link", "deprecated", "since"])
def test_extension_cannot_redeclare_base_tag(name: str) -> None:
    extension = TagExtension.of(TagSpec(name, TagCardinality.SINGLE, process_see))

    with pytest.raises(TagConfigurationError, match="reserved"):
        DocCommentParser("/** x */", extension)


@pytest.mark.parametrize(
    ("name", "message"),
    [
        ("", "cannot be empty"),
        ("@param", "without the `@` sigil"),
        ("two words", "cannot contain whitespace"),
        ("comment", "pseudo-tag"),
    ],
)
def test_invalid_tag_names_are_rejected(name: str, message: str) -> None:
    with pytest.raises(TagConfigurationError, match=message):
        TagExtension.of(TagSpec(name, TagCardinality.MULTIPLE))


def test_extension_cannot_declare_a_tag_twice() -> None:
    with pytest.raises(TagConfigurationError, match="more than once"):
        TagExtension.of(
            TagSpec("todo", TagCardinality.MULTIPLE),
            TagSpec("todo", TagCardinality.SINGLE),
        )


def test_empty_extension_matches_base_parser() -> None:
    text = "/**\n * Desc.\n * @see A\n */"
    plain = DocCommentParser(text)
    extended = DocCommentParser(text, EMPTY_EXTENSION)
    plain.parse()
    extended.parse()

    assert list(plain.tag_table) == list(extended.tag_table)
    assert plain.elements == extended.elements


def test_handler_name_follows_process_convention() -> None:
    assert handler_name("comment") == "processComment"
    assert handler_name("see") == "processSee"
    assert handler_name("subpackage") == "processSubpackage"


def test_tag_spec_allow_multiple() -> None:
    assert TagSpec("see", TagCardinality.MULTIPLE).allow_multiple is True
    assert TagSpec("since", TagCardinality.SINGLE).allow_multiple is False
