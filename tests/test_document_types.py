"""Tests for the document model."""
import pytest

from html_serializer import (
    Block,
    Mark,
    Text,
    create_block,
    create_mark,
    node_from_dict,
    node_from_json,
    nodes_from_dict,
    nodes_to_dict,
)


class TestText:
    """Tests for text leaves."""

    def test_children_always_empty(self):
        assert Text("abc").children == ()

    def test_no_children_argument(self):
        with pytest.raises(TypeError):
            Text("abc", children=[Text("x")])

    def test_text_property(self):
        assert Text("abc").text == "abc"


class TestElementNodes:
    """Tests for blocks and marks."""

    def test_structural_equality(self):
        left = Block("paragraph", [Text("a"), Mark("bold", [Text("b")])])
        right = Block("paragraph", [Text("a"), Mark("bold", [Text("b")])])
        assert left == right

    def test_block_and_mark_of_same_type_differ(self):
        assert Block("x", [Text("a")]) != Mark("x", [Text("a")])

    def test_data_defaults_empty(self):
        assert Block("paragraph").data == {}
        assert Mark("bold").children == []

    def test_text_concatenates_leaves(self):
        node = Block("paragraph", [Text("Hello "), Mark("bold", [Text("World")])])
        assert node.text == "Hello World"

    def test_create_helpers_coerce_strings(self):
        node = create_block("paragraph", "Hello ", create_mark("bold", "World"), align="left")
        assert node == Block(
            "paragraph",
            [Text("Hello "), Mark("bold", [Text("World")])],
            {"align": "left"},
        )


class TestSerialization:
    """Tests for dict and JSON forms."""

    def test_to_dict(self):
        node = Block("paragraph", [Text("a")])
        assert node.to_dict() == {
            "object": "block",
            "type": "paragraph",
            "data": {},
            "children": [{"object": "text", "value": "a"}],
        }

    def test_dict_round_trip(self):
        node = Block(
            "quote",
            [Block("paragraph", [Text("a"), Mark("link", [Text("b")], {"href": "/x"})])],
        )
        assert node_from_dict(node.to_dict()) == node

    def test_json_round_trip(self):
        node = Mark("bold", [Text("ä & <b>")])
        assert node_from_json(node.to_json()) == node

    def test_sequence_helpers(self):
        nodes = [Block("paragraph", [Text("a")]), Text("b")]
        assert nodes_from_dict(nodes_to_dict(nodes)) == nodes

    def test_unknown_object_raises(self):
        with pytest.raises(ValueError):
            node_from_dict({"object": "inline", "type": "x"})
