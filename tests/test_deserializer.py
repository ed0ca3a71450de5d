"""Tests for markup to document model conversion."""
import copy

import pytest

from html_serializer import (
    DROP,
    Block,
    ConversionDepthError,
    Mark,
    MarkupText,
    Rule,
    RuleChain,
    Text,
    drop_rule,
)
from html_serializer.config import ConverterConfig
from html_serializer.deserializer import Deserializer, merge_nested_marks, wrap_inline_runs

from html_serializer.base.markup_types import create_markup_element as element


def nested_divs(depth, leaf="x"):
    node = MarkupText(leaf)
    for _ in range(depth):
        node = element("div", node)
    return node


class TestDeserialize:
    """Tests for the basic descent."""

    def test_text_becomes_leaf(self, example_chain):
        assert Deserializer(example_chain).deserialize(MarkupText("abc")) == [Text("abc")]

    def test_claimed_element(self, example_chain):
        markup = element("p", "Hello ", element("strong", "World"))
        assert Deserializer(example_chain).deserialize(markup) == [
            Block("paragraph", [Text("Hello "), Mark("bold", [Text("World")])])
        ]

    def test_sequence_keeps_order(self, example_chain):
        markup = [element("p", "a"), element("blockquote", "b"), MarkupText("c")]
        assert Deserializer(example_chain).deserialize(markup) == [
            Block("paragraph", [Text("a")]),
            Block("quote", [Text("b")]),
            Text("c"),
        ]

    def test_empty_input(self, example_chain):
        deserializer = Deserializer(example_chain)
        assert deserializer.deserialize([]) == []
        assert deserializer.deserialize(None) == []

    def test_rule_controls_children(self):
        # the rule ignores the element's children; nothing is appended for it
        rule = Rule(deserialize=lambda el, recurse: Block("image") if el.tag == "img" else None)
        markup = element("img", "alt text", src="x.png")
        assert Deserializer(RuleChain([rule])).deserialize(markup) == [Block("image")]

    def test_rule_may_recurse_on_subset(self):
        def first_child_only(el, recurse):
            if el.tag == "figure":
                return Block("figure", recurse(el.children[:1]))
            return None

        markup = element("figure", element("em", "kept"), element("em", "ignored"))
        assert Deserializer(RuleChain([Rule(deserialize=first_child_only)])).deserialize(markup) == [
            Block("figure", [Text("kept")])
        ]

    def test_list_result_is_spliced(self):
        rule = Rule(
            deserialize=lambda el, recurse: [Text("a"), Text("b")] if el.tag == "pair" else None
        )
        markup = element("p", element("pair"), "c")
        chain = RuleChain([rule, Rule(deserialize=lambda el, recurse: Block("p", recurse(el.children)))])
        assert Deserializer(chain).deserialize(markup) == [
            Block("p", [Text("a"), Text("b"), Text("c")])
        ]

    def test_drop_discards_content(self, example_chain):
        chain = RuleChain([drop_rule("aside")]).extend(example_chain)
        markup = element("p", "a", element("aside", "hidden", element("strong", "x")), "b")
        assert Deserializer(chain).deserialize(markup) == [
            Block("paragraph", [Text("a"), Text("b")])
        ]

    def test_drop_sentinel_from_custom_rule(self):
        rule = Rule(deserialize=lambda el, recurse: DROP)
        assert Deserializer(RuleChain([rule])).deserialize(element("p", "x")) == []

    def test_input_not_mutated(self, example_chain):
        markup = element("div", element("p", "a", element("u", "b")), id="root")
        before = copy.deepcopy(markup)
        Deserializer(example_chain).deserialize(markup)
        assert markup == before


class TestFallback:
    """Tests for unclaimed elements."""

    def test_unclaimed_wrapper_is_transparent(self, example_chain):
        deserializer = Deserializer(example_chain)
        wrapped = deserializer.deserialize(element("div", element("p", "X")))
        direct = deserializer.deserialize(element("p", "X"))
        assert wrapped == direct == [Block("paragraph", [Text("X")])]

    def test_unclaimed_children_spliced_in_place(self, example_chain):
        markup = element("p", "a", element("span", "b", element("em", "c")), "d")
        assert Deserializer(example_chain).deserialize(markup) == [
            Block("paragraph", [Text("a"), Text("b"), Mark("italic", [Text("c")]), Text("d")])
        ]

    def test_nested_unclaimed_wrappers(self, example_chain):
        markup = element("section", element("div", element("span", "x")), element("p", "y"))
        assert Deserializer(example_chain).deserialize(markup) == [
            Text("x"),
            Block("paragraph", [Text("y")]),
        ]

    def test_no_rules_keeps_text(self):
        markup = element("div", "a", element("b", "c"))
        assert Deserializer(RuleChain()).deserialize(markup) == [Text("a"), Text("c")]


class TestDepthGuard:
    """Tests for the nesting limit."""

    def test_too_deep_raises(self, example_chain):
        deserializer = Deserializer(example_chain, ConverterConfig(max_depth=5))
        with pytest.raises(ConversionDepthError) as excinfo:
            deserializer.deserialize(nested_divs(10))
        assert excinfo.value.max_depth == 5

    def test_within_limit(self, example_chain):
        deserializer = Deserializer(example_chain, ConverterConfig(max_depth=5))
        assert deserializer.deserialize(nested_divs(4)) == [Text("x")]

    def test_depth_error_through_rule_not_attributed_to_rule(self):
        rule = Rule(deserialize=lambda el, recurse: Block("div", recurse(el.children)), name="div")
        deserializer = Deserializer(RuleChain([rule]), ConverterConfig(max_depth=3))
        with pytest.raises(ConversionDepthError) as excinfo:
            deserializer.deserialize(nested_divs(6))
        assert not hasattr(excinfo.value, "failed_rule")


class TestOptions:
    """Tests for configuration-driven behaviour."""

    def test_strip_whitespace_text(self, example_chain):
        markup = [element("p", "a"), MarkupText("\n  "), element("p", "b")]
        deserializer = Deserializer(example_chain, ConverterConfig(strip_whitespace_text=True))
        assert deserializer.deserialize(markup) == [
            Block("paragraph", [Text("a")]),
            Block("paragraph", [Text("b")]),
        ]

    def test_whitespace_kept_by_default(self, example_chain):
        markup = [element("p", "a"), MarkupText(" ")]
        assert Deserializer(example_chain).deserialize(markup)[-1] == Text(" ")

    def test_default_block_type(self, example_chain):
        markup = [MarkupText("a"), element("p", "b"), MarkupText("c"), element("em", "d")]
        deserializer = Deserializer(example_chain, ConverterConfig(default_block_type="paragraph"))
        assert deserializer.deserialize(markup) == [
            Block("paragraph", [Text("a")]),
            Block("paragraph", [Text("b")]),
            Block("paragraph", [Text("c"), Mark("italic", [Text("d")])]),
        ]

    def test_nested_marks_kept_by_default(self, example_chain):
        markup = element("strong", "a", element("strong", "b"))
        assert Deserializer(example_chain).deserialize(markup) == [
            Mark("bold", [Text("a"), Mark("bold", [Text("b")])])
        ]

    def test_merge_nested_marks(self, example_chain):
        markup = element("p", element("strong", "a", element("strong", element("strong", "b"))))
        deserializer = Deserializer(example_chain, ConverterConfig(merge_nested_marks=True))
        assert deserializer.deserialize(markup) == [
            Block("paragraph", [Mark("bold", [Text("a"), Text("b")])])
        ]


class TestNormalizers:
    """Tests for the standalone normalization helpers."""

    def test_merge_keeps_different_types(self):
        nodes = [Mark("bold", [Mark("italic", [Mark("bold", [Text("x")])])])]
        assert merge_nested_marks(nodes) == nodes

    def test_merge_keeps_different_data(self):
        nodes = [Mark("link", [Mark("link", [Text("x")], {"href": "/b"})], {"href": "/a"})]
        assert merge_nested_marks(nodes) == nodes

    def test_wrap_inline_runs_leaves_blocks(self):
        nodes = [Block("quote"), Block("paragraph")]
        assert wrap_inline_runs(nodes, "paragraph") == nodes
