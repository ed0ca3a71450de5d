"""
html_serializer.rules - Rule factories and an example rich-text schema

The converter itself knows no node types. This module provides small
factories for the common shapes of rules (a block or mark type that maps
one-to-one onto a tag, code blocks, links, line breaks, discarded tags)
and EXAMPLE_RULES, a paragraph/quote/code/bold/italic/underline schema.
"""

# imports
from typing import Iterable, List, Optional, Sequence, Type, Union

# project
from html_serializer.base.document_types import Block, ElementNode, Mark, Text
from html_serializer.base.markup_types import MarkupElement, MarkupNode, MarkupText
from html_serializer.base.rule import DROP, Fragment, Rule, to_markup_nodes


def _element_rule(
    node_class: Type[ElementNode],
    node_type: str,
    tag: str,
    aliases: Iterable[str] = (),
    name: Optional[str] = None,
) -> Rule:
    tags = {tag, *aliases}

    def deserialize(element, recurse):
        if element.tag in tags:
            return node_class(node_type, recurse(element.children))
        return None

    def serialize(node, children):
        if isinstance(node, node_class) and node.type == node_type:
            return MarkupElement(tag, {}, to_markup_nodes(children))
        return None

    return Rule(deserialize, serialize, name or f"{node_type}:{tag}")


def block_rule(node_type: str, tag: str, aliases: Iterable[str] = (), name: str = None) -> Rule:
    """Create a rule mapping a block type onto a tag.

    Args:
        node_type (str): The block type.
        tag (str): The tag written when serializing.
        aliases (Iterable[str]): Extra tags accepted when deserializing.
        name (str): The rule name used in log messages.

    Returns:
        Rule: The block rule.
    """
    return _element_rule(Block, node_type, tag, aliases, name)


def mark_rule(node_type: str, tag: str, aliases: Iterable[str] = (), name: str = None) -> Rule:
    """Create a rule mapping a mark type onto a tag.

    Args:
        node_type (str): The mark type.
        tag (str): The tag written when serializing.
        aliases (Iterable[str]): Extra tags accepted when deserializing, e.g. ``b`` for ``strong``.
        name (str): The rule name used in log messages.

    Returns:
        Rule: The mark rule.
    """
    return _element_rule(Mark, node_type, tag, aliases, name)


def code_block_rule(node_type: str = "code") -> Rule:
    """Create a rule mapping a block type onto ``<pre><code>``.

    A ``<pre>`` without a ``<code>`` child is accepted as well; its own
    children become the block's children.

    Args:
        node_type (str): The block type.

    Returns:
        Rule: The code block rule.
    """

    def deserialize(element, recurse):
        if element.tag != "pre":
            return None
        code = next(
            (
                child
                for child in element.children
                if isinstance(child, MarkupElement) and child.tag == "code"
            ),
            None,
        )
        source = code if code is not None else element
        return Block(node_type, recurse(source.children))

    def serialize(node, children):
        if isinstance(node, Block) and node.type == node_type:
            return MarkupElement(
                "pre", {}, [MarkupElement("code", {}, to_markup_nodes(children))]
            )
        return None

    return Rule(deserialize, serialize, f"{node_type}:pre>code")


def link_rule(node_type: str = "link", attribute: str = "href") -> Rule:
    """Create a rule mapping a mark type onto ``<a href>``.

    The link target is kept in the mark's ``data`` under ``attribute``.

    Args:
        node_type (str): The mark type.
        attribute (str): The anchor attribute carried in ``data``.

    Returns:
        Rule: The link rule.
    """

    def deserialize(element, recurse):
        if element.tag != "a":
            return None
        data = {}
        if element.get(attribute) is not None:
            data[attribute] = element.get(attribute)
        return Mark(node_type, recurse(element.children), data)

    def serialize(node, children):
        if isinstance(node, Mark) and node.type == node_type:
            attributes = {}
            if node.data.get(attribute) is not None:
                attributes[attribute] = str(node.data[attribute])
            return MarkupElement("a", attributes, to_markup_nodes(children))
        return None

    return Rule(deserialize, serialize, f"{node_type}:a")


def line_break_rule() -> Rule:
    """Create a rule mapping ``<br>`` onto a newline in a text leaf.

    Serializing splits text leaves on newlines and writes a ``<br>``
    between the pieces.

    Returns:
        Rule: The line break rule.
    """

    def deserialize(element, recurse):
        if element.tag == "br":
            return Text("\n")
        return None

    def serialize(node, children: List[Fragment]) -> Union[List[MarkupNode], None]:
        if not isinstance(node, Text) or "\n" not in node.value:
            return None
        output: List[MarkupNode] = []
        for index, line in enumerate(node.value.split("\n")):
            if index > 0:
                output.append(MarkupElement("br"))
            if line:
                output.append(MarkupText(line))
        return output

    return Rule(deserialize, serialize, "line-break:br")


def drop_rule(*tags: str) -> Rule:
    """Create a rule discarding the given elements together with their content.

    Args:
        *tags (str): The tags to discard.

    Returns:
        Rule: The drop rule.
    """
    dropped = set(tags)

    def deserialize(element, recurse):
        if element.tag in dropped:
            return DROP
        return None

    return Rule(deserialize=deserialize, name="drop:" + ",".join(sorted(dropped)))


def create_example_rules() -> Sequence[Rule]:
    """Create the example paragraph/quote/code/bold/italic/underline schema.

    Returns:
        Sequence[Rule]: The rules, in priority order.
    """
    return (
        block_rule("paragraph", "p"),
        block_rule("quote", "blockquote"),
        code_block_rule("code"),
        mark_rule("bold", "strong"),
        mark_rule("italic", "em"),
        mark_rule("underline", "u"),
    )


EXAMPLE_RULES = create_example_rules()
