"""
html_serializer.deserializer - Markup tree to document model conversion

This module contains the Deserializer class, which walks a markup tree
top-down and builds document nodes through a RuleChain.

Text nodes are converted directly to text leaves. Elements are offered to
the rule chain together with a ``recurse`` function the claiming rule uses
to convert whichever children it wants represented. Elements no rule
claims are transparent: they contribute their converted children in their
own place.
"""

# imports
from typing import Iterable, List, Optional, Union

# project
from html_serializer.base.document_types import Block, DocumentNode, Mark, Text
from html_serializer.base.errors import ConversionDepthError
from html_serializer.base.markup_types import MarkupElement, MarkupNode, MarkupText
from html_serializer.base.rule import DROP, UNCLAIMED, Recurse
from html_serializer.config import ConverterConfig, get_default_config
from html_serializer.logger import LOGGER
from html_serializer.rule_chain import RuleChain


class Deserializer:
    """Rule-driven markup to document model converter.

    The deserializer keeps no per-call state and may be shared between threads.
    """

    def __init__(self, rule_chain: RuleChain, config: ConverterConfig = None) -> None:
        """Initialize the Deserializer.

        Args:
            rule_chain (RuleChain): The rules used to claim elements.
            config (ConverterConfig, optional): The converter configuration. Defaults to None.
        """
        self.rule_chain = rule_chain
        self.config = config or get_default_config()

    def deserialize(self, markup: Union[MarkupNode, Iterable[MarkupNode], None]) -> List[DocumentNode]:
        """Convert a markup tree to document nodes.

        Args:
            markup (Union[MarkupNode, Iterable[MarkupNode], None]): A single markup
                node or an ordered sequence of top-level nodes.

        Returns:
            List[DocumentNode]: The top-level document nodes, in order. Empty
            input yields an empty list.

        Raises:
            ConversionDepthError: If the markup nests deeper than ``max_depth``.
        """
        if markup is None:
            return []
        if isinstance(markup, (MarkupElement, MarkupText)):
            markup = [markup]

        nodes = self._convert_nodes(markup, 1)

        if self.config.merge_nested_marks:
            nodes = merge_nested_marks(nodes)
        if self.config.default_block_type:
            nodes = wrap_inline_runs(nodes, self.config.default_block_type)

        LOGGER.debug("Deserialized %d top-level node(s)", len(nodes))
        return nodes

    def _convert_nodes(self, markup_nodes: Iterable[MarkupNode], depth: int) -> List[DocumentNode]:
        """Convert a sequence of sibling markup nodes, splicing unclaimed elements.

        Args:
            markup_nodes (Iterable[MarkupNode]): The sibling nodes.
            depth (int): The nesting depth of the siblings.

        Returns:
            List[DocumentNode]: The converted nodes.
        """
        if depth > self.config.max_depth:
            raise ConversionDepthError(self.config.max_depth)

        nodes: List[DocumentNode] = []
        for markup_node in markup_nodes:
            nodes.extend(self._convert_node(markup_node, depth))
        return nodes

    def _convert_node(self, markup_node: MarkupNode, depth: int) -> List[DocumentNode]:
        """Convert a single markup node to zero or more document nodes.

        Args:
            markup_node (MarkupNode): The node to convert.
            depth (int): The nesting depth of the node.

        Returns:
            List[DocumentNode]: The converted nodes.
        """
        if isinstance(markup_node, MarkupText):
            if self.config.strip_whitespace_text and not markup_node.value.strip():
                return []
            return [Text(markup_node.value)]

        recurse = self._make_recurse(depth + 1)
        result = self.rule_chain.deserialize(markup_node, recurse)

        if result is UNCLAIMED:
            # unknown wrappers are transparent
            LOGGER.debug("No rule for <%s>, splicing its children", markup_node.tag)
            return recurse(markup_node.children)
        if result is DROP:
            LOGGER.debug("Dropped <%s>", markup_node.tag)
            return []
        if isinstance(result, (list, tuple)):
            return list(result)
        return [result]

    def _make_recurse(self, depth: int) -> Recurse:
        """Build the ``recurse`` function handed to a rule."""

        def recurse(markup_nodes: Optional[Iterable[MarkupNode]]) -> List[DocumentNode]:
            if markup_nodes is None:
                return []
            if isinstance(markup_nodes, (MarkupElement, MarkupText)):
                markup_nodes = [markup_nodes]
            return self._convert_nodes(markup_nodes, depth)

        return recurse


def merge_nested_marks(nodes: List[DocumentNode]) -> List[DocumentNode]:
    """Unwrap marks nested directly inside a mark of the same type and data.

    ``<strong>a<strong>b</strong></strong>`` becomes a single bold mark with
    the text leaves ``a`` and ``b``.

    Args:
        nodes (List[DocumentNode]): The nodes to normalize.

    Returns:
        List[DocumentNode]: New normalized nodes; the input is left untouched.
    """
    return [_merge_node(node) for node in nodes]


def _merge_node(node: DocumentNode) -> DocumentNode:
    if isinstance(node, Text):
        return node
    own_mark = node if isinstance(node, Mark) else None
    children = [
        _merge_node(grandchild)
        for child in node.children
        for grandchild in _flatten(child, own_mark)
    ]
    return type(node)(node.type, children, dict(node.data))


def _flatten(node: DocumentNode, parent_mark: Optional[Mark]) -> List[DocumentNode]:
    if (
        parent_mark is not None
        and isinstance(node, Mark)
        and node.type == parent_mark.type
        and node.data == parent_mark.data
    ):
        return [
            flattened
            for child in node.children
            for flattened in _flatten(child, parent_mark)
        ]
    return [node]


def wrap_inline_runs(nodes: List[DocumentNode], block_type: str) -> List[DocumentNode]:
    """Wrap consecutive top-level non-block nodes into blocks.

    Args:
        nodes (List[DocumentNode]): The top-level nodes.
        block_type (str): The type given to the wrapping blocks.

    Returns:
        List[DocumentNode]: The nodes with every inline run wrapped.
    """
    wrapped: List[DocumentNode] = []
    run: List[DocumentNode] = []
    for node in nodes:
        if isinstance(node, Block):
            if run:
                wrapped.append(Block(block_type, run))
                run = []
            wrapped.append(node)
        else:
            run.append(node)
    if run:
        wrapped.append(Block(block_type, run))
    return wrapped
