"""
html_serializer.serializer - Document model to markup tree conversion

This module contains the Serializer class, which walks a document tree
bottom-up and builds markup nodes through a RuleChain.

Each node's children are rendered first. Text leaves render as
``RawText`` so rules can tell literal text apart from markup produced by
other rules. The node and its rendered children are then offered to the
rule chain; nodes no rule claims are unwrapped and contribute only their
children's fragments.
"""

# imports
from typing import Iterable, List, Union

# project
from html_serializer.base.document_types import Block, DocumentNode, Mark, Text
from html_serializer.base.errors import ConversionDepthError
from html_serializer.base.markup_types import MarkupElement, MarkupNode, MarkupText
from html_serializer.base.rule import UNCLAIMED, Fragment, Markup, RawText
from html_serializer.config import ConverterConfig, get_default_config
from html_serializer.logger import LOGGER
from html_serializer.rule_chain import RuleChain


class Serializer:
    """Rule-driven document model to markup converter.

    The serializer keeps no per-call state and may be shared between threads.
    """

    def __init__(self, rule_chain: RuleChain, config: ConverterConfig = None) -> None:
        """Initialize the Serializer.

        Args:
            rule_chain (RuleChain): The rules used to claim nodes.
            config (ConverterConfig, optional): The converter configuration. Defaults to None.
        """
        self.rule_chain = rule_chain
        self.config = config or get_default_config()

    def serialize(self, nodes: Union[DocumentNode, Iterable[DocumentNode]]) -> List[MarkupNode]:
        """Convert document nodes to markup nodes.

        Args:
            nodes (Union[DocumentNode, Iterable[DocumentNode]]): A single node or
                an ordered sequence of top-level nodes.

        Returns:
            List[MarkupNode]: The top-level markup nodes, in order.

        Raises:
            ConversionDepthError: If the document nests deeper than ``max_depth``.
        """
        if isinstance(nodes, (Block, Mark, Text)):
            nodes = [nodes]

        fragments = self.render_nodes(nodes, 1)
        LOGGER.debug("Serialized to %d top-level fragment(s)", len(fragments))
        return [fragment.to_markup() for fragment in fragments]

    def render_nodes(self, nodes: Iterable[DocumentNode], depth: int) -> List[Fragment]:
        """Render a sequence of sibling document nodes.

        Args:
            nodes (Iterable[DocumentNode]): The sibling nodes.
            depth (int): The nesting depth of the siblings.

        Returns:
            List[Fragment]: The rendered fragments, in order.
        """
        if depth > self.config.max_depth:
            raise ConversionDepthError(self.config.max_depth)

        fragments: List[Fragment] = []
        for node in nodes:
            fragments.extend(self.render_node(node, depth))
        return fragments

    def render_node(self, node: DocumentNode, depth: int) -> List[Fragment]:
        """Render a single document node to zero or more fragments.

        Args:
            node (DocumentNode): The node to render.
            depth (int): The nesting depth of the node.

        Returns:
            List[Fragment]: The rendered fragments.
        """
        if isinstance(node, Text):
            children: List[Fragment] = [RawText(node.value)]
        else:
            children = self.render_nodes(node.children, depth + 1)

        result = self.rule_chain.serialize(node, children)

        if result is UNCLAIMED:
            if not isinstance(node, Text):
                LOGGER.debug("No rule for %s %r, unwrapping", type(node).__name__, node.type)
            return children
        if isinstance(result, (list, tuple)):
            return [_as_fragment(item) for item in result]
        return [_as_fragment(result)]


def _as_fragment(item: Union[MarkupNode, Fragment]) -> Fragment:
    if isinstance(item, (RawText, Markup)):
        return item
    if isinstance(item, (MarkupElement, MarkupText)):
        return Markup(item)
    raise TypeError(f"Serialize rules must return markup nodes, got {type(item).__name__}")
