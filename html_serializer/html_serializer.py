"""
html_serializer.html_serializer - Rule-driven HTML <-> document model converter

This module defines the HTMLSerializer class, which pairs a Deserializer
and a Serializer over one immutable RuleChain and plugs in the lxml
parser and printer for string input and output.
"""

# imports
import copy
from typing import Callable, Iterable, List, Optional, Union

# project
from html_serializer.base.document_types import DocumentNode
from html_serializer.base.markup_types import MarkupNode
from html_serializer.base.rule import Rule
from html_serializer.config import CONFIG, ConverterConfig
from html_serializer.deserializer import Deserializer
from html_serializer.logger import LOGGER
from html_serializer.lxml_adapter import parse_markup, print_markup
from html_serializer.rule_chain import RuleChain
from html_serializer.serializer import Serializer

MarkupParser = Callable[[str, ConverterConfig], List[MarkupNode]]
MarkupPrinter = Callable[[List[MarkupNode], ConverterConfig], str]


class HTMLSerializer:
    """Convert HTML to document nodes and back through an ordered set of rules.

    A converter is built once and reused; it holds no per-call state and
    may be shared between threads as long as its rules are side-effect free.

    Example:
        serializer = HTMLSerializer(EXAMPLE_RULES)
        nodes = serializer.deserialize("<p>Hello <strong>World</strong></p>")
        html_str = serializer.serialize(nodes)
    """

    def __init__(
        self,
        rules: Union[Iterable[Rule], RuleChain] = (),
        config: ConverterConfig = None,
        parser: MarkupParser = parse_markup,
        printer: MarkupPrinter = print_markup,
    ) -> None:
        """Initialize the HTMLSerializer.

        Args:
            rules (Union[Iterable[Rule], RuleChain]): The rules, in priority order.
            config (ConverterConfig, optional): The converter configuration; a copy is
                kept, so later changes to it do not affect this converter. Defaults to
                the project configuration loaded from config.json.
            parser (MarkupParser): Turns HTML text into markup nodes.
            printer (MarkupPrinter): Turns markup nodes into HTML text.
        """
        self.config = copy.deepcopy(config or CONFIG)
        self.rule_chain = rules if isinstance(rules, RuleChain) else RuleChain(rules)
        self.parser = parser
        self.printer = printer
        self.deserializer = Deserializer(self.rule_chain, self.config)
        self.serializer = Serializer(self.rule_chain, self.config)

    def __repr__(self) -> str:
        return f"<HTMLSerializer rules={len(self.rule_chain)}>"

    def deserialize(
        self, markup: Union[str, MarkupNode, Iterable[MarkupNode], None]
    ) -> List[DocumentNode]:
        """Convert HTML text or a markup tree to document nodes.

        Args:
            markup (Union[str, MarkupNode, Iterable[MarkupNode], None]): HTML text,
                a single markup node, or a sequence of top-level markup nodes.

        Returns:
            List[DocumentNode]: The top-level document nodes, in order.

        Raises:
            ConversionDepthError: If the markup nests deeper than ``max_depth``.
        """
        if isinstance(markup, str):
            LOGGER.debug("Parsing %d characters of HTML", len(markup))
            markup = self.parser(markup, self.config)
        return self.deserializer.deserialize(markup)

    def deserialize_one(
        self, markup: Union[str, MarkupNode, Iterable[MarkupNode], None]
    ) -> Optional[DocumentNode]:
        """Convert HTML to a single root document node.

        Args:
            markup (Union[str, MarkupNode, Iterable[MarkupNode], None]): The input markup.

        Returns:
            Optional[DocumentNode]: The root node, or None for empty input.

        Raises:
            ValueError: If the markup yields more than one top-level node.
        """
        nodes = self.deserialize(markup)
        if not nodes:
            return None
        if len(nodes) > 1:
            raise ValueError(f"Expected a single root node, got {len(nodes)}")
        return nodes[0]

    def serialize_tree(
        self, nodes: Union[DocumentNode, Iterable[DocumentNode]]
    ) -> List[MarkupNode]:
        """Convert document nodes to top-level markup nodes without printing.

        Args:
            nodes (Union[DocumentNode, Iterable[DocumentNode]]): A node or a sequence of nodes.

        Returns:
            List[MarkupNode]: The top-level markup nodes.
        """
        return self.serializer.serialize(nodes)

    def serialize(self, nodes: Union[DocumentNode, Iterable[DocumentNode]]) -> str:
        """Convert document nodes to HTML text.

        Args:
            nodes (Union[DocumentNode, Iterable[DocumentNode]]): A node or a sequence of nodes.

        Returns:
            str: The HTML text.

        Raises:
            ConversionDepthError: If the document nests deeper than ``max_depth``.
        """
        return self.printer(self.serialize_tree(nodes), self.config)

