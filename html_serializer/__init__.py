"""
html_serializer - rule-driven conversion between HTML and a rich-text document model
"""

# local imports
from .base.document_types import (
    Block,
    DocumentNode,
    Mark,
    Text,
    create_block,
    create_mark,
    node_from_dict,
    node_from_json,
    nodes_from_dict,
    nodes_to_dict,
)
from .base.errors import ConversionDepthError
from .base.markup_types import (
    MarkupElement,
    MarkupNode,
    MarkupText,
    create_markup_element,
)
from .base.rule import DROP, Fragment, Markup, RawText, Rule, to_markup_nodes
from .config import ConverterConfig
from .html_serializer import HTMLSerializer
from .rule_chain import RuleChain
from .rules import (
    EXAMPLE_RULES,
    block_rule,
    code_block_rule,
    drop_rule,
    line_break_rule,
    link_rule,
    mark_rule,
)


__all__ = [
    "Block",
    "DocumentNode",
    "Mark",
    "Text",
    "create_block",
    "create_mark",
    "node_from_dict",
    "node_from_json",
    "nodes_from_dict",
    "nodes_to_dict",
    "ConversionDepthError",
    "MarkupElement",
    "MarkupNode",
    "MarkupText",
    "create_markup_element",
    "DROP",
    "Fragment",
    "Markup",
    "RawText",
    "Rule",
    "to_markup_nodes",
    "ConverterConfig",
    "HTMLSerializer",
    "RuleChain",
    "EXAMPLE_RULES",
    "block_rule",
    "code_block_rule",
    "drop_rule",
    "line_break_rule",
    "link_rule",
    "mark_rule",
]
