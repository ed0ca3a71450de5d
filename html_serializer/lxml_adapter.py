"""
html_serializer.lxml_adapter - HTML parsing and printing using lxml.html

This module turns HTML text into markup trees and markup trees back into
HTML text. The converter core never tokenizes HTML itself; these two
functions are the default collaborators plugged into HTMLSerializer.
"""

# imports
import html as html_escape
import traceback
from typing import Iterable, List

# packages
from lxml import etree, html

# project
from html_serializer.base.markup_types import (
    MarkupElement,
    MarkupNode,
    MarkupText,
    markup_from_lxml,
)
from html_serializer.config import ConverterConfig, get_default_config
from html_serializer.logger import LOGGER


def parse_markup(html_str: str, config: ConverterConfig = None) -> List[MarkupNode]:
    """Parse an HTML fragment into top-level markup nodes.

    Args:
        html_str (str): The input HTML string to be parsed.
        config (ConverterConfig, optional): The converter configuration. Defaults to None.

    Returns:
        List[MarkupNode]: The top-level markup nodes; empty for empty input.

    Raises:
        ValueError: If the input HTML cannot be parsed.
    """
    config = config or get_default_config()
    if not html_str:
        return []

    # lxml discards whitespace-only text, so it is kept as a single text node
    if not html_str.strip():
        return [MarkupText(html_str)]
    leading = html_str[: len(html_str) - len(html_str.lstrip())]

    parser = html.HTMLParser(
        recover=True,
        remove_comments=True,
        remove_pis=True,
        strip_cdata=True,
        no_network=True,
    )

    try:
        # parse the fragment under a synthetic parent
        root = html.fragment_fromstring(html_str, create_parent="div", parser=parser)
        if leading and not root.text:
            root.text = leading

        # remove excluded tags from the tree, keeping the text that follows them
        if config.exclude_tags:
            for element in list(root.iter(*config.exclude_tags)):
                if element is not root:
                    element.drop_tree()

        return markup_from_lxml(root).children
    except Exception as e:
        traceback_string = traceback.format_exc()
        LOGGER.error(f"Error parsing HTML: {e}\n{traceback_string}")
        raise ValueError(f"Invalid HTML input: {e}")


def print_markup(nodes: Iterable[MarkupNode], config: ConverterConfig = None) -> str:
    """Print markup nodes as an HTML string.

    Args:
        nodes (Iterable[MarkupNode]): The top-level markup nodes.
        config (ConverterConfig, optional): The converter configuration. Defaults to None.

    Returns:
        str: The HTML string.
    """
    config = config or get_default_config()
    if isinstance(nodes, (MarkupElement, MarkupText)):
        nodes = [nodes]

    parts = []
    for node in nodes:
        if isinstance(node, MarkupText):
            parts.append(html_escape.escape(node.value, quote=False))
        else:
            parts.append(
                etree.tostring(
                    node.to_lxml(),
                    method="html",
                    encoding="unicode",
                    with_tail=False,
                    pretty_print=config.pretty_print,
                )
            )
    return "".join(parts)
