"""
html_serializer.markup_types - Markup tree classes for HTML conversion

This module defines a minimal read-only view over a parsed HTML tree:
elements with a tag, attributes and ordered children, and text nodes.

The module also bridges these classes to and from lxml elements so the
lxml parser and printer can be plugged in on either side.
"""

# imports
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Union

# packages
from lxml import etree

from html_serializer.logger import LOGGER

# Type aliases for improved readability
MarkupNode = Union["MarkupElement", "MarkupText"]


@dataclass
class MarkupText:
    """
    Represents a text node in a markup tree.

    Attributes:
        value (str): The unescaped text content.
    """

    value: str


@dataclass
class MarkupElement:
    """
    Represents an element in a markup tree.

    Attributes:
        tag (str): The lower-case tag name.
        attributes (dict): A dictionary of attributes.
        children (List[MarkupNode]): A list of child elements and text nodes.
    """

    tag: str
    attributes: Dict[str, str] = field(default_factory=dict)
    children: List[MarkupNode] = field(default_factory=list)

    def get(self, name: str, default: str = None) -> str:
        """
        Get an attribute value.

        Args:
            name (str): The attribute name.
            default (str): The value returned when the attribute is missing.

        Returns:
            str: The attribute value.
        """
        return self.attributes.get(name, default)

    @property
    def text_content(self) -> str:
        """
        The concatenated text of every text node below this element.

        Returns:
            str: The text content.
        """
        parts = []
        for child in self.children:
            if isinstance(child, MarkupText):
                parts.append(child.value)
            else:
                parts.append(child.text_content)
        return "".join(parts)

    def to_lxml(self) -> etree._Element:
        """
        Convert the MarkupElement to an lxml element.

        Text children become the element text or the tail of the
        preceding child element.

        Returns:
            etree._Element: The lxml representation of the element.

        Raises:
            Exception: If there's an error during conversion.
        """
        try:
            element = etree.Element(self.tag, attrib=self.attributes)
            previous = None
            for child in self.children:
                if isinstance(child, MarkupText):
                    if previous is None:
                        element.text = (element.text or "") + child.value
                    else:
                        previous.tail = (previous.tail or "") + child.value
                else:
                    previous = child.to_lxml()
                    element.append(previous)
            return element
        except Exception as e:
            LOGGER.error(f"Error converting MarkupElement to lxml: {e}")
            raise


def markup_from_lxml(element: etree._Element) -> MarkupElement:
    """
    Convert an lxml element to a MarkupElement.

    Comments and processing instructions are skipped; their tails are kept.

    Args:
        element (etree._Element): The lxml element.

    Returns:
        MarkupElement: The converted element.
    """
    children: List[MarkupNode] = []
    if element.text:
        children.append(MarkupText(element.text))
    for child in element.iterchildren():
        if isinstance(child.tag, str):
            children.append(markup_from_lxml(child))
        if child.tail:
            children.append(MarkupText(child.tail))

    return MarkupElement(
        tag=_tag_name(element),
        attributes={str(key): str(value) for key, value in element.attrib.items()},
        children=_merge_adjacent_text(children),
    )


def _tag_name(element: etree._Element) -> str:
    # only namespaced "{uri}name" tags go through QName; HTML keeps prefixes such as "o:p"
    if element.tag.startswith("{"):
        return str(etree.QName(element).localname).lower()
    return str(element.tag).lower()


def _merge_adjacent_text(children: List[MarkupNode]) -> List[MarkupNode]:
    merged: List[MarkupNode] = []
    for child in children:
        if (
            isinstance(child, MarkupText)
            and merged
            and isinstance(merged[-1], MarkupText)
        ):
            merged[-1] = MarkupText(merged[-1].value + child.value)
        else:
            merged.append(child)
    return merged


def create_markup_element(tag: str, *children: Union[MarkupNode, str], **attributes) -> MarkupElement:
    """
    Create a MarkupElement with the given tag, children, and attributes.

    Args:
        tag (str): The tag name.
        *children (Union[MarkupNode, str]): The children; strings become text nodes.
        **attributes: Keyword arguments for attributes.

    Returns:
        MarkupElement: The created element.
    """
    return MarkupElement(
        tag,
        attributes,
        [MarkupText(child) if isinstance(child, str) else child for child in children],
    )
