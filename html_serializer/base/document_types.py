"""
html_serializer.document_types - Data structures for representing rich-text documents

This module defines the document model used by the html_serializer
package: a closed set of node kinds (blocks, marks and text leaves) that
make up a rich-text tree. Node types are opaque strings defined by the
caller's rules; nothing here knows about paragraphs or bold text.

It also provides plain-dict and JSON helpers so callers can persist trees.
"""

# imports
from __future__ import annotations
import json
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Tuple, Union

# Type aliases for improved readability
DocumentNode = Union["Block", "Mark", "Text"]


@dataclass
class Text:
    """Represents a text leaf.

    Text nodes never have children; ``children`` is always empty.
    """

    value: str

    @property
    def children(self) -> Tuple[()]:
        """Text leaves have no children."""
        return ()

    @property
    def text(self) -> str:
        """The text content of the leaf."""
        return self.value

    def to_dict(self) -> dict:
        """Convert the text leaf to a dictionary.

        Returns:
            dict: The text leaf as a dictionary.
        """
        return {"object": "text", "value": self.value}

    def to_json(self) -> str:
        """Convert the text leaf to a JSON string."""
        return json.dumps(self.to_dict())


@dataclass
class ElementNode:
    """Base class for document nodes with a type and children."""

    type: str
    children: List[DocumentNode] = field(default_factory=list)
    data: Dict[str, Any] = field(default_factory=dict)

    # "block" or "mark"
    object_name = "element"

    @property
    def text(self) -> str:
        """Concatenated text of every leaf below this node.

        Returns:
            str: The text content.
        """
        return "".join(child.text for child in self.children)

    def to_dict(self) -> dict:
        """Convert the node and its children to a dictionary.

        Returns:
            dict: The node as a dictionary.
        """
        return {
            "object": self.object_name,
            "type": self.type,
            "data": dict(self.data),
            "children": [child.to_dict() for child in self.children],
        }

    def to_json(self) -> str:
        """Convert the node and its children to a JSON string."""
        return json.dumps(self.to_dict())


@dataclass
class Block(ElementNode):
    """Represents a block node (paragraph, quote, ...)."""

    object_name = "block"


@dataclass
class Mark(ElementNode):
    """Represents a mark node wrapping inline content (bold, italic, ...)."""

    object_name = "mark"


NODE_CLASSES = {
    "block": Block,
    "mark": Mark,
}


def node_from_dict(node_dict: dict) -> DocumentNode:
    """Create a document node from its dictionary form.

    Args:
        node_dict (dict): The dictionary produced by ``to_dict``.

    Returns:
        DocumentNode: The document node.

    Raises:
        ValueError: If the dictionary does not describe a known node kind.
    """
    object_name = node_dict.get("object")
    if object_name == "text":
        return Text(node_dict.get("value", ""))

    node_class = NODE_CLASSES.get(object_name)
    if node_class is None:
        raise ValueError(f"Unknown document node object: {object_name!r}")

    return node_class(
        type=node_dict["type"],
        children=[node_from_dict(child) for child in node_dict.get("children", [])],
        data=dict(node_dict.get("data") or {}),
    )


def node_from_json(json_str: str) -> DocumentNode:
    """Create a document node from its JSON form."""
    return node_from_dict(json.loads(json_str))


def nodes_to_dict(nodes: Iterable[DocumentNode]) -> List[dict]:
    """Convert a sequence of top-level nodes to dictionaries.

    Args:
        nodes (Iterable[DocumentNode]): The nodes to convert.

    Returns:
        List[dict]: The nodes as dictionaries.
    """
    return [node.to_dict() for node in nodes]


def nodes_from_dict(node_dicts: Iterable[dict]) -> List[DocumentNode]:
    """Create a sequence of nodes from their dictionary forms."""
    return [node_from_dict(node_dict) for node_dict in node_dicts]


def create_block(node_type: str, *children: Union[DocumentNode, str], **data) -> Block:
    """Create a block node.

    Args:
        node_type (str): The block type.
        *children (Union[DocumentNode, str]): The children; strings become text leaves.
        **data: Optional data attributes.

    Returns:
        Block: The created block node.
    """
    return Block(node_type, _coerce_children(children), dict(data))


def create_mark(node_type: str, *children: Union[DocumentNode, str], **data) -> Mark:
    """Create a mark node.

    Args:
        node_type (str): The mark type.
        *children (Union[DocumentNode, str]): The children; strings become text leaves.
        **data: Optional data attributes.

    Returns:
        Mark: The created mark node.
    """
    return Mark(node_type, _coerce_children(children), dict(data))


def _coerce_children(children: Iterable[Union[DocumentNode, str]]) -> List[DocumentNode]:
    return [Text(child) if isinstance(child, str) else child for child in children]
