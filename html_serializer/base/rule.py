"""
html_serializer.rule - Pluggable conversion rules

This module defines the Rule value object, the fragments a serialize rule
receives for its already-converted children, and the sentinels used to
signal that a rule discards an element or that no rule claimed an input.

A Rule holds two optional callables. Either may be omitted, in which case
the rule never matches in that direction. Rules must not hold mutable
state; a single rule may be shared by any number of converters and
threads.
"""

# imports
from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Sequence, Union

# project
from html_serializer.base.document_types import DocumentNode
from html_serializer.base.markup_types import MarkupElement, MarkupNode, MarkupText


class _Sentinel:
    """Named singleton marker."""

    def __init__(self, name: str) -> None:
        self.name = name

    def __repr__(self) -> str:
        return self.name

    def __bool__(self) -> bool:
        return False


# returned by a deserialize rule to claim an element and discard it with its content
DROP = _Sentinel("DROP")

# returned by a rule chain when no rule claimed the input
UNCLAIMED = _Sentinel("UNCLAIMED")


@dataclass(frozen=True)
class RawText:
    """The literal, unescaped value of a text leaf."""

    value: str

    def to_markup(self) -> MarkupText:
        """Convert the raw text to a markup text node."""
        return MarkupText(self.value)


@dataclass(frozen=True)
class Markup:
    """A markup node already produced by a serialize rule."""

    node: MarkupNode

    def to_markup(self) -> MarkupNode:
        """Return the wrapped markup node."""
        return self.node


Fragment = Union[RawText, Markup]

Recurse = Callable[[Iterable[MarkupNode]], List[DocumentNode]]

DeserializeResult = Union[DocumentNode, List[DocumentNode], _Sentinel, None]
SerializeResult = Union[MarkupNode, List[MarkupNode], None]

DeserializeFn = Callable[[MarkupElement, Recurse], DeserializeResult]
SerializeFn = Callable[[DocumentNode, List[Fragment]], SerializeResult]


@dataclass(frozen=True)
class Rule:
    """
    A pair of optional conversion functions for one node/tag kind.

    Attributes:
        deserialize (Optional[DeserializeFn]): Called with a markup element and a
            ``recurse`` function; returns a document node, a list of nodes,
            ``DROP``, or ``None`` for no match.
        serialize (Optional[SerializeFn]): Called with a document node and its
            rendered children; returns a markup node, a list of markup nodes,
            or ``None`` for no match.
        name (str): A label used in log messages.
    """

    deserialize: Optional[DeserializeFn] = None
    serialize: Optional[SerializeFn] = None
    name: str = "rule"


def to_markup_nodes(fragments: Sequence[Fragment]) -> List[MarkupNode]:
    """
    Convert rendered fragments to markup nodes.

    Args:
        fragments (Sequence[Fragment]): The fragments to convert.

    Returns:
        List[MarkupNode]: The markup nodes, in order.
    """
    return [fragment.to_markup() for fragment in fragments]

