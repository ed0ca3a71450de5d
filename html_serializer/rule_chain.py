"""
html_serializer.rule_chain - Ordered, first-match-wins rule dispatch

This module contains the RuleChain class, which resolves which rule, if
any, claims a markup element (deserialize) or a document node (serialize).
Rules are consulted in declaration order and the first non-``None`` result
wins. When nothing matches, the chain returns ``UNCLAIMED`` and the caller
applies its fallback policy.
"""

# imports
from typing import Iterable, Iterator, List, Tuple

# project
from html_serializer.base.document_types import DocumentNode
from html_serializer.base.errors import ConversionDepthError
from html_serializer.base.markup_types import MarkupElement
from html_serializer.base.rule import (
    UNCLAIMED,
    DeserializeResult,
    Fragment,
    Recurse,
    Rule,
    SerializeResult,
)
from html_serializer.logger import LOGGER


class RuleChain:
    """Immutable ordered collection of rules."""

    def __init__(self, rules: Iterable[Rule] = ()) -> None:
        """Initialize the rule chain.

        Args:
            rules (Iterable[Rule]): The rules, in priority order.

        Raises:
            TypeError: If an entry is not a Rule.
        """
        rules = tuple(rules)
        for rule in rules:
            if not isinstance(rule, Rule):
                raise TypeError(f"Expected a Rule, got {type(rule).__name__}")
        self._rules: Tuple[Rule, ...] = rules

    @property
    def rules(self) -> Tuple[Rule, ...]:
        """The rules, in priority order."""
        return self._rules

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[Rule]:
        return iter(self._rules)

    def __repr__(self) -> str:
        names = ", ".join(rule.name for rule in self._rules)
        return f"<RuleChain [{names}]>"

    def extend(self, rules: Iterable[Rule]) -> "RuleChain":
        """Return a new chain with ``rules`` appended after the existing ones.

        Args:
            rules (Iterable[Rule]): The rules to append.

        Returns:
            RuleChain: The new rule chain.
        """
        return RuleChain(self._rules + tuple(rules))

    def deserialize(self, element: MarkupElement, recurse: Recurse) -> DeserializeResult:
        """Find the first rule that claims a markup element.

        Args:
            element (MarkupElement): The element to convert.
            recurse (Recurse): Converts a sequence of markup nodes.

        Returns:
            DeserializeResult: The claiming rule's result, or ``UNCLAIMED``.
        """
        for rule in self._rules:
            if rule.deserialize is None:
                continue
            try:
                result = rule.deserialize(element, recurse)
            except ConversionDepthError:
                raise
            except Exception as e:
                if _mark_failed_rule(e, rule):
                    LOGGER.error(
                        "Rule %s failed to deserialize <%s>: %s",
                        rule.name,
                        element.tag,
                        e,
                    )
                raise
            if result is not None:
                LOGGER.debug("Rule %s claimed <%s>", rule.name, element.tag)
                return result
        return UNCLAIMED

    def serialize(self, node: DocumentNode, children: List[Fragment]) -> SerializeResult:
        """Find the first rule that claims a document node.

        Args:
            node (DocumentNode): The node to convert.
            children (List[Fragment]): The node's already-rendered children.

        Returns:
            SerializeResult: The claiming rule's result, or ``UNCLAIMED``.
        """
        for rule in self._rules:
            if rule.serialize is None:
                continue
            try:
                result = rule.serialize(node, children)
            except ConversionDepthError:
                raise
            except Exception as e:
                if _mark_failed_rule(e, rule):
                    LOGGER.error(
                        "Rule %s failed to serialize %s: %s",
                        rule.name,
                        type(node).__name__,
                        e,
                    )
                raise
            if result is not None:
                LOGGER.debug("Rule %s claimed %s", rule.name, type(node).__name__)
                return result
        return UNCLAIMED


def _mark_failed_rule(error: Exception, rule: Rule) -> bool:
    """Record the innermost failing rule on the error; True the first time."""
    if hasattr(error, "failed_rule"):
        return False
    try:
        error.failed_rule = rule.name
    except AttributeError:
        pass
    return True
