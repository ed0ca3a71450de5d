"""
Pytest configuration and fixtures for the html_serializer test suite
"""

import pytest

from html_serializer import (
    EXAMPLE_RULES,
    HTMLSerializer,
    RuleChain,
)
from html_serializer.config import ConverterConfig


@pytest.fixture
def example_chain():
    """The example paragraph/quote/code/bold/italic/underline rules."""
    return RuleChain(EXAMPLE_RULES)


@pytest.fixture
def serializer():
    """A converter over the example rules with default configuration."""
    return HTMLSerializer(EXAMPLE_RULES, ConverterConfig())
