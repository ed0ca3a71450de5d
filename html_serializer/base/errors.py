"""
html_serializer.errors - Errors raised by the converter itself

Rule failures are not wrapped: whatever a rule raises reaches the caller
unchanged. The converter only raises for its own limits.
"""


class ConversionDepthError(ValueError):
    """Raised when a tree nests deeper than the configured ``max_depth``."""

    def __init__(self, max_depth: int) -> None:
        self.max_depth = max_depth
        super().__init__(f"Tree nesting exceeds the maximum depth of {max_depth}")


__all__ = [
    "ConversionDepthError",
]
