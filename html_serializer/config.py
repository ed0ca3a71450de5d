"""
html_serializer.config - Configuration options for the HTML serializer

This module defines the configuration options shared by the deserializer,
the serializer and the lxml parser/printer.

It includes the ConverterConfig dataclass that encapsulates all
configuration options, JSON load/save helpers, and utility functions for
creating default and specific configurations.
"""

# imports
import json
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import List, Optional

# project
from html_serializer.logger import LOGGER

# default path for the project-level configuration file
DEFAULT_CONFIG_PATH = Path(__file__).parent.parent / "config.json"


@dataclass
class ConverterConfig:
    """Configuration class for the HTML serializer."""

    # maximum nesting depth for a single serialize/deserialize call
    max_depth: int = 128
    # drop whitespace-only text nodes while deserializing
    strip_whitespace_text: bool = False
    # wrap top-level inline runs into a block of this type
    default_block_type: Optional[str] = None
    # unwrap marks nested directly inside a mark of the same type
    merge_nested_marks: bool = False
    # elements removed with their content before deserializing
    exclude_tags: List[str] = field(default_factory=lambda: ["script", "style"])
    # indent printed markup
    pretty_print: bool = False

    def __post_init__(self) -> None:
        """Validate the depth guard."""
        if self.max_depth < 1:
            raise ValueError("max_depth must be at least 1")

    def update(self, **kwargs) -> None:
        """Update configuration with provided keyword arguments.

        Args:
            **kwargs: Keyword arguments to update the configuration.

        Raises:
            AttributeError: If an invalid attribute is provided.
        """
        for key, value in kwargs.items():
            if hasattr(self, key):
                setattr(self, key, value)
            else:
                LOGGER.error(f"Invalid configuration attribute: {key}")
                raise AttributeError(
                    f"'{self.__class__.__name__}' object has no attribute '{key}'"
                )

    @staticmethod
    def from_json(file_path: Path) -> "ConverterConfig":
        """
        Load a ConverterConfig object from a JSON file.

        Args:
            file_path (Path): Path to the JSON file.

        Returns:
            ConverterConfig: A ConverterConfig object.
        """
        with file_path.open("rt", encoding="utf-8") as input_file:
            config_data = json.load(input_file)
            return ConverterConfig(**config_data)

    def to_json(self, file_path: Optional[Path] = None) -> Optional[str]:
        """
        Save the ConverterConfig object to a JSON file.

        Args:
            file_path (Path): Path to the JSON file.

        Returns:
            Optional[str]: A JSON string.
        """
        if file_path:
            with file_path.open("wt", encoding="utf-8") as output_file:
                json.dump(asdict(self), output_file, indent=4)
                return None
        else:
            return json.dumps(asdict(self), indent=4)


def get_default_config() -> ConverterConfig:
    """Return the default converter configuration.

    Returns:
        ConverterConfig: The default converter configuration.
    """
    return ConverterConfig()


def create_document_config(default_block_type: str = "paragraph") -> ConverterConfig:
    """Create a configuration for full documents.

    Top-level inline content is wrapped into blocks and whitespace between
    block elements is dropped.

    Args:
        default_block_type (str): The block type used to wrap stray inline content.

    Returns:
        ConverterConfig: A configuration for whole-document conversion.
    """
    return ConverterConfig(
        strip_whitespace_text=True,
        default_block_type=default_block_type,
    )


def load_config(file_path: Path = DEFAULT_CONFIG_PATH) -> ConverterConfig:
    """Load the configuration file if present, otherwise the defaults.

    Args:
        file_path (Path): Path to the JSON file.

    Returns:
        ConverterConfig: The loaded configuration.
    """
    if file_path.exists():
        return ConverterConfig.from_json(file_path)
    LOGGER.debug("No configuration file at %s, using defaults", file_path)
    return get_default_config()


# load the default configuration
CONFIG = load_config()
