"""
Configuration for the schema to TypeScript pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable


class CommentStyle(str, Enum):
    """Style of the documentation comments emitted above properties."""

    LINE = "line"  # // comment
    BLOCK = "block"  # /** JSDoc */


DEFAULT_TYPES = ("unknown", "any")


@dataclass
class FormatterConfig:
    """Configuration for the external pretty-printer."""

    # Whether formatting is enabled
    enabled: bool = False

    # Formatter looked up with get_formatter()
    name: str = "prettier"

    # Whether statement terminators are kept (prettier --no-semi when False)
    semicolons: bool = False

    # Line length for the formatter
    print_width: int = 100

    # Spaces per indentation level
    tab_width: int = 2

    # Prefer single quotes for string literals
    single_quote: bool = False

    # Command used to invoke prettier
    command: list[str] = field(default_factory=lambda: ["prettier"])


@dataclass
class TypeConfig:
    """Options for converting one schema into a type expression."""

    # Inline referenced schemas instead of emitting their names
    deep: bool = True

    # Type used for unrecognized schema shapes
    default_type: str = "unknown"

    # Comment style for property documentation
    comment_style: CommentStyle = CommentStyle.LINE

    # Prefix added to every line after the first one
    pre_text: str = ""

    # One level of indentation inside records and tuples
    indent: str = "  "

    # Called with the raw {"$ref": ...} object for every reference met
    on_ref: Callable[[dict[str, Any]], None] | None = None

    def __post_init__(self):
        if isinstance(self.comment_style, str):
            self.comment_style = CommentStyle(self.comment_style)
        if self.default_type not in DEFAULT_TYPES:
            raise ValueError(f"default_type must be one of {DEFAULT_TYPES}, got {self.default_type!r}")


@dataclass
class DeclarationOptions:
    """Options for rendering named declarations."""

    # Prefix declarations with `export`
    export: bool = False

    # Inline referenced schemas instead of emitting their names
    deep: bool = False

    # Type used for unrecognized schema shapes
    default_type: str = "unknown"

    # Receives (name, declaration) for every referenced schema
    on_ref_declaration: Callable[[str, str], None] | None = None


@dataclass
class GeneratorConfig:
    """Configuration for generating a whole TypeScript module from a document."""

    # Schema names to generate (empty = every schema in the document)
    schemas: list[str] = field(default_factory=list)

    # Inline referenced schemas instead of emitting their names
    deep: bool = False

    # Prefix declarations with `export`
    export: bool = True

    # Type used for unrecognized schema shapes
    default_type: str = "unknown"

    # Emit referenced schemas that were not explicitly requested
    include_referenced: bool = True

    # Add generation comment at top of file
    add_generation_comment: bool = True

    # Formatter configuration
    formatter: FormatterConfig = field(default_factory=FormatterConfig)

    @staticmethod
    def from_dict(d: dict) -> GeneratorConfig:
        """Create a config from a dictionary."""
        config = GeneratorConfig()
        for k, v in d.items():
            if k == "formatter" and isinstance(v, dict):
                config.formatter = FormatterConfig(**v)
            elif hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "schemas": self.schemas,
            "deep": self.deep,
            "export": self.export,
            "default_type": self.default_type,
            "include_referenced": self.include_referenced,
            "add_generation_comment": self.add_generation_comment,
            "formatter": {
                "enabled": self.formatter.enabled,
                "name": self.formatter.name,
                "semicolons": self.formatter.semicolons,
                "print_width": self.formatter.print_width,
                "tab_width": self.formatter.tab_width,
                "single_quote": self.formatter.single_quote,
                "command": self.formatter.command,
            },
        }
