"""Schema to TypeScript Generator

A Python package for generating TypeScript declarations from the
schemas of OpenAPI and JSON Schema documents, with documentation
comments, cycle-safe $ref expansion and optional prettier formatting.
"""

__version__ = "0.1.0"

from .pipeline import (
    CommentStyle,
    DeclarationOptions,
    DocumentGenerator,
    FormatterConfig,
    FormatterOutputError,
    GeneratorConfig,
    TypeConfig,
    UnresolvableReferenceError,
    convert_to_type,
    expand,
    render_declaration,
)

__all__ = [
    "CommentStyle",
    "DeclarationOptions",
    "DocumentGenerator",
    "FormatterConfig",
    "FormatterOutputError",
    "GeneratorConfig",
    "TypeConfig",
    "UnresolvableReferenceError",
    "convert_to_type",
    "expand",
    "render_declaration",
]
