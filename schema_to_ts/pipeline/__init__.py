"""
Pipeline - OpenAPI schema to TypeScript generator.

1. Parser: parse schema dictionaries into tagged Schema AST nodes
2. Analyzer: resolve $ref pointers against the document
3. Backend: translate nodes into TypeScript type expressions
4. Formatter: optional post-processing with prettier
5. Declarations: wrap expressions into named interfaces / type aliases
6. Collector: render every referenced schema once per top-level call
"""

from __future__ import annotations

from .backends import CommentBuilder, TypeScriptBackend, schema_to_type
from .collector import ReferenceMemo, RefState, expand
from .config import CommentStyle, DeclarationOptions, FormatterConfig, GeneratorConfig, TypeConfig
from .declaration import convert_to_type, format_type_expression, render_declaration
from .errors import FormatterOutputError, SchemaToTsError, UnresolvableReferenceError
from .formatters import Formatter, PrettierFormatter, get_formatter
from .generator import DocumentGenerator

__all__ = [
    "CommentBuilder",
    "CommentStyle",
    "DeclarationOptions",
    "DocumentGenerator",
    "Formatter",
    "FormatterConfig",
    "FormatterOutputError",
    "GeneratorConfig",
    "PrettierFormatter",
    "RefState",
    "ReferenceMemo",
    "SchemaToTsError",
    "TypeConfig",
    "TypeScriptBackend",
    "UnresolvableReferenceError",
    "convert_to_type",
    "expand",
    "format_type_expression",
    "get_formatter",
    "render_declaration",
    "schema_to_type",
]
