"""
Declaration rendering.

Turns backend type expressions into formatted expressions and named
TypeScript declarations.
"""

from __future__ import annotations

import re
from collections.abc import Container
from dataclasses import replace
from typing import Any, Callable

from .backends import schema_to_type
from .config import CommentStyle, DeclarationOptions, FormatterConfig, TypeConfig
from .errors import FormatterOutputError
from .formatters import Formatter
from .schema_ast import ObjectNode, SchemaParser

# Wrapper used to hand a bare type expression to the formatter
TYPE_ALIAS_PREFIX = "type Ts = "

# prettier may break long unions right after "="
_EXPRESSION_PATTERN = re.compile(r"type Ts =\s*(.*)", re.DOTALL)


def format_type_expression(
    expression: str,
    config: TypeConfig | None = None,
    formatter: Formatter | None = None,
    formatter_config: FormatterConfig | None = None,
) -> str:
    """
    Format a type expression and re-indent its continuation lines.

    The expression is wrapped in a type alias, formatted without statement
    terminators, and extracted again. Every line but the first gets
    `config.pre_text` so the result can be embedded in indented code.

    Args:
        expression: Unformatted TypeScript type expression
        config: Conversion options (only pre_text is used)
        formatter: Pretty-printer; None leaves the text as is
        formatter_config: Options handed to the formatter

    Returns:
        The formatted type expression

    Raises:
        FormatterOutputError: If the formatted text has no type alias body
    """
    config = config or TypeConfig()
    source = f"{TYPE_ALIAS_PREFIX}{expression}"
    if formatter is not None:
        formatter_config = replace(formatter_config or FormatterConfig(enabled=True), semicolons=False)
        source = formatter.format(source, formatter_config)

    match = _EXPRESSION_PATTERN.search(source)
    if match is None:
        raise FormatterOutputError(source)

    lines = match.group(1).strip().split("\n")
    return "\n".join(line if i == 0 else config.pre_text + line for i, line in enumerate(lines))


def convert_to_type(
    schema: dict[str, Any] | None,
    document: dict[str, Any],
    config: TypeConfig | None = None,
    formatter: Formatter | None = None,
    formatter_config: FormatterConfig | None = None,
    expanding: Container[str] = (),
) -> str:
    """
    Convert a schema into a formatted TypeScript type expression.

    Args:
        schema: Schema or reference object; empty or None gives the default type
        document: Document that $ref pointers are resolved against
        config: Conversion options (defaults: deep, unknown, line comments)
        formatter: Pretty-printer; None leaves the text as is
        formatter_config: Options handed to the formatter
        expanding: Names that must be rendered as references, never inlined

    Returns:
        TypeScript type expression
    """
    config = config or TypeConfig()
    if not schema:
        return config.default_type
    expression = schema_to_type(schema, document, config, expanding)
    return format_type_expression(expression, config, formatter, formatter_config)


def wrap_declaration(name: str, expression: str, export: bool = False, interface: bool = False) -> str:
    """
    Wrap a type expression into a named declaration.

    With `interface` the expression must be a single record body and becomes
    `interface Name {...}`. Anything else becomes `type Name = ...`.
    """
    if interface:
        result = f"interface {name} {expression}"
    else:
        result = f"type {name} = {expression}"
    if export:
        result = f"export {result}"
    return result


def is_record(schema: dict[str, Any] | None) -> bool:
    """Whether a schema is an object with properties, i.e. renders as one record body."""
    if not schema:
        return False
    node = SchemaParser().parse(schema)
    return isinstance(node, ObjectNode) and bool(node.properties)


def render_declaration(
    schema: dict[str, Any] | None,
    name: str,
    document: dict[str, Any],
    options: DeclarationOptions | None = None,
    formatter: Formatter | None = None,
    formatter_config: FormatterConfig | None = None,
    on_ref: Callable[[dict[str, Any]], None] | None = None,
    expanding: Container[str] = (),
) -> str:
    """
    Render a schema as a named TypeScript declaration with JSDoc comments.

    Args:
        schema: Schema or reference object
        name: Declaration name
        document: Document that $ref pointers are resolved against
        options: Declaration options (export, deep, default type)
        formatter: Pretty-printer; None leaves the text as is
        formatter_config: Options handed to the formatter
        on_ref: Called with every reference object met during conversion
        expanding: Names that must be rendered as references, never inlined

    Returns:
        Declaration text
    """
    options = options or DeclarationOptions()
    config = TypeConfig(
        deep=options.deep,
        default_type=options.default_type,
        comment_style=CommentStyle.BLOCK,
        pre_text="",
        on_ref=on_ref,
    )
    expression = convert_to_type(schema, document, config, formatter, formatter_config, expanding)
    return wrap_declaration(name, expression, export=options.export, interface=is_record(schema))
