"""
Schema AST module.

Contains the AST node definitions and parser for OpenAPI schemas.
"""

from __future__ import annotations

from .nodes import (
    ArrayNode,
    EnumNode,
    IntersectionNode,
    ObjectNode,
    PrimitiveNode,
    PropertyDef,
    RefNode,
    SchemaNode,
    UnionNode,
    UnknownNode,
)
from .parser import SchemaParser

__all__ = [
    "SchemaNode",
    "ObjectNode",
    "ArrayNode",
    "RefNode",
    "PrimitiveNode",
    "PropertyDef",
    "EnumNode",
    "UnionNode",
    "IntersectionNode",
    "UnknownNode",
    "SchemaParser",
]
