"""
AST node definitions for OpenAPI / JSON Schema objects.

Each schema dictionary is parsed into exactly one node variant, so the
TypeScript backend can dispatch on the node class instead of probing
optional keys at every call site.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class SchemaNode:
    """Base class for all AST nodes."""

    # Original source location in the document (for error messages)
    source_path: str = ""

    # Documentation metadata
    title: str | None = None
    description: str | None = None
    deprecated: bool = False

    # The schema dictionary this node was parsed from
    raw: dict[str, Any] = field(default_factory=dict, repr=False)


@dataclass
class RefNode(SchemaNode):
    """Represents a $ref (unresolved reference)."""

    ref_path: str = ""  # e.g., "#/components/schemas/Pet"


@dataclass
class EnumNode(SchemaNode):
    """Represents an enum; rendered as a union of literals."""

    values: list[Any] = field(default_factory=list)


@dataclass
class PrimitiveNode(SchemaNode):
    """Represents a primitive type (string, integer, number, boolean, null)."""

    type_name: str = ""


@dataclass
class PropertyDef(SchemaNode):
    """Represents a property in an object."""

    name: str = ""
    type_node: SchemaNode | None = None
    is_required: bool = False


@dataclass
class ObjectNode(SchemaNode):
    """Represents an object type with properties."""

    properties: list[PropertyDef] = field(default_factory=list)
    required: list[str] = field(default_factory=list)


@dataclass
class ArrayNode(SchemaNode):
    """Represents an array type."""

    items: SchemaNode | list[SchemaNode] | None = None  # Single type or tuple types


@dataclass
class UnionNode(SchemaNode):
    """Represents a oneOf or anyOf union type."""

    variants: list[SchemaNode] = field(default_factory=list)
    union_type: str = "oneOf"  # "oneOf", "anyOf" or "type" for type lists


@dataclass
class IntersectionNode(SchemaNode):
    """Represents an allOf composition."""

    parts: list[SchemaNode] = field(default_factory=list)


@dataclass
class UnknownNode(SchemaNode):
    """A schema whose shape is not recognized (falls back to the default type)."""

    declared_type: Any = None
