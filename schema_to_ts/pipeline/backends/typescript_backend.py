"""
TypeScript type expression backend.

Translates parsed schema nodes into TypeScript type expressions, recursing
into object properties, array items, unions and references.
"""

from __future__ import annotations

import logging
from collections.abc import Container
from typing import Any

from ...utils import format_literal, format_property_name
from ..analyzer.reference_resolver import ReferenceResolver, get_ref_name
from ..config import TypeConfig
from ..schema_ast import (
    ArrayNode,
    EnumNode,
    IntersectionNode,
    ObjectNode,
    PrimitiveNode,
    PropertyDef,
    RefNode,
    SchemaNode,
    SchemaParser,
    UnionNode,
    UnknownNode,
)
from .comment_builder import build_property_comment

logger = logging.getLogger(__name__)


class TypeScriptBackend:
    """Converts schema nodes into TypeScript type expressions."""

    TYPE_MAP = {
        "string": "string",
        "number": "number",
        "integer": "number",
        "boolean": "boolean",
        "null": "null",
    }

    # Literal used for records without properties
    EMPTY_OBJECT = "object"

    # Literal used for arrays without items
    EMPTY_ARRAY = "[]"

    def __init__(
        self,
        document: dict[str, Any],
        config: TypeConfig,
        expanding: Container[str] = (),
    ):
        """
        Initialize the backend.

        Args:
            document: The document $ref pointers are resolved against
            config: Conversion options
            expanding: Names whose declarations are currently being rendered
                elsewhere; references to them are never inlined
        """
        self.document = document
        self.config = config
        self.expanding = expanding
        self.resolver = ReferenceResolver(document)
        self.parser = SchemaParser()
        self._ref_nodes: dict[str, SchemaNode] = {}
        self._inlining: list[str] = []

    def translate_schema(self, schema: dict[str, Any]) -> str:
        """Parse and translate a schema dictionary."""
        return self.translate(self.parser.parse(schema))

    def translate(self, node: SchemaNode) -> str:
        """
        Translate a node to a TypeScript type expression.

        Args:
            node: The parsed schema node

        Returns:
            TypeScript type expression (unformatted)
        """
        if isinstance(node, RefNode):
            return self._translate_ref(node)
        if isinstance(node, EnumNode):
            return self._translate_enum(node)
        if isinstance(node, ObjectNode):
            return self._translate_object(node)
        if isinstance(node, ArrayNode):
            return self._translate_array(node)
        if isinstance(node, PrimitiveNode):
            return self.TYPE_MAP[node.type_name]
        if isinstance(node, UnionNode):
            return " | ".join(self.translate(variant) for variant in node.variants)
        if isinstance(node, IntersectionNode):
            return " & ".join(self._wrap_if_union(part) for part in node.parts)
        if isinstance(node, UnknownNode):
            return self.config.default_type
        raise TypeError(f"Unsupported schema node: {type(node).__name__}")

    def resolve_node(self, ref_path: str) -> SchemaNode:
        """Resolve a $ref and parse its target (cached per pointer)."""
        if ref_path not in self._ref_nodes:
            self._ref_nodes[ref_path] = self.parser.parse(self.resolver.resolve(ref_path), ref_path)
        return self._ref_nodes[ref_path]

    def _notify_ref(self, node: RefNode) -> None:
        if self.config.on_ref is not None:
            self.config.on_ref({"$ref": node.ref_path})

    def _is_expanding(self, name: str) -> bool:
        return name in self._inlining or name in self.expanding

    def _translate_ref(self, node: RefNode) -> str:
        self._notify_ref(node)
        name = get_ref_name(node.ref_path)
        if not self.config.deep:
            return name
        if self._is_expanding(name):
            logger.debug("Reference %s is already being expanded, emitting its name", name)
            return name

        target = self.resolve_node(node.ref_path)
        self._inlining.append(name)
        try:
            return self.translate(target)
        finally:
            self._inlining.pop()

    def _translate_enum(self, node: EnumNode) -> str:
        return " | ".join(format_literal(value) for value in node.values)

    def _translate_object(self, node: ObjectNode) -> str:
        if not node.properties:
            return self.EMPTY_OBJECT

        lines = ["{"]
        for prop in node.properties:
            member = self._property_comment(prop) + self._property_signature(prop)
            lines.extend(self.config.indent + line for line in member.split("\n"))
        lines.append("}")
        return "\n".join(lines)

    def _property_signature(self, prop: PropertyDef) -> str:
        optional_flag = "" if prop.is_required else "?"
        type_str = self.translate(prop.type_node)
        return f"{format_property_name(prop.name)}{optional_flag}: {type_str};"

    def _property_comment(self, prop: PropertyDef) -> str:
        # Documentation comes from the referenced schema when the property is a $ref
        described = prop.type_node
        if isinstance(described, RefNode):
            described = self._follow_refs(described)
        return build_property_comment(
            self.config.comment_style,
            title=described.title,
            description=described.description,
            required=prop.is_required,
            deprecated=described.deprecated,
        )

    def _translate_array(self, node: ArrayNode) -> str:
        items = node.items
        if items is None:
            return self.EMPTY_ARRAY

        if isinstance(items, list):
            return self._translate_tuple(items)

        if isinstance(items, RefNode) and not self.config.deep:
            self._notify_ref(items)
            return f"{get_ref_name(items.ref_path)}[]"

        item_type = self.translate(items)
        resolved = self._follow_refs(items)
        if isinstance(resolved, ObjectNode):
            return f"Array<{item_type}>"
        if isinstance(resolved, ArrayNode):
            return f"{item_type}[]"
        if isinstance(resolved, (UnionNode, EnumNode, IntersectionNode)):
            return f"({item_type})[]"
        return f"{item_type}[]"

    def _translate_tuple(self, items: list[SchemaNode]) -> str:
        lines = ["["]
        for item in items:
            item_lines = f"{self.translate(item)},".split("\n")
            lines.extend(self.config.indent + line for line in item_lines)
        lines.append("]")
        return "\n".join(lines)

    def _wrap_if_union(self, node: SchemaNode) -> str:
        type_str = self.translate(node)
        if isinstance(self._follow_refs(node), (UnionNode, EnumNode)) and " | " in type_str:
            return f"({type_str})"
        return type_str

    def _follow_refs(self, node: SchemaNode) -> SchemaNode:
        """Follow a chain of $ref nodes to the schema they describe."""
        seen = set()
        while isinstance(node, RefNode) and node.ref_path not in seen:
            seen.add(node.ref_path)
            node = self.resolve_node(node.ref_path)
        return node


def schema_to_type(
    schema: dict[str, Any] | None,
    document: dict[str, Any],
    config: TypeConfig | None = None,
    expanding: Container[str] = (),
) -> str:
    """
    Convert a schema to an unformatted TypeScript type expression.

    Args:
        schema: Schema or reference object
        document: Document that $ref pointers are resolved against
        config: Conversion options
        expanding: Names that must be rendered as references, never inlined

    Returns:
        TypeScript type expression
    """
    config = config or TypeConfig()
    if not schema:
        return config.default_type
    return TypeScriptBackend(document, config, expanding).translate_schema(schema)
