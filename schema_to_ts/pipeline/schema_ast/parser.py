"""
Schema parser that builds an AST.

Parses an OpenAPI / JSON Schema object into tagged nodes without
resolving references.
"""

from __future__ import annotations

from typing import Any

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


class SchemaParser:
    """Parses schema dictionaries into SchemaNode variants."""

    # Type names rendered directly as TypeScript primitives
    PRIMITIVE_TYPES = {"string", "integer", "number", "boolean", "null"}

    def parse(self, schema: dict[str, Any] | None, path: str = "#") -> SchemaNode:
        """
        Parse a schema node recursively.

        Construction priority: $ref, enum, type, oneOf/anyOf, allOf.
        Note that an enum wins over oneOf when both are present; this
        matches the historical behavior of the generator.

        Args:
            schema: The schema dictionary
            path: Current path in the document (for error messages)

        Returns:
            Appropriate SchemaNode subclass
        """
        if not isinstance(schema, dict):
            return UnknownNode(source_path=path, declared_type=None)

        metadata = self._extract_metadata(schema)

        if "$ref" in schema:
            return RefNode(ref_path=schema["$ref"], source_path=path, **metadata)

        if schema.get("enum") is not None:
            return EnumNode(values=list(schema["enum"]), source_path=path, **metadata)

        if "type" in schema:
            declared = schema["type"]
            if isinstance(declared, list):
                return self._parse_type_list(schema, declared, path, metadata)
            if isinstance(declared, str) and self._is_known_type(declared):
                return self._parse_type_node(schema, declared, path, metadata)

        if "oneOf" in schema or "anyOf" in schema:
            return self._parse_union_node(schema, path, metadata)

        if "allOf" in schema:
            parts = [self.parse(part, f"{path}/allOf/{i}") for i, part in enumerate(schema["allOf"])]
            return IntersectionNode(parts=parts, source_path=path, **metadata)

        # Objects frequently omit "type" when they declare properties
        if "type" not in schema and "properties" in schema:
            return self._parse_object_node(schema, path, metadata)

        return UnknownNode(declared_type=schema.get("type"), source_path=path, **metadata)

    def _extract_metadata(self, schema: dict[str, Any]) -> dict[str, Any]:
        """Extract documentation metadata shared by all nodes."""
        return {
            "title": schema.get("title") or None,
            "description": schema.get("description") or None,
            "deprecated": bool(schema.get("deprecated", False)),
            "raw": schema,
        }

    def _is_known_type(self, type_name: str) -> bool:
        return type_name in self.PRIMITIVE_TYPES or type_name in ("object", "array")

    def _parse_type_node(self, schema: dict[str, Any], type_name: str, path: str, metadata: dict[str, Any]) -> SchemaNode:
        """Parse a node with a single recognized "type"."""
        if type_name == "object":
            return self._parse_object_node(schema, path, metadata)
        if type_name == "array":
            return self._parse_array_node(schema, path, metadata)
        return PrimitiveNode(type_name=type_name, source_path=path, **metadata)

    def _parse_type_list(self, schema: dict[str, Any], declared: list, path: str, metadata: dict[str, Any]) -> SchemaNode:
        """Parse an OpenAPI 3.1 style "type": [...] list into a union."""
        known = [t for t in declared if isinstance(t, str) and self._is_known_type(t)]
        if not known:
            return UnknownNode(declared_type=declared, source_path=path, **metadata)
        if len(known) == 1:
            return self._parse_type_node(schema, known[0], path, metadata)
        variants = [self._parse_type_node(schema, t, f"{path}/type/{t}", {"raw": schema}) for t in known]
        return UnionNode(variants=variants, union_type="type", source_path=path, **metadata)

    def _parse_union_node(self, schema: dict[str, Any], path: str, metadata: dict[str, Any]) -> UnionNode:
        """Parse a oneOf or anyOf union node."""
        if "oneOf" in schema:
            union_type = "oneOf"
        else:
            union_type = "anyOf"
        variants = [self.parse(variant, f"{path}/{union_type}/{i}") for i, variant in enumerate(schema[union_type])]
        return UnionNode(variants=variants, union_type=union_type, source_path=path, **metadata)

    def _parse_object_node(self, schema: dict[str, Any], path: str, metadata: dict[str, Any]) -> ObjectNode:
        """Parse an object node, keeping the document's property order."""
        required = list(schema.get("required") or [])
        required_set = set(required)
        properties = []
        for name, prop_schema in (schema.get("properties") or {}).items():
            prop_path = f"{path}/properties/{name}"
            properties.append(
                PropertyDef(
                    name=name,
                    type_node=self.parse(prop_schema, prop_path),
                    is_required=name in required_set,
                    source_path=prop_path,
                )
            )
        return ObjectNode(properties=properties, required=required, source_path=path, **metadata)

    def _parse_array_node(self, schema: dict[str, Any], path: str, metadata: dict[str, Any]) -> ArrayNode:
        """Parse an array node (single item schema or tuple)."""
        items = schema.get("items")
        if isinstance(items, list):
            parsed = [self.parse(item, f"{path}/items/{i}") for i, item in enumerate(items)]
        elif items is not None:
            parsed = self.parse(items, f"{path}/items")
        else:
            parsed = None
        return ArrayNode(items=parsed, source_path=path, **metadata)
