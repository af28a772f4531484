import pytest

from schema_to_ts.pipeline.schema_ast import (
    ArrayNode,
    EnumNode,
    IntersectionNode,
    ObjectNode,
    PrimitiveNode,
    RefNode,
    SchemaParser,
    UnionNode,
    UnknownNode,
)


@pytest.fixture
def parser():
    return SchemaParser()


@pytest.mark.parametrize(
    "schema, node_class",
    [
        ({"$ref": "#/components/schemas/Pet", "type": "object"}, RefNode),
        ({"type": "string", "enum": ["a", "b"]}, EnumNode),
        ({"enum": ["a"], "oneOf": [{"type": "string"}]}, EnumNode),
        ({"type": "object", "oneOf": [{"type": "string"}]}, ObjectNode),
        ({"oneOf": [{"type": "string"}]}, UnionNode),
        ({"anyOf": [{"type": "string"}]}, UnionNode),
        ({"allOf": [{"type": "string"}]}, IntersectionNode),
        ({"properties": {"a": {"type": "string"}}}, ObjectNode),
        ({"type": "array"}, ArrayNode),
        ({"type": "integer"}, PrimitiveNode),
        ({"type": "file"}, UnknownNode),
        ({}, UnknownNode),
    ],
)
def test_parse_priority(parser, schema, node_class):
    assert isinstance(parser.parse(schema), node_class)


def test_parse_object_keeps_property_order_and_required(parser):
    node = parser.parse(
        {
            "type": "object",
            "required": ["b"],
            "properties": {"b": {"type": "string"}, "a": {"type": "number"}},
        }
    )
    assert [p.name for p in node.properties] == ["b", "a"]
    assert [p.is_required for p in node.properties] == [True, False]
    assert node.properties[1].source_path == "#/properties/a"


def test_parse_metadata(parser):
    node = parser.parse({"type": "string", "title": "T", "description": "D", "deprecated": True})
    assert (node.title, node.description, node.deprecated) == ("T", "D", True)


def test_parse_type_list(parser):
    node = parser.parse({"type": ["string", "null"]})
    assert isinstance(node, UnionNode)
    assert node.union_type == "type"
    assert [v.type_name for v in node.variants] == ["string", "null"]

    single = parser.parse({"type": ["integer"]})
    assert isinstance(single, PrimitiveNode)


def test_parse_array_items(parser):
    tuple_node = parser.parse({"type": "array", "items": [{"type": "string"}, {"type": "number"}]})
    assert isinstance(tuple_node.items, list) and len(tuple_node.items) == 2

    single = parser.parse({"type": "array", "items": {"$ref": "#/definitions/X"}})
    assert isinstance(single.items, RefNode)
    assert single.items.ref_path == "#/definitions/X"

    assert parser.parse({"type": "array"}).items is None


def test_parse_does_not_mutate_schema(parser):
    schema = {"type": "object", "properties": {"a": {"type": "string", "enum": ["x"]}}}
    before = repr(schema)
    parser.parse(schema)
    assert repr(schema) == before
