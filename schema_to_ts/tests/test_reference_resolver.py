import pytest

from schema_to_ts.pipeline.analyzer import ReferenceResolver, get_ref_name, resolve_ref
from schema_to_ts.pipeline.errors import UnresolvableReferenceError

DOCUMENT = {
    "components": {
        "schemas": {
            "Pet": {"type": "object"},
            "a/b": {"type": "string"},
        }
    }
}


def test_get_ref_name():
    assert get_ref_name("#/components/schemas/Pet") == "Pet"
    assert get_ref_name("#/components/schemas/a~1b") == "a/b"
    assert get_ref_name("#/definitions/My%20Type") == "My Type"


def test_resolve_ref():
    assert resolve_ref("#/components/schemas/Pet", DOCUMENT) == {"type": "object"}
    assert resolve_ref("#/components/schemas/a~1b", DOCUMENT) == {"type": "string"}


def test_resolve_missing_ref_raises():
    with pytest.raises(UnresolvableReferenceError) as exc_info:
        resolve_ref("#/components/schemas/Missing", DOCUMENT)
    assert "#/components/schemas/Missing" in str(exc_info.value)
    assert exc_info.value.pointer == "#/components/schemas/Missing"


def test_resolve_external_ref_raises():
    with pytest.raises(UnresolvableReferenceError):
        resolve_ref("other.json#/Pet", DOCUMENT)


def test_unresolvable_reference_is_a_key_error():
    with pytest.raises(KeyError):
        resolve_ref("#/nope", DOCUMENT)


def test_resolver_caches_targets():
    resolver = ReferenceResolver(DOCUMENT)
    first = resolver.resolve("#/components/schemas/Pet")
    assert first == {"type": "object"}
    assert resolver.resolve("#/components/schemas/Pet") is first
