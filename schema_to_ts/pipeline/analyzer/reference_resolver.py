"""
Reference resolver for $ref resolution.

Resolves local $ref pointers ("#/components/schemas/Pet") to the schema
they point to, and derives the display name used for named types.
"""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import unquote

import jsonpointer
from jsonpointer import JsonPointerException

from ..errors import UnresolvableReferenceError

logger = logging.getLogger(__name__)


def get_ref_name(ref_path: str) -> str:
    """
    Get the display name of a $ref.

    Examples:
        "#/components/schemas/Pet" -> "Pet"
        "#/definitions/a~1b" -> "a/b"

    Args:
        ref_path: The $ref string

    Returns:
        Last segment of the pointer, unescaped
    """
    segment = ref_path.rsplit("/", 1)[-1]
    return unquote(segment).replace("~1", "/").replace("~0", "~")


def resolve_ref(ref_path: str, document: dict[str, Any]) -> dict[str, Any]:
    """
    Resolve a local $ref against a document.

    Args:
        ref_path: The $ref string, e.g. "#/components/schemas/Pet"
        document: The OpenAPI / JSON Schema document

    Returns:
        The referenced schema dictionary

    Raises:
        UnresolvableReferenceError: If the pointer is not local or has no target
    """
    if not ref_path.startswith("#"):
        raise UnresolvableReferenceError(ref_path, "only local references are supported")

    pointer = unquote(ref_path[1:])
    try:
        target = jsonpointer.resolve_pointer(document, pointer)
    except JsonPointerException as e:
        raise UnresolvableReferenceError(ref_path, str(e)) from e

    if not isinstance(target, dict):
        raise UnresolvableReferenceError(ref_path, f"target is a {type(target).__name__}, not a schema object")

    logger.debug("Resolved %s", ref_path)
    return target


class ReferenceResolver:
    """Resolves $ref against one document, caching results by pointer."""

    def __init__(self, document: dict[str, Any]):
        """
        Initialize the resolver.

        Args:
            document: The OpenAPI / JSON Schema document
        """
        self.document = document
        self._cache: dict[str, dict[str, Any]] = {}

    def resolve(self, ref_path: str) -> dict[str, Any]:
        """Resolve a $ref to its schema dictionary."""
        if ref_path not in self._cache:
            self._cache[ref_path] = resolve_ref(ref_path, self.document)
        return self._cache[ref_path]
