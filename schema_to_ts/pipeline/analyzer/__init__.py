"""
Reference analysis for schema documents.
"""

from __future__ import annotations

from .reference_resolver import ReferenceResolver, get_ref_name, resolve_ref

__all__ = [
    "ReferenceResolver",
    "get_ref_name",
    "resolve_ref",
]
