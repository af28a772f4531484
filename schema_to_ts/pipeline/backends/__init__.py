"""
TypeScript code generation backend.
"""

from __future__ import annotations

from .comment_builder import CommentBuilder, build_property_comment
from .typescript_backend import TypeScriptBackend, schema_to_type

__all__ = [
    "CommentBuilder",
    "TypeScriptBackend",
    "build_property_comment",
    "schema_to_type",
]
