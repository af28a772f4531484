"""
Utility functions for the schema to TypeScript generator.
"""

import json
import re

# Names usable as bare TypeScript property keys
_IDENTIFIER_PATTERN = re.compile(r"[A-Za-z_$][A-Za-z0-9_$]*")


def format_property_name(name: str) -> str:
    """Return a property key usable in a TypeScript type literal.

    Examples:
        "id" -> "id"
        "x-rate-limit" -> '"x-rate-limit"'
    """
    if _IDENTIFIER_PATTERN.fullmatch(name):
        return name
    return json.dumps(name, ensure_ascii=False)


def format_literal(value) -> str:
    """Render an enum value as a TypeScript literal type."""
    return json.dumps(value, ensure_ascii=False)
