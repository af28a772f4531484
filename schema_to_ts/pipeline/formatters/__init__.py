"""
Post-processing formatters for generated code.
"""

from __future__ import annotations

from .base import Formatter
from .prettier_formatter import PrettierFormatter

FORMATTERS = {cls.name: cls for cls in (PrettierFormatter,)}


def get_formatter(name: str | None) -> Formatter | None:
    """Return a formatter instance by name, or None for "none"."""
    if name is None or name == "none":
        return None
    try:
        return FORMATTERS[name]()
    except KeyError:
        raise ValueError(f"Unknown formatter: {name}") from None


__all__ = [
    "Formatter",
    "PrettierFormatter",
    "get_formatter",
]
