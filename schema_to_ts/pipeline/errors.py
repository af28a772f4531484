"""
Exceptions raised by the schema to TypeScript pipeline.
"""

from __future__ import annotations


class SchemaToTsError(Exception):
    """Base class for all pipeline errors."""

    pass


class UnresolvableReferenceError(SchemaToTsError, KeyError):
    """Raised when a $ref pointer has no target in the document.

    Attributes:
        pointer: The $ref string that could not be resolved
    """

    def __init__(self, pointer: str, reason: str = ""):
        self.pointer = pointer
        message = f"Cannot resolve $ref '{pointer}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]


class FormatterOutputError(SchemaToTsError, ValueError):
    """Raised when formatted code does not contain the expected type alias.

    This means either the type expression was malformed or the formatter
    rewrote the wrapper into something the extraction pattern cannot match.
    """

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"Formatter output does not contain a 'type Ts = ' body: {text!r}")
