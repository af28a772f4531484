"""
Base class for TypeScript formatters.

A formatter is any pretty-printer that takes TypeScript source text and
returns it normalized. The pipeline only ever calls `format`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..config import FormatterConfig


class Formatter(ABC):
    """Abstract base class for TypeScript formatters."""

    # Name used by get_formatter() and in log messages
    name: str = ""

    @abstractmethod
    def format(self, code: str, config: FormatterConfig) -> str:
        """
        Format TypeScript source.

        Implementations that cannot run must return `code` unchanged
        rather than raise.
        """

    def is_available(self, config: FormatterConfig | None = None) -> bool:
        """Whether the formatter can run in this environment."""
        return True
