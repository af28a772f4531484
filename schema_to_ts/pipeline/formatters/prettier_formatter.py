"""
Prettier formatter for TypeScript code.
"""

from __future__ import annotations

import logging
import subprocess

from ..config import FormatterConfig
from .base import Formatter

logger = logging.getLogger(__name__)


class PrettierFormatter(Formatter):
    """Formatter using the prettier CLI for TypeScript code."""

    name = "prettier"

    def __init__(self, command: list[str] | None = None):
        self.command = command
        self._available: dict[tuple[str, ...], bool] = {}

    def _base_command(self, config: FormatterConfig | None = None) -> list[str]:
        if self.command:
            return list(self.command)
        if config is not None and config.command:
            return list(config.command)
        return ["prettier"]

    def is_available(self, config: FormatterConfig | None = None) -> bool:
        """Check if the prettier command resolved for `config` is installed."""
        command = tuple(self._base_command(config))
        if command not in self._available:
            try:
                result = subprocess.run(
                    [*command, "--version"],
                    capture_output=True,
                    text=True,
                    timeout=30,
                )
                available = result.returncode == 0
            except (subprocess.SubprocessError, FileNotFoundError):
                available = False
            if not available:
                logger.debug("%s is not available, TypeScript output will not be formatted", " ".join(command))
            self._available[command] = available
        return self._available[command]

    def build_command(self, config: FormatterConfig) -> list[str]:
        """Build the prettier command line for the given configuration."""
        cmd = self._base_command(config) + ["--stdin-filepath", "types.ts"]
        if not config.semicolons:
            cmd.append("--no-semi")
        if config.single_quote:
            cmd.append("--single-quote")
        if config.print_width:
            cmd.extend(["--print-width", str(config.print_width)])
        if config.tab_width:
            cmd.extend(["--tab-width", str(config.tab_width)])
        return cmd

    def format(self, code: str, config: FormatterConfig) -> str:
        """
        Format TypeScript code using prettier.

        Args:
            code: TypeScript source code to format
            config: Formatter configuration

        Returns:
            Formatted code
        """
        if not self.is_available(config):
            # Return unformatted code if prettier is not available
            return code

        try:
            # Run prettier via stdin/stdout
            result = subprocess.run(
                self.build_command(config),
                input=code,
                capture_output=True,
                text=True,
                timeout=30,
            )
        except subprocess.SubprocessError as e:
            logger.debug("prettier failed: %s", e)
            return code

        if result.returncode == 0:
            return result.stdout
        # If formatting fails, return original code
        logger.debug("prettier exited with %d: %s", result.returncode, result.stderr.strip())
        return code
