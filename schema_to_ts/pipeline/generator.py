"""
Module generator.

Renders the schemas of an OpenAPI (components.schemas) or JSON Schema
(definitions / $defs) document into one TypeScript module.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import jinja2

from .. import __version__
from .analyzer.reference_resolver import resolve_ref
from .collector import expand
from .config import DeclarationOptions, GeneratorConfig
from .formatters import Formatter, get_formatter

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent.parent / "templates" / "typescript"

# Locations searched for named schemas, in order
SCHEMA_CONTAINERS = (
    ("components", "schemas"),
    ("definitions",),
    ("$defs",),
)


class DocumentGenerator:
    """Generates TypeScript declarations for the named schemas of a document."""

    def __init__(
        self,
        document: dict[str, Any],
        config: GeneratorConfig | None = None,
        formatter: Formatter | None = None,
        command_line: str = "",
    ):
        """
        Initialize the generator.

        Args:
            document: OpenAPI or JSON Schema document
            config: Generation options
            formatter: Pretty-printer; by default config.formatter.name when formatting is enabled
            command_line: Command line quoted in the generation comment
        """
        self.document = document
        self.config = config or GeneratorConfig()
        if formatter is None and self.config.formatter.enabled:
            formatter = get_formatter(self.config.formatter.name)
        self.formatter = formatter
        self.command_line = command_line
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
            lstrip_blocks=True,
            trim_blocks=True,
            keep_trailing_newline=True,
        )
        self.module_template = self.jinja_env.get_template("module.ts.jinja2")

    def schema_pointers(self) -> dict[str, str]:
        """Map every named schema of the document to its $ref pointer."""
        pointers: dict[str, str] = {}
        for path in SCHEMA_CONTAINERS:
            container: Any = self.document
            for key in path:
                container = container.get(key) if isinstance(container, dict) else None
            if not isinstance(container, dict):
                continue
            prefix = "#/" + "/".join(path)
            for name in container:
                escaped = name.replace("~", "~0").replace("/", "~1")
                pointers.setdefault(name, f"{prefix}/{escaped}")
        return pointers

    def selected_names(self) -> list[str]:
        """Names of the schemas to generate (config.schemas or all of them)."""
        pointers = self.schema_pointers()
        if not self.config.schemas:
            return list(pointers)
        missing = [name for name in self.config.schemas if name not in pointers]
        if missing:
            raise KeyError(f"Schemas not found in document: {', '.join(missing)}")
        return list(self.config.schemas)

    def generate_declarations(self) -> dict[str, str]:
        """
        Render one declaration per selected schema and per referenced schema.

        Returns:
            Mapping of declaration name to declaration text, in emission order
        """
        pointers = self.schema_pointers()
        declarations: dict[str, str] = {}

        def collect(name: str, text: str) -> None:
            declarations.setdefault(name, text)

        options = DeclarationOptions(
            export=self.config.export,
            deep=self.config.deep,
            default_type=self.config.default_type,
            on_ref_declaration=collect if self.config.include_referenced else None,
        )

        for name in self.selected_names():
            if name in declarations:
                continue
            logger.debug("Generating declaration for %s", name)
            schema = resolve_ref(pointers[name], self.document)
            result = expand(
                schema,
                name,
                self.document,
                options,
                formatter=self.formatter,
                formatter_config=self.config.formatter,
            )
            # Referenced declarations were collected first; keep the requested one last
            declarations.setdefault(name, result)
        return declarations

    def header(self) -> str:
        """Generation comment placed at the top of the module."""
        if not self.config.add_generation_comment:
            return ""
        text = f"// Generated by schema_to_ts {__version__}"
        if self.command_line:
            text += f" using: {self.command_line}"
        return text + "\n// Do not edit by hand."

    def generate(self) -> str:
        """Generate the TypeScript module."""
        declarations = self.generate_declarations()
        return self.module_template.render(
            HEADER=self.header(),
            DECLARATIONS=list(declarations.values()),
        )
