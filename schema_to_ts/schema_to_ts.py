import json

import click

from .cli_utils import reconstruct_command_line
from .pipeline import DocumentGenerator, GeneratorConfig


@click.command()
@click.option("--name", "-n", "names", multiple=True, type=str, help="Schema to generate (repeatable, default: all)")
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option("--deep/--no-deep", default=None, help="Inline referenced schemas instead of naming them")
@click.option("--export/--no-export", default=None, help="Prefix declarations with export")
@click.option("--default-type", default=None, type=click.Choice(["unknown", "any"]))
@click.option("--format/--no-format", "format_output", default=None, help="Format the output with prettier")
@click.argument("path", default=None, type=click.Path(exists=True, resolve_path=True))
@click.argument("output", default=None, type=click.Path(resolve_path=True))
def schema_to_ts(names, config, deep, export, default_type, format_output, path, output):
    with open(path) as f:
        document = json.load(f)

    if config is not None:
        with open(config) as f:
            config = GeneratorConfig.from_dict(json.load(f))
    else:
        config = GeneratorConfig()

    # CLI flags override the config file when given
    if names:
        config.schemas = list(names)
    if deep is not None:
        config.deep = deep
    if export is not None:
        config.export = export
    if default_type is not None:
        config.default_type = default_type
    if format_output is not None:
        config.formatter.enabled = format_output

    command_line = reconstruct_command_line(schema_to_ts)
    generator = DocumentGenerator(document, config, command_line=command_line)

    out = generator.generate()
    with open(output, "w") as f:
        f.write(out)
