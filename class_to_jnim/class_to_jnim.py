import json
import sys
from pathlib import Path

import click

from .cli_utils import reconstruct_command_line
from .config import GeneratorConfig
from .driver import Converter
from .loader import DocumentError
from .writer import BindingWriteError


@click.command()
@click.option("--output", "-o", default=None, type=click.Path(resolve_path=True), help="Output file (only for single file mode)")
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option(
    "--add-generation-comment",
    is_flag=True,
    default=False,
    help="Start each generated file with a comment naming the generator and command line",
)
@click.argument("path", type=click.Path(resolve_path=True))
def class_to_jnim(output, config, add_generation_comment, path):
    """Convert Java class documents (JSON) to Nim jnim bindings.

    PATH is a single JSON document or a directory. In directory mode every
    .json file found recursively is converted to a .nim file with the same
    name in the same location.
    """
    if config is not None:
        with open(config) as f:
            config = GeneratorConfig.from_dict(json.load(f))
    else:
        config = GeneratorConfig()

    # CLI flag overrides the config file if set
    if add_generation_comment:
        config.add_generation_comment = True

    path = Path(path)
    if not path.exists():
        click.echo(f"Error: Input path not found: {path}", err=True)
        sys.exit(1)

    converter = Converter(config, generation_comment=reconstruct_command_line(class_to_jnim))

    if path.is_dir():
        if output is not None:
            raise click.UsageError("--output can only be used with a single input file")
        sys.exit(_convert_directory(converter, path))

    try:
        result = converter.convert_file(path, Path(output) if output is not None else None)
    except (DocumentError, BindingWriteError, OSError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if not result.written:
        click.echo(f"Error: No classes found in {path}", err=True)
        sys.exit(1)

    click.echo(f"Generated Nim bindings in: {result.output} ({result.binding_count} classes)")


def _convert_directory(converter: Converter, directory: Path) -> int:
    """Convert a directory and report each document. Returns the exit status."""
    click.echo(f"Scanning directory: {directory}")

    results = converter.convert_directory(directory)
    for result in results:
        click.echo(f"Processing: {result.source} -> {converter.output_path_for(result.source)}")
        if not result.ok:
            click.echo(f"  Error: {result.error}", err=True)
        elif result.written:
            click.echo(f"  Generated Nim bindings: {result.output}")
        else:
            click.echo("  No classes found, skipping")

    translated = sum(r.class_count for r in results if r.written)
    failed = [r for r in results if not r.ok]
    bindings = sum(r.binding_count for r in results)
    click.echo(f"Translated {bindings} classes from {len(results)} documents, {len(failed)} failed")
    if failed and not translated:
        return 1
    return 0
