"""Command-line interface for json2ts."""

import logging
import click
from pathlib import Path
from typing import Optional
from . import __version__
from .json_to_typescript import JSONToTypeScript
from .types import SynthesizerOptions, KeyOrder, EmissionOrder, ProcessingError


@click.command()
@click.version_option(version=__version__)
@click.argument('input_file', required=False, type=click.Path(path_type=Path))
@click.option('--output', '-o', type=click.Path(dir_okay=False, path_type=Path),
              help='Write declarations to this file instead of stdout')
@click.option('--sort-keys', is_flag=True, help='List fields in lexical order instead of document order')
@click.option('--sort-unions', is_flag=True, help='List union members in lexical order')
@click.option('--completion-order', is_flag=True,
              help='List nested interfaces before their parents (Root last)')
@click.option('--root-name', default='Root', show_default=True, help='Name of the root interface')
@click.option('--prefix', default='Interface', show_default=True, help='Name prefix of nested interfaces')
@click.option('--indent', default=2, show_default=True, type=click.IntRange(min=0),
              help='Spaces before each field')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
def main(input_file: Optional[Path], output: Optional[Path], sort_keys: bool, sort_unions: bool,
         completion_order: bool, root_name: str, prefix: str, indent: int, verbose: bool):
    """Generate TypeScript interfaces from a JSON file."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    if input_file is None:
        click.echo("Usage: json2ts <file>")
        return

    options = SynthesizerOptions(
        root_name=root_name,
        interface_prefix=prefix,
        key_order=KeyOrder.SORTED if sort_keys else KeyOrder.DOCUMENT,
        emission_order=EmissionOrder.COMPLETION if completion_order else EmissionOrder.DISCOVERY,
        sort_union_members=sort_unions,
        indent=indent
    )
    converter = JSONToTypeScript(options=options, enable_profiling=verbose)
    result = converter.convert_file(input_file)

    if not result.success:
        for error in result.errors or []:
            click.echo(error)
        return

    if output:
        try:
            file_info = converter.write(result, output)
        except ProcessingError as e:
            click.echo(f"Error writing file: {e}")
            return
        click.echo(f"Wrote {len(result.declarations)} interfaces to {file_info['path']}")
    else:
        click.echo(result.output, nl=False)


if __name__ == '__main__':
    main()
