"""
abidb: collect 4byte signature records into a verified selector database.

Examples
  $ abidb build -i 4bytes/signatures -o 4byte.json
  $ abidb lookup 4byte.json 0xa9059cbb
  $ abidb selector 'transfer(address,uint256)'
  $ abidb seed -o signatures build/contracts/*.json
"""

import logging
import sys
from pathlib import Path

import click

from .artifacts import seed_directory
from .config import BuildConfig
from .emitter import load_store, lookup
from .errors import AbiDbError, SelectorParseError
from .hasher import declaration_selector, selector_hex
from .parser import parse_selector
from .pipeline import build_database


def configure_logging(verbose: bool, quiet: bool) -> None:
    level = logging.INFO
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    logging.basicConfig(
        level=level, format="%(levelname)s %(message)s", stream=sys.stderr
    )


@click.group(context_settings=dict(help_option_names=["-h", "--help"]))
@click.option("-v", "--verbose", is_flag=True, help="Log skipped files too.")
@click.option("-q", "--quiet", is_flag=True, help="Only log warnings and errors.")
def cli(verbose, quiet):
    """abidb: verified 4-byte selector database builder."""
    configure_logging(verbose, quiet)


@cli.command("build")
@click.option(
    "-i", "input_dir", required=True, envvar="ABIDB_INPUT_DIR",
    type=click.Path(file_okay=False), help="input directory to read",
)
@click.option(
    "-o", "output_file", required=True, envvar="ABIDB_OUTPUT_FILE",
    type=click.Path(dir_okay=False), help="file to write to (overwrites if exists)",
)
def build_cmd(input_dir, output_file):
    """
    Parse the signatures in a 4byte-style directory (file name = selector,
    content = signature) and write them to a sorted JSON database.

    Records whose signature does not hash to the file name are skipped.
    """
    try:
        config = BuildConfig.from_strings(input_dir, output_file)
        report = build_database(config)
    except (AbiDbError, ValueError) as e:
        raise click.ClickException(str(e))
    click.echo(f"{report.accepted} selectors written to {output_file}")


@cli.command("lookup")
@click.argument("database", type=click.Path(dir_okay=False))
@click.argument("selectors", nargs=-1, required=True)
def lookup_cmd(database, selectors):
    """Print the signature for each selector (or 0x call data) in DATABASE."""
    try:
        entries = load_store(Path(database))
    except AbiDbError as e:
        raise click.ClickException(str(e))

    missing = 0
    for selector in selectors:
        try:
            signature = lookup(entries, selector)
        except ValueError as e:
            raise click.ClickException(str(e))
        if signature is None:
            missing += 1
            signature = "unknown"
        click.echo(f"{selector}  {signature}")
    if missing:
        sys.exit(1)


@cli.command("selector")
@click.argument("signatures", nargs=-1, required=True)
def selector_cmd(signatures):
    """Print the 4-byte selector of each SIGNATURE, e.g. 'add(uint256,uint256)'."""
    for signature in signatures:
        try:
            declaration = parse_selector(signature.strip())
        except SelectorParseError as e:
            raise click.ClickException(str(e))
        click.echo(f"0x{selector_hex(declaration_selector(declaration))}  {declaration.signature}")


@cli.command("seed")
@click.option(
    "-o", "output_dir", required=True,
    type=click.Path(file_okay=False), help="signature directory to write into",
)
@click.argument("artifacts", nargs=-1, required=True, type=click.Path(dir_okay=False))
def seed_cmd(output_dir, artifacts):
    """Write 4byte records for every function in compiled ABI ARTIFACTS."""
    try:
        written = seed_directory([Path(a) for a in artifacts], Path(output_dir))
    except (AbiDbError, OSError) as e:
        raise click.ClickException(str(e))
    click.echo(f"{written} records written to {output_dir}")


if __name__ == "__main__":
    cli()
