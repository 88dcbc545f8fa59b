"""Bundle command."""

import sys
from pathlib import Path
from typing import Optional, Tuple

import click
from loguru import logger

from bundler_engine import IGNORED_EXTENSIONS, BundlerError, build_bundle, write_bundle
from bundler_engine.bundle import STDOUT_MARKER
from bundler_engine.scanner import normalize_extension

from .. import __version__
from ..config import configure_logging


@click.command(name="bundle")
@click.argument("source_dir", type=click.Path(path_type=Path))
@click.argument("output", required=False, default=STDOUT_MARKER, type=click.Path())
@click.option(
    "--ignore-ext",
    "ignore_ext",
    multiple=True,
    metavar="EXT",
    help="Extra file extension to leave out (repeatable, e.g. --ignore-ext .map)",
)
@click.option("-v", "--verbose", count=True, help="Log progress to stderr (-vv for every file)")
@click.version_option(version=__version__, prog_name="static-bundle")
def bundle(source_dir: Path, output: str, ignore_ext: Tuple[str, ...], verbose: int):
    """Pack the static files under SOURCE_DIR into a JSON bundle.

    The bundle goes to OUTPUT, or to stdout when OUTPUT is omitted or "-".
    """
    configure_logging(verbose)

    ignored = IGNORED_EXTENSIONS | {normalize_extension(ext) for ext in ignore_ext if ext.strip()}
    logger.debug(f"Ignored extensions: {', '.join(sorted(ignored))}")

    destination: Optional[str] = None if output == STDOUT_MARKER else output

    try:
        result = build_bundle(source_dir, ignored_extensions=ignored)
        written = write_bundle(result, destination)
    except BundlerError as e:
        click.echo(f"❌ {type(e).__name__}: {e}", err=True)
        sys.exit(e.exit_code)

    if written is not None:
        click.echo(f"✅ Bundle created: {written} ({len(result.files)} files)", err=True)
