"""
Main application entry point for momento2dayone.

This module provides the CLI commands for parsing a Momento export
and importing its moments into Day One.
"""

import asyncio
import json
import sys
import time
from pathlib import Path
from typing import List, Optional

import click

from . import __version__
from .core.logging import setup_logging, get_logger, log_processing_stage, log_error_with_context
from .core.exceptions import Momento2DayOneError
from .settings import AppSettings, get_settings, reload_settings
from .momento.parser import parse_file
from .dayone.importer import DayOneImporter, check_environment
from .dayone.projection import project_all
from .dayone.schemas import DayOneEntry


logger = get_logger(__name__)

EXPORT_PATH = click.Path(exists=True, dir_okay=False, path_type=Path)
MEDIA_DIR = click.Path(file_okay=False, path_type=Path)


@click.group()
@click.version_option(version=__version__)
@click.option('--config', '-c', type=click.Path(exists=True, dir_okay=False, path_type=Path),
              help='Configuration file path')
@click.option('--debug', '-d', is_flag=True, help='Enable debug mode')
@click.pass_context
def cli(ctx: click.Context, config: Optional[Path], debug: bool):
    """momento2dayone - import a Momento journal export into Day One."""
    settings = reload_settings(yaml_path=config) if config else get_settings()

    if debug:
        settings.debug = True
        settings.logging.level = "DEBUG"

    setup_logging(settings.logging, "momento2dayone")

    if config:
        logger.info(f"Using configuration file: {config}")
    if debug:
        logger.info("Debug mode enabled")

    ctx.obj = settings


@cli.command(name="parse")
@click.argument('export', type=EXPORT_PATH)
@click.option('--media-dir', '-m', type=MEDIA_DIR,
              help='Attachments directory (default: Attachments beside the export)')
@click.option('--expect', type=click.IntRange(min=0), help='Number of moments Momento reported')
@click.option('--json', 'as_json', is_flag=True, help='Print projected entries as JSON')
@click.pass_obj
def parse_command(settings: AppSettings, export: Path, media_dir: Optional[Path],
                  expect: Optional[int], as_json: bool):
    """Parse an export and show what would be imported."""
    try:
        entries = load_entries(settings, export, media_dir, expect, quiet=as_json)
    except Momento2DayOneError as e:
        fail(e, "parse")

    if as_json:
        click.echo(json.dumps(
            [entry.model_dump() for entry in entries],
            indent=2,
            ensure_ascii=False
        ))


@cli.command(name="import")
@click.argument('export', type=EXPORT_PATH)
@click.option('--media-dir', '-m', type=MEDIA_DIR,
              help='Attachments directory (default: Attachments beside the export)')
@click.option('--expect', type=click.IntRange(min=0), help='Number of moments Momento reported')
@click.option('--dry-run', is_flag=True, help='Log dayone2 commands without running them')
@click.option('--limit', type=click.IntRange(min=1), help='Import only the first N entries')
@click.pass_obj
def import_command(settings: AppSettings, export: Path, media_dir: Optional[Path],
                   expect: Optional[int], dry_run: bool, limit: Optional[int]):
    """Import an export into Day One."""
    asyncio.run(run_import(settings, export, media_dir, expect, dry_run, limit))


@cli.command()
@click.pass_obj
def check(settings: AppSettings):
    """Check that the Day One command line tool is available."""
    click.echo("🔍 Checking environment...")
    try:
        executable = check_environment(settings.dayone)
    except Momento2DayOneError as e:
        fail(e, "check")

    click.echo(f"  • Platform: {sys.platform}")
    click.echo(f"  • dayone2: {executable}")
    click.echo("✅ Ready to import")


def load_entries(
    settings: AppSettings,
    export: Path,
    media_dir: Optional[Path],
    expect: Optional[int],
    quiet: bool = False
) -> List[DayOneEntry]:
    """Parse the export, report what was found and project the moments."""
    log_processing_stage("parse", {"export": str(export)})

    start_time = time.time()
    moments = parse_file(export, media_dir or settings.momento.media_dir)
    duration = time.time() - start_time

    click.echo(f"✅ Parse complete ({duration:.2f}s)", err=quiet)
    click.echo(f"  • Moments found: {len(moments)}", err=quiet)

    expected = expect if expect is not None else settings.momento.expected_moments
    if expected is not None and expected != len(moments):
        logger.warning(f"Expected {expected} moments but parsed {len(moments)}")
        click.echo(f"  • ⚠️  Expected {expected} moments", err=quiet)

    return project_all(moments)


async def run_import(
    settings: AppSettings,
    export: Path,
    media_dir: Optional[Path],
    expect: Optional[int],
    dry_run: bool,
    limit: Optional[int] = None
):
    """Parse the export and import every entry into Day One."""
    try:
        if not dry_run:
            check_environment(settings.dayone)

        entries = load_entries(settings, export, media_dir, expect)
        if limit is not None:
            entries = entries[:limit]

        log_processing_stage("import", {"entries": len(entries), "dry_run": dry_run})
        click.echo("🚀 Starting Day One import...")

        importer = DayOneImporter(settings.dayone)
        result = await importer.import_entries(entries, dry_run=dry_run, progress=show_progress)
        click.echo()

    except Momento2DayOneError as e:
        fail(e, "import")

    click.echo("\n📊 Summary:")
    click.echo(f"  • Entries: {result.total}")
    click.echo(f"  • Imported: {result.imported}")
    click.echo(f"  • Errors: {result.failed}")
    click.echo(f"  • Processing time: {result.processing_time:.2f}s")

    if not result.success:
        for failure in result.failures:
            click.echo(f"  • ❌ {failure.iso_timestamp}: {failure.output}")
        sys.exit(1)

    click.echo("✅ Import complete!")


def show_progress(position: int, total: int) -> None:
    """Rewrite the progress line in place."""
    click.echo(f"\rDay One import running - entry {position} of {total}.", nl=False)


def fail(error: Momento2DayOneError, command: str) -> None:
    """Report an application error and exit with status 1."""
    log_error_with_context(error, error.details, module=command)
    click.echo(f"❌ Error: {error.message}", err=True)
    sys.exit(1)


def main():
    """Main entry point."""
    try:
        cli()
    except KeyboardInterrupt:
        click.echo("\n👋 Goodbye!")
        sys.exit(0)
    except Exception as e:
        logger.error(f"Application error: {e}")
        click.echo(f"❌ Application error: {str(e)}")
        sys.exit(1)


if __name__ == "__main__":
    main()
