"""
Command-line interface for ptime.

Commands:
    oldest: Print the oldest photo under a directory
    latest: Print the most recent photo under a directory
    histogram (alias hist): Print a per-year bar chart of photo counts

Exit status is 0 on success, 3 when the environment gets in the way
(missing directory, unreadable directory or file), 1 for other errors and
2 for usage errors.

Example:
    $ ptime oldest ~/Pictures
    2004/summer/IMG_0001.jpg 2004-07-12
    $ ptime histogram --width 40 ~/Pictures
"""

import logging
from pathlib import Path
from typing import List

import click
import yaml

from ptime.analysis import build_histogram, find_latest, find_oldest
from ptime.config import Config
from ptime.errors import PtimeError, exit_code_for
from ptime.models import CaptureRecord
from ptime.render import render_histogram
from ptime.scanner import collect_photos
from ptime.utils import setup_logging

logger = logging.getLogger(__name__)

directory_argument = click.argument(
    "directory",
    required=False,
    default=".",
    type=click.Path(path_type=Path),
)


@click.group()
@click.option("--config", "-c", "config_path", type=click.Path(exists=True, dir_okay=False),
              help="YAML configuration file")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.option("--quiet", "-q", is_flag=True, help="Only log errors")
@click.version_option(package_name="ptime")
@click.pass_context
def main(ctx, config_path, verbose, quiet):
    """Analyze photo timestamps from JPEG files.

    Reads the EXIF capture date of every JPEG under DIRECTORY (default: the
    current directory) and reports the oldest photo, the latest photo, or a
    histogram of photos per year. DIRECTORY must be a directory; passing a
    single file is an error (exit status 3).
    """
    ctx.ensure_object(dict)

    if config_path:
        try:
            config = Config.load_from_file(config_path)
        except (ValueError, TypeError, yaml.YAMLError) as e:
            raise click.BadParameter(str(e), param_hint="'--config'") from e
    else:
        config = Config()

    if quiet:
        log_level = "ERROR"
    elif verbose:
        log_level = "DEBUG"
    else:
        log_level = config.logging.level

    setup_logging(log_level)
    ctx.obj["config"] = config


@main.command()
@directory_argument
@click.pass_context
def oldest(ctx, directory):
    """Find the oldest photo."""
    records = _collect(ctx, directory)
    record = find_oldest(records)
    if record is not None:
        click.echo(record.format_line())


@main.command()
@directory_argument
@click.pass_context
def latest(ctx, directory):
    """Find the most recent photo."""
    records = _collect(ctx, directory)
    record = find_latest(records)
    if record is not None:
        click.echo(record.format_line())


@main.command()
@click.option("--width", "-w", type=click.IntRange(min=1), default=None,
              help="Width of histogram bars (1-200, larger values are clamped)")
@directory_argument
@click.pass_context
def histogram(ctx, width, directory):
    """Show histogram of photos by year."""
    histogram_config = ctx.obj["config"].histogram
    if width is None:
        width = histogram_config.default_width
    width = histogram_config.clamp_width(width)

    records = _collect(ctx, directory)
    for line in render_histogram(build_histogram(records), width, histogram_config.bar_char):
        click.echo(line)


main.add_command(histogram, name="hist")


def _collect(ctx: click.Context, directory: Path) -> List[CaptureRecord]:
    """Run the collector, turning pipeline errors into an exit status."""
    config = ctx.obj["config"]
    try:
        return collect_photos(directory, config.scan.extensions)
    except PtimeError as e:
        logger.debug("Collection failed", exc_info=True)
        click.echo(f"Error: {e}", err=True)
        ctx.exit(exit_code_for(e))


if __name__ == "__main__":
    main()
