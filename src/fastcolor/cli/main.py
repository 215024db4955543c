"""Main CLI entry point."""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

import click

from fastcolor import __version__
from fastcolor.exceptions import FastColorError
from fastcolor.models import CodecConfig

from .commands import convert, hsv, palette, random_colors, rgb, validate
from .output import echo_error

logger = logging.getLogger(__name__)

HANDLER_NAME = "fastcolor-cli"


def setup_logging(verbose: int, log_file: Optional[Path]) -> None:
    """
    Configure logging for the CLI.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        log_file: Log to this file instead of stderr (optional)
    """
    if verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Replace handlers from an earlier invocation in the same process
    for handler in list(root_logger.handlers):
        if handler.get_name() == HANDLER_NAME:
            root_logger.removeHandler(handler)
            handler.close()

    if log_file:
        # Rotating file handler (keeps last 5 files, max 10MB each)
        handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,
            backupCount=5
        )
    elif verbose:
        handler = logging.StreamHandler()
    else:
        # Warnings still reach stderr through logging's last-resort handler
        return

    handler.set_name(HANDLER_NAME)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    ))
    root_logger.addHandler(handler)

    logger.info(f"Logging configured: level={logging.getLevelName(level)}, file={log_file}")


@click.group()
@click.pass_context
@click.version_option(version=__version__, prog_name="fastcolor")
@click.option(
    '--config',
    'config_path',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Settings file (default: ~/.fastcolor/config.json)'
)
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase verbosity (-v: INFO, -vv: DEBUG)'
)
@click.option(
    '--log-file',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Write logs to this file instead of stderr'
)
def cli(ctx, config_path: Optional[Path], verbose: int, log_file: Optional[Path]):
    """
    fastcolor - convert colors between hex, packed numbers, RGB(A) and HSV.

    \b
    Examples:
      # Decode hex and packed numbers
      fastcolor convert '#ff8040' 13132856

    \b
      # Check hex strings
      fastcolor validate '#abc' '#xyz123'

    \b
      # Five bright random colors, reproducibly
      fastcolor random --kind bright --count 5 --seed 7

    \b
      # Palettes
      fastcolor palette even --count 8
      fastcolor palette golden --count 8
    """
    setup_logging(verbose, log_file)

    try:
        ctx.obj = CodecConfig.load_or_default(config_path)
    except FastColorError as e:
        logger.error(f"Failed to load configuration: {e.technical_message}")
        echo_error(e)
        sys.exit(1)


cli.add_command(convert)
cli.add_command(validate)
cli.add_command(random_colors)
cli.add_command(palette)
cli.add_command(hsv)
cli.add_command(rgb)

if __name__ == "__main__":
    cli()
