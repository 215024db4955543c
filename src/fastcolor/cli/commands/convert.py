"""Convert and validate commands."""

import logging
import sys

import click

from fastcolor.codec import RGB_MAX, RGBA_MAX, hex_to_rgb, hex_to_rgba, is_hex
from fastcolor.exceptions import FastColorError, collect_errors

from ..output import describe_color

logger = logging.getLogger(__name__)


def parse_color(value: str, alpha: bool = False) -> int:
    """
    Parse a CLI color argument into a packed number.

    Digit-only values are decimal packed numbers; anything else is a hex
    string with or without '#'.

    Raises:
        InvalidHexError: If a hex value is malformed
        FastColorError: If a decimal value is out of range
    """
    if value.isdecimal():
        num = int(value)
        limit = RGBA_MAX if alpha else RGB_MAX
        if num > limit:
            raise FastColorError(
                user_message=f"{value} is outside the packed range 0-{limit}",
                recoverable=True,
                recovery_hint="Prefix hex values with '#' (e.g. '#123456')"
            )
        return num

    if alpha:
        return hex_to_rgba(value).to_number()
    return hex_to_rgb(value).to_number()


@click.command()
@click.argument('values', nargs=-1, required=True)
@click.option('--alpha', '-a', is_flag=True, help='Treat values as RGBA')
def convert(values: tuple[str, ...], alpha: bool):
    """
    Show every representation of one or more colors.

    VALUES are hex strings ('#ff8040', '#f84', 'ff8040') or decimal
    packed numbers (16744512). All values are converted; failures are
    listed at the end.
    """
    collector = collect_errors("convert colors")

    for value in values:
        with collector.try_operation(f"convert {value!r}"):
            num = parse_color(value, alpha)
            click.echo(f"{value}: {describe_color(num, alpha)}")

    if collector.has_errors:
        logger.warning(f"{collector.error_count} of {len(values)} values failed to convert")
        click.echo(collector.get_summary(), err=True)
        sys.exit(1)


@click.command()
@click.argument('values', nargs=-1, required=True)
def validate(values: tuple[str, ...]):
    """Check that VALUES are '#' followed by 3, 4, 6 or 8 hex digits."""
    invalid = 0
    for value in values:
        if is_hex(value):
            click.echo(f'"{value}" -> VALID')
        else:
            invalid += 1
            click.echo(f'"{value}" -> INVALID')

    if invalid:
        sys.exit(1)
