"""Random color and palette commands."""

import sys
from typing import Callable, Optional

import click

from fastcolor.codec import number_to_hex6, number_to_hex8, unpack_rgb, unpack_rgba
from fastcolor.exceptions import FastColorError
from fastcolor.models import CodecConfig
from fastcolor.palette import generate_even_hue_palette, generate_golden_ratio_palette
from fastcolor.random_source import ColorRandom

from ..output import echo_error

# (kind, alpha) -> numeric generator
GENERATORS: dict[tuple[str, bool], Callable[[ColorRandom], int]] = {
    ("uniform", False): ColorRandom.random_rgb_number,
    ("uniform", True): ColorRandom.random_rgba_number,
    ("bright", False): ColorRandom.random_bright_rgb_number,
    ("bright", True): ColorRandom.random_bright_rgba_number,
    ("pastel", False): ColorRandom.random_pastel_rgb_number,
    ("pastel", True): ColorRandom.random_pastel_rgba_number,
}


def format_number(num: int, output_format: str, alpha: bool) -> str:
    """Render a packed color as hex, decimal or a component tuple."""
    if output_format == "number":
        return str(num)
    if output_format == "rgb":
        color = unpack_rgba(num) if alpha else unpack_rgb(num)
        return ", ".join(str(c) for c in color.to_tuple())
    return number_to_hex8(num) if alpha else number_to_hex6(num)


@click.command(name="random")
@click.option('--count', '-n', type=click.IntRange(min=1), default=1, help='Number of colors')
@click.option(
    '--kind',
    '-k',
    type=click.Choice(['uniform', 'bright', 'pastel'], case_sensitive=False),
    default='uniform',
    help='uniform: any color, bright: channels 128-255, pastel: channels 180-230'
)
@click.option('--alpha', '-a', is_flag=True, help='Include a random alpha channel')
@click.option(
    '--format',
    '-f',
    'output_format',
    type=click.Choice(['hex', 'number', 'rgb'], case_sensitive=False),
    default='hex',
    help='Output format (default: hex)'
)
@click.option('--seed', type=int, default=None, help='Seed for reproducible output')
@click.pass_obj
def random_colors(
    config: CodecConfig,
    count: int,
    kind: str,
    alpha: bool,
    output_format: str,
    seed: Optional[int],
):
    """Print random colors, one per line."""
    rng = ColorRandom(seed=seed if seed is not None else config.seed)
    generate = GENERATORS[(kind.lower(), alpha)]

    for _ in range(count):
        click.echo(format_number(generate(rng), output_format.lower(), alpha))


@click.command()
@click.argument('kind', type=click.Choice(['even', 'golden'], case_sensitive=False))
@click.option('--count', '-n', type=int, default=5, help='Number of colors (default: 5)')
@click.option('--seed', type=int, default=None, help='Seed for the golden-ratio starting hue')
@click.pass_obj
def palette(config: CodecConfig, kind: str, count: int, seed: Optional[int]):
    """
    Print a palette of KIND 'even' (evenly spaced hues) or 'golden'
    (golden-ratio hue steps from a random start).
    """
    try:
        if kind.lower() == "even":
            colors = generate_even_hue_palette(
                count,
                saturation=config.even_hue_saturation,
                value=config.even_hue_value,
            )
        else:
            rng = ColorRandom(seed=seed if seed is not None else config.seed)
            colors = generate_golden_ratio_palette(
                count,
                saturation=config.golden_saturation,
                value=config.golden_value,
                rng=rng,
            )
    except FastColorError as e:
        echo_error(e)
        sys.exit(1)

    for i, num in enumerate(colors):
        click.echo(f"{i + 1:>3}  {number_to_hex6(int(num))}  {int(num)}")
