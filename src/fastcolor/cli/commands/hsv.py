"""HSV and RGB component commands."""

from typing import Optional

import click

from fastcolor.codec import hsv_to_rgb, pack_rgb, pack_rgba, rgb_to_hex

from ..output import describe_color


@click.command()
@click.argument('h', type=float)
@click.argument('s', type=float)
@click.argument('v', type=float)
def hsv(h: float, s: float, v: float):
    """
    Convert hue H (degrees), saturation S and value V (percent) to RGB.

    Hue wraps around the wheel; use '--' before a negative hue
    (fastcolor hsv -- -120 100 100).
    """
    r, g, b = hsv_to_rgb(h, s, v)
    click.echo(f"rgb=({r}, {g}, {b}) hex={rgb_to_hex(r, g, b)} number={pack_rgb(r, g, b)}")


@click.command()
@click.argument('r', type=click.IntRange(0, 255))
@click.argument('g', type=click.IntRange(0, 255))
@click.argument('b', type=click.IntRange(0, 255))
@click.option('--alpha', '-a', type=click.IntRange(0, 255), default=None, help='Alpha channel')
def rgb(r: int, g: int, b: int, alpha: Optional[int]):
    """Convert R, G, B channels (0-255) to a packed number, hex and HSV."""
    if alpha is None:
        click.echo(describe_color(pack_rgb(r, g, b)))
    else:
        click.echo(describe_color(pack_rgba(r, g, b, alpha), alpha=True))
