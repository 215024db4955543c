"""Shared output formatting for CLI commands."""

import click

from fastcolor.codec import number_to_hex6, number_to_hex8, rgb_to_hsv, unpack_rgb, unpack_rgba
from fastcolor.exceptions import format_error_for_display


def describe_color(num: int, alpha: bool = False) -> str:
    """Render a packed color as 'number=... hex=... rgb=(...) hsv=(...)'."""
    if alpha:
        color = unpack_rgba(num)
        hex_str = number_to_hex8(num)
        components = f"rgba=({color.r}, {color.g}, {color.b}, {color.a})"
    else:
        color = unpack_rgb(num)
        hex_str = number_to_hex6(num)
        components = f"rgb=({color.r}, {color.g}, {color.b})"

    h, s, v = rgb_to_hsv(color.r, color.g, color.b)
    return f"number={num} hex={hex_str} {components} hsv=({h}, {s}, {v})"


def echo_error(error: Exception) -> None:
    """Print an error and its recovery hint to stderr."""
    user_message, recovery_hint = format_error_for_display(error)
    click.echo(f"ERROR: {user_message}", err=True)
    if recovery_hint:
        click.echo(recovery_hint, err=True)
