"""CLI commands for fastcolor."""

from .convert import convert, validate
from .generate import palette, random_colors
from .hsv import hsv, rgb

__all__ = ["convert", "hsv", "palette", "random_colors", "rgb", "validate"]
