"""Procedural palette generators.

Both generators return packed 0xRRGGBB values in a ``uint32`` array.

- ``generate_even_hue_palette`` spaces hues evenly around the wheel, so it
  needs to know the palette size up front.
- ``iter_golden_ratio_palette`` steps the hue by the golden ratio's
  conjugate (about 222.49 degrees) each time. Hues never repeat and stay
  well spread however many are taken, so it is an endless iterator;
  ``generate_golden_ratio_palette`` takes the first ``count`` of a fresh one.
"""

import itertools
import logging
from collections.abc import Iterator
from typing import Optional

import numpy as np
import numpy.typing as npt

from fastcolor.codec import hsv_to_rgb, pack_rgb
from fastcolor.exceptions import InvalidPaletteSizeError
from fastcolor.random_source import ColorRandom, default_random

logger = logging.getLogger(__name__)

GOLDEN_RATIO_CONJUGATE = 0.618033988749895

EVEN_HUE_SATURATION = 80
EVEN_HUE_VALUE = 60
GOLDEN_SATURATION = 70
GOLDEN_VALUE = 65


def _check_count(count: int) -> None:
    # bool is an int subclass but never a meaningful size
    if not isinstance(count, int) or isinstance(count, bool) or count <= 0:
        raise InvalidPaletteSizeError(count)


def generate_even_hue_palette(
    count: int,
    saturation: float = EVEN_HUE_SATURATION,
    value: float = EVEN_HUE_VALUE,
) -> npt.NDArray[np.uint32]:
    """
    Generate colors with hues evenly spaced across [0, 360).

    Args:
        count: Number of colors (at least 1)
        saturation: HSV saturation in percent
        value: HSV value in percent

    Returns:
        Packed RGB numbers, hue ``i * 360 / count`` at index ``i``

    Raises:
        InvalidPaletteSizeError: If count is not a positive integer

    Example:
        >>> [hex(n) for n in generate_even_hue_palette(3, 100, 100)]
        ['0xff0000', '0xff00', '0xff']
    """
    _check_count(count)

    palette = np.empty(count, dtype=np.uint32)
    step = 360 / count
    for i in range(count):
        palette[i] = pack_rgb(*hsv_to_rgb(i * step, saturation, value))

    logger.debug(f"Generated even-hue palette: count={count}, s={saturation}, v={value}")
    return palette


def iter_golden_ratio_palette(
    start_hue: Optional[float] = None,
    saturation: float = GOLDEN_SATURATION,
    value: float = GOLDEN_VALUE,
    rng: Optional[ColorRandom] = None,
) -> Iterator[int]:
    """
    Yield packed RGB numbers forever, stepping the hue by the golden ratio.

    The hue advances before each color, so the first color is one step
    past ``start_hue``.

    Args:
        start_hue: Starting hue in degrees (random if None)
        saturation: HSV saturation in percent
        value: HSV value in percent
        rng: Random source for the starting hue (default generator if None)
    """
    if start_hue is None:
        start_hue = (rng or default_random()).uniform() * 360

    step = GOLDEN_RATIO_CONJUGATE * 360
    hue = start_hue
    while True:
        hue = (hue + step) % 360
        yield pack_rgb(*hsv_to_rgb(hue, saturation, value))


def generate_golden_ratio_palette(
    count: int,
    saturation: float = GOLDEN_SATURATION,
    value: float = GOLDEN_VALUE,
    rng: Optional[ColorRandom] = None,
) -> npt.NDArray[np.uint32]:
    """
    Generate ``count`` well-spread colors from a random starting hue.

    Every call starts from a fresh random hue, so two calls almost never
    return the same palette. Pass a seeded ``rng`` for reproducible output.

    Raises:
        InvalidPaletteSizeError: If count is not a positive integer
    """
    _check_count(count)

    colors = iter_golden_ratio_palette(saturation=saturation, value=value, rng=rng)
    palette = np.fromiter(itertools.islice(colors, count), dtype=np.uint32, count=count)

    logger.debug(f"Generated golden-ratio palette: count={count}, s={saturation}, v={value}")
    return palette
