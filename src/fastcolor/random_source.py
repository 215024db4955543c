"""Random color generation.

``ColorRandom`` owns a uniform random source. Pass one around (or seed it)
for reproducible colors; the module-level functions use a shared default
instance for casual callers, the same way the standard ``random`` module
exposes its hidden ``Random`` instance.

Object and hex variants only unpack or encode the numeric generators'
output, so they consume exactly as much randomness as their numeric
counterparts.
"""

import logging
import math
import random
from threading import Lock
from typing import Optional, Protocol

from fastcolor.codec import (
    RGB_MAX,
    RGBA_MAX,
    number_to_hex6,
    number_to_hex8,
    pack_rgb,
    pack_rgba,
    unpack_rgb,
    unpack_rgba,
)
from fastcolor.models import Rgb, Rgba

logger = logging.getLogger(__name__)

BRIGHT_RANGE = (128, 255)
PASTEL_RANGE = (180, 230)


class UniformSource(Protocol):
    """Anything with a ``random()`` returning floats in [0, 1)."""

    def random(self) -> float: ...


class ColorRandom:
    """
    Random color generator backed by a single uniform source.

    Threading:
        Draws are serialized by a lock, so one instance can be shared
        between threads. Multi-channel colors are drawn under one lock
        acquisition, so a seeded instance yields the same colors regardless
        of what other threads draw in between.

    Example:
        ```python
        rng = ColorRandom(seed=42)
        rng.random_bright_hex_rgb()   # same value on every run
        ```
    """

    def __init__(self, seed: Optional[int] = None, source: Optional[UniformSource] = None):
        """
        Initialize the generator.

        Args:
            seed: Seed for a new ``random.Random`` (ignored if source is given)
            source: Existing uniform source to draw from
        """
        self._source = source if source is not None else random.Random(seed)
        self._lock = Lock()
        logger.debug(
            f"ColorRandom created (seed={seed}, source={type(self._source).__name__})"
        )

    def seed(self, seed: Optional[int] = None) -> None:
        """Reseed the underlying source (requires a ``random.Random``-like source)."""
        with self._lock:
            self._source.seed(seed)
        logger.debug(f"ColorRandom reseeded (seed={seed})")

    def uniform(self) -> float:
        """Draw one float in [0, 1)."""
        with self._lock:
            return self._source.random()

    def _in_range(self, lo: int, hi: int) -> int:
        return math.floor(self._source.random() * (hi - lo + 1) + lo)

    def random_in_range(self, lo: int, hi: int) -> int:
        """Draw an integer uniformly from [lo, hi], both inclusive."""
        with self._lock:
            return self._in_range(lo, hi)

    def _channels(self, count: int, lo: int, hi: int) -> list[int]:
        with self._lock:
            return [self._in_range(lo, hi) for _ in range(count)]

    # ------------------------------------------------------------------
    # Packed numbers
    # ------------------------------------------------------------------

    def random_rgb_number(self) -> int:
        """Uniform over 0x000000-0xFFFFFF."""
        return self.random_in_range(0, RGB_MAX)

    def random_rgba_number(self) -> int:
        """Uniform over 0x00000000-0xFFFFFFFF."""
        return self.random_in_range(0, RGBA_MAX)

    def random_bright_rgb_number(self) -> int:
        """Each channel uniform in 128-255."""
        return pack_rgb(*self._channels(3, *BRIGHT_RANGE))

    def random_pastel_rgb_number(self) -> int:
        """Each channel uniform in 180-230."""
        return pack_rgb(*self._channels(3, *PASTEL_RANGE))

    def random_bright_rgba_number(self) -> int:
        """Each channel, alpha included, uniform in 128-255."""
        return pack_rgba(*self._channels(4, *BRIGHT_RANGE))

    def random_pastel_rgba_number(self) -> int:
        """Each channel, alpha included, uniform in 180-230."""
        return pack_rgba(*self._channels(4, *PASTEL_RANGE))

    # ------------------------------------------------------------------
    # Component objects
    # ------------------------------------------------------------------

    def random_rgb(self) -> Rgb:
        return unpack_rgb(self.random_rgb_number())

    def random_rgba(self) -> Rgba:
        return unpack_rgba(self.random_rgba_number())

    def random_bright_rgb(self) -> Rgb:
        return unpack_rgb(self.random_bright_rgb_number())

    def random_pastel_rgb(self) -> Rgb:
        return unpack_rgb(self.random_pastel_rgb_number())

    def random_bright_rgba(self) -> Rgba:
        return unpack_rgba(self.random_bright_rgba_number())

    def random_pastel_rgba(self) -> Rgba:
        return unpack_rgba(self.random_pastel_rgba_number())

    # ------------------------------------------------------------------
    # Hex strings
    # ------------------------------------------------------------------

    def random_hex_rgb(self) -> str:
        return number_to_hex6(self.random_rgb_number())

    def random_hex_rgba(self) -> str:
        return number_to_hex8(self.random_rgba_number())

    def random_bright_hex_rgb(self) -> str:
        return number_to_hex6(self.random_bright_rgb_number())

    def random_pastel_hex_rgb(self) -> str:
        return number_to_hex6(self.random_pastel_rgb_number())

    def random_bright_hex_rgba(self) -> str:
        return number_to_hex8(self.random_bright_rgba_number())

    def random_pastel_hex_rgba(self) -> str:
        return number_to_hex8(self.random_pastel_rgba_number())


_default = ColorRandom()


def default_random() -> ColorRandom:
    """Return the process-wide generator used by the module-level functions."""
    return _default


seed = _default.seed
random_in_range = _default.random_in_range

random_rgb_number = _default.random_rgb_number
random_rgba_number = _default.random_rgba_number
random_bright_rgb_number = _default.random_bright_rgb_number
random_pastel_rgb_number = _default.random_pastel_rgb_number
random_bright_rgba_number = _default.random_bright_rgba_number
random_pastel_rgba_number = _default.random_pastel_rgba_number

random_rgb = _default.random_rgb
random_rgba = _default.random_rgba
random_bright_rgb = _default.random_bright_rgb
random_pastel_rgb = _default.random_pastel_rgb
random_bright_rgba = _default.random_bright_rgba
random_pastel_rgba = _default.random_pastel_rgba

random_hex_rgb = _default.random_hex_rgb
random_hex_rgba = _default.random_hex_rgba
random_bright_hex_rgb = _default.random_bright_hex_rgb
random_pastel_hex_rgb = _default.random_pastel_hex_rgb
random_bright_hex_rgba = _default.random_bright_hex_rgba
random_pastel_hex_rgba = _default.random_pastel_hex_rgba
