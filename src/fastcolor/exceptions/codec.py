"""Color codec exceptions.

This module defines exceptions for malformed color input:
- InvalidHexError: Hex string has the wrong shape or a non-hex digit
- ChannelRangeError: Channel value outside 0-255
- InvalidPaletteSizeError: Palette requested with count <= 0

Each also derives from ValueError so callers that only know the
standard library can still catch them.
"""

from typing import Any, Optional

from .base import FastColorError


class InvalidHexError(FastColorError, ValueError):
    """Hex color string is malformed."""

    def __init__(self, value: Any, reason: str, expected: Optional[str] = None):
        """
        Initialize invalid hex error.

        Args:
            value: The rejected input
            reason: Why the input was rejected
            expected: Description of the accepted shapes (optional)
        """
        recovery = "Check the value with is_hex() before decoding"
        if expected:
            recovery = f"Expected {expected}\n" + recovery

        super().__init__(
            user_message=f"Invalid hex color {value!r}: {reason}",
            technical_message=f"Hex decode failed for {value!r} ({type(value).__name__}): {reason}",
            recoverable=True,
            recovery_hint=recovery
        )
        self.value = value
        self.reason = reason


class ChannelRangeError(FastColorError, ValueError):
    """Color channel is outside the 8-bit range."""

    def __init__(self, channel: str, value: Any):
        """
        Initialize channel range error.

        Args:
            channel: Channel name ("r", "g", "b" or "a")
            value: The rejected channel value
        """
        super().__init__(
            user_message=f"Channel '{channel}' must be between 0 and 255, got {value!r}",
            recoverable=True,
            recovery_hint="Clamp channel values to 0-255 before converting"
        )
        self.channel = channel
        self.value = value


class InvalidPaletteSizeError(FastColorError, ValueError):
    """Palette size is not a positive integer."""

    def __init__(self, count: Any):
        """
        Initialize invalid palette size error.

        Args:
            count: The rejected palette size
        """
        super().__init__(
            user_message=f"Palette size must be a positive integer, got {count!r}",
            recoverable=True,
            recovery_hint="Request at least one color"
        )
        self.count = count
