"""
Custom exception hierarchy for fastcolor.

## Exception Hierarchy

```
FastColorError (base)
├── InvalidHexError          (also ValueError)
├── ChannelRangeError        (also ValueError)
├── InvalidPaletteSizeError  (also ValueError)
└── ConfigurationError
    ├── ConfigFileInvalidError
    └── ConfigValidationError
```

## Policies

- Hex decoders fail fast with `InvalidHexError`. `is_hex()` is the
  non-raising way to check a string first.
- Packing and hex encoding mask each channel to its low 8 bits.
  `rgb_to_hsv()` and the `Rgb`/`Rgba` models reject out-of-range channels.
- Palette generators reject `count <= 0` with `InvalidPaletteSizeError`.

### Example: Invalid Hex

```python
from fastcolor import hex_to_rgb
from fastcolor.exceptions import InvalidHexError

try:
    hex_to_rgb("#12345")
except InvalidHexError as e:
    print(e.user_message)   # Invalid hex color '#12345': ...
    print(e.recovery_hint)  # Expected 3 or 6 hex digits ...
```
"""

from .base import FastColorError
from .codec import ChannelRangeError, InvalidHexError, InvalidPaletteSizeError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError
from .handlers import (
    ErrorCollector,
    collect_errors,
    format_error_for_display,
    wrap_pydantic_error,
)

__all__ = [
    # Base
    "FastColorError",
    # Codec
    "ChannelRangeError",
    "InvalidHexError",
    "InvalidPaletteSizeError",
    # Config
    "ConfigFileInvalidError",
    "ConfigValidationError",
    "ConfigurationError",
    # Handlers
    "ErrorCollector",
    "collect_errors",
    "format_error_for_display",
    "wrap_pydantic_error",
]
