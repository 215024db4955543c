"""Data models for fastcolor."""

from .color import Rgb, Rgba
from .config import CodecConfig

__all__ = [
    "CodecConfig",
    # Models
    "Rgb",
    "Rgba",
]
