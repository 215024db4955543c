"""fastcolor: fast conversions between hex strings, packed integers, RGB(A) and HSV."""

__version__ = "0.1.0"

# Codec
from .codec import (
    hex_to_number,
    hex_to_number_fast,
    hex_to_numbers,
    hex_to_rgb,
    hex_to_rgba,
    hsv_to_rgb,
    is_hex,
    normalize_hex,
    number_to_hex6,
    number_to_hex8,
    numbers_to_hex,
    pack_rgb,
    pack_rgb_array,
    pack_rgba,
    pack_rgba_array,
    rgb_to_hex,
    rgb_to_hsv,
    rgba_to_hex,
    unpack_rgb,
    unpack_rgb_array,
    unpack_rgba,
    unpack_rgba_array,
)

# Models
from .models import Rgb, Rgba

# Palettes
from .palette import (
    generate_even_hue_palette,
    generate_golden_ratio_palette,
    iter_golden_ratio_palette,
)

# Random colors
from .random_source import (
    ColorRandom,
    default_random,
    random_bright_hex_rgb,
    random_bright_hex_rgba,
    random_bright_rgb,
    random_bright_rgb_number,
    random_bright_rgba,
    random_bright_rgba_number,
    random_hex_rgb,
    random_hex_rgba,
    random_in_range,
    random_pastel_hex_rgb,
    random_pastel_hex_rgba,
    random_pastel_rgb,
    random_pastel_rgb_number,
    random_pastel_rgba,
    random_pastel_rgba_number,
    random_rgb,
    random_rgb_number,
    random_rgba,
    random_rgba_number,
    seed,
)

__all__ = [
    "ColorRandom",
    "Rgb",
    "Rgba",
    "default_random",
    "generate_even_hue_palette",
    "generate_golden_ratio_palette",
    "hex_to_number",
    "hex_to_number_fast",
    "hex_to_numbers",
    "hex_to_rgb",
    "hex_to_rgba",
    "hsv_to_rgb",
    "is_hex",
    "iter_golden_ratio_palette",
    "normalize_hex",
    "number_to_hex6",
    "number_to_hex8",
    "numbers_to_hex",
    "pack_rgb",
    "pack_rgb_array",
    "pack_rgba",
    "pack_rgba_array",
    "random_bright_hex_rgb",
    "random_bright_hex_rgba",
    "random_bright_rgb",
    "random_bright_rgb_number",
    "random_bright_rgba",
    "random_bright_rgba_number",
    "random_hex_rgb",
    "random_hex_rgba",
    "random_in_range",
    "random_pastel_hex_rgb",
    "random_pastel_hex_rgba",
    "random_pastel_rgb",
    "random_pastel_rgb_number",
    "random_pastel_rgba",
    "random_pastel_rgba_number",
    "random_rgb",
    "random_rgb_number",
    "random_rgba",
    "random_rgba_number",
    "rgb_to_hex",
    "rgb_to_hsv",
    "rgba_to_hex",
    "seed",
    "unpack_rgb",
    "unpack_rgb_array",
    "unpack_rgba",
    "unpack_rgba_array",
]
