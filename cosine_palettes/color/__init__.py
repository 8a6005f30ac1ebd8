# Color analysis: conversions, perceptual distance, temperature, naming, string formats

from .basic_colors import (
    BASIC_COLORS,
    BasicColorResult,
    analyze_basic_colors,
    classify_color,
    summarize_basic_colors,
)
from .formats import color_to_all_formats, hex_to_rgb, rgb_to_hex
from .space import (
    brightness,
    delta_e,
    has_distinct_pair,
    hsv_to_rgb,
    hue_distance,
    is_cool,
    is_warm,
    min_pairwise_delta_e,
    palette_hsv,
    palette_lab,
    rgb_to_hsv,
    rgb_to_lab,
    saturation,
    value,
)

__all__ = [
    "BASIC_COLORS",
    "BasicColorResult",
    "analyze_basic_colors",
    "classify_color",
    "summarize_basic_colors",
    "color_to_all_formats",
    "hex_to_rgb",
    "rgb_to_hex",
    "brightness",
    "delta_e",
    "has_distinct_pair",
    "hsv_to_rgb",
    "hue_distance",
    "is_cool",
    "is_warm",
    "min_pairwise_delta_e",
    "palette_hsv",
    "palette_lab",
    "rgb_to_hsv",
    "rgb_to_lab",
    "saturation",
    "value",
]
