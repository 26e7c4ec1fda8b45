"""Pan/zoom bounds and crop-rectangle geometry for image crop viewports."""

from .errors import CropViewError, GeometryError, InvalidSizeError
from .geometry import (
    compute_offset,
    compute_scaled_height,
    compute_scaled_multiplier,
    compute_scaled_width,
    compute_size,
    compute_translate,
    compute_translation,
    get_aspect_ratio,
    is_in_range,
    round_fixed,
    translate_range_x,
    translate_range_y,
)
from .models import Range, Size, Translation
from .pipeline import CropRegion, compute_crop_region

__all__ = [
    "CropRegion",
    "CropViewError",
    "GeometryError",
    "InvalidSizeError",
    "Range",
    "Size",
    "Translation",
    "compute_crop_region",
    "compute_offset",
    "compute_scaled_height",
    "compute_scaled_multiplier",
    "compute_scaled_width",
    "compute_size",
    "compute_translate",
    "compute_translation",
    "get_aspect_ratio",
    "is_in_range",
    "round_fixed",
    "translate_range_x",
    "translate_range_y",
]
