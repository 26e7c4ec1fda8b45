"""Compose the geometry functions into a crop rectangle for export."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .geometry import (
    compute_offset,
    compute_scaled_height,
    compute_scaled_multiplier,
    compute_scaled_width,
    compute_size,
    compute_translate,
    translate_range_x,
    translate_range_y,
)
from .models import Size, Translation

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class CropRegion:
    """Crop rectangle in the image's own pixel grid."""

    offset: Translation
    size: Size

    def as_mapping(self) -> dict[str, dict[str, float]]:
        return {
            "offset": self.offset.as_mapping(),
            "size": {"width": float(self.size.width), "height": float(self.size.height)},
        }


def compute_crop_region(
    image_size: Size,
    crop_area_size: Size,
    scale: float,
    min_zoom: float,
    translate_x: float,
    translate_y: float,
) -> CropRegion:
    """Return the image-space crop for the current on-screen pan and zoom.

    The translation is used as given; clamp it with
    :func:`~cropview.geometry.compute_translation` against the ranges at
    *scale* before calling this.
    """
    range_x = translate_range_x(scale, image_size, crop_area_size, min_zoom)
    range_y = translate_range_y(scale, image_size, crop_area_size, min_zoom)
    scaled_size = Size(
        width=compute_scaled_width(scale, image_size, crop_area_size, min_zoom),
        height=compute_scaled_height(scale, image_size, crop_area_size, min_zoom),
    )
    multiplier = compute_scaled_multiplier(image_size, scaled_size.width)
    translate = compute_translate(image_size, translate_x, translate_y)
    LOGGER.debug(
        "Crop pipeline: scale=%s ranges=(%s, %s) scaled=%sx%s multiplier=%s",
        scale,
        range_x.max,
        range_y.max,
        scaled_size.width,
        scaled_size.height,
        multiplier,
    )

    offset = compute_offset(
        scaled_size,
        image_size,
        translate,
        range_x.max,
        range_y.max,
        multiplier,
    )
    size = compute_size(crop_area_size, multiplier)
    return CropRegion(offset=offset, size=size)
