"""
Pan/zoom geometry for an image displayed inside a fixed-size crop viewport.

The image is first fitted so that it exactly covers the crop area at the
minimum zoom. Along the *fit* dimension the rendered image matches the crop
area; along the other dimension it overhangs, and that overhang (the slack)
grows with the zoom scale. Everything here derives from that picture:

* :func:`translate_range_x` / :func:`translate_range_y` give the symmetric
  window a pan may move within before an image edge becomes visible.
* :func:`compute_translation` applies a drag delta and clamps it into a range.
* :func:`compute_scaled_width` / :func:`compute_scaled_height` give the
  rendered image size, and :func:`compute_scaled_multiplier` the ratio that
  projects screen-space lengths back into image pixels.
* :func:`compute_translate`, :func:`compute_offset` and :func:`compute_size`
  turn the on-screen state into a crop rectangle expressed in the image's own
  (possibly rotated) pixel grid, ready for a crop export.

All functions are pure. Degenerate input (zero sizes, unknown rotations) is
not rejected: divisions follow IEEE semantics and produce ``inf``/``nan``
which propagate to the caller unchanged.
"""

from __future__ import annotations

import logging
import math
from decimal import ROUND_HALF_UP, Context, Decimal

import numpy as np

from .config import OFFSET_DECIMALS, ROTATION_90, ROTATION_180, ROTATION_270
from .models import Range, Size, Translation

LOGGER = logging.getLogger(__name__)

# Fixed-point formatting gives up above this magnitude and returns the
# value unchanged.
_FIXED_POINT_LIMIT = 1e21
_DECIMAL_CONTEXT = Context(prec=48)


def _divide(numerator: float, denominator: float) -> float:
    """Divide with IEEE semantics instead of raising ``ZeroDivisionError``."""
    with np.errstate(divide="ignore", invalid="ignore"):
        result = float(np.divide(np.float64(numerator), np.float64(denominator)))
    if not math.isfinite(result):
        LOGGER.debug("Degenerate division %r / %r produced %r", numerator, denominator, result)
    return result


def round_fixed(value: float, digits: int = OFFSET_DECIMALS) -> float:
    """Round *value* to *digits* decimals, half away from zero.

    The exact binary value is rounded, so ``1.0005`` (stored slightly below
    the half-way point) rounds down while ``0.0625`` rounds up to ``0.063``.
    Non-finite values are returned unchanged.
    """
    value = float(value)
    if not math.isfinite(value) or abs(value) >= _FIXED_POINT_LIMIT:
        return value
    quantum = Decimal(1).scaleb(-digits)
    rounded = Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP, context=_DECIMAL_CONTEXT)
    return float(rounded)


def is_in_range(value: float, max: float, min: float) -> bool:
    """Return ``True`` when ``min <= value <= max``."""
    return min <= value <= max


def get_aspect_ratio(size: Size) -> float:
    return _divide(size.width, size.height)


def translate_range_x(
    scale: float, image_size: Size, crop_area_size: Size, min_zoom: float
) -> Range:
    """Return the horizontal pan window for the image at *scale*.

    When the crop area is relatively wider than the image, the image was
    fitted by width and the horizontal slack is measured against the zoom
    relative to *min_zoom*. Otherwise the image was fitted by height and the
    width overhangs by ``width * scale - width``. Equal aspect ratios take
    the height branch.
    """
    crop_aspect_ratio = get_aspect_ratio(crop_area_size)
    image_aspect_ratio = get_aspect_ratio(image_size)
    initial_fit = "width" if crop_aspect_ratio > image_aspect_ratio else "height"

    if initial_fit == "width":
        slack = _divide(crop_area_size.width * scale, min_zoom) - crop_area_size.width
    else:
        slack = crop_area_size.width * scale - crop_area_size.width
    return Range(max=slack / 2, min=-slack / 2)


def translate_range_y(
    scale: float, image_size: Size, crop_area_size: Size, min_zoom: float
) -> Range:
    """Return the vertical pan window; the mirror of :func:`translate_range_x`.

    The height branch is taken only when the crop area is relatively
    narrower than the image, so equal aspect ratios take the width branch.
    """
    crop_aspect_ratio = get_aspect_ratio(crop_area_size)
    image_aspect_ratio = get_aspect_ratio(image_size)
    initial_fit = "height" if crop_aspect_ratio < image_aspect_ratio else "width"

    if initial_fit == "height":
        slack = _divide(crop_area_size.height * scale, min_zoom) - crop_area_size.height
    else:
        slack = crop_area_size.height * scale - crop_area_size.height
    return Range(max=slack / 2, min=-slack / 2)


def compute_translation(current: float, last: float, max: float, min: float) -> float:
    """Apply the delta *last* to *current* and clamp into ``[min, max]``."""
    next_value = current + last
    if is_in_range(next_value, max, min):
        return next_value
    if next_value > max:
        return max
    return min


def compute_scaled_width(
    scale: float, image_size: Size, crop_area_size: Size, min_zoom: float
) -> float:
    """Return the rendered image width at *scale*.

    The fit mode is decided from the range at *min_zoom*, not at *scale*:
    horizontal slack there means width tracks the crop area directly,
    otherwise the width is corrected by ``/ min_zoom`` so that
    ``scale == min_zoom`` reproduces the fitted size.
    """
    max_translate_x = translate_range_x(min_zoom, image_size, crop_area_size, min_zoom).max
    if max_translate_x > 0:
        return crop_area_size.width * scale
    return _divide(crop_area_size.width * scale, min_zoom)


def compute_scaled_height(
    scale: float, image_size: Size, crop_area_size: Size, min_zoom: float
) -> float:
    """Vertical counterpart of :func:`compute_scaled_width`."""
    max_translate_y = translate_range_y(min_zoom, image_size, crop_area_size, min_zoom).max
    if max_translate_y > 0:
        return crop_area_size.height * scale
    return _divide(crop_area_size.height * scale, min_zoom)


def compute_scaled_multiplier(image_size: Size, width: float) -> float:
    """Return the factor converting rendered lengths into image pixels."""
    return _divide(image_size.width, width)


def compute_translate(image_size: Size, x: float, y: float) -> Translation:
    """Re-express a screen-space pan in the rotated image's frame."""
    if image_size.rotation == ROTATION_90:
        return Translation(x=-x, y=y)
    if image_size.rotation == ROTATION_180:
        return Translation(x=-x, y=-y)
    if image_size.rotation == ROTATION_270:
        return Translation(x=x, y=-y)
    return Translation(x=x, y=y)


def compute_offset(
    scaled_size: Size,
    image_size: Size,
    translate: Translation,
    max_translate_x: float,
    max_translate_y: float,
    scaled_multiplier: float,
) -> Translation:
    """Return the crop origin in image pixels.

    Parameters
    ----------
    scaled_size:
        Rendered image size at the current scale.
    image_size:
        Intrinsic image size; its rotation decides whether the axes swap.
    translate:
        Pan vector already remapped by :func:`compute_translate`.
    max_translate_x, max_translate_y:
        Upper bounds of the current pan ranges.
    scaled_multiplier:
        Result of :func:`compute_scaled_multiplier`.

    Returns
    -------
    Translation
        Offset rounded to three decimals, transposed for 90° and 270°.
    """
    initial_offset_x = scaled_size.width - max_translate_x
    initial_offset_y = scaled_size.height - max_translate_y
    final_offset_x = image_size.width - (initial_offset_x + translate.x) * scaled_multiplier
    final_offset_y = image_size.height - (initial_offset_y + translate.y) * scaled_multiplier
    offset_x = round_fixed(final_offset_x)
    offset_y = round_fixed(final_offset_y)
    if image_size.rotated_quarter:
        return Translation(x=offset_y, y=offset_x)
    return Translation(x=offset_x, y=offset_y)


def compute_size(size: Size, multiplier: float) -> Size:
    """Scale *size* by *multiplier*, rounding each side to three decimals."""
    return Size(
        width=round_fixed(size.width * multiplier),
        height=round_fixed(size.height * multiplier),
    )
