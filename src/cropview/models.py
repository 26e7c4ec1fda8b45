"""Value types shared by the crop geometry functions."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Any, Optional

from .config import QUARTER_TURN_ROTATIONS
from .errors import InvalidSizeError


@dataclass(frozen=True)
class Size:
    """Width and height with an optional clockwise rotation in degrees.

    Units are whatever the call site uses (device pixels for the crop area,
    image pixels for the intrinsic image size). Only ``90``, ``180`` and
    ``270`` are treated as rotations; every other value means upright.
    """

    width: float
    height: float
    rotation: Optional[float] = None

    @property
    def rotated_quarter(self) -> bool:
        """Return ``True`` when the rotation swaps the width and height axes."""
        return self.rotation in QUARTER_TURN_ROTATIONS

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "Size":
        """Build a size from a ``{"width", "height", "rotation"}`` mapping.

        Raises
        ------
        InvalidSizeError
            If ``width`` or ``height`` is missing or not numeric.
        """
        try:
            width = float(values["width"])
            height = float(values["height"])
        except KeyError as exc:
            raise InvalidSizeError(f"size mapping is missing {exc.args[0]!r}") from exc
        except (TypeError, ValueError) as exc:
            raise InvalidSizeError(f"size mapping has a non-numeric dimension: {exc}") from exc
        return cls(width=width, height=height, rotation=values.get("rotation"))

    def as_mapping(self) -> dict[str, float]:
        mapping = {"width": float(self.width), "height": float(self.height)}
        if self.rotation is not None:
            mapping["rotation"] = self.rotation
        return mapping


@dataclass(frozen=True)
class Range:
    """Inclusive translation window along one axis, symmetric around zero."""

    max: float
    min: float

    def contains(self, value: float) -> bool:
        from .geometry import is_in_range

        return is_in_range(value, self.max, self.min)

    def clamp(self, current: float, delta: float) -> float:
        """Apply *delta* to *current* and clamp the result into this range."""
        from .geometry import compute_translation

        return compute_translation(current, delta, self.max, self.min)

    def as_mapping(self) -> dict[str, float]:
        return {"max": float(self.max), "min": float(self.min)}


@dataclass(frozen=True)
class Translation:
    """A 2D translation vector."""

    x: float
    y: float

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def as_mapping(self) -> dict[str, float]:
        return {"x": float(self.x), "y": float(self.y)}
