"""Default configuration values for cropview."""

from __future__ import annotations

from typing import Final

# Crop offsets and sizes handed to the export API are rounded to this many
# decimal places. The crop API downstream tolerates nothing finer.
OFFSET_DECIMALS: Final[int] = 3

ROTATION_90: Final[int] = 90
ROTATION_180: Final[int] = 180
ROTATION_270: Final[int] = 270

# Rotations that transpose the image's pixel grid relative to the screen.
QUARTER_TURN_ROTATIONS: Final[tuple[int, int]] = (ROTATION_90, ROTATION_270)
