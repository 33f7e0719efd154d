"""
EXIF orientation handling.
"""

import logging
from pathlib import Path
from typing import Any, Optional, Union

from PIL import Image

from coverimg.core.constants import ImageConstants

logger = logging.getLogger(__name__)


def rotation_for_orientation(orientation: Any) -> int:
    """
    Map an EXIF orientation value to a counter-clockwise rotation.

    3 -> 180, 6 -> -90, 8 -> 90; any other value (including None or
    garbage) means no rotation.
    """
    try:
        value = int(orientation)
    except (TypeError, ValueError):
        return 0
    return ImageConstants.ORIENTATION_ROTATIONS.get(value, 0)


def read_orientation(path: Union[str, Path]) -> Optional[int]:
    """
    Read the EXIF orientation tag.

    Returns:
        Orientation value, or None when absent or unreadable
    """
    try:
        with Image.open(path) as image:
            value = image.getexif().get(ImageConstants.EXIF_ORIENTATION_TAG)
    # Corrupt EXIF blocks surface as assorted exception types
    except Exception as e:
        logger.debug(f"No readable EXIF orientation in {path}: {e}")
        return None

    if value is None:
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        logger.debug(f"Ignoring non-numeric EXIF orientation {value!r} in {path}")
        return None


def get_rotation(path: Union[str, Path]) -> int:
    """Rotation in degrees needed to display the image upright."""
    return rotation_for_orientation(read_orientation(path))
