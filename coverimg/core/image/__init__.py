"""
Image processing utilities - modular architecture.

This package provides focused image processing utilities:
- inspector: Header probing and source decoding
- orientation: EXIF orientation to rotation angle
- geometry: Crop box and resize dimension calculations
- processors: Pixel operations (region extraction, resampling, rotation)
- converters: Format conversions (PIL, NumPy, codec-preserving encode)
"""

from coverimg.core.image.converters import ImageConverters
from coverimg.core.image.geometry import ImageGeometry
from coverimg.core.image.inspector import get_info, open_source, without_root_dir
from coverimg.core.image.orientation import get_rotation, read_orientation, rotation_for_orientation
from coverimg.core.image.processors import ImageProcessors

__all__ = [
    "ImageConverters",
    "ImageGeometry",
    "ImageProcessors",
    "get_info",
    "open_source",
    "without_root_dir",
    "get_rotation",
    "read_orientation",
    "rotation_for_orientation",
]
