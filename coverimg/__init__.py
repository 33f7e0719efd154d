"""
coverimg - cover image inspection, orientation fix-up, cropping and resizing.
"""

from coverimg.core.enums import CoverErrorKind, ImageType
from coverimg.core.exceptions import CoverError
from coverimg.core.image_file import ImageFile
from coverimg.schemas import Cover, CropBox, CropParams, ImageInfo

__all__ = [
    "Cover",
    "CoverError",
    "CoverErrorKind",
    "CropBox",
    "CropParams",
    "ImageFile",
    "ImageInfo",
    "ImageType",
]
