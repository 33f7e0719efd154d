"""
Image container inspection.

Reads type and dimensions from the file header and opens decoded sources
for the supported codecs (JPEG, PNG, GIF).
"""

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional, Union

from PIL import Image

from coverimg.core.constants import ErrorMessages
from coverimg.core.enums import ImageType
from coverimg.schemas.image import ImageInfo

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

# Errors Pillow raises for missing, truncated or unrecognized files
READ_ERRORS = (OSError, ValueError, SyntaxError, Image.DecompressionBombError)


def get_info(path: PathLike) -> Optional[ImageInfo]:
    """
    Read width, height and type from the image header.

    Pillow opens files lazily, so no pixel data is decoded here.

    Args:
        path: Image file path

    Returns:
        ImageInfo or None if the file is unreadable or not JPEG/PNG/GIF
    """
    try:
        with Image.open(path) as image:
            image_type = ImageType.from_pil_format(image.format)
            width, height = image.size
    except READ_ERRORS as e:
        logger.debug(ErrorMessages.IMAGE_UNREADABLE.format(path=path, error=e))
        return None

    if image_type is None or width <= 0 or height <= 0:
        logger.debug(ErrorMessages.INVALID_IMAGE_FORMAT.format(format=image_type))
        return None

    return ImageInfo(width=width, height=height, type=image_type)


@contextmanager
def open_source(path: PathLike) -> Iterator[Optional[Image.Image]]:
    """
    Decode an image for processing.

    Yields None instead of raising when the file cannot be decoded or is
    not a supported type. The handle is closed when the block exits.

    Example:
        >>> with open_source("cover.jpg") as source:
        ...     if source is None:
        ...         return None
    """
    image = None
    try:
        image = Image.open(path)
        if ImageType.from_pil_format(image.format) is None:
            logger.warning(ErrorMessages.INVALID_IMAGE_FORMAT.format(format=image.format))
            image.close()
            image = None
        else:
            image.load()
    except READ_ERRORS as e:
        logger.warning(ErrorMessages.IMAGE_UNREADABLE.format(path=path, error=e))
        if image is not None:
            image.close()
        image = None

    try:
        yield image
    finally:
        if image is not None:
            image.close()


def without_root_dir(root: PathLike, path: PathLike) -> str:
    """
    Strip the storage root from a path.

    Args:
        root: Storage root directory
        path: Absolute path under root

    Returns:
        Path relative to root, or path unchanged if it is not under root
    """
    root, path = str(root), str(path)
    if root and path.startswith(root):
        return path[len(root):]
    return path
