"""
Image file reference with crop, resize and orientation operations.

Every operation decodes the source inside a ``with`` block, transforms the
pixels, and re-encodes with the source codec. Failures are reported as
``None``/``False`` and logged, never raised.
"""

import logging
from pathlib import Path
from typing import Callable, Optional, Union

import cv2
import numpy as np

from coverimg.core.constants import ErrorMessages, ImageConstants
from coverimg.core.enums import ImageType
from coverimg.core.image.converters import ImageConverters
from coverimg.core.image.geometry import ImageGeometry, ParamsLike
from coverimg.core.image.inspector import get_info, open_source
from coverimg.core.image.orientation import get_rotation
from coverimg.core.image.processors import ImageProcessors
from coverimg.schemas.image import ImageInfo

logger = logging.getLogger(__name__)


class ImageFile:
    """
    Image stored on disk.

    Attributes:
        path: Full path to the file
        dir: Containing directory (outputs are written here)
        filename: Base filename without extension
        ext: Extension as given in the path, without the dot
        type: Detected codec, or None if the file is not a supported image
        width: Pixel width (0 when unreadable)
        height: Pixel height (0 when unreadable)
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self.dir = self.path.parent

        basename = self.path.name
        if "." in basename:
            self.filename, self.ext = basename.rsplit(".", 1)
        else:
            self.filename, self.ext = basename, ""

        self.type: Optional[ImageType] = None
        self.width = 0
        self.height = 0
        self.refresh()

    def __repr__(self) -> str:
        type_name = self.type.name if self.type else None
        return f"ImageFile({str(self.path)!r}, type={type_name}, size={self.width}x{self.height})"

    @property
    def is_valid(self) -> bool:
        return self.type is not None

    def refresh(self) -> Optional[ImageInfo]:
        """Re-read type and dimensions from the file header."""
        info = get_info(self.path)
        if info is None:
            self.type = None
            self.width = self.height = 0
            return None

        self.type = info.type
        self.width, self.height = info.width, info.height
        return info

    def get_rotation(self) -> int:
        """Rotation from the EXIF orientation tag (0 when absent)."""
        return get_rotation(self.path)

    def _output_path(self, new_filename: Optional[str], default_name: str) -> Path:
        name = new_filename if new_filename else default_name
        return self.dir / name

    def _derived_name(self, stem: str) -> str:
        return f"{stem}.{self.ext}" if self.ext else stem

    def resize_name(self, width: int) -> str:
        """Default output name of a resize: ``<first "_" part of name>_<width>.<ext>``."""
        stem = self.filename.split(ImageConstants.NAME_SEPARATOR)[0]
        return self._derived_name(f"{stem}{ImageConstants.NAME_SEPARATOR}{width}")

    def _render(
        self,
        info: ImageInfo,
        target: Path,
        quality: Optional[int],
        transform: Callable[[np.ndarray], np.ndarray],
    ) -> bool:
        """
        Decode the source, apply transform to its pixels, encode to target.

        Args:
            info: Freshly read source metadata
            target: Output path
            quality: JPEG quality
            transform: Pixel operation on the decoded array

        Returns:
            True if the output was written
        """
        with open_source(self.path) as source:
            if source is None:
                return False
            try:
                pixels = ImageConverters.pil_to_numpy(source, info.type)
                result = ImageConverters.numpy_to_pil(transform(pixels))
            except (ValueError, OSError, cv2.error) as e:
                logger.error(ErrorMessages.IMAGE_UNREADABLE.format(path=self.path, error=e))
                return False

        return ImageConverters.save_image(result, target, info.type, quality)

    def optimize(self, quality: Optional[int] = None, rotate: int = 0) -> bool:
        """
        Re-encode the image in place, fixing its orientation.

        Args:
            quality: JPEG quality (default 90)
            rotate: Counter-clockwise rotation; 0 means use EXIF orientation

        Returns:
            True on success
        """
        info = self.refresh()
        if info is None:
            logger.warning(ErrorMessages.IMAGE_NOT_FOUND.format(path=self.path))
            return False

        if rotate == 0:
            rotate = self.get_rotation()

        if rotate:
            logger.info(f"Rotating {self.path.name} by {rotate} degrees")

        ok = self._render(
            info, self.path, quality, lambda pixels: ImageProcessors.rotate(pixels, rotate)
        )
        if ok:
            self.refresh()
        return ok

    def crop_square(
        self,
        params: ParamsLike = None,
        quality: Optional[int] = None,
        new_filename: Optional[str] = None,
    ) -> Optional[Path]:
        """
        Crop a square region.

        Uses the caller box when it fits, else the centered square of side
        min(width, height).

        Args:
            params: Optional left/top/width box
            quality: JPEG quality (default 90)
            new_filename: Output filename; defaults to ``<name>_square<side>.<ext>``

        Returns:
            Path of the written file, or None on failure
        """
        info = self.refresh()
        if info is None:
            return None

        box = ImageGeometry.square_crop_box(info.width, info.height, params)
        target = self._output_path(
            new_filename,
            self._derived_name(f"{self.filename}{ImageConstants.SQUARE_SUFFIX}{box.width}"),
        )

        if not self._render(info, target, quality, lambda pixels: ImageProcessors.extract_region(pixels, box)):
            return None

        logger.debug(f"Square crop {box.to_dict()} of {self.path.name} -> {target.name}")
        return target

    def crop(
        self,
        params: ParamsLike,
        quality: Optional[int] = None,
        new_filename: Optional[str] = None,
        auto: bool = True,
    ) -> Optional[Path]:
        """
        Crop the largest region matching a target aspect ratio.

        Args:
            params: Target width/height, plus left/top when auto is False
            quality: JPEG quality (default 90)
            new_filename: Output filename; defaults to ``<name>_<w>x<h>.<ext>``
            auto: Center the region automatically

        Returns:
            Path of the written file, or None on failure
        """
        info = self.refresh()
        if info is None:
            return None

        box = ImageGeometry.aspect_crop_box(info.width, info.height, params, auto=auto)
        target = self._output_path(
            new_filename,
            self._derived_name(
                f"{self.filename}{ImageConstants.NAME_SEPARATOR}"
                f"{box.width}{ImageConstants.SIZE_SEPARATOR}{box.height}"
            ),
        )

        if not self._render(info, target, quality, lambda pixels: ImageProcessors.extract_region(pixels, box)):
            return None

        logger.debug(f"Crop {box.to_dict()} of {self.path.name} -> {target.name}")
        return target

    def resize(
        self,
        width: int,
        quality: Optional[int] = None,
        new_filename: Optional[str] = None,
    ) -> Optional[Path]:
        """
        Scale to a target width, keeping the aspect ratio.

        Args:
            width: Target width in pixels
            quality: JPEG quality (default 90)
            new_filename: Output filename; defaults to
                ``<first "_" part of name>_<width>.<ext>``

        Returns:
            Path of the written file, or None on failure
        """
        info = self.refresh()
        if info is None:
            return None

        size = ImageGeometry.resize_dimensions(info.width, info.height, width)
        if size is None:
            logger.warning(f"Invalid resize width {width} for {self.path.name}")
            return None

        target = self._output_path(new_filename, self.resize_name(width))

        new_width, new_height = size
        if not self._render(
            info, target, quality, lambda pixels: ImageProcessors.resample(pixels, new_width, new_height)
        ):
            return None

        logger.debug(f"Resized {self.path.name} to {new_width}x{new_height} -> {target.name}")
        return target
