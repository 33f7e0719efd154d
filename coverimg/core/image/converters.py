"""
Image format conversion utilities.

Handles conversions between:
- PIL Images (decoded sources)
- NumPy arrays (pixel operations with OpenCV)
- Encoded files on disk, written with the source codec
"""

import logging
import os
from pathlib import Path
from typing import Optional, Union

import numpy as np
from PIL import Image

from coverimg.core.constants import ErrorMessages, ImageConstants
from coverimg.core.enums import ImageType

logger = logging.getLogger(__name__)

# Palette index reserved for transparent pixels in GIF output
GIF_TRANSPARENT_INDEX = 255
GIF_ALPHA_THRESHOLD = 128


class ImageConverters:
    """Utilities for converting between image representations."""

    @staticmethod
    def normalize_mode(image: Image.Image, image_type: ImageType) -> Image.Image:
        """
        Convert a decoded image to an 8-bit mode the target codec accepts.

        JPEG keeps RGB/L; PNG and GIF keep RGBA, and RGB/L without a colour
        key. Everything else (palette, LA, bilevel, 16-bit, colour-keyed
        RGB/L) goes to RGBA so transparency survives.

        Args:
            image: Decoded PIL Image
            image_type: Codec the result will be written with

        Returns:
            PIL Image in RGB, RGBA or L mode
        """
        if image_type is ImageType.JPEG:
            if image.mode in ("RGB", "L"):
                return image
            return image.convert("RGB")

        if image.mode == "RGBA":
            return image
        # Colour-key transparency (tRNS chunk, GIF transparent index) lives in info
        if image.mode in ("RGB", "L") and "transparency" not in image.info:
            return image
        return image.convert("RGBA")

    @staticmethod
    def pil_to_numpy(image: Image.Image, image_type: ImageType) -> np.ndarray:
        """
        Convert PIL Image to NumPy array.

        Channel order is kept as decoded (RGB/RGBA); arrays are only used
        for geometry, never displayed by OpenCV.
        """
        return np.array(ImageConverters.normalize_mode(image, image_type))

    @staticmethod
    def numpy_to_pil(array: np.ndarray) -> Image.Image:
        """Convert a uint8 NumPy array back to a PIL Image."""
        if array.dtype != np.uint8:
            array = array.astype(np.uint8)
        return Image.fromarray(array)

    @staticmethod
    def _prepare_gif(image: Image.Image) -> Image.Image:
        """Quantize RGBA to a palette image with one transparent index."""
        alpha = image.getchannel("A")
        paletted = image.convert("RGB").convert(
            "P", palette=Image.Palette.ADAPTIVE, colors=GIF_TRANSPARENT_INDEX
        )
        mask = alpha.point(lambda a: 255 if a <= GIF_ALPHA_THRESHOLD else 0)
        paletted.paste(GIF_TRANSPARENT_INDEX, mask=mask)
        return paletted

    @staticmethod
    def save_image(
        image: Image.Image,
        path: Union[str, Path],
        image_type: ImageType,
        quality: Optional[int] = None,
    ) -> bool:
        """
        Encode image to a file with the given codec.

        The file is written to a temporary sibling and moved into place,
        so a failed encode never leaves a partial output behind.

        Args:
            image: PIL Image to encode
            path: Destination path
            image_type: Codec to use (always the source codec)
            quality: JPEG quality (1-100, ignored for PNG and GIF)

        Returns:
            True on success, False on encode failure
        """
        path = Path(path)
        tmp_path = path.with_name(f".{path.name}.tmp")

        if quality is None:
            quality = ImageConstants.DEFAULT_JPEG_QUALITY
        quality = max(ImageConstants.MIN_JPEG_QUALITY, min(quality, ImageConstants.MAX_JPEG_QUALITY))

        try:
            image = ImageConverters.normalize_mode(image, image_type)
            save_kwargs = {"format": image_type.pil_format}

            if image_type is ImageType.JPEG:
                save_kwargs["quality"] = quality
                save_kwargs["optimize"] = True
            elif image_type is ImageType.GIF and image.mode == "RGBA":
                image = ImageConverters._prepare_gif(image)
                save_kwargs["transparency"] = GIF_TRANSPARENT_INDEX

            image.save(tmp_path, **save_kwargs)
            os.replace(tmp_path, path)
            return True

        except (OSError, ValueError, KeyError) as e:
            logger.error(ErrorMessages.ENCODE_FAILED.format(path=path, error=e))
            if tmp_path.exists():
                tmp_path.unlink()
            return False
