"""
Image processing operations.

Handles pixel manipulation on NumPy arrays:
- Region extraction
- Resampling
- Rotation
"""

import logging

import cv2
import numpy as np

from coverimg.schemas.common import CropBox

logger = logging.getLogger(__name__)


class ImageProcessors:
    """Pixel-level operations backing crop, resize and optimize."""

    @staticmethod
    def extract_region(image: np.ndarray, box: CropBox) -> np.ndarray:
        """
        Extract a rectangular region from image.

        Args:
            image: Input image as NumPy array
            box: Region to extract; must lie inside the image

        Returns:
            Region as a new NumPy array

        Raises:
            ValueError: If the box exceeds the image bounds
        """
        img_height, img_width = image.shape[:2]
        if not box.fits_within(img_width, img_height):
            raise ValueError(f"Crop box {box.to_dict()} exceeds image bounds {img_width}x{img_height}")

        return image[box.top : box.bottom, box.left : box.right].copy()

    @staticmethod
    def resample(image: np.ndarray, width: int, height: int) -> np.ndarray:
        """
        Resize image to exact dimensions.

        Uses area interpolation when shrinking and linear when enlarging.
        """
        h, w = image.shape[:2]
        if (w, h) == (width, height):
            return image.copy()

        interpolation = cv2.INTER_AREA if width < w else cv2.INTER_LINEAR
        return cv2.resize(image, (width, height), interpolation=interpolation)

    @staticmethod
    def rotate(image: np.ndarray, angle: int) -> np.ndarray:
        """
        Rotate image counter-clockwise by angle degrees.

        Right angles are exact; other angles expand the canvas to hold the
        whole rotated image and fill uncovered pixels with zero.

        Args:
            image: Input image
            angle: Counter-clockwise rotation in degrees

        Returns:
            Rotated image
        """
        angle = angle % 360
        if angle == 0:
            return image
        if angle == 90:
            return cv2.rotate(image, cv2.ROTATE_90_COUNTERCLOCKWISE)
        if angle == 180:
            return cv2.rotate(image, cv2.ROTATE_180)
        if angle == 270:
            return cv2.rotate(image, cv2.ROTATE_90_CLOCKWISE)

        h, w = image.shape[:2]
        center = (w / 2, h / 2)
        matrix = cv2.getRotationMatrix2D(center, angle, 1.0)

        cos = abs(matrix[0, 0])
        sin = abs(matrix[0, 1])
        new_w = int(h * sin + w * cos)
        new_h = int(h * cos + w * sin)

        matrix[0, 2] += new_w / 2 - center[0]
        matrix[1, 2] += new_h / 2 - center[1]

        logger.debug(f"Rotating {w}x{h} by {angle} degrees into {new_w}x{new_h}")
        return cv2.warpAffine(image, matrix, (new_w, new_h), borderValue=0)
