"""
Geometric calculations for crop and resize operations.

Pure integer arithmetic over source dimensions; nothing here touches
pixels or files.
"""

import logging
from typing import Optional, Tuple, Union

from pydantic import ValidationError

from coverimg.schemas.common import CropBox, CropParams

logger = logging.getLogger(__name__)

ParamsLike = Union[CropParams, dict, None]


def _as_params(params: ParamsLike) -> CropParams:
    if isinstance(params, CropParams):
        return params
    try:
        return CropParams.from_dict(params)
    except ValidationError as e:
        logger.debug(f"Ignoring malformed crop params {params}: {e}")
        return CropParams()


class ImageGeometry:
    """Crop box and resize dimension calculations."""

    @staticmethod
    def centered_box(width: int, height: int, box_width: int, box_height: int) -> CropBox:
        """
        Center a box of the given size inside the source.

        Offsets are truncated toward zero.
        """
        return CropBox(
            left=int((width - box_width) / 2),
            top=int((height - box_height) / 2),
            width=box_width,
            height=box_height,
        )

    @staticmethod
    def square_crop_box(width: int, height: int, params: ParamsLike = None) -> CropBox:
        """
        Compute the square crop region.

        The default is a centered square with side ``min(width, height)``.
        A caller box (left, top, width) replaces it only when fully given
        and fully inside that square's bounds; otherwise it is silently
        ignored.

        Args:
            width: Source width
            height: Source height
            params: Optional caller box

        Returns:
            Square CropBox inside the source
        """
        side = min(width, height)
        box = ImageGeometry.centered_box(width, height, side, side)

        params = _as_params(params)
        if not params.has_square_box:
            return box

        left, top, size = params.left, params.top, params.width
        if size <= 0 or size > side:
            logger.debug(f"Ignoring square crop width {size} (max {side})")
            return box
        if not (left >= 0 and left + size <= side):
            logger.debug(f"Ignoring square crop left {left} for side {size} (max {side})")
            return box
        if not (top >= 0 and top + size <= side):
            logger.debug(f"Ignoring square crop top {top} for side {size} (max {side})")
            return box

        return CropBox(left=left, top=top, width=size, height=size)

    @staticmethod
    def max_aspect_size(width: int, height: int, params: ParamsLike = None) -> Tuple[int, int]:
        """
        Largest region matching the target aspect ratio.

        Tries full source height first and falls back to full source width
        when the scaled width would overflow. Without a target size the
        result is the largest square.

        Returns:
            Tuple of (max_width, max_height)
        """
        params = _as_params(params)
        if not params.has_target_size:
            side = min(width, height)
            return side, side

        delta_height = height / params.height
        possible_width = int(delta_height * params.width)
        if possible_width <= width:
            return max(possible_width, 1), height

        delta_width = width / params.width
        return width, max(int(delta_width * params.height), 1)

    @staticmethod
    def aspect_crop_box(
        width: int, height: int, params: ParamsLike = None, auto: bool = True
    ) -> CropBox:
        """
        Compute the aspect-ratio crop region.

        Args:
            width: Source width
            height: Source height
            params: Target width/height and, for manual mode, left/top
            auto: If True, center the region; else use the caller offsets

        Returns:
            CropBox inside the source
        """
        params = _as_params(params)
        max_width, max_height = ImageGeometry.max_aspect_size(width, height, params)
        box = ImageGeometry.centered_box(width, height, max_width, max_height)

        if auto:
            return box

        left = params.left or 0
        top = params.top or 0
        box_width = min(params.width, max_width) if params.width else max_width
        box_height = min(params.height, max_height) if params.height else max_height

        if left < 0 or top < 0 or box_width <= 0 or box_height <= 0:
            logger.debug(f"Invalid manual crop {params.model_dump()}, using centered box")
            return box

        manual = CropBox(left=left, top=top, width=box_width, height=box_height)
        if not manual.fits_within(width, height):
            logger.debug(f"Manual crop {manual.to_dict()} exceeds {width}x{height}, using centered box")
            return box

        return manual

    @staticmethod
    def resize_dimensions(width: int, height: int, target_width: int) -> Optional[Tuple[int, int]]:
        """
        Scale to a target width, keeping the aspect ratio.

        Height is ``floor(height * target_width / width)``, at least 1.

        Returns:
            Tuple of (width, height) or None for non-positive sizes
        """
        if width <= 0 or height <= 0 or target_width <= 0:
            return None

        new_height = (height * target_width) // width
        return target_width, max(new_height, 1)
