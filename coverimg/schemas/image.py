"""
Image metadata models.
"""

from pydantic import BaseModel, Field

from coverimg.core.enums import ImageType


class ImageInfo(BaseModel):
    """Container metadata read without decoding pixels"""

    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)
    type: ImageType

    @property
    def min_side(self) -> int:
        return min(self.width, self.height)
