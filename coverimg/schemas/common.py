"""
Common geometry models shared by the image layer.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class CropParams(BaseModel):
    """
    Caller-supplied crop request.

    Every field is optional; missing offsets mean the region is centered
    automatically.
    """

    left: Optional[int] = Field(None, description="X offset of the crop box")
    top: Optional[int] = Field(None, description="Y offset of the crop box")
    width: Optional[int] = Field(None, description="Crop width (or target aspect width)")
    height: Optional[int] = Field(None, description="Crop height (or target aspect height)")

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "CropParams":
        """Create params from a loose dictionary, ignoring unknown keys."""
        if not data:
            return cls()
        return cls(**{key: data.get(key) for key in ("left", "top", "width", "height")})

    @property
    def has_square_box(self) -> bool:
        """True when left, top and width are all given."""
        return self.left is not None and self.top is not None and self.width is not None

    @property
    def has_target_size(self) -> bool:
        """True when a positive width and height are both given."""
        return bool(self.width) and bool(self.height) and self.width > 0 and self.height > 0


class CropBox(BaseModel):
    """
    Rectangular region inside a source image.

    Coordinates are integer pixels with the origin at the top-left corner.
    """

    left: int = Field(..., ge=0, description="X coordinate")
    top: int = Field(..., ge=0, description="Y coordinate")
    width: int = Field(..., gt=0, description="Width")
    height: int = Field(..., gt=0, description="Height")

    def to_dict(self) -> Dict[str, int]:
        return {"left": self.left, "top": self.top, "width": self.width, "height": self.height}

    @property
    def right(self) -> int:
        """Get right edge coordinate."""
        return self.left + self.width

    @property
    def bottom(self) -> int:
        """Get bottom edge coordinate."""
        return self.top + self.height

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)

    def fits_within(self, width: int, height: int) -> bool:
        """Check if box lies fully inside an image of the given size."""
        return self.right <= width and self.bottom <= height
