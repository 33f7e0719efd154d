"""
Schemas Package

Pydantic models for data validation and serialization, organized by
domain:
- common: crop request parameters and crop boxes
- image: container metadata
- cover: stored cover entity record
"""

from .common import CropBox, CropParams
from .cover import Cover
from .image import ImageInfo

__all__ = [
    "CropBox",
    "CropParams",
    "Cover",
    "ImageInfo",
]
