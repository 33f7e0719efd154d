"""
Core modules for cover image handling
"""

from .constants import CoverConstants, ErrorMessages, ImageConstants, SystemConstants
from .enums import CoverErrorKind, FieldType, ImageType
from .exceptions import CoverError

__all__ = [
    "CoverConstants",
    "ErrorMessages",
    "ImageConstants",
    "SystemConstants",
    "CoverErrorKind",
    "FieldType",
    "ImageType",
    "CoverError",
]
