"""
Centralized enums for cover image handling.
"""

from enum import Enum, IntEnum
from typing import Optional

from coverimg.core.constants import ErrorMessages


class ImageType(IntEnum):
    """Supported image container types (conventional IMAGETYPE codes)."""

    GIF = 1
    JPEG = 2
    PNG = 3

    @property
    def pil_format(self) -> str:
        """Pillow format name used for decoding and encoding."""
        return self.name

    @property
    def mime_type(self) -> str:
        return f"image/{self.name.lower()}"

    @property
    def has_alpha(self) -> bool:
        """Whether the codec can carry transparency."""
        return self is not ImageType.JPEG

    @classmethod
    def from_pil_format(cls, pil_format: Optional[str]) -> Optional["ImageType"]:
        """
        Map a Pillow format name to an image type.

        Args:
            pil_format: Format reported by ``Image.format`` (e.g. "JPEG")

        Returns:
            Matching ImageType or None for unsupported formats
        """
        if not pil_format:
            return None
        pil_format = pil_format.upper()
        # Camera JPEGs with embedded previews are reported as MPO
        if pil_format == "MPO":
            return cls.JPEG
        return cls.__members__.get(pil_format)


class FieldType(str, Enum):
    """Semantic column types used by entity cast tables."""

    INTEGER = "integer"
    STRING = "string"
    DOUBLE = "double"

    @property
    def python_type(self) -> type:
        return {
            FieldType.INTEGER: int,
            FieldType.STRING: str,
            FieldType.DOUBLE: float,
        }[self]


class CoverErrorKind(IntEnum):
    """Error kinds a calling layer reports for cover operations."""

    REQUIRED_FIELDS = 1
    SECRET_KEY = 2
    TYPE = 3
    NOT_FOUND = 4
    FAIL_UPLOAD = 5
    FAIL_MOVE = 6
    MIN_SIZE = 7
    MAX_SIZE = 8
    ALLOW_TYPES = 9
    OPTIMIZE = 10
    CROP = 11

    @property
    def code(self) -> str:
        """Legacy string code, e.g. ``Cover7``."""
        return f"Cover{self.value}"

    @property
    def message(self) -> str:
        return getattr(ErrorMessages, self.name)

    @classmethod
    def from_code(cls, code: str) -> Optional["CoverErrorKind"]:
        """
        Parse a legacy ``Cover<N>`` code.

        Namespaced forms such as ``api\\entities\\Cover7`` are accepted;
        ``code`` always produces the short form.

        Returns:
            Matching kind or None if the code is not recognized
        """
        if not code:
            return None
        code = code.rsplit("\\", 1)[-1]
        if not code.startswith("Cover"):
            return None
        try:
            return cls(int(code[len("Cover"):]))
        except ValueError:
            return None
