"""
Constants and configuration values for cover image handling.
Centralizes all magic numbers and configuration constants.
"""


# Image Processing Constants
class ImageConstants:
    """Constants related to image decoding and re-encoding."""

    # Encoding
    DEFAULT_JPEG_QUALITY = 90
    MIN_JPEG_QUALITY = 1
    MAX_JPEG_QUALITY = 100

    # EXIF
    EXIF_ORIENTATION_TAG = 0x0112

    # Orientation value -> counter-clockwise rotation in degrees
    ORIENTATION_ROTATIONS = {
        3: 180,
        6: -90,
        8: 90,
    }

    # Derived filename markers
    SQUARE_SUFFIX = "_square"
    NAME_SEPARATOR = "_"
    SIZE_SEPARATOR = "x"


# Cover Constants
class CoverConstants:
    """Constants related to stored cover records."""

    TABLE = "cover"
    SALT = "cover"

    # Derivative widths produced after the square crop
    DEFAULT_VARIANT_WIDTHS = [600, 300, 150]

    # Upload bounds
    DEFAULT_MIN_UPLOAD_BYTES = 1
    DEFAULT_MAX_UPLOAD_BYTES = 10 * 1024 * 1024  # 10MB
    DEFAULT_ALLOWED_TYPES = ["jpeg", "png", "gif"]

    # Flags
    VISIBLE = 0
    HIDDEN = 1
    RESIZE_PENDING = 0
    RESIZE_DONE = 1

    HASH_CHUNK_SIZE = 64 * 1024


# System Constants
class SystemConstants:
    """Constants for system operations."""

    # Logging
    LOG_LEVEL_DEFAULT = "INFO"
    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    ENV_PREFIX = "COVERIMG_"


# Error Messages
class ErrorMessages:
    """Standard error messages."""

    # Image errors
    IMAGE_NOT_FOUND = "Image file {path} not found"
    INVALID_IMAGE_FORMAT = "Unsupported image format: {format}"
    IMAGE_UNREADABLE = "Failed to read image {path}: {error}"
    ENCODE_FAILED = "Failed to write image {path}: {error}"

    # Cover errors
    REQUIRED_FIELDS = "Required fields are missing"
    SECRET_KEY = "Secret key is invalid"
    TYPE = "Cover type is invalid"
    NOT_FOUND = "Cover not found"
    FAIL_UPLOAD = "Failed to upload the file"
    FAIL_MOVE = "Failed to move the uploaded file"
    MIN_SIZE = "File is smaller than the allowed minimum"
    MAX_SIZE = "File is larger than the allowed maximum"
    ALLOW_TYPES = "File type is not allowed"
    OPTIMIZE = "Failed to optimize the image"
    CROP = "Failed to crop the image"
