"""
Cover Service - Derivative pipeline for uploaded cover images.

Takes an upload already stored on disk, checks its size and type, fixes
its orientation, crops the square cover and its width variants, and
describes the result as a Cover record. Storage and persistence stay with
the caller.
"""

import hashlib
import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional, Union

from coverimg.config import ImageSettings, get_settings
from coverimg.core.constants import CoverConstants, ImageConstants
from coverimg.core.enums import CoverErrorKind
from coverimg.core.exceptions import CoverError
from coverimg.core.image.geometry import ParamsLike
from coverimg.core.image.inspector import without_root_dir
from coverimg.core.image_file import ImageFile
from coverimg.schemas.cover import Cover

logger = logging.getLogger(__name__)


@dataclass
class ProcessedCover:
    """Cover record plus the files produced for it"""

    cover: Cover
    original: Path
    square: Path
    variants: Dict[int, Path] = field(default_factory=dict)


def hash_file(path: Union[str, Path]) -> str:
    """MD5 hex digest of the file content."""
    digest = hashlib.md5()
    with open(path, "rb") as f:
        for block in iter(lambda: f.read(CoverConstants.HASH_CHUNK_SIZE), b""):
            digest.update(block)
    return digest.hexdigest()


def make_file_id(content_hash: str, timestamp: int) -> str:
    """Salted public identifier for a stored cover."""
    return hashlib.md5(f"{Cover.SALT}{content_hash}{timestamp}".encode("utf-8")).hexdigest()


class CoverService:
    """
    Service for building cover derivatives.

    Raises CoverError with the matching CoverErrorKind when the upload is
    rejected or a processing step fails.
    """

    def __init__(self, settings: Optional[ImageSettings] = None):
        """
        Initialize cover service.

        Args:
            settings: Image settings; defaults to the application settings
        """
        self.settings = settings if settings is not None else get_settings().image

    def validate_upload(self, path: Union[str, Path]) -> ImageFile:
        """
        Check that an upload exists, is within size bounds and is allowed.

        Args:
            path: Uploaded file path

        Returns:
            ImageFile for the upload

        Raises:
            CoverError: NOT_FOUND, MIN_SIZE, MAX_SIZE, TYPE or ALLOW_TYPES
        """
        path = Path(path)
        if not path.is_file():
            raise CoverError(CoverErrorKind.NOT_FOUND, str(path))

        size = path.stat().st_size
        if size < self.settings.min_upload_bytes:
            raise CoverError(CoverErrorKind.MIN_SIZE, f"{size} < {self.settings.min_upload_bytes} bytes")
        if size > self.settings.max_upload_bytes:
            raise CoverError(CoverErrorKind.MAX_SIZE, f"{size} > {self.settings.max_upload_bytes} bytes")

        image = ImageFile(path)
        if not image.is_valid:
            raise CoverError(CoverErrorKind.TYPE, path.name)
        if image.type not in self.settings.allowed_image_types:
            raise CoverError(CoverErrorKind.ALLOW_TYPES, image.type.name.lower())

        return image

    @staticmethod
    def _variant_name(image: ImageFile, square: ImageFile, width: int) -> Optional[str]:
        """
        Explicit variant name when the default one would replace the upload.

        An upload named like ``photo_300.jpg`` yields the default 300px
        variant name ``photo_300.jpg``; such variants are named after the
        full upload name instead.
        """
        if square.dir / square.resize_name(width) != image.path:
            return None
        name = f"{image.filename}{ImageConstants.NAME_SEPARATOR}{width}"
        return f"{name}.{image.ext}" if image.ext else name

    def process(
        self,
        path: Union[str, Path],
        *,
        crop: ParamsLike = None,
        host: str = "",
        root_dir: Union[str, Path, None] = None,
        cover_type: int = 0,
        hide: bool = False,
    ) -> ProcessedCover:
        """
        Run the full derivative pipeline for one upload.

        Args:
            path: Uploaded file path
            crop: Optional square crop box chosen by the user
            host: Storage host recorded on the cover
            root_dir: Storage root stripped from the recorded directory
            cover_type: Numeric cover type code
            hide: Create the cover hidden

        Returns:
            ProcessedCover with the populated record and produced files
        """
        image = self.validate_upload(path)
        quality = self.settings.jpeg_quality

        if not image.optimize(quality=quality):
            raise CoverError(CoverErrorKind.OPTIMIZE, image.path.name)

        # Hash and size describe the optimized original
        content_hash = hash_file(image.path)
        original_size = float(image.path.stat().st_size)

        square_path = image.crop_square(crop, quality=quality)
        if square_path is None:
            raise CoverError(CoverErrorKind.CROP, image.path.name)

        square = ImageFile(square_path)
        variants: Dict[int, Path] = {}
        for width in self.settings.variant_widths:
            if width > square.width:
                logger.debug(f"Skipping {width}px variant of {square.width}px square")
                continue
            variant_path = square.resize(
                width, quality=quality, new_filename=self._variant_name(image, square, width)
            )
            if variant_path is None:
                raise CoverError(CoverErrorKind.CROP, f"{width}px variant of {image.path.name}")
            variants[width] = variant_path

        timestamp = int(time.time())
        directory = str(image.dir)
        if root_dir is not None:
            directory = without_root_dir(root_dir, directory)

        cover = Cover(
            file_id=make_file_id(content_hash, timestamp),
            media_type=image.type.mime_type,
            type=cover_type,
            host=host,
            dir=directory,
            name=image.filename,
            ext=image.ext,
            size=original_size,
            hash=content_hash,
            time=timestamp,
            hide=CoverConstants.HIDDEN if hide else CoverConstants.VISIBLE,
            resize_status=CoverConstants.RESIZE_DONE,
        ).with_size_variants(variants)

        logger.info(
            f"Processed cover {cover.file_id}: {image.width}x{image.height} "
            f"{image.type.name}, variants {sorted(variants)}"
        )
        return ProcessedCover(cover=cover, original=image.path, square=square_path, variants=variants)

