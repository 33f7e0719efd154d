"""
Configuration for cover image handling.

Settings are read from environment variables (prefix ``COVERIMG_``, nested
sections separated by ``__``) and an optional ``.env`` file, e.g.::

    COVERIMG_IMAGE__JPEG_QUALITY=85
    COVERIMG_IMAGE__VARIANT_WIDTHS=[800,400]
    COVERIMG_SYSTEM__LOG_LEVEL=DEBUG
"""

import logging
from functools import lru_cache
from typing import Any, Dict, List, Literal

from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from coverimg.core.constants import CoverConstants, ImageConstants, SystemConstants
from coverimg.core.enums import ImageType


class ImageSettings(BaseModel):
    """Image processing and upload bound settings"""

    jpeg_quality: int = Field(
        ImageConstants.DEFAULT_JPEG_QUALITY,
        ge=ImageConstants.MIN_JPEG_QUALITY,
        le=ImageConstants.MAX_JPEG_QUALITY,
    )
    variant_widths: List[int] = Field(default_factory=lambda: list(CoverConstants.DEFAULT_VARIANT_WIDTHS))
    min_upload_bytes: int = Field(CoverConstants.DEFAULT_MIN_UPLOAD_BYTES, ge=0)
    max_upload_bytes: int = Field(CoverConstants.DEFAULT_MAX_UPLOAD_BYTES, gt=0)
    allowed_types: List[str] = Field(default_factory=lambda: list(CoverConstants.DEFAULT_ALLOWED_TYPES))

    @field_validator("variant_widths")
    @classmethod
    def validate_widths(cls, v: List[int]) -> List[int]:
        if any(width <= 0 for width in v):
            raise ValueError("variant widths must be positive")
        return sorted(set(v), reverse=True)

    @field_validator("allowed_types")
    @classmethod
    def validate_types(cls, v: List[str]) -> List[str]:
        normalized = [name.upper() for name in v]
        unknown = [name for name in normalized if name not in ImageType.__members__]
        if unknown:
            raise ValueError(f"unsupported image types: {unknown}")
        return [name.lower() for name in normalized]

    @model_validator(mode="after")
    def validate_bounds(self) -> "ImageSettings":
        if self.min_upload_bytes > self.max_upload_bytes:
            raise ValueError("min_upload_bytes must not exceed max_upload_bytes")
        return self

    @property
    def allowed_image_types(self) -> List[ImageType]:
        return [ImageType[name.upper()] for name in self.allowed_types]


class SystemSettings(BaseModel):
    """Logging and debug settings"""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = SystemConstants.LOG_LEVEL_DEFAULT
    debug: bool = False


class Settings(BaseSettings):
    """Application settings"""

    environment: str = "development"
    image: ImageSettings = Field(default_factory=ImageSettings)
    system: SystemSettings = Field(default_factory=SystemSettings)

    model_config = SettingsConfigDict(
        env_prefix=SystemConstants.ENV_PREFIX,
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()


@lru_cache()
def get_settings() -> Settings:
    return Settings()


def configure_logging(settings: Settings) -> None:
    """Configure root logging from settings."""
    level = "DEBUG" if settings.system.debug else settings.system.log_level
    logging.basicConfig(
        level=getattr(logging, level),
        format=SystemConstants.LOG_FORMAT,
    )
    # Pillow logs every plugin probe at DEBUG
    logging.getLogger("PIL").setLevel(logging.WARNING)
