"""
Pytest configuration and fixtures for cover image tests
"""

import pytest
from PIL import Image

from coverimg.config import ImageSettings
from coverimg.core.constants import ImageConstants


@pytest.fixture
def make_image(tmp_path):
    """Factory writing a solid-color test image and returning its path"""

    def _make(
        name="cover.jpg",
        size=(400, 300),
        format="JPEG",
        mode="RGB",
        color=(200, 40, 40),
        orientation=None,
    ):
        path = tmp_path / name
        image = Image.new(mode, size, color)
        save_kwargs = {"format": format}
        if orientation is not None:
            exif = Image.Exif()
            exif[ImageConstants.EXIF_ORIENTATION_TAG] = orientation
            save_kwargs["exif"] = exif
        image.save(path, **save_kwargs)
        return path

    return _make


@pytest.fixture
def two_tone_png(tmp_path):
    """40x20 PNG: transparent left half, opaque red right half"""
    path = tmp_path / "two_tone.png"
    image = Image.new("RGBA", (40, 20), (0, 0, 0, 0))
    image.paste((255, 0, 0, 255), (20, 0, 40, 20))
    image.save(path, format="PNG")
    return path


@pytest.fixture
def transparent_gif(tmp_path):
    """30x30 palette GIF with a transparent top half"""
    path = tmp_path / "anim.gif"
    image = Image.new("P", (30, 30), 0)
    image.putpalette([0, 0, 0, 0, 0, 255] + [0, 0, 0] * 254)
    image.paste(1, (0, 15, 30, 30))
    image.save(path, format="GIF", transparency=0)
    return path


@pytest.fixture
def text_file(tmp_path):
    """A file that is not an image"""
    path = tmp_path / "notes.jpg"
    path.write_text("definitely not a jpeg")
    return path


@pytest.fixture
def image_settings():
    """Image settings with small derivative widths"""
    return ImageSettings(
        jpeg_quality=85,
        variant_widths=[600, 300, 150],
        min_upload_bytes=1,
        max_upload_bytes=5 * 1024 * 1024,
        allowed_types=["jpeg", "png", "gif"],
    )
