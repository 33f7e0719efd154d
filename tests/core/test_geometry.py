"""
Tests for crop and resize geometry
"""

import pytest

from coverimg.core.image.geometry import ImageGeometry
from coverimg.schemas import CropBox, CropParams


class TestSquareCropBox:
    """Test square crop box calculation"""

    def test_landscape_is_centered(self):
        """Test default square on a landscape source"""
        box = ImageGeometry.square_crop_box(400, 300)
        assert box == CropBox(left=50, top=0, width=300, height=300)

    def test_portrait_is_centered(self):
        """Test default square on a portrait source"""
        box = ImageGeometry.square_crop_box(300, 501)
        assert box == CropBox(left=0, top=100, width=300, height=300)

    def test_custom_box_used_when_inside(self):
        """Test that a valid caller box replaces the default"""
        box = ImageGeometry.square_crop_box(
            400, 300, CropParams(left=10, top=20, width=200)
        )
        assert box == CropBox(left=10, top=20, width=200, height=200)

    def test_custom_box_from_dict(self):
        """Test that loose dict params are accepted"""
        box = ImageGeometry.square_crop_box(400, 300, {"left": 0, "top": 0, "width": 100, "extra": 1})
        assert box.to_dict() == {"left": 0, "top": 0, "width": 100, "height": 100}

    @pytest.mark.parametrize(
        "params",
        [
            {"left": 0, "top": 0, "width": 301},
            {"left": 150, "top": 0, "width": 200},
            {"left": 0, "top": 120, "width": 200},
            {"left": -1, "top": 0, "width": 100},
            {"left": 0, "top": -5, "width": 100},
            {"left": 0, "top": 0, "width": 0},
            {"left": 10, "width": 100},
            {"top": 10, "width": 100},
            {"left": 10, "top": 10},
            {"left": "abc", "top": 0, "width": 100},
            {"left": 0, "top": 0, "width": 12.5},
        ],
    )
    def test_invalid_custom_box_falls_back(self, params):
        """Test out-of-bounds or incomplete boxes fall back to the centered square"""
        box = ImageGeometry.square_crop_box(400, 300, params)
        assert box == CropBox(left=50, top=0, width=300, height=300)

    @pytest.mark.parametrize("size", [(1, 1), (7, 3), (3, 7), (1000, 999), (2, 1)])
    def test_side_is_min_dimension(self, size):
        """Test square side equals the shorter source side"""
        width, height = size
        box = ImageGeometry.square_crop_box(width, height)
        assert box.width == box.height == min(width, height)
        assert box.fits_within(width, height)


class TestAspectCropBox:
    """Test aspect-ratio crop box calculation"""

    def test_wide_target_uses_full_width(self):
        """Test target wider than source uses full width"""
        box = ImageGeometry.aspect_crop_box(400, 300, {"width": 16, "height": 9})
        # int(300 / 9 * 16) = 533 > 400, so width is fixed at 400
        assert box == CropBox(left=0, top=37, width=400, height=225)

    def test_tall_target_uses_full_height(self):
        """Test target narrower than source uses full height"""
        box = ImageGeometry.aspect_crop_box(400, 300, {"width": 2, "height": 3})
        assert box == CropBox(left=100, top=0, width=200, height=300)

    def test_no_target_is_square(self):
        """Test missing target size gives the centered square"""
        box = ImageGeometry.aspect_crop_box(400, 300, {})
        assert box == CropBox(left=50, top=0, width=300, height=300)

    def test_manual_position(self):
        """Test caller offsets with size clamped to the max box"""
        box = ImageGeometry.aspect_crop_box(
            400, 300, {"left": 10, "top": 5, "width": 100, "height": 50}, auto=False
        )
        assert box == CropBox(left=10, top=5, width=100, height=50)

    def test_manual_size_clamped(self):
        """Test oversized manual request is clamped to the maximal box"""
        box = ImageGeometry.aspect_crop_box(
            400, 300, {"left": 0, "top": 0, "width": 800, "height": 600}, auto=False
        )
        assert box == CropBox(left=0, top=0, width=400, height=300)

    def test_manual_out_of_bounds_falls_back(self):
        """Test manual box past the source edge falls back to centered"""
        box = ImageGeometry.aspect_crop_box(
            400, 300, {"left": 350, "top": 0, "width": 100, "height": 50}, auto=False
        )
        assert box == CropBox(left=0, top=50, width=400, height=200)

    @pytest.mark.parametrize("source", [(400, 300), (300, 400), (1, 1), (1920, 1080), (17, 1000)])
    @pytest.mark.parametrize("target", [(1, 1), (16, 9), (9, 16), (3, 1), (1, 7)])
    def test_never_exceeds_source(self, source, target):
        """Test the box always fits inside the source"""
        width, height = source
        box = ImageGeometry.aspect_crop_box(width, height, {"width": target[0], "height": target[1]})
        assert box.width > 0 and box.height > 0
        assert box.width <= width and box.height <= height
        assert box.fits_within(width, height)


class TestResizeDimensions:
    """Test resize dimension calculation"""

    def test_keeps_aspect(self):
        """Test height is scaled with the width"""
        assert ImageGeometry.resize_dimensions(400, 300, 200) == (200, 150)

    def test_height_is_floored(self):
        """Test height rounds down"""
        # 100 * 100 / 333 = 30.03
        assert ImageGeometry.resize_dimensions(333, 100, 100) == (100, 30)
        # 299 * 150 / 400 = 112.125
        assert ImageGeometry.resize_dimensions(400, 299, 150) == (150, 112)

    def test_enlarging(self):
        """Test scaling up works the same way"""
        assert ImageGeometry.resize_dimensions(100, 50, 300) == (300, 150)

    def test_height_at_least_one(self):
        """Test very wide images keep a 1px height"""
        assert ImageGeometry.resize_dimensions(1000, 1, 10) == (10, 1)

    @pytest.mark.parametrize("args", [(0, 100, 50), (100, 0, 50), (100, 100, 0), (100, 100, -5)])
    def test_invalid_sizes(self, args):
        """Test non-positive sizes are rejected"""
        assert ImageGeometry.resize_dimensions(*args) is None
