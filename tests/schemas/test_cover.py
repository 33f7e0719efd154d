"""
Tests for the Cover entity and cover error catalog
"""

import pytest
from pydantic import ValidationError

from coverimg.core.enums import CoverErrorKind, FieldType
from coverimg.core.exceptions import CoverError
from coverimg.schemas import Cover


class TestCoverRecord:
    """Test Cover casting and mass assignment"""

    @pytest.fixture
    def row(self):
        """Raw database row with string-typed values"""
        return {
            "id": "42",
            "file_id": "a1b2c3",
            "media_type": "image/jpeg",
            "type": "2",
            "host": "cdn1.example.com",
            "dir": "/covers/2024/",
            "name": "photo",
            "ext": "jpg",
            "size": "20480",
            "hash": "d41d8cd98f00b204e9800998ecf8427e",
            "sizes": "[600, 300]",
            "time": "1700000000",
            "hide": "0",
            "resize_status": "1",
        }

    def test_casts_from_row(self, row):
        """Test string columns are cast to declared types"""
        cover = Cover.from_row(row)

        assert cover.id == 42
        assert cover.type == 2
        assert cover.size == 20480.0
        assert isinstance(cover.size, float)
        assert cover.time == 1700000000
        assert cover.hide == 0
        assert cover.resize_status == 1
        assert cover.is_resized
        assert not cover.is_hidden
        assert cover.filename == "photo.jpg"

    def test_numbers_cast_to_strings(self):
        """Test numeric input for string columns"""
        cover = Cover(file_id=123, name=456)
        assert cover.file_id == "123"
        assert cover.name == "456"

    def test_rejects_uncastable(self):
        """Test invalid values raise on construction"""
        with pytest.raises(ValidationError):
            Cover(time="yesterday")
        with pytest.raises(ValidationError):
            Cover(size="big")

    def test_unknown_columns_ignored(self, row):
        """Test extra row columns do not fail"""
        row["created_by"] = "admin"
        cover = Cover.from_row(row)
        assert not hasattr(cover, "created_by")

    def test_defaults(self):
        """Test an empty record"""
        cover = Cover()
        assert cover.id is None
        assert cover.size == 0.0
        assert cover.sizes == ""
        assert cover.hide == 0
        assert cover.resize_status == 0

    def test_fill_respects_whitelist(self):
        """Test only fillable fields are assigned"""
        cover = Cover(id=1)
        result = cover.fill({"id": 99, "name": "new", "hide": "1", "unknown": "x"})

        assert result is cover
        assert cover.id == 1
        assert cover.name == "new"
        assert cover.hide == 1
        assert cover.is_hidden

    def test_fill_validates(self):
        """Test assignment goes through casting"""
        cover = Cover()
        with pytest.raises(ValidationError):
            cover.fill({"resize_status": "done"})

    def test_fill_is_all_or_nothing(self):
        """Test a rejected value leaves earlier keys unassigned"""
        cover = Cover(name="old", hide=0)
        with pytest.raises(ValidationError):
            cover.fill({"name": "new", "hide": "1", "resize_status": "done"})

        assert cover.name == "old"
        assert cover.hide == 0

    def test_to_row_order(self, row):
        """Test row columns follow the cast table"""
        data = Cover.from_row(row).to_row()
        assert list(data) == list(Cover.CASTS)
        assert data["id"] == 42

    def test_table_metadata(self):
        """Test static mapping metadata"""
        assert Cover.TABLE == "cover"
        assert Cover.SALT == "cover"
        assert "id" not in Cover.FILLABLE
        assert set(Cover.FILLABLE) | {"id"} == set(Cover.CASTS)
        assert Cover.CASTS["size"] is FieldType.DOUBLE
        assert Cover.CASTS["hash"] is FieldType.STRING
        assert Cover.CASTS["resize_status"] is FieldType.INTEGER


class TestCoverSizes:
    """Test serialized size variants"""

    def test_decode(self):
        """Test JSON list decoding"""
        assert Cover(sizes="[600, 300, 150]").size_variants() == [600, 300, 150]

    @pytest.mark.parametrize("sizes", ["", "not json", '{"a": 1}', "42"])
    def test_decode_invalid(self, sizes):
        """Test blank or malformed values give no variants"""
        assert Cover(sizes=sizes).size_variants() == []

    def test_encode(self):
        """Test widths are de-duplicated and sorted descending"""
        cover = Cover(name="photo").with_size_variants([150, 600, 300, 600])
        assert cover.sizes == "[600, 300, 150]"
        assert cover.name == "photo"
        assert cover.size_variants() == [600, 300, 150]


class TestCoverErrors:
    """Test the error catalog"""

    def test_codes(self):
        """Test legacy codes"""
        assert CoverErrorKind.REQUIRED_FIELDS.code == "Cover1"
        assert CoverErrorKind.MIN_SIZE.code == "Cover7"
        assert CoverErrorKind.CROP.code == "Cover11"
        assert len(CoverErrorKind) == 11

    @pytest.mark.parametrize("kind", list(CoverErrorKind))
    def test_every_kind_has_message(self, kind):
        """Test each kind carries a user-facing message"""
        assert kind.message
        assert CoverErrorKind.from_code(kind.code) is kind

    @pytest.mark.parametrize("code", ["api\\entities\\Cover7", "\\Cover7"])
    def test_from_namespaced_code(self, code):
        """Test class-qualified legacy codes"""
        assert CoverErrorKind.from_code(code) is CoverErrorKind.MIN_SIZE

    @pytest.mark.parametrize("code", ["", "Cover", "Cover0", "Cover12", "Image1", "Coverx"])
    def test_from_code_unknown(self, code):
        """Test unknown codes"""
        assert CoverErrorKind.from_code(code) is None

    def test_exception_payload(self):
        """Test CoverError exposes kind and detail"""
        error = CoverError(CoverErrorKind.MAX_SIZE, "20MB")

        assert error.kind is CoverErrorKind.MAX_SIZE
        assert error.code == "Cover8"
        assert "20MB" in str(error)
        assert error.to_dict() == {
            "code": "Cover8",
            "error": "MAX_SIZE",
            "message": CoverErrorKind.MAX_SIZE.message,
            "detail": "20MB",
        }

    def test_exception_without_detail(self):
        """Test message without detail"""
        error = CoverError(CoverErrorKind.NOT_FOUND)
        assert str(error) == CoverErrorKind.NOT_FOUND.message
