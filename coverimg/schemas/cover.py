"""
Cover entity record.

Describes one stored cover image as a flat table row. Persistence is left
to the calling data mapper, which consumes ``TABLE``, ``FILLABLE``,
``CASTS`` and ``to_row()``.
"""

import json
import logging
from typing import Any, ClassVar, Dict, Iterable, List, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from coverimg.core.constants import CoverConstants
from coverimg.core.enums import FieldType

logger = logging.getLogger(__name__)


class Cover(BaseModel):
    """Stored cover image: file metadata, hash, size variants and flags"""

    model_config = ConfigDict(
        validate_assignment=True,
        coerce_numbers_to_str=True,
        extra="ignore",
    )

    TABLE: ClassVar[str] = CoverConstants.TABLE
    SALT: ClassVar[str] = CoverConstants.SALT

    FILLABLE: ClassVar[Tuple[str, ...]] = (
        "file_id",
        "media_type",
        "type",
        "host",
        "dir",
        "name",
        "ext",
        "size",
        "hash",
        "sizes",
        "time",
        "hide",
        "resize_status",
    )

    CASTS: ClassVar[Dict[str, FieldType]] = {
        "id": FieldType.INTEGER,
        "file_id": FieldType.STRING,
        "media_type": FieldType.STRING,
        "type": FieldType.INTEGER,
        "host": FieldType.STRING,
        "dir": FieldType.STRING,
        "name": FieldType.STRING,
        "ext": FieldType.STRING,
        "size": FieldType.DOUBLE,
        "hash": FieldType.STRING,
        "sizes": FieldType.STRING,
        "time": FieldType.INTEGER,
        "hide": FieldType.INTEGER,
        "resize_status": FieldType.INTEGER,
    }

    id: Optional[int] = None
    file_id: str = ""
    media_type: str = ""
    type: int = 0
    host: str = ""
    dir: str = ""
    name: str = ""
    ext: str = ""
    size: float = 0.0
    hash: str = ""
    sizes: str = ""
    time: int = 0
    hide: int = CoverConstants.VISIBLE
    resize_status: int = CoverConstants.RESIZE_PENDING

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Cover":
        """Build a record from a database row, casting every column."""
        return cls.model_validate(dict(row))

    def fill(self, data: Mapping[str, Any]) -> "Cover":
        """
        Mass-assign whitelisted fields.

        Keys outside ``FILLABLE`` (including ``id``) are ignored. The merged
        values are validated together, so a rejected value leaves the
        record unchanged.

        Args:
            data: Field values to assign

        Returns:
            This record, for chaining
        """
        allowed = {}
        for key, value in data.items():
            if key in self.FILLABLE:
                allowed[key] = value
            else:
                logger.debug(f"Ignoring non-fillable cover field: {key}")

        validated = type(self).model_validate({**self.model_dump(), **allowed})
        for key in allowed:
            setattr(self, key, getattr(validated, key))
        return self

    def to_row(self) -> Dict[str, Any]:
        """Column mapping in cast table order."""
        return {column: getattr(self, column) for column in self.CASTS}

    @property
    def filename(self) -> str:
        return f"{self.name}.{self.ext}" if self.ext else self.name

    @property
    def is_hidden(self) -> bool:
        return bool(self.hide)

    @property
    def is_resized(self) -> bool:
        return self.resize_status == CoverConstants.RESIZE_DONE

    def size_variants(self) -> List[int]:
        """Decode the serialized list of derivative widths."""
        if not self.sizes:
            return []
        try:
            values = json.loads(self.sizes)
        except ValueError:
            logger.warning(f"Cover {self.id} has unreadable sizes: {self.sizes!r}")
            return []
        if not isinstance(values, list):
            return []
        return [int(v) for v in values if isinstance(v, (int, float))]

    def with_size_variants(self, widths: Iterable[int]) -> "Cover":
        """Return a copy with ``sizes`` re-encoded from the given widths."""
        encoded = json.dumps(sorted({int(w) for w in widths}, reverse=True))
        return self.model_copy(update={"sizes": encoded})


def _check_casts() -> None:
    """Ensure the cast table matches the declared fields."""
    declared = set(Cover.model_fields)
    if set(Cover.CASTS) != declared:
        raise TypeError(f"Cover casts do not match fields: {sorted(declared ^ set(Cover.CASTS))}")

    for column in Cover.FILLABLE:
        if column not in declared:
            raise TypeError(f"Fillable column {column} is not a Cover field")

    for column, field_type in Cover.CASTS.items():
        annotation = Cover.model_fields[column].annotation
        if annotation is not field_type.python_type and annotation != Optional[field_type.python_type]:
            raise TypeError(f"Cover.{column} is not declared as {field_type.value}")


_check_casts()
