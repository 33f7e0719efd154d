"""
Exceptions raised by the cover service layer.

Image operations themselves never raise; they return ``None``/``False``.
"""

from typing import Any, Dict, Optional

from coverimg.core.enums import CoverErrorKind


class CoverError(Exception):
    """Cover operation failure carrying a catalogued error kind."""

    def __init__(self, kind: CoverErrorKind, detail: Optional[str] = None):
        self.kind = kind
        self.detail = detail
        message = kind.message if detail is None else f"{kind.message}: {detail}"
        super().__init__(message)

    @property
    def code(self) -> str:
        return self.kind.code

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a payload a calling layer can return to users."""
        return {
            "code": self.kind.code,
            "error": self.kind.name,
            "message": self.kind.message,
            "detail": self.detail,
        }
