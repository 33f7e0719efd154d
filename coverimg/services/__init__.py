"""
Service layer: orchestrates image operations into cover workflows.
"""

from .cover_service import CoverService, ProcessedCover

__all__ = ["CoverService", "ProcessedCover"]
