"""Pipeline orchestration."""

from .main_processor import LayoutDocumentProcessor, ProcessingResult

__all__ = ["LayoutDocumentProcessor", "ProcessingResult"]
