"""Exceptions raised by the PDF layout processor."""

from typing import Optional


class LayoutProcessorError(Exception):
    """Base class of all errors raised by this package"""


class DocumentDecodeError(LayoutProcessorError):
    """The upstream decoder could not produce pages for a PDF file"""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class SerializationError(LayoutProcessorError):
    """A processed document could not be serialized or written"""


class VisualizationError(LayoutProcessorError):
    """A processed document could not be visualized"""
