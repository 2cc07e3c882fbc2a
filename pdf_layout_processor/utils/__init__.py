"""Utility modules for PDF layout processing."""

from .pdf_utils import PDFUtils
from .image_utils import ImageUtils

__all__ = ["PDFUtils", "ImageUtils"]
