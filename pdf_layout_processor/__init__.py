"""
PDF Layout Processor

A layout analysis pipeline that reconstructs the reading structure of PDF
documents from positioned glyphs: text areas, text lines, words, paragraphs
and semantic roles, using geometry and font statistics only.

Features:
- Recursive X-Y cut segmentation with pluggable scoring
- Line and word tokenization with baselines and hyphenation detection
- Paragraph grouping by spacing, alignment and typographic markup
- Document characterization (section heading markup, running headers/footers)
- Text, JSON and image outputs
"""

from .config import LayoutConfig
from .core.main_processor import LayoutDocumentProcessor, ProcessingResult
from .exceptions import LayoutProcessorError, DocumentDecodeError, SerializationError, VisualizationError
from .models.data_structures import (
    Character, Word, TextLine, Paragraph, Page, Document, DocumentCharacteristics, Markup
)
from .models.enums import SemanticRole, TextUnit, SerializationFormat
from .models.geometry import Rectangle, Position
from .processors.characterizer import characterize
from .processors.xycut import XYCut

__version__ = "1.0.0"
__all__ = [
    "LayoutConfig",
    "LayoutDocumentProcessor",
    "ProcessingResult",
    "LayoutProcessorError",
    "DocumentDecodeError",
    "SerializationError",
    "VisualizationError",
    "Character",
    "Word",
    "TextLine",
    "Paragraph",
    "Page",
    "Document",
    "DocumentCharacteristics",
    "Markup",
    "SemanticRole",
    "TextUnit",
    "SerializationFormat",
    "Rectangle",
    "Position",
    "characterize",
    "XYCut",
]
