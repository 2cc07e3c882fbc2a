"""Data models and enums for PDF layout processing."""

from .data_structures import (
    Font, FontFace, Color, Markup, Character, Figure, Shape, CharacterStatistic,
    TextLineStatistic, TextArea, Word, TextLine, Paragraph, Page, Document,
    DocumentCharacteristics
)
from .enums import (
    SemanticRole, TextUnit, HorizontalSweepDirection, VerticalSweepDirection,
    SerializationFormat
)
from .geometry import Rectangle, Line, Position

__all__ = [
    "Font",
    "FontFace",
    "Color",
    "Markup",
    "Character",
    "Figure",
    "Shape",
    "CharacterStatistic",
    "TextLineStatistic",
    "TextArea",
    "Word",
    "TextLine",
    "Paragraph",
    "Page",
    "Document",
    "DocumentCharacteristics",
    "SemanticRole",
    "TextUnit",
    "HorizontalSweepDirection",
    "VerticalSweepDirection",
    "SerializationFormat",
    "Rectangle",
    "Line",
    "Position"
]
