"""Enumerations for PDF layout processing."""

from enum import Enum


class SemanticRole(Enum):
    """Enumeration of semantic paragraph roles"""
    TITLE = "title"
    ABSTRACT = "abstract"
    SECTION_HEADING = "section_heading"
    BODY = "body"
    REFERENCE = "reference"
    PAGE_HEADER = "page_header"
    PAGE_FOOTER = "page_footer"
    OTHER = "other"

    @classmethod
    def from_name(cls, name: str) -> "SemanticRole":
        """Resolve a role from its value or output label (case-insensitive)."""
        key = name.strip().lower().replace('-', '_')
        for role in cls:
            if key in (role.value, ROLE_LABELS[role].replace('-', '_')):
                return role
        raise ValueError(f"Unknown semantic role: {name}")


# Role labels used in every output; must cover every SemanticRole.
ROLE_LABELS = {
    SemanticRole.TITLE: 'title',
    SemanticRole.ABSTRACT: 'abstract',
    SemanticRole.SECTION_HEADING: 'heading',
    SemanticRole.BODY: 'body',
    SemanticRole.REFERENCE: 'reference',
    SemanticRole.PAGE_HEADER: 'page-header',
    SemanticRole.PAGE_FOOTER: 'page-footer',
    SemanticRole.OTHER: 'other',
}


class TextUnit(Enum):
    """Granularity of text units to serialize or visualize"""
    CHARACTER = "character"
    WORD = "word"
    LINE = "line"
    PARAGRAPH = "paragraph"


class HorizontalSweepDirection(Enum):
    """Direction in which horizontal cut candidates are scanned"""
    TOP_TO_BOTTOM = "top_to_bottom"
    BOTTOM_TO_TOP = "bottom_to_top"


class VerticalSweepDirection(Enum):
    """Direction in which vertical cut candidates are scanned"""
    LEFT_TO_RIGHT = "left_to_right"
    RIGHT_TO_LEFT = "right_to_left"


class SerializationFormat(Enum):
    """Supported output formats"""
    TXT = "txt"
    JSON = "json"
