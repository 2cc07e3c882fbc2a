"""Plain text output generation."""

from typing import Iterable, List, Optional

from ..exceptions import SerializationError
from ..models.data_structures import Document
from ..models.enums import SemanticRole, TextUnit
from .units import iter_units, unit_text

# Control characters marking page breaks and headings.
PAGE_BREAK = '\f'
HEADING_MARKER = '\x01'


class TextGenerator:
    """Plain text output generation"""

    @staticmethod
    def serialize(document: Optional[Document],
                  unit: TextUnit = TextUnit.PARAGRAPH,
                  roles: Optional[Iterable[SemanticRole]] = None,
                  with_control_characters: bool = False) -> str:
        """One unit per line; paragraphs are separated by blank lines.

        With control characters, a form feed starts every page after the
        first one and the first unit of a section heading is prefixed with
        a \\x01 character.
        """
        separator = '\n\n' if unit is TextUnit.PARAGRAPH else '\n'
        parts: List[str] = []
        current_page = None
        current_paragraph = None

        for paragraph, element in iter_units(document, unit, roles):
            text = unit_text(element)
            if not text:
                continue
            if with_control_characters:
                prefix = ''
                if current_page is not None and paragraph.page_number != current_page:
                    prefix += PAGE_BREAK
                if paragraph.role is SemanticRole.SECTION_HEADING and paragraph is not current_paragraph:
                    prefix += HEADING_MARKER
                text = prefix + text
            current_page = paragraph.page_number
            current_paragraph = paragraph
            parts.append(text)

        return separator.join(parts)

    @staticmethod
    def save_text(text: str, output_path: str) -> str:
        try:
            with open(output_path, 'w', encoding='utf-8') as f:
                f.write(text)
        except OSError as e:
            raise SerializationError(f"Cannot write {output_path}: {e}") from e
        return output_path
