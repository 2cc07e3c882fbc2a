"""Assignment of semantic roles to paragraphs."""

import logging
from typing import List, Optional

from ..models.data_structures import Document, DocumentCharacteristics, Page, Paragraph
from ..models.enums import SemanticRole
from .characterizer import DocumentCharacterizer
from .statistician import CharacterStatistician

logger = logging.getLogger(__name__)

# A title spans at most this many lines.
MAX_TITLE_LINES = 4


class RoleClassifier:
    """Assign one semantic role to every paragraph of a characterized document"""

    def __init__(self, config):
        self.config = config
        self.characterizer = DocumentCharacterizer.from_config(config)
        self.statistician = CharacterStatistician()

    def assign_roles(self, document: Optional[Document], characteristics: DocumentCharacteristics) -> None:
        if document is None:
            return

        body_font_size = self._body_font_size(document)
        title = self._find_title(document, characteristics, body_font_size)

        # Role of the paragraphs following the last section heading.
        section_role = None
        for page in document.pages:
            if page is None:
                continue
            paragraphs = [p for p in page.paragraphs or [] if p is not None]
            for i, paragraph in enumerate(paragraphs):
                if self._is_page_header(paragraph, i, characteristics):
                    paragraph.role = SemanticRole.PAGE_HEADER
                elif self._is_page_footer(paragraph, i, len(paragraphs), characteristics):
                    paragraph.role = SemanticRole.PAGE_FOOTER
                elif self.is_section_heading(paragraph, characteristics):
                    paragraph.role = SemanticRole.SECTION_HEADING
                    if self.characterizer.is_abstract_heading(paragraph):
                        section_role = SemanticRole.ABSTRACT
                    elif self.characterizer.is_references_heading(paragraph):
                        section_role = SemanticRole.REFERENCE
                    else:
                        section_role = None
                elif paragraph is title:
                    paragraph.role = SemanticRole.TITLE
                elif section_role is not None:
                    paragraph.role = section_role
                elif self._font_size(paragraph) is not None and self._font_size(paragraph) == body_font_size:
                    paragraph.role = SemanticRole.BODY
                else:
                    paragraph.role = SemanticRole.OTHER

    def is_section_heading(self, paragraph: Paragraph, characteristics: DocumentCharacteristics) -> bool:
        if (self.characterizer.is_well_known_section_heading(paragraph)
                or self.characterizer.is_abstract_heading(paragraph)
                or self.characterizer.is_references_heading(paragraph)):
            return True
        markup = characteristics.section_heading_markup
        return (markup is not None
                and paragraph.num_lines <= self.config.max_heading_lines
                and self.characterizer.get_markup(paragraph) == markup)

    def _is_page_header(self, paragraph: Paragraph, index: int, characteristics: DocumentCharacteristics) -> bool:
        return (index == 0
                and paragraph.num_lines < self.config.max_header_footer_lines
                and characteristics.page_header_area is not None
                and characteristics.page_header_area.overlaps(paragraph.rectangle))

    def _is_page_footer(self, paragraph: Paragraph, index: int, num_paragraphs: int,
                        characteristics: DocumentCharacteristics) -> bool:
        return (index == num_paragraphs - 1
                and paragraph.num_lines < self.config.max_header_footer_lines
                and characteristics.page_footer_area is not None
                and characteristics.page_footer_area.overlaps(paragraph.rectangle))

    def _find_title(self, document: Document, characteristics: DocumentCharacteristics,
                    body_font_size: Optional[float]) -> Optional[Paragraph]:
        """Largest-font short paragraph on the first page, before any section heading."""
        first_page = self._first_page(document.pages)
        if first_page is None or body_font_size is None:
            return None

        title = None
        title_size = body_font_size
        paragraphs = [p for p in first_page.paragraphs or [] if p is not None]
        for i, paragraph in enumerate(paragraphs):
            if self._is_page_header(paragraph, i, characteristics):
                continue
            if self.is_section_heading(paragraph, characteristics):
                break
            size = paragraph.character_statistic.average_font_size
            if paragraph.num_lines <= MAX_TITLE_LINES and size is not None and size > title_size:
                title = paragraph
                title_size = size
        return title

    def _body_font_size(self, document: Document) -> Optional[float]:
        statistic = document.character_statistic
        if statistic is None or statistic.most_common_font_face is None:
            statistic = self.statistician.aggregate(
                p.character_statistic for p in document.paragraphs if p is not None
            )
        if statistic.most_common_font_face is None:
            return None
        return round(statistic.most_common_font_face.size)

    @staticmethod
    def _font_size(paragraph: Paragraph) -> Optional[float]:
        font_face = paragraph.character_statistic.most_common_font_face
        return round(font_face.size) if font_face is not None else None

    @staticmethod
    def _first_page(pages: List[Page]) -> Optional[Page]:
        for page in pages:
            if page is not None:
                return page
        return None
