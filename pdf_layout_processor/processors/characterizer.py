"""Document-wide characterization: heading markup, running headers/footers, word counts."""

import logging
from collections import Counter
from types import MappingProxyType
from typing import FrozenSet, List, Optional

from ..models.data_structures import Document, DocumentCharacteristics, Markup, Paragraph
from ..models.geometry import Rectangle
from ..utils import lexicon
from ..utils.comparators import max_y_desc_key, max_y_key
from .paragraph_grouper import compute_markup
from .text_processor import TextProcessor

logger = logging.getLogger(__name__)


class DocumentCharacterizer:
    """Infer document-wide characteristics from the paragraphs of all pages.

    ``characterize`` never mutates the document; it returns an immutable
    :class:`DocumentCharacteristics` that callers keep and pass on.
    """

    def __init__(self,
                 stop_words: FrozenSet[str] = lexicon.STOP_WORDS,
                 section_headings: FrozenSet[str] = lexicon.SECTION_HEADINGS,
                 abstract_headings: FrozenSet[str] = lexicon.ABSTRACT_HEADINGS,
                 references_headings: FrozenSet[str] = lexicon.REFERENCES_HEADINGS,
                 majority: float = 0.75,
                 max_lines: int = 3):
        self.stop_words = stop_words
        self.section_headings = section_headings
        self.abstract_headings = abstract_headings
        self.references_headings = references_headings
        self.majority = majority
        self.max_lines = max_lines

    @classmethod
    def from_config(cls, config) -> "DocumentCharacterizer":
        return cls(
            stop_words=config.stop_words,
            section_headings=config.section_headings,
            abstract_headings=config.abstract_headings,
            references_headings=config.references_headings,
            majority=config.header_footer_majority,
            max_lines=config.max_header_footer_lines,
        )

    def characterize(self, document: Optional[Document]) -> DocumentCharacteristics:
        if document is None or document.pages is None:
            return DocumentCharacteristics()

        header_candidates = []
        footer_candidates = []
        section_heading_markup = None
        words = Counter()

        for page in document.pages:
            if page is None:
                continue
            paragraphs = [p for p in page.paragraphs or [] if p is not None]
            if not paragraphs:
                continue

            top_most = paragraphs[0]
            if top_most.num_lines < self.max_lines and top_most.rectangle is not None:
                header_candidates.append(top_most)
            lower_most = paragraphs[-1]
            if lower_most.num_lines < self.max_lines and lower_most.rectangle is not None:
                footer_candidates.append(lower_most)

            for paragraph in paragraphs:
                if section_heading_markup is None and self.is_well_known_section_heading(paragraph):
                    section_heading_markup = self.get_markup(paragraph)

                for word in paragraph.words:
                    normalized = self.normalize(word.text)
                    if normalized and normalized not in self.stop_words:
                        words[normalized] += 1

        num_pages = len(document.pages)
        header_area = self._merge_area(sorted(header_candidates, key=max_y_desc_key), num_pages)
        footer_area = self._merge_area(sorted(footer_candidates, key=max_y_key), num_pages)

        logger.debug("Section heading markup: %s, page header area: %s, page footer area: %s",
                     section_heading_markup, header_area, footer_area)

        return DocumentCharacteristics(
            section_heading_markup=section_heading_markup,
            page_header_area=header_area,
            page_footer_area=footer_area,
            word_frequencies=MappingProxyType(dict(words)),
            num_pages=num_pages,
            is_characterized=True,
        )

    def _merge_area(self, candidates: List[Paragraph], num_pages: int) -> Optional[Rectangle]:
        """Greedily merge sorted candidates until the first one not overlapping the area so far."""
        if not candidates:
            return None

        area = candidates[0].rectangle
        num_members = 1
        for candidate in candidates[1:]:
            if not area.overlaps(candidate.rectangle):
                break
            area = area.union(candidate.rectangle)
            num_members += 1

        if num_members > self.majority * num_pages:
            return area
        return None

    # ----------------------------
    # Vocabulary lookups
    # ----------------------------

    @staticmethod
    def normalize(text: Optional[str]) -> str:
        return TextProcessor.normalize_for_lookup(text)

    def _lookup(self, paragraph: Optional[Paragraph], vocabulary: FrozenSet[str]) -> bool:
        if paragraph is None or not paragraph.text:
            return False
        return self.normalize(paragraph.text) in vocabulary

    def is_well_known_section_heading(self, paragraph: Optional[Paragraph]) -> bool:
        return self._lookup(paragraph, self.section_headings)

    def is_abstract_heading(self, paragraph: Optional[Paragraph]) -> bool:
        return self._lookup(paragraph, self.abstract_headings)

    def is_references_heading(self, paragraph: Optional[Paragraph]) -> bool:
        return self._lookup(paragraph, self.references_headings)

    @staticmethod
    def get_markup(paragraph: Optional[Paragraph]) -> Optional[Markup]:
        """Typographic markup of a paragraph (computed from its lines if not set)."""
        if paragraph is None:
            return None
        if paragraph.markup is not None:
            return paragraph.markup
        return compute_markup(paragraph.text_lines)


def characterize(document: Optional[Document]) -> DocumentCharacteristics:
    """Characterize a document with the default vocabularies."""
    return DocumentCharacterizer().characterize(document)
