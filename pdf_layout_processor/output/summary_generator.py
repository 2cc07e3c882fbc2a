"""Document summary generation utilities."""

from collections import Counter
from typing import Dict, Optional

from ..models.data_structures import Document, DocumentCharacteristics
from ..models.enums import SemanticRole
from .units import ROLE_LABELS


class SummaryGenerator:
    """Document summary generation utilities"""

    @staticmethod
    def create_document_summary(document: Optional[Document],
                                characteristics: Optional[DocumentCharacteristics] = None,
                                num_top_words: int = 20) -> Dict:
        """Create document summary with role and paragraph metrics."""
        summary = {
            'document_title': None,
            'total_pages': 0,
            'all_headings': [],
            'role_distribution': {label: 0 for label in ROLE_LABELS.values()},
            'paragraph_summary': {
                'total_paragraphs': 0,
                'total_lines': 0,
                'total_words': 0,
                'total_characters': 0,
                'average_paragraph_length': 0.0,
                'alignment_distribution': {},
            },
            'characteristics': {
                'section_heading_markup': None,
                'has_page_header': False,
                'has_page_footer': False,
                'most_common_words': [],
            },
        }
        if document is None:
            return summary

        summary['total_pages'] = len(document.pages)
        paragraph_summary = summary['paragraph_summary']
        alignments = Counter()
        total_paragraph_length = 0

        for page in document.pages:
            if page is None:
                continue
            paragraph_summary['total_characters'] += len(page.characters)
            for paragraph in page.paragraphs or []:
                if paragraph is None:
                    continue
                paragraph_summary['total_paragraphs'] += 1
                paragraph_summary['total_lines'] += paragraph.num_lines
                paragraph_summary['total_words'] += len(paragraph.words)
                total_paragraph_length += len(paragraph.text)
                alignments[paragraph.alignment] += 1

                if paragraph.role is not None:
                    summary['role_distribution'][ROLE_LABELS[paragraph.role]] += 1
                if paragraph.role is SemanticRole.TITLE and summary['document_title'] is None:
                    summary['document_title'] = paragraph.text
                elif paragraph.role is SemanticRole.SECTION_HEADING:
                    summary['all_headings'].append({
                        'text': paragraph.text,
                        'page_number': paragraph.page_number,
                    })

        if paragraph_summary['total_paragraphs']:
            paragraph_summary['average_paragraph_length'] = \
                total_paragraph_length / paragraph_summary['total_paragraphs']
        paragraph_summary['alignment_distribution'] = dict(alignments)

        if characteristics is not None:
            markup = characteristics.section_heading_markup
            words = Counter(characteristics.word_frequencies)
            summary['characteristics'] = {
                'section_heading_markup': str(markup) if markup is not None else None,
                'has_page_header': characteristics.page_header_area is not None,
                'has_page_footer': characteristics.page_footer_area is not None,
                'most_common_words': words.most_common(num_top_words),
            }

        return summary
