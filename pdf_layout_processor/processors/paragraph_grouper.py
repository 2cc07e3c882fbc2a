"""Paragraph grouping of text lines."""

import logging
from collections import Counter
from typing import List, Optional, Sequence

from ..models.data_structures import Markup, Page, Paragraph, TextLine, TextLineStatistic
from ..models.geometry import Position, Rectangle
from .statistician import CharacterStatistician, reference_y
from .text_processor import TextProcessor

logger = logging.getLogger(__name__)

# A first-line indentation is at most this many average character widths.
MAX_INDENT_CHARACTERS = 8


def compute_markup(text_lines: Sequence[TextLine]) -> Optional[Markup]:
    """Most common (font full name, rounded font size) over the given lines, weighted by characters."""
    markups = Counter()
    for line in text_lines:
        if line is None or line.character_statistic is None:
            continue
        for font_face, count in line.character_statistic.font_face_frequencies:
            markups[Markup(font_face.font.full_name, round(font_face.size, 0))] += count
    if not markups:
        return None
    return markups.most_common(1)[0][0]


class ParagraphGrouper:
    """Paragraph grouping of the text lines of a page"""

    def __init__(self, config):
        self.config = config
        self.statistician = CharacterStatistician()

    def group_text_into_paragraphs(self, page: Page,
                                   document_line_statistic: Optional[TextLineStatistic] = None) -> List[Paragraph]:
        """Group the page's text lines (in reading order) into paragraphs."""
        lines = [line for line in page.text_lines or [] if line is not None and line.rectangle is not None]
        if not lines:
            page.paragraphs = []
            return []

        expected_pitch = self._expected_pitch(page.text_line_statistic, document_line_statistic)

        paragraphs = []
        current_paragraph = []
        current_markup = None

        for line in lines:
            if not current_paragraph:
                current_paragraph = [line]
                current_markup = compute_markup(current_paragraph)
                continue

            if self._should_start_new_paragraph(current_paragraph, line, current_markup, expected_pitch):
                paragraphs.append(self._create_paragraph(page.page_number, current_paragraph, len(paragraphs)))
                current_paragraph = [line]
            else:
                current_paragraph.append(line)
            current_markup = compute_markup(current_paragraph)

        if current_paragraph:
            paragraphs.append(self._create_paragraph(page.page_number, current_paragraph, len(paragraphs)))

        page.paragraphs = paragraphs
        logger.debug("Page %d: %d paragraphs", page.page_number, len(paragraphs))
        return paragraphs

    @staticmethod
    def _expected_pitch(page_statistic: Optional[TextLineStatistic],
                        document_statistic: Optional[TextLineStatistic]) -> Optional[float]:
        for statistic in (page_statistic, document_statistic):
            if statistic is not None and statistic.most_common_line_pitch:
                return statistic.most_common_line_pitch
        return None

    def _should_start_new_paragraph(self, current_paragraph: List[TextLine], line: TextLine,
                                    current_markup: Optional[Markup],
                                    expected_pitch: Optional[float]) -> bool:
        """Determine if the line should start a new paragraph."""
        prev_line = current_paragraph[-1]

        # RULE 1: typography changes
        if compute_markup([line]) != current_markup:
            return True

        # RULE 2: reading order jumped upwards (e.g. next column)
        pitch = reference_y(prev_line) - reference_y(line)
        if pitch <= 0:
            return True

        # RULE 3: vertical gap larger than regular line spacing
        if expected_pitch is None:
            expected_pitch = max(prev_line.rectangle.height, line.rectangle.height)
        if pitch > self.config.paragraph_gap_factor * expected_pitch:
            return True

        # RULE 4: horizontal alignment
        return not self._is_aligned(current_paragraph, line)

    def _is_aligned(self, current_paragraph: List[TextLine], line: TextLine) -> bool:
        tolerance = self.config.alignment_tolerance
        prev_rect = current_paragraph[-1].rectangle
        rect = line.rectangle

        # shared left edge
        if abs(rect.min_x - prev_rect.min_x) <= tolerance:
            return True

        # centered
        if abs(rect.center[0] - prev_rect.center[0]) <= tolerance:
            return True

        # second line of a paragraph with an indented first line
        if len(current_paragraph) == 1 and rect.min_x < prev_rect.min_x:
            avg_width = current_paragraph[0].character_statistic.average_width or tolerance
            return prev_rect.min_x - rect.min_x <= MAX_INDENT_CHARACTERS * avg_width

        return False

    def _create_paragraph(self, page_number: int, text_lines: List[TextLine], index: int) -> Paragraph:
        """Create a Paragraph from grouped text lines."""
        rectangle = Rectangle.from_elements(text_lines)
        paragraph = Paragraph(
            text_lines=text_lines,
            position=Position(page_number, rectangle),
            character_statistic=self.statistician.aggregate(line.character_statistic for line in text_lines),
            markup=compute_markup(text_lines),
            text=self._combine_text(text_lines),
            index=index,
        )
        paragraph.line_spacing = calculate_line_spacing(paragraph)
        paragraph.alignment = determine_alignment(paragraph, self.config.alignment_tolerance)
        return paragraph

    @staticmethod
    def _combine_text(text_lines: List[TextLine]) -> str:
        texts = []
        hyphenated = []
        for line in text_lines:
            texts.append(line.text or ''.join(c.text for c in line.characters))
            hyphenated.append(bool(line.words) and line.words[-1].is_hyphenated)
        return TextProcessor.join_lines(texts, hyphenated)


def calculate_line_spacing(paragraph: Paragraph) -> float:
    """Calculate average whitespace between consecutive lines of the paragraph."""
    if paragraph is None or len(paragraph.text_lines) < 2:
        return 0.0

    spacings = []
    for prev_line, line in zip(paragraph.text_lines, paragraph.text_lines[1:]):
        spacing = prev_line.rectangle.min_y - line.rectangle.max_y
        if spacing >= 0:
            spacings.append(spacing)

    return sum(spacings) / len(spacings) if spacings else 0.0


def determine_alignment(paragraph: Paragraph, tolerance: float = 5.0) -> str:
    """Determine text alignment (left, right, centered, justified, irregular)."""
    if paragraph is None or not paragraph.text_lines:
        return 'unknown'

    lines = paragraph.text_lines
    if len(lines) > 2:
        # the last line of a justified paragraph is usually short
        lines = lines[:-1]

    left_margins = [line.rectangle.min_x for line in lines]
    right_margins = [line.rectangle.max_x for line in lines]
    centers = [line.rectangle.center[0] for line in lines]

    left_variance = max(left_margins) - min(left_margins)
    right_variance = max(right_margins) - min(right_margins)
    center_variance = max(centers) - min(centers)

    if left_variance <= tolerance and right_variance <= tolerance:
        return 'justified'
    elif left_variance <= tolerance:
        return 'left'
    elif right_variance <= tolerance:
        return 'right'
    elif center_variance <= tolerance:
        return 'centered'
    else:
        return 'irregular'
