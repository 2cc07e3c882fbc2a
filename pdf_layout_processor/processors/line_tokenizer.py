"""Tokenization of page characters into text lines."""

import logging
from collections import Counter
from typing import List, Optional, Sequence

from ..models.data_structures import Document, Page, TextLine
from ..models.geometry import Line, Position, Rectangle, get_rectangle
from ..utils.comparators import min_x_key
from ..utils.lexicon import is_baseline_character
from .statistician import CharacterStatistician, TextLineStatistician
from .xycut import NO_CUT, XYCut

logger = logging.getLogger(__name__)
detection_logger = logging.getLogger("pdf_layout_processor.line-detection")


class TextLineScorer:
    """Scores horizontal cuts only: the vertical gap between two halves"""

    def __init__(self, statistician: CharacterStatistician):
        self.statistician = statistician

    def score_vertical(self, left: List, right: List) -> float:
        return NO_CUT

    def score_horizontal(self, upper: List, lower: List) -> float:
        upper_stats = self.statistician.compute(upper)
        lower_stats = self.statistician.compute(lower)
        if upper_stats.is_empty or lower_stats.is_empty:
            return NO_CUT
        return upper_stats.smallest_min_y - lower_stats.largest_max_y


class LineTokenizer:
    """Group the characters of each text area into text lines"""

    def __init__(self, config):
        self.config = config
        self.statistician = CharacterStatistician()
        self.line_statistician = TextLineStatistician()
        self.cutter = XYCut.from_config(TextLineScorer(self.statistician), config)

    def tokenize(self, document: Optional[Document]) -> None:
        """Tokenize all pages and compute page- and document-level line statistics."""
        if document is None:
            return
        for page in document.pages:
            if page is None:
                continue
            self.tokenize_page(page)
        self.update_document_statistics(document)

    def tokenize_page(self, page: Page) -> List[TextLine]:
        """Replace ``page.text_lines`` with the lines detected on the page."""
        if page.text_areas:
            groups = [area.characters for area in page.text_areas]
        else:
            groups = [[c for c in page.characters or [] if c is not None]]

        lines = []
        for characters in groups:
            for leaf in self.cutter.cut(characters):
                line = self.create_text_line(page.page_number, leaf)
                if line is None:
                    continue
                line.index = len(lines)
                lines.append(line)
                detection_logger.debug("page %d line %d: %r", page.page_number, line.index,
                                       ''.join(c.text for c in line.characters))

        page.text_lines = lines
        page.text_line_statistic = self.line_statistician.compute(lines)
        logger.debug("Page %d: %d text lines", page.page_number, len(lines))
        return lines

    def create_text_line(self, page_number: int, characters: Sequence) -> Optional[TextLine]:
        """Build a text line from the characters of one cut leaf."""
        if not characters:
            return None
        ordered = sorted(characters, key=min_x_key)
        rectangle = Rectangle.from_elements(ordered)
        return TextLine(
            characters=ordered,
            position=Position(page_number, rectangle),
            character_statistic=self.statistician.compute(ordered),
            baseline=compute_baseline(ordered),
        )

    def update_document_statistics(self, document: Document) -> None:
        pages = [page for page in document.pages if page is not None]
        document.text_line_statistic = self.line_statistician.aggregate(
            page.text_line_statistic for page in pages
        )
        document.character_statistic = self.statistician.aggregate(
            page.character_statistic for page in pages
        )


def compute_baseline(characters: Sequence) -> Optional[Line]:
    """Baseline of a line: the most common min Y of its baseline characters.

    The baseline spans from the smallest min X to the largest max X of the
    line. Lines without any baseline character have no baseline.
    """
    min_ys = Counter()
    for character in characters:
        rect = get_rectangle(character)
        if rect is None or not is_baseline_character(character.text):
            continue
        min_ys[rect.min_y] += 1
    if not min_ys:
        return None

    baseline_y = min_ys.most_common(1)[0][0]
    rectangle = Rectangle.from_elements(characters)
    return Line(rectangle.min_x, baseline_y, rectangle.max_x, baseline_y)
