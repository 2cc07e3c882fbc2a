"""Tokenization of text lines into words."""

import logging
from typing import List, Optional, Sequence

from ..models.data_structures import Document, Page, TextLine, Word
from ..models.geometry import Position, Rectangle
from ..utils.comparators import min_x_key
from ..utils.lexicon import is_hyphen
from .statistician import CharacterStatistician
from .xycut import NO_CUT, XYCut

logger = logging.getLogger(__name__)
detection_logger = logging.getLogger("pdf_layout_processor.word-detection")


class WordScorer:
    """Scores vertical cuts only: the horizontal gap between two halves"""

    def __init__(self, statistician: CharacterStatistician, min_width: float = 1.0):
        self.statistician = statistician
        self.min_width = min_width

    def score_vertical(self, left: List, right: List) -> float:
        left_stats = self.statistician.compute(left)
        right_stats = self.statistician.compute(right)
        if left_stats.is_empty or right_stats.is_empty:
            return NO_CUT
        width = right_stats.smallest_min_x - left_stats.largest_max_x
        # Narrower gaps are kerning or letter spacing.
        if width < self.min_width:
            return NO_CUT
        return width

    def score_horizontal(self, upper: List, lower: List) -> float:
        return NO_CUT


class WordTokenizer:
    """Split the characters of each text line into words"""

    def __init__(self, config):
        self.config = config
        self.statistician = CharacterStatistician()
        scorer = WordScorer(self.statistician, min_width=config.min_vertical_gap)
        self.cutter = XYCut.from_config(scorer, config)

    def tokenize(self, document: Optional[Document]) -> None:
        if document is None:
            return
        for page in document.pages:
            if page is None:
                continue
            self.tokenize_page(page)

    def tokenize_page(self, page: Page) -> None:
        for line in page.text_lines or []:
            if line is None:
                continue
            self.tokenize_line(line)

    def tokenize_line(self, line: TextLine) -> List[Word]:
        """Set ``line.words`` and ``line.text`` from the line's characters."""
        leaves = self.cutter.cut(line.characters)
        words = []
        for i, leaf in enumerate(leaves):
            is_last = i == len(leaves) - 1
            word = self.create_word(line, leaf, check_hyphenation=is_last)
            if word is None:
                continue
            words.append(word)
            detection_logger.debug("page %d line %d word %d: %r%s", line.page_number, line.index,
                                   len(words) - 1, word.text, " (hyphenated)" if word.is_hyphenated else "")

        line.words = words
        line.text = ' '.join(word.text for word in words)
        return words

    def create_word(self, line: TextLine, characters: Sequence,
                    check_hyphenation: bool = False) -> Optional[Word]:
        if not characters:
            return None
        ordered = sorted(characters, key=min_x_key)
        text = ''.join(c.text for c in ordered)
        # Only the last word of a line can be hyphenated.
        is_hyphenated = check_hyphenation and len(ordered) >= 2 and is_hyphen(ordered[-1].text)
        return Word(
            characters=ordered,
            text=text,
            positions=[Position(line.page_number, Rectangle.from_elements(ordered))],
            character_statistic=self.statistician.compute(ordered),
            is_hyphenated=is_hyphenated,
            line_index=line.index,
        )
