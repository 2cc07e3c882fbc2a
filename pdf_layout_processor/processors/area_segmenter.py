"""Segmentation of pages into text areas (columns and blocks)."""

import logging
from typing import List, Optional

from ..models.data_structures import CharacterStatistic, Document, Page, TextArea
from ..models.geometry import Position, Rectangle
from .statistician import CharacterStatistician
from .xycut import NO_CUT, XYCut

logger = logging.getLogger(__name__)


class TextAreaScorer:
    """Accepts a cut if the lane between the halves is wide (or high) enough.

    Lane sizes scale with the larger of the document's and the page's average
    character width/height, so that word gaps never split an area vertically
    and regular line spacing never splits it horizontally.
    """

    def __init__(self, statistician: CharacterStatistician,
                 lane_width: float, lane_height: float):
        self.statistician = statistician
        self.lane_width = lane_width
        self.lane_height = lane_height

    def score_vertical(self, left: List, right: List) -> float:
        left_stats = self.statistician.compute(left)
        right_stats = self.statistician.compute(right)
        width = right_stats.smallest_min_x - left_stats.largest_max_x
        if width < self.lane_width:
            return NO_CUT
        return width

    def score_horizontal(self, upper: List, lower: List) -> float:
        upper_stats = self.statistician.compute(upper)
        lower_stats = self.statistician.compute(lower)
        height = upper_stats.smallest_min_y - lower_stats.largest_max_y
        if height < self.lane_height:
            return NO_CUT
        return height


class TextAreaSegmenter:
    """Split each page into text areas before line tokenization"""

    def __init__(self, config):
        self.config = config
        self.statistician = CharacterStatistician()

    def compute_statistics(self, document: Optional[Document]) -> None:
        """Compute character statistics per page and for the whole document."""
        if document is None:
            return
        for page in document.pages:
            if page is None:
                continue
            page.character_statistic = self.statistician.compute(page.characters)
        document.character_statistic = self.statistician.aggregate(
            page.character_statistic for page in document.pages if page is not None
        )

    def segment(self, document: Optional[Document]) -> None:
        """Segment all pages of the given document into text areas."""
        if document is None:
            return
        self.compute_statistics(document)
        for page in document.pages:
            if page is None:
                continue
            page.text_areas = self.segment_page(page, document.character_statistic)

    def segment_page(self, page: Page,
                     document_statistic: Optional[CharacterStatistic] = None) -> List[TextArea]:
        """Return the text areas of a page in reading order."""
        characters = [c for c in page.characters or [] if c is not None]
        if not characters:
            return []

        if not self.config.segment_text_areas:
            return [self._create_area(page, characters)]

        page_statistic = page.character_statistic or self.statistician.compute(characters)
        document_statistic = document_statistic or page_statistic
        avg_width = _largest(page_statistic.average_width, document_statistic.average_width)
        avg_height = _largest(page_statistic.average_height, document_statistic.average_height)

        scorer = TextAreaScorer(
            self.statistician,
            lane_width=self.config.area_vertical_lane_factor * avg_width,
            lane_height=self.config.area_horizontal_lane_factor * avg_height,
        )
        cutter = XYCut.from_config(scorer, self.config)
        areas = [self._create_area(page, chars) for chars in cutter.cut(characters)]
        logger.debug("Page %d: %d text areas", page.page_number, len(areas))
        return areas

    @staticmethod
    def _create_area(page: Page, characters: List) -> TextArea:
        return TextArea(characters, Position(page.page_number, Rectangle.from_elements(characters)))


def _largest(*values: Optional[float]) -> float:
    return max((v for v in values if v is not None), default=0.0)
