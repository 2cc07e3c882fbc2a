"""Recursive X-Y cut segmentation of positioned elements."""

from typing import Callable, List, Optional, Protocol, Sequence, Tuple

from ..models.enums import HorizontalSweepDirection, VerticalSweepDirection
from ..models.geometry import Rectangle, get_rectangle
from ..utils.comparators import max_x_desc_key, max_y_desc_key, min_x_key, min_y_key

# Score returned by a scorer to reject a candidate cut.
NO_CUT = -1.0


class CutScorer(Protocol):
    """Scores a candidate two-way split; a score <= 0 means "no cut"."""

    def score_vertical(self, left: List, right: List) -> float:
        ...

    def score_horizontal(self, upper: List, lower: List) -> float:
        ...


class XYCut:
    """Divide-and-conquer segmenter splitting element sets along whitespace gaps.

    The engine only enumerates candidate gaps and applies them; whether a gap
    is a valid cut, and how good it is, is decided by the scorer. Among valid
    candidates of an axis the best score wins, equal scores keep the earliest
    candidate in sweep order. The second axis is only tried if the first one
    has no valid cut.
    """

    def __init__(self, scorer: CutScorer,
                 min_vertical_gap: float = 1.0,
                 min_horizontal_gap: float = 1.0,
                 vertical_sweep: VerticalSweepDirection = VerticalSweepDirection.LEFT_TO_RIGHT,
                 horizontal_sweep: HorizontalSweepDirection = HorizontalSweepDirection.TOP_TO_BOTTOM,
                 vertical_first: bool = True):
        self.scorer = scorer
        self.min_vertical_gap = min_vertical_gap
        self.min_horizontal_gap = min_horizontal_gap
        self.vertical_sweep = vertical_sweep
        self.horizontal_sweep = horizontal_sweep
        self.vertical_first = vertical_first

    @classmethod
    def from_config(cls, scorer: CutScorer, config) -> "XYCut":
        return cls(
            scorer,
            min_vertical_gap=config.min_vertical_gap,
            min_horizontal_gap=config.min_horizontal_gap,
            vertical_sweep=config.vertical_sweep,
            horizontal_sweep=config.horizontal_sweep,
            vertical_first=config.vertical_first,
        )

    def cut(self, elements: Optional[Sequence]) -> List[List]:
        """Split the elements recursively; return the leaves in sweep order."""
        if not elements:
            return []

        result = []
        # Explicit stack instead of recursion; halves are pushed in reverse
        # so that leaves come out in sweep order.
        stack = [list(elements)]
        while stack:
            current = stack.pop()
            halves = self._split(current)
            if halves is None:
                result.append(current)
            else:
                stack.append(halves[1])
                stack.append(halves[0])
        return result

    def _split(self, elements: List) -> Optional[Tuple[List, List]]:
        if len(elements) <= 1:
            return None

        if self.vertical_first:
            axes = (self._cut_vertically, self._cut_horizontally)
        else:
            axes = (self._cut_horizontally, self._cut_vertically)

        for cut_axis in axes:
            halves = cut_axis(elements)
            if halves is not None:
                return halves
        return None

    def _cut_vertically(self, elements: List) -> Optional[Tuple[List, List]]:
        if self.vertical_sweep is VerticalSweepDirection.LEFT_TO_RIGHT:
            ordered = sorted(elements, key=min_x_key)
            return self._best_split(
                ordered,
                start_of=lambda r: r.min_x,
                reach_of=lambda r: r.max_x,
                score=self.scorer.score_vertical,
                min_gap=self.min_vertical_gap,
                flip=False,
            )
        ordered = sorted(elements, key=max_x_desc_key)
        return self._best_split(
            ordered,
            start_of=lambda r: -r.max_x,
            reach_of=lambda r: -r.min_x,
            score=self.scorer.score_vertical,
            min_gap=self.min_vertical_gap,
            flip=True,
        )

    def _cut_horizontally(self, elements: List) -> Optional[Tuple[List, List]]:
        if self.horizontal_sweep is HorizontalSweepDirection.TOP_TO_BOTTOM:
            ordered = sorted(elements, key=max_y_desc_key)
            return self._best_split(
                ordered,
                start_of=lambda r: -r.max_y,
                reach_of=lambda r: -r.min_y,
                score=self.scorer.score_horizontal,
                min_gap=self.min_horizontal_gap,
                flip=False,
            )
        ordered = sorted(elements, key=min_y_key)
        return self._best_split(
            ordered,
            start_of=lambda r: r.min_y,
            reach_of=lambda r: r.max_y,
            score=self.scorer.score_horizontal,
            min_gap=self.min_horizontal_gap,
            flip=True,
        )

    @staticmethod
    def _best_split(ordered: List,
                    start_of: Callable[[Rectangle], float],
                    reach_of: Callable[[Rectangle], float],
                    score: Callable[[List, List], float],
                    min_gap: float,
                    flip: bool) -> Optional[Tuple[List, List]]:
        """Find the best valid cut of elements sorted in sweep order.

        ``start_of`` and ``reach_of`` map a rectangle to its leading and
        trailing edge, both increasing along the sweep direction. A candidate
        lies between ``i - 1`` and ``i`` if element ``i`` starts beyond
        everything before it. Halves are handed to the scorer in geometric
        order (left/right, upper/lower); ``flip`` marks sweeps that run
        against it.
        """
        best_score = None
        best_index = -1
        reach = float('-inf')

        for i, element in enumerate(ordered):
            rect = get_rectangle(element)
            if rect is None:
                # Elements without geometry are sorted last and stay in the last half.
                break
            if i > 0 and start_of(rect) > reach:
                first, second = ordered[:i], ordered[i:]
                s = score(second, first) if flip else score(first, second)
                if s > 0 and s >= min_gap and (best_score is None or s > best_score):
                    best_score = s
                    best_index = i
            reach = max(reach, reach_of(rect))

        if best_index < 0:
            return None
        return ordered[:best_index], ordered[best_index:]
