"""Statistics aggregation over characters and text lines."""

from collections import Counter
from typing import Iterable, Optional, Sequence

from ..models.data_structures import CharacterStatistic, TextLineStatistic
from ..models.geometry import get_rectangle


def _most_common(counter: Counter):
    """Most common key; ties go to the key encountered first."""
    if not counter:
        return None
    return counter.most_common(1)[0][0]


class CharacterStatistician:
    """Compute and merge character statistics"""

    def compute(self, characters: Optional[Iterable]) -> CharacterStatistic:
        """Compute the statistic of the given characters in a single pass.

        Characters without a rectangle are skipped. An empty (or None) input
        yields a statistic with undefined fields.
        """
        if characters is None:
            return CharacterStatistic()

        font_faces = Counter()
        colors = Counter()
        num = 0
        num_sized = 0
        font_size_sum = 0.0
        width_sum = 0.0
        height_sum = 0.0
        min_x = min_y = float('inf')
        max_x = max_y = float('-inf')

        for character in characters:
            rect = get_rectangle(character)
            if rect is None:
                continue
            num += 1
            font_face = getattr(character, 'font_face', None)
            if font_face is not None:
                font_faces[font_face] += 1
                num_sized += 1
                font_size_sum += font_face.size
            color = getattr(character, 'color', None)
            if color is not None:
                colors[color] += 1
            width_sum += rect.width
            height_sum += rect.height
            min_x = min(min_x, rect.min_x)
            min_y = min(min_y, rect.min_y)
            max_x = max(max_x, rect.max_x)
            max_y = max(max_y, rect.max_y)

        if num == 0:
            return CharacterStatistic()

        return CharacterStatistic(
            num_characters=num,
            most_common_font_face=_most_common(font_faces),
            most_common_color=_most_common(colors),
            average_font_size=font_size_sum / num_sized if num_sized else None,
            average_width=width_sum / num,
            average_height=height_sum / num,
            smallest_min_x=min_x,
            smallest_min_y=min_y,
            largest_max_x=max_x,
            largest_max_y=max_y,
            font_face_frequencies=tuple(font_faces.items()),
            color_frequencies=tuple(colors.items()),
            num_sized_characters=num_sized,
        )

    def aggregate(self, statistics: Optional[Iterable[Optional[CharacterStatistic]]]) -> CharacterStatistic:
        """Merge already computed statistics without revisiting their characters."""
        if statistics is None:
            return CharacterStatistic()

        font_faces = Counter()
        colors = Counter()
        num = 0
        num_sized = 0
        font_size_sum = 0.0
        width_sum = 0.0
        height_sum = 0.0
        min_x = min_y = float('inf')
        max_x = max_y = float('-inf')

        for stat in statistics:
            if stat is None or stat.is_empty:
                continue
            num += stat.num_characters
            for font_face, count in stat.font_face_frequencies:
                font_faces[font_face] += count
            for color, count in stat.color_frequencies:
                colors[color] += count
            if stat.average_font_size is not None:
                num_sized += stat.num_sized_characters
                font_size_sum += stat.average_font_size * stat.num_sized_characters
            width_sum += stat.average_width * stat.num_characters
            height_sum += stat.average_height * stat.num_characters
            min_x = min(min_x, stat.smallest_min_x)
            min_y = min(min_y, stat.smallest_min_y)
            max_x = max(max_x, stat.largest_max_x)
            max_y = max(max_y, stat.largest_max_y)

        if num == 0:
            return CharacterStatistic()

        return CharacterStatistic(
            num_characters=num,
            most_common_font_face=_most_common(font_faces),
            most_common_color=_most_common(colors),
            average_font_size=font_size_sum / num_sized if num_sized else None,
            average_width=width_sum / num,
            average_height=height_sum / num,
            smallest_min_x=min_x,
            smallest_min_y=min_y,
            largest_max_x=max_x,
            largest_max_y=max_y,
            font_face_frequencies=tuple(font_faces.items()),
            color_frequencies=tuple(colors.items()),
            num_sized_characters=num_sized,
        )


class TextLineStatistician:
    """Compute and merge text line statistics"""

    def compute(self, lines: Optional[Sequence]) -> TextLineStatistic:
        """Compute line height and line pitch statistics for lines in reading order."""
        if not lines:
            return TextLineStatistic()

        heights = Counter()
        pitches = Counter()
        height_sum = 0.0
        num = 0
        min_x = float('inf')
        max_x = float('-inf')
        prev = None

        for line in lines:
            rect = get_rectangle(line)
            if rect is None:
                continue
            num += 1
            heights[rect.height] += 1
            height_sum += rect.height
            min_x = min(min_x, rect.min_x)
            max_x = max(max_x, rect.max_x)
            if prev is not None:
                pitch = round(reference_y(prev) - reference_y(line), 1)
                if pitch > 0:
                    pitches[pitch] += 1
            prev = line

        if num == 0:
            return TextLineStatistic()

        return TextLineStatistic(
            num_lines=num,
            most_common_line_height=_most_common(heights),
            average_line_height=height_sum / num,
            most_common_line_pitch=_most_common(pitches),
            smallest_min_x=min_x,
            largest_max_x=max_x,
            height_frequencies=tuple(heights.items()),
            pitch_frequencies=tuple(pitches.items()),
        )

    def aggregate(self, statistics: Optional[Iterable[Optional[TextLineStatistic]]]) -> TextLineStatistic:
        """Merge per-page line statistics into a document statistic."""
        if statistics is None:
            return TextLineStatistic()

        heights = Counter()
        pitches = Counter()
        height_sum = 0.0
        num = 0
        min_x = float('inf')
        max_x = float('-inf')

        for stat in statistics:
            if stat is None or stat.num_lines == 0:
                continue
            num += stat.num_lines
            height_sum += stat.average_line_height * stat.num_lines
            for height, count in stat.height_frequencies:
                heights[height] += count
            for pitch, count in stat.pitch_frequencies:
                pitches[pitch] += count
            min_x = min(min_x, stat.smallest_min_x)
            max_x = max(max_x, stat.largest_max_x)

        if num == 0:
            return TextLineStatistic()

        return TextLineStatistic(
            num_lines=num,
            most_common_line_height=_most_common(heights),
            average_line_height=height_sum / num,
            most_common_line_pitch=_most_common(pitches),
            smallest_min_x=min_x,
            largest_max_x=max_x,
            height_frequencies=tuple(heights.items()),
            pitch_frequencies=tuple(pitches.items()),
        )


def reference_y(line) -> float:
    """Baseline Y of a line, falling back to the bottom of its rectangle."""
    baseline = getattr(line, 'baseline', None)
    if baseline is not None:
        return baseline.start_y
    return get_rectangle(line).min_y