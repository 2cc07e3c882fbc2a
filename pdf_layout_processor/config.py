"""Configuration of the layout processing pipeline."""

import os
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import FrozenSet, Optional

from dotenv import load_dotenv

from .models.enums import HorizontalSweepDirection, VerticalSweepDirection
from .utils import lexicon

ENV_PREFIX = "PDF_LAYOUT_"


# ----------------------------
# Config
# ----------------------------

@dataclass(frozen=True)
class LayoutConfig:
    # cut engine
    min_vertical_gap: float = 1.0
    min_horizontal_gap: float = 1.0
    vertical_sweep: VerticalSweepDirection = VerticalSweepDirection.LEFT_TO_RIGHT
    horizontal_sweep: HorizontalSweepDirection = HorizontalSweepDirection.TOP_TO_BOTTOM
    vertical_first: bool = True

    # text area segmentation (lane size = factor x average character size)
    segment_text_areas: bool = True
    area_vertical_lane_factor: float = 2.5
    area_horizontal_lane_factor: float = 1.2

    # paragraph grouping
    paragraph_gap_factor: float = 1.5
    alignment_tolerance: float = 5.0

    # header/footer and heading detection
    header_footer_majority: float = 0.75
    max_header_footer_lines: int = 3
    max_heading_lines: int = 3

    # vocabularies
    stop_words: FrozenSet[str] = field(default=lexicon.STOP_WORDS, repr=False)
    section_headings: FrozenSet[str] = field(default=lexicon.SECTION_HEADINGS, repr=False)
    abstract_headings: FrozenSet[str] = field(default=lexicon.ABSTRACT_HEADINGS, repr=False)
    references_headings: FrozenSet[str] = field(default=lexicon.REFERENCES_HEADINGS, repr=False)

    # runtime
    workers: int = 1
    dpi: int = 150
    log_level: str = "WARNING"

    def with_overrides(self, **changes) -> "LayoutConfig":
        return replace(self, **{k: v for k, v in changes.items() if v is not None})

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> "LayoutConfig":
        """Build a config from PDF_LAYOUT_* environment variables (and an optional .env file)."""
        load_dotenv(env_file)
        values = {}
        for f in fields(cls):
            raw = os.getenv(ENV_PREFIX + f.name.upper())
            default = getattr(cls, f.name)
            if raw is None or isinstance(default, frozenset):
                continue
            values[f.name] = _parse_value(raw, default)

        vocabulary_files = {
            'stop_words': 'STOP_WORDS_FILE',
            'section_headings': 'SECTION_HEADINGS_FILE',
            'abstract_headings': 'ABSTRACT_HEADINGS_FILE',
            'references_headings': 'REFERENCES_HEADINGS_FILE',
        }
        for name, env_name in vocabulary_files.items():
            path = os.getenv(ENV_PREFIX + env_name)
            if path:
                values[name] = load_vocabulary(path)

        return cls(**values)


def load_vocabulary(path: str) -> FrozenSet[str]:
    """Read a vocabulary file: one entry per line, '#' starts a comment."""
    entries = set()
    with open(Path(path), 'r', encoding='utf-8') as f:
        for line in f:
            entry = line.split('#', 1)[0].strip().lower()
            if entry:
                entries.add(entry)
    return frozenset(entries)


def _parse_value(raw: str, default):
    raw = raw.strip()
    if isinstance(default, bool):
        return raw.lower() in ('1', 'true', 'yes', 'on')
    if isinstance(default, VerticalSweepDirection):
        return VerticalSweepDirection(raw.lower())
    if isinstance(default, HorizontalSweepDirection):
        return HorizontalSweepDirection(raw.lower())
    if isinstance(default, int):
        return int(raw)
    if isinstance(default, float):
        return float(raw)
    return raw
