"""Text normalization utilities for vocabulary lookups and word counting."""

import re
import unicodedata
from typing import List


class TextProcessor:
    """Text processing utilities for layout output"""

    @staticmethod
    def normalize_text(text: str) -> str:
        """Normalize text for display: NFKC and collapsed whitespace"""
        if not text:
            return ""
        text = unicodedata.normalize('NFKC', text)
        text = re.sub(r'\s+', ' ', text.strip())
        return text

    @staticmethod
    def normalize_for_lookup(text: str) -> str:
        """Normalize text for vocabulary lookups.

        Applies NFKC, then removes digits, whitespace and punctuation and
        lowercases the rest, so that "1. Related  Work:" becomes "relatedwork".
        """
        if not text:
            return ""
        text = unicodedata.normalize('NFKC', text)
        text = re.sub(r'\d', '', text)
        text = re.sub(r'\s', '', text)
        text = ''.join(c for c in text if not unicodedata.category(c).startswith('P'))
        return text.lower()

    @staticmethod
    def join_lines(lines: List[str], hyphenated: List[bool]) -> str:
        """Join line texts into paragraph text, merging hyphenated words.

        A line ending in a hyphenated word followed by a line starting in
        lowercase is merged without the hyphen and without a space. Other
        hyphenated line ends keep their hyphen but get no space either.
        """
        parts = []
        for i, text in enumerate(lines):
            text = text.strip()
            if not text:
                continue
            if parts:
                prev_hyphenated = hyphenated[i - 1] if i > 0 else False
                if prev_hyphenated and text[0].islower():
                    parts[-1] = parts[-1][:-1]
                elif not prev_hyphenated:
                    text = ' ' + text
            parts.append(text)

        result = ''.join(parts)
        return re.sub(r'\s+', ' ', result).strip()
