"""Process-wide lexicons: character classes, heading vocabularies, stop words.

All collections are frozensets, built once at import time and never mutated.
"""

import unicodedata
from typing import FrozenSet

HYPHENS: FrozenSet[str] = frozenset({
    '-',       # hyphen-minus
    '\u00ad',  # soft hyphen
    '\u2010',  # hyphen
    '\u2011',  # non-breaking hyphen
    '\u2012',  # figure dash
    '\u2013',  # en dash
    '\u2212',  # minus sign
    '\ufe63',  # small hyphen-minus
    '\uff0d',  # fullwidth hyphen-minus
})

# Glyphs reaching below the baseline.
DESCENDERS: FrozenSet[str] = frozenset('gjpqyQ')

SECTION_HEADINGS: FrozenSet[str] = frozenset({
    'introduction',
    'relatedwork',
    'references',
    'acknowledgements',
    'acknowledgement',
    'acknowledgment',
    'acknowledgments',
    'referencesandnotes',
    'bibliography',
    'conclusion',
    'concludingremarks',
})

ABSTRACT_HEADINGS: FrozenSet[str] = frozenset({'abstract'})

REFERENCES_HEADINGS: FrozenSet[str] = frozenset({'reference', 'references', 'bibliography'})

STOP_WORDS: FrozenSet[str] = frozenset({
    'a', 'about', 'above', 'after', 'again', 'against', 'all', 'also', 'am', 'an',
    'and', 'any', 'are', 'as', 'at', 'be', 'because', 'been', 'before', 'being',
    'below', 'between', 'both', 'but', 'by', 'can', 'could', 'did', 'do', 'does',
    'doing', 'down', 'during', 'each', 'et', 'few', 'for', 'from', 'further',
    'had', 'has', 'have', 'having', 'he', 'her', 'here', 'hers', 'herself', 'him',
    'himself', 'his', 'how', 'i', 'if', 'in', 'into', 'is', 'it', 'its', 'itself',
    'may', 'me', 'might', 'more', 'most', 'must', 'my', 'myself', 'no', 'nor',
    'not', 'of', 'off', 'on', 'once', 'only', 'or', 'other', 'our', 'ours',
    'ourselves', 'out', 'over', 'own', 'same', 'she', 'should', 'so', 'some',
    'such', 'than', 'that', 'the', 'their', 'theirs', 'them', 'themselves',
    'then', 'there', 'these', 'they', 'this', 'those', 'through', 'to', 'too',
    'under', 'until', 'up', 'very', 'was', 'we', 'were', 'what', 'when', 'where',
    'which', 'while', 'who', 'whom', 'why', 'will', 'with', 'would', 'you',
    'your', 'yours', 'yourself', 'yourselves',
})


def is_hyphen(text: str) -> bool:
    """Return True if the given glyph text is a hyphen-class character."""
    return text in HYPHENS


def is_baseline_character(text: str) -> bool:
    """Return True if the glyph sits on the baseline.

    Only single letters and digits qualify; descenders, punctuation and
    combining diacritics are excluded.
    """
    if not text or len(text) != 1:
        return False
    if text in DESCENDERS:
        return False
    if unicodedata.combining(text):
        return False
    return text.isalnum()
