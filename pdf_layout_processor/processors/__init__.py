"""Layout processing modules."""

from .xycut import XYCut, CutScorer, NO_CUT
from .statistician import CharacterStatistician, TextLineStatistician
from .area_segmenter import TextAreaSegmenter
from .line_tokenizer import LineTokenizer
from .word_tokenizer import WordTokenizer
from .text_processor import TextProcessor
from .paragraph_grouper import ParagraphGrouper
from .characterizer import DocumentCharacterizer, characterize
from .role_classifier import RoleClassifier

__all__ = [
    "XYCut", "CutScorer", "NO_CUT",
    "CharacterStatistician", "TextLineStatistician",
    "TextAreaSegmenter", "LineTokenizer", "WordTokenizer",
    "TextProcessor", "ParagraphGrouper",
    "DocumentCharacterizer", "characterize", "RoleClassifier",
]
