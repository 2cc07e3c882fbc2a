"""Shared factories for building pages, lines and paragraphs in tests."""

import pytest

from pdf_layout_processor.config import LayoutConfig
from pdf_layout_processor.models.data_structures import (
    Character, Color, Document, Font, FontFace, Page, Paragraph
)
from pdf_layout_processor.models.geometry import Position, Rectangle
from pdf_layout_processor.processors.line_tokenizer import LineTokenizer
from pdf_layout_processor.processors.paragraph_grouper import compute_markup
from pdf_layout_processor.processors.statistician import CharacterStatistician
from pdf_layout_processor.processors.word_tokenizer import WordTokenizer

CHAR_WIDTH = 5.0
CHAR_HEIGHT = 10.0
LINE_PITCH = 12.0


def make_chars(text, x=10.0, y=100.0, size=10.0, font_name='Times-Roman',
               width=CHAR_WIDTH, height=CHAR_HEIGHT):
    """Characters of a text laid out left to right; a space leaves a gap of one character."""
    font_face = FontFace(Font(font_name), size)
    chars = []
    for c in text:
        if c != ' ':
            chars.append(Character(c, Rectangle(x, y, x + width, y + height), font_face, Color(0, 0, 0)))
        x += width
    return chars


def make_line(text, x=10.0, y=100.0, page_number=1, index=0, **kwargs):
    """A tokenized text line (with words) built from laid out characters."""
    config = LayoutConfig()
    line = LineTokenizer(config).create_text_line(page_number, make_chars(text, x, y, **kwargs))
    line.index = index
    WordTokenizer(config).tokenize_line(line)
    return line


def make_paragraph(lines, x=10.0, y=100.0, page_number=1, pitch=LINE_PITCH, **kwargs):
    """A paragraph of the given line texts; ``y`` is the bottom of the first line."""
    if isinstance(lines, str):
        lines = [lines]
    text_lines = [make_line(text, x, y - i * pitch, page_number, index=i, **kwargs)
                  for i, text in enumerate(lines)]
    return Paragraph(
        text_lines=text_lines,
        position=Position(page_number, Rectangle.from_elements(text_lines)),
        character_statistic=CharacterStatistician().aggregate(line.character_statistic for line in text_lines),
        markup=compute_markup(text_lines),
        text=' '.join(line.text for line in text_lines),
    )


def make_document(pages_paragraphs, width=600.0, height=800.0):
    """A document whose pages hold the given paragraphs, with character statistics set."""
    statistician = CharacterStatistician()
    pages = []
    for number, paragraphs in enumerate(pages_paragraphs, start=1):
        for i, paragraph in enumerate(paragraphs):
            paragraph.index = i
        characters = [c for p in paragraphs for line in p.text_lines for c in line.characters]
        page = Page(page_number=number, width=width, height=height,
                    characters=characters, paragraphs=list(paragraphs))
        page.text_lines = [line for p in paragraphs for line in p.text_lines]
        page.character_statistic = statistician.compute(characters)
        pages.append(page)
    document = Document(pages=pages)
    document.character_statistic = statistician.aggregate(p.character_statistic for p in pages)
    return document


def make_page(lines, page_number=1, x=10.0, y=700.0, pitch=LINE_PITCH, **kwargs):
    """An undecoded page holding the characters of the given lines."""
    characters = []
    for i, text in enumerate(lines):
        characters.extend(make_chars(text, x, y - i * pitch, **kwargs))
    for i, c in enumerate(characters):
        c.index = i
    return Page(page_number=page_number, width=600.0, height=800.0, characters=characters)


@pytest.fixture
def config():
    return LayoutConfig()


@pytest.fixture
def factories():
    class Factories:
        chars = staticmethod(make_chars)
        line = staticmethod(make_line)
        paragraph = staticmethod(make_paragraph)
        document = staticmethod(make_document)
        page = staticmethod(make_page)
    return Factories
