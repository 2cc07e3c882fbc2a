"""Tests for paragraph grouping and line joining."""

from pdf_layout_processor.config import LayoutConfig
from pdf_layout_processor.core.main_processor import LayoutDocumentProcessor
from pdf_layout_processor.models.data_structures import Markup, Page
from pdf_layout_processor.processors.paragraph_grouper import (
    ParagraphGrouper, calculate_line_spacing, determine_alignment
)
from pdf_layout_processor.processors.text_processor import TextProcessor

from conftest import make_chars, make_line, make_page, make_paragraph


def _paragraphs(characters):
    page = Page(1, 600, 800, characters=characters)
    LayoutDocumentProcessor().process_pages([page])
    return page.paragraphs


def test_regularly_spaced_lines_form_one_paragraph():
    page = make_page(["a mathematical proof is", "a deductive argument", "for a statement"])
    paragraphs = _paragraphs(page.characters)

    assert len(paragraphs) == 1
    assert paragraphs[0].text == "a mathematical proof is a deductive argument for a statement"
    assert paragraphs[0].num_lines == 3
    assert paragraphs[0].line_spacing == 2.0
    assert paragraphs[0].markup == Markup('Times-Roman', 10.0)


def test_large_gap_starts_new_paragraph():
    first = make_page(["first paragraph", "continues here"], y=700)
    second = make_page(["second paragraph", "after the gap"], y=640)
    paragraphs = _paragraphs(first.characters + second.characters)

    assert [p.text for p in paragraphs] == [
        "first paragraph continues here",
        "second paragraph after the gap",
    ]
    assert [p.index for p in paragraphs] == [0, 1]


def test_markup_change_starts_new_paragraph():
    heading = make_chars("Results", y=700, size=14.0, font_name='Times-Bold')
    body = make_page(["body text one", "body text two"], y=688)
    paragraphs = _paragraphs(heading + body.characters)

    assert [p.text for p in paragraphs] == ["Results", "body text one body text two"]
    assert paragraphs[0].markup == Markup('Times-Bold', 14.0)
    assert str(paragraphs[0].markup) == "Times-Bold-14.0"


def test_hyphenated_word_is_merged_across_lines():
    page = make_page(["the infor-", "mation is key"])
    paragraphs = _paragraphs(page.characters)

    assert len(paragraphs) == 1
    assert paragraphs[0].text == "the information is key"


def test_hyphen_before_capitalized_line_is_kept():
    page = make_page(["the Kullback-", "Leibler divergence"])
    assert _paragraphs(page.characters)[0].text == "the Kullback-Leibler divergence"


def test_indented_first_line_stays_in_paragraph():
    page = make_page(["    Indented start of", "the paragraph text", "and its end"])
    paragraphs = _paragraphs(page.characters)

    assert len(paragraphs) == 1
    assert paragraphs[0].text == "Indented start of the paragraph text and its end"


def test_misaligned_line_starts_new_paragraph():
    page = Page(1, 600, 800)
    page.text_lines = [make_line("left block", x=10, y=700, index=0),
                       make_line("far right", x=100, y=688, index=1)]

    paragraphs = ParagraphGrouper(LayoutConfig()).group_text_into_paragraphs(page)

    assert [p.text for p in paragraphs] == ["left block", "far right"]


def test_page_without_lines():
    page = Page(1, 600, 800)
    assert ParagraphGrouper(LayoutConfig()).group_text_into_paragraphs(page) == []
    assert page.paragraphs == []


def test_calculate_line_spacing():
    assert calculate_line_spacing(make_paragraph(["one", "two", "three"])) == 2.0
    assert calculate_line_spacing(make_paragraph(["one"])) == 0.0
    assert calculate_line_spacing(None) == 0.0


def test_determine_alignment():
    justified = make_paragraph(["aaaa", "aaaa", "aa"])
    assert determine_alignment(justified) == 'justified'
    assert determine_alignment(make_paragraph(["aaaa", "aa"])) == 'left'

    paragraph = make_paragraph(["aaaaaaaa"])
    paragraph.text_lines = [make_line("aaaaaaaa", x=10, y=100), make_line("aa", x=40, y=88)]
    assert determine_alignment(paragraph) == 'right'
    paragraph.text_lines = [make_line("aaaaaaaa", x=10, y=100), make_line("aa", x=25, y=88)]
    assert determine_alignment(paragraph) == 'centered'
    paragraph.text_lines = [make_line("aaaaaaaa", x=10, y=100), make_line("aa", x=100, y=88)]
    assert determine_alignment(paragraph) == 'irregular'
    assert determine_alignment(None) == 'unknown'


def test_join_lines():
    assert TextProcessor.join_lines(["infor-", "mation"], [True, False]) == "information"
    assert TextProcessor.join_lines(["Kullback-", "Leibler"], [True, False]) == "Kullback-Leibler"
    assert TextProcessor.join_lines(["one", "", "two"], [False, False, False]) == "one two"
    assert TextProcessor.join_lines([], []) == ""


def test_normalize_for_lookup():
    assert TextProcessor.normalize_for_lookup("1. Related  Work:") == "relatedwork"
    assert TextProcessor.normalize_for_lookup("ABSTRACT") == "abstract"
    assert TextProcessor.normalize_for_lookup("") == ""
    assert TextProcessor.normalize_text("  many \n spaces ") == "many spaces"


def test_page_with_missing_lines():
    page = Page(1, 600, 800, characters=None)
    page.text_lines = None
    assert ParagraphGrouper(LayoutConfig()).group_text_into_paragraphs(page) == []
    assert page.paragraphs == []
