"""Tests for text, JSON and summary output."""

import json

import pytest

from pdf_layout_processor.config import LayoutConfig
from pdf_layout_processor.exceptions import SerializationError
from pdf_layout_processor.models.enums import SemanticRole, TextUnit
from pdf_layout_processor.output import JSONGenerator, SummaryGenerator, TextGenerator, iter_units
from pdf_layout_processor.processors.characterizer import DocumentCharacterizer
from pdf_layout_processor.processors.role_classifier import RoleClassifier

from conftest import make_document, make_paragraph

INTRO = ["deep models read", "the page layout", "line by line"]
SECOND = ["the second page", "goes on here", "until the end"]


@pytest.fixture
def processed():
    document = make_document([
        [make_paragraph("1 Introduction", y=700, size=12.0, font_name='Times-Bold'),
         make_paragraph(INTRO, y=680)],
        [make_paragraph(SECOND, y=700)],
    ])
    document.path = "/tmp/paper.pdf"
    characteristics = DocumentCharacterizer().characterize(document)
    RoleClassifier(LayoutConfig()).assign_roles(document, characteristics)
    return document, characteristics


def test_roles_of_fixture(processed):
    document, _ = processed
    assert [p.role for p in document.paragraphs] == [
        SemanticRole.SECTION_HEADING, SemanticRole.BODY, SemanticRole.BODY]


def test_paragraph_text(processed):
    document, _ = processed
    text = TextGenerator.serialize(document)
    assert text == "1 Introduction\n\n" + ' '.join(INTRO) + "\n\n" + ' '.join(SECOND)


def test_text_with_control_characters(processed):
    document, _ = processed
    text = TextGenerator.serialize(document, with_control_characters=True)
    assert text == "\x011 Introduction\n\n" + ' '.join(INTRO) + "\n\n\f" + ' '.join(SECOND)

    lines = TextGenerator.serialize(document, TextUnit.LINE, with_control_characters=True).split('\n')
    assert lines == ["\x011 Introduction"] + INTRO + ["\f" + SECOND[0]] + SECOND[1:]


def test_word_text_and_role_filter(processed):
    document, _ = processed
    words = TextGenerator.serialize(document, TextUnit.WORD, roles=[SemanticRole.SECTION_HEADING])
    assert words == "1\nIntroduction"
    assert TextGenerator.serialize(document, roles=[SemanticRole.TITLE]) == ""
    assert TextGenerator.serialize(None) == ""


def test_iter_units(processed):
    document, _ = processed
    characters = list(iter_units(document, TextUnit.CHARACTER, roles=[SemanticRole.SECTION_HEADING]))
    assert ''.join(c.text for _, c in characters) == "1Introduction"
    assert all(p.role is SemanticRole.SECTION_HEADING for p, _ in characters)
    assert len(list(iter_units(document, TextUnit.LINE))) == 7


def test_json_paragraphs(processed):
    document, characteristics = processed
    data = JSONGenerator.serialize(document, characteristics)

    assert set(data) == {'metadata', 'paragraphs'}
    assert data['metadata']['source_pdf'] == "paper.pdf"
    assert data['metadata']['num_pages'] == 2
    assert data['metadata']['characteristics']['section_heading_markup'] == "Times-Bold-12.0"

    heading = data['paragraphs'][0]
    assert heading['role'] == 'heading'
    assert heading['text'] == "1 Introduction"
    assert heading['markup'] == "Times-Bold-12.0"
    assert heading['positions'] == [{'page': 1, 'min_x': 10.0, 'min_y': 700.0, 'max_x': 80.0, 'max_y': 710.0}]
    assert [p['role'] for p in data['paragraphs']] == ['heading', 'body', 'body']
    assert data['paragraphs'][2]['positions'][0]['page'] == 2


def test_json_words_lines_and_characters(processed):
    document, characteristics = processed

    words = JSONGenerator.serialize(document, characteristics, TextUnit.WORD)['words']
    assert words[0]['text'] == "1"
    assert words[0]['hyphenated'] is False
    assert words[0]['positions'] == [{'page': 1, 'min_x': 10.0, 'min_y': 700.0, 'max_x': 15.0, 'max_y': 710.0}]

    lines = JSONGenerator.serialize(document, characteristics, TextUnit.LINE)['lines']
    assert lines[1]['text'] == INTRO[0]
    assert lines[1]['baseline'] == [10.0, 680.0, 90.0, 680.0]

    characters = JSONGenerator.serialize(document, characteristics, TextUnit.CHARACTER)['characters']
    assert characters[0] == {
        'role': 'heading',
        'text': '1',
        'positions': [{'page': 1, 'min_x': 10.0, 'min_y': 700.0, 'max_x': 15.0, 'max_y': 710.0}],
        'font': 'Times-Bold',
        'font_size': 12.0,
        'color': [0, 0, 0],
    }


def test_to_json_and_save(processed, tmp_path):
    document, characteristics = processed
    data = json.loads(JSONGenerator.to_json(document, characteristics, TextUnit.WORD))
    assert len(data['words']) == len([w for p in document.paragraphs for w in p.words])

    path = JSONGenerator.save_json(data, str(tmp_path / "out.json"))
    with open(path, encoding='utf-8') as f:
        assert json.load(f) == data

    text_path = TextGenerator.save_text("hello", str(tmp_path / "out.txt"))
    with open(text_path, encoding='utf-8') as f:
        assert f.read() == "hello"


def test_save_errors(tmp_path):
    with pytest.raises(SerializationError):
        JSONGenerator.save_json({}, str(tmp_path))
    with pytest.raises(SerializationError):
        TextGenerator.save_text("x", str(tmp_path / "missing" / "out.txt"))


def test_summary(processed):
    document, characteristics = processed
    summary = SummaryGenerator.create_document_summary(document, characteristics, num_top_words=3)

    assert summary['total_pages'] == 2
    assert summary['document_title'] is None
    assert summary['all_headings'] == [{'text': "1 Introduction", 'page_number': 1}]
    assert summary['role_distribution']['heading'] == 1
    assert summary['role_distribution']['body'] == 2
    assert summary['role_distribution']['title'] == 0
    assert summary['paragraph_summary']['total_paragraphs'] == 3
    assert summary['paragraph_summary']['total_lines'] == 7
    assert summary['characteristics']['section_heading_markup'] == "Times-Bold-12.0"
    assert len(summary['characteristics']['most_common_words']) == 3


def test_summary_of_missing_document():
    summary = SummaryGenerator.create_document_summary(None)
    assert summary['total_pages'] == 0
    assert summary['paragraph_summary']['total_paragraphs'] == 0
