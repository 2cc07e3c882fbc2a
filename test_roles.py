"""Tests for semantic role assignment."""

from pdf_layout_processor.config import LayoutConfig
from pdf_layout_processor.models.enums import ROLE_LABELS, SemanticRole
from pdf_layout_processor.output.visualizer import ROLE_COLORS
from pdf_layout_processor.processors.characterizer import DocumentCharacterizer
from pdf_layout_processor.processors.role_classifier import RoleClassifier

from conftest import make_document, make_paragraph


def _body(prefix, y):
    return make_paragraph([f"{prefix} body text one", f"{prefix} body text two", f"{prefix} body end"], y=y)


def _heading(text, y):
    return make_paragraph(text, y=y, size=12.0, font_name='Times-Bold')


def _classify(document, config=None):
    config = config or LayoutConfig()
    characteristics = DocumentCharacterizer.from_config(config).characterize(document)
    RoleClassifier(config).assign_roles(document, characteristics)
    return characteristics


def _paper():
    first_page = [
        make_paragraph("A Study of Layout", y=760, size=18.0),
        _heading("Abstract", 720),
        _body("abstract", 700),
        _heading("1 Introduction", 640),
        _body("intro", 620),
        _heading("2 Method", 560),
        _body("method", 540),
        _heading("References", 480),
        make_paragraph("[1] Some cited work", y=460),
    ]
    second_page = [_body("more references", 700)]
    return make_document([first_page, second_page])


def test_roles_of_a_paper():
    document = _paper()
    _classify(document)

    roles = [(p.text, p.role) for p in document.paragraphs]
    assert roles == [
        ("A Study of Layout", SemanticRole.TITLE),
        ("Abstract", SemanticRole.SECTION_HEADING),
        ("abstract body text one abstract body text two abstract body end", SemanticRole.ABSTRACT),
        ("1 Introduction", SemanticRole.SECTION_HEADING),
        ("intro body text one intro body text two intro body end", SemanticRole.BODY),
        ("2 Method", SemanticRole.SECTION_HEADING),
        ("method body text one method body text two method body end", SemanticRole.BODY),
        ("References", SemanticRole.SECTION_HEADING),
        ("[1] Some cited work", SemanticRole.REFERENCE),
        ("more references body text one more references body text two more references body end",
         SemanticRole.REFERENCE),
    ]


def test_every_paragraph_gets_exactly_one_role():
    document = _paper()
    _classify(document)
    assert all(isinstance(p.role, SemanticRole) for p in document.paragraphs)


def test_page_headers_and_footers():
    pages = [[make_paragraph("Journal of Layout", y=780),
              _body(f"page {n}", 700),
              make_paragraph(f"page {n}", y=40)] for n in range(1, 5)]
    document = make_document(pages)
    characteristics = _classify(document)

    assert characteristics.page_header_area is not None
    assert characteristics.page_footer_area is not None
    for page in document.pages:
        assert [p.role for p in page.paragraphs] == [
            SemanticRole.PAGE_HEADER, SemanticRole.BODY, SemanticRole.PAGE_FOOTER]


def test_no_title_without_larger_font():
    document = make_document([[_body("first", 700), _body("second", 600)]])
    _classify(document)
    assert SemanticRole.TITLE not in {p.role for p in document.paragraphs}


def test_small_print_is_other():
    document = make_document([[_body("first", 700), _body("second", 600),
                               make_paragraph(["a small", "print", "footnote"], y=500, size=7.0)]])
    _classify(document)
    assert document.paragraphs[-1].role is SemanticRole.OTHER


def test_headings_with_section_heading_markup():
    document = _paper()
    characteristics = _classify(document)
    classifier = RoleClassifier(LayoutConfig())

    assert classifier.is_section_heading(_heading("3 Experiments", 400), characteristics)
    assert not classifier.is_section_heading(make_paragraph("3 Experiments", y=400), characteristics)
    assert classifier.is_section_heading(make_paragraph("Bibliography", y=400), characteristics)


def test_missing_document():
    RoleClassifier(LayoutConfig()).assign_roles(None, DocumentCharacterizer().characterize(None))


def test_role_tables_cover_every_role():
    assert set(ROLE_LABELS) == set(SemanticRole)
    assert set(ROLE_COLORS) == set(SemanticRole)
    assert len(set(ROLE_LABELS.values())) == len(SemanticRole)
    assert SemanticRole.from_name("page-header") is SemanticRole.PAGE_HEADER
    assert SemanticRole.from_name("Section_Heading") is SemanticRole.SECTION_HEADING
    assert SemanticRole.from_name("heading") is SemanticRole.SECTION_HEADING
    assert all(SemanticRole.from_name(label) is role for role, label in ROLE_LABELS.items())


def test_heading_line_limit():
    document = _paper()
    characteristics = _classify(document)
    three_lines = make_paragraph(["Experiments on", "scanned and", "born digital papers"], y=400,
                                 size=12.0, font_name='Times-Bold')

    assert RoleClassifier(LayoutConfig()).is_section_heading(three_lines, characteristics)
    assert not RoleClassifier(LayoutConfig(max_heading_lines=2)).is_section_heading(three_lines, characteristics)


def test_missing_pages_and_statistics():
    document = _paper()
    document.pages.insert(0, None)
    document.character_statistic = None
    _classify(document)

    assert document.paragraphs[0].role is SemanticRole.TITLE
    assert all(isinstance(p.role, SemanticRole) for p in document.paragraphs)
