"""Main PDF layout processor using modular components."""

import logging
import os
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional

from ..config import LayoutConfig
from ..exceptions import DocumentDecodeError
from ..models.data_structures import CharacterStatistic, Document, DocumentCharacteristics, Page
from ..models.enums import SemanticRole, SerializationFormat, TextUnit
from ..processors.area_segmenter import TextAreaSegmenter
from ..processors.characterizer import DocumentCharacterizer
from ..processors.line_tokenizer import LineTokenizer
from ..processors.paragraph_grouper import ParagraphGrouper
from ..processors.role_classifier import RoleClassifier
from ..processors.word_tokenizer import WordTokenizer
from ..output.json_generator import JSONGenerator
from ..output.summary_generator import SummaryGenerator
from ..output.text_generator import TextGenerator
from ..utils.pdf_utils import PDFUtils

logger = logging.getLogger(__name__)


@dataclass
class ProcessingResult:
    """A processed document together with its document-wide characteristics"""
    document: Document
    characteristics: DocumentCharacteristics


class LayoutDocumentProcessor:
    """
    Layout analysis pipeline that turns positioned glyphs into:
    - text areas, text lines and words (recursive X-Y cuts)
    - paragraphs grouped by spacing, alignment and markup
    - document characteristics (heading markup, running headers/footers)
    - semantic roles per paragraph
    """

    def __init__(self, config: Optional[LayoutConfig] = None):
        self.config = config or LayoutConfig()

        # Initialize modular components
        self.area_segmenter = TextAreaSegmenter(self.config)
        self.line_tokenizer = LineTokenizer(self.config)
        self.word_tokenizer = WordTokenizer(self.config)
        self.paragraph_grouper = ParagraphGrouper(self.config)
        self.characterizer = DocumentCharacterizer.from_config(self.config)
        self.role_classifier = RoleClassifier(self.config)

    # ========================================================================
    # Entry points
    # ========================================================================

    def process_document(self, pdf_path: str, page_numbers: Optional[List[int]] = None) -> ProcessingResult:
        """Decode a PDF file and run the full pipeline on it."""
        document = PDFUtils.parse_document(pdf_path, page_numbers)
        if not document.pages:
            raise DocumentDecodeError("No valid pages found in PDF", path=pdf_path)
        return self.process(document)

    def process_pages(self, pages: Iterable[Page], path: Optional[str] = None) -> ProcessingResult:
        """Run the pipeline on already decoded pages."""
        return self.process(Document(pages=list(pages or []), path=path))

    def process(self, document: Document) -> ProcessingResult:
        logger.info("Processing %d pages of %s", len(document.pages), document.path or "<memory>")

        if self.config.workers > 1 and len(document.pages) > 1:
            self._tokenize_in_parallel(document)
        else:
            self.segment_text_areas(document)
            self.tokenize_to_lines(document)
            self.tokenize_to_words(document)

        self.group_paragraphs(document)
        characteristics = self.characterize(document)
        self.assign_roles(document, characteristics)
        return ProcessingResult(document, characteristics)

    # ========================================================================
    # Pipeline stages
    # ========================================================================

    def segment_text_areas(self, document: Document) -> None:
        self.area_segmenter.compute_statistics(document)
        statistic = document.character_statistic
        self._run_per_page(document, "text area segmentation",
                           lambda page: setattr(page, 'text_areas',
                                                self.area_segmenter.segment_page(page, statistic)))

    def tokenize_to_lines(self, document: Document) -> None:
        self._run_per_page(document, "line tokenization", self.line_tokenizer.tokenize_page)
        self.line_tokenizer.update_document_statistics(document)

    def tokenize_to_words(self, document: Document) -> None:
        self._run_per_page(document, "word tokenization", self.word_tokenizer.tokenize_page)

    def group_paragraphs(self, document: Document) -> None:
        statistic = document.text_line_statistic
        self._run_per_page(document, "paragraph grouping",
                           lambda page: self.paragraph_grouper.group_text_into_paragraphs(page, statistic))

    def characterize(self, document: Document) -> DocumentCharacteristics:
        return self.characterizer.characterize(document)

    def assign_roles(self, document: Document, characteristics: DocumentCharacteristics) -> None:
        self.role_classifier.assign_roles(document, characteristics)

    def _run_per_page(self, document: Document, stage: str, func: Callable[[Page], object]) -> None:
        for page in document.pages:
            if page is None:
                continue
            try:
                func(page)
            except Exception:
                logger.exception("Page %d failed in %s; leaving it empty", page.page_number, stage)
                _clear_page(page)

    def _tokenize_in_parallel(self, document: Document) -> None:
        """Segment and tokenize pages in worker processes."""
        self.area_segmenter.compute_statistics(document)
        pages = [page for page in document.pages if page is not None]
        statistic = document.character_statistic
        logger.info("Tokenizing %d pages with %d workers", len(pages), self.config.workers)

        with ProcessPoolExecutor(max_workers=self.config.workers) as executor:
            tokenized = list(executor.map(_tokenize_page, [self.config] * len(pages),
                                          pages, [statistic] * len(pages)))

        # executor.map keeps the input order
        results = iter(tokenized)
        document.pages = [next(results) if page is not None else None for page in document.pages]
        self.line_tokenizer.update_document_statistics(document)

    # ========================================================================
    # Output
    # ========================================================================

    def save_results(self, result: ProcessingResult, output_dir: str,
                     fmt: SerializationFormat = SerializationFormat.TXT,
                     unit: TextUnit = TextUnit.PARAGRAPH,
                     roles: Optional[Iterable[SemanticRole]] = None,
                     with_control_characters: bool = False) -> List[str]:
        """Write the serialization and a summary.json to the output directory."""
        os.makedirs(output_dir, exist_ok=True)
        document = result.document
        base_name = os.path.splitext(os.path.basename(document.path or "document"))[0]
        output_file = os.path.join(output_dir, f"{base_name}.{fmt.value}")

        if fmt is SerializationFormat.JSON:
            data = JSONGenerator.serialize(document, result.characteristics, unit, roles)
            JSONGenerator.save_json(data, output_file)
        else:
            text = TextGenerator.serialize(document, unit, roles, with_control_characters)
            TextGenerator.save_text(text, output_file)

        summary = SummaryGenerator.create_document_summary(document, result.characteristics)
        summary_file = os.path.join(output_dir, 'summary.json')
        JSONGenerator.save_json(summary, summary_file)

        logger.info("Saved results to %s", output_dir)
        return [output_file, summary_file]


def _tokenize_page(config: LayoutConfig, page: Page,
                   document_statistic: Optional[CharacterStatistic]) -> Page:
    """Segment and tokenize a single page; runs in a worker process."""
    try:
        page.text_areas = TextAreaSegmenter(config).segment_page(page, document_statistic)
        LineTokenizer(config).tokenize_page(page)
        WordTokenizer(config).tokenize_page(page)
    except Exception:
        logger.exception("Page %d failed in tokenization; leaving it empty", page.page_number)
        _clear_page(page)
    return page


def _clear_page(page: Page) -> None:
    page.text_areas = []
    page.text_lines = []
    page.paragraphs = []
    page.text_line_statistic = None
