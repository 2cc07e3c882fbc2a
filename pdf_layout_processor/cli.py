"""Command Line Interface for the PDF Layout Processor."""

import os
import argparse
import logging

from .config import LayoutConfig
from .core.main_processor import LayoutDocumentProcessor
from .exceptions import LayoutProcessorError
from .models.enums import SemanticRole, SerializationFormat, TextUnit
from .output.visualizer import PdfVisualizer


def main(argv=None):
    parser = argparse.ArgumentParser(description='PDF Layout Processor: lines, words, paragraphs and semantic roles')
    parser.add_argument('pdf_path', help='Path to PDF file')
    parser.add_argument('--output_dir', help='Output directory (default: auto-generated)')
    parser.add_argument('--format', default='txt', choices=[f.value for f in SerializationFormat],
                        help='Serialization format (default: txt)')
    parser.add_argument('--unit', default='paragraph', choices=[u.value for u in TextUnit],
                        help='Text unit to serialize (default: paragraph)')
    parser.add_argument('--roles', help='Comma-separated semantic roles to include (default: all)')
    parser.add_argument('--pages', help='Comma-separated page numbers (1-indexed, default: all)')
    parser.add_argument('--visualize', action='store_true', help='Save annotated page images')
    parser.add_argument('--dpi', type=int, help='Resolution of visualized pages')
    parser.add_argument('--with-control-characters', action='store_true',
                        help='Mark page breaks and headings with control characters (txt only)')
    parser.add_argument('--workers', type=int, help='Number of worker processes for page tokenization')
    parser.add_argument('--log-level', help='Logging level (default: WARNING)')
    parser.add_argument('--env-file', help='Path to a .env file with PDF_LAYOUT_* settings')

    args = parser.parse_args(argv)

    config = LayoutConfig.from_env(args.env_file).with_overrides(
        dpi=args.dpi, workers=args.workers, log_level=args.log_level)
    logging.basicConfig(level=config.log_level.upper(),
                        format='%(asctime)s %(levelname)s %(name)s: %(message)s')

    if not os.path.exists(args.pdf_path):
        print(f"Error: PDF file not found: {args.pdf_path}")
        return 1

    pdf_path = args.pdf_path
    document_name = os.path.splitext(os.path.basename(pdf_path))[0]
    output_dir = args.output_dir or f"layout_results/{document_name}"

    page_numbers = None
    if args.pages:
        try:
            page_numbers = [int(p.strip()) for p in args.pages.split(',')]
        except ValueError:
            print(f"Error: Invalid page numbers format: {args.pages}")
            return 1

    roles = None
    if args.roles:
        try:
            roles = [SemanticRole.from_name(r) for r in args.roles.split(',')]
        except ValueError as e:
            print(f"Error: {e}")
            return 1

    fmt = SerializationFormat(args.format)
    unit = TextUnit(args.unit)
    processor = LayoutDocumentProcessor(config)

    try:
        result = processor.process_document(pdf_path, page_numbers)
        written = processor.save_results(result, output_dir, fmt, unit, roles,
                                         with_control_characters=args.with_control_characters)
        if args.visualize:
            written.extend(PdfVisualizer().visualize(result.document, pdf_path, output_dir,
                                                     unit, roles, dpi=config.dpi))
    except LayoutProcessorError as e:
        print(f"Error processing document: {e}")
        return 1

    document = result.document
    characteristics = result.characteristics
    pages = [page for page in document.pages if page is not None]
    paragraphs = document.paragraphs

    print(f"\n=== Processing Summary ===")
    print(f"PDF: {pdf_path}")
    print(f"Output: {output_dir}")
    print(f"Pages processed: {len(document.pages)}")
    print(f"Characters: {sum(len(page.characters or []) for page in pages)}")
    print(f"Text lines: {sum(len(page.text_lines or []) for page in pages)}")
    print(f"Paragraphs: {len(paragraphs)}")
    print(f"Section heading markup: {characteristics.section_heading_markup or '-'}")
    print(f"Page header detected: {characteristics.page_header_area is not None}")
    print(f"Page footer detected: {characteristics.page_footer_area is not None}")

    headings = [p for p in paragraphs if p.role is SemanticRole.SECTION_HEADING]
    if headings:
        print("\n=== Section Headings ===")
        for paragraph in headings:
            print(f"  {paragraph.text} ~-~ page: {paragraph.page_number}")

    print("\n=== Files ===")
    for path in written:
        print(f"  {path}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
