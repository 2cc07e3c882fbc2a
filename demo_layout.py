#!/usr/bin/env python3
"""
Demo script showing how to use the PDF Layout Processor
"""

import os
from dotenv import load_dotenv
from pdf_layout_processor import LayoutConfig, LayoutDocumentProcessor, LayoutProcessorError, SemanticRole

# Load environment variables from .env file
load_dotenv()


def main():
    # Get paths from environment variables
    pdf_path = os.getenv('PDF_PATH')
    output_dir = os.getenv('OUTPUT_DIR')

    if not pdf_path or not output_dir:
        print("❌ Error: Please set PDF_PATH and OUTPUT_DIR in your .env file")
        return

    # PDF_LAYOUT_* variables override the defaults
    processor = LayoutDocumentProcessor(LayoutConfig.from_env())

    try:
        result = processor.process_document(pdf_path, page_numbers=[1, 2, 3])  # 1 indexed
        processor.save_results(result, output_dir)
    except LayoutProcessorError as e:
        print(f"❌ Error: {e}")
        return

    print("✅ Layout processing completed successfully!")
    print(f"📁 Results saved to: {output_dir}")
    print(f"📄 Pages processed: {len(result.document.pages)}")

    for page in result.document.pages:
        print(f"\n📖 page {page.page_number}:")
        print(f"  - Text lines: {len(page.text_lines)}")
        print(f"  - Paragraphs: {len(page.paragraphs)}")
        print(f"  - Headings: {sum(1 for p in page.paragraphs if p.role is SemanticRole.SECTION_HEADING)}")


if __name__ == "__main__":
    main()
