"""PDF processing utilities."""

import io
import logging
from typing import Dict, List, Optional, Set

from PIL import Image
import pymupdf as fitz

from ..exceptions import DocumentDecodeError
from ..models.data_structures import Character, Color, Document, Figure, Font, FontFace, Page, Shape
from ..models.geometry import Rectangle

logger = logging.getLogger(__name__)

# Span flags as reported by PyMuPDF.
FLAG_ITALIC = 2
FLAG_BOLD = 16


class PDFUtils:
    """PDF processing utilities"""

    @staticmethod
    def parse_document(pdf_path: str, page_numbers: Optional[List[int]] = None) -> Document:
        """Decode the positioned characters, figures and shapes of a PDF file.

        ``page_numbers`` are 1-based; all pages are decoded if omitted.
        Coordinates are converted to PDF user space (Y grows upwards).
        """
        try:
            doc = fitz.open(pdf_path)
        except (RuntimeError, ValueError, OSError) as e:
            raise DocumentDecodeError(f"Cannot open PDF: {e}", path=pdf_path) from e

        # Tight glyph boxes instead of full line-height boxes; the setting is
        # global to PyMuPDF and restored afterwards.
        small_glyph_heights = fitz.TOOLS.set_small_glyph_heights()
        fitz.TOOLS.set_small_glyph_heights(True)
        try:
            page_numbers = page_numbers or list(range(1, len(doc) + 1))
            pages = []
            for page_number in page_numbers:
                if page_number < 1 or page_number > len(doc):
                    logger.warning("Page %d does not exist in %s. Skipping.", page_number, pdf_path)
                    continue
                pages.append(PDFUtils._parse_page(doc.load_page(page_number - 1), page_number))
        except (RuntimeError, ValueError) as e:
            raise DocumentDecodeError(f"Cannot read PDF: {e}", path=pdf_path) from e
        finally:
            fitz.TOOLS.set_small_glyph_heights(small_glyph_heights)
            doc.close()

        logger.info("Decoded %d pages from %s", len(pages), pdf_path)
        return Document(pages=pages, path=str(pdf_path))

    @staticmethod
    def _parse_page(fitz_page, page_number: int) -> Page:
        height = fitz_page.rect.height
        page = Page(page_number=page_number, width=fitz_page.rect.width, height=height)
        type3_fonts = PDFUtils._type3_fonts(fitz_page)
        fonts: Dict[str, Font] = {}

        raw = fitz_page.get_text("rawdict")
        for block in raw.get('blocks', []):
            if block.get('type') == 1:
                rect = PDFUtils._to_rectangle(block.get('bbox'), height)
                if rect is not None:
                    page.figures.append(Figure(rect))
                continue

            for line in block.get('lines', []):
                for span in line.get('spans', []):
                    font_name = span.get('font', '')
                    if font_name not in fonts:
                        fonts[font_name] = PDFUtils._create_font(font_name, span.get('flags', 0), type3_fonts)
                    font_face = FontFace(fonts[font_name], round(span.get('size', 0.0), 2))
                    color = PDFUtils._to_color(span.get('color', 0))

                    for char in span.get('chars', []):
                        text = char.get('c', '')
                        if not text or text.isspace():
                            continue
                        page.characters.append(Character(
                            text=text,
                            rectangle=PDFUtils._to_rectangle(char.get('bbox'), height),
                            font_face=font_face,
                            color=color,
                            index=len(page.characters),
                        ))

        for drawing in fitz_page.get_drawings():
            rect = PDFUtils._to_rectangle(drawing.get('rect'), height)
            if rect is not None:
                page.shapes.append(Shape(rect))

        logger.debug("Page %d: %d characters, %d figures, %d shapes", page_number,
                     len(page.characters), len(page.figures), len(page.shapes))
        return page

    @staticmethod
    def _to_rectangle(bbox, page_height: float) -> Optional[Rectangle]:
        """Convert a top-left based box to a Y-up rectangle; None if malformed."""
        if bbox is None:
            return None
        x0, y0, x1, y1 = tuple(bbox)[:4]
        return Rectangle.try_create(x0, page_height - y1, x1, page_height - y0)

    @staticmethod
    def _to_color(srgb: int) -> Color:
        return Color((srgb >> 16) & 0xFF, (srgb >> 8) & 0xFF, srgb & 0xFF)

    @staticmethod
    def _create_font(name: str, flags: int, type3_fonts: Set[str]) -> Font:
        base_name = name.split('+', 1)[-1]
        return Font(
            name=name,
            family=base_name.split('-', 1)[0] or None,
            is_bold=bool(flags & FLAG_BOLD),
            is_italic=bool(flags & FLAG_ITALIC),
            is_type3=base_name in type3_fonts,
        )

    @staticmethod
    def _type3_fonts(fitz_page) -> Set[str]:
        # get_fonts() entries: (xref, ext, type, basefont, name, encoding)
        return {font[3].split('+', 1)[-1] for font in fitz_page.get_fonts() if font[2] == 'Type3'}

    @staticmethod
    def pdf_to_images(pdf_path: str, page_numbers: Optional[List[int]] = None, dpi: int = 150) -> List[Image.Image]:
        """Convert PDF pages (1-based numbers) to PIL Images."""
        try:
            doc = fitz.open(pdf_path)
        except (RuntimeError, ValueError, OSError) as e:
            raise DocumentDecodeError(f"Cannot open PDF: {e}", path=pdf_path) from e

        images = []
        try:
            page_numbers = page_numbers or list(range(1, len(doc) + 1))

            for page_number in page_numbers:
                if page_number < 1 or page_number > len(doc):
                    logger.warning("Page %d does not exist in PDF. Skipping.", page_number)
                    continue

                page = doc.load_page(page_number - 1)
                mat = fitz.Matrix(dpi / 72, dpi / 72)
                pix = page.get_pixmap(matrix=mat)
                img_data = pix.tobytes("ppm")

                images.append(Image.open(io.BytesIO(img_data)))
        except (RuntimeError, ValueError) as e:
            raise DocumentDecodeError(f"Cannot render PDF: {e}", path=pdf_path) from e
        finally:
            doc.close()
        return images
