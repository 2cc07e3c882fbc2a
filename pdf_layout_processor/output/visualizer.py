"""Visualization of processed documents as annotated page images."""

import logging
import os
from collections import defaultdict
from typing import Dict, Iterable, List, Optional, Tuple

from ..exceptions import DocumentDecodeError, VisualizationError
from ..models.data_structures import Document
from ..models.enums import SemanticRole, TextUnit
from ..models.geometry import get_rectangle
from ..utils.image_utils import ImageUtils
from ..utils.pdf_utils import PDFUtils
from .units import iter_units, role_label

logger = logging.getLogger(__name__)

# Outline colors per role; must cover every SemanticRole.
ROLE_COLORS: Dict[SemanticRole, Tuple[int, int, int]] = {
    SemanticRole.TITLE: (220, 20, 60),
    SemanticRole.ABSTRACT: (255, 140, 0),
    SemanticRole.SECTION_HEADING: (0, 0, 255),
    SemanticRole.BODY: (0, 128, 0),
    SemanticRole.REFERENCE: (128, 0, 128),
    SemanticRole.PAGE_HEADER: (0, 139, 139),
    SemanticRole.PAGE_FOOTER: (0, 139, 139),
    SemanticRole.OTHER: (128, 128, 128),
}
UNASSIGNED_COLOR = (0, 0, 0)
FIGURE_COLOR = (0, 255, 255)
SHAPE_COLOR = (255, 0, 255)


class PdfVisualizer:
    """Draw the bounding boxes of text units onto rendered PDF pages"""

    def visualize(self, document: Document, pdf_path: str, output_dir: str,
                  unit: TextUnit = TextUnit.PARAGRAPH,
                  roles: Optional[Iterable[SemanticRole]] = None,
                  dpi: int = 150) -> List[str]:
        """Render each page of the document and save it as an annotated PNG."""
        pages = [page for page in document.pages if page is not None]
        try:
            images = PDFUtils.pdf_to_images(pdf_path, [page.page_number for page in pages], dpi=dpi)
        except DocumentDecodeError as e:
            raise VisualizationError(f"Cannot render {pdf_path}: {e}") from e
        if len(images) != len(pages):
            raise VisualizationError(f"Rendered {len(images)} images for {len(pages)} pages of {pdf_path}")

        boxes = defaultdict(list)
        for paragraph, element in iter_units(document, unit, roles):
            color = ROLE_COLORS[paragraph.role] if paragraph.role is not None else UNASSIGNED_COLOR
            label = role_label(paragraph.role) if element is paragraph else None
            boxes[paragraph.page_number].append((get_rectangle(element), color, label))

        scale = dpi / 72
        base_name = os.path.splitext(os.path.basename(pdf_path))[0]
        paths = []
        for page, image in zip(pages, images):
            page_boxes = list(boxes[page.page_number])
            page_boxes.extend((figure.rectangle, FIGURE_COLOR, None) for figure in page.figures)
            page_boxes.extend((shape.rectangle, SHAPE_COLOR, None) for shape in page.shapes)
            canvas = ImageUtils.draw_rectangles(image, page_boxes, page.height, scale)
            try:
                path = ImageUtils.save_image(canvas, output_dir, f"{base_name}_page_{page.page_number}.png")
            except OSError as e:
                raise VisualizationError(f"Cannot save visualization: {e}") from e
            logger.info("Saved visualization of page %d to %s", page.page_number, path)
            paths.append(path)
        return paths
