"""Image processing utilities."""

import os
from typing import Iterable, Optional, Tuple

from PIL import Image, ImageDraw

from ..models.geometry import Rectangle


class ImageUtils:
    """Image processing utilities"""

    @staticmethod
    def to_image_box(rectangle: Rectangle, page_height: float, scale: float) -> Tuple[float, float, float, float]:
        """Convert a Y-up page rectangle into a top-left based pixel box."""
        return (
            rectangle.min_x * scale,
            (page_height - rectangle.max_y) * scale,
            rectangle.max_x * scale,
            (page_height - rectangle.min_y) * scale,
        )

    @staticmethod
    def draw_rectangles(image: Image.Image,
                        boxes: Iterable[Tuple[Optional[Rectangle], Tuple[int, int, int], Optional[str]]],
                        page_height: float, scale: float, width: int = 1) -> Image.Image:
        """Draw (rectangle, color, label) outlines onto a copy of the image."""
        canvas = image.convert('RGB')
        draw = ImageDraw.Draw(canvas)
        for rectangle, color, label in boxes:
            if rectangle is None:
                continue
            box = ImageUtils.to_image_box(rectangle, page_height, scale)
            draw.rectangle(box, outline=color, width=width)
            if label:
                draw.text((box[0], max(0, box[1] - 10)), label, fill=color)
        return canvas

    @staticmethod
    def save_image(image: Image.Image, output_dir: str, filename: str) -> str:
        os.makedirs(output_dir, exist_ok=True)
        filepath = os.path.join(output_dir, filename)
        image.save(filepath, 'PNG')
        return filepath
