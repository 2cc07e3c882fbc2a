"""JSON output generation utilities."""

import datetime
import json
import os
from typing import Any, Dict, Iterable, Optional

from ..exceptions import SerializationError
from ..models.data_structures import Character, Document, DocumentCharacteristics, Paragraph, TextLine, Word
from ..models.enums import SemanticRole, TextUnit
from ..models.geometry import Position
from .units import iter_units, role_label

UNIT_KEYS = {
    TextUnit.CHARACTER: 'characters',
    TextUnit.WORD: 'words',
    TextUnit.LINE: 'lines',
    TextUnit.PARAGRAPH: 'paragraphs',
}


class JSONGenerator:
    """JSON output generation utilities"""

    @staticmethod
    def create_document_metadata(document: Document,
                                 characteristics: Optional[DocumentCharacteristics] = None) -> Dict:
        """Create document-level metadata block."""
        metadata = {
            'source_pdf': os.path.basename(document.path) if document.path else None,
            'source_path': document.path,
            'num_pages': len(document.pages),
            'processing_timestamp': datetime.datetime.now().isoformat(),
        }
        if characteristics is not None:
            metadata['characteristics'] = JSONGenerator.serialize_characteristics(characteristics)
        return metadata

    @staticmethod
    def serialize_characteristics(characteristics: DocumentCharacteristics) -> Dict:
        header = characteristics.page_header_area
        footer = characteristics.page_footer_area
        markup = characteristics.section_heading_markup
        return {
            'section_heading_markup': str(markup) if markup is not None else None,
            'page_header_area': header.to_list() if header is not None else None,
            'page_footer_area': footer.to_list() if footer is not None else None,
            'num_distinct_words': len(characteristics.word_frequencies),
        }

    @staticmethod
    def serialize(document: Optional[Document],
                  characteristics: Optional[DocumentCharacteristics] = None,
                  unit: TextUnit = TextUnit.PARAGRAPH,
                  roles: Optional[Iterable[SemanticRole]] = None) -> Dict[str, Any]:
        """Serialize the units of a processed document into a JSON-ready dict."""
        if document is None:
            return {'metadata': {}, UNIT_KEYS[unit]: []}

        elements = [
            JSONGenerator._serialize_element(paragraph, element)
            for paragraph, element in iter_units(document, unit, roles)
        ]
        return {
            'metadata': JSONGenerator.create_document_metadata(document, characteristics),
            UNIT_KEYS[unit]: elements,
        }

    @staticmethod
    def to_json(document: Optional[Document],
                characteristics: Optional[DocumentCharacteristics] = None,
                unit: TextUnit = TextUnit.PARAGRAPH,
                roles: Optional[Iterable[SemanticRole]] = None,
                indent: int = 2) -> str:
        data = JSONGenerator.serialize(document, characteristics, unit, roles)
        try:
            return json.dumps(data, indent=indent, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise SerializationError(f"Cannot serialize document to JSON: {e}") from e

    @staticmethod
    def _serialize_element(paragraph: Paragraph, element) -> Dict:
        data = {'role': role_label(paragraph.role), 'text': element.text}

        if isinstance(element, Paragraph):
            data['positions'] = [JSONGenerator._serialize_position(element.position)]
            data['markup'] = str(element.markup) if element.markup is not None else None
            data['alignment'] = element.alignment
        elif isinstance(element, TextLine):
            data['positions'] = [JSONGenerator._serialize_position(element.position)]
            if element.baseline is not None:
                data['baseline'] = element.baseline.to_list()
        elif isinstance(element, Word):
            data['positions'] = [JSONGenerator._serialize_position(p) for p in element.positions]
            data['hyphenated'] = element.is_hyphenated
        elif isinstance(element, Character):
            data['positions'] = [JSONGenerator._serialize_position(Position(paragraph.page_number, element.rectangle))]
            if element.font_face is not None:
                data['font'] = element.font_face.font.full_name
                data['font_size'] = element.font_face.size
            if element.color is not None:
                data['color'] = list(element.color.rgb)
        return data

    @staticmethod
    def _serialize_position(position: Position) -> Dict:
        rect = position.rectangle
        result: Dict[str, Any] = {'page': position.page_number}
        if rect is not None:
            result.update({
                'min_x': rect.min_x,
                'min_y': rect.min_y,
                'max_x': rect.max_x,
                'max_y': rect.max_y,
            })
        return result

    @staticmethod
    def save_json(data: Any, output_path: str) -> str:
        """Write a JSON-ready object to a file."""
        try:
            with open(output_path, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
        except (OSError, TypeError, ValueError) as e:
            raise SerializationError(f"Cannot write {output_path}: {e}") from e
        return output_path
