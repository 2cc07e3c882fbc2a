"""Iteration over the text units of a processed document."""

from typing import Iterable, Iterator, Optional, Set, Tuple

from ..models.data_structures import Document, Paragraph
from ..models.enums import ROLE_LABELS, SemanticRole, TextUnit


def role_label(role: Optional[SemanticRole]) -> Optional[str]:
    return ROLE_LABELS[role] if role is not None else None


def iter_units(document: Optional[Document], unit: TextUnit = TextUnit.PARAGRAPH,
               roles: Optional[Iterable[SemanticRole]] = None) -> Iterator[Tuple[Paragraph, object]]:
    """Yield (paragraph, element) pairs of the given unit in reading order.

    Elements whose paragraph role is not in ``roles`` are skipped; all roles
    are included if ``roles`` is None.
    """
    if document is None:
        return
    wanted: Optional[Set[SemanticRole]] = set(roles) if roles is not None else None

    for page in document.pages:
        if page is None:
            continue
        for paragraph in page.paragraphs or []:
            if paragraph is None:
                continue
            if wanted is not None and paragraph.role not in wanted:
                continue
            if unit is TextUnit.PARAGRAPH:
                yield paragraph, paragraph
            elif unit is TextUnit.LINE:
                for line in paragraph.text_lines:
                    yield paragraph, line
            elif unit is TextUnit.WORD:
                for word in paragraph.words:
                    yield paragraph, word
            elif unit is TextUnit.CHARACTER:
                for line in paragraph.text_lines:
                    for character in line.characters:
                        yield paragraph, character
            else:
                raise ValueError(f"Unsupported text unit: {unit}")


def unit_text(element) -> str:
    return getattr(element, 'text', '') or ''
