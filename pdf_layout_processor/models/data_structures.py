"""Data structures for PDF layout processing."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import List, Optional, Mapping, NamedTuple, Tuple

from .enums import SemanticRole
from .geometry import Line, Position, Rectangle


@dataclass(frozen=True)
class Font:
    """A font as reported by the content-stream decoder"""
    name: str
    family: Optional[str] = None
    is_bold: bool = False
    is_italic: bool = False
    is_type3: bool = False

    @property
    def full_name(self) -> str:
        return self.name


@dataclass(frozen=True)
class FontFace:
    """A font in a specific size"""
    font: Font
    size: float


@dataclass(frozen=True)
class Color:
    """RGB color with 0-255 channels"""
    r: int = 0
    g: int = 0
    b: int = 0

    @property
    def rgb(self) -> Tuple[int, int, int]:
        return (self.r, self.g, self.b)


class Markup(NamedTuple):
    """Typographic signature: font full name and rounded font size"""
    font_name: str
    font_size: float

    def __str__(self) -> str:
        return f"{self.font_name}-{self.font_size}"


@dataclass
class Character:
    """Atomic positioned glyph"""
    text: str
    rectangle: Optional[Rectangle]
    font_face: Optional[FontFace] = None
    color: Optional[Color] = None
    index: int = -1

    @property
    def font_size(self) -> Optional[float]:
        return self.font_face.size if self.font_face else None


@dataclass
class Figure:
    """Non-textual image element"""
    rectangle: Optional[Rectangle]


@dataclass
class Shape:
    """Vector graphic element"""
    rectangle: Optional[Rectangle]


@dataclass(frozen=True)
class CharacterStatistic:
    """Aggregated typographic and geometric summary of a set of characters"""
    num_characters: int = 0
    most_common_font_face: Optional[FontFace] = None
    most_common_color: Optional[Color] = None
    average_font_size: Optional[float] = None
    average_width: Optional[float] = None
    average_height: Optional[float] = None
    smallest_min_x: Optional[float] = None
    smallest_min_y: Optional[float] = None
    largest_max_x: Optional[float] = None
    largest_max_y: Optional[float] = None
    font_face_frequencies: Tuple[Tuple[FontFace, int], ...] = field(default=(), repr=False, compare=False)
    color_frequencies: Tuple[Tuple[Color, int], ...] = field(default=(), repr=False, compare=False)
    num_sized_characters: int = field(default=0, repr=False, compare=False)

    @property
    def is_empty(self) -> bool:
        return self.num_characters == 0


@dataclass(frozen=True)
class TextLineStatistic:
    """Aggregated summary of a set of text lines"""
    num_lines: int = 0
    most_common_line_height: Optional[float] = None
    average_line_height: Optional[float] = None
    most_common_line_pitch: Optional[float] = None
    smallest_min_x: Optional[float] = None
    largest_max_x: Optional[float] = None
    height_frequencies: Tuple[Tuple[float, int], ...] = field(default=(), repr=False, compare=False)
    pitch_frequencies: Tuple[Tuple[float, int], ...] = field(default=(), repr=False, compare=False)


@dataclass
class TextArea:
    """Block of characters isolated by the page segmentation"""
    characters: List[Character]
    position: Position

    @property
    def rectangle(self) -> Optional[Rectangle]:
        return self.position.rectangle


@dataclass
class Word:
    """Characters of a text line separated from their neighbours by whitespace"""
    characters: List[Character]
    text: str
    positions: List[Position]
    character_statistic: CharacterStatistic
    is_hyphenated: bool = False
    line_index: int = -1

    @property
    def first_position(self) -> Optional[Position]:
        return self.positions[0] if self.positions else None

    @property
    def rectangle(self) -> Optional[Rectangle]:
        position = self.first_position
        return position.rectangle if position else None


@dataclass
class TextLine:
    """Horizontal run of characters in left-to-right reading order"""
    characters: List[Character]
    position: Position
    character_statistic: CharacterStatistic
    baseline: Optional[Line] = None
    words: List[Word] = field(default_factory=list)
    text: str = ""
    index: int = -1

    @property
    def rectangle(self) -> Optional[Rectangle]:
        return self.position.rectangle

    @property
    def page_number(self) -> int:
        return self.position.page_number


@dataclass
class Paragraph:
    """Grouped text lines forming a logical paragraph"""
    text_lines: List[TextLine]
    position: Position
    character_statistic: CharacterStatistic
    markup: Optional[Markup] = None
    text: str = ""
    role: Optional[SemanticRole] = None
    alignment: str = "unknown"
    line_spacing: float = 0.0
    index: int = -1

    @property
    def rectangle(self) -> Optional[Rectangle]:
        return self.position.rectangle

    @property
    def page_number(self) -> int:
        return self.position.page_number

    @property
    def num_lines(self) -> int:
        return len(self.text_lines)

    @property
    def words(self) -> List[Word]:
        return [word for line in self.text_lines for word in line.words]


@dataclass
class Page:
    """A page with its dense per-page element arenas"""
    page_number: int
    width: float = 0.0
    height: float = 0.0
    characters: List[Character] = field(default_factory=list)
    figures: List[Figure] = field(default_factory=list)
    shapes: List[Shape] = field(default_factory=list)
    text_areas: List[TextArea] = field(default_factory=list)
    text_lines: List[TextLine] = field(default_factory=list)
    paragraphs: List[Paragraph] = field(default_factory=list)
    character_statistic: Optional[CharacterStatistic] = None
    text_line_statistic: Optional[TextLineStatistic] = None

    @property
    def rectangle(self) -> Rectangle:
        return Rectangle(0, 0, self.width, self.height)


@dataclass
class Document:
    """Ordered pages of a processed PDF file"""
    pages: List[Page] = field(default_factory=list)
    path: Optional[str] = None
    character_statistic: Optional[CharacterStatistic] = None
    text_line_statistic: Optional[TextLineStatistic] = None

    @property
    def paragraphs(self) -> List[Paragraph]:
        return [paragraph for page in self.pages if page is not None
                for paragraph in page.paragraphs or []]


@dataclass(frozen=True)
class DocumentCharacteristics:
    """Immutable result of the document-wide characterization pass"""
    section_heading_markup: Optional[Markup] = None
    page_header_area: Optional[Rectangle] = None
    page_footer_area: Optional[Rectangle] = None
    word_frequencies: Mapping[str, int] = field(default_factory=lambda: MappingProxyType({}))
    num_pages: int = 0
    is_characterized: bool = False

    def get_occurrence(self, word: str) -> int:
        """Return how often the given (normalized) word occurs in the document."""
        return self.word_frequencies.get(word, 0)
