"""
Abstract Document Model.

Backend-independent description of a paginated report: sections, page
setup, absolutely positioned header frames, footer paragraph and body
blocks. Lengths are centimetres, font sizes points.

NO RENDERING IMPLEMENTED — structure only.
"""
from dataclasses import dataclass, field
from typing import Optional, Tuple, Union
from enum import Enum


# ============================================================
# ENUMS
# ============================================================

class Alignment(str, Enum):
    """Horizontal paragraph alignment."""
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


# ============================================================
# PARAGRAPH RUNS
# ============================================================

@dataclass(frozen=True)
class TextRun:
    """Literal text, optionally bold."""
    text: str
    bold: bool = False


@dataclass(frozen=True)
class PageNumberField:
    """Placeholder for the current page number, resolved by the renderer."""


@dataclass(frozen=True)
class PageCountField:
    """Placeholder for the total page count, resolved by the renderer."""


Run = Union[TextRun, PageNumberField, PageCountField]


# ============================================================
# BLOCKS
# ============================================================

@dataclass(frozen=True)
class ParagraphBlock:
    """A single paragraph made of runs sharing one font size."""
    runs: Tuple[Run, ...]
    font_size: int = 10
    bold: bool = False
    alignment: Alignment = Alignment.LEFT
    space_before: float = 0.0
    space_after: float = 0.0

    @property
    def plain_text(self) -> str:
        """Literal text of the paragraph, fields left out."""
        return "".join(run.text for run in self.runs if isinstance(run, TextRun))


@dataclass(frozen=True)
class LogoBlock:
    """Image loaded from disk; height follows the file's aspect ratio."""
    path: str
    width: float


@dataclass(frozen=True)
class ImageBlock:
    """In-memory raster image displayed at a fixed size, centered."""
    data: bytes = field(repr=False)
    width: float
    height: float
    space_before: float = 0.0


@dataclass(frozen=True)
class TableCell:
    text: str


@dataclass(frozen=True)
class TableRow:
    """
    One table row.

    Styling applies to every cell of the row. Heading rows repeat at the
    top of every page the table spans.
    """
    cells: Tuple[TableCell, ...]
    heading: bool = False
    bold: bool = False
    font_size: int = 10
    space_before: float = 0.0
    space_after: float = 0.0
    border_width: float = 0.5
    border_color: str = "#000000"


@dataclass(frozen=True)
class TableBlock:
    column_widths: Tuple[float, ...]
    header_row: TableRow
    rows: Tuple[TableRow, ...]

    @property
    def width(self) -> float:
        return sum(self.column_widths)


FrameContent = Union[ParagraphBlock, LogoBlock]
Body = Union[ImageBlock, TableBlock]


# ============================================================
# PAGE STRUCTURE
# ============================================================

@dataclass(frozen=True)
class Frame:
    """
    Absolutely positioned region measured from the page's top-left corner.

    Contents are stacked top to bottom.
    """
    left: float
    top: float
    width: float
    height: float
    contents: Tuple[FrameContent, ...] = ()


@dataclass(frozen=True)
class Header:
    frames: Tuple[Frame, ...]


@dataclass(frozen=True)
class Footer:
    paragraph: ParagraphBlock


@dataclass(frozen=True)
class PageSetup:
    width: float
    height: float
    top_margin: float
    bottom_margin: float
    left_margin: float
    right_margin: float
    footer_distance: float = 1.25

    @property
    def body_width(self) -> float:
        return self.width - self.left_margin - self.right_margin

    @property
    def body_height(self) -> float:
        return self.height - self.top_margin - self.bottom_margin


@dataclass(frozen=True)
class Section:
    """One page template: geometry, header, footer and body content."""
    page: PageSetup
    header: Header
    footer: Footer
    body: Body


@dataclass(frozen=True)
class Document:
    sections: Tuple[Section, ...]
    title: Optional[str] = None
