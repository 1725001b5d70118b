"""
PDF Styles Module.

Defines fonts, colors and the translation of abstract paragraph and table
styling into ReportLab styles. No layout decisions are made here.
"""
from reportlab.lib.units import cm
from reportlab.lib.styles import ParagraphStyle
from reportlab.lib.colors import HexColor, black
from reportlab.lib.enums import TA_LEFT, TA_CENTER, TA_RIGHT
from reportlab.platypus import TableStyle
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont
from xml.sax.saxutils import escape
import os
from typing import List, Optional, Sequence

from ..models import Alignment, PageCountField, PageNumberField, ParagraphBlock, TableRow, TextRun


# ============================================================================
# COLOR PALETTE
# ============================================================================

COLORS = {
    "text": black,
}


# ============================================================================
# TYPOGRAPHY (UTF-8 Support)
# ============================================================================

# NOTE: Standard PDF fonts like "Helvetica" only cover WinAnsi characters
# in ReportLab. Using DejaVuSans TrueType font for full UTF-8 support,
# including the zero-width spaces inserted into long cell text.

def register_fonts():
    """Register TrueType fonts for PDF generation."""
    try:
        # DejaVuSans ships with matplotlib
        import matplotlib
        font_dir = os.path.join(matplotlib.get_data_path(), "fonts", "ttf")

        pdfmetrics.registerFont(TTFont("DejaVuSans", os.path.join(font_dir, "DejaVuSans.ttf")))
        pdfmetrics.registerFont(TTFont("DejaVuSans-Bold", os.path.join(font_dir, "DejaVuSans-Bold.ttf")))

        return "DejaVuSans", "DejaVuSans-Bold"
    except Exception:
        # Fallback to standard fonts if registration fails
        return "Helvetica", "Helvetica-Bold"

FONT_FAMILY, FONT_FAMILY_BOLD = register_fonts()

# Paragraph leading as a multiple of font size
LEADING_RATIO = 1.2

# Horizontal cell padding (cm)
CELL_SIDE_PADDING = 0.12

_ALIGNMENTS = {
    Alignment.LEFT: TA_LEFT,
    Alignment.CENTER: TA_CENTER,
    Alignment.RIGHT: TA_RIGHT,
}


def paragraph_style(block: ParagraphBlock, name: str = "Block") -> ParagraphStyle:
    """Create a ParagraphStyle matching an abstract paragraph block."""
    return ParagraphStyle(
        name,
        fontName=FONT_FAMILY_BOLD if block.bold else FONT_FAMILY,
        fontSize=block.font_size,
        leading=block.font_size * LEADING_RATIO,
        textColor=COLORS["text"],
        alignment=_ALIGNMENTS[block.alignment],
        spaceBefore=block.space_before * cm,
        spaceAfter=block.space_after * cm,
    )


def cell_style(row: TableRow) -> ParagraphStyle:
    """Paragraph style shared by every cell of a table row."""
    return ParagraphStyle(
        "HeadingCell" if row.heading else "Cell",
        fontName=FONT_FAMILY_BOLD if row.bold else FONT_FAMILY,
        fontSize=row.font_size,
        leading=row.font_size * LEADING_RATIO,
        textColor=COLORS["text"],
        alignment=TA_LEFT,
    )


def runs_to_markup(
    runs: Sequence,
    page_number: Optional[int] = None,
    page_count: Optional[int] = None,
) -> str:
    """Convert paragraph runs into ReportLab paragraph markup.

    Field runs resolve to the given numbers; outside of pagination they
    render empty.
    """
    parts: List[str] = []
    for run in runs:
        if isinstance(run, TextRun):
            text = escape(run.text)
            if run.bold:
                text = f'<font name="{FONT_FAMILY_BOLD}">{text}</font>'
            parts.append(text)
        elif isinstance(run, PageNumberField):
            parts.append("" if page_number is None else str(page_number))
        elif isinstance(run, PageCountField):
            parts.append("" if page_count is None else str(page_count))
    return "".join(parts)


def get_table_style(header_row: TableRow, rows: Sequence[TableRow]) -> TableStyle:
    """Get table style commands for a heading row plus data rows.

    Returns:
        TableStyle with per-row padding and bottom borders.
    """
    commands: List = [
        ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
        ("LEFTPADDING", (0, 0), (-1, -1), CELL_SIDE_PADDING * cm),
        ("RIGHTPADDING", (0, 0), (-1, -1), CELL_SIDE_PADDING * cm),
    ]
    for index, row in enumerate([header_row, *rows]):
        commands.extend(_row_commands(index, row))
    return TableStyle(commands)


def _row_commands(index: int, row: TableRow) -> List:
    start, end = (0, index), (-1, index)
    return [
        ("TOPPADDING", start, end, row.space_before * cm),
        ("BOTTOMPADDING", start, end, row.space_after * cm),
        ("LINEBELOW", start, end, row.border_width, HexColor(row.border_color)),
    ]
