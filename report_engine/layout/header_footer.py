"""
Header / Footer Layout.

Builds the framed header and the footer paragraph shared by every section.
The left frame is pinned to the top-left corner; the right frame is
positioned from the section's own page width so it always hugs the right
edge, whatever width the section has.
"""
import logging
import os
from typing import List, Optional

from ..models import (
    Alignment,
    FooterFields,
    Footer,
    Frame,
    Header,
    HeaderFields,
    LogoBlock,
    PageCountField,
    PageNumberField,
    ParagraphBlock,
    TextRun,
)
from .config import LayoutConfig, DEFAULT_LAYOUT

logger = logging.getLogger("ReportEngine.HeaderFooter")


# ============================================================================
# HEADER
# ============================================================================

def build_header(
    page_width: float,
    fields: HeaderFields,
    config: Optional[LayoutConfig] = None,
) -> Header:
    """Build both header frames for a section of the given page width."""
    config = config or DEFAULT_LAYOUT
    return Header(frames=(
        build_left_frame(fields, config),
        build_right_frame(page_width, fields, config),
    ))


def build_left_frame(fields: HeaderFields, config: Optional[LayoutConfig] = None) -> Frame:
    """Logo (or placeholder), report title and generation date."""
    config = config or DEFAULT_LAYOUT
    contents: List = []

    # Checked on every call; the file may appear or vanish between requests
    if fields.logo_path and os.path.isfile(fields.logo_path):
        contents.append(LogoBlock(path=fields.logo_path, width=config.logo_width))
    else:
        logger.warning("Logo not found at %s, using placeholder text", fields.logo_path)
        contents.append(ParagraphBlock(
            runs=(TextRun(config.logo_placeholder),),
            font_size=config.table_font_size,
        ))

    contents.append(ParagraphBlock(
        runs=(TextRun(fields.title, bold=True),),
        font_size=config.title_font_size,
        bold=True,
        space_before=config.title_spacing,
        space_after=config.title_spacing,
    ))

    contents.append(ParagraphBlock(
        runs=(TextRun("Generated on ", bold=True), TextRun(fields.generated_date)),
        font_size=config.header_font_size,
    ))

    return Frame(
        left=config.left_frame_left,
        top=config.left_frame_top,
        width=config.left_frame_width,
        height=config.left_frame_height,
        contents=tuple(contents),
    )


def build_right_frame(
    page_width: float,
    fields: HeaderFields,
    config: Optional[LayoutConfig] = None,
) -> Frame:
    """Company name, subject name and date range, right-aligned.

    Sits slightly lower than the left frame.
    """
    config = config or DEFAULT_LAYOUT

    company = ParagraphBlock(
        runs=(TextRun(fields.company_name, bold=True),),
        font_size=config.company_font_size,
        bold=True,
        alignment=Alignment.RIGHT,
        space_after=config.right_line_spacing,
    )
    subject = ParagraphBlock(
        runs=(TextRun(fields.subject_name),),
        font_size=config.header_font_size,
        alignment=Alignment.RIGHT,
        space_after=config.right_line_spacing,
    )
    date_range = ParagraphBlock(
        runs=(TextRun(f"Data from {fields.date_range}"),),
        font_size=config.header_font_size,
        alignment=Alignment.RIGHT,
    )

    return Frame(
        left=right_frame_left(page_width, config),
        top=config.right_frame_top,
        width=config.right_frame_width,
        height=config.right_frame_height,
        contents=(company, subject, date_range),
    )


def right_frame_left(page_width: float, config: Optional[LayoutConfig] = None) -> float:
    config = config or DEFAULT_LAYOUT
    return page_width - config.right_frame_width - config.right_frame_margin


# ============================================================================
# FOOTER
# ============================================================================

def build_footer(fields: FooterFields, config: Optional[LayoutConfig] = None) -> Footer:
    """Build the right-aligned footer paragraph.

    With page numbers on, the optional right text precedes the
    "Page X of Y" block followed by a separator, and is emitted a second
    time after the page block.
    """
    config = config or DEFAULT_LAYOUT
    runs: List = []

    if fields.show_page_numbers:
        if fields.right_text:
            runs.append(TextRun(fields.right_text))
            runs.append(TextRun(config.footer_separator))

        runs.extend([
            TextRun("Page "),
            PageNumberField(),
            TextRun(" of "),
            PageCountField(),
        ])

    if fields.right_text:
        runs.append(TextRun(fields.right_text))

    return Footer(paragraph=ParagraphBlock(
        runs=tuple(runs),
        font_size=config.footer_font_size,
        alignment=Alignment.RIGHT,
    ))
