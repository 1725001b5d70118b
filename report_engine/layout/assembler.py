"""
Document Assembler.

Orchestrates the construction of the two-section report document:

1. Cover section - the uploaded image, centred at a fixed width
2. Table section - the tabular data with a repeating heading row

Both sections carry the same header frames and footer, each laid out for
its own page width. No rendering here - only document assembly.
"""
import logging
from typing import List, Optional, Sequence

from ..errors import MalformedTable
from ..models import (
    Document,
    FooterFields,
    HeaderFields,
    ImageBlock,
    PageSetup,
    Section,
    TableBlock,
    TableCell,
    TableRow,
)
from ..monitoring import (
    PhaseTimer,
    PHASE_CELL_WRAPPING,
    PHASE_COLUMN_SIZING,
    PHASE_HEADER_LAYOUT,
    PHASE_IMAGE_LAYOUT,
)
from .columns import calculate_table_geometry
from .config import LayoutConfig, DEFAULT_LAYOUT
from .header_footer import build_footer, build_header
from .image_geometry import calculate_cover_geometry, read_image_size
from .text_wrap import insert_soft_breaks

logger = logging.getLogger("ReportEngine.Assembler")

TableData = Sequence[Sequence[Optional[str]]]


def validate_table(table_data: Optional[TableData]) -> None:
    """Reject tables without a header row and at least one data row."""
    if table_data is None or len(table_data) < 2:
        raise MalformedTable("Table data must include at least one header row and one data row.")
    if len(table_data[0]) == 0:
        raise MalformedTable("Table header row has no columns.")


def assemble_document(
    image_data: bytes,
    table_data: TableData,
    header_fields: HeaderFields,
    footer_fields: FooterFields,
    config: Optional[LayoutConfig] = None,
    timer: Optional[PhaseTimer] = None,
) -> Document:
    """Build the abstract report document.

    Args:
        image_data: Raw bytes of the cover image
        table_data: Rows of cell strings, row 0 being the header row
        header_fields: Resolved header values
        footer_fields: Footer options
        config: Layout constants
        timer: Phase timer of the current call

    Returns:
        Document with a cover section and a table section.

    Raises:
        MalformedTable: fewer than two rows, checked before any layout
        UnreadableImage: image size could not be determined
    """
    config = config or DEFAULT_LAYOUT
    timer = timer or PhaseTimer()

    validate_table(table_data)

    cover = build_cover_section(image_data, header_fields, footer_fields, config, timer)
    table = build_table_section(table_data, header_fields, footer_fields, config, timer)

    return Document(sections=(cover, table), title=header_fields.title)


# ============================================================================
# COVER SECTION
# ============================================================================

def build_cover_section(
    image_data: bytes,
    header_fields: HeaderFields,
    footer_fields: FooterFields,
    config: LayoutConfig,
    timer: PhaseTimer,
) -> Section:
    with timer.phase(PHASE_IMAGE_LAYOUT):
        pixel_width, pixel_height = read_image_size(image_data)
        geometry = calculate_cover_geometry(pixel_width, pixel_height, config)

    logger.info(
        "Cover page %.2f x %.2f cm, image %.2f x %.2f cm",
        geometry.page_width, geometry.page_height,
        geometry.image_width, geometry.image_height,
    )

    page = PageSetup(
        width=geometry.page_width,
        height=geometry.page_height,
        top_margin=config.header_top_margin,
        bottom_margin=geometry.margin,
        left_margin=geometry.margin,
        right_margin=geometry.margin,
        footer_distance=config.footer_distance,
    )

    with timer.phase(PHASE_HEADER_LAYOUT):
        header = build_header(page.width, header_fields, config)
        footer = build_footer(footer_fields, config)

    body = ImageBlock(
        data=image_data,
        width=geometry.image_width,
        height=geometry.image_height,
        space_before=config.image_space_before,
    )
    return Section(page=page, header=header, footer=footer, body=body)


# ============================================================================
# TABLE SECTION
# ============================================================================

def build_table_section(
    table_data: TableData,
    header_fields: HeaderFields,
    footer_fields: FooterFields,
    config: LayoutConfig,
    timer: PhaseTimer,
) -> Section:
    header_row = list(table_data[0])
    data_rows = [list(row) for row in table_data[1:]]

    with timer.phase(PHASE_COLUMN_SIZING):
        geometry = calculate_table_geometry(header_row, data_rows, config)

    logger.info(
        "Table %d columns x %d rows, width %.2f cm on %.2f cm page",
        len(header_row), len(data_rows), geometry.table_width, geometry.page_width,
    )

    page = PageSetup(
        width=geometry.page_width,
        height=config.table_page_height,
        top_margin=config.header_top_margin,
        bottom_margin=config.table_bottom_margin,
        left_margin=geometry.side_margin,
        right_margin=geometry.side_margin,
        footer_distance=config.footer_distance,
    )

    with timer.phase(PHASE_HEADER_LAYOUT):
        header = build_header(page.width, header_fields, config)
        footer = build_footer(footer_fields, config)

    with timer.phase(PHASE_CELL_WRAPPING):
        body = build_table(header_row, data_rows, geometry.column_widths, config)

    return Section(page=page, header=header, footer=footer, body=body)


def build_table(
    header_row: Sequence[Optional[str]],
    data_rows: Sequence[Sequence[Optional[str]]],
    column_widths: Sequence[float],
    config: LayoutConfig,
) -> TableBlock:
    """Populate the table, wrapping every cell exactly once.

    Short rows are padded with empty cells, cells beyond the header's
    column count are dropped.
    """
    column_count = len(header_row)

    heading = TableRow(
        cells=tuple(_cell(header_row[i], config) for i in range(column_count)),
        heading=True,
        bold=True,
        font_size=config.header_cell_font_size,
        space_before=config.header_cell_padding,
        space_after=config.header_cell_padding,
        border_width=config.header_border_width,
        border_color=config.header_border_color,
    )

    rows: List[TableRow] = []
    ragged = 0
    for row in data_rows:
        if len(row) != column_count:
            ragged += 1
        cells = tuple(
            _cell(row[j], config) if j < len(row) else TableCell("")
            for j in range(column_count)
        )
        rows.append(TableRow(
            cells=cells,
            font_size=config.table_font_size,
            space_before=config.data_cell_padding,
            space_after=config.data_cell_padding,
            border_width=config.cell_border_width,
            border_color=config.data_border_color,
        ))

    if ragged:
        logger.warning("%d data row(s) do not match the %d header columns", ragged, column_count)

    return TableBlock(
        column_widths=tuple(column_widths),
        header_row=heading,
        rows=tuple(rows),
    )


def _cell(text: Optional[str], config: LayoutConfig) -> TableCell:
    return TableCell(insert_soft_breaks(text or "", config.soft_break_interval))
