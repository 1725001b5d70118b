"""
Layout Engine.

Turns image pixel sizes, ragged string tables and header metadata into
concrete page geometry, column widths, wrap points and frame positions.
Backend independent: produces the abstract document model only.

Module Structure:
- config.py: LayoutConfig with every layout constant
- text_wrap.py: zero-width soft breaks for long cell text
- columns.py: column widths and table page geometry
- image_geometry.py: cover page size from image pixels
- header_footer.py: header frames and footer paragraph
- assembler.py: two-section document orchestration
"""
from .config import LayoutConfig, DEFAULT_LAYOUT
from .text_wrap import insert_soft_breaks, strip_soft_breaks, ZERO_WIDTH_SPACE
from .columns import calculate_column_width, calculate_table_geometry, TableGeometry
from .image_geometry import calculate_cover_geometry, read_image_size, CoverGeometry
from .header_footer import build_header, build_footer, right_frame_left
from .assembler import assemble_document, validate_table


__all__ = [
    # Main API
    "assemble_document",
    "validate_table",
    # Configuration
    "LayoutConfig",
    "DEFAULT_LAYOUT",
    # Components
    "insert_soft_breaks",
    "strip_soft_breaks",
    "ZERO_WIDTH_SPACE",
    "calculate_column_width",
    "calculate_table_geometry",
    "TableGeometry",
    "calculate_cover_geometry",
    "read_image_size",
    "CoverGeometry",
    "build_header",
    "build_footer",
    "right_frame_left",
]
