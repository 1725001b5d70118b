"""
Layout configuration.

Every geometric and typographic constant used by the layout engine lives in
one immutable LayoutConfig value. Lengths are centimetres, font sizes and
border widths are points. Override with dataclasses.replace().
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class LayoutConfig:
    """Constants driving page geometry, column sizing and header placement."""

    # --- Text wrapping ---
    soft_break_interval: int = 20

    # --- Cover (image) section ---
    dpi: float = 96.0
    target_image_width: float = 15.0
    image_margin: float = 1.0
    min_image_page_width: float = 16.0
    min_image_page_height: float = 16.0
    header_footer_allowance: float = 6.0
    image_space_before: float = 1.0

    # --- Table section ---
    char_width: float = 0.23
    min_column_width: float = 2.0
    max_column_width: float = 10.0
    reference_length: int = 10
    table_page_padding: float = 3.0
    min_table_page_width: float = 21.0
    max_table_page_width: float = 70.0
    table_page_height: float = 34.0
    table_bottom_margin: float = 2.5

    # --- Table typography ---
    table_font_size: int = 10
    header_cell_font_size: int = 12
    header_cell_padding: float = 0.3
    data_cell_padding: float = 0.15
    header_border_width: float = 1.0
    cell_border_width: float = 0.5
    data_border_color: str = "#808080"
    header_border_color: str = "#000000"

    # --- Header frames (shared by every section) ---
    header_top_margin: float = 5.0
    left_frame_left: float = 1.5
    left_frame_top: float = 1.5
    left_frame_width: float = 10.0
    left_frame_height: float = 4.0
    logo_width: float = 4.0
    logo_placeholder: str = "Logo Not Found"
    title_font_size: int = 16
    title_spacing: float = 0.3
    right_frame_width: float = 7.0
    right_frame_height: float = 4.0
    right_frame_top: float = 2.1
    right_frame_margin: float = 1.5
    company_font_size: int = 14
    right_line_spacing: float = 0.35
    header_font_size: int = 12

    # --- Footer ---
    footer_font_size: int = 12
    footer_distance: float = 1.25
    footer_separator: str = " | "


DEFAULT_LAYOUT = LayoutConfig()
