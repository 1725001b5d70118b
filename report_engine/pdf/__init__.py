"""
PDF Rendering Backend.

Turns the abstract document model into PDF bytes.
Uses ReportLab library. No layout logic.

Module Structure:
- styles.py: Fonts and style translation
- renderer.py: Page templates, header/footer drawing, document build

Usage:
    from report_engine.pdf import ReportLabRenderer

    pdf_bytes = ReportLabRenderer().render(document)
"""
from .styles import FONT_FAMILY, FONT_FAMILY_BOLD
from .renderer import DocumentRenderer, ReportLabRenderer, NumberedCanvas, PDF_SIGNATURE


__all__ = [
    # Main API
    "DocumentRenderer",
    "ReportLabRenderer",
    "PDF_SIGNATURE",
    # Internals (for advanced usage)
    "NumberedCanvas",
    "FONT_FAMILY",
    "FONT_FAMILY_BOLD",
]
