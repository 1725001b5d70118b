"""
Report Engine.

Builds a two-section PDF report (image cover page, paginated data table)
from an image, tabular data and a small metadata record.

Usage:
    from report_engine import generate_report, HeaderFields, FooterFields

    report = generate_report(image_bytes, rows, header_fields, FooterFields())
    report.content   # PDF bytes
    report.filename  # "{title}_{date}.pdf"
"""
from .errors import (
    ReportGenerationError,
    ReportInputError,
    MissingInput,
    MalformedTable,
    MetadataError,
    UnreadableImage,
    RenderingBackendFailure,
)
from .layout import LayoutConfig, assemble_document
from .models import HeaderFields, FooterFields, Document
from .services import generate_report, GeneratedReport

__version__ = "1.0.0"

__all__ = [
    # Main API
    "generate_report",
    "GeneratedReport",
    "assemble_document",
    # Inputs
    "HeaderFields",
    "FooterFields",
    "LayoutConfig",
    "Document",
    # Errors
    "ReportGenerationError",
    "ReportInputError",
    "MissingInput",
    "MalformedTable",
    "MetadataError",
    "UnreadableImage",
    "RenderingBackendFailure",
]
