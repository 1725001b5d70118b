"""
Services Layer.

Glue between raw uploads and the layout engine:
- inputs.py: CSV tokenizing, metadata decoding, header/footer resolution
- generation.py: validate, assemble, render, name the file
"""
from .inputs import (
    parse_csv,
    parse_metadata,
    resolve_header_fields,
    default_footer_fields,
    format_generated_date,
)
from .generation import generate_report, build_filename, GeneratedReport

__all__ = [
    # Inputs
    "parse_csv",
    "parse_metadata",
    "resolve_header_fields",
    "default_footer_fields",
    "format_generated_date",
    # Generation
    "generate_report",
    "build_filename",
    "GeneratedReport",
]
