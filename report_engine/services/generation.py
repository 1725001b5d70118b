"""
Report generation service.

Single entry point used by the API (and any other caller): validates the
table, assembles the abstract document, renders it and names the file.
Nothing reaches the renderer unless assembly fully succeeded.
"""

import logging
from dataclasses import dataclass
from typing import BinaryIO, Optional, Sequence, Union

from ..layout import LayoutConfig, assemble_document, validate_table
from ..models import FooterFields, HeaderFields
from ..monitoring import PhaseHook, PhaseTimer
from ..pdf import DocumentRenderer, ReportLabRenderer

logger = logging.getLogger("ReportEngine.Generation")


@dataclass(frozen=True)
class GeneratedReport:
    """Finished PDF plus the suggested download name."""

    content: bytes
    filename: str
    media_type: str = "application/pdf"


def build_filename(header_fields: HeaderFields) -> str:
    """Suggested filename: "{title}_{generated date}.pdf"."""
    return f"{header_fields.title}_{header_fields.generated_date}.pdf"


def generate_report(
    image: Union[bytes, BinaryIO],
    table_data: Sequence[Sequence[Optional[str]]],
    header_fields: HeaderFields,
    footer_fields: FooterFields,
    config: Optional[LayoutConfig] = None,
    renderer: Optional[DocumentRenderer] = None,
    hook: Optional[PhaseHook] = None,
) -> GeneratedReport:
    """
    Generate the PDF report.

    Args:
        image: Cover image as bytes or a readable binary stream
        table_data: Rows of cells, row 0 is the header row
        header_fields: Resolved header values
        footer_fields: Footer options
        config: Layout constants (defaults to LayoutConfig())
        renderer: Rendering backend (defaults to ReportLabRenderer)
        hook: Called with (phase, duration_ms) after every phase

    Returns:
        GeneratedReport with PDF bytes and filename.

    Raises:
        MalformedTable: fewer than two rows
        UnreadableImage: image size cannot be determined
        RenderingBackendFailure: the backend failed
    """
    logger.info("PDF generation started.")

    # Reject bad tables before reading or measuring anything
    validate_table(table_data)

    timer = PhaseTimer(hook=hook)
    image_data = image if isinstance(image, bytes) else image.read()

    document = assemble_document(
        image_data,
        table_data,
        header_fields,
        footer_fields,
        config=config,
        timer=timer,
    )

    renderer = renderer or ReportLabRenderer(author=header_fields.company_name)
    content = renderer.render(document, timer=timer)

    for phase, duration in timer.totals().items():
        logger.info("Phase %s built in %.1f ms", phase, duration)
    logger.info("Total PDF generation time: %.1f ms", timer.total_ms)

    return GeneratedReport(content=content, filename=build_filename(header_fields))
