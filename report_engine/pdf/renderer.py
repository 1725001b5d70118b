"""
PDF Renderer Module.

Flattens an abstract Document into PDF bytes with ReportLab:

- one PageTemplate per section (own page size and body frame)
- header frames drawn on every page at absolute positions
- footer drawn once the page count is known, so page fields resolve

No layout decisions - geometry comes from the document model.
"""
from io import BytesIO
import logging
from typing import Callable, List, Optional, Protocol, Tuple
from xml.sax.saxutils import escape

from reportlab.lib.units import cm
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas
from reportlab.platypus import (
    BaseDocTemplate,
    Frame,
    Image,
    NextPageTemplate,
    PageBreak,
    PageTemplate,
    Paragraph,
    Spacer,
    Table,
)

from ..errors import RenderingBackendFailure
from ..models import (
    Document,
    Frame as FrameModel,
    ImageBlock,
    LogoBlock,
    PageSetup,
    ParagraphBlock,
    Section,
    TableBlock,
)
from ..monitoring import PhaseTimer, PHASE_RENDER, PHASE_SERIALIZE
from .styles import cell_style, get_table_style, paragraph_style, runs_to_markup


# Setup logger
logger = logging.getLogger("ReportEngine.PDFRenderer")

PDF_SIGNATURE = b"%PDF-"


class DocumentRenderer(Protocol):
    """Anything able to turn an abstract Document into bytes."""

    def render(self, document: Document, timer: Optional[PhaseTimer] = None) -> bytes:
        ...


class NumberedCanvas(canvas.Canvas):
    """
    Canvas that defers footers until the total page count is known.

    Each page stores its state; on save every page is replayed and its
    section footer drawn with "current" and "total" page numbers.
    """

    def __init__(self, *args, **kwargs):
        canvas.Canvas.__init__(self, *args, **kwargs)
        self._saved_page_states = []
        self.report_section: Optional[Section] = None

    def showPage(self):
        self._saved_page_states.append(dict(self.__dict__))
        self._startPage()

    def save(self):
        """Draw footers on all pages, then write the file."""
        num_pages = len(self._saved_page_states)
        for state in self._saved_page_states:
            self.__dict__.update(state)
            if self.report_section is not None:
                draw_footer(self, self.report_section, self._pageNumber, num_pages)
            canvas.Canvas.showPage(self)
        canvas.Canvas.save(self)


def draw_footer(canv: canvas.Canvas, section: Section, page_number: int, page_count: int) -> None:
    """Draw the section footer between the side margins, above the bottom edge."""
    page = section.page
    block = section.footer.paragraph
    markup = runs_to_markup(block.runs, page_number=page_number, page_count=page_count)
    if not markup:
        return

    paragraph = Paragraph(markup, paragraph_style(block, "Footer"))
    x, width = footer_box(page)
    paragraph.wrapOn(canv, width * cm, page.height * cm)
    paragraph.drawOn(canv, x * cm, page.footer_distance * cm)


def footer_box(page: PageSetup) -> Tuple[float, float]:
    """Left edge and width (cm) of the footer, kept on the physical page.

    Negative side margins (tables wider than the page) clamp to the edge.
    """
    x = max(0.0, page.left_margin)
    return x, page.width - x - max(0.0, page.right_margin)


def draw_header(canv: canvas.Canvas, section: Section) -> None:
    """Draw every header frame of the section at its absolute position."""
    page_height = section.page.height * cm
    for frame_model in section.header.frames:
        frame = Frame(
            frame_model.left * cm,
            page_height - (frame_model.top + frame_model.height) * cm,
            frame_model.width * cm,
            frame_model.height * cm,
            leftPadding=0,
            rightPadding=0,
            topPadding=0,
            bottomPadding=0,
        )
        # Contents that do not fit are clipped, as a fixed-size frame would
        frame.addFromList(frame_flowables(frame_model), canv)


def frame_flowables(frame_model: FrameModel) -> List:
    flowables: List = []
    for item in frame_model.contents:
        if isinstance(item, LogoBlock):
            flowables.append(logo_flowable(item))
        elif isinstance(item, ParagraphBlock):
            flowables.append(Paragraph(runs_to_markup(item.runs), paragraph_style(item)))
    return flowables


def logo_flowable(block: LogoBlock) -> Image:
    """Logo at a fixed width, height from the file's aspect ratio."""
    pixel_width, pixel_height = ImageReader(block.path).getSize()
    width = block.width * cm
    logo = Image(block.path, width=width, height=width * pixel_height / pixel_width)
    logo.hAlign = "LEFT"
    return logo


def body_flowables(section: Section) -> List:
    body = section.body
    if isinstance(body, ImageBlock):
        return image_flowables(body)
    if isinstance(body, TableBlock):
        return [table_flowable(body)]
    raise TypeError(f"Unsupported section body: {type(body).__name__}")


def image_flowables(block: ImageBlock) -> List:
    image = Image(BytesIO(block.data), width=block.width * cm, height=block.height * cm)
    image.hAlign = "CENTER"
    return [Spacer(1, block.space_before * cm), image]


def table_flowable(block: TableBlock) -> Table:
    """Table with a heading row repeated on every page."""
    data = []
    for row in [block.header_row, *block.rows]:
        style = cell_style(row)
        data.append([Paragraph(escape(cell.text), style) for cell in row.cells])

    table = Table(
        data,
        colWidths=[width * cm for width in block.column_widths],
        repeatRows=1,
        splitInRow=1,
        hAlign="CENTER",
    )
    table.setStyle(get_table_style(block.header_row, block.rows))
    return table


def _on_page(section: Section) -> Callable:
    def add_page_decorations(canv, doc):
        """Header on each page; footer is deferred to NumberedCanvas.save."""
        canv.saveState()
        draw_header(canv, section)
        canv.restoreState()
        canv.report_section = section
    return add_page_decorations


def _page_template(index: int, section: Section) -> PageTemplate:
    page = section.page
    body = Frame(
        page.left_margin * cm,
        page.bottom_margin * cm,
        page.body_width * cm,
        page.body_height * cm,
        leftPadding=0,
        rightPadding=0,
        topPadding=0,
        bottomPadding=0,
        id=f"body-{index}",
    )
    return PageTemplate(
        id=f"section-{index}",
        frames=[body],
        onPage=_on_page(section),
        pagesize=(page.width * cm, page.height * cm),
    )


class ReportLabRenderer:
    """Render the abstract document model to PDF with ReportLab."""

    def __init__(self, author: Optional[str] = None):
        self.author = author

    def render(self, document: Document, timer: Optional[PhaseTimer] = None) -> bytes:
        """Build the PDF.

        Raises:
            RenderingBackendFailure: if ReportLab fails for any reason.
        """
        timer = timer or PhaseTimer()
        if not document.sections:
            raise RenderingBackendFailure("Document has no sections to render.")

        buffer = BytesIO()
        first = document.sections[0].page

        try:
            with timer.phase(PHASE_RENDER):
                doc = BaseDocTemplate(
                    buffer,
                    pagesize=(first.width * cm, first.height * cm),
                    title=document.title or "",
                    author=self.author or "",
                )
                doc.addPageTemplates([
                    _page_template(i, section) for i, section in enumerate(document.sections)
                ])

                # Build story (list of flowables)
                story: List = []
                for i, section in enumerate(document.sections):
                    if i > 0:
                        story.append(NextPageTemplate(f"section-{i}"))
                        story.append(PageBreak())
                    story.extend(body_flowables(section))

                doc.build(story, canvasmaker=NumberedCanvas)
        except RenderingBackendFailure:
            raise
        except Exception as exc:
            logger.error("PDF rendering failed: %s", exc)
            raise RenderingBackendFailure(f"PDF rendering failed: {exc}") from exc

        with timer.phase(PHASE_SERIALIZE):
            pdf_bytes = buffer.getvalue()
            buffer.close()

        if not pdf_bytes.startswith(PDF_SIGNATURE):
            raise RenderingBackendFailure("Renderer produced no PDF output.")

        logger.info("PDF rendered: %d bytes, %d section(s)", len(pdf_bytes), len(document.sections))
        return pdf_bytes
