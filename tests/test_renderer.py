"""Tests for report_engine/pdf/renderer.py — ReportLab rendering of the document model."""

import pytest
from dataclasses import replace

from reportlab.lib.units import cm

from report_engine.errors import RenderingBackendFailure
from report_engine.layout import assemble_document
from report_engine.models import (
    Document,
    FooterFields,
    ImageBlock,
    PageCountField,
    PageNumberField,
    PageSetup,
    TextRun,
)
from report_engine.monitoring import PhaseTimer
from report_engine.pdf import PDF_SIGNATURE, ReportLabRenderer
from report_engine.pdf import renderer as renderer_module
from report_engine.pdf.renderer import footer_box
from report_engine.pdf.styles import cell_style, runs_to_markup


@pytest.fixture
def document(square_png, small_table, header_fields, footer_fields):
    return assemble_document(square_png, small_table, header_fields, footer_fields)


@pytest.fixture
def long_document(wide_png, long_table, header_fields, footer_fields):
    return assemble_document(wide_png, long_table, header_fields, footer_fields)


@pytest.fixture
def footer_calls(monkeypatch):
    """Record (section index, page number, page count) for every drawn footer."""
    calls = []
    original = renderer_module.draw_footer

    def recording_footer(canv, section, page_number, page_count):
        calls.append((section, page_number, page_count))
        original(canv, section, page_number, page_count)

    monkeypatch.setattr(renderer_module, "draw_footer", recording_footer)
    return calls


# =========================================================================
# ReportLabRenderer
# =========================================================================

class TestReportLabRenderer:
    def test_returns_pdf_bytes(self, document):
        pdf = ReportLabRenderer().render(document)
        assert pdf.startswith(PDF_SIGNATURE)
        assert len(pdf) > 1000

    def test_missing_logo_renders(self, square_png, small_table, missing_logo_fields, footer_fields):
        document = assemble_document(square_png, small_table, missing_logo_fields, footer_fields)
        assert ReportLabRenderer().render(document).startswith(PDF_SIGNATURE)

    def test_cover_then_table_pages(self, document, footer_calls):
        ReportLabRenderer().render(document)

        sections = [call[0] for call in footer_calls]
        assert sections == [document.sections[0], document.sections[1]]

    def test_page_numbers_sequential_with_shared_total(self, long_document, footer_calls):
        ReportLabRenderer().render(long_document)

        numbers = [call[1] for call in footer_calls]
        totals = {call[2] for call in footer_calls}

        assert len(numbers) >= 3
        assert numbers == list(range(1, len(numbers) + 1))
        assert totals == {len(numbers)}

    def test_table_pages_keep_table_section(self, long_document, footer_calls):
        ReportLabRenderer().render(long_document)

        cover, table = long_document.sections
        assert footer_calls[0][0] == cover
        assert all(call[0] == table for call in footer_calls[1:])

    def test_header_drawn_on_every_page(self, long_document, footer_calls, monkeypatch):
        headers = []
        original = renderer_module.draw_header

        def recording_header(canv, section):
            headers.append(section)
            original(canv, section)

        monkeypatch.setattr(renderer_module, "draw_header", recording_header)
        ReportLabRenderer().render(long_document)

        assert headers == [call[0] for call in footer_calls]

    def test_footer_without_page_numbers(self, square_png, small_table, header_fields):
        document = assemble_document(
            square_png, small_table, header_fields, FooterFields(show_page_numbers=False)
        )
        assert ReportLabRenderer().render(document).startswith(PDF_SIGNATURE)

    def test_timer_phases(self, document):
        timer = PhaseTimer()
        ReportLabRenderer().render(document, timer=timer)
        assert [r.phase for r in timer.records] == ["render", "serialize"]

    def test_backend_error_wrapped(self, document):
        cover = replace(
            document.sections[0],
            body=ImageBlock(data=b"not an image", width=15.0, height=15.0),
        )
        broken = replace(document, sections=(cover, document.sections[1]))

        with pytest.raises(RenderingBackendFailure):
            ReportLabRenderer().render(broken)

    def test_empty_document_rejected(self):
        with pytest.raises(RenderingBackendFailure):
            ReportLabRenderer().render(Document(sections=()))


# =========================================================================
# Footer markup
# =========================================================================

class TestRunsToMarkup:
    def test_fields_resolved(self):
        runs = (TextRun("Page "), PageNumberField(), TextRun(" of "), PageCountField())
        assert runs_to_markup(runs, page_number=2, page_count=5) == "Page 2 of 5"

    def test_text_escaped(self):
        assert runs_to_markup((TextRun("R&D <draft>"),)) == "R&amp;D &lt;draft&gt;"

    def test_bold_runs_marked(self):
        markup = runs_to_markup((TextRun("Generated on ", bold=True), TextRun("Jan 05, 2024")))
        assert markup.startswith("<font name=")
        assert markup.endswith("Jan 05, 2024")


# =========================================================================
# Oversized content
# =========================================================================

class TestOversizedTables:
    def test_row_taller_than_page_splits(self, square_png, header_fields, footer_fields, footer_calls):
        table = [["Notes"], ["word " * 1500]]
        document = assemble_document(square_png, table, header_fields, footer_fields)

        pdf = ReportLabRenderer().render(document)

        assert pdf.startswith(PDF_SIGNATURE)
        # Cover plus at least two pages for the single long row
        assert len(footer_calls) >= 3

    def test_wide_table_footer_stays_on_page(self, square_png, header_fields, footer_fields, monkeypatch):
        header = [f"c{i}" for i in range(8)]
        document = assemble_document(square_png, [header, ["w" * 100] * 8], header_fields, footer_fields)
        table_page = document.sections[1].page
        assert table_page.left_margin < 0

        drawn = []
        original = renderer_module.Paragraph.drawOn

        def recording_draw(self, canv, x, y, _sW=0):
            if self.style.name == "Footer":
                drawn.append((x, self.width))
            return original(self, canv, x, y, _sW)

        monkeypatch.setattr(renderer_module.Paragraph, "drawOn", recording_draw)
        ReportLabRenderer().render(document)

        table_footers = drawn[1:]
        assert table_footers
        for x, width in table_footers:
            assert x >= 0
            assert x + width <= table_page.width * cm + 1e-6


class TestFooterBox:
    def test_regular_margins_kept(self):
        page = PageSetup(width=21.0, height=34.0, top_margin=5.0, bottom_margin=2.5,
                         left_margin=3.0, right_margin=3.0)
        assert footer_box(page) == pytest.approx((3.0, 15.0))

    def test_negative_margins_clamp_to_page(self):
        page = PageSetup(width=70.0, height=34.0, top_margin=5.0, bottom_margin=2.5,
                         left_margin=-5.0, right_margin=-5.0)
        assert footer_box(page) == pytest.approx((0.0, 70.0))


class TestCellStyle:
    def test_font_size_follows_row(self, document):
        table = document.sections[1].body
        assert cell_style(table.header_row).fontSize == 12
        assert all(cell_style(row).fontSize == 10 for row in table.rows)
