# Tests configuration for report_engine
import pytest
import sys
from io import BytesIO
from pathlib import Path

from PIL import Image

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from report_engine.models import FooterFields, HeaderFields


def make_png(width: int, height: int, color: str = "steelblue") -> bytes:
    """Encode a solid-colour PNG of the given pixel size."""
    buffer = BytesIO()
    Image.new("RGB", (width, height), color).save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def square_png():
    return make_png(200, 200)


@pytest.fixture
def wide_png():
    """2:1 (w:h) image."""
    return make_png(400, 200)


@pytest.fixture
def logo_path(tmp_path):
    path = tmp_path / "logo.png"
    path.write_bytes(make_png(120, 40, "darkred"))
    return str(path)


@pytest.fixture
def header_fields(logo_path):
    """Fully populated header values with an existing logo."""
    return HeaderFields(
        logo_path=logo_path,
        title="Quarterly Inspection",
        generated_date="Jan 05, 2024",
        company_name="Barracuda Networks",
        subject_name="Jane Doe",
        date_range="Jan 01, 2024 - Mar 31, 2024",
    )


@pytest.fixture
def missing_logo_fields(header_fields, tmp_path):
    from dataclasses import replace
    return replace(header_fields, logo_path=str(tmp_path / "does-not-exist.png"))


@pytest.fixture
def footer_fields():
    return FooterFields(show_page_numbers=True)


@pytest.fixture
def small_table():
    return [["Name", "Score"], ["Alice", "10"]]


@pytest.fixture
def long_table():
    """Enough rows to spill the table section over several pages."""
    rows = [["Id", "Host", "Finding", "Severity"]]
    for i in range(120):
        rows.append([
            str(i),
            f"host-{i:03d}.internal.example.com",
            "Outdated TLS configuration detected on public listener",
            "High" if i % 3 == 0 else "Low",
        ])
    return rows
