import io

import pytest
from reportlab.lib.pagesizes import A4
from reportlab.pdfgen import canvas


def _pdf(*pages: list[str]) -> bytes:
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=A4)
    for lines in pages:
        y = 780
        for line in lines:
            c.drawString(72, y, line)
            y -= 20
        c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def pan_pdf_bytes() -> bytes:
    """Single-page PDF laid out like a PAN card."""
    return _pdf([
        "INCOME TAX DEPARTMENT",
        "GOVT. OF INDIA",
        "Permanent Account Number Card",
        "ABCDE1234F",
        "Name: ASHA RAO",
    ])


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Three pages with distinct text on each."""
    return _pdf(["Page one content"], ["Page two content"], ["Page three content"])


@pytest.fixture()
def scanned_pdf_bytes() -> bytes:
    """A valid PDF with no text layer, like a scan."""
    return _pdf([])


@pytest.fixture()
def png_bytes() -> bytes:
    return b"\x89PNG\r\n\x1a\n" + b"\x00" * 32
