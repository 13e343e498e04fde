import io

import docx
import pytest
from reportlab.lib.pagesizes import A4
from reportlab.pdfgen import canvas

from tests.replies import make_issue_block, make_reply


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page policy PDF with known text content."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=A4)
    c.drawString(72, 720, "Article 3 Only local enterprises may bid")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PDF with known text on each page."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=A4)
    c.drawString(72, 720, "Page one content")
    c.showPage()
    c.drawString(72, 720, "Page two content")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Generate a valid PDF with no text content (blank page)."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=A4)
    c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def sample_docx_bytes() -> bytes:
    """Generate a DOCX with two paragraphs and a table between them."""
    document = docx.Document()
    document.add_paragraph("Article 1 Purpose of this notice")
    table = document.add_table(rows=1, cols=2)
    table.rows[0].cells[0].text = "Subsidy"
    table.rows[0].cells[1].text = "Local firms only"
    document.add_paragraph("Article 2 Scope of application")
    buf = io.BytesIO()
    document.save(buf)
    return buf.getvalue()


@pytest.fixture()
def two_issue_reply() -> str:
    return make_reply(
        make_issue_block(1),
        make_issue_block(
            2,
            title="Designated supplier",
            description="Requires purchases from one named supplier.",
            quote='"Materials shall be bought from Company A."',
            provision="Violates the business conduct standards.",
            suggestion="Let buyers choose suppliers freely.",
        ),
    )
