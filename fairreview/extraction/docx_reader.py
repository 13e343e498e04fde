import io

import docx
from docx.table import Table
from docx.text.paragraph import Paragraph

from fairreview.extraction.exceptions import TextExtractionError


def extract_docx_text(data: bytes) -> str:
    """Return the body text of a DOCX package in reading order.

    Paragraphs become lines; each table row becomes one line with its cell
    texts separated by spaces. Images, fields and embedded objects carry no
    text runs and are skipped.

    Raises:
        TextExtractionError: if the bytes are not a readable DOCX package.
    """
    try:
        document = docx.Document(io.BytesIO(data))
        lines: list[str] = []
        for block in document.iter_inner_content():
            if isinstance(block, Paragraph):
                lines.append(block.text)
            elif isinstance(block, Table):
                lines.extend(_table_lines(block))
    except Exception as exc:
        raise TextExtractionError(f"Could not read DOCX package: {exc}") from exc
    return "\n".join(lines).strip()


def _table_lines(table: Table) -> list[str]:
    lines = []
    for row in table.rows:
        cells: list[str] = []
        for cell in row.cells:
            text = cell.text.strip()
            # merged cells are reported once per grid column
            if text and (not cells or cells[-1] != text):
                cells.append(text)
        if cells:
            lines.append(" ".join(cells))
    return lines
