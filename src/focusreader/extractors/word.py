"""Extractor for word-processor (DOCX) documents."""

import io

import docx

from focusreader.models import DocumentFormat


class WordExtractor:
    """Extracts paragraph and table text with python-docx.

    Legacy binary .doc files are routed here too; python-docx cannot open
    them and the pipeline reports the parser error.
    """

    formats = (DocumentFormat.DOCX, DocumentFormat.DOC)
    format_name = "DOCX"
    min_text_length = 0

    def extract(self, data: bytes) -> str:
        document = docx.Document(io.BytesIO(data))

        parts = [p.text for p in document.paragraphs]

        for table in document.tables:
            for row in table.rows:
                cells = [cell.text.strip() for cell in row.cells]
                parts.append(" ".join(cell for cell in cells if cell))

        return "\n\n".join(part for part in parts if part.strip())
