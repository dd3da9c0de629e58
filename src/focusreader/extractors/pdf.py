"""Extractor for PDF documents."""

import io

from pypdf import PdfReader

from focusreader.models import DocumentFormat


class PdfExtractor:
    """Extracts the text layer of each page with pypdf.

    Pages are separated by a blank line. A PDF made only of scanned images
    yields no text and is rejected by the pipeline as having no text layer.
    """

    formats = (DocumentFormat.PDF,)
    format_name = "PDF"
    min_text_length = 1

    def extract(self, data: bytes) -> str:
        reader = PdfReader(io.BytesIO(data))
        pages = [page.extract_text() or "" for page in reader.pages]
        return "\n\n".join(pages)
