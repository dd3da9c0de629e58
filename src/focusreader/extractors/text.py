"""Extractor for plain text files."""

from focusreader.models import DocumentFormat


class PlainTextExtractor:
    """Decodes UTF-8 text, replacing undecodable bytes."""

    formats = (DocumentFormat.TXT,)
    format_name = "TXT"
    min_text_length = 0

    def extract(self, data: bytes) -> str:
        return data.decode("utf-8-sig", errors="replace")
