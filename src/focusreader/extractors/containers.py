"""Extractors for proprietary containers without an available parser.

Both formats are gated by a fixed-offset magic marker and then recovered
with the byte-scanning heuristic.
"""

from focusreader.errors import ExtractionEmpty, ExtractionFailed, NoTextLayer
from focusreader.extractors.heuristic import recover_text
from focusreader.models import DocumentFormat

# Recovered text shorter than this is treated as missing
MIN_CONTAINER_TEXT = 50


class MobiExtractor:
    """Kindle MOBI/AZW3 books (PalmDB type/creator at offset 60)."""

    formats = (DocumentFormat.MOBI, DocumentFormat.AZW3)
    format_name = "MOBI"
    min_text_length = MIN_CONTAINER_TEXT

    MAGIC_OFFSET = 60
    MAGIC_MARKERS = (b"BOOK", b"MOBI")

    def has_magic(self, data: bytes) -> bool:
        marker = data[self.MAGIC_OFFSET : self.MAGIC_OFFSET + 4]
        return marker in self.MAGIC_MARKERS

    def extract(self, data: bytes) -> str:
        if not self.has_magic(data):
            raise ExtractionFailed(
                "Invalid MOBI/AZW3 file format. Please try converting to EPUB or TXT.",
                self.format_name,
            )
        try:
            return recover_text(data, min_length=self.min_text_length)
        except ExtractionEmpty as e:
            raise NoTextLayer(
                f"No readable text found in this MOBI/AZW3 file ({e}). "
                "It may be DRM-protected or compressed.",
                self.format_name,
            ) from e


class DjvuExtractor:
    """DjVu scanned documents (IFF85 'AT&T' header)."""

    formats = (DocumentFormat.DJVU,)
    format_name = "DJVU"
    min_text_length = MIN_CONTAINER_TEXT

    MAGIC = b"AT&T"

    def has_magic(self, data: bytes) -> bool:
        return data.startswith(self.MAGIC)

    def extract(self, data: bytes) -> str:
        if not self.has_magic(data):
            raise ExtractionFailed("Invalid DJVU file format", self.format_name)
        try:
            return recover_text(data, min_length=self.min_text_length)
        except ExtractionEmpty as e:
            raise NoTextLayer(
                "This DJVU file appears to be image-based without a text layer. "
                "Please use OCR software to convert it to a text format first.",
                self.format_name,
            ) from e
