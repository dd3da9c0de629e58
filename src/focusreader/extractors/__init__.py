"""Format detection and format-specific text extractors."""

from pathlib import Path
from typing import Optional

from focusreader.extractors.containers import DjvuExtractor, MobiExtractor
from focusreader.extractors.epub import EpubExtractor
from focusreader.extractors.pdf import PdfExtractor
from focusreader.extractors.text import PlainTextExtractor
from focusreader.extractors.word import WordExtractor
from focusreader.models import DocumentFormat
from focusreader.protocols import Extractor
from focusreader.utils.binary import is_binary_content, is_binary_extension

# Registry of available extractors; later registrations win
_EXTRACTORS: list[Extractor] = [
    PdfExtractor(),
    WordExtractor(),
    EpubExtractor(),
    MobiExtractor(),
    DjvuExtractor(),
    PlainTextExtractor(),
]

EXTENSION_FORMATS = {
    "pdf": DocumentFormat.PDF,
    "docx": DocumentFormat.DOCX,
    "doc": DocumentFormat.DOC,
    "epub": DocumentFormat.EPUB,
    "mobi": DocumentFormat.MOBI,
    "djvu": DocumentFormat.DJVU,
    "azw3": DocumentFormat.AZW3,
    "azw": DocumentFormat.AZW3,
    "txt": DocumentFormat.TXT,
    "text": DocumentFormat.TXT,
}

SUPPORTED_FORMATS_TEXT = "PDF, DOCX, EPUB, MOBI, DJVU, AZW3, TXT"


def detect_format(
    filename: str,
    mime_type: Optional[str] = None,
    data: Optional[bytes] = None,
) -> Optional[DocumentFormat]:
    """Guess the document format from its name, MIME type or content.

    Args:
        filename: Source file name (only the extension is used)
        mime_type: Optional MIME type reported by the host
        data: Optional raw bytes, sniffed for plain text as a last resort

    Returns:
        The detected format, or None if nothing matches
    """
    extension = Path(filename).suffix.lower().lstrip(".")
    if extension in EXTENSION_FORMATS:
        return EXTENSION_FORMATS[extension]

    mime = (mime_type or "").lower()
    if "pdf" in mime:
        return DocumentFormat.PDF
    if "word" in mime or "msword" in mime:
        return DocumentFormat.DOCX
    if "epub" in mime:
        return DocumentFormat.EPUB
    if "text/plain" in mime:
        return DocumentFormat.TXT

    if data and not is_binary_extension(filename) and not is_binary_content(data):
        return DocumentFormat.TXT

    return None


def get_extractor(fmt: DocumentFormat | str) -> Optional[Extractor]:
    """Find the extractor registered for a format.

    Args:
        fmt: A DocumentFormat or its lowercase name

    Returns:
        An Extractor instance that handles the format, or None
    """
    try:
        fmt = DocumentFormat(fmt)
    except ValueError:
        return None
    for extractor in reversed(_EXTRACTORS):
        if fmt in extractor.formats:
            return extractor
    return None


def register_extractor(extractor: Extractor) -> None:
    """Register a custom extractor, taking precedence over built-ins.

    Args:
        extractor: An object implementing the Extractor protocol
    """
    _EXTRACTORS.append(extractor)


def supported_extensions() -> str:
    """Comma-separated extensions for file pickers."""
    return ",".join(f".{ext}" for ext in EXTENSION_FORMATS if ext != "text")


__all__ = [
    "detect_format",
    "get_extractor",
    "register_extractor",
    "supported_extensions",
    "SUPPORTED_FORMATS_TEXT",
    "PdfExtractor",
    "WordExtractor",
    "EpubExtractor",
    "MobiExtractor",
    "DjvuExtractor",
    "PlainTextExtractor",
]
