"""Extractor for EPUB e-books."""

import logging
import os
import tempfile

import ebooklib
from bs4 import BeautifulSoup
from ebooklib import epub

from focusreader.models import DocumentFormat

logger = logging.getLogger(__name__)

# Elements whose text ends a paragraph
BLOCK_TAGS = [
    "p", "div", "li", "blockquote", "pre", "tr",
    "h1", "h2", "h3", "h4", "h5", "h6",
]


def html_to_text(content: bytes | str) -> str:
    """Convert one XHTML document to text, one block per paragraph."""
    soup = BeautifulSoup(content, "html.parser")
    for tag in soup(["script", "style"]):
        tag.decompose()
    for tag in soup.find_all(BLOCK_TAGS):
        tag.insert_after("\n\n")
    for br in soup.find_all("br"):
        br.replace_with("\n")
    root = soup.body or soup
    return root.get_text().strip()


class EpubExtractor:
    """Extracts chapter text in spine (reading) order with ebooklib."""

    formats = (DocumentFormat.EPUB,)
    format_name = "EPUB"
    min_text_length = 0

    def extract(self, data: bytes) -> str:
        # ebooklib reads from a path
        with tempfile.NamedTemporaryFile(suffix=".epub", delete=False) as f:
            f.write(data)
            path = f.name
        try:
            book = epub.read_epub(path, options={"ignore_ncx": True})
        finally:
            os.unlink(path)

        parts = []
        for item_id, _ in book.spine:
            item = book.get_item_with_id(item_id)
            if item is None or item.get_type() != ebooklib.ITEM_DOCUMENT:
                continue
            # Table of contents page
            if isinstance(item, epub.EpubNav):
                continue
            try:
                text = html_to_text(item.get_content())
            except Exception as e:
                logger.warning(f"Skipping unreadable spine item {item.get_name()}: {e}")
                continue
            if text:
                parts.append(text)

        return "\n\n".join(parts)
