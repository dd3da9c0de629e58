from __future__ import annotations

import io
import sys
from pathlib import Path

import pytest


PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))


PROSE = (
    b"It was a bright cold day in April and the clocks were striking thirteen "
    b"while everyone hurried home through the wind"
)


def make_pdf(lines: list[str]) -> bytes:
    """Build a one-page PDF with Helvetica text lines and a valid xref."""
    stream = "BT\n/F1 12 Tf\n72 720 Td\n14 TL\n"
    stream += "".join(f"({line}) Tj T*\n" for line in lines)
    stream += "ET"

    objects = [
        "<< /Type /Catalog /Pages 2 0 R >>",
        "<< /Type /Pages /Kids [3 0 R] /Count 1 >>",
        "<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
        "/Contents 4 0 R /Resources << /Font << /F1 5 0 R >> >> >>",
        f"<< /Length {len(stream)} >>\nstream\n{stream}\nendstream",
        "<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]

    out = io.BytesIO()
    out.write(b"%PDF-1.4\n")
    offsets = []
    for number, body in enumerate(objects, 1):
        offsets.append(out.tell())
        out.write(f"{number} 0 obj\n{body}\nendobj\n".encode("latin-1"))

    xref_offset = out.tell()
    out.write(f"xref\n0 {len(objects) + 1}\n".encode("latin-1"))
    out.write(b"0000000000 65535 f \n")
    for offset in offsets:
        out.write(f"{offset:010d} 00000 n \n".encode("latin-1"))
    out.write(
        f"trailer\n<< /Size {len(objects) + 1} /Root 1 0 R >>\n"
        f"startxref\n{xref_offset}\n%%EOF\n".encode("latin-1")
    )
    return out.getvalue()


@pytest.fixture
def prose_run() -> bytes:
    return PROSE


@pytest.fixture
def mobi_bytes() -> bytes:
    """PalmDB header with BOOKMOBI at offset 60 and embedded prose."""
    header = bytearray(78)
    header[60:68] = b"BOOKMOBI"
    return bytes(header) + b"\x00\x01\x02" + PROSE + b"\x00\xff" + PROSE + b"\x00"


@pytest.fixture
def djvu_bytes() -> bytes:
    return b"AT&TFORM\x00\x00\x10\x00DJVUINFO\x00\x00\x00\x0a" + PROSE + b"\x00"


@pytest.fixture
def pdf_bytes() -> bytes:
    return make_pdf(["Hello world. This is a test.", "Reading in chunks helps focus."])


@pytest.fixture
def blank_pdf_bytes() -> bytes:
    from pypdf import PdfWriter

    writer = PdfWriter()
    writer.add_blank_page(width=72, height=72)
    out = io.BytesIO()
    writer.write(out)
    return out.getvalue()


@pytest.fixture
def docx_bytes() -> bytes:
    import docx

    document = docx.Document()
    document.add_paragraph("The first paragraph of the report.")
    document.add_paragraph("")
    document.add_paragraph("The second paragraph follows it.")
    table = document.add_table(rows=1, cols=2)
    table.rows[0].cells[0].text = "Left cell"
    table.rows[0].cells[1].text = "Right cell"
    out = io.BytesIO()
    document.save(out)
    return out.getvalue()


@pytest.fixture
def epub_bytes(tmp_path: Path) -> bytes:
    from ebooklib import epub

    book = epub.EpubBook()
    book.set_identifier("focusreader-test")
    book.set_title("Sample Book")
    book.set_language("en")

    chapter_one = epub.EpubHtml(title="One", file_name="chap_01.xhtml", lang="en")
    chapter_one.content = (
        "<html><body><h1>Chapter One</h1>"
        "<p>The first chapter begins here.</p>"
        "<p>It has a <em>second</em> paragraph.</p>"
        "<script>var ignored = 1;</script></body></html>"
    )
    chapter_two = epub.EpubHtml(title="Two", file_name="chap_02.xhtml", lang="en")
    chapter_two.content = (
        "<html><body><h1>Chapter Two</h1>"
        "<p>The story continues in chapter two.</p></body></html>"
    )

    book.add_item(chapter_one)
    book.add_item(chapter_two)
    book.toc = (chapter_one, chapter_two)
    book.add_item(epub.EpubNcx())
    book.add_item(epub.EpubNav())
    book.spine = [chapter_one, chapter_two]

    path = tmp_path / "sample.epub"
    epub.write_epub(str(path), book)
    return path.read_bytes()
