"""Tests for the reading pipeline."""

import logging

import pytest

from focusreader.errors import (
    EmptyResult,
    ExtractionEmpty,
    ExtractionFailed,
    NoTextLayer,
    ReaderError,
    UnsupportedFormat,
)
from focusreader.models import (
    BionicIntensity,
    ChunkSize,
    DocumentFormat,
    ReaderSettings,
)
from focusreader.pipeline import (
    MIN_DOCUMENT_LENGTH,
    annotate,
    build_document,
    derive_title,
    extract,
    load_document,
    rechunk,
    reannotate,
    segment,
)

SAMPLE = (
    "Hello world. This is ADHD Reader, a tool for focus.\r\n\r\n\r\n"
    "Second   paragraph here. It has two sentences!"
)


class TestExtract:
    """Tests for extract()."""

    def test_plain_text_is_normalized(self):
        text = extract(SAMPLE.encode(), DocumentFormat.TXT)
        assert text == (
            "Hello world. This is ADHD Reader, a tool for focus.\n\n"
            "Second paragraph here. It has two sentences!"
        )

    def test_accepts_string_hint(self):
        assert extract(b"Plain enough text.", "txt") == "Plain enough text."

    def test_unsupported(self):
        with pytest.raises(UnsupportedFormat, match="Supported formats"):
            extract(b"whatever", None)
        with pytest.raises(UnsupportedFormat):
            extract(b"whatever", "rtf")

    def test_empty_result(self):
        with pytest.raises(EmptyResult) as exc_info:
            extract(b"  tiny \n", DocumentFormat.TXT)
        assert exc_info.value.format_name == "TXT"
        assert isinstance(exc_info.value, ExtractionEmpty)

    def test_minimum_is_inclusive(self):
        text = "x" * MIN_DOCUMENT_LENGTH
        assert extract(text.encode(), DocumentFormat.TXT) == text

    def test_parser_error_wrapped(self):
        with pytest.raises(ExtractionFailed, match="Failed to parse DOCX file") as exc_info:
            extract(b"not a zip archive", DocumentFormat.DOCX)
        assert exc_info.value.__cause__ is not None

    def test_legacy_doc_label(self):
        with pytest.raises(ExtractionFailed, match="Failed to parse DOC file"):
            extract(b"\xd0\xcf\x11\xe0" + b"\x00" * 32, DocumentFormat.DOC)

    def test_pdf(self, pdf_bytes):
        text = extract(pdf_bytes, DocumentFormat.PDF)
        assert "Hello world." in text

    def test_pdf_without_text_layer(self, blank_pdf_bytes):
        with pytest.raises(NoTextLayer, match="PDF"):
            extract(blank_pdf_bytes, DocumentFormat.PDF)

    def test_broken_pdf(self):
        with pytest.raises((ExtractionFailed, NoTextLayer)):
            extract(b"this is not a pdf at all", DocumentFormat.PDF)

    def test_mobi_magic_gate(self, prose_run):
        with pytest.raises(ExtractionFailed) as exc_info:
            extract(b"\x00" * 80 + prose_run, DocumentFormat.MOBI)
        assert exc_info.value.format_name == "MOBI"

    def test_error_reports_requested_format(self, prose_run):
        """A shared extractor reports the format that was asked for."""
        with pytest.raises(ExtractionFailed, match="AZW3") as exc_info:
            extract(b"\x00" * 80 + prose_run, DocumentFormat.AZW3)
        assert exc_info.value.format_name == "AZW3"

    def test_azw3_uses_mobi_heuristic(self, mobi_bytes, prose_run):
        assert extract(mobi_bytes, DocumentFormat.AZW3).startswith(prose_run.decode())

    def test_djvu(self, djvu_bytes, prose_run):
        assert extract(djvu_bytes, DocumentFormat.DJVU) == prose_run.decode()

    def test_all_errors_share_base(self):
        for error in (UnsupportedFormat, ExtractionFailed, NoTextLayer, EmptyResult):
            assert issubclass(error, ReaderError)

    def test_logs_stages(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="focusreader.pipeline"):
            extract(SAMPLE.encode(), DocumentFormat.TXT)
        assert "Extracting TXT" in caplog.text


class TestSegmentAndAnnotate:
    """Tests for segment() and annotate()."""

    def test_segment_small(self):
        text = "Hello world. This is ADHD Reader, a tool for focus."
        chunks = segment(text, ChunkSize.SMALL.config)
        assert [c.content for c in chunks] == [
            "Hello world.",
            "This is ADHD Reader, a tool for focus.",
        ]

    def test_segment_empty(self):
        assert segment("", ChunkSize.MEDIUM.config) == []

    def test_annotate(self):
        assert annotate("reading", BionicIntensity.MEDIUM) == "<b>read</b>ing"

    def test_reannotate_is_pure(self):
        chunks = segment("Focus now.", ChunkSize.SMALL.config, BionicIntensity.LIGHT)
        updated = reannotate(chunks, BionicIntensity.STRONG)
        assert chunks[0].bionic_content == "<b>Fo</b>cus <b>n</b>ow."
        assert updated[0].bionic_content == "<b>Focu</b>s <b>now</b>."
        assert updated[0].id == chunks[0].id


class TestDeriveTitle:
    """Tests for derive_title()."""

    @pytest.mark.parametrize(
        "filename,title",
        [
            ("book.pdf", "book"),
            ("notes.v2.txt", "notes.v2"),
            ("README", "README"),
            ("/tmp/some dir/My Book.epub", "My Book"),
            (".hidden", ".hidden"),
        ],
    )
    def test_titles(self, filename, title):
        assert derive_title(filename) == title


class TestBuildDocument:
    """Tests for build_document(), load_document() and rechunk()."""

    def test_build(self):
        document = build_document(SAMPLE.encode(), "focus-guide.txt")
        assert document.title == "focus-guide"
        assert document.format == DocumentFormat.TXT
        assert document.paragraph_count == 2
        assert all(c.bionic_content for c in document.chunks)

    def test_bionic_disabled(self):
        settings = ReaderSettings(bionic_enabled=False)
        document = build_document(SAMPLE.encode(), "guide.txt", settings)
        assert all(c.bionic_content is None for c in document.chunks)

    def test_unsupported_file(self):
        with pytest.raises(UnsupportedFormat):
            build_document(b"\x89PNG\r\n\x1a\n\x00\x00", "image.png")

    def test_docx(self, docx_bytes):
        document = build_document(docx_bytes, "report.docx")
        assert document.chunks[0].content == "The first paragraph of the report."

    def test_epub(self, epub_bytes):
        document = build_document(epub_bytes, "novel.epub")
        assert document.title == "novel"
        assert document.chunks[0].content == "Chapter One"

    def test_load_document(self, tmp_path):
        path = tmp_path / "guide.txt"
        path.write_bytes(SAMPLE.encode())
        settings = ReaderSettings(chunk_size=ChunkSize.SMALL)
        document = load_document(path, settings)
        assert document.title == "guide"
        assert len(document.chunks) == 4
        assert document.settings == settings

    def test_rechunk_size_change(self):
        document = build_document(SAMPLE.encode(), "guide.txt")
        smaller = rechunk(document, ReaderSettings(chunk_size=ChunkSize.SMALL))
        assert len(smaller.chunks) > len(document.chunks)
        assert {c.id for c in smaller.chunks}.isdisjoint({c.id for c in document.chunks})
        assert smaller.settings.chunk_size == ChunkSize.SMALL

    def test_rechunk_intensity_only_keeps_ids(self):
        document = build_document(SAMPLE.encode(), "guide.txt")
        settings = ReaderSettings(bionic_intensity=BionicIntensity.STRONG)
        updated = rechunk(document, settings)
        assert [c.id for c in updated.chunks] == [c.id for c in document.chunks]
        assert [c.content for c in updated.chunks] == [c.content for c in document.chunks]
        assert updated.chunks[0].bionic_content != document.chunks[0].bionic_content
