"""Reading pipeline: bytes -> normalized text -> chunks -> bionic chunks.

Every stage is a pure function of its inputs; the only I/O is reading the
file in ``load_document``.
"""

import logging
from dataclasses import replace
from pathlib import Path
from typing import Iterable, Optional

from focusreader.bionic import apply_bionic_to_chunks, transform_to_bionic
from focusreader.chunkers import SentenceChunker
from focusreader.errors import (
    EmptyResult,
    ExtractionFailed,
    NoTextLayer,
    ReaderError,
    UnsupportedFormat,
)
from focusreader.extractors import SUPPORTED_FORMATS_TEXT, detect_format, get_extractor
from focusreader.models import (
    BionicIntensity,
    Chunk,
    ChunkSizeConfig,
    DocumentFormat,
    ReaderSettings,
    ReadingDocument,
)
from focusreader.protocols import ChunkingStrategy
from focusreader.utils.text import normalize

logger = logging.getLogger(__name__)

# Normalized text shorter than this is not worth reading
MIN_DOCUMENT_LENGTH = 10

_default_chunker = SentenceChunker()


def extract(data: bytes, format_hint: Optional[DocumentFormat | str]) -> str:
    """Extract and normalize the text of one file.

    Args:
        data: Raw file content
        format_hint: Detected format, or None if detection failed

    Returns:
        Normalized text

    Raises:
        UnsupportedFormat: No extractor handles the format
        ExtractionFailed: The parser raised or the magic check failed
        NoTextLayer: The extractor produced less text than it accepts
        EmptyResult: Normalized text is shorter than MIN_DOCUMENT_LENGTH
    """
    extractor = get_extractor(format_hint) if format_hint else None
    if extractor is None:
        raise UnsupportedFormat(
            f"Unsupported file format. Supported formats: {SUPPORTED_FORMATS_TEXT}"
        )

    label = DocumentFormat(format_hint).label
    logger.debug(f"Extracting {label} ({len(data)} bytes)")

    try:
        raw = extractor.extract(data)
    except ReaderError as e:
        # Extractors can serve several formats; report the requested one
        e.format_name = label
        raise
    except Exception as e:
        raise ExtractionFailed(f"Failed to parse {label} file: {e}", label) from e

    if len(raw.strip()) < extractor.min_text_length:
        raise NoTextLayer(
            f"No text layer found in this {label} file. "
            "The file may be image-based, encrypted, or corrupted.",
            label,
        )

    text = normalize(raw)
    logger.debug(f"Extracted {len(raw)} characters, {len(text)} after normalizing")

    if len(text) < MIN_DOCUMENT_LENGTH:
        raise EmptyResult(
            "Could not extract meaningful text from this file. "
            "The file may be image-based, encrypted, or corrupted.",
            label,
        )

    return text


def segment(
    text: str,
    config: ChunkSizeConfig,
    intensity: Optional[BionicIntensity] = None,
    chunker: Optional[ChunkingStrategy] = None,
) -> list[Chunk]:
    """Split normalized text into chunks, annotating them if intensity is given."""
    chunks = (chunker or _default_chunker).chunk(text, config, intensity)
    logger.debug(f"Segmented {len(text)} characters into {len(chunks)} chunks")
    return chunks


def annotate(content: str, intensity: BionicIntensity) -> str:
    """Bionic markup for one chunk's content."""
    return transform_to_bionic(content, intensity)


def derive_title(filename: str) -> str:
    """Title from a file name: basename without its last extension."""
    name = Path(filename).name
    stem, dot, _ = name.rpartition(".")
    return stem if dot and stem else name


def build_document(
    data: bytes,
    filename: str,
    settings: Optional[ReaderSettings] = None,
    mime_type: Optional[str] = None,
) -> ReadingDocument:
    """Run the whole pipeline on one file's bytes.

    Args:
        data: Raw file content
        filename: Original file name, for format detection and the title
        settings: Reader settings (defaults if omitted)
        mime_type: Optional MIME type reported by the host

    Returns:
        The document with its chunks in reading order
    """
    settings = settings or ReaderSettings()
    fmt = detect_format(filename, mime_type, data)
    text = extract(data, fmt)
    chunks = segment(text, settings.chunk_size.config, settings.intensity)

    logger.info(f"Loaded {filename}: {fmt.label}, {len(chunks)} chunks")
    return ReadingDocument(
        title=derive_title(filename),
        format=fmt,
        text=text,
        chunks=chunks,
        settings=settings,
    )


def load_document(path: Path | str, settings: Optional[ReaderSettings] = None) -> ReadingDocument:
    """Read a file from disk and run the pipeline on it."""
    path = Path(path)
    return build_document(path.read_bytes(), path.name, settings)


def reannotate(chunks: Iterable[Chunk], intensity: Optional[BionicIntensity]) -> list[Chunk]:
    """New chunk values with bionic content recomputed from plain content."""
    return apply_bionic_to_chunks(chunks, intensity)


def rechunk(document: ReadingDocument, settings: ReaderSettings) -> ReadingDocument:
    """Apply new settings to a document.

    A chunk size change re-segments the text (new ids); otherwise only the
    bionic content is recomputed.
    """
    if settings.chunk_size != document.settings.chunk_size:
        chunks = segment(document.text, settings.chunk_size.config, settings.intensity)
    else:
        chunks = reannotate(document.chunks, settings.intensity)
    return replace(document, chunks=chunks, settings=settings)
