"""FocusReader - bounded reading chunks with bionic emphasis."""

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
    Chunk,
    ChunkSize,
    ChunkSizeConfig,
    DocumentFormat,
    ReaderSettings,
    ReadingDocument,
)
from focusreader.pipeline import (
    annotate,
    build_document,
    extract,
    load_document,
    rechunk,
    segment,
)

__version__ = "0.1.0"

__all__ = [
    "BionicIntensity",
    "Chunk",
    "ChunkSize",
    "ChunkSizeConfig",
    "DocumentFormat",
    "ReaderSettings",
    "ReadingDocument",
    "ReaderError",
    "UnsupportedFormat",
    "ExtractionFailed",
    "ExtractionEmpty",
    "NoTextLayer",
    "EmptyResult",
    "annotate",
    "build_document",
    "extract",
    "load_document",
    "rechunk",
    "segment",
]
