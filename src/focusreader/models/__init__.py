"""Data models for FocusReader."""

from focusreader.models.document import (
    CHUNK_CONFIGS,
    BionicIntensity,
    Chunk,
    ChunkSize,
    ChunkSizeConfig,
    DocumentFormat,
    ReaderSettings,
    ReadingDocument,
)

__all__ = [
    "CHUNK_CONFIGS",
    "BionicIntensity",
    "Chunk",
    "ChunkSize",
    "ChunkSizeConfig",
    "DocumentFormat",
    "ReaderSettings",
    "ReadingDocument",
]
