"""Protocol definitions for extensible components."""

from focusreader.protocols.chunker import ChunkingStrategy
from focusreader.protocols.extractor import Extractor

__all__ = ["Extractor", "ChunkingStrategy"]
