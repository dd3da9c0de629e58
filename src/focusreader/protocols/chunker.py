"""Protocol for text chunking strategies."""

from typing import Optional, Protocol, runtime_checkable

from focusreader.models import BionicIntensity, Chunk, ChunkSizeConfig


@runtime_checkable
class ChunkingStrategy(Protocol):
    """Protocol for text chunking strategies."""

    def chunk(
        self,
        text: str,
        config: ChunkSizeConfig,
        intensity: Optional[BionicIntensity] = None,
    ) -> list[Chunk]:
        """Split normalized text into ordered chunks."""
        ...
