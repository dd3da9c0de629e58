"""Protocol for format-specific text extractors."""

from typing import Protocol, runtime_checkable

from focusreader.models import DocumentFormat


@runtime_checkable
class Extractor(Protocol):
    """Protocol for format-specific text extractors.

    Implementations turn the raw bytes of one file into raw text, in source
    order. Uses structural subtyping - no inheritance required.
    """

    @property
    def formats(self) -> tuple[DocumentFormat, ...]:
        """Return the formats this extractor handles."""
        ...

    @property
    def format_name(self) -> str:
        """Return a human-readable label for error messages (e.g., 'PDF')."""
        ...

    @property
    def min_text_length(self) -> int:
        """Return the minimum stripped text length accepted from this format."""
        ...

    def extract(self, data: bytes) -> str:
        """Extract raw text from file bytes."""
        ...
