"""Errors raised while turning a file into reading chunks."""

from typing import Optional


class ReaderError(Exception):
    """Base class for all extraction errors.

    Carries the human-readable label of the format involved, if known.
    """

    def __init__(self, message: str, format_name: Optional[str] = None):
        super().__init__(message)
        self.format_name = format_name


class UnsupportedFormat(ReaderError):
    """No extractor or heuristic applies to the input."""


class ExtractionFailed(ReaderError):
    """The underlying parser raised, or the file failed its magic check."""


class ExtractionEmpty(ReaderError):
    """Extraction produced less text than required."""


class NoTextLayer(ExtractionEmpty):
    """The file is well-formed but carries no recoverable text."""


class EmptyResult(ExtractionEmpty):
    """Normalized text is below the document minimum."""
