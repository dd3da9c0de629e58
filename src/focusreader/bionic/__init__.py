"""Bionic reading transform."""

from focusreader.bionic.transformer import (
    BionicSegment,
    apply_bionic_to_chunks,
    bionic_segments,
    bold_length,
    transform_to_bionic,
)

__all__ = [
    "BionicSegment",
    "apply_bionic_to_chunks",
    "bionic_segments",
    "bold_length",
    "transform_to_bionic",
]
