"""Bionic reading transform.

Bolds a leading fraction of every word so the eye gets a fixation point
and the brain completes the rest.
"""

import re
from dataclasses import dataclass
from typing import Iterable, Literal, Optional

from focusreader.models import BionicIntensity, Chunk

WHITESPACE_SPLIT = re.compile(r"(\s+)")
WORD_PARTS = re.compile(r"^(\W*)(.*?)(\W*)$", re.DOTALL)

BOLD_OPEN = "<b>"
BOLD_CLOSE = "</b>"

SegmentKind = Literal["bold", "normal", "space"]


@dataclass(frozen=True)
class BionicSegment:
    """A run of output text and how to render it."""

    kind: SegmentKind
    text: str


def bold_length(word_length: int, intensity: BionicIntensity) -> int:
    """Number of leading characters to bold for a word core.

    ceil(word_length * ratio), never less than 1 for a non-empty word.
    """
    if word_length <= 0:
        return 0
    return max(1, -(-word_length * intensity.percent // 100))


def split_word(token: str) -> tuple[str, str, str]:
    """Split a token into (leading punctuation, core, trailing punctuation)."""
    leading, core, trailing = WORD_PARTS.match(token).groups()
    return leading, core, trailing


def _tokens(text: str) -> Iterable[str]:
    return (token for token in WHITESPACE_SPLIT.split(text) if token)


def transform_word(token: str, intensity: BionicIntensity) -> str:
    """Wrap the leading part of a single token's word core in bold markers."""
    leading, core, trailing = split_word(token)
    if not core:
        return token
    n = bold_length(len(core), intensity)
    return f"{leading}{BOLD_OPEN}{core[:n]}{BOLD_CLOSE}{core[n:]}{trailing}"


def transform_to_bionic(
    text: str, intensity: BionicIntensity = BionicIntensity.MEDIUM
) -> str:
    """Transform text into bionic reading markup.

    Whitespace runs are kept verbatim; every other token gets its word core
    partly wrapped in ``<b>``...``</b>``. Pure punctuation passes through.
    """
    intensity = BionicIntensity(intensity)
    return "".join(
        token if token.isspace() else transform_word(token, intensity)
        for token in _tokens(text)
    )


def bionic_segments(
    text: str, intensity: BionicIntensity = BionicIntensity.MEDIUM
) -> list[BionicSegment]:
    """Transform text into typed segments for renderers without markup.

    Joining every segment's text gives back the input unchanged.
    """
    intensity = BionicIntensity(intensity)
    segments: list[BionicSegment] = []

    for token in _tokens(text):
        if token.isspace():
            segments.append(BionicSegment("space", token))
            continue

        leading, core, trailing = split_word(token)
        if not core:
            segments.append(BionicSegment("normal", token))
            continue

        n = bold_length(len(core), intensity)
        if leading:
            segments.append(BionicSegment("normal", leading))
        segments.append(BionicSegment("bold", core[:n]))
        if core[n:] or trailing:
            segments.append(BionicSegment("normal", core[n:] + trailing))

    return segments


def apply_bionic_to_chunks(
    chunks: Iterable[Chunk], intensity: Optional[BionicIntensity]
) -> list[Chunk]:
    """Recompute bionic content from each chunk's plain content.

    Passing None clears the bionic content. Ids and content are kept.
    """
    return [
        chunk.with_bionic(transform_to_bionic(chunk.content, intensity) if intensity else None)
        for chunk in chunks
    ]
