"""Core data models for reading documents and chunks."""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional


class DocumentFormat(str, Enum):
    """Formats the extraction dispatch knows about."""

    PDF = "pdf"
    DOCX = "docx"
    DOC = "doc"
    EPUB = "epub"
    MOBI = "mobi"
    AZW3 = "azw3"
    DJVU = "djvu"
    TXT = "txt"

    @property
    def label(self) -> str:
        return self.value.upper()


@dataclass(frozen=True)
class ChunkSizeConfig:
    """Sentence and character ceilings for a single chunk."""

    max_sentences: int
    max_characters: int

    def __post_init__(self) -> None:
        if self.max_sentences < 1:
            raise ValueError(f"max_sentences must be >= 1, got {self.max_sentences}")
        if self.max_characters <= 0:
            raise ValueError(f"max_characters must be > 0, got {self.max_characters}")


class ChunkSize(str, Enum):
    """Chunk size presets."""

    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"

    @property
    def config(self) -> ChunkSizeConfig:
        return CHUNK_CONFIGS[self]


CHUNK_CONFIGS: dict[ChunkSize, ChunkSizeConfig] = {
    ChunkSize.SMALL: ChunkSizeConfig(max_sentences=1, max_characters=150),
    ChunkSize.MEDIUM: ChunkSizeConfig(max_sentences=2, max_characters=300),
    ChunkSize.LARGE: ChunkSizeConfig(max_sentences=4, max_characters=500),
}


class BionicIntensity(str, Enum):
    """How much of each word gets bolded."""

    LIGHT = "light"
    MEDIUM = "medium"
    STRONG = "strong"

    @property
    def percent(self) -> int:
        return BIONIC_PERCENTS[self]

    @property
    def ratio(self) -> float:
        return self.percent / 100


# Whole percentages keep bold lengths exact (10 letters at 30% is 3, not 4)
BIONIC_PERCENTS: dict[BionicIntensity, int] = {
    BionicIntensity.LIGHT: 30,
    BionicIntensity.MEDIUM: 50,
    BionicIntensity.STRONG: 70,
}


@dataclass(frozen=True)
class Chunk:
    """A bounded reading unit.

    ``bionic_content`` is None when bionic reading was disabled at
    generation time.
    """

    id: str
    content: str
    bionic_content: Optional[str] = None
    paragraph_index: int = 0

    def with_bionic(self, bionic_content: Optional[str]) -> "Chunk":
        """Return a copy carrying new bionic content (same id and content)."""
        return replace(self, bionic_content=bionic_content)


_FLAG_VALUES = {"true": True, "1": True, "yes": True, "false": False, "0": False, "no": False}


def _parse_flag(value) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in _FLAG_VALUES:
        return _FLAG_VALUES[value.strip().lower()]
    raise ValueError(f"Expected a boolean flag, got {value!r}")


@dataclass(frozen=True)
class ReaderSettings:
    """Configuration consumed by the chunker and the bionic transformer."""

    chunk_size: ChunkSize = ChunkSize.MEDIUM
    bionic_intensity: BionicIntensity = BionicIntensity.MEDIUM
    bionic_enabled: bool = True

    @classmethod
    def from_mapping(cls, values: dict) -> "ReaderSettings":
        """Merge saved values over the defaults, ignoring unknown keys.

        Raises:
            ValueError: If a size or intensity value is not a known preset,
                or bionic_enabled is not a boolean or "true"/"false"
        """
        defaults = cls()
        return cls(
            chunk_size=ChunkSize(values.get("chunk_size", defaults.chunk_size)),
            bionic_intensity=BionicIntensity(
                values.get("bionic_intensity", defaults.bionic_intensity)
            ),
            bionic_enabled=_parse_flag(values.get("bionic_enabled", defaults.bionic_enabled)),
        )

    @property
    def intensity(self) -> Optional[BionicIntensity]:
        """The intensity to annotate with, or None when bionic is off."""
        return self.bionic_intensity if self.bionic_enabled else None


@dataclass(frozen=True)
class ReadingDocument:
    """A document ready for reading: title, normalized text and chunks."""

    title: str
    format: DocumentFormat
    text: str
    chunks: list[Chunk] = field(default_factory=list)
    settings: ReaderSettings = field(default_factory=ReaderSettings)

    @property
    def paragraph_count(self) -> int:
        if not self.chunks:
            return 0
        return len({c.paragraph_index for c in self.chunks})
