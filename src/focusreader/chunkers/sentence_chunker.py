"""Sentence-aware chunking into bounded reading units."""

import re
import uuid
from typing import Optional

from focusreader.bionic import transform_to_bionic
from focusreader.models import BionicIntensity, Chunk, ChunkSizeConfig

PARAGRAPH_BREAK = re.compile(r"\n\s*\n")

# Text up to a run of terminators followed by whitespace or end of text;
# unterminated trailing text forms the last sentence.
SENTENCE = re.compile(r"\S.*?(?:[.!?]+(?=\s|$)|$)", re.DOTALL)

# Clause delimiters are kept as their own fragments
CLAUSE_BOUNDARY = re.compile(r"([,;—–-]\s*)")


def split_paragraphs(text: str) -> list[str]:
    """Split on blank lines, dropping empty paragraphs."""
    paragraphs = (p.strip() for p in PARAGRAPH_BREAK.split(text))
    return [p for p in paragraphs if p]


def split_sentences(paragraph: str) -> list[str]:
    """Split a paragraph on ., ! and ? followed by whitespace.

    Abbreviations such as "Dr." are not special-cased.
    """
    sentences = (s.strip() for s in SENTENCE.findall(paragraph))
    return [s for s in sentences if s]


def split_clauses(sentence: str) -> list[str]:
    """Split a sentence at commas, semicolons and dashes, keeping delimiters."""
    return [part for part in CLAUSE_BOUNDARY.split(sentence) if part]


class SentenceChunker:
    """Default chunking: paragraphs -> sentences -> greedy bounded chunks.

    - Never merges paragraphs
    - Never splits a sentence, unless it alone exceeds the character
      ceiling; then it is packed clause by clause and the last clause group
      seeds the next chunk
    """

    def chunk(
        self,
        text: str,
        config: ChunkSizeConfig,
        intensity: Optional[BionicIntensity] = None,
    ) -> list[Chunk]:
        """Split normalized text into chunks.

        Args:
            text: Normalized text
            config: Sentence and character ceilings
            intensity: Bionic intensity to annotate with, or None to skip

        Returns:
            Chunks in document order
        """
        contents: list[tuple[str, int]] = []  # (content, paragraph_index)

        for paragraph_index, paragraph in enumerate(split_paragraphs(text)):
            for content in self._chunk_paragraph(paragraph, config):
                contents.append((content, paragraph_index))

        chunks = []
        for idx, (content, paragraph_index) in enumerate(contents):
            bionic = transform_to_bionic(content, intensity) if intensity else None
            chunks.append(
                Chunk(
                    id=self._make_id(idx),
                    content=content,
                    bionic_content=bionic,
                    paragraph_index=paragraph_index,
                )
            )

        return chunks

    def _chunk_paragraph(self, paragraph: str, config: ChunkSizeConfig) -> list[str]:
        """Greedily pack one paragraph's sentences into chunk texts."""
        completed: list[str] = []
        buffer: list[str] = []

        for sentence in split_sentences(paragraph):
            if buffer and self._would_overflow(buffer, sentence, config):
                completed.append(" ".join(buffer))
                buffer = []

            if not buffer and len(sentence) > config.max_characters:
                pieces = self._pack_clauses(sentence, config.max_characters)
                completed.extend(pieces[:-1])
                # The remainder stays open for the following sentences
                buffer = pieces[-1:]
            else:
                buffer.append(sentence)

        if buffer:
            completed.append(" ".join(buffer))

        return completed

    @staticmethod
    def _would_overflow(buffer: list[str], sentence: str, config: ChunkSizeConfig) -> bool:
        if len(buffer) >= config.max_sentences:
            return True
        length = sum(len(s) for s in buffer) + len(buffer) + len(sentence)
        return length > config.max_characters

    @staticmethod
    def _pack_clauses(sentence: str, max_characters: int) -> list[str]:
        """Pack clause fragments greedily under the character budget.

        A fragment that alone exceeds the budget becomes its own piece.
        """
        pieces = []
        working = ""

        for clause in split_clauses(sentence):
            if len(working) + len(clause) <= max_characters:
                working += clause
            else:
                if working.strip():
                    pieces.append(working.strip())
                working = clause

        if working.strip():
            pieces.append(working.strip())

        return pieces

    @staticmethod
    def _make_id(index: int) -> str:
        return f"chunk-{index}-{uuid.uuid4().hex[:12]}"
