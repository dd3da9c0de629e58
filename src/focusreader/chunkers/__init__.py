"""Chunking strategies."""

from focusreader.chunkers.sentence_chunker import (
    SentenceChunker,
    split_clauses,
    split_paragraphs,
    split_sentences,
)

__all__ = ["SentenceChunker", "split_clauses", "split_paragraphs", "split_sentences"]
