"""Utility functions for FocusReader."""

from focusreader.utils.binary import (
    is_binary_content,
    is_binary_extension,
    is_text_byte,
    iter_text_runs,
)
from focusreader.utils.text import normalize

__all__ = [
    "is_binary_content",
    "is_binary_extension",
    "is_text_byte",
    "iter_text_runs",
    "normalize",
]
