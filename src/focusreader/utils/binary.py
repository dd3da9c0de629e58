"""Byte classification utilities."""

import re
from pathlib import Path
from typing import Iterator

# Printable ASCII + tab, LF, CR
TEXT_BYTES = frozenset(range(0x20, 0x7F)) | {0x09, 0x0A, 0x0D}

TEXT_RUN_PATTERN = re.compile(rb"[\x09\x0a\x0d\x20-\x7e]+")

# Extensions that are never worth sniffing as plain text
BINARY_EXTENSIONS = {
    # Images
    ".png", ".jpg", ".jpeg", ".gif", ".bmp", ".ico", ".webp", ".svg", ".tiff",
    # Spreadsheets and slides
    ".xls", ".xlsx", ".ppt", ".pptx", ".odt", ".ods",
    # Archives
    ".zip", ".tar", ".gz", ".rar", ".7z", ".bz2", ".xz",
    # Executables
    ".exe", ".dll", ".so", ".dylib", ".bin",
    # Media
    ".mp3", ".mp4", ".avi", ".mov", ".wav", ".flac", ".mkv", ".webm",
    # Fonts
    ".ttf", ".otf", ".woff", ".woff2", ".eot",
}


def is_text_byte(byte: int) -> bool:
    """Check if a byte value is printable ASCII or common whitespace."""
    return byte in TEXT_BYTES


def is_binary_extension(path: str | Path) -> bool:
    """Check if file extension indicates binary content."""
    return Path(path).suffix.lower() in BINARY_EXTENSIONS


def is_binary_content(content: bytes, sample_size: int = 8192) -> bool:
    """Detect if content is binary by checking for null bytes and non-text chars.

    Args:
        content: Raw file content
        sample_size: Number of bytes to sample from the start

    Returns:
        True if content appears to be binary
    """
    if not content:
        return False

    sample = content[:sample_size]

    # Check for null bytes (strong binary indicator)
    if b"\x00" in sample:
        return True

    non_text = sum(1 for byte in sample if not is_text_byte(byte))

    # UTF-8 multibyte sequences count as non-text here, so only reject
    # samples that are mostly outside ASCII and also fail to decode.
    if (non_text / len(sample)) <= 0.30:
        return False
    try:
        sample.decode("utf-8")
    except UnicodeDecodeError as e:
        # A multibyte sequence cut off at the sample boundary is still text
        return e.start < len(sample) - 3
    return False


def iter_text_runs(content: bytes) -> Iterator[str]:
    """Yield maximal runs of text-like bytes, decoded as ASCII."""
    for match in TEXT_RUN_PATTERN.finditer(content):
        yield match.group().decode("ascii")
