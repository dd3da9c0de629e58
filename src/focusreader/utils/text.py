"""Text normalization."""

import re

_LINE_BREAKS = re.compile(r"\r\n?")
_HORIZONTAL_SPACE = re.compile(r"[ \t]+")
# Three or more newlines, allowing whitespace-only lines in between
_EXCESS_NEWLINES = re.compile(r"\n(?:[^\S\n]*\n){2,}")


def normalize(text: str) -> str:
    """Canonicalize extracted text.

    Steps, in order:
    - CRLF and lone CR become LF
    - runs of spaces/tabs collapse to one space
    - three or more newlines collapse to a paragraph break
    - every line is trimmed
    - the whole result is trimmed

    The result contains no carriage returns, no more than one blank line in
    a row and no leading/trailing whitespace on any line, so normalizing
    twice is the same as normalizing once.
    """
    text = _LINE_BREAKS.sub("\n", text)
    text = _HORIZONTAL_SPACE.sub(" ", text)
    text = _EXCESS_NEWLINES.sub("\n\n", text)
    text = "\n".join(line.strip() for line in text.split("\n"))
    return text.strip()
