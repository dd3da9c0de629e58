"""Best-effort text recovery from undocumented binary containers.

Scans bytes for runs of printable ASCII, keeps the runs long enough and
letter-dense enough to look like prose, and joins them as paragraphs. This
is not a container parser; callers gate it with a magic-number check.
"""

from focusreader.errors import ExtractionEmpty
from focusreader.utils.binary import iter_text_runs

# A run must be longer than this (after trimming) to be kept
MIN_RUN_LENGTH = 20

# A run must have a letter/whitespace share above this to be kept
MIN_LETTER_RATIO = 0.7

RUN_SEPARATOR = "\n\n"


def letter_ratio(run: str) -> float:
    """Share of ASCII letters and whitespace in a run."""
    if not run:
        return 0.0
    letters = sum(1 for ch in run if (ch.isascii() and ch.isalpha()) or ch.isspace())
    return letters / len(run)


def find_text_runs(
    data: bytes,
    min_run_length: int = MIN_RUN_LENGTH,
    min_letter_ratio: float = MIN_LETTER_RATIO,
) -> list[str]:
    """Return the trimmed text-like runs that pass both filters, in order.

    Args:
        data: Raw file content
        min_run_length: Runs of this length or shorter are dropped
        min_letter_ratio: Runs at or below this letter share are dropped

    Returns:
        List of retained runs
    """
    runs = [run.strip() for run in iter_text_runs(data)]
    runs = [run for run in runs if len(run) > min_run_length]
    return [run for run in runs if letter_ratio(run) > min_letter_ratio]


def recover_text(
    data: bytes,
    min_length: int = 1,
    min_run_length: int = MIN_RUN_LENGTH,
    min_letter_ratio: float = MIN_LETTER_RATIO,
) -> str:
    """Recover readable text from arbitrary bytes.

    Raises:
        ExtractionEmpty: If the joined runs are shorter than min_length
    """
    text = RUN_SEPARATOR.join(find_text_runs(data, min_run_length, min_letter_ratio))
    if len(text) < min_length:
        raise ExtractionEmpty(
            f"Recovered {len(text)} characters of text, need at least {min_length}"
        )
    return text
