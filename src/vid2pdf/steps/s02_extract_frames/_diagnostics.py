"""Classification of ffmpeg stderr output.

ffmpeg writes its banner, stream info and progress to stderr even when it
succeeds, so a non-empty stderr alone says nothing. The lists below are the
maintained record of what is known to be harmless and what is known to be
fatal. Fatal patterns are checked first. Add new entries here, never in the
extraction step itself.
"""

from __future__ import annotations

import enum
import re


BENIGN_PATTERNS: tuple[re.Pattern[str], ...] = (
    # Final summary line for image2 muxer outputs.
    re.compile(r"muxing overhead: unknown"),
    re.compile(r"muxing overhead: -?[\d.]+%"),
    # fps filter emitted nothing (clip shorter than one sample); zero frames is a success.
    re.compile(r"Output file is empty, nothing was encoded"),
)

FATAL_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"No such file or directory"),
    re.compile(r"Invalid data found when processing input"),
    re.compile(r"Conversion failed!"),
    re.compile(r"Error opening (input|output)"),
    re.compile(r"does not contain any stream"),
    re.compile(r"Permission denied"),
)


class Verdict(str, enum.Enum):
    CLEAN = "clean"
    BENIGN = "benign"
    UNKNOWN = "unknown"
    FATAL = "fatal"


def classify_diagnostics(stderr: str) -> tuple[Verdict, str | None]:
    """Return the verdict for ``stderr`` and the line that decided it."""
    if not stderr.strip():
        return Verdict.CLEAN, None

    for pattern in FATAL_PATTERNS:
        match = pattern.search(stderr)
        if match:
            return Verdict.FATAL, _line_of(stderr, match.start())

    for pattern in BENIGN_PATTERNS:
        match = pattern.search(stderr)
        if match:
            return Verdict.BENIGN, _line_of(stderr, match.start())

    return Verdict.UNKNOWN, stderr.strip().splitlines()[-1]


def _line_of(text: str, pos: int) -> str:
    start = text.rfind("\n", 0, pos) + 1
    end = text.find("\n", pos)
    return text[start:] if end == -1 else text[start:end]
