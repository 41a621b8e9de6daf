"""Highlights on the timeline of the concatenated output video."""
from __future__ import annotations

from typing import Iterable, List, NamedTuple

from .markers import Chunk
from .timestamps import encode

IGNORED = "ignored"
CUT = "cut"


class Highlight(NamedTuple):
    timestamp: str
    message: str


def derive_highlights(chunks: Iterable[Chunk]) -> List[Highlight]:
    """Return ignored markers and cut points shifted onto the output timeline.

    Chunks are laid end to end, so a marker ``t`` inside a chunk lands at the
    total duration of the previous chunks plus ``t - start``.  Ignored markers
    do not shorten a chunk.
    """
    secs = 0
    highlights: List[Highlight] = []
    for chunk in chunks:
        for ignored in chunk.ignored:
            highlights.append(Highlight(encode(secs + chunk.offset(ignored)), IGNORED))
        highlights.append(Highlight(encode(secs + chunk.duration), CUT))
        secs += chunk.duration
    return highlights


def format_highlights(highlights: Iterable[Highlight]) -> List[str]:
    return [f"{h.timestamp} - {h.message}" for h in highlights]


__all__ = ["Highlight", "derive_highlights", "format_highlights", "IGNORED", "CUT"]
