"""Conversion between ``HH:MM:SS`` text and whole seconds."""
from __future__ import annotations

import re

from .errors import FormatError

_COMPONENT_RE = re.compile(r"[0-9]+")
_INT_RE = re.compile(r"[+-]?[0-9]+")


def decode(ts: str) -> int:
    """Return the number of seconds in ``HH:MM:SS`` *ts*.

    Components may be unpadded and of any magnitude (``0:90:5`` is fine).
    """
    comps = ts.split(":")
    if len(comps) != 3:
        raise FormatError(f"Expected 3 components in the timestamp {ts!r}")
    for comp in comps:
        if not _COMPONENT_RE.fullmatch(comp):
            raise FormatError(f"Invalid timestamp component {comp!r} in {ts!r}")
    h, m, s = (int(c) for c in comps)
    return h * 3600 + m * 60 + s


def encode(secs: int) -> str:
    if secs < 0:
        raise ValueError(f"cannot format negative duration {secs}")
    h = secs // 3600
    m = secs // 60 % 60
    s = secs % 60
    return f"{h:02d}:{m:02d}:{s:02d}"


def parse_seconds(text: str) -> int:
    """Parse a marker timestamp given either as integer seconds or ``HH:MM:SS``."""
    if _INT_RE.fullmatch(text):
        return int(text)
    if ":" in text:
        return decode(text)
    raise FormatError(f"Invalid marker timestamp {text!r}")


__all__ = ["decode", "encode", "parse_seconds"]
