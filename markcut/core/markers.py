"""Turn a marker CSV into chunks.

Markers alternate start/stop.  A row whose second field is ``ignore`` is an
annotation inside the chunk that is currently open and never valid outside
one::

    10,
    20,
    25,ignore
    30,

gives ``chunk-00`` 10–20 and ``chunk-01`` 20–30 with 25 ignored.
"""
from __future__ import annotations

import csv
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Tuple

from .errors import (
    MarkerOrderError,
    OutOfChunkIgnoreError,
    RecordError,
    UnclosedChunkError,
)
from .timestamps import parse_seconds

IGNORE_FLAG = "ignore"
CHUNK_EXT = ".mp4"


@dataclass(frozen=True)
class Chunk:
    start: int
    end: int
    ignored: Tuple[int, ...] = ()
    name: str = ""

    @property
    def filename(self) -> str:
        return f"{self.name}{CHUNK_EXT}"

    def offset(self, t: int) -> int:
        """Seconds from the chunk start to *t*."""
        if t < self.start:
            raise MarkerOrderError(
                f"{self.name}: marker {t} is before chunk start {self.start}"
            )
        return t - self.start

    @property
    def duration(self) -> int:
        return self.offset(self.end)


@dataclass
class _OpenChunk:
    start: int
    ignored: List[int] = field(default_factory=list)

    def close(self, end: int, index: int) -> Chunk:
        return Chunk(self.start, end, tuple(self.ignored), f"chunk-{index:02d}")


def parse_markers(records: Iterable[Sequence[str]], delay: int = 0) -> list[Chunk]:
    """Run the start/stop state machine over *records*.

    ``delay`` seconds are added to every timestamp before it is used.
    """
    chunks: list[Chunk] = []
    current: Optional[_OpenChunk] = None

    for record in records:
        if len(record) == 0:
            raise RecordError("CSV record must have at least one field")
        timestamp = parse_seconds(record[0]) + delay
        ignored = len(record) > 1 and record[1] == IGNORE_FLAG

        if current is None:
            if ignored:
                raise OutOfChunkIgnoreError(timestamp)
            current = _OpenChunk(timestamp)
        elif ignored:
            current.ignored.append(timestamp)
        else:
            chunks.append(current.close(timestamp, len(chunks)))
            current = None

    if current is not None:
        raise UnclosedChunkError(current.start)
    return chunks


def read_records(path: str) -> list[list[str]]:
    """Return the non-blank rows of the CSV at *path*.

    Every row must have as many fields as the first one.
    """
    records: list[list[str]] = []
    width: Optional[int] = None
    with open(path, newline="", encoding="utf-8") as f:
        reader = csv.reader(f)
        try:
            for row in reader:
                if not row:
                    continue
                if width is None:
                    width = len(row)
                elif len(row) != width:
                    raise RecordError(
                        f"{path}:{reader.line_num}: wrong number of fields "
                        f"(expected {width}, got {len(row)})"
                    )
                records.append(row)
        except (UnicodeDecodeError, csv.Error) as exc:
            raise RecordError(
                f"{path}: unreadable record after line {reader.line_num}: {exc}"
            ) from exc
    return records



def load_chunks(path: str, delay: int = 0) -> list[Chunk]:
    return parse_markers(read_records(path), delay)


__all__ = ["Chunk", "parse_markers", "read_records", "load_chunks", "IGNORE_FLAG"]
