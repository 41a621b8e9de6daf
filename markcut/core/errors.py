"""Exceptions raised while parsing markers and rendering chunks."""
from __future__ import annotations


class MarkcutError(RuntimeError):
    """Base class for every error the CLI reports and exits on."""


class FormatError(MarkcutError, ValueError):
    """A timestamp string is not ``HH:MM:SS`` or a plain integer."""


class RecordError(MarkcutError):
    """A marker record has the wrong shape."""


class OutOfChunkIgnoreError(MarkcutError):
    def __init__(self, timestamp: int) -> None:
        super().__init__(f"Out of chunk ignored marker {timestamp}")
        self.timestamp = timestamp


class UnclosedChunkError(MarkcutError):
    def __init__(self, start: int) -> None:
        super().__init__(
            f"Unclosed chunk detected at {start}! Please make sure that there "
            "is an even amount of not ignored markers"
        )
        self.start = start


class MarkerOrderError(MarkcutError):
    """A marker lies before the start of the chunk it is measured against."""


class ChunkIndexError(MarkcutError):
    def __init__(self, index: int, count: int) -> None:
        super().__init__(
            f"{index} is incorrect chunk number. There is only {count} of them."
        )
        self.index = index
        self.count = count


class ExtractionError(MarkcutError):
    """ffmpeg failed to cut a chunk out of the input video."""

    def __init__(self, chunk, cause: Exception) -> None:
        super().__init__(f"Failed to cut {chunk.name}: {cause}")
        self.chunk = chunk
        self.cause = cause


class ConcatError(MarkcutError):
    def __init__(self, list_path: str, cause: Exception) -> None:
        super().__init__(f"Failed to concatenate chunks from {list_path}: {cause}")
        self.list_path = list_path
        self.cause = cause


__all__ = [
    "MarkcutError",
    "FormatError",
    "RecordError",
    "OutOfChunkIgnoreError",
    "UnclosedChunkError",
    "MarkerOrderError",
    "ChunkIndexError",
    "ExtractionError",
    "ConcatError",
]
