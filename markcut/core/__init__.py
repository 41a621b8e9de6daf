"""Core marker parsing and rendering package."""

from . import (
    errors,
    timestamps,
    markers,
    highlights,
    video_editing,
)

__all__ = [
    "errors",
    "timestamps",
    "markers",
    "highlights",
    "video_editing",
]
