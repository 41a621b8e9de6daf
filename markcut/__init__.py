"""Markcut package."""

from .core import (
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
