"""Cutting chunks out of the input video and stitching them with FFmpeg."""
from __future__ import annotations

import os
import subprocess
from typing import Sequence

from dotenv import load_dotenv

from .errors import ChunkIndexError, ConcatError, ExtractionError
from .markers import Chunk
from .timestamps import encode

load_dotenv()

FFMPEG = os.getenv("MARKCUT_FFMPEG", "ffmpeg")
CONCAT_LIST = "ourlist.txt"
OUTPUT_FILE = "output.mp4"


def _ffmpeg(args: list[str], force: bool) -> None:
    cmd = [FFMPEG, "-v", "error"]
    if force:
        cmd.append("-y")
    subprocess.run([*cmd, *args], check=True)


def cut_chunk(input_video: str, chunk: Chunk, force: bool = False) -> None:
    """Copy ``chunk.duration`` seconds from ``chunk.start`` into ``chunk.filename``."""
    try:
        _ffmpeg(
            [
                "-ss",
                str(chunk.start),
                "-i",
                input_video,
                "-c",
                "copy",
                "-t",
                str(chunk.duration),
                chunk.filename,
            ],
            force,
        )
    except (subprocess.CalledProcessError, OSError) as exc:
        raise ExtractionError(chunk, exc) from exc


def write_concat_list(chunks: Sequence[Chunk], list_path: str = CONCAT_LIST) -> None:
    """Write the ffmpeg concat demuxer list for *chunks*.

    Every chunk is listed even if cutting it failed; the concat step then
    reports the missing file.
    """
    with open(list_path, "w") as f:
        for chunk in chunks:
            f.write(f"file '{chunk.filename}'\n")


def concat_chunks(
    list_path: str = CONCAT_LIST, out_file: str = OUTPUT_FILE, force: bool = False
) -> None:
    try:
        _ffmpeg(
            ["-f", "concat", "-safe", "0", "-i", list_path, "-c", "copy", out_file],
            force,
        )
    except (subprocess.CalledProcessError, OSError) as exc:
        raise ConcatError(list_path, exc) from exc


def render_final(
    input_video: str,
    chunks: Sequence[Chunk],
    out_file: str = OUTPUT_FILE,
    list_path: str = CONCAT_LIST,
    force: bool = False,
) -> list[Chunk]:
    """Cut every chunk, then concatenate them into *out_file*.

    A chunk that fails to cut is reported and skipped.  Returns the failed
    chunks.
    """
    failed: list[Chunk] = []
    for chunk in chunks:
        print(f"🎬  {chunk.name}  {chunk.start}–{chunk.end}")
        try:
            cut_chunk(input_video, chunk, force)
        except ExtractionError as exc:
            print(f"⚠️  WARNING: {exc}")
            failed.append(chunk)

    write_concat_list(chunks, list_path)
    concat_chunks(list_path, out_file, force)
    print(f"🏁  {out_file} assembled ({len(chunks) - len(failed)}/{len(chunks)} chunks)")
    return failed


def render_chunk(
    input_video: str, chunks: Sequence[Chunk], index: int, force: bool = False
) -> Chunk:
    """Cut the single chunk at *index* and list its ignored markers."""
    if not 0 <= index < len(chunks):
        raise ChunkIndexError(index, len(chunks))

    chunk = chunks[index]
    cut_chunk(input_video, chunk, force)

    print(f"{chunk.filename} is rendered!")
    if chunk.ignored:
        print("Ignored timestamps:")
        for ignored in chunk.ignored:
            print(f"  {encode(chunk.offset(ignored))}")
    return chunk


__all__ = [
    "cut_chunk",
    "write_concat_list",
    "concat_chunks",
    "render_final",
    "render_chunk",
    "CONCAT_LIST",
    "OUTPUT_FILE",
]
