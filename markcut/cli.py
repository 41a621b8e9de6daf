"""Typer-based command line interface for markcut."""

from __future__ import annotations
from contextlib import contextmanager
from typing import Iterator, Optional
import sys
import typer
from .core import highlights, markers, video_editing
from .core.errors import MarkcutError
from .core.markers import Chunk

app = typer.Typer(help="Cut a video along the markers of a CSV file", add_completion=False)

SUBCOMMANDS = {
    "final": "Render the final video",
    "chunk": "Render specific chunk of the final video",
    "inspect": "Inspect markers in the CSV file",
}

CSV_HELP = "Path to the CSV file with markers"
INPUT_HELP = "Path to the input video file"
DELAY_HELP = "Delay of markers in seconds"
FORCE_HELP = "Pass -y to ffmpeg"


def usage() -> None:
    typer.echo("Usage: markcut <SUBCOMMAND> [OPTIONS]")
    typer.echo("SUBCOMMANDS:")
    for name, text in SUBCOMMANDS.items():
        typer.echo(f"    {name:<10} {text}")


def _fail(message: str) -> None:
    typer.echo(f"❌  ERROR: {message}", err=True)
    raise typer.Exit(1)


def _require(ctx: typer.Context, value: Optional[str], flag: str) -> str:
    if not value:
        typer.echo(ctx.get_help())
        _fail(f"No {flag} file is provided")
    return value


@contextmanager
def _fatal_errors() -> Iterator[None]:
    """Report library errors and exit with status 1 instead of a traceback."""
    try:
        yield
    except (MarkcutError, OSError) as exc:
        _fail(str(exc))


def _print_highlights(chunks: list[Chunk]) -> None:
    typer.echo("Highlights:")
    for line in highlights.format_highlights(highlights.derive_highlights(chunks)):
        typer.echo(line)


@app.command()
def final(
    ctx: typer.Context,
    csv: Optional[str] = typer.Option(None, "-csv", "--csv", help=CSV_HELP),
    input_video: Optional[str] = typer.Option(None, "-input", "--input", help=INPUT_HELP),
    delay: int = typer.Option(0, "-delay", "--delay", envvar="MARKCUT_DELAY", help=DELAY_HELP),
    force: bool = typer.Option(False, "-y", help=FORCE_HELP),
    output: str = typer.Option(
        video_editing.OUTPUT_FILE, "-output", "--output", help="Path to the rendered video"
    ),
):
    """Render the final video."""
    csv = _require(ctx, csv, "-csv")
    input_video = _require(ctx, input_video, "-input")

    with _fatal_errors():
        chunks = markers.load_chunks(csv, delay)
        video_editing.render_final(input_video, chunks, output, force=force)
        _print_highlights(chunks)


@app.command()
def chunk(
    ctx: typer.Context,
    csv: Optional[str] = typer.Option(None, "-csv", "--csv", help=CSV_HELP),
    input_video: Optional[str] = typer.Option(None, "-input", "--input", help=INPUT_HELP),
    delay: int = typer.Option(0, "-delay", "--delay", envvar="MARKCUT_DELAY", help=DELAY_HELP),
    index: int = typer.Option(0, "-chunk", "--chunk", help="Chunk number to render"),
    force: bool = typer.Option(False, "-y", help=FORCE_HELP),
):
    """Render specific chunk of the final video."""
    csv = _require(ctx, csv, "-csv")
    input_video = _require(ctx, input_video, "-input")

    with _fatal_errors():
        chunks = markers.load_chunks(csv, delay)
        video_editing.render_chunk(input_video, chunks, index, force=force)


@app.command()
def inspect(
    ctx: typer.Context,
    csv: Optional[str] = typer.Option(None, "-csv", "--csv", help=CSV_HELP),
    delay: int = typer.Option(0, "-delay", "--delay", envvar="MARKCUT_DELAY", help=DELAY_HELP),
):
    """Inspect markers in the CSV file."""
    csv = _require(ctx, csv, "-csv")

    with _fatal_errors():
        chunks = markers.load_chunks(csv, delay)
        _print_highlights(chunks)


def main(argv: Optional[list[str]] = None) -> None:
    """Dispatch to a subcommand; a missing or unknown one exits with status 1."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        usage()
        typer.echo("ERROR: No subcommand is provided", err=True)
        raise SystemExit(1)
    if args[0] not in SUBCOMMANDS and args[0] != "--help":
        usage()
        typer.echo(f"ERROR: Unknown subcommand {args[0]}", err=True)
        raise SystemExit(1)
    app(args=args, prog_name="markcut")


if __name__ == "__main__":
    main()
