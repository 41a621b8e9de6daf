import subprocess
from pathlib import Path

import pytest

import markcut.core.video_editing as video_editing
from markcut.core.errors import ChunkIndexError, ConcatError, ExtractionError
from markcut.core.markers import Chunk

CHUNKS = [
    Chunk(10, 20, (), "chunk-00"),
    Chunk(20, 30, (25,), "chunk-01"),
    Chunk(40, 100, (45, 90), "chunk-02"),
]


def _fake_ffmpeg(calls, fail=()):
    def fake_run(cmd, check):
        calls.append(cmd)
        out = cmd[-1]
        if out in fail:
            raise subprocess.CalledProcessError(1, cmd)
        Path(out).write_text("video")

    return fake_run


def test_cut_chunk_command(tmp_path, monkeypatch):
    calls = []
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(video_editing.subprocess, "run", _fake_ffmpeg(calls))

    video_editing.cut_chunk("in.mp4", CHUNKS[2], force=True)

    cmd = calls[0]
    assert cmd[0] == video_editing.FFMPEG
    assert "-y" in cmd
    assert cmd[cmd.index("-ss") + 1] == "40"
    assert cmd[cmd.index("-i") + 1] == "in.mp4"
    assert cmd[cmd.index("-t") + 1] == "60"
    assert cmd[cmd.index("-c") + 1] == "copy"
    assert cmd[-1] == "chunk-02.mp4"
    assert (tmp_path / "chunk-02.mp4").exists()


def test_cut_chunk_without_force(tmp_path, monkeypatch):
    calls = []
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(video_editing.subprocess, "run", _fake_ffmpeg(calls))

    video_editing.cut_chunk("in.mp4", CHUNKS[0])

    assert "-y" not in calls[0]


def test_cut_chunk_failure(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(
        video_editing.subprocess, "run", _fake_ffmpeg([], fail={"chunk-00.mp4"})
    )

    with pytest.raises(ExtractionError) as exc:
        video_editing.cut_chunk("in.mp4", CHUNKS[0])
    assert exc.value.chunk is CHUNKS[0]
    assert "chunk-00" in str(exc.value)


def test_cut_chunk_missing_ffmpeg(tmp_path, monkeypatch):
    def fake_run(cmd, check):
        raise FileNotFoundError(cmd[0])

    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(video_editing.subprocess, "run", fake_run)

    with pytest.raises(ExtractionError):
        video_editing.cut_chunk("in.mp4", CHUNKS[0])


def test_write_concat_list(tmp_path):
    out = tmp_path / "list.txt"

    video_editing.write_concat_list(CHUNKS, str(out))

    assert out.read_text() == (
        "file 'chunk-00.mp4'\nfile 'chunk-01.mp4'\nfile 'chunk-02.mp4'\n"
    )


def test_render_final_continues_after_failed_chunk(tmp_path, monkeypatch, capsys):
    calls = []
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(
        video_editing.subprocess, "run", _fake_ffmpeg(calls, fail={"chunk-01.mp4"})
    )

    failed = video_editing.render_final("in.mp4", CHUNKS, "final.mp4", force=True)

    assert failed == [CHUNKS[1]]
    assert [c[-1] for c in calls] == [
        "chunk-00.mp4",
        "chunk-01.mp4",
        "chunk-02.mp4",
        "final.mp4",
    ]
    concat = calls[-1]
    assert concat[concat.index("-f") + 1] == "concat"
    assert concat[concat.index("-i") + 1] == video_editing.CONCAT_LIST
    assert "chunk-01.mp4" in (tmp_path / video_editing.CONCAT_LIST).read_text()
    out = capsys.readouterr().out
    assert "WARNING" in out and "chunk-01" in out


def test_render_final_concat_failure(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(
        video_editing.subprocess, "run", _fake_ffmpeg([], fail={"output.mp4"})
    )

    with pytest.raises(ConcatError):
        video_editing.render_final("in.mp4", CHUNKS)
    assert (tmp_path / video_editing.CONCAT_LIST).exists()


def test_render_chunk_reports_ignored(tmp_path, monkeypatch, capsys):
    calls = []
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(video_editing.subprocess, "run", _fake_ffmpeg(calls))

    chunk = video_editing.render_chunk("in.mp4", CHUNKS, 2)

    assert chunk is CHUNKS[2]
    assert len(calls) == 1
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "chunk-02.mp4 is rendered!",
        "Ignored timestamps:",
        "  00:00:05",
        "  00:00:50",
    ]


def test_render_chunk_without_ignored(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(video_editing.subprocess, "run", _fake_ffmpeg([]))

    video_editing.render_chunk("in.mp4", CHUNKS, 0)

    assert "Ignored" not in capsys.readouterr().out


@pytest.mark.parametrize("index", [3, 5, -1])
def test_render_chunk_index_out_of_range(index, monkeypatch):
    calls = []
    monkeypatch.setattr(video_editing.subprocess, "run", _fake_ffmpeg(calls))

    with pytest.raises(ChunkIndexError) as exc:
        video_editing.render_chunk("in.mp4", CHUNKS, index)
    assert exc.value.count == 3
    assert "3" in str(exc.value)
    assert not calls


def test_render_chunk_failure_is_fatal(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(
        video_editing.subprocess, "run", _fake_ffmpeg([], fail={"chunk-00.mp4"})
    )

    with pytest.raises(ExtractionError):
        video_editing.render_chunk("in.mp4", CHUNKS, 0)
