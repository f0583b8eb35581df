import sys

import pytest

from video_to_text_service.domain.errors import (
    ArtifactAmbiguityError,
    ArtifactNotFoundError,
    SubprocessSpawnError,
    SubprocessTimeoutError,
)
from video_to_text_service.shared.artifacts import find_candidates, is_fragment, locate_artifact
from video_to_text_service.shared.process import run_process

VIDEO = dict(preferred=(".mp4",), fallback=(".mp4", ".mkv", ".webm"), label="video", producer="yt-dlp")
AUDIO = dict(preferred=(".wav",), fallback=(".wav", ".mp3", ".m4a", ".ogg"), label="audio", producer="yt-dlp")


def test_fragment_markers():
    assert is_fragment("video_temp.f137.mp4")
    assert is_fragment("clip.f251.webm")
    assert is_fragment("clip_temp.mp4")
    assert not is_fragment("myvideo.mp4")
    assert not is_fragment("my.final.cut.mp4")


def test_find_candidates_filters_extension_and_fragments():
    names = ["a.mp4", "b.f137.mp4", "c.mkv", "request.log", "D.MP4"]
    assert find_candidates(names, (".mp4",)) == ["a.mp4", "D.MP4"]


def test_locate_artifact_skips_fragments_and_renames(tmp_path):
    (tmp_path / "video_temp.f137.mp4").write_text("fragment", encoding="utf-8")
    (tmp_path / "myvideo.mp4").write_text("full", encoding="utf-8")

    target = tmp_path / "video.mp4"
    result = locate_artifact(tmp_path, target, **VIDEO)

    assert result == target
    assert target.read_text(encoding="utf-8") == "full"
    assert not (tmp_path / "myvideo.mp4").exists()
    assert (tmp_path / "video_temp.f137.mp4").exists()


def test_locate_artifact_falls_back_to_other_extensions(tmp_path):
    (tmp_path / "song.mp3").write_text("mp3", encoding="utf-8")
    target = tmp_path / "audio.wav"
    assert locate_artifact(tmp_path, target, **AUDIO) == target
    assert target.read_text(encoding="utf-8") == "mp3"


def test_locate_artifact_keeps_file_already_in_place(tmp_path):
    (tmp_path / "video.mp4").write_text("done", encoding="utf-8")
    (tmp_path / "leftover.mp4").write_text("old", encoding="utf-8")
    target = tmp_path / "video.mp4"
    assert locate_artifact(tmp_path, target, **VIDEO) == target
    assert (tmp_path / "leftover.mp4").exists()


def test_locate_artifact_refuses_to_guess_between_candidates(tmp_path):
    (tmp_path / "first.mp4").write_text("1", encoding="utf-8")
    (tmp_path / "second.mp4").write_text("2", encoding="utf-8")
    with pytest.raises(ArtifactAmbiguityError) as exc_info:
        locate_artifact(tmp_path, tmp_path / "video.mp4", **VIDEO)
    assert exc_info.value.candidates == ["first.mp4", "second.mp4"]


def test_locate_artifact_reports_directory_listing(tmp_path):
    (tmp_path / "notes.txt").write_text("x", encoding="utf-8")
    (tmp_path / "part.f140.mp4").write_text("x", encoding="utf-8")
    with pytest.raises(ArtifactNotFoundError) as exc_info:
        locate_artifact(tmp_path, tmp_path / "video.mp4", **VIDEO)
    message = str(exc_info.value)
    assert "no video file found" in message
    assert "notes.txt" in message
    assert "part.f140.mp4" in message


@pytest.mark.asyncio
async def test_run_process_captures_exit_code_and_stderr():
    seen = []
    result = await run_process(
        [sys.executable, "-c", "import sys; sys.stdout.write('out'); sys.stderr.write('oops'); sys.exit(3)"],
        on_stderr=seen.append,
    )
    assert result.returncode == 3
    assert result.stdout == "out"
    assert result.stderr == "oops"
    assert "".join(seen) == "oops"


@pytest.mark.asyncio
async def test_run_process_reports_missing_binary(tmp_path):
    with pytest.raises(SubprocessSpawnError) as exc_info:
        await run_process([str(tmp_path / "no-such-tool")], install_hint="Install it")
    assert exc_info.value.tool == "no-such-tool"
    assert str(exc_info.value).endswith("Install it")


@pytest.mark.asyncio
async def test_run_process_kills_on_timeout():
    with pytest.raises(SubprocessTimeoutError) as exc_info:
        await run_process([sys.executable, "-c", "import time; time.sleep(30)"], timeout_s=0.5)
    assert exc_info.value.timeout_s == 0.5


@pytest.mark.asyncio
async def test_run_process_decodes_characters_split_across_reads():
    script = "import sys; sys.stderr.buffer.write(b'a' * 4095 + '中文'.encode()); sys.exit(1)"
    result = await run_process([sys.executable, "-c", script])

    assert result.returncode == 1
    assert result.stderr.endswith("中文")
    assert "\ufffd" not in result.stderr
