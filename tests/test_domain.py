import pytest

from video_to_text_service.domain.entities.pipeline_run import PipelineRun, PipelineState
from video_to_text_service.domain.entities.transcription_request import parse_request
from video_to_text_service.domain.entities.workspace import Workspace
from video_to_text_service.domain.errors import ValidationError


def test_parse_request_defaults_to_plain_text():
    request = parse_request({"url": "https://www.bilibili.com/video/BV1QMrhBkE8r/"})
    assert request.url == "https://www.bilibili.com/video/BV1QMrhBkE8r/"
    assert request.output_format == "txt"
    assert request.language is None


def test_parse_request_accepts_wire_names():
    request = parse_request({"url": "https://example.com/a.mp3", "outputFormat": "srt", "language": "zh"})
    assert request.output_format == "srt"
    assert request.language == "zh"


def test_parse_request_treats_blank_language_as_absent():
    request = parse_request({"url": "https://example.com/a.mp3", "language": "  "})
    assert request.language is None


@pytest.mark.parametrize("url", ["not a url", "example.com/video", "https://", ""])
def test_parse_request_rejects_malformed_url(url):
    with pytest.raises(ValidationError) as exc_info:
        parse_request({"url": url})
    assert exc_info.value.field == "url"


def test_parse_request_rejects_unknown_format():
    with pytest.raises(ValidationError) as exc_info:
        parse_request({"url": "https://example.com/v", "outputFormat": "docx"})
    assert exc_info.value.field == "outputFormat"
    assert "outputFormat" in str(exc_info.value)


def test_parse_request_requires_url():
    with pytest.raises(ValidationError) as exc_info:
        parse_request({"outputFormat": "txt"})
    assert exc_info.value.field == "url"


def test_request_is_immutable():
    request = parse_request({"url": "https://example.com/v"})
    with pytest.raises(Exception):
        request.language = "en"


def test_workspace_canonical_paths(tmp_path):
    ws = Workspace(root=tmp_path)
    assert ws.video_path == tmp_path / "video.mp4"
    assert ws.audio_path == tmp_path / "audio.wav"
    assert ws.transcript_path("vtt") == tmp_path / "transcription.vtt"


def test_pipeline_run_stops_at_terminal_state():
    run = PipelineRun()
    run.advance(PipelineState.VALIDATED)
    run.advance(PipelineState.FAILED)
    assert run.finished
    assert run.history == [PipelineState.RECEIVED, PipelineState.VALIDATED, PipelineState.FAILED]
    with pytest.raises(RuntimeError):
        run.advance(PipelineState.WORKSPACE_READY)


def test_rejected_url_reason_reads_cleanly():
    with pytest.raises(ValidationError) as exc_info:
        parse_request({"url": "not a url"})
    message = str(exc_info.value)
    assert message.startswith("Invalid url: ")
    assert "Value error" not in message
    assert exc_info.value.stage == "validation"
