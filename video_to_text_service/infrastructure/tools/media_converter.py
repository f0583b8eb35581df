from __future__ import annotations

from functools import partial
from pathlib import Path

from ...domain.errors import SubprocessExitError
from ...domain.ports.media_converter_port import MediaConverterPort
from ...shared.fs__shared_util import ensure_directory
from ...shared.logger import RequestLogger
from ...shared.process import ProcessRunner, run_process

TOOL = "ffmpeg"
INSTALL_HINT = "Install FFmpeg and make sure ffmpeg is in PATH"


class FfmpegMediaConverter(MediaConverterPort):
    def __init__(self, *, ffmpeg: str = TOOL, timeout_s: float | None = None, runner: ProcessRunner = run_process):
        self.ffmpeg = ffmpeg
        self.timeout_s = timeout_s
        self.runner = runner

    def build_command(self, video_path: Path, audio_path: Path) -> list[str]:
        # 16 kHz mono signed 16-bit PCM is what the speech model consumes.
        return [
            self.ffmpeg,
            "-hide_banner",
            "-loglevel", "error",
            "-y",
            "-i", str(video_path),
            "-vn",
            "-acodec", "pcm_s16le",
            "-ar", "16000",
            "-ac", "1",
            str(audio_path),
        ]

    async def extract_audio(self, video_path: Path, audio_path: Path, *, logger: RequestLogger) -> Path:
        ensure_directory(audio_path.parent)
        logger.write(f"Extracting audio from {video_path.name}")
        res = await self.runner(
            self.build_command(video_path, audio_path),
            timeout_s=self.timeout_s,
            on_stderr=partial(logger.tool_output, TOOL),
            install_hint=INSTALL_HINT,
        )
        if res.returncode != 0:
            raise SubprocessExitError(TOOL, res.returncode, res.stderr)
        logger.write(f"Audio extracted to: {audio_path}")
        return audio_path
