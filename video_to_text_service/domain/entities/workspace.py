from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Workspace:
    root: Path

    @property
    def video_path(self) -> Path:
        return self.root / "video.mp4"

    @property
    def audio_path(self) -> Path:
        return self.root / "audio.wav"

    @property
    def log_path(self) -> Path:
        return self.root / "request.log"

    def transcript_path(self, output_format: str) -> Path:
        return self.root / f"transcription.{output_format}"
