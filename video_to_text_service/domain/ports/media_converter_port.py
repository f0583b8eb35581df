from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ...shared.logger import RequestLogger


class MediaConverterPort(ABC):
    @abstractmethod
    async def extract_audio(self, video_path: Path, audio_path: Path, *, logger: RequestLogger) -> Path:
        raise NotImplementedError
