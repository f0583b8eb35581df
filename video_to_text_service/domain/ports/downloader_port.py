from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING

from ..entities.transcription_request import MediaKind

if TYPE_CHECKING:
    from ...shared.logger import RequestLogger


class DownloaderPort(ABC):
    @abstractmethod
    async def download(self, url: str, target: Path, *, kind: MediaKind, logger: RequestLogger) -> Path:
        raise NotImplementedError
