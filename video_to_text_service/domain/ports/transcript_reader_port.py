from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

from ..entities.transcript_result import TranscriptResult


class TranscriptReaderPort(ABC):
    @abstractmethod
    async def read(self, path: Path) -> TranscriptResult:
        raise NotImplementedError
