from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ...shared.logger import RequestLogger


class TranscriberPort(ABC):
    @abstractmethod
    async def transcribe(
        self,
        audio_path: Path,
        output_path: Path,
        *,
        output_format: str,
        language: str | None,
        logger: RequestLogger,
    ) -> Path:
        raise NotImplementedError
