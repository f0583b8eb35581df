from __future__ import annotations

from pathlib import Path

import aiofiles

from ...domain.entities.transcript_result import TranscriptResult
from ...domain.errors import ArtifactNotFoundError
from ...domain.ports.transcript_reader_port import TranscriptReaderPort

TRUNCATION_MARKER = "..."
EMPTY_MARKER = "(empty transcript)"


def build_preview(content: str, limit: int) -> tuple[str, bool]:
    if not content.strip():
        return EMPTY_MARKER, False
    if len(content) > limit:
        return content[:limit] + TRUNCATION_MARKER, True
    return content, False


class TranscriptFileReader(TranscriptReaderPort):
    def __init__(self, *, preview_chars: int = 500):
        self.preview_chars = preview_chars

    async def read(self, path: Path) -> TranscriptResult:
        try:
            async with aiofiles.open(path, "r", encoding="utf-8", errors="replace") as f:
                content = await f.read()
        except FileNotFoundError as exc:
            raise ArtifactNotFoundError(f"Transcript not found at {path}") from exc

        preview, truncated = build_preview(content, self.preview_chars)
        return TranscriptResult(path=path, content=content, preview=preview, truncated=truncated)
