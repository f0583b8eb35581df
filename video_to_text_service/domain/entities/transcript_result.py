from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass
class TranscriptResult:
    path: Path
    content: str
    preview: str
    truncated: bool
