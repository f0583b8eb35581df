from __future__ import annotations

import asyncio
import json
import sys
from pathlib import Path

import aiofiles

from ...domain.entities.error_log import ErrorLog
from ...domain.ports.error_monitor_port import ErrorMonitorPort


class JsonErrorMonitorAdapter(ErrorMonitorPort):
    """Keeps failed requests as a JSON list so they survive workspace cleanup."""

    def __init__(self, log_path: str | Path):
        self.path = Path(log_path)
        self._lock = asyncio.Lock()

    def _ensure_store(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        if not self.path.exists():
            self.path.write_text("[]", encoding="utf-8")

    async def log_error(self, error: ErrorLog) -> None:
        async with self._lock:
            try:
                self._ensure_store()
                data = error.model_dump(mode="json")
                async with aiofiles.open(self.path, "r", encoding="utf-8") as f:
                    content = await f.read()
                    logs = json.loads(content) if content.strip() else []
                logs.append(data)
                async with aiofiles.open(self.path, "w", encoding="utf-8") as f:
                    await f.write(json.dumps(logs, indent=2))
            except (OSError, ValueError) as e:
                # stdout carries the protocol stream
                print(f"Fallback Log Error: {e}", file=sys.stderr)
