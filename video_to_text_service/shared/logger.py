from __future__ import annotations

import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import TextIO


class RequestLogger:
    """Timestamped log lines for one request.

    Lines go to stderr (stdout is reserved for the protocol stream) and, once
    a workspace exists, are also appended to its log file. The file stays open
    until ``close`` so streamed tool output is not reopened per chunk.
    """

    def __init__(self, name: str, *, stream: TextIO | None = None):
        self.name = name
        self.stream = stream
        self.log_path: Path | None = None
        self._log_file: TextIO | None = None

    def attach(self, log_path: Path) -> None:
        self.close()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        self.log_path = log_path
        self._log_file = log_path.open("a", encoding="utf-8", buffering=1)

    def close(self) -> None:
        if self._log_file is not None:
            self._log_file.close()
            self._log_file = None

    def write(self, message: str) -> None:
        ts = datetime.now(timezone.utc).isoformat()
        line = f"[{ts}] [{self.name}] {message}"
        stream = self.stream or sys.stderr
        stream.write(line + "\n")
        stream.flush()
        if self._log_file is not None:
            self._log_file.write(line + "\n")

    def tool_output(self, tool: str, text: str) -> None:
        text = text.strip()
        if text:
            self.write(f"{tool} stderr: {text}")
