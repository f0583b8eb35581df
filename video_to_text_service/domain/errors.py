from __future__ import annotations

from pathlib import Path
from typing import Iterable


class PipelineError(Exception):
    """Base class for every failure a transcription request can end in.

    ``stage`` names the pipeline step that failed. Errors raised below the use
    case leave it unset and the use case fills it in.
    """

    stage: str | None = None


class ValidationError(PipelineError):
    stage = "validation"

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid {field}: {reason}")


class WorkspaceError(PipelineError):
    stage = "workspace setup"


class SubprocessExitError(PipelineError):
    def __init__(self, tool: str, returncode: int, stderr: str):
        self.tool = tool
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(f"{tool} failed with code {returncode}: {stderr}")


class SubprocessSpawnError(PipelineError):
    def __init__(self, tool: str, reason: str, *, hint: str | None = None):
        self.tool = tool
        self.reason = reason
        self.hint = hint
        message = f"Failed to spawn {tool}: {reason}"
        if hint:
            message = f"{message}. {hint}"
        super().__init__(message)


class SubprocessTimeoutError(PipelineError):
    def __init__(self, tool: str, timeout_s: float, stderr: str = ""):
        self.tool = tool
        self.timeout_s = timeout_s
        self.stderr = stderr
        message = f"{tool} did not finish within {timeout_s:g}s and was killed"
        if stderr:
            message = f"{message}: {stderr}"
        super().__init__(message)


class ArtifactNotFoundError(PipelineError):
    pass


class ArtifactAmbiguityError(PipelineError):
    def __init__(self, directory: Path, candidates: Iterable[str]):
        self.directory = directory
        self.candidates = list(candidates)
        super().__init__(
            f"Found {len(self.candidates)} candidate files in {directory}, "
            f"expected exactly one: {', '.join(self.candidates)}"
        )
