from .entities import (
    ErrorLog,
    PipelineRun,
    PipelineState,
    MediaKind,
    OutputFormat,
    ToolResponse,
    TranscriptionRequest,
    TranscriptResult,
    Workspace,
    parse_request,
)
from .errors import (
    ArtifactAmbiguityError,
    ArtifactNotFoundError,
    PipelineError,
    SubprocessExitError,
    SubprocessSpawnError,
    SubprocessTimeoutError,
    ValidationError,
    WorkspaceError,
)
from .ports import (
    DownloaderPort,
    ErrorMonitorPort,
    MediaConverterPort,
    TranscriberPort,
    TranscriptReaderPort,
    WorkspacePort,
)

__all__ = [
    "ErrorLog",
    "PipelineRun",
    "PipelineState",
    "MediaKind",
    "OutputFormat",
    "ToolResponse",
    "TranscriptionRequest",
    "TranscriptResult",
    "Workspace",
    "parse_request",
    "ArtifactAmbiguityError",
    "ArtifactNotFoundError",
    "PipelineError",
    "SubprocessExitError",
    "SubprocessSpawnError",
    "SubprocessTimeoutError",
    "ValidationError",
    "WorkspaceError",
    "DownloaderPort",
    "ErrorMonitorPort",
    "MediaConverterPort",
    "TranscriberPort",
    "TranscriptReaderPort",
    "WorkspacePort",
]
