from .error_log import ErrorLog
from .pipeline_run import PipelineRun, PipelineState
from .tool_response import ToolResponse
from .transcript_result import TranscriptResult
from .transcription_request import MediaKind, OutputFormat, TranscriptionRequest, parse_request
from .workspace import Workspace

__all__ = [
    "ErrorLog",
    "PipelineRun",
    "PipelineState",
    "ToolResponse",
    "TranscriptResult",
    "MediaKind",
    "OutputFormat",
    "TranscriptionRequest",
    "parse_request",
    "Workspace",
]
