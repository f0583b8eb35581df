from .downloader_port import DownloaderPort
from .error_monitor_port import ErrorMonitorPort
from .media_converter_port import MediaConverterPort
from .transcriber_port import TranscriberPort
from .transcript_reader_port import TranscriptReaderPort
from .workspace_port import WorkspacePort

__all__ = [
    "DownloaderPort",
    "ErrorMonitorPort",
    "MediaConverterPort",
    "TranscriberPort",
    "TranscriptReaderPort",
    "WorkspacePort",
]
