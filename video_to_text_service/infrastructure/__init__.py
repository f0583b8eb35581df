from .downloader import YtDlpDownloaderAdapter
from .monitoring import JsonErrorMonitorAdapter
from .results import TranscriptFileReader
from .tools import FfmpegMediaConverter
from .transcriber import WhisperCliTranscriberAdapter
from .workspace import TempWorkspaceManager

__all__ = [
    "YtDlpDownloaderAdapter",
    "JsonErrorMonitorAdapter",
    "TranscriptFileReader",
    "FfmpegMediaConverter",
    "WhisperCliTranscriberAdapter",
    "TempWorkspaceManager",
]
