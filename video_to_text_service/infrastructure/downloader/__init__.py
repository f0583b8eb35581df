from .yt_dlp_adapter import YtDlpDownloaderAdapter

__all__ = ["YtDlpDownloaderAdapter"]
