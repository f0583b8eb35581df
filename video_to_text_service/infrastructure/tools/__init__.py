from .media_converter import FfmpegMediaConverter

__all__ = ["FfmpegMediaConverter"]
