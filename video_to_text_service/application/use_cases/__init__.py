from .base_transcription import MediaTranscriptionUseCase
from .video_to_text import VideoToTextUseCase
from .voice_to_text import VoiceToTextUseCase

__all__ = [
    "MediaTranscriptionUseCase",
    "VideoToTextUseCase",
    "VoiceToTextUseCase",
]
