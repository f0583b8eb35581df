from .use_cases import MediaTranscriptionUseCase, VideoToTextUseCase, VoiceToTextUseCase

__all__ = [
    "MediaTranscriptionUseCase",
    "VideoToTextUseCase",
    "VoiceToTextUseCase",
]
