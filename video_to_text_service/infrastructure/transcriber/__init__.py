from .whisper_cli_adapter import WhisperCliTranscriberAdapter

__all__ = ["WhisperCliTranscriberAdapter"]
