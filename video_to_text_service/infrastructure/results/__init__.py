from .transcript_reader import EMPTY_MARKER, TranscriptFileReader, build_preview

__all__ = ["EMPTY_MARKER", "TranscriptFileReader", "build_preview"]
