from __future__ import annotations

from pathlib import Path

from ...domain.entities.pipeline_run import PipelineRun, PipelineState
from ...domain.entities.transcription_request import MediaKind, TranscriptionRequest
from ...domain.entities.workspace import Workspace
from ...shared.logger import RequestLogger
from .base_transcription import MediaTranscriptionUseCase


class VoiceToTextUseCase(MediaTranscriptionUseCase):
    """Audio URLs go straight to the transcriber; the downloader extracts WAV itself."""

    operation = "voice_to_text"
    noun = "audio"
    title = "Audio transcription"
    workspace_prefix = "voice-to-text-"

    async def _obtain_audio(
        self,
        request: TranscriptionRequest,
        workspace: Workspace,
        run: PipelineRun,
        logger: RequestLogger,
    ) -> Path:
        audio_path = await self.downloader.download(
            request.url, workspace.audio_path, kind=MediaKind.AUDIO, logger=logger
        )
        self._advance(run, PipelineState.FETCHED, logger)
        return audio_path
