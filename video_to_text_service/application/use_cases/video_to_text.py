from __future__ import annotations

from pathlib import Path

from ...domain.entities.pipeline_run import PipelineRun, PipelineState
from ...domain.entities.transcription_request import MediaKind, TranscriptionRequest
from ...domain.entities.workspace import Workspace
from ...domain.ports.downloader_port import DownloaderPort
from ...domain.ports.error_monitor_port import ErrorMonitorPort
from ...domain.ports.media_converter_port import MediaConverterPort
from ...domain.ports.transcriber_port import TranscriberPort
from ...domain.ports.transcript_reader_port import TranscriptReaderPort
from ...domain.ports.workspace_port import WorkspacePort
from ...shared.logger import RequestLogger
from .base_transcription import MediaTranscriptionUseCase


class VideoToTextUseCase(MediaTranscriptionUseCase):
    operation = "video_to_text"
    noun = "video"
    title = "Video transcription"
    workspace_prefix = "video-to-text-"
    step_names = {
        **MediaTranscriptionUseCase.step_names,
        PipelineState.FETCHED: "audio extraction",
    }

    def __init__(
        self,
        downloader: DownloaderPort,
        converter: MediaConverterPort,
        transcriber: TranscriberPort,
        workspaces: WorkspacePort,
        reader: TranscriptReaderPort,
        monitor: ErrorMonitorPort,
        **kwargs,
    ):
        super().__init__(downloader, transcriber, workspaces, reader, monitor, **kwargs)
        self.converter = converter

    async def _obtain_audio(
        self,
        request: TranscriptionRequest,
        workspace: Workspace,
        run: PipelineRun,
        logger: RequestLogger,
    ) -> Path:
        video_path = await self.downloader.download(
            request.url, workspace.video_path, kind=MediaKind.VIDEO, logger=logger
        )
        self._advance(run, PipelineState.FETCHED, logger)

        audio_path = await self.converter.extract_audio(video_path, workspace.audio_path, logger=logger)
        self._advance(run, PipelineState.TRANSCODED, logger)
        return audio_path
