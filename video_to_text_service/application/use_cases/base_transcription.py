from __future__ import annotations

import traceback
from pathlib import Path
from typing import Any, Mapping, TextIO

from ...domain.entities.error_log import ErrorLog
from ...domain.entities.pipeline_run import PipelineRun, PipelineState
from ...domain.entities.tool_response import ToolResponse
from ...domain.entities.transcription_request import TranscriptionRequest, parse_request
from ...domain.entities.workspace import Workspace
from ...domain.errors import PipelineError
from ...domain.ports.downloader_port import DownloaderPort
from ...domain.ports.error_monitor_port import ErrorMonitorPort
from ...domain.ports.transcriber_port import TranscriberPort
from ...domain.ports.transcript_reader_port import TranscriptReaderPort
from ...domain.ports.workspace_port import WorkspacePort
from ...shared.logger import RequestLogger


class MediaTranscriptionUseCase:
    """Validate, fetch, (optionally) transcode, transcribe and read back.

    Subclasses supply the media-specific part through ``_obtain_audio``. Every
    failure ends the run in ``FAILED`` and is returned as an error response;
    nothing raised by a step escapes ``execute``.
    """

    operation = "media_to_text"
    noun = "media"
    title = "Media transcription"
    workspace_prefix = "media-to-text-"

    # What was running when the run was last seen in a given state.
    step_names = {
        PipelineState.RECEIVED: "validation",
        PipelineState.VALIDATED: "workspace setup",
        PipelineState.WORKSPACE_READY: "download",
        PipelineState.FETCHED: "transcription",
        PipelineState.TRANSCODED: "transcription",
        PipelineState.TRANSCRIBED: "reading the transcript",
    }

    def __init__(
        self,
        downloader: DownloaderPort,
        transcriber: TranscriberPort,
        workspaces: WorkspacePort,
        reader: TranscriptReaderPort,
        monitor: ErrorMonitorPort,
        *,
        keep_failed_workspaces: bool = True,
        log_stream: TextIO | None = None,
    ):
        self.downloader = downloader
        self.transcriber = transcriber
        self.workspaces = workspaces
        self.reader = reader
        self.monitor = monitor
        self.keep_failed_workspaces = keep_failed_workspaces
        self.log_stream = log_stream

    async def _obtain_audio(
        self,
        request: TranscriptionRequest,
        workspace: Workspace,
        run: PipelineRun,
        logger: RequestLogger,
    ) -> Path:
        raise NotImplementedError

    def _advance(self, run: PipelineRun, state: PipelineState, logger: RequestLogger) -> None:
        run.advance(state)
        logger.write(f"State: {state.value}")

    async def execute(self, arguments: Mapping[str, Any]) -> ToolResponse:
        logger = RequestLogger(self.operation, stream=self.log_stream)
        run = PipelineRun()
        workspace: Workspace | None = None
        try:
            request = parse_request(arguments)
            self._advance(run, PipelineState.VALIDATED, logger)

            workspace = self.workspaces.create(self.workspace_prefix)
            logger.attach(workspace.log_path)
            logger.write(f"Created temporary directory: {workspace.root}")
            self._advance(run, PipelineState.WORKSPACE_READY, logger)

            logger.write(f"Downloading {self.noun} from: {request.url}")
            audio_path = await self._obtain_audio(request, workspace, run, logger)

            transcript_path = workspace.transcript_path(request.output_format)
            await self.transcriber.transcribe(
                audio_path,
                transcript_path,
                output_format=request.output_format,
                language=request.language,
                logger=logger,
            )
            logger.write(f"Transcription saved to: {transcript_path}")
            self._advance(run, PipelineState.TRANSCRIBED, logger)

            result = await self.reader.read(transcript_path)
            self._advance(run, PipelineState.DELIVERED, logger)

            return ToolResponse.success(
                f"{self.title} completed successfully.\n\n"
                f"Transcription saved to: {result.path}\n\n"
                f"Content preview:\n{result.preview}"
            )

        except Exception as e:
            step = self.step_names.get(run.state, run.state.value)
            if isinstance(e, PipelineError):
                if e.stage is None:
                    e.stage = step
                step = e.stage
            detail = str(e) or type(e).__name__
            run.advance(PipelineState.FAILED)
            logger.write(f"Failed during {step}: {detail}")

            await self.monitor.log_error(
                ErrorLog(
                    message=detail,
                    stack_trace=traceback.format_exc(),
                    context_data={
                        "operation": self.operation,
                        "url": arguments.get("url"),
                        "step": step,
                        "workspace": str(workspace.root) if workspace else None,
                    },
                )
            )
            if workspace is not None and not self.keep_failed_workspaces:
                logger.close()
                self.workspaces.discard(workspace)

            return ToolResponse.failure(f"Error processing {self.noun}: {step} failed: {detail}")

        finally:
            logger.close()
