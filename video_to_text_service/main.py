import sys
from pathlib import Path
from typing import Annotated

from mcp.server.fastmcp import FastMCP
from mcp.types import CallToolResult, TextContent
from pydantic import Field

from .application.use_cases.video_to_text import VideoToTextUseCase
from .application.use_cases.voice_to_text import VoiceToTextUseCase
from .domain.entities.tool_response import ToolResponse
from .domain.entities.transcription_request import OutputFormat
from .infrastructure.downloader.yt_dlp_adapter import YtDlpDownloaderAdapter
from .infrastructure.monitoring.json_monitor_adapter import JsonErrorMonitorAdapter
from .infrastructure.results.transcript_reader import TranscriptFileReader
from .infrastructure.tools.media_converter import FfmpegMediaConverter
from .infrastructure.transcriber.whisper_cli_adapter import WhisperCliTranscriberAdapter
from .infrastructure.workspace.temp_workspace import TempWorkspaceManager
from .settings import Settings, settings
from .shared.fs__shared_util import which
from .shared.logger import RequestLogger

VIDEO_TO_TEXT_DESCRIPTION = "Download a video from URL, extract audio, transcribe to text, and save locally"
VOICE_TO_TEXT_DESCRIPTION = "Download an audio file from URL and transcribe to text"
LANGUAGE_DESCRIPTION = "Language code for transcription (e.g., 'en', 'zh')"


def build_use_cases(cfg: Settings) -> tuple[VideoToTextUseCase, VoiceToTextUseCase]:
    timeout_s = cfg.subprocess_timeout
    monitor = JsonErrorMonitorAdapter(Path(cfg.LOGS_DIR) / "errors.json")
    workspaces = TempWorkspaceManager(Path(cfg.WORKSPACE_ROOT) if cfg.WORKSPACE_ROOT else None)
    reader = TranscriptFileReader(preview_chars=cfg.PREVIEW_CHARS)
    downloader = YtDlpDownloaderAdapter(
        ytdlp=cfg.YTDLP_BIN,
        cookies_from_browser=cfg.COOKIES_FROM_BROWSER or None,
        timeout_s=timeout_s,
    )
    converter = FfmpegMediaConverter(ffmpeg=cfg.FFMPEG_BIN, timeout_s=timeout_s)
    transcriber = WhisperCliTranscriberAdapter(whisper=cfg.WHISPER_BIN, model=cfg.WHISPER_MODEL, timeout_s=timeout_s)

    video = VideoToTextUseCase(
        downloader,
        converter,
        transcriber,
        workspaces,
        reader,
        monitor,
        keep_failed_workspaces=cfg.KEEP_FAILED_WORKSPACES,
    )
    voice = VoiceToTextUseCase(
        downloader,
        transcriber,
        workspaces,
        reader,
        monitor,
        keep_failed_workspaces=cfg.KEEP_FAILED_WORKSPACES,
    )
    return video, voice


def to_tool_result(response: ToolResponse) -> CallToolResult:
    return CallToolResult(
        content=[TextContent(type="text", text=response.text)],
        isError=response.is_error,
    )


def create_server(
    cfg: Settings = settings,
    use_cases: tuple[VideoToTextUseCase, VoiceToTextUseCase] | None = None,
) -> FastMCP:
    uc_video, uc_voice = use_cases or build_use_cases(cfg)
    server = FastMCP(cfg.SERVER_NAME)

    @server.tool(name="video_to_text", description=VIDEO_TO_TEXT_DESCRIPTION)
    async def video_to_text(
        url: Annotated[str, Field(description="URL of the video to transcribe")],
        outputFormat: OutputFormat = "txt",
        language: Annotated[str | None, Field(description=LANGUAGE_DESCRIPTION)] = None,
    ) -> CallToolResult:
        return to_tool_result(await uc_video.execute({"url": url, "outputFormat": outputFormat, "language": language}))

    @server.tool(name="voice_to_text", description=VOICE_TO_TEXT_DESCRIPTION)
    async def voice_to_text(
        url: Annotated[str, Field(description="URL of the audio to transcribe")],
        outputFormat: OutputFormat = "txt",
        language: Annotated[str | None, Field(description=LANGUAGE_DESCRIPTION)] = None,
    ) -> CallToolResult:
        return to_tool_result(await uc_voice.execute({"url": url, "outputFormat": outputFormat, "language": language}))

    return server


def missing_tools(cfg: Settings) -> list[str]:
    return [b for b in (cfg.YTDLP_BIN, cfg.FFMPEG_BIN, cfg.WHISPER_BIN) if not which(b)]


def main() -> None:
    logger = RequestLogger("server")
    try:
        server = create_server(settings)
        for tool in missing_tools(settings):
            logger.write(f"Warning: {tool} not found in PATH; requests that need it will fail")
        logger.write("Video to Text MCP server started")
        server.run("stdio")
    except Exception as e:
        logger.write(f"Fatal error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
