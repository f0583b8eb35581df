from __future__ import annotations

from functools import partial
from pathlib import Path

from ...domain.entities.transcription_request import MediaKind
from ...domain.errors import SubprocessExitError
from ...domain.ports.downloader_port import DownloaderPort
from ...shared.artifacts import locate_artifact
from ...shared.fs__shared_util import ensure_directory
from ...shared.logger import RequestLogger
from ...shared.process import ProcessRunner, run_process

TOOL = "yt-dlp"
INSTALL_HINT = "Make sure yt-dlp is installed: pip install -U yt-dlp"

PREFERRED_EXTENSIONS = {
    MediaKind.VIDEO: (".mp4",),
    MediaKind.AUDIO: (".wav",),
}
FALLBACK_EXTENSIONS = {
    MediaKind.VIDEO: (".mp4", ".mkv", ".webm"),
    MediaKind.AUDIO: (".wav", ".mp3", ".m4a", ".ogg"),
}


class YtDlpDownloaderAdapter(DownloaderPort):
    def __init__(
        self,
        *,
        ytdlp: str = TOOL,
        cookies_from_browser: str | None = None,
        timeout_s: float | None = None,
        runner: ProcessRunner = run_process,
    ):
        self.ytdlp = ytdlp
        self.cookies_from_browser = cookies_from_browser
        self.timeout_s = timeout_s
        self.runner = runner

    def build_command(self, url: str, target: Path, kind: MediaKind) -> list[str]:
        cmd = [
            self.ytdlp,
            "--no-warnings",
            "--no-progress",
            "-o", f"{target.stem}.%(ext)s",
        ]
        if kind is MediaKind.VIDEO and self.cookies_from_browser:
            cmd.extend(["--cookies-from-browser", self.cookies_from_browser])
        if kind is MediaKind.AUDIO:
            cmd.extend(["--extract-audio", "--audio-format", "wav"])
        cmd.append(url)
        return cmd

    async def download(self, url: str, target: Path, *, kind: MediaKind, logger: RequestLogger) -> Path:
        out_dir = ensure_directory(target.parent)
        logger.write(f"Downloading {kind.value} to directory: {out_dir}")
        logger.write(f"Target filename: {target.name}")

        res = await self.runner(
            self.build_command(url, target, kind),
            cwd=out_dir,
            timeout_s=self.timeout_s,
            on_stderr=partial(logger.tool_output, TOOL),
            install_hint=INSTALL_HINT,
        )
        if res.returncode != 0:
            raise SubprocessExitError(TOOL, res.returncode, res.stderr)

        media_path = locate_artifact(
            out_dir,
            target,
            preferred=PREFERRED_EXTENSIONS[kind],
            fallback=FALLBACK_EXTENSIONS[kind],
            label=kind.value,
            producer=TOOL,
        )
        logger.write(f"{kind.value.capitalize()} downloaded to: {media_path}")
        return media_path
