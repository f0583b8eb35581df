from __future__ import annotations

from functools import partial
from pathlib import Path

from ...domain.errors import ArtifactNotFoundError, SubprocessExitError
from ...domain.ports.transcriber_port import TranscriberPort
from ...shared.fs__shared_util import ensure_directory, rename_into_place
from ...shared.logger import RequestLogger
from ...shared.process import ProcessRunner, run_process

TOOL = "whisper"
INSTALL_HINT = "Make sure whisper is installed: pip install openai-whisper"


class WhisperCliTranscriberAdapter(TranscriberPort):
    def __init__(
        self,
        *,
        whisper: str = TOOL,
        model: str = "tiny",
        timeout_s: float | None = None,
        runner: ProcessRunner = run_process,
    ):
        self.whisper = whisper
        self.model = model
        self.timeout_s = timeout_s
        self.runner = runner

    def build_command(self, audio_path: Path, out_dir: Path, output_format: str, language: str | None) -> list[str]:
        cmd = [
            self.whisper,
            str(audio_path),
            "--output_format", output_format,
            "--output_dir", str(out_dir),
            "--model", self.model,
        ]
        if language:
            cmd.extend(["--language", language])
        return cmd

    @staticmethod
    def expected_output(audio_path: Path, out_dir: Path, output_format: str) -> Path:
        # whisper names its output after the input file's stem
        return out_dir / f"{audio_path.stem}.{output_format}"

    async def transcribe(
        self,
        audio_path: Path,
        output_path: Path,
        *,
        output_format: str,
        language: str | None,
        logger: RequestLogger,
    ) -> Path:
        out_dir = ensure_directory(output_path.parent)
        expected = self.expected_output(audio_path, out_dir, output_format)
        logger.write(f"Transcribing {audio_path.name} with model {self.model} ({output_format})")

        res = await self.runner(
            self.build_command(audio_path, out_dir, output_format, language),
            timeout_s=self.timeout_s,
            on_stderr=partial(logger.tool_output, TOOL),
            install_hint=INSTALL_HINT,
        )
        if res.returncode != 0:
            raise SubprocessExitError(TOOL, res.returncode, res.stderr)

        if not expected.is_file():
            raise ArtifactNotFoundError(
                f"{TOOL} succeeded but output file not found at {expected}. Whisper stderr: {res.stderr}"
            )

        if expected != output_path:
            rename_into_place(expected, output_path)
            logger.write(f"Renamed whisper output from {expected.name} to {output_path.name}")
        return output_path
