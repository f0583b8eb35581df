from pathlib import Path
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENV_PATH = Path(__file__).resolve().parents[1] / ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=_ENV_PATH,
        env_file_encoding="utf-8",
        env_parse_none_str="None",
        extra="ignore",
    )

    SERVER_NAME: str = "video-to-text-mcp"

    YTDLP_BIN: str = "yt-dlp"
    FFMPEG_BIN: str = "ffmpeg"
    WHISPER_BIN: str = "whisper"
    WHISPER_MODEL: str = "tiny"
    COOKIES_FROM_BROWSER: str | None = "chrome"

    WORKSPACE_ROOT: str | None = None
    KEEP_FAILED_WORKSPACES: bool = True
    # None, an empty value or 0 disables the limit
    SUBPROCESS_TIMEOUT_SECONDS: float | None = 3600

    PREVIEW_CHARS: int = 500
    LOGS_DIR: str = "./logs"

    @field_validator("SUBPROCESS_TIMEOUT_SECONDS", mode="before")
    @classmethod
    def _no_timeout(cls, value):
        if value is None or (isinstance(value, str) and not value.strip()):
            return None
        return value

    @property
    def subprocess_timeout(self) -> float | None:
        return self.SUBPROCESS_TIMEOUT_SECONDS or None


settings = Settings()
