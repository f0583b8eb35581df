from __future__ import annotations

from enum import Enum
from typing import Any, Literal, Mapping

from pydantic import AnyUrl, BaseModel, ConfigDict, Field, TypeAdapter, field_validator
from pydantic import ValidationError as PydanticValidationError

from ..errors import ValidationError

OutputFormat = Literal["txt", "json", "srt", "vtt"]

_URL = TypeAdapter(AnyUrl)


class MediaKind(str, Enum):
    VIDEO = "video"
    AUDIO = "audio"


class TranscriptionRequest(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    url: str
    output_format: OutputFormat = Field(default="txt", alias="outputFormat")
    language: str | None = Field(
        default=None,
        description="Language code for transcription (e.g., 'en', 'zh')",
    )

    @field_validator("url")
    @classmethod
    def _well_formed_url(cls, value: str) -> str:
        value = value.strip()
        try:
            parsed = _URL.validate_python(value)
        except PydanticValidationError as exc:
            raise ValueError(exc.errors()[0]["msg"]) from None
        if not parsed.host:
            raise ValueError("URL must include a host")
        return value

    @field_validator("language", mode="before")
    @classmethod
    def _blank_language_is_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value.strip() if isinstance(value, str) else value


def parse_request(raw: Mapping[str, Any]) -> TranscriptionRequest:
    """Validate tool arguments; the raised error names the first bad field."""
    data = {k: v for k, v in raw.items() if v is not None}
    try:
        return TranscriptionRequest.model_validate(data)
    except PydanticValidationError as exc:
        first = exc.errors()[0]
        field = ".".join(str(part) for part in first.get("loc", ())) or "request"
        # pydantic prefixes messages of ValueErrors raised in validators
        reason = first.get("msg", "invalid value").removeprefix("Value error, ")
        raise ValidationError(field, reason) from exc
