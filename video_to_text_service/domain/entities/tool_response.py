from __future__ import annotations

from pydantic import BaseModel


class ToolResponse(BaseModel):
    is_error: bool = False
    text: str

    @classmethod
    def success(cls, text: str) -> "ToolResponse":
        return cls(is_error=False, text=text)

    @classmethod
    def failure(cls, text: str) -> "ToolResponse":
        return cls(is_error=True, text=text)
