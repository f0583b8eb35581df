from __future__ import annotations

from datetime import datetime, timezone
from typing import Dict, Optional
from uuid import uuid4

from pydantic import BaseModel, Field


class ErrorLog(BaseModel):
    id: str = Field(default_factory=lambda: str(uuid4()))
    timestamp_utc: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    message: str
    stack_trace: Optional[str] = None
    context_data: Dict = Field(default_factory=dict)
