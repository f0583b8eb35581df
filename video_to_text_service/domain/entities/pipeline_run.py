from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class PipelineState(str, Enum):
    RECEIVED = "received"
    VALIDATED = "validated"
    WORKSPACE_READY = "workspace_ready"
    FETCHED = "fetched"
    TRANSCODED = "transcoded"
    TRANSCRIBED = "transcribed"
    DELIVERED = "delivered"
    FAILED = "failed"


TERMINAL_STATES = frozenset({PipelineState.DELIVERED, PipelineState.FAILED})


@dataclass
class PipelineRun:
    """Progress of one request through the linear pipeline."""

    state: PipelineState = PipelineState.RECEIVED
    history: list[PipelineState] = field(default_factory=lambda: [PipelineState.RECEIVED])

    def advance(self, state: PipelineState) -> None:
        if self.state in TERMINAL_STATES:
            raise RuntimeError(f"run already finished in state {self.state.value}")
        self.state = state
        self.history.append(state)

    @property
    def finished(self) -> bool:
        return self.state in TERMINAL_STATES
