from __future__ import annotations

from abc import ABC, abstractmethod

from ..entities.workspace import Workspace


class WorkspacePort(ABC):
    @abstractmethod
    def create(self, prefix: str) -> Workspace:
        raise NotImplementedError

    @abstractmethod
    def discard(self, workspace: Workspace) -> None:
        raise NotImplementedError
