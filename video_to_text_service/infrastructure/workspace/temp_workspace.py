from __future__ import annotations

import tempfile
from pathlib import Path

from ...domain.entities.workspace import Workspace
from ...domain.errors import WorkspaceError
from ...domain.ports.workspace_port import WorkspacePort
from ...shared.fs__shared_util import ensure_directory, remove_tree


class TempWorkspaceManager(WorkspacePort):
    def __init__(self, root: Path | None = None):
        self.root = root

    def create(self, prefix: str) -> Workspace:
        parent = self.root or Path(tempfile.gettempdir())
        try:
            ensure_directory(parent)
            path = tempfile.mkdtemp(prefix=prefix, dir=str(parent))
        except OSError as exc:
            raise WorkspaceError(f"Failed to create workspace under {parent}: {exc}") from exc
        return Workspace(root=Path(path))

    def discard(self, workspace: Workspace) -> None:
        remove_tree(workspace.root)
