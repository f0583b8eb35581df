from .temp_workspace import TempWorkspaceManager

__all__ = ["TempWorkspaceManager"]
