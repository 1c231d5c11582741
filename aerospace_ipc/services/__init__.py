"""Domain services: argument validation, command building and response mapping."""

from aerospace_ipc.services.focus import FocusService, SetFocusArgs, SetFocusOpts
from aerospace_ipc.services.layout import LayoutService, SetLayoutArgs
from aerospace_ipc.services.windows import Window, WindowsService
from aerospace_ipc.services.workspaces import (
    MoveWindowToWorkspaceArgs,
    MoveWindowToWorkspaceOpts,
    MoveWorkspaceToMonitorArgs,
    MoveWorkspaceToMonitorOpts,
    Workspace,
    WorkspacesService,
)

__all__ = [
    "FocusService",
    "SetFocusArgs",
    "SetFocusOpts",
    "LayoutService",
    "SetLayoutArgs",
    "Window",
    "WindowsService",
    "MoveWindowToWorkspaceArgs",
    "MoveWindowToWorkspaceOpts",
    "MoveWorkspaceToMonitorArgs",
    "MoveWorkspaceToMonitorOpts",
    "Workspace",
    "WorkspacesService",
]
