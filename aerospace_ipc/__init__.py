"""Python client for the AeroSpace window manager IPC socket.

Architecture:
- client: wire protocol, SocketConnection transport and connectors
- services: windows, workspaces, focus and layout command builders
- AeroSpaceWM: one connection plus lazily created services
"""

from aerospace_ipc.aerospace import (
    AeroSpaceWM,
    new_client,
    new_client_from_settings,
    new_custom_client,
)
from aerospace_ipc.client.connection import SocketConnection
from aerospace_ipc.client.protocol import Response
from aerospace_ipc.core.exceptions import (
    AeroSpaceConnectionError,
    AeroSpaceError,
    CommandError,
    EmptyResultError,
    ExitCodeError,
    NoWindowFocusedError,
    NoWorkspaceFocusedError,
    ResponseDecodeError,
    SocketPathError,
    StderrError,
    TransportError,
    ValidationError,
    VersionMismatchError,
    VersionParseError,
    is_version_mismatch,
)
from aerospace_ipc.services import (
    MoveWindowToWorkspaceArgs,
    MoveWindowToWorkspaceOpts,
    MoveWorkspaceToMonitorArgs,
    MoveWorkspaceToMonitorOpts,
    SetFocusArgs,
    SetFocusOpts,
    SetLayoutArgs,
    Window,
    Workspace,
)

# Sentinel for version mismatch checks
ErrVersionMismatch = VersionMismatchError

__version__ = "0.3.0"

__all__ = [
    "AeroSpaceWM",
    "new_client",
    "new_client_from_settings",
    "new_custom_client",
    "SocketConnection",
    "Response",
    "AeroSpaceConnectionError",
    "AeroSpaceError",
    "CommandError",
    "EmptyResultError",
    "ExitCodeError",
    "NoWindowFocusedError",
    "NoWorkspaceFocusedError",
    "ResponseDecodeError",
    "SocketPathError",
    "StderrError",
    "TransportError",
    "ValidationError",
    "VersionMismatchError",
    "VersionParseError",
    "ErrVersionMismatch",
    "is_version_mismatch",
    "MoveWindowToWorkspaceArgs",
    "MoveWindowToWorkspaceOpts",
    "MoveWorkspaceToMonitorArgs",
    "MoveWorkspaceToMonitorOpts",
    "SetFocusArgs",
    "SetFocusOpts",
    "SetLayoutArgs",
    "Window",
    "Workspace",
]
