"""AeroSpaceWM: the entry point bundling a connection and its services.

Usage:
    with new_client() as wm:
        for window in wm.windows.get_all_windows():
            print(window)
        wm.focus.set_focus(SetFocusArgs(direction="left"))
"""

from typing import Optional

from aerospace_ipc.client.connection import SocketConnection
from aerospace_ipc.client.connector import Connector, CustomConnector, get_default_connector
from aerospace_ipc.core.configs import ClientSettings, get_client_settings, get_socket_path
from aerospace_ipc.core.constants import MIN_MAJOR_VERSION, MIN_MINOR_VERSION
from aerospace_ipc.services.focus import FocusService
from aerospace_ipc.services.layout import LayoutService
from aerospace_ipc.services.windows import WindowsService
from aerospace_ipc.services.workspaces import WorkspacesService


class AeroSpaceWM:
    """
    Client for the AeroSpace window manager.

    Services are created on first access and share the single connection.
    """

    def __init__(self, connection: SocketConnection):
        self._connection = connection
        self._windows: Optional[WindowsService] = None
        self._workspaces: Optional[WorkspacesService] = None
        self._focus: Optional[FocusService] = None
        self._layout: Optional[LayoutService] = None

    @property
    def connection(self) -> SocketConnection:
        """Low-level connection, for commands the services do not cover."""
        if self._connection is None:
            raise RuntimeError("AeroSpaceWM client is not initialized")
        return self._connection

    @property
    def windows(self) -> WindowsService:
        if self._windows is None:
            self._windows = WindowsService(self.connection)
        return self._windows

    @property
    def workspaces(self) -> WorkspacesService:
        if self._workspaces is None:
            self._workspaces = WorkspacesService(self.connection)
        return self._workspaces

    @property
    def focus(self) -> FocusService:
        if self._focus is None:
            self._focus = FocusService(self.connection)
        return self._focus

    @property
    def layout(self) -> LayoutService:
        if self._layout is None:
            self._layout = LayoutService(self.connection)
        return self._layout

    def close(self) -> None:
        """Close the connection and release the socket."""
        self.connection.close()

    def __enter__(self) -> "AeroSpaceWM":
        return self

    def __exit__(self, *_: object) -> None:
        self.close()


def new_client(connector: Optional[Connector] = None) -> AeroSpaceWM:
    """
    Create a client using the default connector.

    The default connector reads AEROSPACESOCK or falls back to
    /tmp/bobko.aerospace-<user>.sock.

    Raises:
        AeroSpaceConnectionError: If the socket cannot be reached
    """
    connector = connector or get_default_connector()
    return AeroSpaceWM(connector.connect())


def new_custom_client(
    socket_path: str,
    validate_version: bool = False,
    min_major_version: int = MIN_MAJOR_VERSION,
    min_minor_version: int = MIN_MINOR_VERSION,
) -> AeroSpaceWM:
    """
    Create a client for an explicit socket path.

    Args:
        socket_path: Path to the AeroSpace socket
        validate_version: Check the server version right after connecting
        min_major_version: Required server major version
        min_minor_version: Minimum server minor version

    Raises:
        AeroSpaceConnectionError: If the path is empty or cannot be reached
        VersionMismatchError: If validation is on and the server is not
            compatible; `err.connection` holds the open connection
    """
    connector = CustomConnector(
        socket_path,
        validate_version=validate_version,
        min_major_version=min_major_version,
        min_minor_version=min_minor_version,
    )
    return AeroSpaceWM(connector.connect())


def new_client_from_settings(settings: Optional[ClientSettings] = None) -> AeroSpaceWM:
    """
    Create a client from the user configuration (config.cfg / .env / environment).
    """
    settings = settings or get_client_settings()
    return new_custom_client(
        settings.socket_path or get_socket_path(),
        validate_version=settings.validate_version,
        min_major_version=settings.min_major_version,
        min_minor_version=settings.min_minor_version,
    )
