"""Strategies for producing a ready SocketConnection.

DefaultConnector resolves the socket path from the environment; CustomConnector
takes an explicit path and can validate the server version right away. A
process-wide default connector can be swapped, e.g. in tests.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from aerospace_ipc.client.connection import SocketConnection
from aerospace_ipc.core.configs import get_socket_path
from aerospace_ipc.core.constants import MIN_MAJOR_VERSION, MIN_MINOR_VERSION
from aerospace_ipc.core.exceptions import AeroSpaceConnectionError, VersionMismatchError

logger = logging.getLogger(__name__)


class Connector(ABC):
    """Abstract base class for connection strategies."""

    @abstractmethod
    def connect(self) -> SocketConnection:
        """Connect to the AeroSpace socket and return a ready connection."""


class DefaultConnector(Connector):
    """
    Connect using AEROSPACESOCK or /tmp/bobko.aerospace-<user>.sock.

    In most cases this is the connector to use.
    """

    def __init__(
        self,
        min_major_version: int = MIN_MAJOR_VERSION,
        min_minor_version: int = MIN_MINOR_VERSION,
    ):
        self.min_major_version = min_major_version
        self.min_minor_version = min_minor_version

    def connect(self) -> SocketConnection:
        socket_path = get_socket_path()
        return SocketConnection.connect(
            socket_path,
            min_major_version=self.min_major_version,
            min_minor_version=self.min_minor_version,
        )


class CustomConnector(Connector):
    """Connect to an explicit socket path, optionally validating the server version."""

    def __init__(
        self,
        socket_path: str,
        validate_version: bool = False,
        min_major_version: int = MIN_MAJOR_VERSION,
        min_minor_version: int = MIN_MINOR_VERSION,
    ):
        self.socket_path = socket_path
        self.validate_version = validate_version
        self.min_major_version = min_major_version
        self.min_minor_version = min_minor_version

    def connect(self) -> SocketConnection:
        """
        Connect and, if configured, check the server version.

        Raises:
            AeroSpaceConnectionError: If the path is empty or the dial fails
            VersionMismatchError: If validation is on and the server is not
                compatible. The open connection is attached as `err.connection`
                so callers can choose to carry on with it.
        """
        if not self.socket_path:
            raise AeroSpaceConnectionError("socket path cannot be empty")

        conn = SocketConnection.connect(
            self.socket_path,
            min_major_version=self.min_major_version,
            min_minor_version=self.min_minor_version,
        )

        if self.validate_version:
            try:
                conn.check_server_version()
            except VersionMismatchError as exc:
                logger.debug("Version check failed on %s: %s", self.socket_path, exc)
                exc.connection = conn
                raise
            except Exception:
                conn.close()
                raise

        return conn


_default_connector: Optional[Connector] = DefaultConnector()


def set_default_connector(connector: Connector) -> None:
    """Replace the process-wide default connector."""
    global _default_connector
    if connector is None:
        raise ValueError("default connector cannot be None")
    _default_connector = connector


def get_default_connector() -> Connector:
    """
    Return the process-wide default connector.

    Raises:
        RuntimeError: If no default connector is installed
    """
    if _default_connector is None:
        raise RuntimeError("default connector is not initialized")
    return _default_connector
