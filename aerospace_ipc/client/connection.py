"""Unix socket transport for the AeroSpace daemon.

A SocketConnection owns exactly one socket for its lifetime and performs one
round trip per command: write the request envelope, read until the response is
complete, decode it and apply the failure policy.

Usage:
    conn = SocketConnection.connect("/tmp/bobko.aerospace-me.sock")
    try:
        response = conn.send_command("list-windows", ["--all", "--json"])
        print(response.stdout)
    finally:
        conn.close()

There is no timeout in the transport itself. Callers that need one can create
the socket themselves, call settimeout() on it and pass it as `stream`.
"""

import logging
import socket
import threading
from typing import List, Optional, Protocol, Sequence

from aerospace_ipc.client.protocol import Response, deserialize_response, serialize_request
from aerospace_ipc.client.version import check_version
from aerospace_ipc.core.constants import (
    MIN_MAJOR_VERSION,
    MIN_MINOR_VERSION,
    RAW_EXCERPT_LIMIT,
    READ_BUFFER_SIZE,
)
from aerospace_ipc.core.exceptions import (
    AeroSpaceConnectionError,
    ExitCodeError,
    StderrError,
    TransportError,
)

logger = logging.getLogger(__name__)


class SocketStream(Protocol):
    """Minimal byte stream the transport needs. socket.socket satisfies it."""

    def sendall(self, data: bytes) -> None: ...

    def recv(self, bufsize: int) -> bytes: ...

    def close(self) -> None: ...


def _excerpt(data: bytes, limit: int = RAW_EXCERPT_LIMIT) -> str:
    text = data[:limit].decode("utf-8", errors="replace")
    if len(data) > limit:
        text += f"... ({len(data) - limit} more bytes)"
    return text


class SocketConnection:
    """
    Connection to the AeroSpace socket.

    Only one command is in flight at a time: the lock is held across the whole
    write-then-read cycle. Waiting callers are not served in FIFO order.
    Closing the connection from another thread while a command is in flight is
    not supported.
    """

    def __init__(
        self,
        socket_path: str,
        stream: Optional[SocketStream] = None,
        min_major_version: int = MIN_MAJOR_VERSION,
        min_minor_version: int = MIN_MINOR_VERSION,
        read_buffer_size: int = READ_BUFFER_SIZE,
    ):
        """
        Wrap an already connected stream.

        Args:
            socket_path: Path of the socket the stream is bound to
            stream: Connected stream, or None for a connection that is not open
            min_major_version: Required server major version
            min_minor_version: Minimum server minor version
            read_buffer_size: Size of each recv() call
        """
        self._socket_path = socket_path
        self._stream = stream
        self._lock = threading.Lock()
        self._read_buffer_size = read_buffer_size
        self.min_major_version = min_major_version
        self.min_minor_version = min_minor_version

    @classmethod
    def connect(
        cls,
        socket_path: str,
        min_major_version: int = MIN_MAJOR_VERSION,
        min_minor_version: int = MIN_MINOR_VERSION,
    ) -> "SocketConnection":
        """
        Open a connection to the daemon socket.

        Raises:
            AeroSpaceConnectionError: If the path is empty or the dial fails
        """
        if not socket_path:
            raise AeroSpaceConnectionError("socket path cannot be empty")

        sock = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
        try:
            sock.connect(socket_path)
        except OSError as exc:
            sock.close()
            raise AeroSpaceConnectionError(
                f"failed to connect to socket {socket_path}: {exc}"
            ) from exc

        logger.debug("Connected to %s", socket_path)
        return cls(
            socket_path,
            stream=sock,
            min_major_version=min_major_version,
            min_minor_version=min_minor_version,
        )

    @property
    def socket_path(self) -> str:
        if not self._socket_path:
            raise AeroSpaceConnectionError("missing socket path")
        return self._socket_path

    @property
    def is_connected(self) -> bool:
        return self._stream is not None

    def close(self) -> None:
        """
        Close the connection. Closing twice is a no-op.

        Raises:
            AeroSpaceConnectionError: If the underlying stream fails to close
        """
        with self._lock:
            if self._stream is None:
                return
            stream, self._stream = self._stream, None
            try:
                stream.close()
            except OSError as exc:
                raise AeroSpaceConnectionError(f"failed to close connection: {exc}") from exc
        logger.debug("Closed connection to %s", self._socket_path)

    def send_command(self, command: str, args: Sequence[str] = ()) -> Response:
        """
        Send a raw command and return the decoded response.

        Equivalent to running:
            aerospace <command> <args...>

        Args:
            command: Operation name
            args: Flat list of arguments

        Returns:
            Response with zero exit code and empty stderr

        Raises:
            AeroSpaceConnectionError: If the connection is not established
            TransportError: On write, read or decode failure
            ExitCodeError: If the daemon reports a non-zero exit code
            StderrError: If the daemon exits with zero but writes to stderr
        """
        with self._lock:
            if self._stream is None:
                raise AeroSpaceConnectionError("connection is not established")

            payload = serialize_request(command, list(args))
            logger.debug("Sending %s %s", command, list(args))
            try:
                self._stream.sendall(payload)
            except OSError as exc:
                raise TransportError(f"failed to send command {command}: {exc}") from exc

            data = self._read_response()

        try:
            response = deserialize_response(data)
        except ValueError as exc:
            raise TransportError(
                f"failed to unmarshal socket response: {exc}\ndata\n{_excerpt(data)}",
                data=data,
            ) from exc

        if response.exit_code != 0:
            raise ExitCodeError(
                f"command failed with exit code {response.exit_code}\n{response.stderr}",
                exit_code=response.exit_code,
                stderr=response.stderr,
                command=command,
            )

        if response.stderr:
            raise StderrError(
                f"command error\n{response.stderr}",
                stderr=response.stderr,
                command=command,
            )

        return response

    def _read_response(self) -> bytes:
        # Caller holds the lock
        chunks: List[bytes] = []
        while True:
            try:
                chunk = self._stream.recv(self._read_buffer_size)
            except OSError as exc:
                partial = b"".join(chunks)
                raise TransportError(
                    f"failed to read response: {exc}\ndata\n{_excerpt(partial)}",
                    data=partial,
                ) from exc

            if not chunk:
                break
            chunks.append(chunk)
            if len(chunk) < self._read_buffer_size:
                break

        data = b"".join(chunks)
        logger.debug("Read %d bytes", len(data))
        return data

    def get_server_version(self) -> str:
        """
        Retrieve the server version string ("0.20.0-Beta <hash>").

        Uses `config --config-path` as a cheap probe.
        """
        if self._stream is None:
            raise AeroSpaceConnectionError("connection is not established")

        response = self.send_command("config", ["--config-path"])
        return response.server_version

    def check_server_version(self) -> None:
        """
        Check the server version against the minimum required version.

        Raises:
            VersionMismatchError: If the server is not compatible
            VersionParseError: If the server version cannot be parsed
        """
        check_version(
            self.get_server_version(),
            self.min_major_version,
            self.min_minor_version,
        )

    def __enter__(self) -> "SocketConnection":
        return self

    def __exit__(self, *_: object) -> None:
        self.close()
