"""Shared plumbing for the domain services."""

import json
from typing import Any, Callable, List, Sequence, TypeVar

from aerospace_ipc.client.connection import SocketConnection
from aerospace_ipc.client.protocol import Response
from aerospace_ipc.core.exceptions import CommandError, ResponseDecodeError

T = TypeVar("T")


class BaseService:
    """Base class holding the connection every service sends through."""

    def __init__(self, connection: SocketConnection):
        self._connection = connection

    def _send(self, command: str, args: Sequence[str], failure: str) -> Response:
        """
        Send a command, renaming daemon-side failures after the operation.

        Connection and transport errors propagate unchanged. A CommandError is
        re-raised with the same type and exit code, its message prefixed by
        `failure` and followed by the daemon stderr.
        """
        try:
            return self._connection.send_command(command, list(args))
        except CommandError as exc:
            raise type(exc)(
                f"{failure}\n{exc.stderr}",
                exit_code=exc.exit_code,
                stderr=exc.stderr,
                command=command,
            ) from exc

    @staticmethod
    def _decode_list(response: Response, factory: Callable[[Any], T], what: str) -> List[T]:
        """Decode response stdout as a JSON array of records."""
        try:
            items = json.loads(response.stdout)
        except ValueError as exc:
            raise ResponseDecodeError(
                f"failed to unmarshal {what}: {exc}\nOut:{response.stdout}\nErr:{response.stderr}",
                stdout=response.stdout,
                stderr=response.stderr,
            ) from exc

        if not isinstance(items, list):
            raise ResponseDecodeError(
                f"failed to unmarshal {what}: expected a JSON array\nOut:{response.stdout}",
                stdout=response.stdout,
                stderr=response.stderr,
            )

        try:
            return [factory(item) for item in items]
        except (TypeError, ValueError, AttributeError) as exc:
            raise ResponseDecodeError(
                f"failed to unmarshal {what}: {exc}\nOut:{response.stdout}",
                stdout=response.stdout,
                stderr=response.stderr,
            ) from exc
