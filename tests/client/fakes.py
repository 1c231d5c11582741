"""Test doubles for the socket stream."""

import json
import threading
import time
from typing import List, Optional, Sequence, Union

from aerospace_ipc.client.protocol import Response


def response_bytes(
    stdout: str = "",
    stderr: str = "",
    exit_code: int = 0,
    server_version: str = "0.20.0-Beta abc123",
) -> bytes:
    response = Response(
        server_version=server_version,
        stderr=stderr,
        stdout=stdout,
        exit_code=exit_code,
    )
    return json.dumps(response.to_dict()).encode("utf-8")


class FakeStream:
    """
    Scripted stream: each recv() returns the next scripted item.

    Items are bytes or an exception instance to raise. Once the script is
    exhausted recv() returns b"" (end of stream).
    """

    def __init__(self, reads: Sequence[Union[bytes, BaseException]] = ()):
        self.reads: List[Union[bytes, BaseException]] = list(reads)
        self.sent: List[bytes] = []
        self.recv_calls = 0
        self.closed = False
        self.send_error: Optional[BaseException] = None

    @classmethod
    def chunked(cls, data: bytes, chunk_size: int) -> "FakeStream":
        return cls([data[i:i + chunk_size] for i in range(0, len(data), chunk_size)])

    def sendall(self, data: bytes) -> None:
        if self.send_error is not None:
            raise self.send_error
        self.sent.append(data)

    def recv(self, bufsize: int) -> bytes:
        self.recv_calls += 1
        if not self.reads:
            return b""
        item = self.reads.pop(0)
        if isinstance(item, BaseException):
            raise item
        assert len(item) <= bufsize
        return item

    def close(self) -> None:
        self.closed = True

    def sent_requests(self) -> List[dict]:
        return [json.loads(data.decode("utf-8")) for data in self.sent]


class EchoDaemonStream:
    """
    Answers every request with a response whose stdout is the request's first
    argument after the operation name. Sleeps between write and read so
    unserialized callers would interleave.
    """

    def __init__(self, delay: float = 0.001):
        self.delay = delay
        self._pending: List[bytes] = []
        self._guard = threading.Lock()
        self.in_flight = 0
        self.max_in_flight = 0

    def sendall(self, data: bytes) -> None:
        request = json.loads(data.decode("utf-8"))
        with self._guard:
            self.in_flight += 1
            self.max_in_flight = max(self.max_in_flight, self.in_flight)
        time.sleep(self.delay)
        self._pending.append(response_bytes(stdout=request["args"][1]))

    def recv(self, bufsize: int) -> bytes:
        time.sleep(self.delay)
        data = self._pending.pop(0) if self._pending else b""
        with self._guard:
            self.in_flight -= 1
        return data

    def close(self) -> None:
        pass
