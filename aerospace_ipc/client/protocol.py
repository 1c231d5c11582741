"""JSON-based protocol for AeroSpace socket IPC.

Request format:
    {
        "command": "",          # Deprecated, always empty
        "args": [str, ...],     # Operation name followed by its arguments
        "stdin": ""
    }

Response format:
    {
        "serverVersionAndHash": str,   # "<major>.<minor>.<patch>-<tag> <hash>"
        "stderr": str,
        "stdout": str,                 # JSON payload for --json queries
        "exitCode": int
    }

Frames carry no length prefix or delimiter; a response is complete when the
daemon closes the stream or a read comes back short.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence


@dataclass
class Command:
    args: List[str] = field(default_factory=list)
    command: str = ""
    stdin: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {"command": self.command, "args": list(self.args), "stdin": self.stdin}


@dataclass
class Response:
    server_version: str = ""
    stderr: str = ""
    stdout: str = ""
    exit_code: int = 0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Response":
        """
        Build a Response from a decoded envelope.

        Missing fields take their zero value, as the daemon omits none of them
        but older builds may.

        Raises:
            ValueError: If the envelope is not a JSON object or exitCode is not an integer
        """
        if not isinstance(data, dict):
            raise ValueError(f"expected a JSON object, got {type(data).__name__}")

        exit_code = data.get("exitCode", 0)
        if isinstance(exit_code, bool) or not isinstance(exit_code, int):
            raise ValueError(f"exitCode must be an integer, got {exit_code!r}")

        return cls(
            server_version=data.get("serverVersionAndHash", "") or "",
            stderr=data.get("stderr", "") or "",
            stdout=data.get("stdout", "") or "",
            exit_code=exit_code,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "serverVersionAndHash": self.server_version,
            "stderr": self.stderr,
            "stdout": self.stdout,
            "exitCode": self.exit_code,
        }


def serialize_request(command: str, args: Sequence[str] = ()) -> bytes:
    """
    Serialize a command to bytes for socket transmission.

    Args:
        command: Operation name (list-windows, focus, ...)
        args: Flat list of positional and flag tokens

    Returns:
        UTF-8 encoded JSON bytes
    """
    cmd = Command(args=[command, *args])
    return json.dumps(cmd.to_dict()).encode("utf-8")


def deserialize_response(data: bytes) -> Response:
    """
    Deserialize a response from bytes.

    Args:
        data: UTF-8 encoded JSON bytes

    Returns:
        Response envelope

    Raises:
        ValueError: If data is not valid UTF-8 / JSON or not a response envelope
            (json.JSONDecodeError and UnicodeDecodeError are ValueError subclasses)
    """
    return Response.from_dict(json.loads(data.decode("utf-8")))
