"""Low-level access to the AeroSpace socket.

- protocol: request/response envelopes and their JSON encoding
- connection: SocketConnection, the single round-trip transport
- connector: strategies for opening a connection
"""

from aerospace_ipc.client.connection import SocketConnection, SocketStream
from aerospace_ipc.client.connector import (
    Connector,
    CustomConnector,
    DefaultConnector,
    get_default_connector,
    set_default_connector,
)
from aerospace_ipc.client.protocol import (
    Command,
    Response,
    serialize_request,
    deserialize_response,
)

__all__ = [
    "SocketConnection",
    "SocketStream",
    "Connector",
    "CustomConnector",
    "DefaultConnector",
    "get_default_connector",
    "set_default_connector",
    "Command",
    "Response",
    "serialize_request",
    "deserialize_response",
]
