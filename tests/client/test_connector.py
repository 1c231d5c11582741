"""
Tests for client/connector.py - default and custom connectors.
"""

import unittest
from unittest.mock import patch

from aerospace_ipc.client import connector as connector_module
from aerospace_ipc.client.connection import SocketConnection
from aerospace_ipc.client.connector import (
    Connector,
    CustomConnector,
    DefaultConnector,
    get_default_connector,
    set_default_connector,
)
from aerospace_ipc.core.exceptions import (
    AeroSpaceConnectionError,
    SocketPathError,
    VersionMismatchError,
    VersionParseError,
)

from fakes import FakeStream, response_bytes


def _fake_connection(server_version="0.20.0-Beta abc", major=0, minor=20):
    stream = FakeStream([response_bytes(server_version=server_version)])
    return SocketConnection(
        "/tmp/aerospace.sock",
        stream=stream,
        min_major_version=major,
        min_minor_version=minor,
    )


class TestCustomConnector(unittest.TestCase):
    """Test cases for CustomConnector."""

    def test_empty_path_rejected_before_io(self):
        with patch.object(SocketConnection, "connect") as connect:
            with self.assertRaises(AeroSpaceConnectionError):
                CustomConnector("").connect()
        connect.assert_not_called()

    def test_connect_without_validation(self):
        conn = _fake_connection(server_version="9.0.0-Beta abc")
        with patch.object(SocketConnection, "connect", return_value=conn) as connect:
            result = CustomConnector("/tmp/custom.sock").connect()

        self.assertIs(result, conn)
        connect.assert_called_once_with(
            "/tmp/custom.sock", min_major_version=0, min_minor_version=20
        )
        self.assertEqual(conn._stream.sent, [])

    def test_validation_passes(self):
        conn = _fake_connection()
        with patch.object(SocketConnection, "connect", return_value=conn):
            result = CustomConnector("/tmp/custom.sock", validate_version=True).connect()

        self.assertIs(result, conn)
        self.assertTrue(result.is_connected)

    def test_validation_mismatch_keeps_connection(self):
        conn = _fake_connection(server_version="0.19.0-Beta abc")
        with patch.object(SocketConnection, "connect", return_value=conn):
            with self.assertRaises(VersionMismatchError) as context:
                CustomConnector("/tmp/custom.sock", validate_version=True).connect()

        self.assertIs(context.exception.connection, conn)
        self.assertTrue(conn.is_connected)

    def test_validation_parse_error_closes_connection(self):
        conn = _fake_connection(server_version="garbage")
        with patch.object(SocketConnection, "connect", return_value=conn):
            with self.assertRaises(VersionParseError):
                CustomConnector("/tmp/custom.sock", validate_version=True).connect()

        self.assertFalse(conn.is_connected)


class TestConnectorInterface(unittest.TestCase):
    """Connector is abstract; subclasses must implement connect()."""

    def test_cannot_instantiate_base(self):
        with self.assertRaises(TypeError):
            Connector()

    def test_subclass_without_connect_is_abstract(self):
        class Incomplete(Connector):
            pass

        with self.assertRaises(TypeError):
            Incomplete()

    def test_builtin_connectors_are_connectors(self):
        self.assertIsInstance(DefaultConnector(), Connector)
        self.assertIsInstance(CustomConnector("/tmp/custom.sock"), Connector)


class TestDefaultConnector(unittest.TestCase):
    """Test cases for DefaultConnector and the default connector registry."""

    def setUp(self):
        self._saved = connector_module._default_connector

    def tearDown(self):
        connector_module._default_connector = self._saved

    def test_resolves_socket_path(self):
        conn = _fake_connection()
        with patch.object(
            connector_module, "get_socket_path", return_value="/tmp/bobko.aerospace-me.sock"
        ), patch.object(SocketConnection, "connect", return_value=conn) as connect:
            self.assertIs(DefaultConnector().connect(), conn)

        connect.assert_called_once_with(
            "/tmp/bobko.aerospace-me.sock", min_major_version=0, min_minor_version=20
        )

    def test_missing_socket_path_propagates(self):
        error = SocketPathError("failed to access socket path /nope", socket_path="/nope")
        with patch.object(connector_module, "get_socket_path", side_effect=error):
            with self.assertRaises(SocketPathError):
                DefaultConnector().connect()

    def test_default_connector_installed(self):
        self.assertIsInstance(get_default_connector(), DefaultConnector)

    def test_set_default_connector(self):
        custom = CustomConnector("/tmp/custom.sock")
        set_default_connector(custom)
        self.assertIs(get_default_connector(), custom)

    def test_set_default_connector_rejects_none(self):
        with self.assertRaises(ValueError):
            set_default_connector(None)

    def test_get_default_connector_fails_fast_when_unset(self):
        connector_module._default_connector = None
        with self.assertRaises(RuntimeError):
            get_default_connector()


if __name__ == "__main__":
    unittest.main()
