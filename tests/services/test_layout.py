"""
Tests for services/layout.py.
"""

import unittest
from unittest.mock import Mock

from aerospace_ipc.client.connection import SocketConnection
from aerospace_ipc.client.protocol import Response
from aerospace_ipc.core.exceptions import ExitCodeError, ValidationError
from aerospace_ipc.services.layout import LayoutService, SetLayoutArgs


class TestLayoutService(unittest.TestCase):
    """Test cases for LayoutService."""

    def setUp(self):
        self.conn = Mock(spec=SocketConnection)
        self.conn.send_command.return_value = Response(server_version="0.20.0-Beta abc")
        self.service = LayoutService(self.conn)

    def test_single_layout(self):
        self.service.set_layout(SetLayoutArgs(layouts=["floating"]))
        self.conn.send_command.assert_called_once_with("layout", ["floating"])

    def test_toggle_between_layouts_for_window(self):
        self.service.set_layout(SetLayoutArgs(layouts=["floating", "tiling"], window_id=42))
        self.conn.send_command.assert_called_once_with(
            "layout", ["floating", "tiling", "--window-id", "42"]
        )

    def test_empty_layouts_rejected(self):
        with self.assertRaises(ValidationError) as context:
            self.service.set_layout(SetLayoutArgs(layouts=[]))

        self.assertEqual(str(context.exception), "at least one layout must be provided")
        self.conn.send_command.assert_not_called()

    def test_failure_lists_layouts(self):
        self.conn.send_command.side_effect = ExitCodeError(
            "command failed with exit code 1\nNo window is focused",
            exit_code=1,
            stderr="No window is focused",
        )

        with self.assertRaises(ExitCodeError) as context:
            self.service.set_layout(SetLayoutArgs(layouts=["h_tiles", "v_tiles"]))

        self.assertEqual(
            str(context.exception),
            "failed to set layout(s) ['h_tiles', 'v_tiles']\nNo window is focused",
        )


if __name__ == "__main__":
    unittest.main()
