"""Window queries.

The focus and layout helpers on WindowsService are kept for backward
compatibility and forward to FocusService and LayoutService.
"""

import warnings
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from aerospace_ipc.core.constants import WINDOW_FORMAT
from aerospace_ipc.core.exceptions import NoWindowFocusedError
from aerospace_ipc.services.base import BaseService
from aerospace_ipc.services.focus import FocusService, SetFocusArgs, SetFocusOpts
from aerospace_ipc.services.layout import LayoutService, SetLayoutArgs


@dataclass(frozen=True)
class Window:
    """
    A window as reported by `aerospace list-windows --json`.

    A snapshot, not a live handle: the window may have moved or closed since
    it was listed. window_id is not stable across daemon restarts.

    Example JSON response:
        [
          {
            "window-id": 6231,
            "workspace": "8",
            "window-layout": "floating",
            "window-parent-container-layout": "floating",
            "app-bundle-id": "com.brave.Browser",
            "app-name": "Brave Browser"
          }
        ]
    """

    window_id: int = 0
    window_title: str = ""
    app_name: str = ""
    app_bundle_id: str = ""
    workspace: str = ""
    window_layout: str = ""
    window_parent_container_layout: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Window":
        window_id = data.get("window-id", 0)
        if isinstance(window_id, bool) or not isinstance(window_id, int):
            raise ValueError(f"window-id must be an integer, got {window_id!r}")

        return cls(
            window_id=window_id,
            window_title=data.get("window-title", "") or "",
            app_name=data.get("app-name", "") or "",
            app_bundle_id=data.get("app-bundle-id", "") or "",
            workspace=data.get("workspace", "") or "",
            window_layout=data.get("window-layout", "") or "",
            window_parent_container_layout=data.get("window-parent-container-layout", "") or "",
        )

    def __str__(self) -> str:
        """
        Render as "<id> | <app> | <title> | <layout> | <parent layout> | <workspace> | <bundle id>",
        skipping empty fields after the app name.

        >>> str(Window(window_id=6231, app_name="Brave Browser", window_title="Github Page"))
        '6231 | Brave Browser | Github Page'
        """
        text = f"{self.window_id} | {self.app_name} "
        if self.window_title:
            text += f"| {self.window_title}"
        for value in (
            self.window_layout,
            self.window_parent_container_layout,
            self.workspace,
            self.app_bundle_id,
        ):
            if value:
                text += f" | {value}"
        return text


def _deprecated(old: str, new: str) -> None:
    warnings.warn(
        f"WindowsService.{old}() is deprecated, use {new}() instead",
        DeprecationWarning,
        stacklevel=3,
    )


class WindowsService(BaseService):
    """Window operations."""

    def _list(self, selector: List[str], failure: str) -> List[Window]:
        response = self._send(
            "list-windows",
            [*selector, "--json", "--format", WINDOW_FORMAT],
            failure,
        )
        return self._decode_list(response, Window.from_dict, "windows")

    def get_all_windows(self) -> List[Window]:
        """
        Return all windows managed by the window manager.

        Equivalent to:
            aerospace list-windows --all --json
        """
        return self._list(["--all"], "failed to list windows")

    def get_all_windows_by_workspace(self, workspace_name: str) -> List[Window]:
        """
        Return all windows in a workspace.

        Equivalent to:
            aerospace list-windows --workspace <workspace> --json
        """
        return self._list(
            ["--workspace", workspace_name],
            f"failed to list windows of workspace {workspace_name}",
        )

    def get_focused_window(self) -> Window:
        """
        Return the currently focused window.

        Equivalent to:
            aerospace list-windows --focused --json

        Raises:
            NoWindowFocusedError: If no window has focus (e.g. an empty workspace is focused)
        """
        windows = self._list(["--focused"], "failed to get focused window")
        if not windows:
            raise NoWindowFocusedError("no windows focused found")

        return windows[0]

    # Deprecated: use FocusService / LayoutService.

    def set_focus(self, args: SetFocusArgs, opts: Optional[SetFocusOpts] = None) -> None:
        _deprecated("set_focus", "FocusService.set_focus")
        FocusService(self._connection).set_focus(args, opts)

    def set_focus_by_window_id(self, window_id: int) -> None:
        _deprecated("set_focus_by_window_id", "FocusService.set_focus_by_window_id")
        FocusService(self._connection).set_focus_by_window_id(window_id)

    def set_focus_by_direction(self, direction: str, opts: Optional[SetFocusOpts] = None) -> None:
        _deprecated("set_focus_by_direction", "FocusService.set_focus_by_direction")
        FocusService(self._connection).set_focus_by_direction(direction, opts)

    def set_focus_by_dfs(self, dfs_direction: str, opts: Optional[SetFocusOpts] = None) -> None:
        _deprecated("set_focus_by_dfs", "FocusService.set_focus_by_dfs")
        FocusService(self._connection).set_focus_by_dfs(dfs_direction, opts)

    def set_focus_by_dfs_index(self, dfs_index: int) -> None:
        _deprecated("set_focus_by_dfs_index", "FocusService.set_focus_by_dfs_index")
        FocusService(self._connection).set_focus_by_dfs_index(dfs_index)

    def set_layout(self, args: SetLayoutArgs) -> None:
        _deprecated("set_layout", "LayoutService.set_layout")
        LayoutService(self._connection).set_layout(args)
