"""Focus commands.

`set_focus` accepts exactly one focus strategy:

- window_id: focus a window by its id
- direction: nearest window to the left/down/up/right
- dfs_direction: window before or after the current one in depth-first order
- dfs_index: the Nth window in depth-first order

Modifiers (ignore_floating, boundaries, boundaries_action) are only forwarded
in direction and dfs_direction modes; the daemon's focus command does not
accept them for window_id or dfs_index, so they are dropped there.
"""

from dataclasses import dataclass
from typing import List, Optional

from aerospace_ipc.core.constants import DFS_DIRECTIONS, DIRECTIONS
from aerospace_ipc.core.exceptions import ValidationError
from aerospace_ipc.services.base import BaseService

_MODES = "window_id, direction, dfs_direction, or dfs_index"


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass
class SetFocusArgs:
    window_id: Optional[int] = None
    direction: Optional[str] = None
    dfs_direction: Optional[str] = None
    dfs_index: Optional[int] = None


@dataclass
class SetFocusOpts:
    # Don't perceive floating windows as part of the tree.
    ignore_floating: bool = False
    # "workspace" (daemon default) or "all-monitors-outer-frame"
    boundaries: Optional[str] = None
    # "stop" (daemon default), "fail", "wrap-around-the-workspace",
    # "wrap-around-all-monitors"
    boundaries_action: Optional[str] = None


def build_focus_args(args: SetFocusArgs, opts: Optional[SetFocusOpts] = None) -> List[str]:
    """
    Validate focus arguments and build the argument vector for `focus`.

    Raises:
        ValidationError: If zero or several modes are set, or a value is invalid
    """
    opts = opts or SetFocusOpts()

    modes_set = sum(
        value is not None
        for value in (args.window_id, args.direction, args.dfs_direction, args.dfs_index)
    )
    if modes_set == 0:
        raise ValidationError(f"exactly one of {_MODES} must be set")
    if modes_set > 1:
        raise ValidationError(f"only one of {_MODES} can be set")

    if args.window_id is not None:
        if not _is_int(args.window_id):
            raise ValidationError(f"invalid window ID {args.window_id!r}, must be an integer")
        return ["--window-id", str(args.window_id)]

    if args.dfs_index is not None:
        if not _is_int(args.dfs_index) or args.dfs_index < 0:
            raise ValidationError(f"invalid DFS index {args.dfs_index!r}, must be a non-negative integer")
        return ["--dfs-index", str(args.dfs_index)]

    if args.direction is not None:
        if args.direction not in DIRECTIONS:
            raise ValidationError(
                f"invalid direction {args.direction!r}, must be one of: {', '.join(DIRECTIONS)}"
            )
        cmd_args = [args.direction]
    else:
        if args.dfs_direction not in DFS_DIRECTIONS:
            raise ValidationError(
                f"invalid DFS direction {args.dfs_direction!r}, "
                f"must be one of: {', '.join(DFS_DIRECTIONS)}"
            )
        cmd_args = [args.dfs_direction]

    if opts.ignore_floating:
        cmd_args.append("--ignore-floating")
    if opts.boundaries is not None:
        cmd_args.extend(["--boundaries", opts.boundaries])
    if opts.boundaries_action is not None:
        cmd_args.extend(["--boundaries-action", opts.boundaries_action])

    return cmd_args


def _describe(args: SetFocusArgs) -> str:
    if args.window_id is not None:
        return f"with ID {args.window_id}"
    if args.direction is not None:
        return f"in direction {args.direction}"
    if args.dfs_direction is not None:
        return f"using DFS direction {args.dfs_direction}"
    return f"with DFS index {args.dfs_index}"


class FocusService(BaseService):
    """Focus operations."""

    def set_focus(self, args: SetFocusArgs, opts: Optional[SetFocusOpts] = None) -> None:
        """
        Focus a window using exactly one strategy.

        Equivalent to one of:
            aerospace focus --window-id <window-id>
            aerospace focus (left|down|up|right) [--ignore-floating] [--boundaries <b>] [--boundaries-action <a>]
            aerospace focus (dfs-next|dfs-prev) [--ignore-floating] [--boundaries <b>] [--boundaries-action <a>]
            aerospace focus --dfs-index <index>

        Args:
            args: Focus target, exactly one field set
            opts: Optional modifiers

        Raises:
            ValidationError: Before any I/O, if the arguments are invalid
            CommandError: If the daemon fails the command
        """
        cmd_args = build_focus_args(args, opts)
        self._send("focus", cmd_args, f"failed to focus window {_describe(args)}")

    def set_focus_by_window_id(self, window_id: int) -> None:
        self.set_focus(SetFocusArgs(window_id=window_id))

    def set_focus_by_direction(self, direction: str, opts: Optional[SetFocusOpts] = None) -> None:
        self.set_focus(SetFocusArgs(direction=direction), opts)

    def set_focus_by_dfs(self, dfs_direction: str, opts: Optional[SetFocusOpts] = None) -> None:
        self.set_focus(SetFocusArgs(dfs_direction=dfs_direction), opts)

    def set_focus_by_dfs_index(self, dfs_index: int) -> None:
        self.set_focus(SetFocusArgs(dfs_index=dfs_index))

    def focus_back_and_forth(self) -> None:
        """
        Switch between the current and the previously focused window.

        The daemon remembers a single previous window. If it was closed the
        command fails; falling back to workspace-back-and-forth is common:

            try:
                wm.focus.focus_back_and_forth()
            except CommandError:
                wm.workspaces.move_back_and_forth()
        """
        self._send("focus-back-and-forth", [], "failed to switch focus back and forth")
