"""Workspace queries and commands.

Workspaces are name-addressable and created or destroyed by the daemon on the
fly; the client only refers to them by name.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from aerospace_ipc.core.constants import DIRECTIONS, ORDERS
from aerospace_ipc.core.exceptions import NoWorkspaceFocusedError, ValidationError
from aerospace_ipc.services.base import BaseService


@dataclass(frozen=True)
class Workspace:
    """
    A workspace as reported by `aerospace list-workspaces --json`.

    Example JSON response:
        [{"workspace": "42"}, {"workspace": "terminal"}]
    """

    workspace: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Workspace":
        name = data.get("workspace")
        return cls(workspace="" if name is None else str(name))

    def __str__(self) -> str:
        return self.workspace


@dataclass
class MoveWindowToWorkspaceArgs:
    # Workspace name ("42", "terminal") or "next"/"prev"
    workspace_name: str = ""


@dataclass
class MoveWindowToWorkspaceOpts:
    # Window to move; the focused window when None
    window_id: Optional[int] = None
    # Focus the window after moving it
    focus_follows_window: bool = False
    # Fail if the window already belongs to the workspace
    fail_if_noop: bool = False
    # Jump between first and last workspace with "next"/"prev"
    wrap_around: bool = False
    # stdin and no_stdin are mutually exclusive
    stdin: bool = False
    no_stdin: bool = False


@dataclass
class MoveWorkspaceToMonitorArgs:
    """Exactly one of direction, order or patterns must be given."""

    direction: str = ""
    order: str = ""
    patterns: List[str] = field(default_factory=list)


@dataclass
class MoveWorkspaceToMonitorOpts:
    # Workspace to move; the focused workspace when None
    workspace: Optional[str] = None
    wrap_around: bool = False


def build_move_window_to_workspace_args(
    args: MoveWindowToWorkspaceArgs, opts: Optional[MoveWindowToWorkspaceOpts] = None
) -> List[str]:
    """
    Build the argument vector for `move-node-to-workspace`.

    Raises:
        ValidationError: If stdin and no_stdin are both set or the name is empty
    """
    opts = opts or MoveWindowToWorkspaceOpts()

    if opts.stdin and opts.no_stdin:
        raise ValidationError("cannot specify both --stdin and --no-stdin options")
    if not args.workspace_name:
        raise ValidationError("workspace name cannot be empty")

    cmd_args = [args.workspace_name]
    if opts.window_id is not None:
        cmd_args.extend(["--window-id", str(opts.window_id)])
    if opts.focus_follows_window:
        cmd_args.append("--focus-follows-window")
    if opts.fail_if_noop:
        cmd_args.append("--fail-if-noop")
    if opts.wrap_around:
        cmd_args.append("--wrap-around")
    if opts.stdin:
        cmd_args.append("--stdin")
    if opts.no_stdin:
        cmd_args.append("--no-stdin")

    return cmd_args


def build_move_workspace_to_monitor_args(
    args: MoveWorkspaceToMonitorArgs, opts: Optional[MoveWorkspaceToMonitorOpts] = None
) -> List[str]:
    """
    Validate the target mode and build the argument vector for
    `move-workspace-to-monitor`. Optional flags precede the positional target.

    Raises:
        ValidationError: If zero or several modes are set, or a value is invalid
    """
    opts = opts or MoveWorkspaceToMonitorOpts()

    modes_set = sum(bool(mode) for mode in (args.direction, args.order, args.patterns))
    if modes_set == 0:
        raise ValidationError("must specify exactly one of: direction, order, or patterns")
    if modes_set > 1:
        raise ValidationError(
            "cannot specify multiple modes; must specify exactly one of: direction, order, or patterns"
        )

    if args.direction and args.direction not in DIRECTIONS:
        raise ValidationError(
            f"invalid direction {args.direction!r}, must be one of: {', '.join(DIRECTIONS)}"
        )
    if args.order and args.order not in ORDERS:
        raise ValidationError(
            f"invalid order {args.order!r}, must be one of: {', '.join(ORDERS)}"
        )

    cmd_args: List[str] = []
    if opts.workspace is not None:
        cmd_args.extend(["--workspace", opts.workspace])
    if opts.wrap_around:
        cmd_args.append("--wrap-around")

    if args.direction:
        cmd_args.append(args.direction)
    elif args.order:
        cmd_args.append(args.order)
    else:
        cmd_args.extend(args.patterns)

    return cmd_args


class WorkspacesService(BaseService):
    """Workspace operations."""

    def get_focused_workspace(self) -> Workspace:
        """
        Return the currently focused workspace.

        Equivalent to:
            aerospace list-workspaces --focused --json

        Raises:
            NoWorkspaceFocusedError: If the daemon reports no focused workspace
        """
        response = self._send(
            "list-workspaces",
            ["--focused", "--json"],
            "failed to get focused workspace",
        )
        workspaces = self._decode_list(response, Workspace.from_dict, "workspaces")
        if not workspaces:
            raise NoWorkspaceFocusedError("no workspace focused found")

        return workspaces[0]

    def move_window_to_workspace(
        self,
        args: MoveWindowToWorkspaceArgs,
        opts: Optional[MoveWindowToWorkspaceOpts] = None,
    ) -> None:
        """
        Move a window (the focused one by default) to a workspace.

        Equivalent to:
            aerospace move-node-to-workspace <workspace-name> [--window-id <id>]
                [--focus-follows-window] [--fail-if-noop] [--wrap-around] [--stdin|--no-stdin]

        Raises:
            ValidationError: If the options conflict; nothing is sent
            CommandError: If the daemon fails the command
        """
        cmd_args = build_move_window_to_workspace_args(args, opts)
        self._send("move-node-to-workspace", cmd_args, "failed to move window to workspace")

    def move_back_and_forth(self) -> None:
        """
        Switch between the focused and the previously focused workspace.

        Equivalent to:
            aerospace workspace-back-and-forth
        """
        self._send("workspace-back-and-forth", [], "failed to switch workspace back and forth")

    def move_workspace_to_monitor(
        self,
        args: MoveWorkspaceToMonitorArgs,
        opts: Optional[MoveWorkspaceToMonitorOpts] = None,
    ) -> None:
        """
        Move a workspace to another monitor.

        Three modes, exactly one of which must be given:
          1. direction relative to the focused monitor (left|down|up|right)
          2. order (next|prev)
          3. one or more monitor name patterns

        Equivalent to:
            aerospace move-workspace-to-monitor [--workspace <ws>] [--wrap-around] (left|down|up|right)
            aerospace move-workspace-to-monitor [--workspace <ws>] [--wrap-around] (next|prev)
            aerospace move-workspace-to-monitor [--workspace <ws>] <monitor-pattern>...

        Focus follows the moved workspace. The daemon refuses workspaces with a
        monitor force assignment.

        Raises:
            ValidationError: Before any I/O, if the target is invalid
            CommandError: If the daemon fails the command
        """
        cmd_args = build_move_workspace_to_monitor_args(args, opts)
        self._send("move-workspace-to-monitor", cmd_args, "failed to move workspace to monitor")
