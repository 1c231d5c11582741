"""Layout commands."""

from dataclasses import dataclass, field
from typing import List, Optional

from aerospace_ipc.core.exceptions import ValidationError
from aerospace_ipc.services.base import BaseService


@dataclass
class SetLayoutArgs:
    # One or more of: accordion, tiles, horizontal, vertical, h_accordion,
    # v_accordion, h_tiles, v_tiles, tiling, floating
    layouts: List[str] = field(default_factory=list)
    # Window to change; the focused window when None
    window_id: Optional[int] = None


class LayoutService(BaseService):
    """Layout operations."""

    def set_layout(self, args: SetLayoutArgs) -> None:
        """
        Set the layout of the focused window or of `args.window_id`.

        With several layouts the daemon applies the first one that does not
        describe the currently active layout, so passing two layouts toggles
        between them:

            layout.set_layout(SetLayoutArgs(layouts=["floating", "tiling"]))

        Equivalent to:
            aerospace layout <layout>... [--window-id <window-id>]

        Raises:
            ValidationError: If no layout is given
            CommandError: If the daemon fails the command
        """
        if not args.layouts:
            raise ValidationError("at least one layout must be provided")

        cmd_args = list(args.layouts)
        if args.window_id is not None:
            cmd_args.extend(["--window-id", str(args.window_id)])

        self._send("layout", cmd_args, f"failed to set layout(s) {list(args.layouts)}")
