"""Shared constants for the AeroSpace IPC client."""

# Environment variable overriding the daemon socket path.
# Default: /tmp/bobko.aerospace-$USER.sock
ENV_AEROSPACE_SOCK = "AEROSPACESOCK"

# Environment variable forcing a server version check at connect time.
ENV_VALIDATE_VERSION = "AEROSPACE_IPC_VALIDATE_VERSION"

DEFAULT_SOCKET_TEMPLATE = "/tmp/bobko.{app}-{user}.sock"
DEFAULT_SOCKET_APP = "aerospace"

# Minimum server version this client speaks to.
# AeroSpace 0.15.0 till 0.19.x used the pre-envelope protocol;
# 0.20.0 onwards is required.
MIN_MAJOR_VERSION = 0
MIN_MINOR_VERSION = 20

READ_BUFFER_SIZE = 4096
RAW_EXCERPT_LIMIT = 2048

# Fields requested from list-windows
WINDOW_FORMAT = (
    "%{window-id} %{window-title} %{app-name} %{app-bundle-id} "
    "%{workspace} %{window-layout} %{window-parent-container-layout}"
)

DIRECTIONS = ("left", "down", "up", "right")
ORDERS = ("next", "prev")
DFS_DIRECTIONS = ("dfs-next", "dfs-prev")
