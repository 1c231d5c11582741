"""Server version parsing and compatibility rules."""

import logging
from typing import Tuple

from aerospace_ipc.core.exceptions import VersionMismatchError, VersionParseError

logger = logging.getLogger(__name__)


def _numeric_part(server_version: str) -> str:
    head = server_version.split("-", 1)[0].strip()
    return head.split()[0] if head else ""


def parse_version(server_version: str) -> Tuple[int, int]:
    """
    Extract (major, minor) from a server version string.

    The string looks like "0.20.0-Beta <hash>". Only the dotted triple before
    the first "-" is used.

    Raises:
        VersionParseError: If the string is empty, the minor component is
            missing, or either component is not an integer
    """
    if not server_version or not server_version.strip():
        raise VersionParseError("server version is empty")

    parts = _numeric_part(server_version).split(".")
    if len(parts) < 2:
        logger.warning("Invalid server version format: %s", server_version)

    try:
        major = int(parts[0])
    except ValueError as exc:
        raise VersionParseError(
            f"failed to parse major version from {server_version}"
        ) from exc

    if len(parts) < 2:
        raise VersionParseError(f"missing minor version in {server_version}")

    try:
        minor = int(parts[1])
    except ValueError as exc:
        raise VersionParseError(
            f"failed to parse minor version from {server_version}"
        ) from exc

    return major, minor


def is_compatible(required: Tuple[int, int], actual: Tuple[int, int]) -> bool:
    """Major versions must match exactly; the minor must be at least the required one."""
    required_major, required_minor = required
    major, minor = actual
    return major == required_major and minor >= required_minor


def check_version(server_version: str, required_major: int, required_minor: int) -> None:
    """
    Compare a server version string against the required (major, minor).

    Raises:
        VersionParseError: If the version cannot be parsed
        VersionMismatchError: If the server is not compatible
    """
    actual = parse_version(server_version)
    if not is_compatible((required_major, required_minor), actual):
        raise VersionMismatchError(
            required_major, required_minor, _numeric_part(server_version)
        )
