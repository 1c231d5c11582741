"""Configuration management for the AeroSpace IPC client.

Loads optional settings from ~/.config/aerospace-ipc/config.cfg, falling back
to a .env file, and resolves the daemon socket path.
Provides ClientSettings (connection behaviour).
"""

import configparser
from dataclasses import dataclass
import getpass
import os
from pathlib import Path
from typing import Dict, Mapping, Optional

from dotenv import dotenv_values

from aerospace_ipc.core.constants import (
    DEFAULT_SOCKET_APP,
    DEFAULT_SOCKET_TEMPLATE,
    ENV_AEROSPACE_SOCK,
    ENV_VALIDATE_VERSION,
    MIN_MAJOR_VERSION,
    MIN_MINOR_VERSION,
)
from aerospace_ipc.core.exceptions import SocketPathError

# Default location for user configuration.
CONFIG_PATH = Path.home() / ".config" / "aerospace-ipc" / "config.cfg"
ENV_PATH = Path(".env")


@dataclass
class ClientSettings:
    socket_path: Optional[str] = None
    min_major_version: int = MIN_MAJOR_VERSION
    min_minor_version: int = MIN_MINOR_VERSION
    validate_version: bool = False


def load_raw_config(
    path: Path = CONFIG_PATH, env_path: Optional[Path] = ENV_PATH
) -> Dict[str, str]:
    """
    Load configuration values from the standard config path.

    The [DEFAULT] section of the config file wins; a .env file is only read
    when the config file does not exist. Values are returned with lowercase
    keys for convenience.
    """
    data: Dict[str, str] = {}

    if path.exists():
        cfg = configparser.ConfigParser()
        cfg.read(path)
        data.update({k.lower(): v for k, v in cfg["DEFAULT"].items()})
        return data

    if env_path is not None and env_path.exists():
        env_values = dotenv_values(env_path)
        data.update({k.lower(): v for k, v in env_values.items() if v is not None})

    return data


def _get_bool(raw: Mapping[str, str], key: str, default: bool = False) -> bool:
    value = raw.get(key, "")
    if isinstance(value, bool):
        return value
    if value is None or str(value).strip() == "":
        return default
    return str(value).strip().lower() in {"1", "true", "yes", "y", "on"}


def get_client_settings(
    raw: Optional[Dict[str, str]] = None,
    env: Optional[Mapping[str, str]] = None,
) -> ClientSettings:
    """
    Build ClientSettings from raw configuration values.

    Environment variables take precedence over the config file.
    Raises ValueError if a version value is not an integer.
    """
    raw = raw if raw is not None else load_raw_config()
    env = env if env is not None else os.environ

    socket_path = env.get(ENV_AEROSPACE_SOCK) or raw.get("socket_path") or None

    try:
        min_major = int(raw.get("min_major_version", MIN_MAJOR_VERSION))
        min_minor = int(raw.get("min_minor_version", MIN_MINOR_VERSION))
    except ValueError as exc:
        raise ValueError(f"Invalid minimum version in configuration: {exc}") from exc

    validate = _get_bool(raw, "validate_version", False)
    if env.get(ENV_VALIDATE_VERSION, "").strip():
        validate = _get_bool(env, ENV_VALIDATE_VERSION, validate)

    return ClientSettings(
        socket_path=socket_path,
        min_major_version=min_major,
        min_minor_version=min_minor,
        validate_version=validate,
    )


def default_socket_path(user: Optional[str] = None) -> str:
    """Derive the per-user socket path the daemon listens on by default."""
    if user is None:
        user = os.environ.get("USER") or getpass.getuser()
    return DEFAULT_SOCKET_TEMPLATE.format(app=DEFAULT_SOCKET_APP, user=user)


def get_socket_path(env: Optional[Mapping[str, str]] = None) -> str:
    """
    Resolve the daemon socket path.

    Uses AEROSPACESOCK when set, otherwise /tmp/bobko.aerospace-<user>.sock.

    Args:
        env: Environment mapping (defaults to os.environ)

    Returns:
        Path to an existing socket file

    Raises:
        SocketPathError: If the resolved path does not exist
    """
    env = env if env is not None else os.environ
    socket_path = env.get(ENV_AEROSPACE_SOCK) or default_socket_path(env.get("USER"))

    if not os.path.exists(socket_path):
        raise SocketPathError(
            f"failed to access socket path {socket_path}: no such file",
            socket_path=socket_path,
        )

    return socket_path
