"""Exception hierarchy for the AeroSpace IPC client."""

from typing import Optional


class AeroSpaceError(Exception):
    """Base exception for all AeroSpace client errors."""

    pass


class AeroSpaceConnectionError(AeroSpaceError):
    """Raised when the daemon socket cannot be reached or is not open."""

    pass


class SocketPathError(AeroSpaceConnectionError):
    """Raised when the daemon socket path cannot be resolved."""

    def __init__(self, message: str, socket_path: str = ""):
        super().__init__(message)
        self.socket_path = socket_path


class TransportError(AeroSpaceError):
    """
    Raised on write, read or envelope decode failures.

    Attributes:
        data: Raw bytes received before the failure (may be empty)
    """

    def __init__(self, message: str, data: bytes = b""):
        super().__init__(message)
        self.data = data


class CommandError(AeroSpaceError):
    """
    Raised when the daemon understood a command but reported a failure.

    Attributes:
        command: Operation name, when known
        exit_code: Exit code reported by the daemon
        stderr: Daemon stderr text
    """

    def __init__(
        self,
        message: str,
        exit_code: int = 0,
        stderr: str = "",
        command: Optional[str] = None,
    ):
        super().__init__(message)
        self.exit_code = exit_code
        self.stderr = stderr
        self.command = command


class ExitCodeError(CommandError):
    """Command failed with a non-zero exit code."""

    pass


class StderrError(CommandError):
    """Command exited with zero but wrote to stderr."""

    pass


class VersionMismatchError(AeroSpaceError):
    """
    Server version does not match the minimum client version.

    The class doubles as the sentinel callers match against, see
    `is_version_mismatch`.
    """

    def __init__(self, required_major: int, required_minor: int, current_version: str):
        self.required_major = required_major
        self.required_minor = required_minor
        self.current_version = current_version
        # Set by CustomConnector when the connection is kept open
        self.connection = None
        super().__init__(str(self))

    def __str__(self) -> str:
        return (
            f"Server version {self.current_version} does not match the minimum "
            f"required version {self.required_major}.{self.required_minor}.x"
        )

    def __reduce__(self):
        # The attached connection holds a socket and is not carried over
        return (type(self), (self.required_major, self.required_minor, self.current_version))


class VersionParseError(AeroSpaceError):
    """Server version string could not be parsed."""

    pass


class ValidationError(AeroSpaceError, ValueError):
    """Invalid arguments given to a command builder. Raised before any I/O."""

    pass


class ResponseDecodeError(AeroSpaceError):
    """Command stdout was not the JSON payload the mapper expected."""

    def __init__(self, message: str, stdout: str = "", stderr: str = ""):
        super().__init__(message)
        self.stdout = stdout
        self.stderr = stderr


class EmptyResultError(AeroSpaceError):
    """A singular query returned no results."""

    pass


class NoWindowFocusedError(EmptyResultError):
    pass


class NoWorkspaceFocusedError(EmptyResultError):
    pass


def is_version_mismatch(error: Optional[BaseException]) -> bool:
    """
    Check whether an error is, or was caused by, a version mismatch.

    Follows the explicit `__cause__` chain and the implicit `__context__`
    chain so wrapped errors still match.
    """
    seen = set()
    while error is not None and id(error) not in seen:
        if isinstance(error, VersionMismatchError):
            return True
        seen.add(id(error))
        error = error.__cause__ or error.__context__
    return False
