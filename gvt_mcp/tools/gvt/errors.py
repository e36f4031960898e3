"""Errors raised by the version store and the repository operations."""

from gvt_mcp.models.result import OperationStatus
from gvt_mcp.tools.base import ToolError
from gvt_mcp.tools.gvt import constants


class GvtError(ToolError):
    """
    Base class for repository errors.

    Each subclass carries the status it maps to and the subject involved
    (a file path or a version id) so the caller can render it.
    """

    status: OperationStatus = OperationStatus.IO_FAILURE

    def __init__(self, message: str, subject: str | int | None = None):
        super().__init__(message)
        self.subject = subject


class NotInitialized(GvtError):
    status = OperationStatus.NOT_INITIALIZED

    def __init__(self) -> None:
        super().__init__(constants.MSG_NOT_INITIALIZED)


class AlreadyInitialized(GvtError):
    status = OperationStatus.ALREADY_INITIALIZED

    def __init__(self) -> None:
        super().__init__(constants.MSG_ALREADY_INITIALIZED)


class FileNotFound(GvtError):
    """The working-directory file an operation needs does not exist."""

    status = OperationStatus.FILE_NOT_FOUND

    def __init__(self, path: str) -> None:
        super().__init__(constants.MSG_FILE_NOT_FOUND.format(path=path), subject=path)


class NotTracked(GvtError):
    status = OperationStatus.NOT_TRACKED

    def __init__(self, path: str) -> None:
        super().__init__(constants.MSG_NOT_ADDED.format(path=path), subject=path)


class InvalidPath(GvtError):
    status = OperationStatus.INVALID_PATH

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(constants.MSG_INVALID_PATH.format(path=path, reason=reason), subject=path)


class InvalidVersion(GvtError):
    status = OperationStatus.INVALID_VERSION

    def __init__(self, version: str | int) -> None:
        super().__init__(constants.MSG_INVALID_VERSION.format(version=version), subject=version)


class IOFailure(GvtError):
    """Any underlying filesystem error, wrapped with the file or version it concerns."""

    status = OperationStatus.IO_FAILURE

    def __init__(self, detail: str, subject: str | int | None = None) -> None:
        super().__init__(constants.MSG_IO_FAILURE.format(detail=detail), subject=subject)


class CorruptState(GvtError):
    status = OperationStatus.CORRUPT_STATE

    def __init__(self, detail: str, subject: str | int | None = None) -> None:
        super().__init__(constants.MSG_CORRUPT_STATE.format(detail=detail), subject=subject)
