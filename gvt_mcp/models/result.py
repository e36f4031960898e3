from enum import StrEnum

from pydantic import BaseModel, Field


class OperationStatus(StrEnum):
    """Classification of an operation outcome, mapped to exit codes by callers."""

    SUCCESS = "success"
    ALREADY_TRACKED = "already_tracked"
    NOT_TRACKED = "not_tracked"
    NOT_INITIALIZED = "not_initialized"
    ALREADY_INITIALIZED = "already_initialized"
    FILE_NOT_FOUND = "file_not_found"
    INVALID_PATH = "invalid_path"
    INVALID_VERSION = "invalid_version"
    IO_FAILURE = "io_failure"
    CORRUPT_STATE = "corrupt_state"
    # Dispatcher level, never produced by the repository itself
    NO_ARGUMENTS = "no_arguments"
    UNKNOWN_COMMAND = "unknown_command"
    NO_FILE_SPECIFIED = "no_file_specified"


_GENERIC_EXIT_CODES: dict[OperationStatus, int] = {
    OperationStatus.SUCCESS: 0,
    OperationStatus.ALREADY_TRACKED: 0,
    OperationStatus.NOT_TRACKED: 0,
    OperationStatus.NO_ARGUMENTS: 1,
    OperationStatus.UNKNOWN_COMMAND: 1,
    OperationStatus.NOT_INITIALIZED: -2,
    OperationStatus.IO_FAILURE: -3,
    OperationStatus.ALREADY_INITIALIZED: 10,
    OperationStatus.INVALID_VERSION: 60,
}

_COMMAND_EXIT_CODES: dict[str, dict[OperationStatus, int]] = {
    "add": {
        OperationStatus.NO_FILE_SPECIFIED: 20,
        OperationStatus.FILE_NOT_FOUND: 21,
        OperationStatus.IO_FAILURE: 22,
    },
    "detach": {
        OperationStatus.NO_FILE_SPECIFIED: 30,
        OperationStatus.IO_FAILURE: 31,
    },
    "commit": {
        OperationStatus.NO_FILE_SPECIFIED: 50,
        OperationStatus.FILE_NOT_FOUND: 51,
        OperationStatus.IO_FAILURE: 52,
        OperationStatus.NOT_TRACKED: 53,
    },
}


def exit_code_for(command: str | None, status: OperationStatus) -> int:
    """
    Maps a command and its outcome status to a process exit code.

    Invalid paths and corrupt pointer files have no code of their own; they
    reuse the I/O failure code of the command.
    """
    per_command = _COMMAND_EXIT_CODES.get(command or "", {})
    if status in (OperationStatus.INVALID_PATH, OperationStatus.CORRUPT_STATE):
        status = OperationStatus.IO_FAILURE
    if status in per_command:
        return per_command[status]
    return _GENERIC_EXIT_CODES.get(status, 1)


class OperationResult(BaseModel):
    """The structured outcome of a single repository operation."""

    command: str | None = None
    status: OperationStatus = OperationStatus.SUCCESS
    message: str = ""
    ok: bool = True
    version: int | None = None  # Version created, checked out or shown
    details: str | None = None  # Details text of a shown version
    lines: list[str] = Field(default_factory=list)

    @classmethod
    def success(cls, command: str, message: str, **kwargs) -> "OperationResult":
        return cls(command=command, status=OperationStatus.SUCCESS, message=message, ok=True, **kwargs)

    @classmethod
    def note(cls, command: str, status: OperationStatus, message: str) -> "OperationResult":
        """A non-fatal outcome: nothing changed, but the caller did nothing wrong."""
        return cls(command=command, status=status, message=message, ok=True)

    @classmethod
    def failure(cls, command: str | None, status: OperationStatus, message: str) -> "OperationResult":
        return cls(command=command, status=status, message=message, ok=False)

    @property
    def exit_code(self) -> int:
        if self.ok:
            return 0
        return exit_code_for(self.command, self.status)
