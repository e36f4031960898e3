"""The user-facing repository operations built on top of the version store."""

import logging
from collections.abc import Callable
from pathlib import Path

from gvt_mcp.models.result import OperationResult, OperationStatus
from gvt_mcp.tools.gvt import constants
from gvt_mcp.tools.gvt.copier import copy_file, copy_tree
from gvt_mcp.tools.gvt.errors import FileNotFound, GvtError, InvalidVersion, IOFailure, NotInitialized, NotTracked
from gvt_mcp.tools.gvt.version_store import StagedVersion, VersionStore
from gvt_mcp.utils.path_utils import resolve_tracked_path

logger = logging.getLogger(__name__)

COMMANDS = ("init", "add", "detach", "commit", "checkout", "version", "history", "status")

_NO_FILE_MESSAGES = {
    "add": "Please specify file to add.",
    "detach": "Please specify file to detach.",
    "commit": "Please specify file to commit.",
}


class Repository:
    """
    A working directory placed under version control.

    All versioning state lives in a hidden directory inside the working
    directory. Every mutating operation appends exactly one version to the
    chain; checkout only restores files and never moves the pointers.

    Operations raise `GvtError` subclasses for failures and return an
    `OperationResult` otherwise. `dispatch` is the entry point for callers
    that want a result in every case.
    """

    def __init__(self, working_dir: Path, dir_name: str = constants.DEFAULT_REPOSITORY_DIR) -> None:
        self.working_dir = Path(working_dir).resolve()
        self.dir_name = dir_name
        self.root = self.working_dir / dir_name
        self.store = VersionStore(self.root)

    def __repr__(self) -> str:
        return f"Repository({str(self.working_dir)!r})"

    def is_initialized(self) -> bool:
        return self.store.exists()

    def _require_initialized(self) -> None:
        if not self.is_initialized():
            raise NotInitialized()

    def _resolve(self, path: str) -> Path:
        return resolve_tracked_path(self.working_dir, path, self.dir_name)

    def _is_tracked(self, relative: Path, version_id: int) -> bool:
        return (self.store.version_path(version_id) / relative).is_file()

    def _parse_version(self, value: str | int) -> int:
        """Parses a version argument and checks it against the head of the chain."""
        if isinstance(value, int) and not isinstance(value, bool):
            version_id = value
        elif isinstance(value, str) and value.strip().isdecimal():
            version_id = int(value.strip())
        else:
            raise InvalidVersion(value)

        if not 0 <= version_id <= self.store.last_version():
            raise InvalidVersion(value)
        return version_id

    def _apply(self, staged: StagedVersion, mutation: Callable[[Path], None], message: str) -> None:
        """Runs one mutation against a staged version, then publishes it."""
        try:
            mutation(staged.path)
            self.store.finalize_version(staged, message)
        except Exception:
            self.store.discard(staged)
            raise

    # --- Operations ---

    def init(self) -> OperationResult:
        self.store.initialize()
        return OperationResult.success("init", constants.MSG_INIT_SUCCESS, version=0)

    def add(self, path: str, message: str | None = None) -> OperationResult:
        """
        Starts tracking a working-directory file.

        Adding a file that is already tracked changes nothing and is reported
        as a note rather than an error.
        """
        self._require_initialized()
        relative = self._resolve(path)
        display = relative.as_posix()
        source = self.working_dir / relative
        if not source.is_file():
            raise FileNotFound(display)

        last = self.store.last_version()
        if self._is_tracked(relative, last):
            logger.info(f"File {display} is already tracked in version {last}")
            return OperationResult.note("add", OperationStatus.ALREADY_TRACKED, constants.MSG_ALREADY_ADDED.format(path=display))

        staged = self.store.create_next_version(last)
        self._apply(
            staged,
            lambda version_dir: copy_file(source, version_dir / relative),
            message or constants.DEFAULT_ADD_MESSAGE.format(path=display),
        )
        return OperationResult.success("add", constants.MSG_ADD_SUCCESS.format(path=display), version=staged.version_id)

    def detach(self, path: str, message: str | None = None) -> OperationResult:
        """Stops tracking a file. The working-directory copy is not touched."""
        self._require_initialized()
        relative = self._resolve(path)
        display = relative.as_posix()

        last = self.store.last_version()
        if not self._is_tracked(relative, last):
            return OperationResult.note("detach", OperationStatus.NOT_TRACKED, constants.MSG_NOT_ADDED.format(path=display))

        def remove(version_dir: Path) -> None:
            target = version_dir / relative
            try:
                target.unlink()
                # Drop directories the removal left empty
                for parent in target.parents:
                    if parent == version_dir or any(parent.iterdir()):
                        break
                    parent.rmdir()
            except OSError as e:
                raise IOFailure(f"Ran into {e} while detaching {display}", subject=display) from e

        staged = self.store.create_next_version(last)
        self._apply(staged, remove, message or constants.DEFAULT_DETACH_MESSAGE.format(path=display))
        return OperationResult.success("detach", constants.MSG_DETACH_SUCCESS.format(path=display), version=staged.version_id)

    def commit(self, path: str, message: str | None = None) -> OperationResult:
        """Records the current working-directory content of a tracked file."""
        self._require_initialized()
        relative = self._resolve(path)
        display = relative.as_posix()
        source = self.working_dir / relative
        if not source.is_file():
            raise FileNotFound(display)

        last = self.store.last_version()
        if not self._is_tracked(relative, last):
            raise NotTracked(display)

        staged = self.store.create_next_version(last)
        self._apply(
            staged,
            lambda version_dir: copy_file(source, version_dir / relative),
            message or constants.DEFAULT_COMMIT_MESSAGE.format(path=display),
        )
        return OperationResult.success("commit", constants.MSG_COMMIT_SUCCESS.format(path=display), version=staged.version_id)

    def checkout(self, version: str | int) -> OperationResult:
        """
        Copies a past version into the working directory.

        Files that exist in the working directory but not in the version are
        left untouched. No version is created and the pointers do not move.
        """
        self._require_initialized()
        version_id = self._parse_version(version)
        # Every restored file must land inside the working directory, even if
        # a directory on its way was replaced by a symlink since it was added.
        for relative in self._snapshot_files(version_id):
            self._resolve(relative)
        copy_tree(self.store.version_path(version_id), self.working_dir, ignore=[constants.VERSION_DETAILS])
        logger.info(f"Checked out version {version_id} into {self.working_dir}")
        return OperationResult.success("checkout", constants.MSG_CHECKOUT_SUCCESS.format(version=version_id), version=version_id)

    def show_version(self, version: str | int | None = None) -> OperationResult:
        """Returns the id and details of a version, the current one by default."""
        self._require_initialized()
        if version is None or (isinstance(version, str) and not version.strip()):
            version_id = self.store.current_version()
        else:
            version_id = self._parse_version(version)

        details = self.store.read_details(version_id)
        return OperationResult.success(
            "version",
            constants.MSG_VERSION.format(version=version_id, details=details),
            version=version_id,
            details=details,
        )

    def history(self, limit: int = 0) -> OperationResult:
        """
        Lists versions from the newest down, one `<id>: <summary>` line each.

        A `limit` of zero or less, or larger than the chain, lists everything.
        """
        self._require_initialized()
        last = self.store.last_version()
        if limit <= 0 or limit > last + 1:
            limit = last + 1

        lines = []
        for version_id in range(last, last - limit, -1):
            details = self.store.read_details(version_id)
            summary = details.splitlines()[0] if details else ""
            lines.append(f"{version_id}: {summary}")
        return OperationResult.success("history", "\n".join(lines), version=last, lines=lines)

    def _snapshot_files(self, version_id: int) -> list[str]:
        version_dir = self.store.version_path(version_id)
        return sorted(
            path.relative_to(version_dir).as_posix()
            for path in version_dir.rglob("*")
            if path.is_file() and path.relative_to(version_dir).parts != (constants.VERSION_DETAILS,)
        )

    def tracked_files(self) -> list[str]:
        """Relative paths of the files tracked in the head version."""
        self._require_initialized()
        return self._snapshot_files(self.store.last_version())

    def status(self) -> OperationResult:
        files = self.tracked_files()
        last = self.store.last_version()
        lines = [f"Version: {last}", *files]
        return OperationResult.success("status", "\n".join(lines), version=last, lines=files)

    def dispatch(
        self,
        command: str,
        path: str | None = None,
        message: str | None = None,
        version: str | int | None = None,
        limit: int | None = None,
    ) -> OperationResult:
        """
        Runs one operation by name and always returns a result.

        Repository errors are converted into failed results; anything else
        propagates to the caller.
        """
        if command not in COMMANDS:
            return OperationResult.failure(command, OperationStatus.UNKNOWN_COMMAND, f"Unknown command. {command}")
        if command in _NO_FILE_MESSAGES and not path:
            return OperationResult.failure(command, OperationStatus.NO_FILE_SPECIFIED, _NO_FILE_MESSAGES[command])

        logger.debug(f"Dispatching {command} in {self.working_dir}")
        try:
            match command:
                case "init":
                    return self.init()
                case "add":
                    return self.add(path, message)
                case "detach":
                    return self.detach(path, message)
                case "commit":
                    return self.commit(path, message)
                case "checkout":
                    if version is None or version == "":
                        raise InvalidVersion("")
                    return self.checkout(version)
                case "version":
                    return self.show_version(version)
                case "history":
                    return self.history(limit or 0)
                case _:  # status
                    return self.status()
        except GvtError as e:
            logger.warning(f"{command} failed in {self.working_dir}: {e.message}")
            return OperationResult.failure(command, e.status, e.message)
