"""The chain of numbered snapshot directories and their details text."""

import logging
import os
import shutil
from dataclasses import dataclass
from pathlib import Path

from gvt_mcp.tools.gvt import constants
from gvt_mcp.tools.gvt.copier import copy_tree
from gvt_mcp.tools.gvt.errors import AlreadyInitialized, IOFailure
from gvt_mcp.tools.gvt.pointer_store import PointerStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StagedVersion:
    """A version under construction, not yet visible under its numeric name."""

    version_id: int
    path: Path


class VersionStore:
    """
    Owns `<root>/<N>/` snapshot directories and the pointers that track them.

    A new version is assembled in a hidden staging directory and renamed to
    its numeric name only when finalized, so a failed operation never leaves a
    half-built version behind in the chain.
    """

    def __init__(self, root: Path) -> None:
        self.root = root
        self.pointers = PointerStore(root)

    def exists(self) -> bool:
        return self.root.is_dir()

    def version_path(self, version_id: int) -> Path:
        return self.root / str(version_id)

    def staging_path(self, version_id: int) -> Path:
        return self.root / f"{constants.STAGING_PREFIX}{version_id}"

    def version_exists(self, version_id: int) -> bool:
        return version_id >= 0 and self.version_path(version_id).is_dir()

    def current_version(self) -> int:
        return self.pointers.read_current()

    def last_version(self) -> int:
        return self.pointers.read_last()

    def initialize(self) -> None:
        """
        Creates the repository root with an empty version 0.

        Raises:
            AlreadyInitialized: If the root already exists.
            IOFailure: If any directory or file cannot be created.
        """
        if self.root.exists():
            raise AlreadyInitialized()

        logger.info(f"Initializing repository at {self.root}")
        try:
            self.root.mkdir(parents=True)
            zero = self.version_path(0)
            zero.mkdir()
            (zero / constants.VERSION_DETAILS).write_text(constants.INITIAL_DETAILS, encoding="utf-8")
        except OSError as e:
            logger.error(f"Error initializing repository at {self.root}: {e}")
            raise IOFailure(f"Ran into {e} while initializing {self.root}", subject=0) from e
        self.pointers.advance(0)

    def create_next_version(self, base_version_id: int) -> StagedVersion:
        """
        Copies version `base_version_id` into the staging area of the next version.

        Leftovers of an earlier crash for the same id are removed first: a stale
        staging directory, or a numeric directory renamed into place whose
        pointer update never happened.

        Returns:
            The staged version, to be mutated and then finalized or discarded.
        """
        new_id = base_version_id + 1
        if new_id <= self.last_version():
            raise ValueError(f"Version {new_id} is already published; new versions must follow the head")
        staged = StagedVersion(version_id=new_id, path=self.staging_path(new_id))

        for leftover in (staged.path, self.version_path(new_id)):
            if leftover.exists():
                logger.warning(f"Removing unpublished version directory left by an interrupted operation: {leftover}")
                self._remove_tree(leftover, new_id)

        try:
            staged.path.mkdir()
        except OSError as e:
            raise IOFailure(f"Ran into {e} while creating version {new_id}", subject=new_id) from e
        try:
            copy_tree(self.version_path(base_version_id), staged.path)
        except IOFailure:
            self.discard(staged)
            raise
        logger.debug(f"Staged version {new_id} from version {base_version_id}")
        return staged

    def finalize_version(self, staged: StagedVersion, message: str) -> None:
        """
        Writes the details of a staged version, publishes it and advances both pointers.

        Raises:
            IOFailure: If the details cannot be written or the rename fails. The
                staged directory is left for the caller to discard. A failure
                while writing the pointers leaves the published directory in
                place; the next `create_next_version` reclaims it.
        """
        try:
            (staged.path / constants.VERSION_DETAILS).write_text(message, encoding="utf-8")
            os.replace(staged.path, self.version_path(staged.version_id))
        except (OSError, UnicodeError) as e:
            logger.error(f"Error finalizing version {staged.version_id}: {e}")
            raise IOFailure(f"Ran into {e} while finalizing version {staged.version_id}", subject=staged.version_id) from e
        self.pointers.advance(staged.version_id)
        logger.info(f"Version {staged.version_id} finalized")

    def discard(self, staged: StagedVersion) -> None:
        """Removes a staged version after a failed operation."""
        if staged.path.exists():
            logger.debug(f"Discarding staged version {staged.version_id}")
            self._remove_tree(staged.path, staged.version_id)

    def read_details(self, version_id: int) -> str:
        """Returns the details text stored with a version."""
        path = self.version_path(version_id) / constants.VERSION_DETAILS
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeError) as e:
            logger.error(f"Error reading details of version {version_id}: {e}")
            raise IOFailure(f"Ran into {e} while trying to read details of version {version_id}", subject=version_id) from e

    def _remove_tree(self, path: Path, version_id: int) -> None:
        try:
            shutil.rmtree(path)
        except OSError as e:
            raise IOFailure(f"Ran into {e} while removing {path}", subject=version_id) from e
