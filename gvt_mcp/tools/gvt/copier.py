"""Recursive directory and file copying used to build and restore snapshots."""

import logging
import os
import shutil
from collections.abc import Iterable
from pathlib import Path

from gvt_mcp.tools.gvt.errors import IOFailure

logger = logging.getLogger(__name__)


def copy_tree(source: Path, destination: Path, ignore: Iterable[str] = ()) -> None:
    """
    Recursively copies every directory and file under `source` into `destination`.

    Destination directories are created as needed and existing files are
    overwritten. Entries present only in `destination` are left alone, and
    directories that already exist keep their own mode and timestamps.

    Args:
        source: The directory to copy from.
        destination: The directory to copy into.
        ignore: Names of top-level entries of `source` to skip.

    Raises:
        IOFailure: If the source is missing or any read or write fails. The
            destination may be left partially populated.
    """
    skipped = set(ignore)

    logger.debug(f"Copying tree {source} -> {destination}")
    if not source.is_dir():
        raise IOFailure(f"Source directory does not exist: {source}", subject=str(source))

    def _raise(error: OSError) -> None:
        raise error

    try:
        for dirpath, dirnames, filenames in os.walk(source, onerror=_raise):
            current = Path(dirpath)
            if current == source:
                dirnames[:] = [name for name in dirnames if name not in skipped]
                filenames = [name for name in filenames if name not in skipped]
            target_dir = destination / current.relative_to(source)
            target_dir.mkdir(parents=True, exist_ok=True)
            for name in filenames:
                shutil.copy2(current / name, target_dir / name)
    except OSError as e:
        logger.error(f"Error copying {source} to {destination}: {e}")
        raise IOFailure(f"Ran into {e} while copying {source} to {destination}", subject=str(source)) from e


def copy_file(source: Path, destination: Path) -> None:
    """Copies a single file, creating the parent directories of `destination`."""
    logger.debug(f"Copying file {source} -> {destination}")
    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(source, destination)
    except OSError as e:
        logger.error(f"Error copying {source} to {destination}: {e}")
        raise IOFailure(f"Ran into {e} while copying {source}", subject=str(source)) from e
