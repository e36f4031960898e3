"""Plain-text storage for the `current_version` and `last_version` pointers."""

import logging
import os
from pathlib import Path

from gvt_mcp.tools.gvt import constants
from gvt_mcp.tools.gvt.errors import CorruptState, IOFailure

logger = logging.getLogger(__name__)


class PointerStore:
    """
    Reads and writes the two version pointers kept in the repository root.

    Each pointer is a small text file holding a decimal integer. There is no
    locking and no atomicity across the two files: the repository assumes a
    single actor at a time.
    """

    def __init__(self, root: Path) -> None:
        self.root = root

    def _pointer_path(self, name: str) -> Path:
        return self.root / name

    def read(self, name: str) -> int:
        """
        Reads a pointer as a non-negative integer.

        Raises:
            IOFailure: If the pointer file cannot be read.
            CorruptState: If its content is not a non-negative decimal integer.
        """
        path = self._pointer_path(name)
        try:
            raw = path.read_text(encoding="utf-8").strip()
        except UnicodeDecodeError as e:
            raise CorruptState(f"Pointer {name} is not valid UTF-8 text.", subject=name) from e
        except OSError as e:
            logger.error(f"Error reading pointer {path}: {e}")
            raise IOFailure(f"Ran into {e} while trying to read {name}", subject=name) from e

        if not raw.isdecimal():
            raise CorruptState(f"Pointer {name} holds {raw!r}, expected a non-negative integer.", subject=name)
        return int(raw)

    def write(self, name: str, value: int) -> None:
        """Overwrites a pointer with the decimal text of `value`."""
        if value < 0:
            raise ValueError(f"Pointer values must be non-negative, got {value}")

        path = self._pointer_path(name)
        tmp_path = path.with_name(f".{name}.tmp")
        logger.debug(f"Writing pointer {name}={value}")
        try:
            tmp_path.write_text(str(value), encoding="utf-8")
            os.replace(tmp_path, path)
        except OSError as e:
            logger.error(f"Error writing pointer {path}: {e}")
            raise IOFailure(f"Ran into {e} while trying to write {name}", subject=name) from e

    def read_current(self) -> int:
        return self.read(constants.CURRENT_VERSION)

    def read_last(self) -> int:
        return self.read(constants.LAST_VERSION)

    def advance(self, value: int) -> None:
        """Moves both pointers to `value`, current first."""
        self.write(constants.CURRENT_VERSION, value)
        self.write(constants.LAST_VERSION, value)
