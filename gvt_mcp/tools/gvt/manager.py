# Copyright (c) 2025 ByteDance Ltd. and/or its affiliates
# SPDX-License-Identifier: MIT

import logging
from pathlib import Path
from threading import Lock

from gvt_mcp.tools.gvt import constants
from gvt_mcp.tools.gvt.repository import Repository

logger = logging.getLogger(__name__)


class RepositoryManager:
    """
    Manages the Repository instances used by the server.

    This class ensures that only one Repository instance exists per working
    directory. It uses a lock to ensure thread-safe creation of new instances.
    The lock only guards this in-process cache; operations on disk are not
    serialized across processes.
    """
    _instances: dict[Path, Repository]
    _lock: Lock

    def __init__(self, dir_name: str = constants.DEFAULT_REPOSITORY_DIR):
        self.dir_name = dir_name
        self._instances = {}
        self._lock = Lock()

    def get_repository(self, working_dir: Path) -> Repository:
        """
        Retrieves the Repository for a given working directory.

        Args:
            working_dir: The directory placed under version control.

        Returns:
            The cached Repository for the directory.
        """
        working_dir = Path(working_dir).resolve()

        # First, check without a lock for performance
        instance = self._instances.get(working_dir)
        if instance is None:
            with self._lock:
                # Double-check if another thread created it while we were waiting for the lock
                instance = self._instances.get(working_dir)
                if instance is None:
                    logger.info(f"Creating new Repository instance for: {working_dir}")
                    instance = Repository(working_dir, dir_name=self.dir_name)
                    self._instances[working_dir] = instance
        return instance
