import logging
from pathlib import Path
from typing_extensions import override

from gvt_mcp.tools.base import Tool, ToolCallArguments, ToolError, ToolExecResult, ToolParameter
from gvt_mcp.tools.gvt.manager import RepositoryManager
from gvt_mcp.tools.gvt.repository import COMMANDS
from gvt_mcp.utils.path_utils import resolve_working_dir

# Настройка логирования
logger = logging.getLogger(__name__)


class GvtTool(Tool):
    """
    Tool for versioning files in a local directory.
    Supports init, add, detach, commit, checkout, version, history and status operations.
    """

    def __init__(
        self,
        repository_manager: RepositoryManager,
        workspace_root: Path | None = None,
        default_history_limit: int = 0,
    ) -> None:
        self._repository_manager = repository_manager
        self._workspace_root = workspace_root
        self._default_history_limit = default_history_limit

    @override
    def get_name(self) -> str:
        return "gvt"

    @override
    def get_description(self) -> str:
        return """
        Keeps a linear history of full snapshots of selected files in a directory.
        - `init`: Starts versioning the directory (creates version 0).
        - `add`: Starts tracking a file and records a new version.
        - `detach`: Stops tracking a file and records a new version. The file itself is kept.
        - `commit`: Records the current content of a tracked file as a new version.
        - `checkout`: Copies the files of a past version back into the directory.
        - `version`: Shows the id and message of a version (the current one by default).
        - `history`: Lists versions from newest to oldest with their message summaries.
        - `status`: Lists the files tracked in the latest version.
        """

    @override
    def get_parameters(self) -> list[ToolParameter]:
        return [
            ToolParameter(
                name="command",
                type="string",
                description="The gvt command to execute.",
                required=True,
                enum=list(COMMANDS),
            ),
            ToolParameter(
                name="path",
                type="string",
                description="The directory under version control.",
                required=True,
            ),
            ToolParameter(
                name="file",
                type="string",
                description="For `add`, `detach` and `commit`. The file path, relative to `path`.",
                required=False,
            ),
            ToolParameter(
                name="message",
                type="string",
                description="For `add`, `detach` and `commit`. The message stored with the new version.",
                required=False,
            ),
            ToolParameter(
                name="version",
                type="string",
                description="For `checkout` (required) and `version` (optional). The version number.",
                required=False,
            ),
            ToolParameter(
                name="limit",
                type="integer",
                description="For `history`. How many of the latest versions to list. 0 lists all.",
                required=False,
            ),
        ]

    @override
    async def execute(self, arguments: ToolCallArguments) -> ToolExecResult:
        command = arguments.get("command")
        path_str = arguments.get("path")

        if not command or not isinstance(command, str) or command not in COMMANDS:
            return ToolExecResult(error=f"A valid 'command' is required: {', '.join(COMMANDS)}.", error_code=1)

        if not path_str or not isinstance(path_str, str):
            return ToolExecResult(error="The 'path' parameter is required.", error_code=1)

        file_str = arguments.get("file")
        message = arguments.get("message")
        version = arguments.get("version")
        limit = arguments.get("limit", self._default_history_limit)

        if file_str is not None and not isinstance(file_str, str):
            return ToolExecResult(error="The 'file' parameter must be a string.", error_code=1)
        if message is not None and not isinstance(message, str):
            return ToolExecResult(error="The 'message' parameter must be a string.", error_code=1)
        if version is not None and not isinstance(version, (str, int)):
            return ToolExecResult(error="The 'version' parameter must be a string or an integer.", error_code=1)
        if not isinstance(limit, int) or isinstance(limit, bool):
            return ToolExecResult(error="The 'limit' parameter must be an integer.", error_code=1)

        try:
            working_dir = resolve_working_dir(path_str, self._workspace_root)
        except ToolError as e:
            return ToolExecResult(error=e.message, error_code=1)

        repository = self._repository_manager.get_repository(working_dir)
        result = repository.dispatch(command, path=file_str, message=message, version=version, limit=limit)
        logger.debug(f"gvt {command} in {working_dir}: {result.status}")

        if not result.ok:
            return ToolExecResult(error=result.message, error_code=result.exit_code)
        return ToolExecResult(output=result.message, error_code=result.exit_code)
