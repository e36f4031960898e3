import os
from pathlib import Path

from gvt_mcp.tools.base import ToolError
from gvt_mcp.tools.gvt import constants
from gvt_mcp.tools.gvt.errors import InvalidPath


def resolve_working_dir(path_str: str, workspace_root: Path | None = None) -> Path:
    """
    Resolves the working directory a tool call operates on.

    Args:
        path_str: The directory provided by the caller.
        workspace_root: If set, the resolved directory must lie inside it.

    Returns:
        A resolved, existing directory.

    Raises:
        ToolError: If the path is not a directory or escapes the workspace root.
    """
    path = Path(path_str).expanduser()
    if workspace_root is not None and not path.is_absolute():
        path = workspace_root / path

    resolved_path = path.resolve()
    if workspace_root is not None and not resolved_path.is_relative_to(workspace_root.resolve()):
        raise ToolError(f"Path '{path_str}' is outside the workspace root.")
    if not resolved_path.is_dir():
        raise ToolError(f"The provided path is not a directory: {resolved_path}")
    return resolved_path


def resolve_tracked_path(working_dir: Path, path_str: str, repository_dir: str = constants.DEFAULT_REPOSITORY_DIR) -> Path:
    """
    Normalizes a file argument into a path relative to the working directory.

    The same relative path addresses the file in the working directory and
    inside every version snapshot.

    Raises:
        InvalidPath: If the path is empty, escapes the working directory
            (directly or through a symlink), points into the repository root
            or names the details file.
    """
    if not path_str or not path_str.strip():
        raise InvalidPath(path_str, "empty path")

    path = Path(path_str).expanduser()
    target = path if path.is_absolute() else working_dir / path
    # Only `..` is collapsed here; symlinks are checked below.
    normalized = Path(os.path.normpath(target))
    try:
        relative = normalized.relative_to(working_dir)
    except ValueError:
        raise InvalidPath(path_str, "outside the working directory") from None

    if not relative.parts:
        raise InvalidPath(path_str, "refers to the working directory itself")
    if relative.parts[0] == repository_dir:
        raise InvalidPath(path_str, "inside the repository directory")
    if relative.parts == (constants.VERSION_DETAILS,):
        raise InvalidPath(path_str, "reserved name")

    # The unresolved path names the file inside snapshots. Following symlinks
    # must not lead out of the working directory or into the repository.
    root = working_dir.resolve()
    try:
        resolved = (working_dir / relative).resolve()
    except (OSError, RuntimeError) as e:
        raise InvalidPath(path_str, f"cannot be resolved: {e}") from e
    if not resolved.is_relative_to(root):
        raise InvalidPath(path_str, "resolves outside the working directory")
    if resolved.relative_to(root).parts[:1] == (repository_dir,):
        raise InvalidPath(path_str, "resolves inside the repository directory")
    return relative

