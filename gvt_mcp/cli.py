"""
Command-line dispatcher for `gvt`.

Usage:
    gvt init
    gvt add <file> [-m MESSAGE]
    gvt detach <file> [-m MESSAGE]
    gvt commit <file> [-m MESSAGE]
    gvt checkout <version>
    gvt history [-last N]
    gvt version [<version>]
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import TextIO

from gvt_mcp.models.result import OperationResult, OperationStatus
from gvt_mcp.tools.gvt.repository import Repository
from gvt_mcp.utils.dependencies import get_base_config

logger = logging.getLogger(__name__)

FILE_COMMANDS = {"add", "detach", "commit"}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="gvt", description="Minimal local version control.")
    parser.add_argument("command", nargs="?", help="init, add, detach, commit, checkout, history or version")
    parser.add_argument("target", nargs="?", help="The file for add/detach/commit, the version for checkout/version")
    parser.add_argument("-m", "--message", default=None, help="Message stored with the new version")
    parser.add_argument("-last", "--last", dest="limit", type=int, default=None, help="Number of versions listed by history")
    return parser


def run(argv: list[str], cwd: Path | None = None, out: TextIO | None = None, err: TextIO | None = None) -> int:
    """
    Runs a single command and returns its exit code.

    Args:
        argv: The command-line arguments, without the program name.
        cwd: The working directory to operate on. Defaults to the process CWD.
        out: Stream for successful output. Defaults to stdout.
        err: Stream for error output. Defaults to stderr.
    """
    out = out or sys.stdout
    err = err or sys.stderr
    args = build_parser().parse_args(argv)

    if not args.command:
        result = OperationResult.failure(None, OperationStatus.NO_ARGUMENTS, "Please specify command.")
    else:
        config = get_base_config()
        repository = Repository(cwd or Path.cwd(), dir_name=config.GVT_DIR_NAME)
        limit = args.limit if args.limit is not None else config.GVT_DEFAULT_HISTORY_LIMIT
        result = repository.dispatch(
            args.command,
            path=args.target if args.command in FILE_COMMANDS else None,
            message=args.message,
            version=args.target,
            limit=limit,
        )

    print(result.message, file=out if result.ok else err)
    logger.debug(f"gvt {args.command} finished with status {result.status} (exit code {result.exit_code})")
    return result.exit_code
