"""modelcurl command-line interface (package entrypoint).

Argument parsing lives in ``cli_parser`` and subcommand handlers in
``cli_actions``; this module only wires settings, logging and storage
together and picks the handler.

Public API re-exports:
- ``main``: CLI entrypoint callable
"""

from __future__ import annotations

import sys
from typing import Optional

from ...base.logging import configure_logger
from ...config import get_settings
from ...persistence import open_store
from .cli_actions import dispatch
from .cli_parser import COMMANDS, build_parser


def main(argv: Optional[list[str]] = None) -> int:
    """CLI entrypoint.

    Parameters
    ----------
    argv: Optional[list[str]]
        Argument vector; when ``None`` uses ``sys.argv[1:]``.

    Returns
    -------
    int
        Process exit code (0 success, 1 request/store failure, 2 usage error).
    """
    p = build_parser()
    argv_list = list(sys.argv[1:] if argv is None else argv)
    # `modelcurl --prompt hi` means `modelcurl send --prompt hi`
    if argv_list and argv_list[0] not in COMMANDS and argv_list[0] not in {"-h", "--help", "-v", "--verbose"}:
        argv_list = ["send"] + argv_list
    args = p.parse_args(argv_list)
    if args.cmd is None:
        p.print_help(sys.stderr)
        return 2

    settings = get_settings()
    configure_logger(level="DEBUG" if args.verbose else "WARNING", json_mode=settings["log_json"])
    endpoints, history = open_store(settings=settings)
    return dispatch(args, endpoints, history)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
