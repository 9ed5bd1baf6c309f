"""CLI parser construction for ``modelcurl``.

This module wires subparsers but contains no execution logic. Subcommand
handlers live in ``cli_actions``.
"""

from __future__ import annotations

import argparse

from ...config.defaults import (
    CONNECTION_TEST_DEFAULT_PARALLEL,
    DEFAULT_MAX_TOKENS,
    DEFAULT_TEMPERATURE,
    SERVICE_DEFAULT_HOST,
    SERVICE_DEFAULT_PORT,
)

COMMANDS = {"send", "models", "test", "detect", "endpoints", "history", "serve"}


def _str2bool(v: str | None) -> bool:
    """Permissive truthy/falsey parsing; ``None`` (bare flag) means ``True``."""
    if v is None:
        return True
    val = v.strip().lower()
    if val in {"1", "t", "true", "y", "yes", "on"}:
        return True
    return False if val in {"0", "f", "false", "n", "no", "off"} else bool(val)


def add_stream_flags(parser: argparse.ArgumentParser) -> None:
    """Attach ``--stream``/``--no-stream``; streaming is the default."""
    grp = parser.add_mutually_exclusive_group()
    grp.add_argument("--stream", nargs="?", const=True, type=_str2bool, default=True)
    grp.add_argument("--no-stream", dest="stream", action="store_false")


def add_endpoint_flags(parser: argparse.ArgumentParser) -> None:
    """Select a saved endpoint (``--endpoint``) or describe one inline."""
    parser.add_argument("--endpoint", dest="endpoint_id", default=None, help="Saved endpoint id")
    parser.add_argument("--url", default=None, help="Base URL, e.g. https://api.openai.com/v1")
    parser.add_argument("--api-key", default=None)
    parser.add_argument(
        "--header",
        dest="headers",
        action="append",
        default=[],
        metavar="'NAME: VALUE'",
        help="Extra header (repeatable, sent in order)",
    )


def add_reasoning_flags(parser: argparse.ArgumentParser) -> None:
    grp = parser.add_argument_group("reasoning")
    grp.add_argument("--enable-thinking", action="store_true")
    grp.add_argument("--reasoning-effort", default=None, choices=["low", "medium", "high"])
    grp.add_argument("--max-completion-tokens", type=int, default=None)
    grp.add_argument("--thinking-budget", type=int, default=None)


def build_parser() -> argparse.ArgumentParser:
    """Construct the top-level parser and subcommands (no side effects)."""
    p = argparse.ArgumentParser(
        prog="modelcurl", description="Send chat-completion requests to OpenAI-compatible APIs"
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Emit structured logs to stderr")
    sub = p.add_subparsers(dest="cmd")

    # send
    p_send = sub.add_parser("send", help="Send one prompt (default)")
    add_endpoint_flags(p_send)
    p_send.add_argument("--model", default=None)
    p_send.add_argument("--prompt", required=True)
    p_send.add_argument("--system", default=None, help="Optional system message")
    p_send.add_argument("--temperature", type=float, default=DEFAULT_TEMPERATURE)
    p_send.add_argument("--max-tokens", type=int, default=DEFAULT_MAX_TOKENS)
    add_stream_flags(p_send)
    add_reasoning_flags(p_send)
    p_send.add_argument("--no-history", dest="history", action="store_false")
    p_send.add_argument("--json", action="store_true", help="Print the full outcome as JSON")

    # models
    p_models = sub.add_parser("models", help="List models advertised by an endpoint")
    add_endpoint_flags(p_models)

    # test
    p_test = sub.add_parser("test", help="Check endpoint connectivity")
    add_endpoint_flags(p_test)
    p_test.add_argument("--all", action="store_true", help="Check every saved endpoint")
    p_test.add_argument("--parallel", type=int, default=CONNECTION_TEST_DEFAULT_PARALLEL)

    # detect
    p_detect = sub.add_parser("detect", help="Show which provider rules apply to a model")
    p_detect.add_argument("model")

    # endpoints
    p_ep = sub.add_parser("endpoints", help="Manage saved endpoints")
    ep_sub = p_ep.add_subparsers(dest="ep_cmd", required=True)
    ep_sub.add_parser("list")
    p_ep_add = ep_sub.add_parser("add")
    p_ep_add.add_argument("--name", required=True)
    p_ep_add.add_argument("--url", default=None)
    p_ep_add.add_argument("--api-key", default=None)
    p_ep_add.add_argument("--header", dest="headers", action="append", default=[])
    p_ep_add.add_argument("--model", default="")
    p_ep_add.add_argument("--id", dest="endpoint_id", default=None, help="Replace this endpoint")
    p_ep_del = ep_sub.add_parser("delete")
    p_ep_del.add_argument("endpoint_id")
    p_ep_dup = ep_sub.add_parser("duplicate")
    p_ep_dup.add_argument("endpoint_id")

    # history
    p_hist = sub.add_parser("history", help="Show or clear request history")
    hist_sub = p_hist.add_subparsers(dest="hist_cmd", required=True)
    p_hist_list = hist_sub.add_parser("list")
    p_hist_list.add_argument("--limit", type=int, default=None)
    hist_sub.add_parser("clear")

    # serve
    p_serve = sub.add_parser("serve", help="Run the HTTP service")
    p_serve.add_argument("--host", default=SERVICE_DEFAULT_HOST)
    p_serve.add_argument("--port", type=int, default=SERVICE_DEFAULT_PORT)
    p_serve.add_argument("--reload", action="store_true")

    return p


__all__ = ["COMMANDS", "add_endpoint_flags", "add_reasoning_flags", "add_stream_flags", "build_parser"]
