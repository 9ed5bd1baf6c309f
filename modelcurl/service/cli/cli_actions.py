"""CLI action handlers.

Purpose
-------
Subcommand handlers for ``modelcurl``. Each handler takes the parsed
namespace, prints its result to stdout and returns the process exit code:
``0`` on success, ``1`` when a request or the store fails, ``2`` for
invalid argument combinations.

Output
------
Structured results are printed as JSON. ``send`` in streaming mode writes
tokens to stdout as they arrive and the metrics summary to stderr, so
stdout carries only the model's answer.

Errors are printed to stderr as ``{"error": ..., "code": ...}``.
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Dict, List, Optional, Tuple

from ...base.errors import BridgeError
from ...base.models import (
    SYSTEM,
    USER,
    Endpoint,
    Message,
    ReasoningConfig,
    TokenEvent,
    UnifiedRequest,
    display_name,
)
from ...bridge import execute_request, fetch_models, test_connection, test_endpoints
from ...config.defaults import DEFAULT_ENDPOINT_URL, DEFAULT_MODEL
from ...persistence import EndpointRepoJson, HistoryRepoJson, StoreError
from ...providers import detect_provider


class UsageError(ValueError):
    """Invalid argument combination detected after parsing."""


def _emit(payload: Any) -> None:
    print(json.dumps(payload, ensure_ascii=False))


def _fail(message: str, code: Optional[str] = None) -> None:
    print(json.dumps({"error": message, "code": code}, ensure_ascii=False), file=sys.stderr)


def parse_header(raw: str) -> Tuple[str, str]:
    """Split ``'Name: value'`` (or ``Name=value``) into a header pair."""
    for sep in (":", "="):
        if sep in raw:
            name, value = raw.split(sep, 1)
            if name.strip():
                return name.strip(), value.strip()
    raise UsageError(f"invalid header {raw!r}; expected 'Name: value'")


def resolve_endpoint(args: argparse.Namespace, endpoints: EndpointRepoJson) -> Endpoint:
    """Return the saved endpoint named by ``--endpoint`` or an inline one."""
    if args.endpoint_id:
        if args.url or args.api_key or args.headers:
            raise UsageError("--endpoint cannot be combined with --url/--api-key/--header")
        found = endpoints.get_endpoint(args.endpoint_id)
        if found is None:
            raise UsageError(f"unknown endpoint: {args.endpoint_id}")
        return found
    return Endpoint.create(
        "cli",
        args.url or DEFAULT_ENDPOINT_URL,
        api_key=args.api_key,
        headers=[parse_header(h) for h in args.headers],
        id="cli",
    )


def build_request(args: argparse.Namespace, endpoint: Endpoint) -> UnifiedRequest:
    messages: List[Message] = []
    if args.system:
        messages.append(Message(role=SYSTEM, content=args.system))
    messages.append(Message(role=USER, content=args.prompt))
    reasoning: Optional[ReasoningConfig] = None
    if (
        args.enable_thinking
        or args.reasoning_effort
        or args.max_completion_tokens is not None
        or args.thinking_budget is not None
    ):
        reasoning = ReasoningConfig(
            enable_thinking=args.enable_thinking,
            reasoning_effort=args.reasoning_effort,
            max_completion_tokens=args.max_completion_tokens,
            thinking_budget_tokens=args.thinking_budget,
        )
    if args.max_tokens <= 0:
        raise UsageError("--max-tokens must be positive")
    return UnifiedRequest(
        model=args.model or endpoint.model or DEFAULT_MODEL,
        messages=messages,
        temperature=args.temperature,
        max_tokens=args.max_tokens,
        stream=bool(args.stream),
        reasoning_config=reasoning,
    )


def _print_token(event: TokenEvent) -> None:
    sys.stdout.write(event.token)
    sys.stdout.flush()


def handle_send(args: argparse.Namespace, endpoints: EndpointRepoJson, history: HistoryRepoJson) -> int:
    endpoint = resolve_endpoint(args, endpoints)
    request = build_request(args, endpoint)
    live = request.stream and not args.json
    outcome = execute_request(endpoint, request, sink=_print_token if live else None)
    if args.history:
        history.record_outcome(endpoint, request, outcome)
    if args.json:
        _emit(outcome.to_dict())
    elif live:
        sys.stdout.write("\n")
        print(json.dumps({"metrics": outcome.metrics.to_dict()}), file=sys.stderr)
    else:
        print(outcome.content)
        print(json.dumps({"metrics": outcome.metrics.to_dict()}), file=sys.stderr)
    return 0


def handle_models(args: argparse.Namespace, endpoints: EndpointRepoJson) -> int:
    endpoint = resolve_endpoint(args, endpoints)
    _emit({"models": fetch_models(endpoint)})
    return 0


def handle_test(args: argparse.Namespace, endpoints: EndpointRepoJson) -> int:
    if args.all:
        reports = test_endpoints(endpoints.list_endpoints(), parallel=args.parallel)
        _emit({"reports": [r.to_dict() for r in reports]})
        return 0 if all(r.ok for r in reports) else 1
    endpoint = resolve_endpoint(args, endpoints)
    _emit(test_connection(endpoint).to_dict())
    return 0


def handle_detect(args: argparse.Namespace) -> int:
    tag = detect_provider(args.model)
    _emit(
        {
            "model": args.model,
            "provider": tag.value if tag is not None else None,
            "display_name": display_name(tag),
            "reasoning": tag is not None,
        }
    )
    return 0


def handle_endpoints(args: argparse.Namespace, endpoints: EndpointRepoJson) -> int:
    if args.ep_cmd == "list":
        _emit({"endpoints": [e.to_dict() for e in endpoints.list_endpoints()]})
        return 0
    if args.ep_cmd == "add":
        endpoint = Endpoint.create(
            args.name,
            args.url or DEFAULT_ENDPOINT_URL,
            api_key=args.api_key,
            headers=[parse_header(h) for h in args.headers],
            model=args.model,
            id=args.endpoint_id,
        )
        saved = endpoints.save_endpoint(endpoint) if args.endpoint_id else endpoints.add_endpoint(endpoint)
        _emit({"endpoint": saved.to_dict()})
        return 0
    if args.ep_cmd == "delete":
        if not endpoints.delete_endpoint(args.endpoint_id):
            _fail(f"unknown endpoint: {args.endpoint_id}", "not_found")
            return 1
        _emit({"deleted": args.endpoint_id})
        return 0
    copy = endpoints.duplicate_endpoint(args.endpoint_id)
    if copy is None:
        _fail(f"unknown endpoint: {args.endpoint_id}", "not_found")
        return 1
    _emit({"endpoint": copy.to_dict()})
    return 0


def handle_history(args: argparse.Namespace, history: HistoryRepoJson) -> int:
    if args.hist_cmd == "clear":
        history.clear()
        _emit({"cleared": True})
        return 0
    items = history.list_history()
    if args.limit is not None and args.limit >= 0:
        items = items[-args.limit:] if args.limit else []
    _emit({"history": [i.to_dict() for i in items]})
    return 0


def handle_serve(args: argparse.Namespace) -> int:
    # uvicorn is only needed for this command
    from ..dev_server import serve

    serve(host=args.host, port=args.port, reload=args.reload)
    return 0


def dispatch(args: argparse.Namespace, endpoints: EndpointRepoJson, history: HistoryRepoJson) -> int:
    """Run the handler for ``args.cmd`` and map failures to exit codes."""
    try:
        if args.cmd == "send":
            return handle_send(args, endpoints, history)
        if args.cmd == "models":
            return handle_models(args, endpoints)
        if args.cmd == "test":
            return handle_test(args, endpoints)
        if args.cmd == "detect":
            return handle_detect(args)
        if args.cmd == "endpoints":
            return handle_endpoints(args, endpoints)
        if args.cmd == "history":
            return handle_history(args, history)
        return handle_serve(args)
    except UsageError as exc:
        _fail(str(exc), "usage")
        return 2
    except BridgeError as exc:
        _fail(str(exc), exc.code.value)
        return 1
    except StoreError as exc:
        _fail(str(exc), "store")
        return 1


__all__ = [
    "UsageError",
    "parse_header",
    "resolve_endpoint",
    "build_request",
    "handle_send",
    "handle_models",
    "handle_test",
    "handle_detect",
    "handle_endpoints",
    "handle_history",
    "handle_serve",
    "dispatch",
]
