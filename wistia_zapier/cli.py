"""CLI to describe the app and run its operations against the live API."""
from __future__ import annotations

import argparse
import asyncio
import json
import sys
from typing import Any, Dict, List, Optional

import httpx

from .app import app
from .authentication import render_connection_label
from .config import settings
from .errors import AppError
from .runtime import Bundle, BundleMeta, create_app_tester
from .utils import setup_logger


def _parse_value(raw: str) -> Any:
    lowered = raw.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    return raw


def _parse_inputs(pairs: List[str]) -> Dict[str, Any]:
    input_data: Dict[str, Any] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise ValueError(f"Invalid input {pair!r}, expected KEY=VALUE")
        input_data[key] = _parse_value(value)
    return input_data


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Describe and invoke the Wistia app locally.")
    parser.add_argument("--api-key", default=None, help="Wistia API key (defaults to WISTIA_API_KEY)")
    parser.add_argument("--log-level", default=None)
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("describe", help="Print the app definition as JSON")
    subparsers.add_parser("test-auth", help="Verify the API key and print the connection label")

    invoke = subparsers.add_parser("invoke", help="Run a trigger or create")
    invoke.add_argument("kind", choices=["triggers", "creates"])
    invoke.add_argument("key")
    invoke.add_argument("--input", action="append", default=[], metavar="KEY=VALUE")
    invoke.add_argument("--dropdown", action="store_true", help="Run as a dynamic dropdown source")
    return parser


async def _run(args: argparse.Namespace, api_key: str, transport: Optional[httpx.AsyncBaseTransport]) -> Any:
    tester = create_app_tester(app, transport=transport)

    if args.command == "test-auth":
        result = await tester(app.authentication.test, Bundle(auth_data={"apiKey": api_key}), "authentication")
        return {
            "connectionLabel": render_connection_label(app.authentication.connection_label, result),
            "result": result,
        }

    action = app.get_trigger(args.key) if args.kind == "triggers" else app.get_create(args.key)
    bundle = Bundle(
        auth_data={"apiKey": api_key},
        input_data=_parse_inputs(args.input),
        meta=BundleMeta(is_filling_dynamic_dropdown=args.dropdown),
    )
    return await tester(action.operation.perform, bundle, action.key)


def main(argv: Optional[List[str]] = None, transport: Optional[httpx.AsyncBaseTransport] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    setup_logger(args.log_level)

    if args.command == "describe":
        print(json.dumps(app.to_schema(), indent=2))
        return 0

    api_key = args.api_key or settings.api_key
    if not api_key:
        print("No API key: pass --api-key or set WISTIA_API_KEY", file=sys.stderr)
        return 1

    try:
        result = asyncio.run(_run(args, api_key, transport))
    except (AppError, KeyError, ValueError) as exc:
        if isinstance(exc, AppError):
            message = exc.message
        elif isinstance(exc, KeyError):
            message = exc.args[0]
        else:
            message = str(exc)
        print(f"{type(exc).__name__}: {message}", file=sys.stderr)
        return 1

    print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
