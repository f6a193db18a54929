#!/usr/bin/env python3
"""
cli.py - call any Tencent AI endpoint from the shell.

Usage:
    tencent-ai ocr generalocr receipt.jpg
    tencent-ai nlp text_chat "hello" --param session=demo
    tencent-ai speech tts "你好" --param format=3 --log-level debug

Credentials come from --app-id/--app-key or TENCENT_AI_APP_ID/TENCENT_AI_APP_KEY.
"""

import argparse
import asyncio
import inspect
import json
import logging
import sys
from typing import Any, Dict, List

from rich.console import Console

from .api.clients import SERVICES, get_client
from .config import ClientConfig
from .errors import TencentAIError
from .utils.log_utils import configure_logging, get_logger

logger = get_logger(__name__)


def list_methods(service: str) -> List[str]:
    """Public coroutine methods of a service client."""
    client_cls = SERVICES[service]
    return sorted(
        name for name, _ in inspect.getmembers(client_cls, inspect.iscoroutinefunction)
        if not name.startswith("_")
    )


def parse_params(pairs: List[str]) -> Dict[str, str]:
    params = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise ValueError(f"Expected key=value, got {pair!r}")
        params[key] = value
    return params


def bind_arguments(method, positional: List[str], keyword: Dict[str, str]) -> inspect.BoundArguments:
    """Bind command-line strings to ``method``, converting int-annotated parameters."""
    signature = inspect.signature(method)
    bound = signature.bind(*positional, **keyword)
    for name, value in bound.arguments.items():
        if signature.parameters[name].annotation is int:
            try:
                bound.arguments[name] = int(value)
            except ValueError:
                raise ValueError(f"{name} must be an integer, got {value!r}") from None
    return bound


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Call Tencent AI endpoints")
    parser.add_argument("service", choices=sorted(SERVICES), help="Service to call")
    parser.add_argument("method", help="Endpoint method, e.g. generalocr or tts")
    parser.add_argument("args", nargs="*", help="Positional arguments for the method")
    parser.add_argument(
        "--param", "-p",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Keyword argument for the method (repeatable)"
    )
    parser.add_argument("--app-id", help="App id (default: $TENCENT_AI_APP_ID)")
    parser.add_argument("--app-key", help="App key (default: $TENCENT_AI_APP_KEY)")
    parser.add_argument("--proxy", help="HTTP proxy URL")
    parser.add_argument(
        "--log-level",
        choices=["debug", "info", "warning", "error", "critical", "none"],
        default="none",
        help="Set logging level ('none' to disable)"
    )
    return parser.parse_args(argv)


async def run(args) -> Dict[str, Any]:
    methods = list_methods(args.service)
    if args.method not in methods:
        raise ValueError(f"Unknown method {args.method!r} for {args.service}; choose from: {', '.join(methods)}")

    config = ClientConfig.from_env(app_id=args.app_id, app_key=args.app_key, proxy=args.proxy)
    client = get_client(args.service, config)
    method = getattr(client, args.method)
    bound = bind_arguments(method, args.args, parse_params(args.param))
    result = await method(*bound.args, **bound.kwargs)
    return result.data


def main(argv=None) -> int:
    args = parse_args(argv)
    if args.log_level.lower() != "none":
        configure_logging(getattr(logging, args.log_level.upper()))

    try:
        data = asyncio.run(run(args))
    except TencentAIError as err:
        logger.error("Request failed: %s", err)
        print(f"Error: {err}", file=sys.stderr)
        return 1
    except (ValueError, TypeError) as err:
        print(f"Error: {err}", file=sys.stderr)
        return 2

    Console().print_json(json.dumps(data, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
