"""
Command line entry point for Mega Tools: list the registered tools, print a tool's
input schema, or invoke a tool with a JSON payload.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from typing import List, Optional

from services.tool_service import get_tool, invoke_tool, list_tools
from tools.registry import UnknownToolError

EXIT_OK = 0
EXIT_TOOL_FAILED = 1
EXIT_USAGE = 2

log = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="megatools", description="Invoke agent tools from the command line")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="list registered tools")

    schema = sub.add_parser("schema", help="print a tool's JSON input schema")
    schema.add_argument("name")

    call = sub.add_parser("call", help="invoke a tool with a JSON payload")
    call.add_argument("name")
    call.add_argument("payload", nargs="?", default="{}", help="JSON object with the tool input")
    call.add_argument("--approve", action="store_true", help="approve the call if the tool requires approval")
    return parser


def run(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose)

    try:
        if args.command == "list":
            for entry in list_tools():
                print(f"{entry['name']:<18} {entry['description']}")
            return EXIT_OK

        if args.command == "schema":
            print(json.dumps(get_tool(args.name).input_schema(), indent=2))
            return EXIT_OK

        try:
            payload = json.loads(args.payload)
        except json.JSONDecodeError as exc:
            print(f"invalid JSON payload: {exc}", file=sys.stderr)
            return EXIT_USAGE
        if not isinstance(payload, dict):
            print("payload must be a JSON object", file=sys.stderr)
            return EXIT_USAGE

        result = asyncio.run(invoke_tool(args.name, payload, approved=args.approve))
    except UnknownToolError as exc:
        print(str(exc), file=sys.stderr)
        return EXIT_USAGE

    if result.ok:
        print(result.text)
        return EXIT_OK
    print(result.error, file=sys.stderr)
    if result.approval_required:
        print("re-run with --approve to allow this call", file=sys.stderr)
    return EXIT_TOOL_FAILED


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
