"""
Tool service that validates raw tool input, evaluates the tool's approval predicate
and invokes it.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""
from __future__ import annotations

import logging
import time
from typing import Any, Dict, List, Mapping, Optional

from tools.base import Tool, ToolInputError, ToolResult
from tools.registry import ToolRegistry, get_registry

log = logging.getLogger(__name__)


def list_tools(registry: Optional[ToolRegistry] = None) -> List[Dict[str, Any]]:
    return [tool.describe() for tool in (registry or get_registry())]


def get_tool(name: str, registry: Optional[ToolRegistry] = None) -> Tool:
    return (registry or get_registry()).get(name)


def needs_approval(name: str, payload: Mapping[str, Any], registry: Optional[ToolRegistry] = None) -> bool:
    tool = get_tool(name, registry)
    return tool.requires_approval(tool.parse(payload))


async def invoke_tool(
    name: str,
    payload: Mapping[str, Any],
    approved: bool = False,
    registry: Optional[ToolRegistry] = None,
) -> ToolResult:
    tool = get_tool(name, registry)
    try:
        params = tool.parse(payload)
    except ToolInputError as exc:
        log.info("Rejected %s input: %s", name, exc)
        return ToolResult.failure(name, str(exc))

    if tool.requires_approval(params) and not approved:
        log.info("%s requires approval; not invoked", name)
        return ToolResult.failure(name, f"Tool {name!r} requires approval for this input", approval_required=True)

    started = time.monotonic()
    result = await tool.invoke(params)
    log.info("%s finished ok=%s in %.3fs", name, result.ok, time.monotonic() - started)
    return result
