"""
Tools exposed to the agent runtime behind one uniform interface.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from tools.base import Tool, ToolInputError, ToolResult
from tools.registry import ToolRegistry, UnknownToolError, default_tools, get_registry

__all__ = [
    "Tool",
    "ToolInputError",
    "ToolResult",
    "ToolRegistry",
    "UnknownToolError",
    "default_tools",
    "get_registry",
]
