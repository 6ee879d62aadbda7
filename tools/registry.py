"""
Registry of the tools exposed to the agent runtime.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Optional

from tools.analytics import MobyTool
from tools.base import Tool
from tools.calculator import CalculatorTool
from tools.clock import TimeTool
from tools.file_operations import FileOperationsTool
from tools.forecast import ForecastTool
from tools.image_generation import ImageGenerationTool
from tools.search import SearchTool
from tools.system_info import SystemInfoTool
from tools.urban_dictionary import UrbanDictionaryTool
from tools.weather import WeatherTool
from tools.weekly_report import WeeklyReportTool
from tools.wikipedia import WikipediaTool


class UnknownToolError(KeyError):
    def __init__(self, name: str, available: Iterable[str]):
        super().__init__(name)
        self.name = name
        self.available = sorted(available)

    def __str__(self) -> str:
        return f"unknown tool {self.name!r} (available: {', '.join(self.available)})"


class ToolRegistry:
    def __init__(self, tools: Optional[Iterable[Tool]] = None):
        self._tools: Dict[str, Tool] = {}
        for tool in tools or ():
            self.register(tool)

    def register(self, tool: Tool) -> None:
        if not tool.name:
            raise ValueError(f"{type(tool).__name__} has no name")
        if tool.name in self._tools:
            raise ValueError(f"tool {tool.name!r} is already registered")
        self._tools[tool.name] = tool

    def get(self, name: str) -> Tool:
        tool = self._tools.get(name)
        if tool is None:
            raise UnknownToolError(name, self._tools)
        return tool

    def names(self) -> List[str]:
        return list(self._tools)

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __iter__(self) -> Iterator[Tool]:
        return iter(self._tools.values())

    def __len__(self) -> int:
        return len(self._tools)


def default_tools() -> List[Tool]:
    return [
        WeatherTool(),
        SearchTool(),
        CalculatorTool(),
        FileOperationsTool(),
        TimeTool(),
        SystemInfoTool(),
        ImageGenerationTool(),
        WikipediaTool(),
        UrbanDictionaryTool(),
        MobyTool(),
        ForecastTool(),
        WeeklyReportTool(),
    ]


_registry: Optional[ToolRegistry] = None


def get_registry() -> ToolRegistry:
    global _registry
    if _registry is None:
        _registry = ToolRegistry(default_tools())
    return _registry
