import platform
import socket
import time
from typing import Callable, Dict, Literal

import psutil
from pydantic import BaseModel, Field

from tools.base import Tool, ToolResult, tool_errors

_GIB = 1024 ** 3


class SystemInfoInput(BaseModel):
    info_type: Literal["os", "memory", "cpu", "uptime", "all"] = Field(
        description="Type of system information to retrieve"
    )


def os_description() -> str:
    return f"{platform.system()} {platform.release()} ({platform.machine()})"


def memory_description() -> str:
    mem = psutil.virtual_memory()
    return f"{round(mem.available / _GIB, 2)}GB free of {round(mem.total / _GIB, 2)}GB total"


def cpu_description() -> str:
    model = platform.processor() or platform.machine() or "unknown CPU"
    return f"{model} ({psutil.cpu_count(logical=True) or 0} cores)"


def uptime_description() -> str:
    hours = int((time.time() - psutil.boot_time()) // 3600)
    return f"{hours} hours"


class SystemInfoTool(Tool):
    name = "system_info"
    description = "Get system information like OS, memory, CPU, etc."
    input_model = SystemInfoInput
    error_prefix = "Error reading system information"

    @tool_errors
    async def invoke(self, params: SystemInfoInput) -> ToolResult:
        if params.info_type == "os":
            return ToolResult.success(self.name, f"OS: {os_description()}")
        if params.info_type == "memory":
            return ToolResult.success(self.name, f"Memory: {memory_description()}")
        if params.info_type == "cpu":
            return ToolResult.success(self.name, f"CPU: {cpu_description()}")
        if params.info_type == "uptime":
            return ToolResult.success(self.name, f"System uptime: {uptime_description()}")

        sections: Dict[str, Callable[[], str]] = {
            "os": os_description,
            "hostname": socket.gethostname,
            "memory": memory_description,
            "cpu": cpu_description,
            "uptime": uptime_description,
        }
        body = "\n".join(f"{key}: {describe()}" for key, describe in sections.items())
        return ToolResult.success(self.name, f"System Information:\n{body}")
