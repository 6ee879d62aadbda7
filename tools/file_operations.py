"""
File operations tool confined to a root directory.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, Field

from config import FILE_SENSITIVE_PATHS, settings
from tools.base import Tool, ToolResult, contains_any

log = logging.getLogger(__name__)


class FileOperationsInput(BaseModel):
    operation: Literal["read", "write", "list"] = Field(description="The file operation to perform")
    filepath: str = Field(min_length=1, description="Path to the file or directory")
    content: str = Field(
        default="",
        description="Content to write (only for write operation, leave empty for read/list operations)",
    )


class PathOutsideRoot(PermissionError):
    pass


class FileOperationsTool(Tool):
    name = "file_operations"
    description = "Read, write, or list files and directories"
    input_model = FileOperationsInput

    def __init__(self, root: Optional[str] = None):
        self._root = root

    @property
    def root(self) -> Path:
        return Path(self._root or settings.files_root or os.getcwd()).resolve()

    def resolve(self, filepath: str) -> Path:
        root = self.root
        target = (root / filepath).resolve()
        if target != root and root not in target.parents:
            raise PathOutsideRoot(f"path {filepath!r} is outside of {root}")
        return target

    def requires_approval(self, params: FileOperationsInput) -> bool:
        if params.operation == "write":
            return True
        return contains_any(params.filepath, FILE_SENSITIVE_PATHS)

    async def invoke(self, params: FileOperationsInput) -> ToolResult:
        try:
            path = self.resolve(params.filepath)
            if params.operation == "read":
                return ToolResult.success(self.name, f"Content of {params.filepath}:\n{path.read_text(encoding='utf-8')}")
            if params.operation == "write":
                if not params.content.strip():
                    raise ValueError("Content is required for write operation")
                path.write_text(params.content, encoding="utf-8")
                log.info("Wrote %d characters to %s", len(params.content), path)
                return ToolResult.success(self.name, f"Successfully wrote content to {params.filepath}")
            items = sorted(entry.name for entry in path.iterdir())
            return ToolResult.success(self.name, f"Contents of {params.filepath}:\n" + "\n".join(items))
        except (OSError, ValueError) as exc:
            log.warning("file_operations %s on %s failed: %s", params.operation, params.filepath, exc)
            return ToolResult.failure(self.name, f"Error performing {params.operation} on {params.filepath}: {exc}")
