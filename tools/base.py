"""
Uniform tool interface shared by every tool: a name and description, a pydantic
input model whose JSON schema is advertised to the agent runtime, an approval
predicate evaluated on validated input, and an async ``invoke`` returning a tagged
:class:`ToolResult`.

The :func:`tool_errors` decorator wraps ``invoke`` so that any exception raised
while serving a call is logged and converted into a failure result carrying the
tool's error prefix. Tools therefore never raise for expected failures and callers
can render the outcome without a try/except of their own.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from functools import wraps
from typing import Any, Awaitable, Callable, ClassVar, Dict, Iterable, Mapping, Type, TypeVar, cast

from pydantic import BaseModel, ValidationError

log = logging.getLogger(__name__)

P = TypeVar("P", bound=BaseModel)
F = TypeVar("F", bound=Callable[..., Awaitable["ToolResult"]])


class ToolInputError(ValueError):
    def __init__(self, tool: str, errors: list[str]):
        super().__init__(f"invalid input for {tool}: " + "; ".join(errors))
        self.tool = tool
        self.errors = errors


@dataclass(frozen=True)
class ToolResult:
    tool: str
    ok: bool
    text: str = ""
    error: str = ""
    approval_required: bool = False

    @classmethod
    def success(cls, tool: str, text: str) -> ToolResult:
        return cls(tool=tool, ok=True, text=text)

    @classmethod
    def failure(cls, tool: str, error: str, approval_required: bool = False) -> ToolResult:
        return cls(tool=tool, ok=False, error=error, approval_required=approval_required)

    def render(self) -> str:
        return self.text if self.ok else self.error


def format_number(value: float, digits: int = 2) -> str:
    text = f"{value:.{digits}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


def contains_any(text: str, terms: Iterable[str]) -> bool:
    lowered = text.lower()
    return any(term.lower() in lowered for term in terms)


def tool_errors(func: F) -> F:
    """Decorator converting exceptions raised by ``Tool.invoke`` into failure results."""

    @wraps(func)
    async def wrapper(self: "Tool", params: BaseModel) -> ToolResult:
        try:
            return await func(self, params)
        except Exception as exc:
            log.warning("%s failed: %s", self.name, exc, exc_info=log.isEnabledFor(logging.DEBUG))
            return ToolResult.failure(self.name, f"{self.error_prefix}: {exc}")

    return cast(F, wrapper)


class Tool(ABC):
    name: ClassVar[str] = ""
    description: ClassVar[str] = ""
    input_model: ClassVar[Type[BaseModel]]
    error_prefix: ClassVar[str] = "Error"

    def input_schema(self) -> Dict[str, Any]:
        return self.input_model.model_json_schema()

    def parse(self, payload: Mapping[str, Any]) -> BaseModel:
        try:
            return self.input_model.model_validate(dict(payload))
        except ValidationError as exc:
            errors = [
                f"{'.'.join(str(p) for p in err['loc']) or 'input'}: {err['msg']}"
                for err in exc.errors()
            ]
            raise ToolInputError(self.name, errors) from exc

    def requires_approval(self, params: Any) -> bool:
        return False

    @abstractmethod
    async def invoke(self, params: Any) -> ToolResult: ...

    def describe(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "parameters": self.input_schema(),
        }
