from typing import Literal

from pydantic import BaseModel, Field

from config import settings
from engine.expression import ExpressionError, evaluate, parse_expression
from tools.base import Tool, ToolResult, format_number, tool_errors


class CalculatorInput(BaseModel):
    expression: str = Field(
        min_length=1,
        max_length=settings.calculator_max_length,
        description='Mathematical expression to evaluate (e.g., "2 + 2", "sqrt(16)", "sin(30)")',
    )
    angle_unit: Literal["radians", "degrees"] = Field(
        default="radians",
        description="Unit used by trigonometric functions",
    )


class CalculatorTool(Tool):
    name = "calculator"
    description = "Perform mathematical calculations"
    input_model = CalculatorInput
    error_prefix = "Error calculating"

    @tool_errors
    async def invoke(self, params: CalculatorInput) -> ToolResult:
        try:
            value = evaluate(parse_expression(params.expression), params.angle_unit)
        except ExpressionError as exc:
            return ToolResult.failure(self.name, f'Error calculating "{params.expression}": {exc}')
        return ToolResult.success(self.name, f"{params.expression} = {format_number(value, 10)}")
