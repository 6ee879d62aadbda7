"""
Forecast tool: validates the caller's request, applies the approval policy for
large or long-range requests and renders the engine result as sectioned text.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from typing import List

from pydantic import BaseModel, Field

from config import FORECAST_DISCLAIMER, settings
from engine.enums import ForecastMethod, Interval
from engine.forecast import ForecastResult, forecast
from tools.base import Tool, ToolResult, format_number, tool_errors

log = logging.getLogger(__name__)


class ForecastInput(BaseModel):
    data: List[float] = Field(description="Array of numerical time series data points (minimum 2 values)")
    periods: int = Field(
        default=settings.forecast_default_periods,
        ge=1,
        le=settings.forecast_max_periods,
        description=f"Number of periods to forecast (1-{settings.forecast_max_periods})",
    )
    interval: Interval = Field(default=Interval.days, description="Time interval for the forecast periods")


def _join(values: List[float], digits: int = 2) -> str:
    return ", ".join(format_number(v, digits) for v in values)


def render_forecast(result: ForecastResult, interval: Interval) -> str:
    lines = [
        f"📊 **Forecast Analysis** ({result.data_points} data points)",
        "",
        f"🔮 **{result.method.value} Forecast for next {len(result.periods)} {interval.value}:**",
        f"   {_join(result.periods)}",
        "",
        "📈 **Alternative Methods:**",
    ]
    for method in (ForecastMethod.moving_average, ForecastMethod.exponential_smoothing):
        lines.append(f"   • {method.value}: {_join(result.alternatives.get(method, []))}")
    lines += [
        "",
        "📊 **Statistical Information:**",
        f"   • Model Accuracy (R²): {result.accuracy:.3f}",
        f"   • Trend: {result.trend.value}",
        f"   • Slope: {result.slope:.4f} per {interval.singular}",
        "",
    ]
    if result.confidence_lower is not None and result.confidence_upper is not None:
        lines += [
            "🎯 **95% Confidence Intervals:**",
            f"   • Lower bounds: {_join(result.confidence_lower)}",
            f"   • Upper bounds: {_join(result.confidence_upper)}",
            "",
        ]
    lines.append(f"⚠️ *{FORECAST_DISCLAIMER}*")
    return "\n".join(lines)


class ForecastTool(Tool):
    name = "forecast"
    description = (
        "Generate forecasts and predictions based on time series data using statistical analysis. "
        "Useful for predicting trends, sales forecasting, and data analysis."
    )
    input_model = ForecastInput
    error_prefix = "Error generating forecast"

    def requires_approval(self, params: ForecastInput) -> bool:
        return (
            len(params.data) > settings.forecast_approval_max_points
            or params.periods > settings.forecast_approval_max_periods
        )

    @tool_errors
    async def invoke(self, params: ForecastInput) -> ToolResult:
        log.info(
            "Processing forecast: data_length=%d periods=%d interval=%s",
            len(params.data), params.periods, params.interval.value,
        )
        outcome = forecast(params.data, params.periods, params.interval)
        if not outcome.ok:
            return ToolResult.failure(self.name, f"Could not generate forecast: {outcome.message}")
        return ToolResult.success(self.name, render_forecast(outcome, params.interval))
