"""
Forecast engine combining the three forecasting models into a single result: the
linear regression forecast is always reported as the primary forecast, with moving
average and exponential smoothing surfaced as alternatives, residual based 95%
confidence bounds and a slope derived trend label.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Union

from config import settings
from engine.enums import ForecastMethod, Interval, Trend
from engine.forecast.models import (
    exponential_smoothing,
    linear_forecast,
    linear_regression,
    moving_average,
    standard_error,
)


@dataclass(frozen=True)
class ForecastResult:
    periods: List[float]
    method: ForecastMethod
    accuracy: float
    trend: Trend
    slope: float
    intercept: float
    confidence_lower: Optional[List[float]]
    confidence_upper: Optional[List[float]]
    standard_error: float
    half_width: float
    interval: str
    data_points: int
    alternatives: Dict[ForecastMethod, List[float]] = field(default_factory=dict)

    ok = True


@dataclass(frozen=True)
class ForecastFailure:
    message: str

    ok = False


ForecastOutcome = Union[ForecastResult, ForecastFailure]


def _validate(data: Sequence[float], periods: int) -> Optional[str]:
    if data is None or len(data) == 0:
        return "Data series is required and cannot be empty"
    if len(data) < settings.forecast_min_points:
        return (
            f"at least {settings.forecast_min_points} data points required "
            f"(got {len(data)})"
        )
    for value in data:
        if isinstance(value, bool):
            return "invalid data points detected: all values must be finite numbers"
        try:
            number = float(value)
        except (TypeError, ValueError):
            return "invalid data points detected: all values must be finite numbers"
        if not math.isfinite(number):
            return "invalid data points detected: all values must be finite numbers"
    if isinstance(periods, bool) or not isinstance(periods, numbers.Integral) or periods < 1:
        return f"periods must be a positive integer (got {periods!r})"
    return None


def forecast(
    data: Sequence[float],
    periods: int = 5,
    interval: Union[str, Interval] = Interval.days,
) -> ForecastOutcome:
    """Forecast *periods* future values of *data*.

    Validation problems come back as a :class:`ForecastFailure` instead of an
    exception; numeric degeneracies (constant series, two-point series) are
    absorbed by convention. The call is pure, so identical inputs always give
    identical results.
    """
    error = _validate(data, periods)
    if error is not None:
        return ForecastFailure(message=error)

    vals = [float(v) for v in data]
    periods = int(periods)
    n = len(vals)
    label = interval.value if isinstance(interval, Interval) else str(interval)

    model = linear_regression(vals)
    primary = linear_forecast(model, n, periods)
    alternatives = {
        ForecastMethod.moving_average: moving_average(vals, periods),
        ForecastMethod.exponential_smoothing: exponential_smoothing(vals, periods),
    }

    std_err = standard_error(vals, model)
    half_width = std_err * settings.forecast_z_value

    lower: Optional[List[float]] = None
    upper: Optional[List[float]] = None
    if half_width > 0:
        lower = [value - half_width for value in primary]
        upper = [value + half_width for value in primary]

    # linear regression is always the primary method, whatever the R² of the others
    return ForecastResult(
        periods=primary,
        method=ForecastMethod.linear_regression,
        accuracy=model.r2,
        trend=Trend.from_slope(model.slope),
        slope=model.slope,
        intercept=model.intercept,
        confidence_lower=lower,
        confidence_upper=upper,
        standard_error=std_err,
        half_width=half_width,
        interval=label,
        data_points=n,
        alternatives=alternatives,
    )
