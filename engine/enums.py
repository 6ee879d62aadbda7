"""
Enumerations for forecast methods, trend labels and forecast intervals.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from enum import Enum


class ForecastMethod(str, Enum):
    linear_regression = "Linear Regression"
    moving_average = "Moving Average"
    exponential_smoothing = "Exponential Smoothing"


class Trend(str, Enum):
    increasing = "Increasing"
    decreasing = "Decreasing"
    stable = "Stable"

    @classmethod
    def from_slope(cls, slope: float) -> Trend:
        # threshold is absolute, so the label depends on the units of the series
        from config import settings

        if slope > settings.forecast_trend_threshold:
            return cls.increasing
        if slope < -settings.forecast_trend_threshold:
            return cls.decreasing
        return cls.stable


class Interval(str, Enum):
    days = "days"
    weeks = "weeks"
    months = "months"

    @property
    def singular(self) -> str:
        return self.value[:-1]
