"""
Statistical forecasting over short numeric series, including ordinary least squares
linear regression with R² and residual confidence bounds, trailing moving average
and simple exponential smoothing.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""


from engine.forecast.engine import ForecastFailure, ForecastOutcome, ForecastResult, forecast
from engine.forecast.models import LinearModel, exponential_smoothing, linear_regression, moving_average

__all__ = [
    "ForecastFailure",
    "ForecastOutcome",
    "ForecastResult",
    "forecast",
    "LinearModel",
    "linear_regression",
    "moving_average",
    "exponential_smoothing",
]
