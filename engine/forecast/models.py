"""
Forecasting models over an index-ordered numeric series: ordinary least squares
linear regression, trailing moving average and simple exponential smoothing.
Observations are indexed from 1, so the first value sits at x = 1.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

import numpy as np

from config import settings


@dataclass(frozen=True)
class LinearModel:
    slope: float
    intercept: float
    r2: float

    def predict(self, index: float) -> float:
        return self.slope * index + self.intercept


def _indices(n: int) -> np.ndarray:
    return np.arange(1, n + 1, dtype=float)


def _r_squared(vals: np.ndarray, slope: float, intercept: float) -> float:
    predicted = slope * _indices(len(vals)) + intercept
    ss_res = float(np.sum((vals - predicted) ** 2))
    ss_tot = float(np.sum((vals - np.mean(vals)) ** 2))
    # constant series: nothing to explain
    return 1.0 - ss_res / ss_tot if ss_tot != 0 else 0.0


def linear_regression(vals: Sequence[float]) -> LinearModel:
    y = np.asarray(vals, dtype=float)
    n = len(y)
    x = _indices(n)

    sum_x = float(np.sum(x))
    sum_y = float(np.sum(y))
    sum_xy = float(np.sum(x * y))
    sum_xx = float(np.sum(x * x))

    slope = (n * sum_xy - sum_x * sum_y) / (n * sum_xx - sum_x * sum_x)
    intercept = (sum_y - slope * sum_x) / n
    return LinearModel(slope=slope, intercept=intercept, r2=_r_squared(y, slope, intercept))


def residuals(vals: Sequence[float], model: LinearModel) -> np.ndarray:
    y = np.asarray(vals, dtype=float)
    return y - (model.slope * _indices(len(y)) + model.intercept)


def standard_error(vals: Sequence[float], model: LinearModel) -> float:
    res = residuals(vals, model)
    dof = max(len(res) - 2, 1)
    return float(np.sqrt(np.sum(res ** 2) / dof))


def linear_forecast(model: LinearModel, n: int, periods: int) -> List[float]:
    digits = settings.forecast_round_digits
    return [round(model.predict(n + k), digits) for k in range(1, periods + 1)]


def moving_average(vals: Sequence[float], periods: int, window: int | None = None) -> List[float]:
    if window is None:
        window = settings.forecast_ma_window
    window = min(window, len(vals))
    average = float(np.mean(np.asarray(vals[-window:], dtype=float)))
    return [average] * periods


def _ema(vals: Sequence[float], alpha: float) -> np.ndarray:
    result = np.zeros(len(vals))
    result[0] = vals[0]
    for i in range(1, len(vals)):
        result[i] = alpha * vals[i] + (1 - alpha) * result[i - 1]
    return result


def exponential_smoothing(vals: Sequence[float], periods: int, alpha: float | None = None) -> List[float]:
    if alpha is None:
        alpha = settings.forecast_es_alpha
    if len(vals) == 0:
        return []
    level = round(float(_ema(vals, alpha)[-1]), settings.forecast_round_digits)
    return [level] * periods
