from typing import Sequence

import numpy as np
from sklearn.linear_model import LinearRegression

from currency_prediction.core.exceptions import ComputationError
from currency_prediction.forecasting.models import RegressionModel


def fit(values: Sequence[float]) -> RegressionModel:
    """
    Fit an ordinary least squares line through ``values`` sampled at x = 0..n-1.

    With fewer than two samples the x spread is zero, so the slope is 0 and
    the line is flat at the mean.
    """
    rates = np.asarray(values, dtype=float)
    if rates.size == 0:
        raise ComputationError("Cannot fit a trend to an empty series")
    if not np.all(np.isfinite(rates)):
        raise ComputationError("Series contains non-finite rates")

    if rates.size < 2:
        return RegressionModel(intercept=float(rates.mean()), slope=0.0)

    positions = np.arange(rates.size, dtype=float).reshape(-1, 1)
    model = LinearRegression()
    try:
        model.fit(positions, rates)
    except ValueError as e:
        raise ComputationError(f"Trend fit failed: {e}") from e

    intercept = float(model.intercept_)
    slope = float(model.coef_[0])
    if not (np.isfinite(intercept) and np.isfinite(slope)):
        raise ComputationError("Trend fit produced non-finite coefficients")

    return RegressionModel(intercept=intercept, slope=slope)


def predict(model: RegressionModel, index: float) -> float:
    return model.predict(index)
