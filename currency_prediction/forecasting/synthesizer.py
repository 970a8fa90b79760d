import math
from datetime import date, timedelta
from typing import Optional

from currency_prediction.core.config import HISTORY_DAYS
from currency_prediction.core.exceptions import InvalidRate
from currency_prediction.forecasting.models import HistoricalSeries, RatePoint
from currency_prediction.forecasting.random_source import RandomFactory, for_currency

DAILY_VOLATILITY = 0.005
TREND_BIAS_SCALE = 0.001


def synthesize(
    currency_code: str,
    base_rate: float,
    today: Optional[date] = None,
    rng_factory: RandomFactory = for_currency,
) -> HistoricalSeries:
    """
    Build a 30-day daily history ending today from a single live rate.

    The walk starts at ``base_rate`` on ``today`` and steps backwards one day at
    a time, multiplying by ``1 + delta`` where ``delta`` is uniform noise plus a
    per-currency trend bias. The generator is seeded from the currency code, so
    the same code, rate and day always give the same series.
    """
    if not math.isfinite(base_rate) or base_rate <= 0:
        raise InvalidRate(f"Base rate for {currency_code} must be a positive number, got {base_rate}")

    if today is None:
        today = date.today()

    rng = rng_factory(currency_code)
    trend_bias = (rng.random() - 0.5) * TREND_BIAS_SCALE

    rate = base_rate
    points = []
    for i in range(HISTORY_DAYS):
        points.append(RatePoint(date=today - timedelta(days=i), rate=rate))
        change = (rng.random() - 0.5) * DAILY_VOLATILITY + trend_bias
        rate = rate * (1 + change)

    points.sort(key=lambda point: point.date)
    return HistoricalSeries(currency=currency_code, points=tuple(points))
