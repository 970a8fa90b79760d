import logging
import math
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Callable, Dict, List

from currency_prediction.core.config import (
    BASE_CURRENCY,
    FORECAST_DAYS,
    STABLE_THRESHOLD_PCT,
    SUPPORTED_CURRENCIES,
    Settings,
    settings as default_settings,
)
from currency_prediction.core.exceptions import ComputationError, PredictionError, UnsupportedCurrency
from currency_prediction.forecasting import regression
from currency_prediction.forecasting.models import HistoricalSeries, PredictionResult, RatePoint
from currency_prediction.forecasting.synthesizer import synthesize
from currency_prediction.services.rate_source import RateSource

logger = logging.getLogger(__name__)

STABLE_MESSAGE = "Stable — no significant change expected"


def classify(change_percentage: float, currency: str) -> str:
    """Turn a 7-day change percentage into the recommendation text."""
    if abs(change_percentage) < STABLE_THRESHOLD_PCT:
        return STABLE_MESSAGE
    if change_percentage > 0:
        return f"{BASE_CURRENCY} likely to strengthen against {currency} ({change_percentage:.2f}% change)"
    return f"{BASE_CURRENCY} likely to weaken against {currency} ({abs(change_percentage):.2f}% change)"


@dataclass(frozen=True)
class PartialPredictions:
    results: List[PredictionResult] = field(default_factory=list)
    errors: Dict[str, PredictionError] = field(default_factory=dict)


class PredictionService:
    """
    Live rate -> synthesized history -> OLS trend -> 7-day forecast -> recommendation.

    Stateless: every call fetches a fresh base rate and rebuilds the series.
    """

    def __init__(
        self,
        rate_source: RateSource,
        synthesizer: Callable[..., HistoricalSeries] = synthesize,
        clock: Callable[[], date] = date.today,
        settings: Settings = default_settings,
    ):
        self.rate_source = rate_source
        self.synthesizer = synthesizer
        self.clock = clock
        self.settings = settings

    def get_supported_currencies(self) -> List[str]:
        return list(SUPPORTED_CURRENCIES)

    def _check_supported(self, currency: str) -> None:
        if currency not in SUPPORTED_CURRENCIES:
            raise UnsupportedCurrency(currency)

    def get_historical_rates(self, currency: str) -> HistoricalSeries:
        self._check_supported(currency)
        base_rate = self.rate_source.get_base_rate(currency)
        return self.synthesizer(currency, base_rate, today=self.clock())

    def _forecast(self, series: HistoricalSeries) -> List[RatePoint]:
        model = regression.fit(series.values)
        last_index = len(series) - 1
        last_date = series.last_date
        return [
            RatePoint(date=last_date + timedelta(days=day), rate=regression.predict(model, last_index + day))
            for day in range(1, FORECAST_DAYS + 1)
        ]

    def get_future_rates(self, currency: str) -> List[RatePoint]:
        return self._forecast(self.get_historical_rates(currency))

    def get_prediction(self, currency: str) -> PredictionResult:
        series = self.get_historical_rates(currency)
        future = self._forecast(series)

        current_rate = series.values[-1]
        predicted_rate = future[-1].rate
        change_percentage = (predicted_rate - current_rate) / current_rate * 100

        if not (math.isfinite(predicted_rate) and math.isfinite(change_percentage)):
            raise ComputationError(f"Forecast for {currency} produced a non-finite value")

        result = PredictionResult(
            currency=currency,
            current_rate=current_rate,
            predicted_rate=predicted_rate,
            change_percentage=change_percentage,
            recommendation=classify(change_percentage, currency),
        )
        logger.info(f"Prediction for {currency}: {current_rate:.4f} -> {predicted_rate:.4f} ({change_percentage:+.2f}%)")
        return result

    def get_change_percentage(self, currency: str) -> float:
        return self.get_prediction(currency).change_percentage

    def get_all_predictions(self) -> List[PredictionResult]:
        """
        Predictions for every supported currency, in declared order.

        All-or-nothing: the first failure is raised and no partial list is returned.
        """
        if self.settings.parallel_predictions:
            return self._get_all_parallel()

        results = []
        for currency in SUPPORTED_CURRENCIES:
            try:
                results.append(self.get_prediction(currency))
            except PredictionError as e:
                logger.error(f"Error predicting currency {currency}: {e}")
                raise
        return results

    def _get_all_parallel(self) -> List[PredictionResult]:
        with ThreadPoolExecutor(max_workers=self.settings.max_workers) as executor:
            futures = {executor.submit(self.get_prediction, currency): currency for currency in SUPPORTED_CURRENCIES}
            results = {}
            for future in as_completed(futures):
                currency = futures[future]
                try:
                    results[currency] = future.result()
                except PredictionError as e:
                    logger.error(f"Error predicting currency {currency}: {e}")
                    for pending in futures:
                        pending.cancel()
                    raise
        return [results[currency] for currency in SUPPORTED_CURRENCIES]

    def get_all_predictions_partial(self) -> PartialPredictions:
        """Like ``get_all_predictions`` but collects per-currency failures instead of raising."""
        partial = PartialPredictions()
        for currency in SUPPORTED_CURRENCIES:
            try:
                partial.results.append(self.get_prediction(currency))
            except PredictionError as e:
                logger.warning(f"Skipping {currency}: {e}")
                partial.errors[currency] = e
        return partial
