import logging
import math
from typing import Optional, Protocol

import requests

from currency_prediction.core.config import BASE_CURRENCY, settings
from currency_prediction.core.exceptions import DataSourceError

logger = logging.getLogger(__name__)


class RateSource(Protocol):
    def get_base_rate(self, currency_code: str) -> float:
        ...


class OpenExchangeRateSource:
    """
    Live rates from an open.er-api.com style endpoint.

    ``GET {base_url}{base_currency}`` returns ``{"rates": {"EUR": 0.92, ...}}``.
    Every failure is reported as ``DataSourceError``; retries are left to the caller.
    """

    def __init__(
        self,
        base_url: str = settings.rate_source_url,
        base_currency: str = BASE_CURRENCY,
        timeout: float = settings.rate_source_timeout,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url
        self.base_currency = base_currency
        self.timeout = timeout
        self.session = session or requests.Session()

    def get_base_rate(self, currency_code: str) -> float:
        url = f"{self.base_url}{self.base_currency}"
        logger.info(f"Fetching {self.base_currency}/{currency_code} rate from {url}")

        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.exceptions.Timeout as e:
            logger.warning(f"Rate source timed out after {self.timeout}s: {e}")
            raise DataSourceError(f"Rate source timed out after {self.timeout}s") from e
        except requests.exceptions.RequestException as e:
            logger.warning(f"Failed to reach rate source: {e}")
            raise DataSourceError(f"Failed to reach rate source: {e}") from e

        if response.status_code != 200:
            logger.warning(f"Rate source returned HTTP {response.status_code}")
            raise DataSourceError(f"Rate source returned HTTP {response.status_code}")

        try:
            data = response.json()
        except ValueError as e:
            raise DataSourceError("Rate source returned invalid JSON") from e

        rates = data.get("rates") if isinstance(data, dict) else None
        if not isinstance(rates, dict):
            raise DataSourceError(f"API response format unexpected. Response: {data}")

        if currency_code not in rates:
            raise DataSourceError(f"Currency '{currency_code}' not found in API response")

        if isinstance(rates[currency_code], bool):
            raise DataSourceError(f"Rate for {currency_code} is not a number: {rates[currency_code]!r}")

        try:
            rate = float(rates[currency_code])
        except (TypeError, ValueError) as e:
            raise DataSourceError(f"Rate for {currency_code} is not a number: {rates[currency_code]!r}") from e

        if not math.isfinite(rate) or rate <= 0:
            raise DataSourceError(f"Rate for {currency_code} is not a positive finite number: {rate}")

        return rate
