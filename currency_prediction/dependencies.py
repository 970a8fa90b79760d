from currency_prediction.core.config import settings
from currency_prediction.services.prediction import PredictionService
from currency_prediction.services.rate_source import OpenExchangeRateSource

# Dependency to get the prediction service
def get_prediction_service():
    rate_source = OpenExchangeRateSource(
        base_url=settings.rate_source_url,
        timeout=settings.rate_source_timeout,
    )
    try:
        yield PredictionService(rate_source)
    finally:
        rate_source.session.close()
