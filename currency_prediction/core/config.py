from pydantic_settings import BaseSettings, SettingsConfigDict
import os
import logging

logger = logging.getLogger(__name__)

# Quote currency for every prediction, and the fixed set of currencies we forecast
BASE_CURRENCY = "USD"
SUPPORTED_CURRENCIES = ("EUR", "GBP", "JPY", "AUD", "RON")

HISTORY_DAYS = 30
FORECAST_DAYS = 7
STABLE_THRESHOLD_PCT = 0.5

class Settings(BaseSettings):
    """
    Settings class to load environment variables using Pydantic BaseSettings.
    """
    rate_source_url: str = "https://open.er-api.com/v6/latest/"
    rate_source_timeout: float = 10.0
    parallel_predictions: bool = False
    max_workers: int = 5
    log_level: str = "INFO"
    api_base_url: str = "http://api:8000"
    api_timeout: float = 30.0

    model_config = SettingsConfigDict(
        env_file=f".env.{os.getenv('ENV', 'development')}",
        extra="allow",
        frozen=True,
    )

settings = Settings()

current_env = os.getenv('ENV', 'development')
logger.info(f"Current environment: {current_env}")
