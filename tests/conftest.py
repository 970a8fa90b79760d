import sys
import os
import pytest
from datetime import date
from functools import partial
from fastapi.testclient import TestClient

# Add the root directory to the PYTHONPATH
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from currency_prediction.main import app
from currency_prediction.dependencies import get_prediction_service
from currency_prediction.core.exceptions import DataSourceError
from currency_prediction.forecasting.synthesizer import synthesize
from currency_prediction.services.prediction import PredictionService

TODAY = date(2024, 3, 15)

BASE_RATES = {
    "EUR": 1.10,
    "GBP": 0.79,
    "JPY": 149.5,
    "AUD": 1.52,
    "RON": 4.57,
}

class ConstantRandom:
    """Generator double: every draw is the same value."""

    def __init__(self, value=0.5):
        self.value = value

    def random(self):
        return self.value

class ScriptedRandom:
    def __init__(self, values):
        self.values = iter(values)

    def random(self):
        return next(self.values)

class FakeRateSource:
    def __init__(self, rates=None, failing=()):
        self.rates = dict(BASE_RATES if rates is None else rates)
        self.failing = set(failing)
        self.calls = []

    def get_base_rate(self, currency_code):
        self.calls.append(currency_code)
        if currency_code in self.failing:
            raise DataSourceError(f"Currency '{currency_code}' not found in API response")
        return self.rates[currency_code]

@pytest.fixture
def rate_source():
    return FakeRateSource()

@pytest.fixture
def flat_synthesizer():
    return partial(synthesize, rng_factory=lambda code: ConstantRandom(0.5))

@pytest.fixture
def flat_service(rate_source, flat_synthesizer):
    return PredictionService(rate_source, synthesizer=flat_synthesizer, clock=lambda: TODAY)

@pytest.fixture
def service(rate_source):
    return PredictionService(rate_source, clock=lambda: TODAY)

@pytest.fixture
def test_client():
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()

@pytest.fixture
def override_service(test_client):
    def _override(service):
        def override_get_prediction_service():
            yield service
        app.dependency_overrides[get_prediction_service] = override_get_prediction_service
        return test_client
    return _override
