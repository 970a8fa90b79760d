import pytest
import requests
from currency_prediction.core.exceptions import DataSourceError
from currency_prediction.services.rate_source import OpenExchangeRateSource

class FakeResponse:
    def __init__(self, payload=None, status_code=200, invalid_json=False):
        self.payload = payload
        self.status_code = status_code
        self.invalid_json = invalid_json

    def json(self):
        if self.invalid_json:
            raise ValueError("Expecting value")
        return self.payload

class FakeSession:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.requests = []

    def get(self, url, timeout=None):
        self.requests.append((url, timeout))
        if self.error is not None:
            raise self.error
        return self.response

def make_source(response=None, error=None):
    session = FakeSession(response=response, error=error)
    source = OpenExchangeRateSource(base_url="https://rates.test/latest/", timeout=2.5, session=session)
    return source, session

def test_returns_rate_for_currency():
    source, session = make_source(FakeResponse({"result": "success", "rates": {"EUR": 0.92, "GBP": 0.79}}))

    assert source.get_base_rate("EUR") == 0.92
    assert session.requests == [("https://rates.test/latest/USD", 2.5)]

def test_integer_rates_are_converted_to_float():
    source, _ = make_source(FakeResponse({"rates": {"JPY": 150}}))
    rate = source.get_base_rate("JPY")
    assert isinstance(rate, float)
    assert rate == 150.0

def test_timeout_is_a_data_source_error():
    source, _ = make_source(error=requests.exceptions.Timeout("read timed out"))
    with pytest.raises(DataSourceError, match="timed out"):
        source.get_base_rate("EUR")

def test_connection_error_is_a_data_source_error():
    source, _ = make_source(error=requests.exceptions.ConnectionError("unreachable"))
    with pytest.raises(DataSourceError):
        source.get_base_rate("EUR")

def test_http_error_status():
    source, _ = make_source(FakeResponse(status_code=503))
    with pytest.raises(DataSourceError, match="503"):
        source.get_base_rate("EUR")

def test_invalid_json():
    source, _ = make_source(FakeResponse(invalid_json=True))
    with pytest.raises(DataSourceError):
        source.get_base_rate("EUR")

@pytest.mark.parametrize("payload", [{"result": "error"}, {"rates": []}, ["EUR", 0.9]])
def test_unexpected_payload(payload):
    source, _ = make_source(FakeResponse(payload))
    with pytest.raises(DataSourceError):
        source.get_base_rate("EUR")

def test_missing_currency():
    source, _ = make_source(FakeResponse({"rates": {"GBP": 0.79}}))
    with pytest.raises(DataSourceError, match="'RON' not found"):
        source.get_base_rate("RON")

@pytest.mark.parametrize("value", ["abc", None, 0, -1.2, "NaN"])
def test_unusable_rate_values(value):
    source, _ = make_source(FakeResponse({"rates": {"EUR": value}}))
    with pytest.raises(DataSourceError):
        source.get_base_rate("EUR")

@pytest.mark.parametrize("value", [True, False])
def test_boolean_rate_is_rejected(value):
    source, _ = make_source(FakeResponse({"rates": {"EUR": value}}))
    with pytest.raises(DataSourceError, match="not a number"):
        source.get_base_rate("EUR")
