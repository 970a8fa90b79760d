class PredictionError(Exception):
    """Base class for every error the prediction pipeline reports to its callers."""

    code = "PREDICTION_ERROR"
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidRate(PredictionError):
    code = "INVALID_RATE"
    status_code = 422


class UnsupportedCurrency(PredictionError):
    code = "INVALID_CURRENCY"
    status_code = 400

    def __init__(self, currency: str):
        super().__init__(f"Currency not supported: {currency}")
        self.currency = currency


class DataSourceError(PredictionError):
    """The live rate source was unreachable, timed out, or returned unusable data."""

    code = "DATA_ERROR"
    status_code = 502


class ComputationError(PredictionError):
    code = "CALCULATION_ERROR"
    status_code = 500
