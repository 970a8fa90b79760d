from fastapi import APIRouter, Depends
from typing import List
from currency_prediction.dependencies import get_prediction_service
from currency_prediction.schemas.prediction import (
    ChangeResponse,
    ErrorResponse,
    FutureRatesResponse,
    HistoricalSeriesResponse,
    PredictionResponse,
)
from currency_prediction.services.prediction import PredictionService

router = APIRouter()

error_responses = {
    400: {"model": ErrorResponse, "description": "Invalid currency code"},
    502: {"model": ErrorResponse, "description": "Rate source unavailable"},
    500: {"model": ErrorResponse, "description": "Error generating prediction"},
}

@router.get("/", response_model=List[PredictionResponse], responses=error_responses, description="Predictions for all supported currencies using linear regression on 30 days of history. Fails as a whole if any currency fails.")
def get_all_predictions(service: PredictionService = Depends(get_prediction_service)):
    return service.get_all_predictions()

@router.get("/supported", response_model=List[str], description="List the currencies supported for predictions.")
def get_supported_currencies(service: PredictionService = Depends(get_prediction_service)):
    return service.get_supported_currencies()

@router.get("/{currency}", response_model=PredictionResponse, responses=error_responses, description="Current rate, predicted rate in 7 days, change percentage and recommendation for one currency.")
def get_prediction(currency: str, service: PredictionService = Depends(get_prediction_service)):
    return service.get_prediction(currency)

@router.get("/{currency}/historical", response_model=HistoricalSeriesResponse, responses=error_responses, description="30 days of historical exchange rates for a currency.")
def get_historical_rates(currency: str, service: PredictionService = Depends(get_prediction_service)):
    series = service.get_historical_rates(currency)
    return {"currency": currency, "rates": list(series.points)}

@router.get("/{currency}/future", response_model=FutureRatesResponse, responses=error_responses, description="7-day future predictions for a currency.")
def get_future_rates(currency: str, service: PredictionService = Depends(get_prediction_service)):
    return {"currency": currency, "predictions": service.get_future_rates(currency)}

@router.get("/{currency}/change", response_model=ChangeResponse, responses=error_responses, description="Predicted percentage change for a currency over the next 7 days.")
def get_change_percentage(currency: str, service: PredictionService = Depends(get_prediction_service)):
    return {"currency": currency, "change_percentage": service.get_change_percentage(currency)}
