from pydantic import BaseModel
from datetime import date
from typing import List

class RatePoint(BaseModel):
    date: date
    rate: float

    class Config:
        from_attributes = True

class PredictionResponse(BaseModel):
    currency: str
    current_rate: float
    predicted_rate: float
    change_percentage: float
    recommendation: str

    class Config:
        from_attributes = True

class HistoricalSeriesResponse(BaseModel):
    currency: str
    rates: List[RatePoint]

class FutureRatesResponse(BaseModel):
    currency: str
    predictions: List[RatePoint]

class ChangeResponse(BaseModel):
    currency: str
    change_percentage: float

class ErrorResponse(BaseModel):
    code: str
    detail: str
