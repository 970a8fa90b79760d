from dataclasses import dataclass
from datetime import date
from typing import List, Tuple


@dataclass(frozen=True)
class RatePoint:
    date: date
    rate: float


@dataclass(frozen=True)
class HistoricalSeries:
    """Daily USD rates for one currency, ascending by date with no gaps."""

    currency: str
    points: Tuple[RatePoint, ...]

    def __len__(self) -> int:
        return len(self.points)

    @property
    def values(self) -> List[float]:
        return [point.rate for point in self.points]

    @property
    def dates(self) -> List[date]:
        return [point.date for point in self.points]

    @property
    def last_date(self) -> date:
        return self.points[-1].date


@dataclass(frozen=True)
class RegressionModel:
    intercept: float
    slope: float

    def predict(self, index: float) -> float:
        return self.intercept + self.slope * index


@dataclass(frozen=True)
class PredictionResult:
    currency: str
    current_rate: float
    predicted_rate: float
    change_percentage: float
    recommendation: str
