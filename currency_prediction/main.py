from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from currency_prediction.api.endpoints import predictions
from currency_prediction.core.config import settings
from currency_prediction.core.exceptions import PredictionError
import logging

# Configure logging
logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Currency Prediction API",
    description="Linear-regression forecasts of USD exchange rates for a fixed set of currencies",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(predictions.router, prefix="/predictions", tags=["predictions"])

@app.exception_handler(PredictionError)
async def prediction_error_handler(request: Request, exc: PredictionError):
    logger.warning(f"{request.url.path} failed with {exc.code}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"code": exc.code, "detail": exc.message})

# Public route
@app.get("/", include_in_schema=False)
def read_root():
    return {"message": "Welcome to the Currency Prediction API!"}
