"""Prediction routes - restock and weather predictions relayed from the Cycleon API"""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
import logging

from domain.schemas.prediction_schemas import ItemPredictionError, WeatherPredictionError
from services import PredictionService

router = APIRouter(prefix="/proxy/predict", tags=["Predictions"])
logger = logging.getLogger("gardenboard.api.predict")


@router.get(
    "/items/{item}",
    responses={
        404: {"model": ItemPredictionError},
        503: {"model": ItemPredictionError},
    },
)
def predict_item(item: str):
    """
    Next restock predictions for a shop item.

    The upstream payload is returned as-is with its arrays guaranteed present.
    Error answers keep the prediction shape with empty arrays and an ``error``.
    """
    try:
        body, status_code = PredictionService.predict_item(item)
    except Exception as e:
        logger.exception(f"Item prediction failed: {e}")
        body = ItemPredictionError(item=item, error=f"Connection failed: {e}").model_dump(mode="json")
        status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return JSONResponse(status_code=status_code, content=body)


@router.get(
    "/weather/{weather}",
    responses={
        404: {"model": WeatherPredictionError},
        503: {"model": WeatherPredictionError},
    },
)
def predict_weather(weather: str):
    """
    Next occurrence predictions for a weather type.

    Several spellings of the name are tried before giving up with a 404.
    """
    try:
        body, status_code = PredictionService.predict_weather(weather)
    except Exception as e:
        logger.exception(f"Weather prediction failed: {e}")
        body = PredictionService.connection_failure(weather, e)
        status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return JSONResponse(status_code=status_code, content=body)
