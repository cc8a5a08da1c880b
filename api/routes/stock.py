"""Shop stock proxy routes"""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
import logging

from app.exceptions import NotFoundError
from domain.enums import Game
from domain.schemas.forecast_schemas import ProxyError
from domain.schemas.stock_schemas import StockResponse
from services import StockService

router = APIRouter(prefix="/proxy/stock", tags=["Stock"])
logger = logging.getLogger("gardenboard.api.stock")


@router.get("", response_model=StockResponse)
def get_stock():
    """Current stock of every Grow a Garden shop."""
    return StockService.get_stock(Game.GROW_A_GARDEN.value)


@router.get(
    "/{game}",
    response_model=StockResponse,
    responses={404: {"model": ProxyError, "description": "Game not supported"}},
)
def get_game_stock(game: str):
    """
    Current stock of every shop for ``game``.

    Upstream failures never surface as errors: the aggregated endpoint falls
    back to the per-shop endpoints, and those fall back to empty lists.

    Raises:
        404: If the game is not supported
    """
    try:
        return StockService.get_stock(game)
    except NotFoundError as e:
        logger.warning(f"Stock requested for unsupported game: {game}")
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"error": str(e)})
