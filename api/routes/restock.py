"""Restock schedule routes"""

from fastapi import APIRouter, HTTPException, status
import logging

from app.exceptions import NotFoundError
from domain.schemas.restock_schemas import RestockScheduleResponse, ShopRestock
from services import RestockService

router = APIRouter(prefix="/proxy/restock", tags=["Restock"])
logger = logging.getLogger("gardenboard.api.restock")


@router.get("", response_model=RestockScheduleResponse)
def get_restock_schedule():
    """Last/next restock and countdown for every shop."""
    return RestockService.schedule()


@router.get("/{shop}", response_model=ShopRestock)
def get_shop_restock(shop: str):
    """
    Restock timing for one shop (`seed`, `gear`, `event`, `egg`, `cosmetic`).

    Raises:
        404: If the shop is unknown
    """
    try:
        return RestockService.shop_restock(RestockService.resolve_shop(shop))
    except NotFoundError as e:
        logger.warning(f"Restock requested for unknown shop: {shop}")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
