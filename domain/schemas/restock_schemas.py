from pydantic import BaseModel, Field
from typing import List
from datetime import datetime

from domain.enums import Shop


class ShopRestock(BaseModel):
    """Restock timing for a single shop"""

    shop: Shop
    interval_minutes: int = Field(..., gt=0)
    interval_label: str = Field(..., description="e.g. '5 minutes', '4 hours'")
    last_restock: datetime
    next_restock: datetime
    seconds_until_restock: int = Field(..., ge=0)
    countdown: str = Field(..., description="'M:SS', or 'HH:MM:SS' for the cosmetic shop")


class RestockScheduleResponse(BaseModel):
    generated_at: datetime
    shops: List[ShopRestock]
