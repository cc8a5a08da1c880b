from pydantic import BaseModel, Field
from typing import Any, List


class StockItem(BaseModel):
    """A shop item normalized from whatever field names the upstream used"""

    name: str
    stock: int = Field(..., alias="Stock", description="Units currently in stock")
    quantity: int = Field(..., description="Same value as Stock, kept for older clients")
    image: str

    model_config = {"populate_by_name": True}


class StockResponse(BaseModel):
    """All shop inventories, normalized plus the untouched upstream lists"""

    seed_stock: List[StockItem] = Field(default_factory=list)
    gear_stock: List[StockItem] = Field(default_factory=list)
    egg_stock: List[StockItem] = Field(default_factory=list)
    cosmetic_stock: List[StockItem] = Field(default_factory=list)
    event_shop_stock: List[StockItem] = Field(default_factory=list)
    raw_seeds: List[Any] = Field(default_factory=list)
    raw_gear: List[Any] = Field(default_factory=list)
    raw_eggs: List[Any] = Field(default_factory=list)
    raw_cosmetics: List[Any] = Field(default_factory=list)
    raw_honey: List[Any] = Field(default_factory=list)
