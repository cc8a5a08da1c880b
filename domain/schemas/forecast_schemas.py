from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional


class ProxyError(BaseModel):
    """Error body returned by the forecast proxy routes"""

    error: str
    trace: Optional[str] = None


class ItemStatsNotFound(BaseModel):
    error: str = "Item not found in historical data"
    item: str
    message: str = (
        "This item has not appeared in the shop yet or has no historical data."
    )


class CategoryItemFlag(BaseModel):
    name: str
    has_stats: bool


class DebugItemsResponse(BaseModel):
    """Diagnostic view of which catalogue items have appearance statistics"""

    total_items: int
    total_stats: int
    items_with_appearances: int
    items_by_category: Dict[str, List[CategoryItemFlag]]
    stats_sample: List[Any] = Field(default_factory=list)
