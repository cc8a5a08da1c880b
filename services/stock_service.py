from typing import Any, Dict, List
import logging

from adapters import gag_adapter
from app.config import settings
from app.exceptions import NotFoundError, UpstreamError, UpstreamStatusError
from core.utils.helpers import as_list, first_present, image_slug, to_int
from domain.enums import Game
from domain.schemas.stock_schemas import StockItem, StockResponse

logger = logging.getLogger("gardenboard.stock")

# Upstream payload key -> (normalized field, raw field)
STOCK_FIELDS = {
    "seeds": ("seed_stock", "raw_seeds"),
    "gear": ("gear_stock", "raw_gear"),
    "eggs": ("egg_stock", "raw_eggs"),
    "cosmetics": ("cosmetic_stock", "raw_cosmetics"),
    "honey": ("event_shop_stock", "raw_honey"),
}


class StockService:
    @staticmethod
    def transform_item(item: Dict[str, Any]) -> StockItem:
        """
        Normalize one upstream shop entry.

        The aggregator is inconsistent about casing and naming, so the first
        non-null of several candidate keys wins for each field. Items without
        an image get a CDN URL derived from their name.
        """
        name = str(first_present(item, ("name", "Name", "title"), "Unknown Item"))
        stock = to_int(first_present(item, ("Stock", "stock", "quantity", "Quantity"), 0))
        image = first_present(item, ("image", "Image", "img"))

        if not image:
            image = settings.image_cdn_base_url + image_slug(name)

        return StockItem(name=name, stock=stock, quantity=stock, image=str(image))

    @staticmethod
    def transform_items(items: Any) -> List[StockItem]:
        return [
            StockService.transform_item(item)
            for item in as_list(items)
            if isinstance(item, dict)
        ]

    @staticmethod
    def build_response(data: Dict[str, Any]) -> StockResponse:
        """Build the stock payload from a mapping of upstream key -> item list."""
        fields: Dict[str, Any] = {}
        for key, (stock_field, raw_field) in STOCK_FIELDS.items():
            raw = as_list(data.get(key))
            fields[stock_field] = StockService.transform_items(raw)
            fields[raw_field] = raw
        return StockResponse(**fields)

    @staticmethod
    def fetch_individual() -> StockResponse:
        """
        Fetch each shop from its own endpoint.

        A shop answering with an error status contributes an empty list; any
        other failure abandons the pass and yields an all-empty response.
        """
        data: Dict[str, Any] = {}
        try:
            for key in gag_adapter.SHOP_ENDPOINTS:
                try:
                    data[key] = gag_adapter.fetch_shop(key)
                    logger.info(f"Fetched {key}: count={len(as_list(data[key]))}")
                except UpstreamStatusError as e:
                    logger.warning(f"Failed to fetch {key}: {e.status_code}")
                    data[key] = []
            return StockService.build_response(data)
        except UpstreamError as e:
            logger.error(f"Individual fetch error: {e}")
            return StockResponse()

    @staticmethod
    def get_stock(game: str = Game.GROW_A_GARDEN.value) -> StockResponse:
        """
        Current stock for every shop.

        Tries the aggregated ``/alldata`` endpoint first and falls back to
        the per-shop endpoints when it fails.

        Raises:
            NotFoundError: the game is not supported
        """
        if game != Game.GROW_A_GARDEN.value:
            raise NotFoundError("Game not supported")

        logger.info("Fetching all GAG stock data")
        try:
            data = gag_adapter.fetch_all_data()
        except UpstreamStatusError as e:
            logger.warning(f"All data fetch failed ({e.status_code}), trying individual endpoints")
            return StockService.fetch_individual()
        except UpstreamError as e:
            logger.error(f"GAG API error: {e}")
            return StockService.fetch_individual()

        if not isinstance(data, dict):
            logger.warning("All data payload is not an object, trying individual endpoints")
            return StockService.fetch_individual()

        counts = " ".join(f"{key}={len(as_list(data.get(key)))}" for key in STOCK_FIELDS)
        logger.info(f"All data fetched: {counts}")
        return StockService.build_response(data)
