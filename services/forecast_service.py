from typing import Any, Callable, Dict, List
import logging

from adapters import cycleon_adapter
from app.exceptions import NotFoundError, UpstreamError, UpstreamStatusError
from core.utils.helpers import as_list
from domain.enums import Shop
from domain.schemas.forecast_schemas import CategoryItemFlag, DebugItemsResponse

logger = logging.getLogger("gardenboard.forecast")

DEBUG_SAMPLE_SIZE = 5


def _count(payload: Any) -> int:
    return len(payload) if isinstance(payload, (list, dict)) else 0


def _name_key(value: Any) -> str:
    return str(value or "").lower()


def _fetch(call: Callable[..., Any], failure_message: str, *args: Any) -> Any:
    """Run an adapter call, labelling a non-2xx failure with ``failure_message``."""
    try:
        return call(*args)
    except UpstreamStatusError as e:
        logger.error(f"{failure_message}: {e.status_code}")
        e.message = failure_message
        raise


class ForecastService:
    """Relays appearance statistics; upstream payloads are returned untouched.

    Non-2xx upstream answers surface as ``UpstreamStatusError`` whose message
    is the client-facing error text; other failures as ``UpstreamConnectionError``.
    """

    # ------------------ Pass-through ------------------
    @staticmethod
    def get_items() -> Any:
        logger.info("Fetching items from external API")
        data = _fetch(cycleon_adapter.get_items, "Failed to fetch items")
        logger.info(f"Fetched items: count={_count(data)}")
        return data

    @staticmethod
    def get_weather_list() -> Any:
        logger.info("Fetching weather list from external API")
        data = _fetch(cycleon_adapter.get_weather_list, "Failed to fetch weather")
        logger.info(f"Fetched weather list: count={_count(data)}")
        return data

    @staticmethod
    def get_weather_stats(weather: str) -> Any:
        logger.info(f"Fetching weather stats: weather={weather}")
        data = _fetch(cycleon_adapter.get_weather_stats, "Weather stats not found", weather)
        logger.info(f"Fetched weather stats: weather={weather}")
        return data

    @staticmethod
    def get_all_item_stats() -> Any:
        logger.info("Fetching ALL item stats from external API")
        data = _fetch(cycleon_adapter.get_item_stats, "Failed to fetch items stats")
        logger.info(f"Fetched all item stats: count={_count(data)}")
        return data

    @staticmethod
    def get_all_weather_stats() -> Any:
        logger.info("Fetching ALL weather stats from external API")
        data = _fetch(cycleon_adapter.get_all_weather_stats, "Failed to fetch weather stats")
        logger.info(f"Fetched all weather stats: count={_count(data)}")
        return data

    # ------------------ Derived views ------------------
    @staticmethod
    def has_appearances(stat: Dict[str, Any]) -> bool:
        """True when at least one appearance count in the window is positive."""
        appearances = stat.get("appearances")
        if isinstance(appearances, dict):
            counts = appearances.values()
        elif isinstance(appearances, list):
            counts = appearances
        else:
            return False
        for count in counts:
            try:
                if float(count) > 0:
                    return True
            except (TypeError, ValueError):
                continue
        return False

    @staticmethod
    def items_with_stats(stats: Any) -> Dict[str, Dict[str, Any]]:
        """Map lowercased item name -> stats entry, for items that have appeared."""
        result: Dict[str, Dict[str, Any]] = {}
        for stat in as_list(stats):
            if isinstance(stat, dict) and ForecastService.has_appearances(stat):
                result[_name_key(stat.get("item"))] = stat
        return result

    @staticmethod
    def find_item_stats(item_name: str) -> Dict[str, Any]:
        """
        Look up one item's stats by name, ignoring case.

        Raises:
            NotFoundError: the item has no entry in the historical data
            UpstreamError: the stats could not be fetched
        """
        logger.info(f"Searching for item stats: item={item_name}")
        all_stats = _fetch(cycleon_adapter.get_item_stats, "Failed to fetch item stats")

        wanted = _name_key(item_name)
        for stat in as_list(all_stats):
            if isinstance(stat, dict) and _name_key(stat.get("item")) == wanted:
                logger.info(f"Found item stats: item={item_name}")
                return stat

        logger.warning(f"Item not found in stats: item={item_name}")
        raise NotFoundError("Item not found in historical data", details={"item": item_name})

    @staticmethod
    def items_by_category(category: str) -> List[Dict[str, Any]]:
        """
        Catalogue items sold in shops matching ``category`` that have stats.

        A shop matches when its name contains the category (case-insensitive),
        so "seed" matches both "Seed Shop" and "Seed Pack". Items that never
        appeared in the stats window are left out.
        """
        logger.info(f"Getting items by category with stats: category={category}")

        all_items = _fetch(cycleon_adapter.get_items, "Failed to fetch items")
        all_stats = _fetch(cycleon_adapter.get_item_stats, "Failed to fetch item stats")

        with_stats = ForecastService.items_with_stats(all_stats)
        logger.info(f"Items with stats: count={len(with_stats)}")

        wanted = category.lower()
        filtered = []
        for item in as_list(all_items):
            if not isinstance(item, dict):
                continue
            shops = [str(shop).lower() for shop in as_list(item.get("shops"))]
            if not any(wanted in shop for shop in shops):
                continue
            if _name_key(item.get("name")) not in with_stats:
                continue
            filtered.append(item)

        logger.info(
            f"Found items by category with stats: category={category} "
            f"total_items={_count(all_items)} items_with_stats={len(with_stats)} "
            f"filtered_items={len(filtered)}"
        )
        return filtered

    @staticmethod
    def debug_items() -> DebugItemsResponse:
        """Per-category listing of catalogue items and whether they have stats."""
        logger.info("Debug: checking items with stats")

        all_items = _fetch(cycleon_adapter.get_items, "Failed to fetch items")
        try:
            all_stats = cycleon_adapter.get_item_stats()
        except UpstreamError as e:
            logger.warning(f"Item stats unavailable for debug view: {e}")
            all_stats = []

        with_stats = ForecastService.items_with_stats(all_stats)
        by_category: Dict[str, List[CategoryItemFlag]] = {shop.value: [] for shop in Shop}

        for item in as_list(all_items):
            if not isinstance(item, dict):
                continue
            name = str(item.get("name") or "")
            flag = CategoryItemFlag(name=name, has_stats=name.lower() in with_stats)
            for shop in as_list(item.get("shops")):
                shop_name = str(shop).lower()
                for category, rows in by_category.items():
                    if category in shop_name:
                        rows.append(flag)

        return DebugItemsResponse(
            total_items=_count(all_items),
            total_stats=_count(all_stats),
            items_with_appearances=len(with_stats),
            items_by_category=by_category,
            stats_sample=as_list(all_stats)[:DEBUG_SAMPLE_SIZE],
        )
