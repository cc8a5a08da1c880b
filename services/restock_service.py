from typing import List, Optional
from datetime import datetime, timedelta, timezone, tzinfo
from zoneinfo import ZoneInfo
import logging

from app.config import settings
from app.exceptions import NotFoundError
from core.utils.helpers import utc_now
from domain.enums import Shop
from domain.schemas.restock_schemas import RestockScheduleResponse, ShopRestock

logger = logging.getLogger("gardenboard.restock")


def interval_label(minutes: int) -> str:
    """'1 minute', '30 minutes', '1 hour', '4 hours'"""
    if minutes >= 60:
        hours = minutes / 60
        hours_text = f"{hours:g}"
        return f"{hours_text} {'hour' if hours == 1 else 'hours'}"
    return f"{minutes} {'minute' if minutes == 1 else 'minutes'}"


def format_countdown(shop: Shop, total_seconds: int, interval_minutes: int) -> str:
    """
    Render the time left until the next restock.

    The cosmetic shop restocks every few hours and uses ``HH:MM:SS``; the
    others use ``M:SS``. A countdown that reached zero shows the full interval.
    """
    if total_seconds <= 0:
        total_seconds = interval_minutes * 60

    if shop == Shop.COSMETIC:
        hours, remainder = divmod(total_seconds, 3600)
        minutes, seconds = divmod(remainder, 60)
        return f"{hours:02d}:{minutes:02d}:{seconds:02d}"

    minutes, seconds = divmod(total_seconds, 60)
    return f"{minutes}:{seconds:02d}"


class RestockService:
    @staticmethod
    def timezone() -> tzinfo:
        if settings.restock_timezone == "UTC":
            return timezone.utc
        return ZoneInfo(settings.restock_timezone)

    @staticmethod
    def resolve_shop(name: str) -> Shop:
        try:
            return Shop(name.lower())
        except ValueError:
            raise NotFoundError(f"Unknown shop: {name}", details={"shop": name})

    @staticmethod
    def restock_window(interval_minutes: int, now: Optional[datetime] = None):
        """
        Last and next restock instants around ``now``.

        Restocks are aligned to local midnight: the last one is the latest
        multiple of the interval since midnight, the next one an interval later.

        Returns:
            (last_restock, next_restock) as aware datetimes in the restock timezone
        """
        tz = RestockService.timezone()
        now_utc = (now or utc_now()).astimezone(timezone.utc)
        midnight = now_utc.astimezone(tz).replace(hour=0, minute=0, second=0, microsecond=0, fold=0)

        # Elapsed time since midnight in absolute seconds
        midnight_utc = midnight.astimezone(timezone.utc)
        interval = timedelta(minutes=interval_minutes)
        elapsed = now_utc - midnight_utc
        last_restock = midnight_utc + interval * (elapsed // interval)
        return last_restock.astimezone(tz), (last_restock + interval).astimezone(tz)

    @staticmethod
    def shop_restock(shop: Shop, now: Optional[datetime] = None) -> ShopRestock:
        now = now or utc_now()
        interval = shop.interval_minutes
        last_restock, next_restock = RestockService.restock_window(interval, now)

        remaining = int((next_restock - now.astimezone(timezone.utc)).total_seconds())
        remaining = max(remaining, 0)

        return ShopRestock(
            shop=shop,
            interval_minutes=interval,
            interval_label=interval_label(interval),
            last_restock=last_restock,
            next_restock=next_restock,
            seconds_until_restock=remaining,
            countdown=format_countdown(shop, remaining, interval),
        )

    @staticmethod
    def schedule(now: Optional[datetime] = None) -> RestockScheduleResponse:
        now = now or utc_now()
        shops: List[ShopRestock] = [RestockService.shop_restock(shop, now) for shop in Shop]
        logger.debug(f"Computed restock schedule for {len(shops)} shops")
        return RestockScheduleResponse(generated_at=now, shops=shops)
