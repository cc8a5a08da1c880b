"""
GardenBoard utility functions
"""

from __future__ import annotations
import re
from datetime import datetime, timezone
from typing import Any, Mapping, Optional, Sequence


# Field & value normalization

_NON_ALNUM = re.compile(r"[^a-z0-9]", re.IGNORECASE)


def first_present(data: Mapping[str, Any], keys: Sequence[str], default: Any = None) -> Any:
    """Return the value of the first key that is present and not None."""
    for key in keys:
        value = data.get(key)
        if value is not None:
            return value
    return default


def to_int(value: Any) -> int:
    """Lenient int coercion: numeric strings are parsed, floats truncated, junk is 0."""
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    if isinstance(value, str):
        match = re.match(r"\s*[+-]?\d+(\.\d+)?", value)
        if match:
            return int(float(match.group(0)))
    return 0


def ucfirst(text: str) -> str:
    """Uppercase the first character only; the rest is left alone."""
    return text[:1].upper() + text[1:]


def image_slug(name: str) -> str:
    """CDN key for an item name: lowercase, every non-alphanumeric char as '_'."""
    return _NON_ALNUM.sub("_", name).lower()


def as_list(value: Any) -> list:
    if isinstance(value, list):
        return value
    return []


# Time utilities

def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def iso_timestamp(moment: Optional[datetime] = None) -> str:
    """ISO-8601 UTC timestamp with microseconds and a trailing 'Z'."""
    moment = (moment or utc_now()).astimezone(timezone.utc)
    return moment.isoformat(timespec="microseconds").replace("+00:00", "Z")


def to_unix_timestamp(value: Any, now: Optional[datetime] = None) -> Optional[int | float]:
    """Turn an upstream ``lastUpdated`` value into a unix timestamp.

    Numbers (and numeric strings) are taken as-is, ISO-8601 strings are parsed,
    and a missing value or the literal ``"now"`` means the current time.
    Returns None when the value cannot be understood.
    """
    now = now or utc_now()
    if value is None:
        return int(now.timestamp())
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return value

    text = str(value).strip()
    if not text or text.lower() == "now":
        return int(now.timestamp())
    if re.fullmatch(r"[+-]?\d+", text):
        return int(text)
    if re.fullmatch(r"[+-]?\d*\.\d+", text):
        return float(text)

    try:
        parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return int(parsed.timestamp())
