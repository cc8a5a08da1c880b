"""
Domain enums for GardenBoard.
Contains the enumeration types shared by services and routes.
"""

import enum


class Game(str, enum.Enum):
    """Games the proxy knows how to serve"""

    GROW_A_GARDEN = "grow-a-garden"


class Shop(str, enum.Enum):
    """In-game shops, each restocking on a fixed interval"""

    SEED = "seed"
    GEAR = "gear"
    EVENT = "event"
    EGG = "egg"
    COSMETIC = "cosmetic"

    @property
    def interval_minutes(self) -> int:
        return SHOP_INTERVAL_MINUTES[self]


SHOP_INTERVAL_MINUTES = {
    Shop.SEED: 5,
    Shop.GEAR: 5,
    Shop.EVENT: 30,
    Shop.EGG: 30,
    Shop.COSMETIC: 240,
}


class PredictionMode(str, enum.Enum):
    """Mode reported in prediction payloads built by the proxy itself"""

    ERROR = "error"
