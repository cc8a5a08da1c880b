"""
Adapters package - External service connections.
HTTP adapters for the GAG stock/weather aggregator and the Cycleon statistics API.
"""

from adapters import gag_adapter, cycleon_adapter

__all__ = [
    "gag_adapter",
    "cycleon_adapter",
]
