"""
Domain layer - Enums and schemas for the proxied payloads.
"""

from domain import enums, schemas

__all__ = ["enums", "schemas"]
