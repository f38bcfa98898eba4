"""
Facades coordinating the session cache with the relational store.

These facades own the cache <-> store sync boundary and ensure consistent data flow.
"""

from .cosmetics_facade import CosmeticsFacade

__all__ = ["CosmeticsFacade"]
