"""Test fixtures package."""

from tests.fixtures.store_fixtures import (
    broken_query_gateway,
    count_rows,
    seed_rows,
    unavailable_gateway,
)

__all__ = [
    "broken_query_gateway",
    "count_rows",
    "seed_rows",
    "unavailable_gateway",
]
