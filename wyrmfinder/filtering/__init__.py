"""
Facet filtering and ordering for catalog search.

Both halves are pure functions of a card and a query.
"""

from wyrmfinder.filtering.facets import (
    REGION_FLAGS,
    RESOURCE_FLAGS,
    include,
    passes_ability_type,
    passes_cost,
    passes_region,
)
from wyrmfinder.filtering.sorting import (
    COMPARATORS,
    collation_key,
    compare,
    resolve_sort_key,
    sort_cards,
)

__all__ = [
    # Facets
    "REGION_FLAGS",
    "RESOURCE_FLAGS",
    "include",
    "passes_ability_type",
    "passes_cost",
    "passes_region",
    # Sorting
    "COMPARATORS",
    "collation_key",
    "compare",
    "resolve_sort_key",
    "sort_cards",
]
