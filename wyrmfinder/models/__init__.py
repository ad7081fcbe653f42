from wyrmfinder.models.card import (
    PRIMARY_TYPE,
    SIZE_RANK,
    AbilityType,
    Card,
    CardType,
    CostFlag,
    Expansion,
    Personality,
    Region,
    Resource,
    Size,
)
from wyrmfinder.models.failure import CatalogError, FailureDetail, FailureKind, KnownError
from wyrmfinder.models.query import FACET_VOCABULARY, SearchQuery, SortKey, SortOrder

__all__ = [
    "FACET_VOCABULARY",
    "PRIMARY_TYPE",
    "SIZE_RANK",
    "AbilityType",
    "Card",
    "CardType",
    "CatalogError",
    "CostFlag",
    "Expansion",
    "FailureDetail",
    "FailureKind",
    "KnownError",
    "Personality",
    "Region",
    "Resource",
    "SearchQuery",
    "Size",
    "SortKey",
    "SortOrder",
]
