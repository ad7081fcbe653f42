"""
Wyrmfinder services.

Catalog loading, text indexing, the search pipeline and result statistics.
"""

from wyrmfinder.services.catalog import CatalogStore, load_catalog
from wyrmfinder.services.search import ResultWindow, resolve_candidates, run_search
from wyrmfinder.services.statistics import (
    STATISTIC_DIMENSIONS,
    FacetStatistics,
    compute_statistics,
    statistics_for,
)
from wyrmfinder.services.text_index import TextIndex, tokenize

__all__ = [
    "STATISTIC_DIMENSIONS",
    "CatalogStore",
    "FacetStatistics",
    "ResultWindow",
    "TextIndex",
    "compute_statistics",
    "load_catalog",
    "resolve_candidates",
    "run_search",
    "statistics_for",
    "tokenize",
]
