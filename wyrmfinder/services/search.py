"""
Catalog search pipeline.

run_search() turns a query into an ordered tuple of card identifiers:

1. Candidates: text-index matches, or the whole catalog for blank text
2. Filter: keep candidates passing every facet
3. Sort: by the query's key and direction

INVARIANTS:
- Pure: same catalog + index + query -> same result
- No caching between calls; every call recomputes
- Candidates are visited in catalog order, which is the tie-break for
  equal sort keys
"""

import logging
from dataclasses import dataclass

from wyrmfinder.config import settings
from wyrmfinder.filtering.facets import include
from wyrmfinder.filtering.sorting import sort_cards
from wyrmfinder.models.card import Card
from wyrmfinder.models.query import SearchQuery
from wyrmfinder.services.catalog import CatalogStore
from wyrmfinder.services.text_index import TextIndex

logger = logging.getLogger(__name__)


def resolve_candidates(
    catalog: CatalogStore,
    index: TextIndex,
    text: str,
) -> list[Card]:
    """
    Cards the text part of a query allows, in catalog order.

    Blank or whitespace-only text allows every card.
    """
    if not text or not text.strip():
        return list(catalog.cards)

    matched = index.search(text)
    # The index may know ids the catalog doesn't (a stale index); drop them
    return [card for card in catalog.cards if card.id in matched]


def run_search(
    catalog: CatalogStore,
    index: TextIndex,
    query: SearchQuery,
) -> tuple[str, ...]:
    """
    Produce the ordered identifiers matching `query`.

    Args:
        catalog: The loaded catalog
        index: Text index built over the same catalog
        query: Text, facet toggles and sort selection

    Returns:
        Card identifiers, ordered by the query's sort key and direction.
    """
    candidates = resolve_candidates(catalog, index, query.text)
    filtered = [card for card in candidates if include(card, query)]
    ordered = sort_cards(filtered, query.sort_by, query.sort_order)

    logger.debug(
        "Search %r: %d candidates, %d after facets, sorted by %s %s",
        query.text,
        len(candidates),
        len(filtered),
        query.sort_by,
        query.sort_order,
    )

    return tuple(card.id for card in ordered)


@dataclass(frozen=True, slots=True)
class ResultWindow:
    """
    Incrementally revealed view over an ordered result.

    Slicing only; the result itself is never recomputed here. A new
    result should start a new window.

    Attributes:
        card_ids: The full ordered result
        displayed: How many leading cards are revealed
        page_size: Cards added per load_more()
    """

    card_ids: tuple[str, ...]
    displayed: int
    page_size: int

    @classmethod
    def start(
        cls,
        card_ids: tuple[str, ...],
        page_size: int | None = None,
    ) -> "ResultWindow":
        size = page_size if page_size is not None else settings.page_size
        if size <= 0:
            raise ValueError(f"Page size must be positive, got {size}")
        return cls(card_ids=card_ids, displayed=size, page_size=size)

    @property
    def visible(self) -> tuple[str, ...]:
        return self.card_ids[: self.displayed]

    @property
    def has_more(self) -> bool:
        return self.displayed < len(self.card_ids)

    def load_more(self) -> "ResultWindow":
        """Reveal one more page."""
        return ResultWindow(
            card_ids=self.card_ids,
            displayed=self.displayed + self.page_size,
            page_size=self.page_size,
        )
