"""
Facet statistics over a search result.

Counts, per facet dimension, how many result cards carry each value. The
counts label the filter controls and play no part in filtering or
ordering.

Each dimension is one row of STATISTIC_DIMENSIONS: a function returning
the values a card contributes. Flag dimensions (resources, regions) are
built from name -> predicate tables, so every count goes through the same
reduction.
"""

from collections import Counter
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field

from wyrmfinder.filtering.facets import REGION_FLAGS, RESOURCE_FLAGS, CardPredicate
from wyrmfinder.models.card import Card
from wyrmfinder.models.query import FACET_VOCABULARY
from wyrmfinder.services.catalog import CatalogStore

ValueExtractor = Callable[[Card], Iterable[str]]


def _single(attribute: Callable[[Card], str | None]) -> ValueExtractor:
    def extract(card: Card) -> Iterable[str]:
        value = attribute(card)
        return (value,) if value else ()

    return extract


def _flags(table: Mapping[str, CardPredicate]) -> ValueExtractor:
    def extract(card: Card) -> Iterable[str]:
        return [name for name, predicate in table.items() if predicate(card)]

    return extract


STATISTIC_DIMENSIONS: dict[str, ValueExtractor] = {
    "type": _single(lambda card: card.type),
    "personality": _single(lambda card: card.personality),
    "expansion": _single(lambda card: card.expansion),
    "size": _single(lambda card: card.size),
    "ability_type": lambda card: card.ability_types,
    "resource": _flags(RESOURCE_FLAGS),
    "region": _flags(REGION_FLAGS),
}


@dataclass(frozen=True)
class FacetStatistics:
    """
    Per-dimension value counts.

    Known vocabulary values are always present (zero when unseen), and
    count() returns 0 for anything else, so lookups never fail.
    """

    total: int = 0
    counts: dict[str, Counter[str]] = field(default_factory=dict)

    def count(self, dimension: str, value: str) -> int:
        counter = self.counts.get(dimension)
        if counter is None:
            return 0
        return counter[value]

    def dimension(self, name: str) -> dict[str, int]:
        """All counts of one dimension as a plain dict."""
        return dict(self.counts.get(name, Counter()))


def compute_statistics(
    cards: Iterable[Card],
    dimensions: Mapping[str, ValueExtractor] | None = None,
) -> FacetStatistics:
    """Reduce `cards` into per-dimension value counts."""
    table = dimensions if dimensions is not None else STATISTIC_DIMENSIONS

    counts: dict[str, Counter[str]] = {}
    for name in table:
        counts[name] = Counter({value: 0 for value in FACET_VOCABULARY.get(name, ())})

    total = 0
    for card in cards:
        total += 1
        for name, extract in table.items():
            counts[name].update(extract(card))

    return FacetStatistics(total=total, counts=counts)


def statistics_for(card_ids: Iterable[str], catalog: CatalogStore) -> FacetStatistics:
    """Statistics for an ordered result produced by run_search()."""
    return compute_statistics(catalog[card_id] for card_id in card_ids)
