"""
Sort comparator.

Orders cards by one of four keys. Descending order negates the
comparison, and Python's sort is stable, so cards with equal keys keep
their catalog order in both directions.
"""

import logging
import unicodedata
from collections.abc import Callable, Iterable
from functools import cmp_to_key

from wyrmfinder.models.card import SIZE_RANK, Card
from wyrmfinder.models.query import SortKey, SortOrder

logger = logging.getLogger(__name__)


def _sign(value: float) -> int:
    return (value > 0) - (value < 0)


def collation_key(text: str) -> tuple[str, str]:
    """
    Locale-style collation key.

    Accents and case are ignored first; the raw text breaks remaining ties.
    """
    decomposed = unicodedata.normalize("NFKD", text)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return base.casefold(), text


def _compare_number(a: Card, b: Card) -> int:
    return _sign(a.sort_id - b.sort_id)


def _compare_name(a: Card, b: Card) -> int:
    key_a, key_b = collation_key(a.name), collation_key(b.name)
    return (key_a > key_b) - (key_a < key_b)


def _compare_vp(a: Card, b: Card) -> int:
    return _sign((a.vp or 0) - (b.vp or 0))


def _compare_size(a: Card, b: Card) -> int:
    return _sign(SIZE_RANK.get(a.size or "", 0) - SIZE_RANK.get(b.size or "", 0))


COMPARATORS: dict[str, Callable[[Card, Card], int]] = {
    SortKey.NUMBER.value: _compare_number,
    SortKey.NAME.value: _compare_name,
    SortKey.VP.value: _compare_vp,
    SortKey.SIZE.value: _compare_size,
}


def resolve_sort_key(sort_by: str | None) -> str:
    """Map a sort selector to a known key, falling back to number."""
    if sort_by is not None and sort_by in COMPARATORS:
        return sort_by
    if sort_by is not None:
        logger.warning("Unknown sort key %r, sorting by number", sort_by)
    return SortKey.NUMBER.value


def compare(
    a: Card,
    b: Card,
    sort_by: str = SortKey.NUMBER.value,
    sort_order: str = SortOrder.ASC.value,
) -> int:
    """
    Compare two cards.

    Returns a negative number, zero, or a positive number. The sign is
    flipped for descending order.
    """
    comparison = COMPARATORS.get(sort_by, _compare_number)(a, b)
    return -comparison if sort_order == SortOrder.DESC.value else comparison


def sort_cards(
    cards: Iterable[Card],
    sort_by: str = SortKey.NUMBER.value,
    sort_order: str = SortOrder.ASC.value,
) -> list[Card]:
    """Stable sort of `cards` by the given key and direction."""
    key = resolve_sort_key(sort_by)
    return sorted(cards, key=cmp_to_key(lambda a, b: compare(a, b, key, sort_order)))
