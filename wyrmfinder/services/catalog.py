"""
Catalog store.

Loads the card dataset once and keeps it as an immutable, ordered
collection with an identifier lookup.
"""

import json
import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any

from wyrmfinder.config import settings
from wyrmfinder.models.card import Card
from wyrmfinder.models.failure import CatalogError, FailureKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CatalogStore:
    """
    Immutable catalog of cards.

    INVARIANT: Identifiers are unique.
    INVARIANT: `cards` is in catalog order (ascending sort_id, ties keep
    dataset order). Every ordered output relies on this as its tie-break.
    """

    cards: tuple[Card, ...] = ()
    _by_id: Mapping[str, Card] = field(default_factory=dict, hash=False, repr=False)

    @classmethod
    def from_records(cls, records: Iterable[Mapping[str, Any]]) -> "CatalogStore":
        """
        Build the store from raw dataset records.

        Raises:
            CatalogError: If a record has no identifier, or two share one
        """
        return cls.from_cards(Card.from_record(record) for record in records)

    @classmethod
    def from_cards(cls, cards: Iterable[Card]) -> "CatalogStore":
        ordered = sorted(cards, key=lambda card: card.sort_id)

        by_id: dict[str, Card] = {}
        for card in ordered:
            if card.id in by_id:
                raise CatalogError(
                    f"Duplicate card identifier '{card.id}'.",
                    detail=f"Cards: {by_id[card.id].name!r} and {card.name!r}",
                    kind=FailureKind.DUPLICATE_ID,
                )
            by_id[card.id] = card

        if not ordered:
            logger.warning("Card catalog is empty. Every search will return no results.")

        return cls(cards=tuple(ordered), _by_id=MappingProxyType(by_id))

    def __contains__(self, card_id: object) -> bool:
        return card_id in self._by_id

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __getitem__(self, card_id: str) -> Card:
        return self._by_id[card_id]

    def get(self, card_id: str) -> Card | None:
        return self._by_id.get(card_id)

    def ids(self) -> tuple[str, ...]:
        """All identifiers, in catalog order."""
        return tuple(card.id for card in self.cards)


def load_catalog(path: Path | None = None) -> CatalogStore:
    """
    Load the catalog from a JSON file.

    Args:
        path: Path to a JSON array of card records. Defaults to
            settings.catalog_path

    Returns:
        The populated CatalogStore.

    Raises:
        FileNotFoundError: If the dataset file doesn't exist
        CatalogError: If no path is configured, the dataset is not a list
            or a record is unusable
    """
    if path is None:
        path = settings.catalog_path
    if path is None:
        raise CatalogError(
            "No card catalog configured.",
            detail="Pass a path or set WYRMFINDER_CATALOG_PATH to the card dataset.",
        )

    if not path.exists():
        raise FileNotFoundError(
            f"Card catalog not found at {path}. "
            "Set WYRMFINDER_CATALOG_PATH to the card dataset."
        )

    with open(path, encoding="utf-8") as f:
        records = json.load(f)

    if not isinstance(records, list):
        raise CatalogError(
            "Card catalog must be a JSON array of card records.",
            detail=f"{path} holds a {type(records).__name__}",
        )

    store = CatalogStore.from_records(records)
    logger.info("Loaded %d cards from %s", len(store), path)
    return store

