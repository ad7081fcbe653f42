from typing import Any

import pytest

from wyrmfinder.models.query import SearchQuery
from wyrmfinder.services.catalog import CatalogStore
from wyrmfinder.services.text_index import TextIndex


@pytest.fixture
def card_records() -> list[dict[str, Any]]:
    """
    Small catalog covering every facet.

    Listed out of sort_id order on purpose; the store must reorder them.
    Catalog order: c-echo(1), c-elan(2), d-ash(3), d-ember(5), d-blaze(7), d-coral(9)
    """
    return [
        {
            "id": "d-ember",
            "sort_id": 5,
            "number": "5",
            "name": "Ember",
            "ability": "When played, gain an egg.",
            "type": "Dragon",
            "personality": "Shy",
            "size": "Small",
            "abilityType": "WhenPlayed",
            "Crimson Cavern": "x",
            "Egg": 1,
            "VP": 2,
            "expansion": "base",
        },
        {
            "id": "c-echo",
            "sort_id": 1,
            "number": "1",
            "name": "Echo Chamber",
            "ability": "Draw a card.",
            "type": "Cave",
            "expansion": "base",
        },
        {
            "id": "d-ash",
            "sort_id": 3,
            "number": "3",
            "name": "Ashen Wyrm",
            "ability": "Lay an egg on each dragon.",
            "type": "Dragon",
            "personality": "Aggressive",
            "size": "Large",
            "abilityType": "EndGame",
            "Crimson Cavern": "x",
            "Golden Grotto": "x",
            "Meat": 2,
            "Gold": 1,
            "VP": 6,
            "expansion": "base",
        },
        {
            "id": "d-blaze",
            "sort_id": 7,
            "number": "7",
            "name": "Blaze Drake",
            "ability": "Gain 1 coin.",
            "type": "Dragon",
            "personality": "Playful",
            "size": "Medium",
            "abilityType": "OncePerRound, Adventurer",
            "Golden Grotto": "x",
            "ignoreCost": "x",
            "VP": 4,
            "expansion": "academy",
        },
        {
            "id": "d-coral",
            "sort_id": 9,
            "number": "9",
            "name": "Coral Whelp",
            "type": "Dragon",
            "personality": "Helpful",
            "size": "Hatchling",
            "abilityType": "Adventurer",
            "Amethyst Abyss": "x",
            "Crystal": 1,
            "Coin": 1,
            "VP": 2,
            "expansion": "academy",
        },
        {
            "id": "c-elan",
            "sort_id": 2,
            "number": "2",
            "name": "Élan Grotto",
            "ability": "Tuck an ember card.",
            "type": "Cave",
            "Milk": 1,
            "expansion": "academy",
        },
    ]


@pytest.fixture
def catalog(card_records: list[dict[str, Any]]) -> CatalogStore:
    return CatalogStore.from_records(card_records)


@pytest.fixture
def text_index(catalog: CatalogStore) -> TextIndex:
    return TextIndex.from_catalog(catalog)


@pytest.fixture
def default_query() -> SearchQuery:
    return SearchQuery.default()
