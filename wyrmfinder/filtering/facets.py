"""
Facet predicate.

Decides whether one card survives the structured filters of a query.

Checks run in this order and stop at the first failure (order affects
speed only, never the outcome):

1. Category
2. Personality (dragons only)
3. Expansion
4. Size (only when the card declares one)
5. Cost: ignored cost / no cost / each carried resource
6. Ability type (dragons only, when any is selected)
7. Region (dragons only, when any is selected; ALL selected must match)

Missing card fields never raise. A card without an expansion, say, simply
has nothing the expansion toggles can enable.
"""

from collections.abc import Callable
from operator import attrgetter

from wyrmfinder.models.card import Card, CostFlag, Region, Resource
from wyrmfinder.models.query import SearchQuery

CardPredicate = Callable[[Card], bool]


def _carries(resource: Resource) -> CardPredicate:
    def predicate(card: Card) -> bool:
        return card.resource_amount(resource.value) > 0

    return predicate


def _in_region(region: Region) -> CardPredicate:
    def predicate(card: Card) -> bool:
        return region.value in card.regions

    return predicate


# Resource facet value -> does the card have it
RESOURCE_FLAGS: dict[str, CardPredicate] = {
    **{resource.value: _carries(resource) for resource in Resource},
    CostFlag.NO_RESOURCE_COST.value: attrgetter("no_resource_cost"),
    CostFlag.IGNORE_COST.value: attrgetter("ignore_cost"),
}

# Region facet value -> is the card marked for it
REGION_FLAGS: dict[str, CardPredicate] = {region.value: _in_region(region) for region in Region}


def passes_cost(card: Card, query: SearchQuery) -> bool:
    """
    Resolve the resource facet for one card.

    A cost-ignored card depends only on the IgnoreCost toggle, and a card
    without any resource only on NoResourceCost. Otherwise every resource
    the card carries must be enabled. Resources the card doesn't carry are
    never checked.
    """
    if card.ignore_cost:
        return query.is_enabled("resource", CostFlag.IGNORE_COST.value)
    if card.no_resource_cost:
        return query.is_enabled("resource", CostFlag.NO_RESOURCE_COST.value)
    return all(query.is_enabled("resource", resource) for resource in card.resources)


def passes_ability_type(card: Card, query: SearchQuery) -> bool:
    """
    Match selected ability types against the card's tags.

    A selected type matches when it is contained in any card tag
    (containment, not equality).
    """
    selected = query.selected("ability_type")
    if not selected or not card.is_primary:
        return True
    tags = card.ability_types
    return any(wanted in tag for wanted in selected for tag in tags)


def passes_region(card: Card, query: SearchQuery) -> bool:
    """Require every selected region to be marked on the card."""
    selected = query.selected("region")
    if not selected or not card.is_primary:
        return True
    return all(region in card.regions for region in selected)


def include(card: Card, query: SearchQuery) -> bool:
    """Decide whether `card` passes every facet of `query`."""
    if not query.is_enabled("type", card.type):
        return False

    if card.is_primary and not query.is_enabled("personality", card.personality):
        return False

    if not query.is_enabled("expansion", card.expansion):
        return False

    if card.size and not query.is_enabled("size", card.size):
        return False

    if not passes_cost(card, query):
        return False

    if not passes_ability_type(card, query):
        return False

    return passes_region(card, query)
