"""
Card records and their closed vocabularies.

The field names and vocabulary values below are the wire format of the
card dataset. The text index and the facet filters both depend on them,
so they must stay stable.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from wyrmfinder.models.failure import CatalogError


class CardType(str, Enum):
    """Card category."""

    DRAGON = "Dragon"
    CAVE = "Cave"


# Personality, ability types and regions only exist on this category
PRIMARY_TYPE = CardType.DRAGON


class Personality(str, Enum):
    SHY = "Shy"
    PLAYFUL = "Playful"
    HELPFUL = "Helpful"
    AGGRESSIVE = "Aggressive"


class Size(str, Enum):
    HATCHLING = "Hatchling"
    FLEDGLING = "Fledgling"
    SMALL = "Small"
    MEDIUM = "Medium"
    LARGE = "Large"


# Rank used for size ordering; unknown sizes rank 0
SIZE_RANK: dict[str, int] = {
    Size.HATCHLING.value: 1,
    Size.FLEDGLING.value: 2,
    Size.SMALL.value: 3,
    Size.MEDIUM.value: 4,
    Size.LARGE.value: 5,
}


class Resource(str, Enum):
    EGG = "Egg"
    MILK = "Milk"
    MEAT = "Meat"
    GOLD = "Gold"
    CRYSTAL = "Crystal"
    COIN = "Coin"


class CostFlag(str, Enum):
    """Resource facet values that describe a cost state, not a resource."""

    NO_RESOURCE_COST = "NoResourceCost"
    IGNORE_COST = "IgnoreCost"


class AbilityType(str, Enum):
    ADVENTURER = "Adventurer"
    WHEN_PLAYED = "WhenPlayed"
    ONCE_PER_ROUND = "OncePerRound"
    END_GAME = "EndGame"


class Region(str, Enum):
    CRIMSON_CAVERN = "Crimson Cavern"
    GOLDEN_GROTTO = "Golden Grotto"
    AMETHYST_ABYSS = "Amethyst Abyss"


class Expansion(str, Enum):
    BASE = "base"
    ACADEMY = "academy"


ABILITY_TYPE_SEPARATOR = ", "

# Marker used in the dataset for boolean columns (regions, ignoreCost)
MARKER = "x"


def _is_marked(value: Any) -> bool:
    """Check a boolean-like dataset column ("x" or true)."""
    if value is True:
        return True
    if isinstance(value, str):
        return value.strip().lower() == MARKER
    return False


def _as_number(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        return value
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            return None
    return None


def _as_text(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


@dataclass(frozen=True, slots=True)
class Card:
    """
    One immutable catalog record.

    Attributes:
        id: Unique, stable identifier
        name: Display name
        ability: Ability text (empty when the card has none)
        number: Display number as printed on the card
        sort_id: Numeric sort key
        type: Category ("Dragon" or "Cave")
        expansion: Source expansion tag
        size: Declared size, if any
        personality: Dragon personality (None for caves)
        ability_type: Raw ability-type column, e.g. "WhenPlayed, EndGame"
        region_markers: Regions explicitly marked on the card (dragons only)
        costs: Resource name -> positive quantity
        ignore_cost: True when the card's cost is ignored entirely
        vp: Victory points, if printed
    """

    id: str
    name: str = ""
    ability: str = ""
    number: str = ""
    sort_id: float = 0
    type: str | None = None
    expansion: str | None = None
    size: str | None = None
    personality: str | None = None
    ability_type: str | None = None
    region_markers: frozenset[str] = frozenset()
    costs: Mapping[str, float] = field(default_factory=dict, hash=False)
    ignore_cost: bool = False
    vp: float | None = None

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Card":
        """
        Build a card from one dataset record.

        Raises:
            CatalogError: If the record has no usable identifier
        """
        raw_id = record.get("id")
        card_id = _as_text(raw_id)
        if card_id is None:
            raise CatalogError(
                "Card record is missing its identifier.",
                detail=f"Record: name={record.get('name')!r}, sort_id={record.get('sort_id')!r}",
            )

        card_type = _as_text(record.get("type"))
        is_primary = card_type == PRIMARY_TYPE.value

        sort_key = _as_number(record.get("sort_id"))
        if sort_key is None:
            sort_key = _as_number(record.get("number"))
        number = _as_text(record.get("number"))
        if number is None and sort_key is not None:
            number = f"{sort_key:g}"

        # Quantities keep their parsed value; non-numeric reads as absent
        costs: dict[str, float] = {}
        for resource in Resource:
            amount = _as_number(record.get(resource.value))
            if amount is not None and amount > 0:
                costs[resource.value] = amount

        vp = _as_number(record.get("VP"))

        return cls(
            id=card_id,
            name=_as_text(record.get("name")) or "",
            ability=_as_text(record.get("ability")) or "",
            number=number or "",
            sort_id=sort_key if sort_key is not None else 0,
            type=card_type,
            expansion=_as_text(record.get("expansion")),
            size=_as_text(record.get("size")),
            personality=_as_text(record.get("personality")) if is_primary else None,
            ability_type=_as_text(record.get("abilityType")) if is_primary else None,
            region_markers=(
                frozenset(r.value for r in Region if _is_marked(record.get(r.value)))
                if is_primary
                else frozenset()
            ),
            costs=costs,
            ignore_cost=_is_marked(record.get("ignoreCost")),
            vp=vp,
        )

    @property
    def is_primary(self) -> bool:
        """True for dragon cards."""
        return self.type == PRIMARY_TYPE.value

    @property
    def resources(self) -> tuple[str, ...]:
        """Resources this card carries a positive amount of, in vocabulary order."""
        return tuple(r.value for r in Resource if self.costs.get(r.value, 0) > 0)

    @property
    def no_resource_cost(self) -> bool:
        """
        Derived cost state.

        True iff the card carries no resource and its cost is not ignored.
        Mutually exclusive with ignore_cost and with carrying any resource.
        """
        return not self.resources and not self.ignore_cost

    @property
    def ability_types(self) -> tuple[str, ...]:
        """Parsed ability-type tags (empty for caves)."""
        if not self.is_primary or not self.ability_type:
            return ()
        return tuple(
            tag.strip() for tag in self.ability_type.split(ABILITY_TYPE_SEPARATOR) if tag.strip()
        )

    @property
    def regions(self) -> frozenset[str]:
        """Regions this card qualifies for (always empty for caves)."""
        if not self.is_primary:
            return frozenset()
        return self.region_markers

    def resource_amount(self, resource: str) -> float:
        return self.costs.get(resource, 0)
