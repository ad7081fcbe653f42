"""
Search query value type.

A SearchQuery is owned by the presentation layer and replaced wholesale on
every interaction. All update helpers return a new query; nothing mutates
in place. Any combination of toggles is legal, including everything
switched off (which simply yields an empty result).
"""

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_serializer, field_validator

from wyrmfinder.models.card import (
    AbilityType,
    CardType,
    CostFlag,
    Expansion,
    Personality,
    Region,
    Resource,
    Size,
)
from wyrmfinder.models.failure import FailureKind, KnownError


class SortKey(str, Enum):
    """Sort selectors."""

    NUMBER = "number"
    NAME = "name"
    VP = "vp"
    SIZE = "size"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


# Facet name -> values offered by the filter controls
FACET_VOCABULARY: dict[str, tuple[str, ...]] = {
    "type": tuple(t.value for t in CardType),
    "personality": tuple(p.value for p in Personality),
    "expansion": tuple(e.value for e in Expansion),
    "size": tuple(s.value for s in Size),
    "resource": tuple(r.value for r in Resource) + tuple(f.value for f in CostFlag),
    "ability_type": tuple(a.value for a in AbilityType),
    "region": tuple(r.value for r in Region),
}


def _toggles(facet: str, enabled: bool = True) -> dict[str, bool]:
    return {value: enabled for value in FACET_VOCABULARY[facet]}


def _frozen(toggles: Mapping[str, bool]) -> Mapping[str, bool]:
    return MappingProxyType(dict(toggles))


class SearchQuery(BaseModel):
    """
    Text plus facet toggles plus sort selection.

    Facet maps are read-only value -> enabled mappings. A value missing
    from a map reads as disabled. sort_by is kept as a plain string so that
    an unrecognised selector can fall back to the default ordering instead
    of failing.
    """

    model_config = ConfigDict(frozen=True)

    text: str = ""
    type: Mapping[str, bool] = Field(default_factory=lambda: _frozen(_toggles("type")))
    personality: Mapping[str, bool] = Field(
        default_factory=lambda: _frozen(_toggles("personality"))
    )
    expansion: Mapping[str, bool] = Field(default_factory=lambda: _frozen(_toggles("expansion")))
    size: Mapping[str, bool] = Field(default_factory=lambda: _frozen(_toggles("size")))
    resource: Mapping[str, bool] = Field(default_factory=lambda: _frozen(_toggles("resource")))
    ability_type: Mapping[str, bool] = Field(
        default_factory=lambda: _frozen(_toggles("ability_type")),
        validation_alias=AliasChoices("ability_type", "abilityType"),
    )
    # No region selected means no region constraint
    region: Mapping[str, bool] = Field(
        default_factory=lambda: _frozen(_toggles("region", enabled=False)),
        validation_alias=AliasChoices("region", "cave"),
    )
    sort_by: str = Field(
        default=SortKey.NUMBER.value,
        validation_alias=AliasChoices("sort_by", "sortBy"),
    )
    sort_order: str = Field(
        default=SortOrder.ASC.value,
        validation_alias=AliasChoices("sort_order", "sortOrder"),
    )

    @field_validator(*FACET_VOCABULARY, mode="after")
    @classmethod
    def _freeze_facet(cls, value: Mapping[str, bool]) -> Mapping[str, bool]:
        return _frozen(value)

    @field_serializer(*FACET_VOCABULARY)
    def _dump_facet(self, value: Mapping[str, bool]) -> dict[str, bool]:
        return dict(value)

    @classmethod
    def default(cls) -> "SearchQuery":
        """The query the filter panel starts with."""
        return cls()

    def facet(self, facet: str) -> Mapping[str, bool]:
        """
        Get the toggle map of one facet.

        Raises:
            KnownError: If the facet name is unknown
        """
        if facet not in FACET_VOCABULARY:
            raise KnownError(
                kind=FailureKind.INVALID_INPUT,
                message=f"Unknown facet '{facet}'.",
                suggestion=f"Use one of: {', '.join(FACET_VOCABULARY)}",
            )
        toggles: Mapping[str, bool] = getattr(self, facet)
        return toggles

    def is_enabled(self, facet: str, value: str | None) -> bool:
        if value is None:
            return False
        return bool(self.facet(facet).get(value, False))

    def selected(self, facet: str) -> tuple[str, ...]:
        """Enabled values of one facet, in map order."""
        return tuple(value for value, enabled in self.facet(facet).items() if enabled)

    def _replace(self, **update: Any) -> "SearchQuery":
        # model_copy skips validation, so facet maps are frozen here
        for name, value in update.items():
            if name in FACET_VOCABULARY:
                update[name] = _frozen(value)
        return self.model_copy(update=update)

    def with_text(self, text: str) -> "SearchQuery":
        return self._replace(text=text)

    def toggle(self, facet: str, value: str) -> "SearchQuery":
        """Flip one facet value."""
        toggles = dict(self.facet(facet))
        toggles[value] = not toggles.get(value, False)
        return self._replace(**{facet: toggles})

    def set_value(self, facet: str, value: str, enabled: bool) -> "SearchQuery":
        toggles = dict(self.facet(facet))
        toggles[value] = enabled
        return self._replace(**{facet: toggles})

    def select_all(self, facet: str) -> "SearchQuery":
        """Enable every value of a facet (the "All" button)."""
        toggles = {value: True for value in self.facet(facet)}
        toggles.update(_toggles(facet))
        return self._replace(**{facet: toggles})

    def clear(self, facet: str) -> "SearchQuery":
        """Disable every value of a facet (the "Clear" button)."""
        toggles = {value: False for value in self.facet(facet)}
        toggles.update(_toggles(facet, enabled=False))
        return self._replace(**{facet: toggles})

    def with_sort(
        self,
        sort_by: SortKey | str | None = None,
        sort_order: SortOrder | str | None = None,
    ) -> "SearchQuery":
        update: dict[str, str] = {}
        if sort_by is not None:
            update["sort_by"] = sort_by.value if isinstance(sort_by, SortKey) else sort_by
        if sort_order is not None:
            update["sort_order"] = (
                sort_order.value if isinstance(sort_order, SortOrder) else sort_order
            )
        return self._replace(**update)

    def reverse_order(self) -> "SearchQuery":
        """Flip between ascending and descending."""
        if self.sort_order == SortOrder.DESC.value:
            return self._replace(sort_order=SortOrder.ASC.value)
        return self._replace(sort_order=SortOrder.DESC.value)
