from wyrmfinder.models.card import Card
from wyrmfinder.models.query import SearchQuery
from wyrmfinder.services.catalog import CatalogStore
from wyrmfinder.services.search import run_search
from wyrmfinder.services.statistics import (
    STATISTIC_DIMENSIONS,
    FacetStatistics,
    compute_statistics,
    statistics_for,
)
from wyrmfinder.services.text_index import TextIndex


class TestComputeStatistics:
    """Tests for the per-dimension reduction."""

    def test_category_counts(self, catalog: CatalogStore) -> None:
        stats = compute_statistics(catalog)

        assert stats.total == 6
        assert stats.count("type", "Dragon") == 4
        assert stats.count("type", "Cave") == 2

    def test_resource_counts_include_cost_flags(self, catalog: CatalogStore) -> None:
        stats = compute_statistics(catalog)

        assert stats.dimension("resource") == {
            "Egg": 1,
            "Milk": 1,
            "Meat": 1,
            "Gold": 1,
            "Crystal": 1,
            "Coin": 1,
            "NoResourceCost": 1,
            "IgnoreCost": 1,
        }

    def test_region_counts(self, catalog: CatalogStore) -> None:
        stats = compute_statistics(catalog)

        assert stats.dimension("region") == {
            "Crimson Cavern": 2,
            "Golden Grotto": 2,
            "Amethyst Abyss": 1,
        }

    def test_ability_types_count_each_tag(self, catalog: CatalogStore) -> None:
        stats = compute_statistics(catalog)

        assert stats.count("ability_type", "Adventurer") == 2
        assert stats.count("ability_type", "OncePerRound") == 1
        assert stats.count("ability_type", "WhenPlayed") == 1

    def test_caves_have_no_personality(self, catalog: CatalogStore) -> None:
        caves = [card for card in catalog if card.type == "Cave"]

        stats = compute_statistics(caves)

        assert sum(stats.dimension("personality").values()) == 0

    def test_unseen_values_read_as_zero(self) -> None:
        stats = compute_statistics([])

        assert stats.total == 0
        assert stats.dimension("size") == {
            "Hatchling": 0,
            "Fledgling": 0,
            "Small": 0,
            "Medium": 0,
            "Large": 0,
        }
        assert stats.count("size", "Gigantic") == 0
        assert stats.count("no-such-dimension", "x") == 0

    def test_values_outside_vocabulary_are_counted(self) -> None:
        stats = compute_statistics([Card(id="x", expansion="promo")])

        assert stats.count("expansion", "promo") == 1
        assert stats.count("expansion", "base") == 0

    def test_custom_dimension_table(self, catalog: CatalogStore) -> None:
        table = {"scoring": lambda card: ["scoring"] if (card.vp or 0) >= 4 else []}

        stats = compute_statistics(catalog, table)

        assert stats.count("scoring", "scoring") == 2
        assert list(stats.counts) == ["scoring"]

    def test_every_dimension_is_reported(self, catalog: CatalogStore) -> None:
        assert set(compute_statistics(catalog).counts) == set(STATISTIC_DIMENSIONS)


class TestStatisticsFor:
    def test_counts_follow_the_result(self, catalog: CatalogStore, text_index: TextIndex) -> None:
        result = run_search(catalog, text_index, SearchQuery().toggle("type", "Dragon"))

        stats = statistics_for(result, catalog)

        assert stats.count("type", "Dragon") == 0
        assert stats.count("type", "Cave") == 2
        assert stats.count("resource", "Milk") == 1

    def test_does_not_change_the_result(
        self, catalog: CatalogStore, text_index: TextIndex
    ) -> None:
        result = run_search(catalog, text_index, SearchQuery())

        statistics_for(result, catalog)

        assert run_search(catalog, text_index, SearchQuery()) == result

    def test_empty_result(self, catalog: CatalogStore) -> None:
        stats = statistics_for((), catalog)

        assert stats == FacetStatistics(total=0, counts=stats.counts)
        assert stats.count("type", "Dragon") == 0
