"""Unit tests for the ranking pipeline."""

import uuid

import pytest

from app.admin.schemas.admin_statistics import TopActivity, TopCity
from app.admin.services.statistics import (
    TOP_ACTIVITIES,
    TOP_CITIES,
    RankedKey,
    Ranker,
    RankingSpec,
    RankingsService,
    ReferenceTable,
    UsageTable,
    join_reference,
    rank_records,
)


def _stops(*pairs: tuple[str, int]) -> list[dict]:
    return [{"city_id": city_id} for city_id, times in pairs for _ in range(times)]


class TestRankRecords:
    """Tests for rank_records function."""

    def test_orders_by_count_descending(self):
        records = _stops(("nyc", 2), ("paris", 5), ("rome", 3))

        result = rank_records(records, "city_id", 10)

        assert result == [("paris", 5), ("rome", 3), ("nyc", 2)]

    def test_equal_counts_keep_first_appearance_order(self):
        records = _stops(("paris", 5), ("rome", 5), ("nyc", 2))

        result = rank_records(records, "city_id", 10)

        assert result == [("paris", 5), ("rome", 5), ("nyc", 2)]

    def test_tie_order_follows_input_not_key(self):
        records = _stops(("rome", 1), ("paris", 1), ("amsterdam", 1))

        result = rank_records(records, "city_id", 10)

        assert [item.key for item in result] == ["rome", "paris", "amsterdam"]

    def test_interleaved_records_are_grouped(self):
        records = [{"city_id": c} for c in ["rome", "paris", "rome", "paris", "paris"]]

        result = rank_records(records, "city_id", 10)

        assert result == [("paris", 3), ("rome", 2)]

    def test_truncates_to_limit(self):
        records = _stops(("a", 4), ("b", 3), ("c", 2), ("d", 1))

        result = rank_records(records, "city_id", 2)

        assert result == [("a", 4), ("b", 3)]

    @pytest.mark.parametrize("limit", [0, -1])
    def test_non_positive_limit_returns_empty(self, limit):
        assert rank_records(_stops(("a", 1)), "city_id", limit) == []

    def test_empty_input_returns_empty(self):
        assert rank_records([], "city_id", 10) == []

    def test_reads_attributes_from_objects(self):
        class Stop:
            def __init__(self, city_id):
                self.city_id = city_id

        result = rank_records([Stop("oslo"), Stop("oslo"), Stop("bergen")], "city_id", 10)

        assert result == [("oslo", 2), ("bergen", 1)]

    def test_result_is_sorted_and_bounded_for_every_limit(self):
        records = _stops(("a", 3), ("b", 7), ("c", 3), ("d", 1), ("e", 7), ("f", 2))

        for limit in range(0, 8):
            result = rank_records(records, "city_id", limit)
            counts = [item.count for item in result]
            assert len(result) <= limit
            assert counts == sorted(counts, reverse=True)

    def test_repeated_runs_are_identical(self):
        records = _stops(("x", 2), ("y", 2), ("z", 2))

        assert rank_records(records, "city_id", 10) == rank_records(records, "city_id", 10)


class TestJoinReference:
    """Tests for join_reference function."""

    def test_missing_reference_uses_unknown_defaults(self):
        ranked = [RankedKey("paris", 5), RankedKey("rome", 5), RankedKey("nyc", 2)]
        cities = [
            {"id": "rome", "name": "Rome", "country": "Italy"},
            {"id": "paris", "name": "Paris", "country": "France"},
        ]

        result = join_reference(ranked, cities, TOP_CITIES)

        assert result == [
            TopCity(city="Paris", country="France", tripCount=5),
            TopCity(city="Rome", country="Italy", tripCount=5),
            TopCity(city="Unknown", country="", tripCount=2),
        ]

    def test_never_drops_keys_when_every_reference_is_missing(self):
        ranked = [RankedKey("a", 3), RankedKey("b", 2), RankedKey("c", 1)]

        result = join_reference(ranked, [], TOP_CITIES)

        assert len(result) == len(ranked)
        assert all(row.city == "Unknown" and row.country == "" for row in result)
        assert [row.tripCount for row in result] == [3, 2, 1]

    def test_first_reference_row_wins_on_duplicate_ids(self):
        ranked = [RankedKey("paris", 1)]
        cities = [
            {"id": "paris", "name": "Paris", "country": "France"},
            {"id": "paris", "name": "Paris (TX)", "country": "USA"},
        ]

        result = join_reference(ranked, cities, TOP_CITIES)

        assert result == [TopCity(city="Paris", country="France", tripCount=1)]

    def test_activity_rows_use_category(self):
        activity_id = uuid.uuid4()
        ranked = [RankedKey(activity_id, 4)]
        activities = [{"id": activity_id, "name": "Louvre tour", "category": "museum"}]

        result = join_reference(ranked, activities, TOP_ACTIVITIES)

        assert result == [TopActivity(activity="Louvre tour", category="museum", usageCount=4)]

    def test_empty_ranking_returns_empty(self):
        rows = [{"id": "paris", "name": "Paris", "country": "France"}]
        assert join_reference([], rows, TOP_CITIES) == []


class TestRanker:
    """Tests for the two-stage Ranker against the in-memory store."""

    @pytest.mark.asyncio
    async def test_worked_example_with_dangling_city(self, memory_store):
        memory_store.add_city("paris", "Paris", "France")
        memory_store.add_city("rome", "Rome", "Italy")
        memory_store.add_stops("paris", 5)
        memory_store.add_stops("rome", 5)
        memory_store.add_stops("nyc", 2)
        ranker = Ranker(memory_store, TOP_CITIES, 10)

        ranked = await ranker.rank()
        rows = await ranker.enrich(ranked)

        assert ranked == [("paris", 5), ("rome", 5), ("nyc", 2)]
        assert rows[2] == TopCity(city="Unknown", country="", tripCount=2)
        assert len(rows) == len(ranked)

    @pytest.mark.asyncio
    async def test_groups_by_the_field_named_in_its_spec(self, memory_store):
        memory_store.add_city("oslo", "Oslo", "Norway")
        memory_store.trip_stops.extend(
            [
                {"trip_id": "t1", "city_id": "oslo", "region": "north"},
                {"trip_id": "t2", "city_id": "oslo", "region": "north"},
                {"trip_id": "t3", "city_id": "lima", "region": "south"},
            ]
        )
        by_region = RankingSpec(
            usage=UsageTable.TRIP_STOPS,
            group_key="region",
            reference=ReferenceTable.CITIES,
            name_attr="name",
            detail_attr="country",
            build_row=lambda name, detail, count: (name, detail, count),
        )

        assert await Ranker(memory_store, by_region, 10).rank() == [("north", 2), ("south", 1)]
        assert await Ranker(memory_store, TOP_CITIES, 10).rank() == [("oslo", 2), ("lima", 1)]

    @pytest.mark.asyncio
    async def test_enrichment_is_a_single_batch_lookup(self, memory_store):
        for i in range(8):
            memory_store.add_city(f"city-{i}", f"City {i}", "Country")
            memory_store.add_stops(f"city-{i}", i + 1)

        await Ranker(memory_store, TOP_CITIES, 10).top()

        assert memory_store.calls.count("grouped_counts") == 1
        assert memory_store.calls.count("fetch_by_ids") == 1

    @pytest.mark.asyncio
    async def test_empty_usage_skips_reference_lookup(self, memory_store):
        memory_store.add_city("paris", "Paris", "France")

        result = await Ranker(memory_store, TOP_CITIES, 10).top()

        assert result == []
        assert "fetch_by_ids" not in memory_store.calls

    @pytest.mark.asyncio
    async def test_zero_limit_does_not_query(self, memory_store):
        memory_store.add_stops("paris", 3)

        assert await Ranker(memory_store, TOP_CITIES, 0).top() == []
        assert memory_store.calls == []

    @pytest.mark.asyncio
    async def test_limit_is_a_parameter(self, memory_store):
        for i in range(15):
            memory_store.add_stops(f"city-{i}", 15 - i)

        result = await RankingsService.get_top_cities(memory_store, limit=3)

        assert [row.tripCount for row in result] == [15, 14, 13]


class TestRankingsService:
    """Tests for RankingsService."""

    @pytest.mark.asyncio
    async def test_top_activities_ranked_by_usage(self, memory_store):
        hiking, museum = uuid.uuid4(), uuid.uuid4()
        memory_store.add_activity(hiking, "Alpine hike", "outdoor")
        memory_store.add_activity(museum, "Uffizi", "museum")
        memory_store.add_trip_activities(museum, 2)
        memory_store.add_trip_activities(hiking, 6)

        result = await RankingsService.get_top_activities(memory_store)

        assert result == [
            TopActivity(activity="Alpine hike", category="outdoor", usageCount=6),
            TopActivity(activity="Uffizi", category="museum", usageCount=2),
        ]
