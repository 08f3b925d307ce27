"""Unit tests for statistics aggregation."""

from datetime import datetime, timedelta

from prdtree.parser.models import EntityBundle, Section
from prdtree.parser.stats import aggregate_stats
from prdtree.parser.task_tree import build_task_tree


def section(id, level, actors=(), systems=(), features=()):
    return Section(
        id=id,
        title=f"Task {id}",
        level=level,
        entities=EntityBundle(actors=list(actors), systems=list(systems), features=list(features)),
    )


class TestAggregateStats:
    """Tests for aggregate_stats."""

    def test_empty_forest(self):
        stats = aggregate_stats([])

        assert stats.total_tasks == 0
        assert stats.level_distribution == {}
        assert stats.entity_stats.total_actors == 0
        assert stats.entity_stats.unique_actors == []
        assert stats.processing_metadata.input_size == 0

    def test_counts_nested_nodes(self):
        tree = build_task_tree([section("1", 1), section("2", 2), section("3", 3), section("4", 2), section("5", 1)])
        stats = aggregate_stats(tree)

        assert stats.total_tasks == 5
        assert stats.level_distribution == {1: 2, 2: 2, 3: 1}

    def test_level_distribution_omits_missing_levels(self):
        tree = build_task_tree([section("1", 1), section("2", 4)])
        assert aggregate_stats(tree).level_distribution == {1: 1, 4: 1}

    def test_totals_count_per_node(self):
        tree = build_task_tree([
            section("1", 1, actors=["user"], systems=["system"]),
            section("2", 1, actors=["user", "admin"], systems=["system"]),
        ])
        stats = aggregate_stats(tree).entity_stats

        assert stats.total_actors == 3
        assert stats.total_systems == 2
        assert stats.total_features == 0
        assert stats.unique_actors == ["user", "admin"]
        assert stats.unique_systems == ["system"]
        assert stats.unique_features == []

    def test_unique_order_follows_pre_order(self):
        tree = build_task_tree([
            section("1", 1, features=["module"]),
            section("2", 2, features=["fitur"]),
            section("3", 1, features=["feature", "module"]),
        ])
        stats = aggregate_stats(tree).entity_stats

        assert stats.unique_features == ["module", "fitur", "feature"]
        assert stats.total_features == 4

    def test_input_size_uses_raw_text(self):
        raw = "# A\\nbody"
        stats = aggregate_stats([], raw_text=raw)
        assert stats.processing_metadata.input_size == len(raw)

    def test_processing_metadata_timing(self):
        started = datetime.now() - timedelta(milliseconds=5)
        metadata = aggregate_stats([], started_at=started).processing_metadata

        assert metadata.start_time == started
        assert metadata.end_time >= started
        assert metadata.processing_duration >= 5
