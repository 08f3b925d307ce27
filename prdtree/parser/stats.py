"""
Stats Aggregator - Counts and distributions over a task forest.
"""

from datetime import datetime
from typing import Dict, List, Optional

from .models import EntityStats, ProcessingMetadata, TaskNode, TreeStats
from .task_tree import iter_tasks
from ..utils.logger import get_logger

logger = get_logger(__name__)


def _append_unique(target: List[str], values: List[str]) -> None:
    for value in values:
        if value not in target:
            target.append(value)


def aggregate_stats(
    task_tree: List[TaskNode],
    raw_text: Optional[str] = None,
    started_at: Optional[datetime] = None,
) -> TreeStats:
    """
    Aggregate statistics over a task forest.

    Entity totals count per node, so an entity repeated in two nodes
    counts twice; the unique lists deduplicate across the document in
    pre-order.

    Args:
        task_tree: Root task nodes
        raw_text: Original input text, before normalization
        started_at: When processing began (defaults to now)

    Returns:
        TreeStats with processing metadata stamped at completion
    """
    started_at = started_at or datetime.now()

    total_tasks = 0
    level_distribution: Dict[int, int] = {}
    entity_stats = EntityStats()

    for node in iter_tasks(task_tree):
        total_tasks += 1
        level_distribution[node.level] = level_distribution.get(node.level, 0) + 1

        entities = node.entities
        entity_stats.total_actors += len(entities.actors)
        entity_stats.total_systems += len(entities.systems)
        entity_stats.total_features += len(entities.features)
        _append_unique(entity_stats.unique_actors, entities.actors)
        _append_unique(entity_stats.unique_systems, entities.systems)
        _append_unique(entity_stats.unique_features, entities.features)

    input_size = len(raw_text) if isinstance(raw_text, str) else 0

    ended_at = datetime.now()
    metadata = ProcessingMetadata(
        start_time=started_at,
        end_time=ended_at,
        processing_duration=max((ended_at - started_at).total_seconds() * 1000, 0.0),
        input_size=input_size,
    )

    logger.debug(f"Aggregated stats: {total_tasks} tasks, levels={level_distribution}")

    return TreeStats(
        total_tasks=total_tasks,
        level_distribution=level_distribution,
        entity_stats=entity_stats,
        processing_metadata=metadata,
    )
