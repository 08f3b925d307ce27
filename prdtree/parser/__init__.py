"""
Parser module - Compile PRD documents into task trees.
"""

from .models import (
    TaskStatus,
    Priority,
    RiskLevel,
    EntityBundle,
    Section,
    TaskMetadata,
    TaskNode,
    AvailableTask,
    EntityStats,
    ProcessingMetadata,
    TreeStats,
    ProcessingReport,
)
from .section_detector import detect_sections
from .extractors import extract_entities, annotate_sections
from .task_tree import build_task_tree, iter_tasks, find_task_by_id, list_available_tasks
from .stats import aggregate_stats
from .prd_processor import process, process_file, read_prd_file

__all__ = [
    # Models
    'TaskStatus',
    'Priority',
    'RiskLevel',
    'EntityBundle',
    'Section',
    'TaskMetadata',
    'TaskNode',
    'AvailableTask',
    'EntityStats',
    'ProcessingMetadata',
    'TreeStats',
    'ProcessingReport',
    # Pipeline stages
    'detect_sections',
    'extract_entities',
    'annotate_sections',
    'build_task_tree',
    'aggregate_stats',
    # Tree helpers
    'iter_tasks',
    'find_task_by_id',
    'list_available_tasks',
    # Entry points
    'process',
    'process_file',
    'read_prd_file',
]
