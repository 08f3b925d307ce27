"""
Task Tree Models - Data structures for compiled PRD documents.
"""

from .task_model import (
    # Enums
    TaskStatus,
    Priority,
    RiskLevel,
    # Data classes
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

__all__ = [
    # Enums
    'TaskStatus',
    'Priority',
    'RiskLevel',
    # Data classes
    'EntityBundle',
    'Section',
    'TaskMetadata',
    'TaskNode',
    'AvailableTask',
    'EntityStats',
    'ProcessingMetadata',
    'TreeStats',
    'ProcessingReport',
]
