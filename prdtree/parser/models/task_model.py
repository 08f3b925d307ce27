"""
Task Tree Data Models - Structured representation of a compiled PRD.

These models carry a document from heading-delimited sections through
the nested task tree to the final processing report. ``to_dict`` methods
render the camelCase shape consumed by persistence and prompt layers.
"""

from dataclasses import dataclass, field, replace
from typing import List, Dict, Any, Optional
from enum import Enum
from datetime import datetime


class TaskStatus(Enum):
    """Lifecycle states of a task. New tasks always start as PENDING."""
    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    BLOCKED = "blocked"


class Priority(Enum):
    """Task priority levels."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class RiskLevel(Enum):
    """Task risk levels."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass(frozen=True)
class EntityBundle:
    """
    Domain entities recognized in a piece of text.

    Each list behaves as an ordered set: lower-cased values, no
    duplicates, first-occurrence order.
    """
    actors: List[str] = field(default_factory=list)
    systems: List[str] = field(default_factory=list)
    features: List[str] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not (self.actors or self.systems or self.features)

    def to_dict(self) -> Dict[str, List[str]]:
        return {
            "actors": list(self.actors),
            "systems": list(self.systems),
            "features": list(self.features),
        }


@dataclass(frozen=True)
class Section:
    """
    Heading-delimited span of a PRD.

    ``level`` is the number of heading markers that introduced the
    section; ``content`` is the body text with blank lines removed.
    """
    id: str
    title: str
    level: int
    content: str = ""
    entities: EntityBundle = field(default_factory=EntityBundle)

    def with_entities(self, entities: EntityBundle) -> 'Section':
        """Return a copy of this section annotated with ``entities``."""
        return replace(self, entities=entities)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "level": self.level,
            "content": self.content,
            "entities": self.entities.to_dict(),
        }


@dataclass
class TaskMetadata:
    """Bookkeeping attached to every task node."""
    created_at: datetime
    updated_at: datetime
    priority: Priority = Priority.MEDIUM
    risk_level: RiskLevel = RiskLevel.LOW

    def __post_init__(self):
        if isinstance(self.priority, str):
            self.priority = Priority(self.priority)
        if isinstance(self.risk_level, str):
            self.risk_level = RiskLevel(self.risk_level)

    @classmethod
    def created(cls, now: Optional[datetime] = None) -> 'TaskMetadata':
        """Metadata for a freshly constructed task."""
        now = now or datetime.now()
        return cls(created_at=now, updated_at=now)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "priority": self.priority.value,
            "riskLevel": self.risk_level.value,
            "createdAt": self.created_at.isoformat(),
            "updatedAt": self.updated_at.isoformat(),
        }


@dataclass(frozen=True)
class TaskNode(Section):
    """
    Section promoted to a node of the task tree.

    Each node exclusively owns its ``sub_tasks``; children are kept in
    document order. ``dependencies`` is left empty here and populated
    only by downstream collaborators.
    """
    status: TaskStatus = TaskStatus.PENDING
    dependencies: List[str] = field(default_factory=list)
    sub_tasks: List['TaskNode'] = field(default_factory=list)
    metadata: TaskMetadata = field(default_factory=TaskMetadata.created)

    @classmethod
    def from_section(cls, section: Section, now: Optional[datetime] = None) -> 'TaskNode':
        """Build a childless pending task from a section."""
        return cls(
            id=section.id,
            title=section.title,
            level=section.level,
            content=section.content,
            entities=section.entities,
            metadata=TaskMetadata.created(now),
        )

    @property
    def has_sub_tasks(self) -> bool:
        return bool(self.sub_tasks)

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data.update({
            "status": self.status.value,
            "dependencies": list(self.dependencies),
            "subTasks": [child.to_dict() for child in self.sub_tasks],
            "metadata": self.metadata.to_dict(),
        })
        return data


@dataclass(frozen=True)
class AvailableTask:
    """Flat view of a task, for pickers that select a task by ID."""
    id: str
    name: str
    level: int
    has_sub_tasks: bool
    has_dependencies: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "level": self.level,
            "hasSubTasks": self.has_sub_tasks,
            "hasDependencies": self.has_dependencies,
        }


@dataclass
class EntityStats:
    """Entity counts and deduplicated entity lists across a document."""
    total_actors: int = 0
    total_systems: int = 0
    total_features: int = 0
    unique_actors: List[str] = field(default_factory=list)
    unique_systems: List[str] = field(default_factory=list)
    unique_features: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalActors": self.total_actors,
            "totalSystems": self.total_systems,
            "totalFeatures": self.total_features,
            "uniqueActors": list(self.unique_actors),
            "uniqueSystems": list(self.unique_systems),
            "uniqueFeatures": list(self.unique_features),
        }


@dataclass
class ProcessingMetadata:
    """Timing and size of a processing run. Duration is in milliseconds."""
    start_time: datetime
    end_time: datetime
    processing_duration: float
    input_size: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "startTime": self.start_time.isoformat(),
            "endTime": self.end_time.isoformat(),
            "processingDuration": self.processing_duration,
            "inputSize": self.input_size,
        }


@dataclass
class TreeStats:
    """Statistical portion of a processing report."""
    total_tasks: int
    level_distribution: Dict[int, int]
    entity_stats: EntityStats
    processing_metadata: ProcessingMetadata


@dataclass
class ProcessingReport:
    """
    Complete result of compiling a PRD.

    This is the single value returned to callers; an empty document
    yields a report with ``is_empty`` set rather than an error.
    """
    sections: List[Section]
    task_tree: List[TaskNode]
    total_tasks: int
    level_distribution: Dict[int, int]
    entity_stats: EntityStats
    processing_metadata: ProcessingMetadata

    @classmethod
    def from_stats(
        cls,
        sections: List[Section],
        task_tree: List[TaskNode],
        stats: TreeStats,
    ) -> 'ProcessingReport':
        return cls(
            sections=sections,
            task_tree=task_tree,
            total_tasks=stats.total_tasks,
            level_distribution=stats.level_distribution,
            entity_stats=stats.entity_stats,
            processing_metadata=stats.processing_metadata,
        )

    @property
    def is_empty(self) -> bool:
        """Whether no sections were detected."""
        return not self.sections

    @property
    def root_count(self) -> int:
        return len(self.task_tree)

    def to_dict(self, include_sections: bool = True) -> Dict[str, Any]:
        """
        Render the report as JSON-ready data.

        Args:
            include_sections: Include the flat section list alongside
                the tree (it duplicates the tree's content)
        """
        data: Dict[str, Any] = {}
        if include_sections:
            data["sections"] = [s.to_dict() for s in self.sections]
        data.update({
            "taskTree": [node.to_dict() for node in self.task_tree],
            "totalTasks": self.total_tasks,
            "levelDistribution": dict(self.level_distribution),
            "entityStats": self.entity_stats.to_dict(),
            "processingMetadata": self.processing_metadata.to_dict(),
        })
        return data

    def summary(self) -> str:
        """Get a summary string of the report."""
        levels = ", ".join(
            f"H{level}: {count}" for level, count in sorted(self.level_distribution.items())
        ) or "none"
        stats = self.entity_stats
        return (
            f"Tasks: {self.total_tasks} ({self.root_count} root)\n"
            f"  Levels: {levels}\n"
            f"  Actors: {', '.join(stats.unique_actors) or '-'}\n"
            f"  Systems: {', '.join(stats.unique_systems) or '-'}\n"
            f"  Features: {', '.join(stats.unique_features) or '-'}\n"
            f"  Input: {self.processing_metadata.input_size} chars "
            f"in {self.processing_metadata.processing_duration:.2f}ms"
        )
