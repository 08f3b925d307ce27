"""
Task Tree Builder - Nest flat sections into a forest of task nodes.

Nesting is driven by heading level alone, in one linear pass over an
explicit stack of open ancestors:

1. Pop ancestors whose level is >= the current section's level
2. Empty stack: the node is a new root
3. Otherwise: the node is appended to the top ancestor's sub-tasks
4. Push the node

A deeper heading therefore attaches to the nearest preceding heading of
strictly lesser level, whatever the gap between their levels.
"""

from datetime import datetime
from typing import Iterator, List, Optional, Tuple

from .models import AvailableTask, Section, TaskNode
from ..utils.logger import get_logger

logger = get_logger(__name__)


def build_task_tree(
    sections: List[Section],
    now: Optional[datetime] = None,
) -> List[TaskNode]:
    """
    Build the task forest from sections in document order.

    Args:
        sections: Entity-annotated sections
        now: Creation timestamp for every node (defaults to the time
            each node is constructed)

    Returns:
        Root task nodes in document order
    """
    roots: List[TaskNode] = []
    ancestors: List[Tuple[int, TaskNode]] = []

    for section in sections:
        node = TaskNode.from_section(section, now)

        while ancestors and ancestors[-1][0] >= node.level:
            ancestors.pop()

        if ancestors:
            ancestors[-1][1].sub_tasks.append(node)
        else:
            roots.append(node)

        ancestors.append((node.level, node))

    logger.debug(f"Built task tree: {len(sections)} nodes, {len(roots)} roots")
    return roots


def iter_tasks(task_tree: List[TaskNode]) -> Iterator[TaskNode]:
    """
    Walk a task forest in pre-order (document order).

    Args:
        task_tree: Root task nodes

    Yields:
        Every node, parents before their children
    """
    stack = list(reversed(task_tree))
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.sub_tasks))


def find_task_by_id(task_tree: List[TaskNode], task_id: str) -> Optional[TaskNode]:
    """Get a task anywhere in the forest by its ID."""
    return next((node for node in iter_tasks(task_tree) if node.id == task_id), None)


def list_available_tasks(task_tree: List[TaskNode]) -> List[AvailableTask]:
    """
    Flatten the forest into selectable task entries.

    Args:
        task_tree: Root task nodes

    Returns:
        One AvailableTask per node, in pre-order
    """
    return [
        AvailableTask(
            id=node.id,
            name=node.title,
            level=node.level,
            has_sub_tasks=node.has_sub_tasks,
            has_dependencies=bool(node.dependencies),
        )
        for node in iter_tasks(task_tree)
    ]
