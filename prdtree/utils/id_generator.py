"""
ID Generator utilities for creating unique section identifiers.
"""

import uuid
from typing import Set


def generate_uuid() -> str:
    """
    Generate a random UUID.

    Returns:
        UUID string in format: xxxxxxxx-xxxx-xxxx-xxxx-xxxxxxxxxxxx
    """
    return str(uuid.uuid4())


class IDGenerator:
    """
    Stateful ID generator for tracking used IDs within one document.

    A fresh instance is created per detection run, so IDs are unique
    across the whole document without any process-wide state.
    """

    def __init__(self):
        self._used_ids: Set[str] = set()

    def section_id(self) -> str:
        """Generate a unique section ID (UUID)."""
        while True:
            section_id = generate_uuid()
            if section_id not in self._used_ids:
                self._used_ids.add(section_id)
                return section_id

