"""
PRD Extractors - Entity extraction for compiled sections.
"""

from .entity_extractor import (
    ACTOR_KEYWORDS,
    SYSTEM_KEYWORDS,
    FEATURE_KEYWORDS,
    extract_entities,
    annotate_sections,
)

__all__ = [
    'ACTOR_KEYWORDS',
    'SYSTEM_KEYWORDS',
    'FEATURE_KEYWORDS',
    'extract_entities',
    'annotate_sections',
]
