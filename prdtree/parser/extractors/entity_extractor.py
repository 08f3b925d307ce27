"""
Entity Extractor - Recognize actors, systems and features in section text.

Matching is keyword based over fixed bilingual (English and Indonesian)
vocabularies. Keywords match whole words only, case-insensitively.

Extracts:
- Actors (user, admin, pengguna, ...)
- Systems (system, database, api, sistem, ...)
- Features (feature, module, fitur, fungsi, ...)
"""

import re
from typing import List, Optional, Tuple

from ..models import EntityBundle, Section
from ...utils.logger import get_logger

logger = get_logger(__name__)


ACTOR_KEYWORDS: Tuple[str, ...] = (
    'user', 'admin', 'developer', 'pengguna', 'administrator', 'stakeholder',
)
SYSTEM_KEYWORDS: Tuple[str, ...] = (
    'sistem', 'system', 'database', 'api', 'service', 'server', 'aplikasi',
)
FEATURE_KEYWORDS: Tuple[str, ...] = (
    'fitur', 'feature', 'fungsi', 'function', 'modul', 'module', 'komponen',
)


def _compile_vocabulary(keywords: Tuple[str, ...]) -> re.Pattern:
    """Build a single whole-word, case-insensitive pattern for a vocabulary."""
    # Longest first so "administrator" is tried before "admin"
    alternatives = sorted(keywords, key=len, reverse=True)
    return re.compile(
        r'\b(?:' + '|'.join(re.escape(k) for k in alternatives) + r')\b',
        re.IGNORECASE,
    )


ACTOR_PATTERN = _compile_vocabulary(ACTOR_KEYWORDS)
SYSTEM_PATTERN = _compile_vocabulary(SYSTEM_KEYWORDS)
FEATURE_PATTERN = _compile_vocabulary(FEATURE_KEYWORDS)


def find_keywords(pattern: re.Pattern, keywords: Tuple[str, ...], text: str) -> List[str]:
    """
    Collect every match of a vocabulary pattern.

    Case-insensitive matching also accepts Unicode variants such as
    ``ſ`` for ``s`` or ``ı`` for ``i``; those matches are skipped unless
    they lower-case to a vocabulary keyword.

    Args:
        pattern: Compiled vocabulary pattern
        keywords: Vocabulary the pattern was compiled from
        text: Text to search

    Returns:
        Lower-cased matches in first-occurrence order, without duplicates
    """
    found: List[str] = []
    for match in pattern.finditer(text):
        keyword = match.group(0).lower()
        if keyword in keywords and keyword not in found:
            found.append(keyword)
    return found


def extract_entities(content: Optional[str]) -> EntityBundle:
    """
    Extract entities from free text.

    Args:
        content: Section content (or any text). None counts as empty.

    Returns:
        EntityBundle; categories with no match are empty lists
    """
    if not content or not isinstance(content, str):
        return EntityBundle()

    return EntityBundle(
        actors=find_keywords(ACTOR_PATTERN, ACTOR_KEYWORDS, content),
        systems=find_keywords(SYSTEM_PATTERN, SYSTEM_KEYWORDS, content),
        features=find_keywords(FEATURE_PATTERN, FEATURE_KEYWORDS, content),
    )


def annotate_sections(sections: List[Section]) -> List[Section]:
    """
    Attach extracted entities to each section.

    Args:
        sections: Sections from ``detect_sections``

    Returns:
        New list of annotated sections, same order
    """
    annotated = [s.with_entities(extract_entities(s.content)) for s in sections]
    logger.debug(f"Extracted entities for {len(annotated)} sections")
    return annotated
