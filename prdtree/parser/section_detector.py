"""
Section Detector - Split raw PRD text into heading-delimited sections.

A heading is a line starting with one or more ``#`` markers, at least
one whitespace character, then non-empty title text. The marker count
is the section level. Text before the first heading is dropped.
"""

import re
from typing import Callable, List, Optional, Tuple

from .models import Section
from ..utils.id_generator import IDGenerator
from ..utils.logger import get_logger

logger = get_logger(__name__)

HEADING_MARKER = "#"

# Literal backslash-n, as left behind by text pasted from JSON strings
ESCAPED_NEWLINE = "\\n"

HEADING_PATTERN = re.compile(rf'^({re.escape(HEADING_MARKER)}+)\s+(\S.*)$')


def normalize_lines(raw_text: str) -> List[str]:
    """
    Split text into logical lines.

    Escaped newline sequences count as line breaks, and a trailing
    carriage return from CRLF input is dropped.

    Args:
        raw_text: Raw PRD text

    Returns:
        List of lines
    """
    normalized = raw_text.replace(ESCAPED_NEWLINE, "\n")
    return [line[:-1] if line.endswith("\r") else line for line in normalized.split("\n")]


def parse_heading(line: str) -> Optional[Tuple[int, str]]:
    """
    Parse a heading line.

    Args:
        line: A single line of text

    Returns:
        ``(level, title)`` or None if the line is not a valid heading
    """
    match = HEADING_PATTERN.match(line)
    if not match:
        return None

    return len(match.group(1)), match.group(2).strip()


def join_content(lines: List[str]) -> str:
    """Drop blank lines, join the rest with newlines and trim."""
    return "\n".join(line for line in lines if line.strip()).strip()


def detect_sections(
    raw_text: Optional[str],
    id_factory: Optional[Callable[[], str]] = None,
) -> List[Section]:
    """
    Scan PRD text into an ordered list of sections.

    Entities are left empty; see ``extract_entities``.

    Args:
        raw_text: Raw PRD text. None and non-string values count as empty.
        id_factory: Zero-argument callable producing section IDs
            (defaults to a fresh UUID generator per call)

    Returns:
        Sections in document order (empty if the text has no headings)
    """
    if not raw_text or not isinstance(raw_text, str):
        return []

    if id_factory is None:
        id_factory = IDGenerator().section_id

    sections: List[Section] = []
    current: Optional[Tuple[str, int]] = None
    content_lines: List[str] = []

    def close_current() -> None:
        title, level = current
        sections.append(Section(
            id=id_factory(),
            title=title,
            level=level,
            content=join_content(content_lines),
        ))

    for line in normalize_lines(raw_text):
        heading = parse_heading(line)

        if heading is None:
            # Preamble before the first heading is discarded
            if current is not None:
                content_lines.append(line)
            continue

        if current is not None:
            close_current()

        level, title = heading
        current = (title, level)
        content_lines = []

    if current is not None:
        close_current()

    logger.debug(f"Detected {len(sections)} sections")
    return sections
